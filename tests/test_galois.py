from __future__ import annotations

from qr_encoder.galois import EXP_TABLE, LOG_TABLE, PRIMITIVE_POLY, exp, multiply


def _slow_multiply(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        b >>= 1
        a <<= 1
        if a & 0x100:
            a ^= PRIMITIVE_POLY
    return result


def test_exponent_table_period() -> None:
    assert len(EXP_TABLE) == 512
    assert EXP_TABLE[0] == 1
    assert EXP_TABLE[255] == EXP_TABLE[0]
    assert EXP_TABLE[8] == 29
    assert sorted(EXP_TABLE[:255]) == list(range(1, 256))


def test_log_table_inverts_exponent_table() -> None:
    for value in range(1, 256):
        assert EXP_TABLE[LOG_TABLE[value]] == value


def test_multiply_matches_carryless_reference() -> None:
    for a in range(256):
        for b in range(256):
            assert multiply(a, b) == _slow_multiply(a, b)


def test_multiply_identities() -> None:
    for a in range(256):
        assert multiply(a, 0) == 0
        assert multiply(0, a) == 0
        assert multiply(a, 1) == a
        assert multiply(1, a) == a


def test_multiply_commutative_and_associative() -> None:
    samples = [0, 1, 2, 3, 29, 87, 128, 200, 255]
    for a in samples:
        for b in samples:
            assert multiply(a, b) == multiply(b, a)
            for c in samples:
                assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


def test_exp_wraps_at_255() -> None:
    assert exp(0) == 1
    assert exp(255) == 1
    assert exp(256) == 2
