from __future__ import annotations

import pytest

from qr_encoder import UnsupportedECLength
from qr_encoder.galois import exp, multiply
from qr_encoder.reed_solomon import generate_ec, generator_polynomial
from qr_encoder.tables import GENERATOR_POLYNOMIALS


def _expand_generator(degree: int) -> list[int]:
    poly = [1]
    for i in range(degree):
        root = exp(i)
        product = [0] * (len(poly) + 1)
        for j, coef in enumerate(poly):
            product[j] ^= coef
            product[j + 1] ^= multiply(coef, root)
        poly = product
    return poly


@pytest.mark.parametrize("degree", sorted(GENERATOR_POLYNOMIALS))
def test_generator_table_matches_product_of_roots(degree: int) -> None:
    assert list(generator_polynomial(degree)) == _expand_generator(degree)[1:]


def test_iso_annex_example_version_1m() -> None:
    data = [16, 32, 12, 86, 97, 128, 236, 17, 236, 17, 236, 17, 236, 17, 236, 17]
    assert generate_ec(data, 10) == [165, 36, 212, 193, 237, 54, 199, 135, 44, 85]


def test_hello_world_version_1m() -> None:
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    assert generate_ec(data, 10) == [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_all_zero_data_gives_zero_parity() -> None:
    assert generate_ec([0] * 19, 7) == [0] * 7


def test_codeword_is_divisible_by_generator() -> None:
    data = [64, 84, 132, 84, 196, 196, 240, 236, 17]
    ec = generate_ec(data, 17)
    assert generate_ec(data + ec, 17) == [0] * 17


def test_unknown_ec_length_fails() -> None:
    with pytest.raises(UnsupportedECLength) as excinfo:
        generate_ec([1, 2, 3], 11)
    assert excinfo.value.ec_length == 11
    assert isinstance(excinfo.value, ValueError)
