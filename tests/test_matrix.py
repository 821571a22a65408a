from __future__ import annotations

import pytest

from qr_encoder import make_qr
from qr_encoder.capacity import raw_data_modules
from qr_encoder.matrix import (
    MASK_PATTERNS, CellState, ModuleMatrix, apply_mask, data_module_coords, place_data,
)


def test_hello_matrix_is_resolved(hello) -> None:
    assert hello.version == 1
    assert hello.size == 21
    assert len(hello.data_codewords) == 16
    assert len(hello.ec_codewords) == 10
    assert hello.matrix.is_resolved()
    assert hello.matrix.count(CellState.DATA) == raw_data_modules(1)


def test_rows_are_copies(hello) -> None:
    rows = hello.rows
    rows[0][0] = not rows[0][0]
    assert hello.rows[0][0] != rows[0][0]


def test_encoding_is_deterministic() -> None:
    first = make_qr("deterministic", ecc='Q', mask=4)
    second = make_qr("deterministic", ecc='Q', mask=4)
    assert first.matrix == second.matrix
    assert first.rows == second.rows


def test_placement_order_starts_bottom_right() -> None:
    matrix = ModuleMatrix(1)
    coords = data_module_coords(matrix)
    assert coords[:4] == [(20, 20), (20, 19), (19, 20), (19, 19)]
    assert all(c != 6 for _, c in coords)


def test_place_data_reports_remainder_bits() -> None:
    from qr_encoder.functional_areas import add_function_patterns, reserve_info_areas

    matrix = ModuleMatrix(2)
    add_function_patterns(matrix)
    reserve_info_areas(matrix)
    assert place_data(matrix, [0xFF] * 44) == 7
    assert matrix.count(CellState.UNSET) == 0


def test_modules_are_written_once() -> None:
    matrix = ModuleMatrix(1)
    matrix.set_data(10, 10, True)
    with pytest.raises(RuntimeError):
        matrix.set_data(10, 10, False)
    with pytest.raises(RuntimeError):
        matrix.set_function(10, 10, True, 'finder')
    with pytest.raises(RuntimeError):
        matrix.set_metadata(11, 11, True)


def test_mask_only_touches_data_modules() -> None:
    plain = make_qr("mask me", mask=0).matrix
    for mask in range(1, 8):
        other = make_qr("mask me", mask=mask).matrix
        for r in range(plain.size):
            for c in range(plain.size):
                if plain.state(r, c) is CellState.FUNCTION:
                    assert plain.is_dark(r, c) == other.is_dark(r, c)


def test_mask_is_an_involution() -> None:
    qr = make_qr("twice", mask=5)
    matrix = qr.matrix
    before = matrix.to_rows()
    apply_mask(matrix, 6)
    apply_mask(matrix, 6)
    assert matrix.to_rows() == before


def test_mask_pattern_conditions() -> None:
    assert MASK_PATTERNS[0](0, 0)
    assert not MASK_PATTERNS[0](0, 1)
    assert MASK_PATTERNS[1](2, 5)
    assert MASK_PATTERNS[2](4, 3)
    assert MASK_PATTERNS[5](0, 7)


def test_invalid_mask() -> None:
    with pytest.raises(ValueError):
        apply_mask(ModuleMatrix(1), 8)
