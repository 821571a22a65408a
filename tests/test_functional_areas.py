from __future__ import annotations

import pytest

from qr_encoder.capacity import raw_data_modules
from qr_encoder.functional_areas import (
    add_format_info, add_function_patterns, compute_alignment_centers,
    format_info_coords, reserve_info_areas, version_info_coords,
)
from qr_encoder.matrix import CellState, ModuleMatrix
from qr_encoder.tables import MAX_VERSION, ECLevel, format_info


@pytest.mark.parametrize("version, expected", [
    (1, []),
    (2, [6, 18]),
    (6, [6, 34]),
    (7, [6, 22, 38]),
    (14, [6, 26, 46, 66]),
    (15, [6, 26, 48, 70]),
    (16, [6, 26, 50, 74]),
    (18, [6, 30, 56, 82]),
    (19, [6, 30, 58, 86]),
    (21, [6, 28, 50, 72, 94]),
    (22, [6, 26, 50, 74, 98]),
    (24, [6, 28, 54, 80, 106]),
    (26, [6, 30, 58, 86, 114]),
    (28, [6, 26, 50, 74, 98, 122]),
    (29, [6, 30, 54, 78, 102, 126]),
])
def test_alignment_centers(version: int, expected) -> None:
    assert compute_alignment_centers(version) == expected


def _prepared(version: int) -> ModuleMatrix:
    matrix = ModuleMatrix(version)
    add_function_patterns(matrix)
    reserve_info_areas(matrix)
    return matrix


@pytest.mark.parametrize("version", range(1, MAX_VERSION + 1))
def test_free_modules_match_raw_capacity(version: int) -> None:
    matrix = _prepared(version)
    assert matrix.count(CellState.UNSET) == raw_data_modules(version)


def test_finder_pattern_shape() -> None:
    matrix = _prepared(1)
    expected = [
        [1, 1, 1, 1, 1, 1, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 0, 1, 1, 1, 0, 1],
        [1, 0, 1, 1, 1, 0, 1],
        [1, 0, 1, 1, 1, 0, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1, 1],
    ]
    for r0, c0 in [(0, 0), (0, 14), (14, 0)]:
        block = [[int(matrix.is_dark(r0 + r, c0 + c)) for c in range(7)] for r in range(7)]
        assert block == expected
    assert matrix.zone(7, 7) == 'separator'
    assert not matrix.is_dark(7, 7)


def test_timing_and_dark_module() -> None:
    matrix = _prepared(2)
    size = matrix.size
    assert [matrix.is_dark(6, c) for c in range(8, size - 8)] == [c % 2 == 0 for c in range(8, size - 8)]
    assert [matrix.is_dark(r, 6) for r in range(8, size - 8)] == [r % 2 == 0 for r in range(8, size - 8)]
    assert matrix.is_dark(size - 8, 8)
    assert matrix.zone(size - 8, 8) == 'dark'


def test_alignment_pattern_stamped_at_center() -> None:
    matrix = _prepared(2)
    assert matrix.zone(18, 18) == 'alignment'
    assert matrix.is_dark(18, 18)
    assert not matrix.is_dark(17, 18)
    assert matrix.is_dark(16, 18)


def test_alignment_overlapping_timing_is_kept() -> None:
    matrix = _prepared(7)
    assert matrix.zone(6, 22) == 'alignment'
    assert matrix.zone(22, 6) == 'alignment'
    assert matrix.zone(22, 22) == 'alignment'


def test_version_blocks_only_from_version_7() -> None:
    assert _prepared(6).count(CellState.RESERVED) == 30
    assert _prepared(7).count(CellState.RESERVED) == 30 + 36


def test_format_word_written_to_both_copies() -> None:
    matrix = _prepared(1)
    add_format_info(matrix, ECLevel.L, 3)
    word = format_info(ECLevel.L, 3)
    for copy in format_info_coords(matrix.size):
        read = sum(int(matrix.is_dark(r, c)) << i for i, (r, c) in enumerate(copy))
        assert read == word


def test_info_coordinates_do_not_overlap() -> None:
    size = 45
    first, second = format_info_coords(size)
    top_right, bottom_left = version_info_coords(size)
    cells = first + second + top_right + bottom_left
    assert len(set(cells)) == len(cells) == 30 + 36
