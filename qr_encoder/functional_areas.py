# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

Stamps the functional areas of a QR symbol according to ISO/IEC 18004:
finder patterns with their separators, timing patterns, alignment patterns,
the dark module, and the format/version information areas.

Functions:
    compute_alignment_centers: Calculate alignment pattern center positions
    add_function_patterns: Stamp finder, timing, alignment and dark module
    reserve_info_areas: Reserve format/version areas before data placement
    format_info_coords: Module positions of both format information copies
    version_info_coords: Module positions of both version information blocks
    add_format_info: Write the 15-bit format word
    add_version_info: Write the 18-bit version word (v7+)
"""

from typing import List, Tuple

from .capacity import module_count
from .matrix import ModuleMatrix
from .tables import ECLevel, format_info, version_info

Coords = List[Tuple[int, int]]


def compute_alignment_centers(version: int) -> List[int]:
    """
    Calculate the center positions of alignment patterns for a given QR version.

    Alignment patterns are 5x5 modules used to correct for perspective distortion
    in QR codes. Version 1 has none. The first center is always 6, the others
    are spaced ``step`` apart ending at ``size - 7``. The step is
    (size - 13) / intervals rounded up to an even number, which reproduces
    ISO/IEC 18004 Table E.1. The plain ``round((size - 13) / intervals)``
    step disagrees with that table for versions 15, 16, 18, 19, 22, 24, 26
    and 28.

    Args:
        version (int): QR code version (1-29)

    Returns:
        List[int]: List of center coordinates for alignment patterns

    Example:
        >>> compute_alignment_centers(7)
        [6, 22, 38]
        >>> compute_alignment_centers(15)
        [6, 26, 48, 70]
    """
    if version == 1:
        return []

    size = module_count(version)
    intervals = version // 7 + 1
    step = -(-(size - 13) // (2 * intervals)) * 2

    centers = [6]
    for i in range(1, intervals + 1):
        centers.append(size - 7 - (intervals - i) * step)
    return centers


def _add_finder(matrix: ModuleMatrix, r0: int, c0: int) -> None:
    # Pattern: 1111111
    #          1000001
    #          1011101
    #          1011101
    #          1011101
    #          1000001
    #          1111111
    # plus a light separator ring clipped to the symbol
    size = matrix.size
    for dr in range(-1, 8):
        for dc in range(-1, 8):
            r, c = r0 + dr, c0 + dc
            if not (0 <= r < size and 0 <= c < size):
                continue
            if dr in (-1, 7) or dc in (-1, 7):
                matrix.set_function(r, c, False, 'separator')
            else:
                ring = max(abs(dr - 3), abs(dc - 3))
                matrix.set_function(r, c, ring != 2, 'finder')


def _add_alignment(matrix: ModuleMatrix, cy: int, cx: int) -> None:
    # Pattern: 11111
    #          10001
    #          10101
    #          10001
    #          11111
    for dr in range(-2, 3):
        for dc in range(-2, 3):
            ring = max(abs(dr), abs(dc))
            matrix.set_function(cy + dr, cx + dc, ring != 1, 'alignment')


def add_function_patterns(matrix: ModuleMatrix) -> None:
    """
    Stamp finder, timing and alignment patterns and the dark module.

    Args:
        matrix (ModuleMatrix): Fresh matrix, all modules unset
    """
    size = matrix.size

    # 1. FINDER PATTERNS (7x7 modules at 3 corners)
    for (r0, c0) in [(0, 0), (0, size - 7), (size - 7, 0)]:
        _add_finder(matrix, r0, c0)

    # 2. TIMING PATTERNS (row 6 and column 6, between the separators)
    for i in range(8, size - 8):
        matrix.set_function(6, i, i % 2 == 0, 'timing')
        matrix.set_function(i, 6, i % 2 == 0, 'timing')

    # 3. ALIGNMENT PATTERNS (v2+), skipping the three finder corners
    centers = compute_alignment_centers(matrix.version)
    if centers:
        first, last = centers[0], centers[-1]
        finder_corners = {(first, first), (first, last), (last, first)}
        for cy in centers:
            for cx in centers:
                if (cy, cx) in finder_corners:
                    continue
                _add_alignment(matrix, cy, cx)

    # 4. DARK MODULE (always dark, next to the bottom-left finder)
    matrix.set_function(size - 8, 8, True, 'dark')


def format_info_coords(size: int) -> Tuple[Coords, Coords]:
    """
    Positions of the two format information copies.

    Entry ``i`` of each list holds bit ``i`` (LSB first) of the 15-bit word.
    The first copy wraps around the top-left finder, the second is split
    between the top-right and bottom-left finders.

    Returns:
        Tuple[Coords, Coords]: (top_left_copy, split_copy) as (row, col)
    """
    first = [(i, 8) for i in range(6)]
    first += [(7, 8), (8, 8), (8, 7)]
    first += [(8, 14 - i) for i in range(9, 15)]

    second = [(8, size - 1 - i) for i in range(8)]
    second += [(size - 15 + i, 8) for i in range(8, 15)]
    return first, second


def version_info_coords(size: int) -> Tuple[Coords, Coords]:
    """
    Positions of the two 6x3 version information blocks.

    Entry ``i`` holds bit ``i`` (LSB first) of the 18-bit word.

    Returns:
        Tuple[Coords, Coords]: (top_right_block, bottom_left_block) as (row, col)
    """
    top_right = [(i // 3, size - 11 + i % 3) for i in range(18)]
    bottom_left = [(size - 11 + i % 3, i // 3) for i in range(18)]
    return top_right, bottom_left


def reserve_info_areas(matrix: ModuleMatrix) -> None:
    """Reserve the format strips and, for version 7 and up, the version blocks."""
    for copy in format_info_coords(matrix.size):
        for (r, c) in copy:
            matrix.reserve(r, c, 'format')

    if matrix.version >= 7:
        for block in version_info_coords(matrix.size):
            for (r, c) in block:
                matrix.reserve(r, c, 'version')


def add_format_info(matrix: ModuleMatrix, level: ECLevel, mask: int) -> None:
    """Write the format word for ``level`` and ``mask`` into both copies."""
    bits = format_info(level, mask)
    for copy in format_info_coords(matrix.size):
        for i, (r, c) in enumerate(copy):
            matrix.set_metadata(r, c, (bits >> i) & 1 == 1)


def add_version_info(matrix: ModuleMatrix) -> None:
    """Write the version word into both blocks (no-op below version 7)."""
    if matrix.version < 7:
        return
    bits = version_info(matrix.version)
    for block in version_info_coords(matrix.size):
        for i, (r, c) in enumerate(block):
            matrix.set_metadata(r, c, (bits >> i) & 1 == 1)
