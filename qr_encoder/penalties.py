# -*- coding: utf-8 -*-
"""
QR Code Mask Penalty Evaluation Module

Scores a masked symbol with the four penalty rules of ISO/IEC 18004:2015
section 7.8.3. The mask with the lowest total penalty is considered optimal.

Functions:
    penalty_N1: Evaluate adjacent modules in runs (Rule N1)
    penalty_N2: Evaluate 2x2 blocks of same color (Rule N2)
    penalty_N3: Evaluate finder-like patterns (Rule N3)
    penalty_N4: Evaluate dark/light module ratio (Rule N4)
    compute_mask_penalty: Calculate total penalty score
"""

from typing import List, Sequence

FINDER_LIKE = [1, 0, 1, 1, 1, 0, 1]
QUIET = [0, 0, 0, 0]


def _lines(rows: List[List[bool]]) -> List[List[bool]]:
    """All rows followed by all columns."""
    return rows + [list(col) for col in zip(*rows)]


def penalty_N1(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for adjacent modules in runs (Rule N1).

    Runs of 5 or more same-colored modules in a row or column score
    3 + (run_length - 5).

    Example:
        >>> penalty_N1([[True] * 5 + [False]] * 6)
        42
    """
    score = 0
    for line in _lines(rows):
        run = 1
        for prev, cur in zip(line, line[1:]):
            if cur == prev:
                run += 1
            else:
                if run >= 5:
                    score += 3 + (run - 5)
                run = 1
        if run >= 5:
            score += 3 + (run - 5)
    return score


def penalty_N2(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for 2x2 blocks of same color (Rule N2).

    Each (overlapping) 2x2 block of one color adds 3 points.
    """
    score = 0
    n = len(rows)
    for r in range(n - 1):
        for c in range(n - 1):
            value = rows[r][c]
            if rows[r][c + 1] == value and rows[r + 1][c] == value and rows[r + 1][c + 1] == value:
                score += 3
    return score


def _count_finder_like(seq: Sequence[int]) -> int:
    """
    Count 1:1:3:1:1 patterns with 4 light modules on at least one side.

    The line is padded with the quiet zone, so patterns touching the edge of
    the symbol count as bordered by light modules.
    """
    padded = QUIET + list(seq) + QUIET
    count = 0
    for i in range(4, len(padded) - 10):
        if padded[i:i + 7] != FINDER_LIKE:
            continue
        if padded[i - 4:i] == QUIET or padded[i + 7:i + 11] == QUIET:
            count += 1
    return count


def penalty_N3(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for finder-like patterns (Rule N3).

    Each dark:light:dark:dark:dark:light:dark pattern next to four light
    modules adds 40 points.
    """
    score = 0
    for line in _lines(rows):
        score += 40 * _count_finder_like([1 if v else 0 for v in line])
    return score


def penalty_N4(rows: List[List[bool]]) -> int:
    """
    Calculate penalty for dark/light module ratio (Rule N4).

    10 points for every full 5% the dark ratio deviates from 50%.

    Example:
        >>> penalty_N4([[True, True], [True, False]])
        50
    """
    total = sum(len(row) for row in rows)
    dark = sum(1 for row in rows for v in row if v)
    ratio = dark * 100.0 / total
    return int(abs(ratio - 50.0) // 5.0) * 10


def compute_mask_penalty(matrix_bool: Sequence[Sequence[bool]]) -> int:
    """
    Calculate total mask penalty score for a QR code matrix.

    Args:
        matrix_bool (Sequence[Sequence[bool]]): QR matrix (True=dark, False=light)

    Returns:
        int: Total penalty score (lower is better)
    """
    rows = [[bool(v) for v in row] for row in matrix_bool]
    return penalty_N1(rows) + penalty_N2(rows) + penalty_N3(rows) + penalty_N4(rows)
