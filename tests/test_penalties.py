from __future__ import annotations

from qr_encoder import compute_mask_penalty
from qr_encoder.penalties import penalty_N1, penalty_N2, penalty_N3, penalty_N4


def test_n1_runs() -> None:
    assert penalty_N1([[True] * 5 + [False]] * 6) == 42
    assert penalty_N1([[True, False] * 3, [False, True] * 3] * 3) == 0


def test_n1_long_run_scores_extra() -> None:
    rows = [[True] * 7, [False, True] * 3 + [False]]
    rows += [[bool((r + c) % 2) for c in range(7)] for r in range(5)]
    assert penalty_N1(rows) == 5


def test_n2_blocks() -> None:
    assert penalty_N2([[True, True], [True, True]]) == 3
    assert penalty_N2([[False] * 3] * 3) == 12
    assert penalty_N2([[True, False], [False, True]]) == 0


def test_n3_finder_like_pattern() -> None:
    assert penalty_N3([[True, False, True, True, True, False, True]]) == 40
    assert penalty_N3([[True, False, True, True, False, False, True]]) == 0


def test_n3_needs_light_border() -> None:
    row = [True, True, True, True, True, False, True, True, True, False, True, True, True, True, True]
    assert penalty_N3([row]) == 0


def test_n4_balance() -> None:
    assert penalty_N4([[True, True], [True, False]]) == 50
    assert penalty_N4([[True, False], [False, True]]) == 0
    assert penalty_N4([[True] * 4] * 4) == 100


def test_total_is_sum_of_rules(hello) -> None:
    rows = hello.rows
    expected = penalty_N1(rows) + penalty_N2(rows) + penalty_N3(rows) + penalty_N4(rows)
    assert compute_mask_penalty(rows) == expected
    assert compute_mask_penalty([[int(v) for v in row] for row in rows]) == expected
