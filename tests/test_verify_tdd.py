from __future__ import annotations

from bingo_sim.board import Board
from bingo_sim.parse import parse_input
from bingo_sim.verify import find_duplicate_draws, verify

from example_input import EXAMPLE


def test_example_meets_preconditions():
    draws, boards = parse_input(EXAMPLE)
    rep = verify(draws, boards)
    assert rep["ok"] is True
    assert rep["shape"] == [5, 5]
    assert rep["board_count"] == 3
    assert rep["draw_count"] == 27
    assert rep["duplicate_draws"] == []


def test_duplicate_draws_reported():
    assert find_duplicate_draws([3, 1, 3, 2, 1]) == [1, 3]
    rep = verify([1, 1], [Board.from_rows([[1, 2]])])
    assert rep["ok_no_duplicate_draws"] is False
    assert rep["ok"] is False


def test_mismatched_shapes_reported():
    boards = [Board.from_rows([[1, 2], [3, 4]]), Board.from_rows([[1, 2, 3]])]
    rep = verify([1, 2], boards)
    assert rep["ok_consistent_shapes"] is False
    assert rep["ok"] is False


def test_repeated_number_within_board_reported():
    rep = verify([1], [Board.from_rows([[1, 1], [2, 3]])])
    assert rep["ok_no_duplicates_within_boards"] is False
    assert rep["ok"] is False
