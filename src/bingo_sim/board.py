"""Bingo board state: numbers, marks and win detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


@dataclass
class Board:
    """A grid of numbers paired with a parallel grid of marks.

    ``marked[i][j]`` is True iff ``numbers[i][j]`` has been drawn. Marks are
    never cleared, so once a board wins it stays winning.
    """

    numbers: List[List[int]]
    marked: List[List[bool]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.numbers or not self.numbers[0]:
            raise ValueError("Board must have at least one row and one column")
        width = len(self.numbers[0])
        if any(len(row) != width for row in self.numbers):
            raise ValueError("Board rows must all have the same length")
        if not self.marked:
            self.marked = [[False] * width for _ in self.numbers]
        elif len(self.marked) != len(self.numbers) or any(
            len(row) != width for row in self.marked
        ):
            raise ValueError("Marked grid must match the shape of the numbers grid")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        return cls(numbers=[list(row) for row in rows])

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.numbers), len(self.numbers[0])

    def rows(self) -> List[Tuple[int, ...]]:
        return [tuple(row) for row in self.numbers]

    def columns(self) -> List[Tuple[int, ...]]:
        m, n = self.shape
        return [tuple(self.numbers[i][j] for i in range(m)) for j in range(n)]

    def copy(self) -> Board:
        return Board(
            numbers=[list(row) for row in self.numbers],
            marked=[list(row) for row in self.marked],
        )

    def mark(self, number: int) -> None:
        """Mark every cell holding ``number``; absent numbers are ignored."""
        for i, row in enumerate(self.numbers):
            for j, value in enumerate(row):
                if value == number:
                    self.marked[i][j] = True

    def is_winning(self) -> bool:
        """True when any full row or any full column is marked (no diagonals)."""
        if any(all(row) for row in self.marked):
            return True
        m, n = self.shape
        return any(all(self.marked[i][j] for i in range(m)) for j in range(n))

    def unmarked_sum(self) -> int:
        return sum(
            value
            for row, marks in zip(self.numbers, self.marked)
            for value, hit in zip(row, marks)
            if not hit
        )

    def score(self, last_number: int) -> int:
        """Sum of unmarked numbers multiplied by the draw that triggered the win."""
        return last_number * self.unmarked_sum()


def mark(board: Board, number: int) -> None:
    board.mark(number)


def is_winning(board: Board) -> bool:
    return board.is_winning()


def score(board: Board, last_number: int) -> int:
    return board.score(last_number)
