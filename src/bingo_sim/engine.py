"""Draw-by-draw simulation of a bingo game."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set

from .board import Board

logger = logging.getLogger(__name__)


class NoWinnerError(RuntimeError):
    """Raised when the draws run out before any board completes a line."""

    def __init__(self, draw_count: int, board_count: int):
        super().__init__(
            f"No board wins: {board_count} board(s) after {draw_count} draw(s)"
        )
        self.draw_count = draw_count
        self.board_count = board_count


@dataclass
class WinEvent:
    board_index: int
    draw_index: int
    number: int
    unmarked_sum: int
    score: int


def iter_wins(draws: Sequence[int], boards: Sequence[Board]) -> Iterator[WinEvent]:
    """Yield every Active -> Won transition in draw order, then board order.

    Works on copies; the caller's boards are left untouched. A won board is
    not marked again.
    """
    active = [board.copy() for board in boards]
    won: Set[int] = set()
    for draw_index, number in enumerate(draws):
        for index, board in enumerate(active):
            if index in won:
                continue
            board.mark(number)
            if board.is_winning():
                won.add(index)
                event = WinEvent(
                    board_index=index,
                    draw_index=draw_index,
                    number=number,
                    unmarked_sum=board.unmarked_sum(),
                    score=board.score(number),
                )
                logger.debug(
                    "Board %d wins on draw #%d (%d), score %d",
                    index,
                    draw_index,
                    number,
                    event.score,
                )
                yield event
        if len(won) == len(active):
            return


def first_win(draws: Sequence[int], boards: Sequence[Board]) -> WinEvent:
    for event in iter_wins(draws, boards):
        return event
    raise NoWinnerError(len(draws), len(boards))


def last_win(draws: Sequence[int], boards: Sequence[Board]) -> WinEvent:
    last: Optional[WinEvent] = None
    for event in iter_wins(draws, boards):
        last = event
    if last is None:
        raise NoWinnerError(len(draws), len(boards))
    return last


def first_winner(draws: Sequence[int], boards: Sequence[Board]) -> int:
    """Score of the first board to complete a row or column."""
    return first_win(draws, boards).score


def last_winner(draws: Sequence[int], boards: Sequence[Board]) -> int:
    """Score of the last board to complete a row or column.

    Boards winning on the same draw are taken in list order, so the highest
    index among them is the one reported.
    """
    return last_win(draws, boards).score


def winners(draws: Sequence[int], boards: Sequence[Board]) -> List[WinEvent]:
    return list(iter_wins(draws, boards))
