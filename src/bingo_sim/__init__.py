"""Bingo game simulation: board marking, win detection and scoring."""

from .board import Board
from .engine import NoWinnerError, WinEvent, first_winner, last_winner
from .parse import InputFormatError, parse_input

__all__ = [
    "Board",
    "InputFormatError",
    "NoWinnerError",
    "WinEvent",
    "first_winner",
    "last_winner",
    "parse_input",
]
