from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Tuple

from .board import Board

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = re.compile(r"(?:\r?\n){2,}")
NUMBER = re.compile(r"[0-9]+")


class InputFormatError(ValueError):
    """Raised when the puzzle input cannot be read as draws plus boards."""


def _parse_number(token: str, where: str) -> int:
    # unsigned ASCII digits only
    if not NUMBER.fullmatch(token):
        raise InputFormatError(f"Not a number in {where}: {token!r}")
    return int(token)


def parse_draws(block: str) -> List[int]:
    tokens = [tok.strip() for tok in block.strip().split(",")]
    if tokens == [""]:
        raise InputFormatError("Draw sequence is empty")
    return [_parse_number(tok, "draw sequence") for tok in tokens]


def parse_board(block: str, *, index: int = 0) -> Board:
    where = f"board {index}"
    rows = [
        [_parse_number(tok, where) for tok in line.split()]
        for line in block.strip().splitlines()
        if line.strip()
    ]
    if not rows:
        raise InputFormatError(f"{where} is empty")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise InputFormatError(
                f"{where} is ragged: expected {width} numbers per row, got {len(row)}"
            )
    return Board.from_rows(rows)


def parse_input(text: str) -> Tuple[List[int], List[Board]]:
    """Split puzzle text into the draw sequence and the list of boards.

    Blocks are separated by one or more blank lines; the first block holds the
    comma-separated draws, every further block is one board.
    """
    blocks = BLOCK_SEPARATOR.split(text.strip())
    draws = parse_draws(blocks[0])
    boards = [parse_board(block, index=i) for i, block in enumerate(blocks[1:])]
    if not boards:
        raise InputFormatError("Input contains no boards")
    logger.info("Parsed %d draws and %d boards", len(draws), len(boards))
    return draws, boards


def read_text(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputFormatError(f"Input file is not valid UTF-8: {path} ({exc.reason})") from None


def read_input(path: Path) -> Tuple[List[int], List[Board]]:
    return parse_input(read_text(path))


def format_board(board: Board) -> str:
    widths = [max(len(str(x)) for x in col) for col in board.columns()]
    return "\n".join(
        " ".join(str(x).rjust(w) for x, w in zip(row, widths)) for row in board.rows()
    )
