from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Sequence

from .board import Board

logger = logging.getLogger(__name__)


def find_duplicate_draws(draws: Sequence[int]) -> List[int]:
    counts = Counter(draws)
    return sorted(x for x, c in counts.items() if c > 1)


def check_consistent_shapes(boards: Sequence[Board]) -> bool:
    if not boards:
        return True
    shape = boards[0].shape
    return all(board.shape == shape for board in boards)


def check_no_duplicates_within_boards(boards: Sequence[Board]) -> bool:
    for board in boards:
        seen = set()
        for row in board.rows():
            for x in row:
                if x in seen:
                    return False
                seen.add(x)
    return True


def verify(draws: Sequence[int], boards: Sequence[Board]) -> Dict[str, object]:
    """Check the input preconditions the simulation relies on.

    The engine does not define results for boards of differing shapes or for
    repeated draws; callers decide whether a failing report is fatal.
    """
    duplicates = find_duplicate_draws(draws)
    ok_shapes = check_consistent_shapes(boards)
    ok_cells = check_no_duplicates_within_boards(boards)
    report: Dict[str, object] = {
        "board_count": len(boards),
        "draw_count": len(draws),
        "shape": list(boards[0].shape) if boards else None,
        "ok_consistent_shapes": ok_shapes,
        "ok_no_duplicate_draws": not duplicates,
        "duplicate_draws": duplicates,
        "ok_no_duplicates_within_boards": ok_cells,
        "ok": ok_shapes and ok_cells and not duplicates,
    }
    if not report["ok"]:
        logger.warning("Input preconditions not met: %s", report)
    return report
