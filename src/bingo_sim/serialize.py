from __future__ import annotations

import hashlib
import json
import platform
import sys
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from .board import Board
from .engine import WinEvent


def board_hash(numbers: Sequence[Sequence[int]]) -> str:
    payload = json.dumps([list(row) for row in numbers], ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()


def boards_hash(boards: Iterable[Board]) -> str:
    hashes = [board_hash(b.numbers) for b in boards]
    payload = json.dumps(hashes, ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()


def input_hash(text: str) -> str:
    return "sha256:" + hashlib.sha256(text.encode("utf-8")).hexdigest()


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(
            f"Refusing to overwrite existing file without --force: {path}"
        )
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def build_run_meta(
    *,
    app_version: str,
    params_hash: str,
    input_path: str,
) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "params_hash": params_hash,
        "input_path": input_path,
        "hash_algorithm": "sha256",
    }


def build_report(
    *,
    run_meta: Dict[str, object],
    raw_text: str,
    draws: Sequence[int],
    boards: Sequence[Board],
    checks: Dict[str, object],
    wins: List[WinEvent],
) -> Dict[str, object]:
    first: Optional[WinEvent] = wins[0] if wins else None
    last: Optional[WinEvent] = wins[-1] if wins else None
    return {
        "run_meta": run_meta,
        "input_hash": input_hash(raw_text),
        "draws": list(draws),
        "boards": [
            {"index": i, "matrix": b.numbers, "matrix_hash": board_hash(b.numbers)}
            for i, b in enumerate(boards)
        ],
        "boards_hash": boards_hash(boards),
        "checks": checks,
        "wins": [asdict(w) for w in wins],
        "first_winner": asdict(first) if first else None,
        "last_winner": asdict(last) if last else None,
    }


def emit_report_json(
    path: Path, *, report: Dict[str, object], mkdirs: bool, overwrite: bool
) -> None:
    write_json(path, report, mkdirs=mkdirs, overwrite=overwrite)
