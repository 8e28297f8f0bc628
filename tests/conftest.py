from __future__ import annotations

from pathlib import Path

import pytest

from example_input import EXAMPLE


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    return path
