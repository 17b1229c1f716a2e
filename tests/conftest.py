from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_TEXT = "the cat sat on the mat the cat ran\n"


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
