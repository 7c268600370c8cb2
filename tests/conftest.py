"""Shared fixtures for ReviewPack tests."""

from pathlib import Path

import pytest

from reviewpack.chunkers import ChunkBudget
from reviewpack.config import ReviewConfig
from reviewpack.utils.tokens import CHARS_PER_TOKEN


def make_line(tokens: int, prefix: str = "", fill: str = "x") -> str:
    """Build one newline-terminated line whose estimate is exactly ``tokens``."""
    width = tokens * CHARS_PER_TOKEN - 1
    assert len(prefix) <= width
    return prefix + fill * (width - len(prefix)) + "\n"


@pytest.fixture
def line_of():
    return make_line


@pytest.fixture
def console_js() -> str:
    """40 lines of ``console.log(NNNN);``, each estimated at 5 tokens."""
    return "".join(f"console.log({i:04d});\n" for i in range(40))


@pytest.fixture
def small_config() -> ReviewConfig:
    """Budget that splits ``console_js`` into three overlapping chunks."""
    return ReviewConfig(budget=ChunkBudget(max_tokens=100, overlap_tokens=20, boundary_tolerance=0))


@pytest.fixture
def console_file(tmp_path: Path, console_js: str) -> Path:
    path = tmp_path / "console.js"
    path.write_text(console_js, encoding="utf-8")
    return path
