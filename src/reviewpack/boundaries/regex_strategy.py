"""Boundary detection from line-anchored declaration patterns."""

import re
from typing import Iterable


class RegexBoundaryStrategy:
    """Boundary strategy that matches declaration starts with regexes.

    Every pattern is compiled in multiline mode, so ``^`` anchors at the
    start of each line. Only declarations at column 0 are considered
    top-level.
    """

    def __init__(self, language: str, patterns: Iterable[str]):
        self._language = language
        self._patterns = [re.compile(p, re.MULTILINE) for p in patterns]

    @property
    def language(self) -> str:
        return self._language

    def find_offsets(self, text: str) -> list[int]:
        offsets = {m.start() for pattern in self._patterns for m in pattern.finditer(text)}
        return sorted(offsets)

    def __repr__(self) -> str:
        return f"RegexBoundaryStrategy({self._language!r}, {len(self._patterns)} patterns)"


PYTHON = RegexBoundaryStrategy(
    "python",
    [
        r"^(?:async\s+)?def\s+\w+",
        r"^class\s+\w+",
        r"^@\w[\w.]*",
    ],
)

JAVASCRIPT_PATTERNS = [
    r"^(?:export\s+(?:default\s+)?)?(?:async\s+)?function\b\*?\s*\w*",
    r"^(?:export\s+)?(?:const|let)\s+\w+\s*=\s*(?:async\s*)?(?:\(|function\b)",
    r"^(?:export\s+(?:default\s+)?)?(?:abstract\s+)?class\s+\w+",
]

JAVASCRIPT = RegexBoundaryStrategy("javascript", JAVASCRIPT_PATTERNS)

TYPESCRIPT = RegexBoundaryStrategy(
    "typescript",
    JAVASCRIPT_PATTERNS
    + [
        r"^(?:export\s+)?interface\s+\w+",
        r"^(?:export\s+)?type\s+\w+\s*=",
        r"^(?:export\s+)?enum\s+\w+",
    ],
)

GO = RegexBoundaryStrategy(
    "go",
    [
        r"^func\s+",
        r"^type\s+\w+\s+(?:struct|interface)\b",
    ],
)
