"""Size and complexity metrics for a span of source text."""

import re

from reviewpack.models import ChunkMetrics
from reviewpack.utils.tokens import estimate_tokens, split_lines

COMMENT_PREFIXES = ("//", "#", "/*", "*")

# Simplified cyclomatic complexity: one point per branch keyword
DECISION_PATTERNS = [
    re.compile(r"\bif\s*\("),
    re.compile(r"\belse\s*\{"),
    re.compile(r"\bfor\s*\("),
    re.compile(r"\bwhile\s*\("),
    re.compile(r"\bcase\s+"),
    re.compile(r"\bcatch\s*\("),
    re.compile(r"^\s*(?:if|elif|for|while)\s+[^(].*:[ \t\r]*$", re.MULTILINE),
    re.compile(r"^\s*except\b.*:[ \t\r]*$", re.MULTILINE),
]


def compute_metrics(text: str) -> ChunkMetrics:
    """Measure a span of text.

    Callers pass only a chunk's new lines so that metrics add up across
    chunks without counting overlap twice.
    """
    lines = split_lines(text)
    stripped = [line.strip() for line in lines]
    return ChunkMetrics(
        lines=len(lines),
        code_lines=sum(1 for s in stripped if s),
        comment_lines=sum(1 for s in stripped if s.startswith(COMMENT_PREFIXES)),
        decision_points=sum(len(p.findall(text)) for p in DECISION_PATTERNS),
        tokens=sum(estimate_tokens(line) for line in lines),
    )
