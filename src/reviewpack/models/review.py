"""Findings, metrics and the per-file review result."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from reviewpack.models.chunk import Chunk


class Severity(str, Enum):
    """Severity level of a finding, most severe first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def rank(self) -> int:
        """0 for critical up to 4 for info."""
        return _SEVERITY_ORDER.index(self)


_SEVERITY_ORDER = list(Severity)


@dataclass(frozen=True)
class Finding:
    """A single detected issue.

    ``chunk_number`` is None when the file was reviewed whole. ``line`` is
    chunk-local as produced by the analyzer and original-file based once the
    aggregator has translated it.
    """

    line: int
    severity: Severity
    message: str
    code: str
    file_path: str = ""
    chunk_number: Optional[int] = None
    rule: str = ""

    @property
    def key(self) -> tuple[str, int, str]:
        """Identity used for deduplication across overlapping chunks."""
        return (self.file_path, self.line, self.message)


@dataclass(frozen=True)
class ChunkMetrics:
    """Metrics for the new (non-overlap) lines of one chunk."""

    lines: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    decision_points: int = 0
    tokens: int = 0

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.lines, self.code_lines, self.comment_lines, self.decision_points, self.tokens)


@dataclass(frozen=True)
class FileMetrics:
    """File-level totals summed over all chunks."""

    total_lines: int = 0
    code_lines: int = 0
    comment_lines: int = 0
    complexity: int = 1
    tokens: int = 0


@dataclass(frozen=True)
class ReviewResult:
    """The deduplicated, prioritized review of one file."""

    file_path: str
    findings: tuple[Finding, ...]
    counts: dict[str, int]
    metrics: FileMetrics
    summary: str
    rule_set: str = ""
    total_chunks: int = 0
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass(frozen=True)
class FileReview:
    """A review result together with the chunk manifest it was built from."""

    result: ReviewResult
    chunks: tuple[Chunk, ...]
    language: str = ""
    max_tokens: int = 0
    overlap_tokens: int = 0
    chunked: bool = False
