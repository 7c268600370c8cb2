"""The Chunk model produced by the chunking engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Chunk:
    """A contiguous run of a file's lines, prefixed with overlap context.

    ``start_line`` and ``end_line`` (inclusive, 1-based, original numbering)
    cover only the chunk's *new* lines. The overlap lines sit directly before
    ``start_line`` and were already owned by the previous chunk.
    """

    file_path: str
    number: int
    start_line: int
    end_line: int
    token_count: int
    new_text: str
    overlap: str = ""
    overlap_line_count: int = 0

    @property
    def content(self) -> str:
        """Overlap followed by the chunk's own lines."""
        return self.overlap + self.new_text

    @property
    def content_start_line(self) -> int:
        """Original line number of the first line of ``content``."""
        return self.start_line - self.overlap_line_count

    @property
    def line_offset(self) -> int:
        """Value added to a chunk-local line number to get the original line."""
        return self.content_start_line - 1

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    def is_over_budget(self, max_tokens: int) -> bool:
        return self.token_count > max_tokens

    def to_manifest(self) -> dict:
        """Per-chunk entry of the persisted chunk manifest."""
        return {
            "number": self.number,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "overlap_lines": self.overlap_line_count,
            "tokens": self.token_count,
        }
