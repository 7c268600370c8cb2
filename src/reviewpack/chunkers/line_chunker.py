"""Line-granular chunking with token-bounded overlap."""

import logging
from bisect import bisect_left, bisect_right
from typing import Sequence

from reviewpack.chunkers.budget import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_OVERLAP_TOKENS,
    ChunkBudget,
)
from reviewpack.models import Chunk
from reviewpack.utils.tokens import estimate_tokens, line_starts, split_lines

logger = logging.getLogger(__name__)


class LineChunker:
    """Default chunking: whole lines, greedy fill, overlap from the tail.

    - Lines are never split, so a single line larger than the budget becomes
      its own over-budget chunk
    - Each chunk after the first starts with the tail of the previous chunk,
      bounded by the overlap budget
    - Boundary hints pull a forced split back onto a declaration start when
      one lies within the budget's line tolerance
    """

    def chunk(
        self,
        text: str,
        file_path: str,
        budget: ChunkBudget,
        boundaries: Sequence[int] = (),
    ) -> list[Chunk]:
        """Split text into ordered, overlapping chunks.

        Args:
            text: Full file text
            file_path: Path recorded on every chunk
            budget: Token limits for this run
            boundaries: Character offsets of preferred split points (hints)

        Returns:
            Chunks numbered from 1 whose new lines cover the file exactly once

        Raises:
            ConfigurationError: If the budget is invalid
        """
        budget.validate()
        lines = split_lines(text)
        if not lines:
            return []

        costs = [estimate_tokens(line) for line in lines]
        hints = self._hint_lines(lines, boundaries)

        chunks: list[Chunk] = []
        overlap: list[int] = []
        start = 0

        while start < len(lines):
            overlap = self._fit_overlap(overlap, costs, costs[start], budget.max_tokens)
            used = sum(costs[i] for i in overlap)

            end = start
            while end < len(lines) and used + costs[end] <= budget.max_tokens:
                used += costs[end]
                end += 1

            if end == start:
                # The line alone is over budget and _fit_overlap already
                # dropped the overlap, so it travels alone.
                end = start + 1
                used = costs[start]
                logger.debug(
                    f"{file_path}: line {start + 1} ({costs[start]} tokens) exceeds budget"
                )
            elif end < len(lines):
                split = self._preferred_split(start, end, hints, budget.boundary_tolerance)
                if split != end:
                    used -= sum(costs[split:end])
                    end = split

            chunks.append(
                Chunk(
                    file_path=file_path,
                    number=len(chunks) + 1,
                    start_line=start + 1,
                    end_line=end,
                    token_count=used,
                    new_text="".join(lines[start:end]),
                    overlap="".join(lines[i] for i in overlap),
                    overlap_line_count=len(overlap),
                )
            )

            overlap = self._tail_overlap(overlap + list(range(start, end)), costs, budget.overlap_tokens)
            start = end

        logger.debug(f"{file_path}: {len(lines)} lines -> {len(chunks)} chunks")
        return chunks

    @staticmethod
    def _hint_lines(lines: list[str], boundaries: Sequence[int]) -> list[int]:
        """Map hint offsets to the indices of the lines containing them.

        Offsets outside the text are ignored; offsets in the middle of a line
        snap to that line.
        """
        if not boundaries:
            return []
        starts = line_starts(lines)
        text_length = starts[-1] + len(lines[-1])
        indices = {
            bisect_right(starts, offset) - 1
            for offset in boundaries
            if 0 <= offset < text_length
        }
        return sorted(indices)

    @staticmethod
    def _fit_overlap(
        overlap: list[int], costs: list[int], first_cost: int, max_tokens: int
    ) -> list[int]:
        """Drop overlap lines from the front until the next new line fits."""
        used = sum(costs[i] for i in overlap)
        trimmed = list(overlap)
        while trimmed and used + first_cost > max_tokens:
            used -= costs[trimmed.pop(0)]
        return trimmed

    @staticmethod
    def _preferred_split(start: int, end: int, hints: list[int], tolerance: int) -> int:
        """Return the latest hinted line in (start, end) within tolerance of end."""
        lo = bisect_left(hints, max(start + 1, end - tolerance))
        hi = bisect_left(hints, end)
        if lo < hi:
            return hints[hi - 1]
        return end

    @staticmethod
    def _tail_overlap(content: list[int], costs: list[int], overlap_tokens: int) -> list[int]:
        """Walk back from the end of a chunk until the overlap budget is reached.

        The line that crosses ``overlap_tokens`` is taken whole and ends the
        walk, so the overlap exceeds its budget by at most that one line.
        """
        taken = 0
        used = 0
        for index in reversed(content):
            if used >= overlap_tokens:
                break
            used += costs[index]
            taken += 1
        return content[len(content) - taken :]


def chunk_text(
    text: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    overlap_tokens: int = DEFAULT_OVERLAP_TOKENS,
    boundaries: Sequence[int] = (),
    file_path: str = "",
) -> list[Chunk]:
    """Chunk text with the default LineChunker."""
    budget = ChunkBudget(max_tokens=max_tokens, overlap_tokens=overlap_tokens)
    return LineChunker().chunk(text, file_path, budget, boundaries)
