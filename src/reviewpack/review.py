"""Per-file review pipeline: boundaries, chunks, analysis, aggregation."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from reviewpack.aggregation import aggregate
from reviewpack.analysis import PatternAnalyzer, compute_metrics, get_rule_set
from reviewpack.boundaries import find_boundaries
from reviewpack.chunkers import LineChunker
from reviewpack.config import ReviewConfig
from reviewpack.ingesters import read_source
from reviewpack.models import Chunk, FileReview, Finding, SourceFile
from reviewpack.protocols import Analyzer, ChunkingStrategy

logger = logging.getLogger(__name__)


class Reviewer:
    """Runs the chunk-analyze-aggregate pipeline for one file at a time.

    Chunking always completes before analysis starts, and aggregation waits
    for every chunk's analysis. Chunks are analyzed on a thread pool when
    ``config.workers`` is greater than one.
    """

    def __init__(
        self,
        config: Optional[ReviewConfig] = None,
        chunker: Optional[ChunkingStrategy] = None,
        analyzer: Optional[Analyzer] = None,
    ):
        self.config = (config or ReviewConfig()).validate()
        self.chunker = chunker or LineChunker()
        self.analyzer = analyzer or PatternAnalyzer()

    def review_path(self, path: str | Path, rule_set: Optional[str] = None) -> FileReview:
        """Read a file and review it.

        Raises:
            InputError: If the file cannot be read as UTF-8 text
        """
        return self.review_source(read_source(path), rule_set=rule_set)

    def review_source(self, source: SourceFile, rule_set: Optional[str] = None) -> FileReview:
        """Review an already-read source file.

        Args:
            source: The file to review
            rule_set: Rule set override; defaults to the configured choice for
                the file's extension

        Returns:
            The aggregated review together with its chunk manifest
        """
        budget = self.config.budget
        rule_set_name, _ = get_rule_set(rule_set or self.config.rule_set_for(source.path))

        boundaries = find_boundaries(source.text, source.language)
        chunks = self.chunker.chunk(source.text, source.path, budget, boundaries)
        chunked = len(chunks) > 1
        if chunked:
            logger.debug(f"{source.path}: split into {len(chunks)} chunks")

        per_chunk = self._analyze_chunks(chunks, rule_set_name)
        result = aggregate(
            per_chunk,
            [chunk.line_offset for chunk in chunks],
            file_path=source.path,
            chunk_metrics=[compute_metrics(chunk.new_text) for chunk in chunks],
            rule_set=rule_set_name,
            chunked=chunked,
        )
        return FileReview(
            result=result,
            chunks=tuple(chunks),
            language=source.language,
            max_tokens=budget.max_tokens,
            overlap_tokens=budget.overlap_tokens,
            chunked=chunked,
        )

    def _analyze_chunks(self, chunks: list[Chunk], rule_set: str) -> list[list[Finding]]:
        """Analyze every chunk, returning findings in chunk order."""
        workers = self.config.workers
        if workers > 1 and len(chunks) > 1:
            with ThreadPoolExecutor(max_workers=min(workers, len(chunks))) as executor:
                futures = [
                    executor.submit(self.analyzer.analyze, chunk.content, rule_set)
                    for chunk in chunks
                ]
                return [future.result() for future in futures]
        return [self.analyzer.analyze(chunk.content, rule_set) for chunk in chunks]
