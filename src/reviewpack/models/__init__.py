"""Data models for ReviewPack."""

from reviewpack.models.chunk import Chunk
from reviewpack.models.review import (
    ChunkMetrics,
    FileMetrics,
    FileReview,
    Finding,
    ReviewResult,
    Severity,
)
from reviewpack.models.source import SourceFile, language_for_path

__all__ = [
    "Chunk",
    "ChunkMetrics",
    "FileMetrics",
    "FileReview",
    "Finding",
    "ReviewResult",
    "Severity",
    "SourceFile",
    "language_for_path",
]
