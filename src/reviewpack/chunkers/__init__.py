"""Chunking strategies for ReviewPack."""

from reviewpack.chunkers.budget import ChunkBudget
from reviewpack.chunkers.line_chunker import LineChunker, chunk_text

__all__ = ["ChunkBudget", "LineChunker", "chunk_text"]
