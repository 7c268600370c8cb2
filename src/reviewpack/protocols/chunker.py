"""Protocol for chunking strategies."""

from typing import Protocol, Sequence, runtime_checkable

from reviewpack.chunkers.budget import ChunkBudget
from reviewpack.models import Chunk


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for splitting a file's text into ordered chunks."""

    def chunk(
        self,
        text: str,
        file_path: str,
        budget: ChunkBudget,
        boundaries: Sequence[int] = (),
    ) -> list[Chunk]:
        """Split text into chunks that respect the budget."""
        ...
