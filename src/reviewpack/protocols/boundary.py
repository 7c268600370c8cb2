"""Protocol for language-specific boundary detection."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class BoundaryStrategy(Protocol):
    """Finds candidate split offsets for one language family.

    Offsets are hints only: they mark where a top-level declaration appears
    to start, recognised from surface text patterns, not from a syntax tree.
    """

    @property
    def language(self) -> str:
        """Return the language-family tag this strategy serves."""
        ...

    def find_offsets(self, text: str) -> list[int]:
        """Return sorted character offsets of preferred split points."""
        ...
