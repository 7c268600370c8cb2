"""Boundary detection strategies, keyed by language family."""

import logging

from reviewpack.boundaries.regex_strategy import (
    GO,
    JAVASCRIPT,
    PYTHON,
    TYPESCRIPT,
    RegexBoundaryStrategy,
)
from reviewpack.protocols import BoundaryStrategy

logger = logging.getLogger(__name__)

# Registry of available strategies; later entries win for the same language
_STRATEGIES: list[BoundaryStrategy] = [
    PYTHON,
    JAVASCRIPT,
    TYPESCRIPT,
    GO,
]


def get_boundary_strategy(language: str) -> BoundaryStrategy | None:
    """Find the strategy registered for a language family.

    Args:
        language: Language-family tag (e.g. "python")

    Returns:
        The most recently registered matching strategy, or None
    """
    for strategy in reversed(_STRATEGIES):
        if strategy.language == language:
            return strategy
    return None


def register_boundary_strategy(strategy: BoundaryStrategy) -> None:
    """Register a strategy for a new language, or override a built-in one.

    Args:
        strategy: An object implementing the BoundaryStrategy protocol
    """
    _STRATEGIES.append(strategy)


def find_boundaries(text: str, language: str) -> list[int]:
    """Return boundary hint offsets, or an empty list for unknown languages."""
    strategy = get_boundary_strategy(language)
    if strategy is None:
        logger.debug(f"No boundary strategy for {language!r}, splitting on lines only")
        return []
    return strategy.find_offsets(text)


__all__ = [
    "RegexBoundaryStrategy",
    "find_boundaries",
    "get_boundary_strategy",
    "register_boundary_strategy",
]
