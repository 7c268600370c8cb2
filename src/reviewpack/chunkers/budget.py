"""Token budget passed explicitly through one file's chunking run."""

from dataclasses import dataclass

from reviewpack.errors import ConfigurationError

DEFAULT_MAX_TOKENS = 4000
DEFAULT_OVERLAP_TOKENS = 200
DEFAULT_BOUNDARY_TOLERANCE = 10


@dataclass(frozen=True)
class ChunkBudget:
    """Budget limits for one chunking run.

    Attributes:
        max_tokens: Upper bound on a chunk's estimated tokens, overlap included
        overlap_tokens: Upper bound on the overlap carried into the next chunk
        boundary_tolerance: How many lines a split may move back to land on a
            boundary hint
    """

    max_tokens: int = DEFAULT_MAX_TOKENS
    overlap_tokens: int = DEFAULT_OVERLAP_TOKENS
    boundary_tolerance: int = DEFAULT_BOUNDARY_TOLERANCE

    def validate(self) -> "ChunkBudget":
        """Check the limits, returning self so calls can be chained.

        Raises:
            ConfigurationError: If any limit is out of range
        """
        if self.max_tokens <= 0:
            raise ConfigurationError(f"max_tokens must be positive, got {self.max_tokens}")
        if self.overlap_tokens < 0:
            raise ConfigurationError(
                f"overlap_tokens must not be negative, got {self.overlap_tokens}"
            )
        if self.overlap_tokens >= self.max_tokens:
            raise ConfigurationError(
                f"overlap_tokens ({self.overlap_tokens}) must be smaller than "
                f"max_tokens ({self.max_tokens})"
            )
        if self.boundary_tolerance < 0:
            raise ConfigurationError(
                f"boundary_tolerance must not be negative, got {self.boundary_tolerance}"
            )
        return self
