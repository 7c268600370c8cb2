"""Protocol for per-chunk analysis backends."""

from typing import Protocol, runtime_checkable

from reviewpack.models import Finding


@runtime_checkable
class Analyzer(Protocol):
    """Produces findings for one chunk's content.

    Implementations must be side-effect free so chunks can be analyzed in
    any order or concurrently. Returned line numbers are chunk-local.
    """

    def analyze(self, content: str, rule_set: str) -> list[Finding]:
        """Analyze chunk content against a named rule set."""
        ...
