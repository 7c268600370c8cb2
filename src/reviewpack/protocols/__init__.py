"""Protocol definitions for extensible components."""

from reviewpack.protocols.analyzer import Analyzer
from reviewpack.protocols.boundary import BoundaryStrategy
from reviewpack.protocols.chunker import ChunkingStrategy
from reviewpack.protocols.ingester import Ingester

__all__ = ["Analyzer", "BoundaryStrategy", "ChunkingStrategy", "Ingester"]
