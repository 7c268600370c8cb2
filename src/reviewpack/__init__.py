"""ReviewPack - chunked pattern review for large source files."""

__version__ = "0.1.0"
