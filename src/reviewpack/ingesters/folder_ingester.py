"""Ingester for local folders."""

import logging
import os
from pathlib import Path
from typing import Iterator

from reviewpack.errors import InputError
from reviewpack.models import SourceFile
from reviewpack.models.source import LANGUAGE_EXTENSIONS
from reviewpack.utils.binary import decode_source

logger = logging.getLogger(__name__)

# Directory names never descended into
SKIP_DIRS = {
    "__pycache__",
    "node_modules",
    "venv",
    "env",
    "dist",
    "build",
    "chunks",
    "reviews",
}


class FolderIngester:
    """Ingester for local filesystem folders.

    Yields every file with a known source extension, recursively. Files that
    turn out unreadable or binary are skipped with a warning, so one bad file
    does not stop a folder review.
    """

    source_type = "folder"

    def __init__(self, extensions: set[str] | None = None):
        self.extensions = extensions or set(LANGUAGE_EXTENSIONS)

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[SourceFile]:
        """Yield source files from a folder recursively, in sorted order.

        Args:
            source: Path to the folder

        Yields:
            SourceFile objects with paths relative to the folder's parent
        """
        for root, dirs, files in os.walk(source):
            dirs[:] = sorted(d for d in dirs if not self._should_skip(d))
            for filename in sorted(files):
                full_path = Path(root) / filename
                if self._should_skip(filename) or full_path.suffix.lower() not in self.extensions:
                    continue

                try:
                    text = decode_source(full_path, full_path.read_bytes())
                except (OSError, InputError) as exc:
                    logger.warning(f"Skipping {full_path}: {exc}")
                    continue

                yield SourceFile.from_text(full_path, text)

    @staticmethod
    def _should_skip(name: str) -> bool:
        """Skip hidden entries, build artifacts and ReviewPack's own output."""
        return name.startswith(".") or name in SKIP_DIRS or name.endswith(".egg-info")
