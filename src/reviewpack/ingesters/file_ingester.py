"""Ingester for a single source file."""

from pathlib import Path
from typing import Iterator

from reviewpack.errors import InputError
from reviewpack.models import SourceFile
from reviewpack.utils.binary import decode_source


class FileIngester:
    """Ingester for one regular file. Read failures propagate as InputError."""

    source_type = "file"

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing file that is not a zip archive."""
        return source.is_file() and source.suffix.lower() != ".zip"

    def ingest(self, source: Path) -> Iterator[SourceFile]:
        yield self.read(source)

    def read(self, source: Path) -> SourceFile:
        """Read a file as UTF-8 source text.

        Raises:
            InputError: If the file is missing, unreadable, binary or not UTF-8
        """
        try:
            raw_content = source.read_bytes()
        except OSError as exc:
            raise InputError(f"Cannot read {source}: {exc.strerror or exc}") from exc
        return SourceFile.from_text(source, decode_source(source, raw_content))
