"""Ingester for ZIP archives of source code."""

import logging
import zipfile
from pathlib import Path
from typing import Iterator

from reviewpack.errors import InputError
from reviewpack.models import SourceFile
from reviewpack.models.source import LANGUAGE_EXTENSIONS
from reviewpack.utils.binary import decode_source

logger = logging.getLogger(__name__)


class ZipIngester:
    """Ingester for ZIP archive files."""

    source_type = "zip"

    def can_handle(self, source: Path) -> bool:
        """Check if this is a zip file."""
        return source.suffix.lower() == ".zip" and source.exists()

    def ingest(self, source: Path) -> Iterator[SourceFile]:
        """Yield source files from a ZIP archive.

        Member paths are reported as ``<archive>/<member>``.

        Raises:
            InputError: If the archive itself cannot be opened
        """
        try:
            zf = zipfile.ZipFile(source, "r")
        except (OSError, zipfile.BadZipFile) as exc:
            raise InputError(f"Cannot open archive {source}: {exc}") from exc

        with zf:
            for info in zf.infolist():
                if info.is_dir():
                    continue
                if Path(info.filename).suffix.lower() not in LANGUAGE_EXTENSIONS:
                    continue

                member = f"{source}/{info.filename}"
                try:
                    text = decode_source(info.filename, zf.read(info.filename))
                except InputError as exc:
                    logger.warning(f"Skipping {member}: {exc}")
                    continue

                yield SourceFile.from_text(member, text)
