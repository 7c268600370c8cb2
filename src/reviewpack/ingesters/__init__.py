"""Input source handlers (ingesters) for ReviewPack."""

from pathlib import Path
from typing import Optional

from reviewpack.errors import InputError
from reviewpack.ingesters.file_ingester import FileIngester
from reviewpack.ingesters.folder_ingester import FolderIngester
from reviewpack.ingesters.zip_ingester import ZipIngester
from reviewpack.models import SourceFile
from reviewpack.protocols import Ingester

# Registry of available ingesters
_INGESTERS: list[Ingester] = [
    ZipIngester(),
    FolderIngester(),
    FileIngester(),
]


def get_ingester(source: Path | str) -> Optional[Ingester]:
    """Find an ingester that can handle the given source.

    Args:
        source: Path to a file, folder or zip archive

    Returns:
        An Ingester instance that can handle the source, or None
    """
    source_path = Path(source)
    for ingester in _INGESTERS:
        if ingester.can_handle(source_path):
            return ingester
    return None


def register_ingester(ingester: Ingester) -> None:
    """Register a custom ingester (for plugins/extensions).

    Args:
        ingester: An object implementing the Ingester protocol
    """
    _INGESTERS.append(ingester)


def read_source(path: Path | str) -> SourceFile:
    """Read a single file for review.

    Raises:
        InputError: If the path is not a readable UTF-8 text file
    """
    source_path = Path(path)
    if not source_path.exists():
        raise InputError(f"File not found: {source_path}")
    if not source_path.is_file():
        raise InputError(f"Not a file: {source_path}")
    return FileIngester().read(source_path)


__all__ = [
    "FileIngester",
    "FolderIngester",
    "ZipIngester",
    "get_ingester",
    "read_source",
    "register_ingester",
]
