"""SQLite persistence for reviews and chunk manifests."""

from reviewpack.storage.store import ReviewStore

__all__ = ["ReviewStore"]
