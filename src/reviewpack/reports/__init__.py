"""Rendering and writing of reviews and chunk manifests."""

from reviewpack.reports.markdown import render_markdown
from reviewpack.reports.writers import (
    build_manifest,
    review_to_dict,
    write_chunks,
    write_reports,
)

__all__ = ["build_manifest", "render_markdown", "review_to_dict", "write_chunks", "write_reports"]
