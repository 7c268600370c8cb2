"""Writers for JSON reports and on-disk chunk manifests."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence

from reviewpack.chunkers import ChunkBudget
from reviewpack.models import Chunk, FileReview, Severity
from reviewpack.reports.markdown import render_markdown

logger = logging.getLogger(__name__)


def build_manifest(chunks: Sequence[Chunk], budget: ChunkBudget, source_path: str) -> dict:
    """Describe which original lines each chunk covered."""
    return {
        "original_file": source_path,
        "total_chunks": len(chunks),
        "max_tokens_per_chunk": budget.max_tokens,
        "overlap_tokens": budget.overlap_tokens,
        "created_at": datetime.now().isoformat(),
        "chunks": [chunk.to_manifest() for chunk in chunks],
    }


def review_to_dict(review: FileReview) -> dict:
    """Convert a review and its manifest to JSON-ready data."""
    result = review.result
    return {
        "file": result.file_path,
        "language": review.language,
        "rule_set": result.rule_set,
        "created_at": result.created_at,
        "total_chunks": result.total_chunks,
        "summary": result.summary,
        "counts": dict(result.counts),
        "metrics": {
            "total_lines": result.metrics.total_lines,
            "code_lines": result.metrics.code_lines,
            "comment_lines": result.metrics.comment_lines,
            "complexity": result.metrics.complexity,
            "tokens": result.metrics.tokens,
        },
        "findings": [
            {
                "line": f.line,
                "severity": Severity(f.severity).value,
                "message": f.message,
                "code": f.code,
                "rule": f.rule,
                "chunk": f.chunk_number,
            }
            for f in result.findings
        ],
        "chunks": [chunk.to_manifest() for chunk in review.chunks],
    }


def _timestamp() -> str:
    return datetime.now().strftime("%Y%m%dT%H%M%S%f")


def write_reports(review: FileReview, output_dir: Path | str) -> tuple[Path, Path]:
    """Write ``<stem>_<timestamp>.json`` and ``.md`` reports.

    Returns:
        Paths of the JSON and Markdown reports
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    base = f"{Path(review.result.file_path).stem}_{_timestamp()}"

    json_path = out / f"{base}.json"
    json_path.write_text(json.dumps(review_to_dict(review), indent=2), encoding="utf-8")
    md_path = out / f"{base}.md"
    md_path.write_text(render_markdown(review.result), encoding="utf-8")

    logger.debug(f"Reports written: {json_path}, {md_path}")
    return json_path, md_path


def write_chunks(
    chunks: Sequence[Chunk], budget: ChunkBudget, source_path: str, output_dir: Path | str
) -> Path:
    """Write ``metadata.json`` plus one file per chunk into a fresh folder.

    Each chunk file starts with a comment header naming its line range.

    Returns:
        The folder the chunks were written to
    """
    source = Path(source_path)
    folder = Path(output_dir) / f"{source.stem}_{_timestamp()}"
    folder.mkdir(parents=True, exist_ok=True)

    manifest = build_manifest(chunks, budget, source_path)
    (folder / "metadata.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    comment = "#" if source.suffix.lower() in {".py", ".pyi"} else "//"
    for chunk in chunks:
        header = "\n".join(
            [
                f"{comment} Chunk {chunk.number}/{len(chunks)}",
                f"{comment} Lines: {chunk.start_line}-{chunk.end_line}"
                f" (+{chunk.overlap_line_count} overlap)",
                f"{comment} Tokens: ~{chunk.token_count}",
                f"{comment} Original: {source.name}",
                f"{comment} -----------------------------------",
                "",
                "",
            ]
        )
        chunk_path = folder / f"chunk_{chunk.number:03d}{source.suffix}"
        chunk_path.write_text(header + chunk.content, encoding="utf-8")

    return folder
