"""CLI entry point for ReviewPack."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from reviewpack.analysis import rule_set_names
from reviewpack.boundaries import find_boundaries
from reviewpack.chunkers import ChunkBudget, LineChunker
from reviewpack.config import ReviewConfig, load_config
from reviewpack.errors import ReviewPackError
from reviewpack.ingesters import get_ingester, read_source
from reviewpack.reports import review_to_dict, write_chunks, write_reports
from reviewpack.review import Reviewer
from reviewpack.storage import ReviewStore

logger = logging.getLogger(__name__)


def chunk(source: str, max_tokens: int, overlap: int, output: Optional[str] = None) -> None:
    """Chunk a single file and print its chunk table.

    Args:
        source: Path to the file
        max_tokens: Max tokens per chunk
        overlap: Overlap tokens between chunks
        output: Optional folder to write the manifest and chunk files to
    """
    try:
        budget = ChunkBudget(max_tokens=max_tokens, overlap_tokens=overlap).validate()
        src = read_source(source)
    except ReviewPackError as exc:
        logger.error(f"Error chunking file: {exc}")
        sys.exit(1)

    logger.info(f"Processing: {Path(src.path).name} ({len(src.text.encode('utf-8')) / 1024:.2f} KB)")
    chunks = LineChunker().chunk(src.text, src.path, budget, find_boundaries(src.text, src.language))

    for c in chunks:
        logger.info(
            f"  chunk {c.number:>3}  lines {c.start_line}-{c.end_line}"
            f"  (+{c.overlap_line_count} overlap)  ~{c.token_count} tokens"
        )
    logger.info(f"Created {len(chunks)} chunks")

    if output:
        folder = write_chunks(chunks, budget, src.path, output)
        logger.info(f"Chunks saved to: {folder}")


def review(
    sources: list[str],
    config: ReviewConfig,
    rule_set: Optional[str] = None,
    reports: Optional[str] = None,
    db: Optional[str] = None,
    as_json: bool = False,
) -> None:
    """Review files, folders or zip archives.

    One file's failure is logged and the batch continues; the exit status is
    non-zero if any file failed.

    Args:
        sources: Paths to review
        config: Review settings
        rule_set: Rule set override for every file
        reports: Optional folder for JSON and Markdown reports
        db: Optional .reviewpack store to record reviews in
        as_json: Print each review as JSON instead of a text summary
    """
    reviewer = Reviewer(config)

    store = None
    if db:
        store = ReviewStore(db)
        store.initialize()
        store.set_metadata("created_at", datetime.now().isoformat())
        store.set_metadata("max_tokens", str(config.budget.max_tokens))
        store.set_metadata("overlap_tokens", str(config.budget.overlap_tokens))

    reviewed = 0
    failed = 0
    for source in sources:
        ingester = get_ingester(Path(source))
        if ingester is None:
            logger.error(f"Cannot process: {source}")
            failed += 1
            continue

        try:
            for src in ingester.ingest(Path(source)):
                try:
                    file_review = reviewer.review_source(src, rule_set=rule_set)
                except ReviewPackError as exc:
                    logger.error(f"Failed to review {src.path}: {exc}")
                    failed += 1
                    continue

                reviewed += 1
                result = file_review.result
                if as_json:
                    print(json.dumps(review_to_dict(file_review), indent=2))
                else:
                    logger.info(f"{result.file_path} ({result.total_chunks} chunks): {result.summary}")
                if store is not None:
                    store.store_review(file_review)
                if reports:
                    _, md_path = write_reports(file_review, reports)
                    logger.info(f"  Report saved to: {md_path}")
        except ReviewPackError as exc:
            logger.error(f"Failed to review {source}: {exc}")
            failed += 1

    logger.info(f"Reviewed {reviewed} files, {failed} failed")
    if failed:
        sys.exit(1)


def serve(db: str, transport: str = "stdio") -> None:
    """Start MCP server for a review store.

    Args:
        db: Path to .reviewpack file
        transport: Transport protocol (stdio or sse)
    """
    db_path = Path(db)
    if not db_path.exists():
        logger.error(f"Review store not found: {db}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from typing import Literal, cast

    from reviewpack.server import create_mcp_server

    logger.info(f"Serving {db} via {transport}")
    mcp = create_mcp_server(db_path)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def info(db: str) -> None:
    """Show information about a review store.

    Args:
        db: Path to .reviewpack file
    """
    db_path = Path(db)
    if not db_path.exists():
        logger.error(f"Review store not found: {db}")
        sys.exit(1)

    store = ReviewStore(db_path)

    metadata = {}
    for key in ["created_at", "max_tokens", "overlap_tokens"]:
        value = store.get_metadata(key)
        if value:
            metadata[key] = value

    files = store.list_files()
    chunked = [f for f in files if f["total_chunks"] > 1]

    print(f"ReviewPack: {db_path.name}")
    print(f"  Size: {db_path.stat().st_size / 1024:.1f} KB")
    print("")
    print("Metadata:")
    for key, value in metadata.items():
        print(f"  {key}: {value}")
    print("")
    print("Contents:")
    print(f"  Files reviewed: {len(files)}")
    print(f"  Chunked files: {len(chunked)}")
    print(f"  Findings: {sum(f['findings'] for f in files)}")
    print(f"  Critical: {sum(f['critical'] or 0 for f in files)}")
    print(f"  High: {sum(f['high'] or 0 for f in files)}")


def _add_budget_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t",
        "--tokens",
        type=int,
        default=None,
        help="Max tokens per chunk (default: 4000)",
    )
    parser.add_argument(
        "-o",
        "--overlap",
        type=int,
        default=None,
        help="Overlap tokens between chunks (default: 200)",
    )


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="reviewpack",
        description="ReviewPack - chunked pattern review for large source files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # chunk command
    chunk_parser = subparsers.add_parser(
        "chunk",
        help="Split a single file into reviewable chunks",
    )
    chunk_parser.add_argument("source", help="Input file path")
    _add_budget_arguments(chunk_parser)
    chunk_parser.add_argument(
        "--out",
        default=None,
        help="Folder to write metadata.json and chunk files to",
    )

    # review command
    review_parser = subparsers.add_parser(
        "review",
        help="Review files, folders or zip archives",
    )
    review_parser.add_argument("sources", nargs="+", help="Files, folders or zip files")
    review_parser.add_argument(
        "-r",
        "--rule-set",
        default=None,
        help=f"Rule set for every file ({', '.join(rule_set_names())})",
    )
    review_parser.add_argument("-c", "--config", default=None, help="JSON settings file")
    _add_budget_arguments(review_parser)
    review_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used to analyze chunks (default: 1)",
    )
    review_parser.add_argument(
        "--reports",
        default=None,
        help="Folder for JSON and Markdown reports",
    )
    review_parser.add_argument(
        "--db",
        default=None,
        help="Record reviews in this .reviewpack store",
    )
    review_parser.add_argument(
        "--json",
        action="store_true",
        help="Print each review as JSON",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server for a review store",
    )
    serve_parser.add_argument("db", help="Path to .reviewpack file")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show information about a review store",
    )
    info_parser.add_argument("db", help="Path to .reviewpack file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "chunk":
        defaults = ChunkBudget()
        chunk(
            args.source,
            args.tokens if args.tokens is not None else defaults.max_tokens,
            args.overlap if args.overlap is not None else defaults.overlap_tokens,
            args.out,
        )
    elif args.command == "review":
        try:
            config = load_config(args.config).with_overrides(
                max_tokens=args.tokens,
                overlap_tokens=args.overlap,
                workers=args.workers,
            )
        except ReviewPackError as exc:
            logger.error(f"Invalid configuration: {exc}")
            sys.exit(1)
        review(args.sources, config, args.rule_set, args.reports, args.db, args.json)
    elif args.command == "serve":
        serve(args.db, args.transport)
    elif args.command == "info":
        info(args.db)


if __name__ == "__main__":
    main()
