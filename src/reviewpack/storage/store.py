"""SQLite-backed storage for .reviewpack files."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from reviewpack.models import FileReview, Severity
from reviewpack.storage.schema import SCHEMA


class ReviewStore:
    """SQLite-backed storage for reviews and their chunk manifests."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize(self) -> None:
        """Create schema if not exists."""
        with self.connection() as conn:
            conn.executescript(SCHEMA)

    def store_review(self, review: FileReview) -> None:
        """Store a review, replacing any earlier review of the same file."""
        result = review.result
        metrics = result.metrics
        with self.connection() as conn:
            conn.execute("DELETE FROM findings WHERE file_path = ?", (result.file_path,))
            conn.execute("DELETE FROM chunks WHERE file_path = ?", (result.file_path,))
            conn.execute(
                """INSERT OR REPLACE INTO files
                   (path, language, rule_set, summary, total_chunks, max_tokens,
                    overlap_tokens, total_lines, code_lines, comment_lines,
                    complexity, tokens, reviewed_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (
                    result.file_path,
                    review.language,
                    result.rule_set,
                    result.summary,
                    result.total_chunks,
                    review.max_tokens,
                    review.overlap_tokens,
                    metrics.total_lines,
                    metrics.code_lines,
                    metrics.comment_lines,
                    metrics.complexity,
                    metrics.tokens,
                    result.created_at,
                ),
            )
            conn.executemany(
                """INSERT INTO chunks
                   (file_path, number, start_line, end_line, overlap_lines, tokens)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                [
                    (
                        result.file_path,
                        chunk.number,
                        chunk.start_line,
                        chunk.end_line,
                        chunk.overlap_line_count,
                        chunk.token_count,
                    )
                    for chunk in review.chunks
                ],
            )
            conn.executemany(
                """INSERT INTO findings
                   (file_path, chunk_number, line, severity, severity_rank, rule, message, code)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                [
                    (
                        result.file_path,
                        finding.chunk_number,
                        finding.line,
                        Severity(finding.severity).value,
                        Severity(finding.severity).rank,
                        finding.rule,
                        finding.message,
                        finding.code,
                    )
                    for finding in result.findings
                ],
            )

    def set_metadata(self, key: str, value: str) -> None:
        """Store a metadata key-value pair."""
        with self.connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO metadata (key, value) VALUES (?, ?)",
                (key, value),
            )

    def get_metadata(self, key: str) -> Optional[str]:
        """Retrieve a metadata value by key."""
        with self.connection() as conn:
            row = conn.execute(
                "SELECT value FROM metadata WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None

    # Query methods for the CLI and MCP tools

    def list_files(self, path_prefix: str = "") -> list[dict]:
        """List reviewed files matching prefix, with per-severity counts."""
        with self.connection() as conn:
            cursor = conn.execute(
                """SELECT f.path, f.language, f.rule_set, f.summary, f.total_chunks,
                          f.total_lines, f.complexity,
                          SUM(CASE WHEN d.severity = 'critical' THEN 1 ELSE 0 END) AS critical,
                          SUM(CASE WHEN d.severity = 'high' THEN 1 ELSE 0 END) AS high,
                          COUNT(d.id) AS findings
                   FROM files f LEFT JOIN findings d ON d.file_path = f.path
                   WHERE f.path LIKE ?
                   GROUP BY f.path ORDER BY f.path""",
                (f"{path_prefix}%",),
            )
            return [dict(row) for row in cursor]

    def get_file(self, path: str) -> Optional[dict]:
        """Return the stored review row for a file."""
        with self.connection() as conn:
            row = conn.execute("SELECT * FROM files WHERE path = ?", (path,)).fetchone()
            return dict(row) if row else None

    def get_findings(self, path: str, min_severity: Optional[str] = None) -> list[dict]:
        """Return a file's findings, most severe first.

        Args:
            path: Reviewed file path
            min_severity: Only return findings at least this severe
        """
        max_rank = Severity(min_severity).rank if min_severity else len(Severity)
        with self.connection() as conn:
            cursor = conn.execute(
                """SELECT chunk_number, line, severity, rule, message, code
                   FROM findings WHERE file_path = ? AND severity_rank <= ?
                   ORDER BY severity_rank, line, id""",
                (path, max_rank),
            )
            return [dict(row) for row in cursor]

    def get_chunks(self, path: str) -> list[dict]:
        """Return the chunk manifest for a file, in chunk order."""
        with self.connection() as conn:
            cursor = conn.execute(
                """SELECT number, start_line, end_line, overlap_lines, tokens
                   FROM chunks WHERE file_path = ? ORDER BY number""",
                (path,),
            )
            return [dict(row) for row in cursor]

    def locate_line(self, path: str, line: int) -> list[dict]:
        """Return the chunks whose content (overlap included) holds a line."""
        with self.connection() as conn:
            cursor = conn.execute(
                """SELECT number, start_line, end_line, overlap_lines, tokens,
                          start_line <= ? AS owns_line
                   FROM chunks
                   WHERE file_path = ? AND start_line - overlap_lines <= ? AND end_line >= ?
                   ORDER BY number""",
                (line, path, line, line),
            )
            return [
                {**dict(row), "owns_line": bool(row["owns_line"])} for row in cursor
            ]
