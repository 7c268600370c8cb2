"""FastMCP server exposing a .reviewpack store."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from reviewpack.models import Severity
from reviewpack.storage import ReviewStore


def create_mcp_server(store_path: Path) -> FastMCP:
    """Create an MCP server for a specific review store.

    One process serves one store, so findings from unrelated review runs
    never mix.

    Args:
        store_path: Path to the .reviewpack file to serve

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="reviewpack",
    )

    store = ReviewStore(store_path)

    @mcp.tool()
    def ls(path: str = "") -> str:
        """List reviewed files with their finding counts.

        Args:
            path: Optional path prefix to filter results

        Returns:
            One line per file: path, chunks, critical/high/total findings
        """
        files = store.list_files(path)

        if not files:
            return f"No reviewed files matching '{path}'"

        lines = []
        for f in files:
            lines.append(
                f"{f['path']:<60} {f['total_chunks']:>3} chunks  "
                f"{f['critical'] or 0} critical  {f['high'] or 0} high  {f['findings']} total"
            )
        return "\n".join(lines)

    @mcp.tool()
    def findings(path: str, min_severity: str = "") -> str:
        """Show a file's findings, most severe first.

        Args:
            path: Reviewed file path (as shown in ls output)
            min_severity: Optional lowest severity to include
                (critical, high, medium, low, info)

        Returns:
            The review summary followed by one line per finding
        """
        review = store.get_file(path)
        if review is None:
            return f"Error: No review for: {path}"

        if min_severity and min_severity.lower() not in {s.value for s in Severity}:
            return f"Error: Unknown severity: {min_severity}"

        rows = store.get_findings(path, min_severity.lower() or None)
        lines = [review["summary"], ""]
        for row in rows:
            chunk = f" [chunk {row['chunk_number']}]" if row["chunk_number"] is not None else ""
            lines.append(f"{row['severity'].upper():<8} line {row['line']}{chunk}: {row['message']}")
            lines.append(f"         {row['code']}")
        return "\n".join(lines)

    @mcp.tool()
    def chunks(path: str) -> str:
        """Show the chunk manifest for a reviewed file.

        Args:
            path: Reviewed file path

        Returns:
            One line per chunk with its line range, overlap and token count
        """
        rows = store.get_chunks(path)
        if not rows:
            return f"Error: No chunks for: {path}"

        return "\n".join(
            f"#{r['number']:<3} lines {r['start_line']}-{r['end_line']} "
            f"(+{r['overlap_lines']} overlap)  ~{r['tokens']} tokens"
            for r in rows
        )

    @mcp.tool()
    def locate(path: str, line: int) -> str:
        """Find which chunks contained an original line.

        Args:
            path: Reviewed file path
            line: Line number in the original file

        Returns:
            The owning chunk and any chunk that carried the line as overlap
        """
        rows = store.locate_line(path, line)
        if not rows:
            return f"Line {line} is not covered by any chunk of {path}"

        return "\n".join(
            f"chunk {r['number']} ({'owns' if r['owns_line'] else 'overlap'}) "
            f"lines {r['start_line']}-{r['end_line']}"
            for r in rows
        )

    return mcp
