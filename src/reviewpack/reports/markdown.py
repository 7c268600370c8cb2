"""Markdown rendering of a review result."""

from datetime import datetime

from reviewpack.models import ReviewResult, Severity


def render_markdown(result: ReviewResult) -> str:
    """Render a review as a Markdown report, findings grouped by severity."""
    created = datetime.fromisoformat(result.created_at).strftime("%Y-%m-%d %H:%M:%S")
    metrics = result.metrics

    lines = [
        "# Code Review Report",
        "",
        f"**File:** {result.file_path}",
        f"**Date:** {created}",
        f"**Rule set:** {result.rule_set or 'default'}",
        f"**Chunks:** {result.total_chunks}",
        "",
        "## Summary",
        result.summary,
        "",
        "## Metrics",
        f"- Total Lines: {metrics.total_lines}",
        f"- Code Lines: {metrics.code_lines}",
        f"- Comment Lines: {metrics.comment_lines}",
        f"- Complexity: {metrics.complexity}",
        f"- Estimated Tokens: {metrics.tokens}",
        "",
    ]

    if not result.findings:
        lines += ["## Findings", "No issues detected.", ""]
        return "\n".join(lines)

    lines += ["## Findings", ""]
    for severity in Severity:
        group = [f for f in result.findings if Severity(f.severity) is severity]
        if not group:
            continue
        lines += [f"### {severity.value.upper()}", ""]
        for finding in group:
            location = f"Line {finding.line}"
            if finding.chunk_number is not None:
                location += f" (chunk {finding.chunk_number})"
            lines.append(f"- **{location}**: {finding.message}")
            lines += ["  ```", f"  {finding.code}", "  ```"]
        lines.append("")

    return "\n".join(lines)
