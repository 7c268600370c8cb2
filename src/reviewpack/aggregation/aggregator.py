"""Merge per-chunk findings into one file-level review."""

import dataclasses
import logging
from typing import Sequence

import numpy as np

from reviewpack.analysis.rules import DEFAULT_RULE_SET
from reviewpack.errors import AlignmentError
from reviewpack.models import ChunkMetrics, FileMetrics, Finding, ReviewResult, Severity

logger = logging.getLogger(__name__)

NO_ISSUES_SUMMARY = "No significant issues found. Code meets quality standards."

# Severities that make it into the summary sentence, with their wording
_SUMMARY_LABELS = (
    (Severity.CRITICAL, "critical issues"),
    (Severity.HIGH, "high priority issues"),
    (Severity.MEDIUM, "medium priority issues"),
)


def severity_counts(findings: Sequence[Finding]) -> dict[str, int]:
    """Count findings per severity, with every severity present."""
    counts = {severity.value: 0 for severity in Severity}
    for finding in findings:
        counts[Severity(finding.severity).value] += 1
    return counts


def summarize(counts: dict[str, int]) -> str:
    """Build the one-sentence summary from severity counts."""
    parts = [
        f"{counts[severity.value]} {label}"
        for severity, label in _SUMMARY_LABELS
        if counts.get(severity.value, 0) > 0
    ]
    if not parts:
        return NO_ISSUES_SUMMARY
    return f"Found {', '.join(parts)}. Immediate attention required."


def sum_metrics(chunk_metrics: Sequence[ChunkMetrics]) -> FileMetrics:
    """Add per-chunk metrics into file totals.

    Complexity starts at 1 for the file and gains one point per decision
    point found in any chunk.
    """
    if not chunk_metrics:
        return FileMetrics()
    totals = np.array([m.as_tuple() for m in chunk_metrics], dtype=np.int64).sum(axis=0)
    lines, code_lines, comment_lines, decision_points, tokens = (int(v) for v in totals)
    return FileMetrics(
        total_lines=lines,
        code_lines=code_lines,
        comment_lines=comment_lines,
        complexity=1 + decision_points,
        tokens=tokens,
    )


def aggregate(
    per_chunk_findings: Sequence[Sequence[Finding]],
    chunk_line_offsets: Sequence[int],
    *,
    file_path: str = "",
    chunk_metrics: Sequence[ChunkMetrics] = (),
    rule_set: str = DEFAULT_RULE_SET,
    chunked: bool = True,
) -> ReviewResult:
    """Reconcile per-chunk findings into one ReviewResult.

    Args:
        per_chunk_findings: Findings for each chunk, in chunk order, with
            chunk-local line numbers
        chunk_line_offsets: For each chunk, the amount to add to a local line
            number to get the original-file line
        file_path: Path recorded on every finding and on the result
        chunk_metrics: Metrics for each chunk's new lines, in chunk order
        rule_set: Name of the rule set that produced the findings
        chunked: False when the file was reviewed whole, which leaves every
            finding's chunk number unset

    Returns:
        The deduplicated, prioritized result

    Raises:
        AlignmentError: If the per-chunk inputs have different lengths
    """
    if len(per_chunk_findings) != len(chunk_line_offsets):
        raise AlignmentError(
            f"{file_path or '<text>'}: {len(per_chunk_findings)} finding lists "
            f"but {len(chunk_line_offsets)} chunk offsets"
        )
    if chunk_metrics and len(chunk_metrics) != len(chunk_line_offsets):
        raise AlignmentError(
            f"{file_path or '<text>'}: {len(chunk_metrics)} metric entries "
            f"but {len(chunk_line_offsets)} chunk offsets"
        )

    seen: set[tuple[str, int, str]] = set()
    findings: list[Finding] = []
    duplicates = 0
    for index, (chunk_findings, offset) in enumerate(zip(per_chunk_findings, chunk_line_offsets)):
        for local in chunk_findings:
            finding = dataclasses.replace(
                local,
                line=local.line + offset,
                file_path=file_path,
                chunk_number=index + 1 if chunked else None,
            )
            if finding.key in seen:
                duplicates += 1
                continue
            seen.add(finding.key)
            findings.append(finding)

    findings.sort(key=lambda f: (Severity(f.severity).rank, f.line))
    if duplicates:
        logger.debug(f"{file_path}: dropped {duplicates} duplicate findings from overlap")

    counts = severity_counts(findings)
    return ReviewResult(
        file_path=file_path,
        findings=tuple(findings),
        counts=counts,
        metrics=sum_metrics(chunk_metrics),
        summary=summarize(counts),
        rule_set=rule_set,
        total_chunks=len(chunk_line_offsets),
    )
