"""Aggregation of per-chunk findings into per-file reviews."""

from reviewpack.aggregation.aggregator import (
    NO_ISSUES_SUMMARY,
    aggregate,
    severity_counts,
    sum_metrics,
    summarize,
)

__all__ = ["NO_ISSUES_SUMMARY", "aggregate", "severity_counts", "sum_metrics", "summarize"]
