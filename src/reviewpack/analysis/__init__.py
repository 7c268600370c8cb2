"""Pattern analysis and metrics for chunk content."""

from reviewpack.analysis.metrics import compute_metrics
from reviewpack.analysis.pattern_analyzer import PatternAnalyzer
from reviewpack.analysis.rules import (
    DEFAULT_RULE_SET,
    Rule,
    get_rule_set,
    register_rule_set,
    rule_set_names,
)

__all__ = [
    "DEFAULT_RULE_SET",
    "PatternAnalyzer",
    "Rule",
    "compute_metrics",
    "get_rule_set",
    "register_rule_set",
    "rule_set_names",
]
