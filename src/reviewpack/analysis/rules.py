"""Named rule sets for the pattern analyzer."""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Pattern

from reviewpack.models import Severity

logger = logging.getLogger(__name__)

DEFAULT_RULE_SET = "best-practices"


@dataclass(frozen=True)
class Rule:
    """A text pattern mapped to a severity and message."""

    name: str
    pattern: Pattern[str]
    severity: Severity
    message: str

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


def rule(name: str, pattern: str, severity: Severity, message: str) -> Rule:
    """Build a Rule from an uncompiled pattern."""
    return Rule(name=name, pattern=re.compile(pattern), severity=severity, message=message)


SECURITY_RULES = (
    rule("eval", r"\beval\s*\(", Severity.CRITICAL, "Avoid using eval() - security risk"),
    rule("inner-html", r"\.innerHTML\s*=", Severity.HIGH, "Direct innerHTML assignment - XSS risk"),
    rule(
        "hardcoded-password",
        r"(?i)pass(?:word|wd)\w*\s*[=:]\s*['\"]",
        Severity.CRITICAL,
        "Hardcoded password detected",
    ),
    rule("exec", r"(?<![\w.])exec\s*\(", Severity.HIGH, "Avoid exec() on dynamic input"),
    rule(
        "pickle-loads",
        r"\bpickle\.loads?\s*\(",
        Severity.HIGH,
        "Unpickling data can execute arbitrary code",
    ),
    rule(
        "shell-true",
        r"\bshell\s*=\s*True\b",
        Severity.HIGH,
        "Subprocess call with shell=True - command injection risk",
    ),
)

PERFORMANCE_RULES = (
    rule("for-in", r"\bfor\s*\(.*\bin\s+", Severity.MEDIUM, "for...in loop can be slow"),
    rule(
        "dom-query-in-loop",
        r"\b(?:for|while)\b.*document\.querySelector",
        Severity.HIGH,
        "DOM query inside loop",
    ),
)

BEST_PRACTICE_RULES = (
    rule("console", r"\bconsole\.(?:log|error|warn)\b", Severity.LOW, "Remove console statements"),
    rule("var", r"\bvar\s+\w+\s*=", Severity.INFO, "Use const/let instead of var"),
    rule(
        "long-parameter-list",
        r"\b(?:function|def)\s+\w+\s*\([^)]{40,}",
        Severity.MEDIUM,
        "Too many parameters",
    ),
    rule("bare-except", r"^\s*except\s*:", Severity.MEDIUM, "Bare except catches everything"),
    rule("print", r"^\s*print\s*\(", Severity.INFO, "Use logging instead of print"),
)

_RULE_SETS: dict[str, tuple[Rule, ...]] = {
    "security": SECURITY_RULES,
    "performance": PERFORMANCE_RULES,
    "best-practices": BEST_PRACTICE_RULES,
}

_ALIASES = {
    "bestpractices": "best-practices",
}


def normalize_rule_set_name(name: str) -> str:
    """Lowercase a rule set name and use dashes as separators."""
    key = re.sub(r"[\s_]+", "-", name.strip().lower())
    return _ALIASES.get(key, key)


def get_rule_set(name: str | None) -> tuple[str, tuple[Rule, ...]]:
    """Resolve a rule set by name.

    Unknown names fall back to the default rule set rather than failing.

    Returns:
        Tuple of (resolved name, rules)
    """
    key = normalize_rule_set_name(name or DEFAULT_RULE_SET)
    if key not in _RULE_SETS:
        logger.debug(f"Unknown rule set {name!r}, using {DEFAULT_RULE_SET}")
        key = DEFAULT_RULE_SET
    return key, _RULE_SETS[key]


def register_rule_set(name: str, rules: Iterable[Rule]) -> None:
    """Register a custom rule set, replacing any set with the same name."""
    _RULE_SETS[normalize_rule_set_name(name)] = tuple(rules)


def rule_set_names() -> list[str]:
    return sorted(_RULE_SETS)
