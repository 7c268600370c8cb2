"""Review settings and JSON config loading."""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

from reviewpack.analysis.rules import DEFAULT_RULE_SET, normalize_rule_set_name
from reviewpack.chunkers.budget import ChunkBudget
from reviewpack.errors import ConfigurationError


@dataclass(frozen=True)
class ReviewConfig:
    """Settings for one review run.

    Attributes:
        budget: Token limits for chunking
        default_rule_set: Rule set for files no file-type entry claims
        file_types: Rule set name -> list of extensions it applies to
        workers: Threads used to analyze chunks; 1 analyzes sequentially
    """

    budget: ChunkBudget = field(default_factory=ChunkBudget)
    default_rule_set: str = DEFAULT_RULE_SET
    file_types: dict[str, list[str]] = field(default_factory=dict)
    workers: int = 1

    def validate(self) -> "ReviewConfig":
        self.budget.validate()
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        return self

    def rule_set_for(self, path: str | Path) -> str:
        """Pick the rule set for a file from its extension."""
        suffix = Path(path).suffix.lower()
        for rule_set, extensions in self.file_types.items():
            if suffix in {ext.lower() for ext in extensions}:
                return rule_set
        return self.default_rule_set

    def with_overrides(
        self,
        max_tokens: Optional[int] = None,
        overlap_tokens: Optional[int] = None,
        workers: Optional[int] = None,
    ) -> "ReviewConfig":
        """Return a copy with command-line values applied on top."""
        budget = self.budget
        if max_tokens is not None:
            budget = replace(budget, max_tokens=max_tokens)
        if overlap_tokens is not None:
            budget = replace(budget, overlap_tokens=overlap_tokens)
        updated = replace(self, budget=budget)
        if workers is not None:
            updated = replace(updated, workers=workers)
        return updated.validate()


def _int(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}")
    return value


def config_from_dict(data: dict[str, Any]) -> ReviewConfig:
    """Build a validated ReviewConfig from parsed JSON.

    Missing sections and keys keep their defaults.

    Raises:
        ConfigurationError: If a value has the wrong type or is out of range
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Config root must be a JSON object")

    chunking = data.get("chunking", {})
    review = data.get("review", {})
    file_types = data.get("file_types", {})
    if not isinstance(chunking, dict) or not isinstance(review, dict):
        raise ConfigurationError("'chunking' and 'review' must be JSON objects")
    if not isinstance(file_types, dict) or not all(
        isinstance(exts, list) for exts in file_types.values()
    ):
        raise ConfigurationError("'file_types' must map rule set names to extension lists")

    defaults = ChunkBudget()
    budget = ChunkBudget(
        max_tokens=_int(chunking, "max_tokens", defaults.max_tokens),
        overlap_tokens=_int(chunking, "overlap_tokens", defaults.overlap_tokens),
        boundary_tolerance=_int(chunking, "boundary_tolerance", defaults.boundary_tolerance),
    )
    config = ReviewConfig(
        budget=budget,
        default_rule_set=normalize_rule_set_name(review.get("default_rule_set", DEFAULT_RULE_SET)),
        file_types={normalize_rule_set_name(name): list(exts) for name, exts in file_types.items()},
        workers=_int(review, "workers", 1),
    )
    return config.validate()


def load_config(path: str | Path | None) -> ReviewConfig:
    """Load settings from a JSON file, or return defaults when path is None.

    Raises:
        ConfigurationError: If the file is unreadable, malformed or invalid
    """
    if path is None:
        return ReviewConfig()
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {exc}") from exc
    return config_from_dict(data)
