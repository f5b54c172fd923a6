"""Compiled citation grammar shared by the parser components."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import regex

from .constants import LOCATION_GROUPS, LOCATION_PATTERN, REFERENCE_GROUPS, REFERENCE_PATTERN

logger = logging.getLogger(__name__)


class GrammarError(ValueError):
    """Raised when a grammar pattern cannot be used for parsing."""


def _compile(pattern: str, required: Iterable[str], label: str) -> regex.Pattern:
    if not isinstance(pattern, str):
        raise GrammarError(f"{label} pattern must be a string, not {type(pattern).__name__}")
    try:
        compiled = regex.compile(pattern)
    except regex.error as exc:
        raise GrammarError(f"invalid {label} pattern: {exc}") from exc
    missing = [name for name in required if name not in compiled.groupindex]
    if missing:
        raise GrammarError(f"{label} pattern is missing groups: {', '.join(missing)}")
    return compiled


@dataclass(frozen=True)
class Grammar:
    """Reference and location patterns, compiled once at construction.

    Instances are immutable and safe to share between threads.
    """

    reference_pattern: str = REFERENCE_PATTERN
    location_pattern: str = LOCATION_PATTERN
    reference_re: regex.Pattern = field(init=False, repr=False, compare=False)
    location_re: regex.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "reference_re",
            _compile(self.reference_pattern, REFERENCE_GROUPS, "reference"),
        )
        object.__setattr__(
            self,
            "location_re",
            _compile(self.location_pattern, LOCATION_GROUPS, "location"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "reference_pattern": self.reference_pattern,
            "location_pattern": self.location_pattern,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Grammar":
        return cls(
            reference_pattern=data.get("reference_pattern", REFERENCE_PATTERN),
            location_pattern=data.get("location_pattern", LOCATION_PATTERN),
        )


@lru_cache(maxsize=None)
def default_grammar() -> Grammar:
    """Return the process-wide grammar, compiling it on first use."""
    logger.debug("Compiling default citation grammar")
    return Grammar()


def load_grammar(path: Path) -> Grammar:
    """Load grammar patterns from a JSON file, falling back to the defaults."""
    if not path.exists():
        logger.warning("Grammar file %s not found, using the default grammar", path)
        return default_grammar()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise GrammarError(f"cannot read grammar file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise GrammarError(f"grammar file {path} must contain a JSON object")
    return Grammar.from_dict(data)
