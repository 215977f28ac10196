"""Suffix rule grammar and validation of caller-supplied rules."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .exceptions import InvalidSuffixError

SUFFIX_RE = re.compile(r"^(?:\*|[a-z0-9-]+)(?:\.[a-z0-9-]+)*$", re.IGNORECASE)

WILDCARD_LABEL = "*"


def label_count(suffix: str) -> int:
    """Number of dots in a rule, cached alongside it in the rule set."""
    return suffix.count(".")


def normalize_suffixes(suffixes: Iterable[str]) -> dict[str, int]:
    """Validate caller-supplied rules and map each to its label count.

    Blank entries are dropped. The first entry failing the rule grammar
    raises ``InvalidSuffixError``.
    """
    normalized: dict[str, int] = {}
    for raw in suffixes:
        if not raw:
            continue
        suffix = raw.strip().lower()
        if not SUFFIX_RE.match(suffix):
            raise InvalidSuffixError(suffix)
        normalized[suffix] = label_count(suffix)
    return normalized
