"""Membership index over public-suffix rules.

A store answers one question: is this exact string a known suffix rule? In
eager mode every rule is loaded up front and lookups are pure dict hits. In
lazy mode the store starts with the caller's seed rules and scans the backing
data on each miss, memoizing rules as they are confirmed. A handful of
lookups for one hostname then costs a few short scans instead of a full load,
and repeated lookups for shared ancestors (``co.uk``, ``uk``) are O(1).

The rule set only ever grows. A store is not safe for unsynchronized use from
several threads; give each worker its own store or lock around lookups.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

import structlog

from .datasource import SuffixSource
from .models import StoreMode
from .suffixes import label_count, normalize_suffixes

log = structlog.get_logger()


class SuffixStore:
    def __init__(
        self,
        source: SuffixSource,
        seeds: Iterable[str] = (),
        mode: StoreMode = StoreMode.LAZY,
    ) -> None:
        self._source = source
        self._mode = StoreMode(mode)
        self._rules: dict[str, int] = normalize_suffixes(seeds)
        self._preloaded = False
        if self._mode is StoreMode.EAGER:
            self.preload_all()

    @property
    def mode(self) -> StoreMode:
        return self._mode

    @property
    def source(self) -> SuffixSource:
        return self._source

    @property
    def suffixes(self) -> Mapping[str, int]:
        """Read-only view of the known rules and their label counts."""
        return MappingProxyType(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, candidate: object) -> bool:
        return isinstance(candidate, str) and self.contains_exact(candidate)

    def contains_exact(self, candidate: str) -> bool:
        """True if ``candidate`` is already known. Never touches the backing data."""
        return candidate.lower() in self._rules

    def is_known_suffix(self, candidate: str) -> bool:
        """True if ``candidate`` is a known rule, scanning the backing data in lazy mode."""
        candidate = candidate.lower()
        if not candidate:
            return False
        if candidate in self._rules:
            return True
        if self._preloaded:
            # Everything the backing data holds is already in memory
            return False

        log.debug("suffix_scan", candidate=candidate, source=self._source.describe())
        for rule in self._source.iter_rules():
            rule = rule.lower()
            if rule == candidate:
                self._rules[rule] = label_count(rule)
                log.debug("suffix_memoized", suffix=rule, known=len(self._rules))
                return True
        return False

    def preload_all(self) -> None:
        """Load every rule from the backing data. Later calls are no-ops.

        A lazy store becomes eager: misses no longer scan.
        """
        if self._preloaded:
            return
        before = len(self._rules)
        for rule in self._source.iter_rules():
            rule = rule.lower()
            self._rules[rule] = label_count(rule)
        self._preloaded = True
        self._mode = StoreMode.EAGER
        log.debug(
            "suffix_store_preloaded",
            source=self._source.describe(),
            loaded=len(self._rules) - before,
            total=len(self._rules),
        )
