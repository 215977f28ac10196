"""Ready-to-use parser wiring suffix data, store and decomposer together."""

from __future__ import annotations

from collections.abc import Iterable

import requests
import structlog

from .config import Settings
from .config import settings as default_settings
from .datasource import FileSuffixSource
from .decomposer import DomainDecomposer
from .exceptions import SuffixDataError
from .models import DomainParts, StoreMode
from .suffix_store import SuffixStore
from .suffixes import normalize_suffixes
from .updater import ensure_suffix_data
from .yaml_config import get_seed_suffixes

log = structlog.get_logger()


class DomainParser:
    """Hostname decomposition backed by the public suffix list.

    ``memory_cache`` selects an eager store (whole list loaded now) over a
    lazy one (scanned per lookup). ``suffix_set`` seeds extra rules and is
    validated before any file is touched. With ``refresh`` the raw list is
    downloaded when stale and the processed file regenerated when needed.

    Long-lived callers refresh with ``reload()``, which builds a new store and
    swaps it in whole; the store serving lookups is never rebuilt in place.
    """

    def __init__(
        self,
        memory_cache: bool = False,
        suffix_set: Iterable[str] = (),
        settings: Settings | None = None,
        refresh: bool = True,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self.memory_cache = memory_cache
        self.refresh = refresh
        self._session = session
        self._seeds = list(
            normalize_suffixes([*get_seed_suffixes(), *suffix_set])
        )
        self._decomposer = DomainDecomposer(self._build_store())

    @property
    def mode(self) -> StoreMode:
        return StoreMode.EAGER if self.memory_cache else StoreMode.LAZY

    @property
    def store(self) -> SuffixStore:
        return self._decomposer.store

    def _build_store(self) -> SuffixStore:
        if self.refresh:
            path = ensure_suffix_data(self.settings, session=self._session)
        else:
            path = self.settings.resolved_processed_path
        if not path.is_file():
            raise SuffixDataError(
                f"Processed suffix file not found or not readable: {path}", path
            )
        store = SuffixStore(FileSuffixSource(path), self._seeds, self.mode)
        log.info("suffix_store_ready", path=str(path), mode=self.mode, known=len(store))
        return store

    def reload(self) -> SuffixStore:
        """Build a fresh store and swap it in. Returns the new store."""
        store = self._build_store()
        self._decomposer = DomainDecomposer(store)
        return store

    def public_suffix(self, host: str) -> str | None:
        return self._decomposer.public_suffix(host)

    def registrable_domain(self, host: str) -> str | None:
        return self._decomposer.registrable_domain(host)

    def subdomain(self, host: str) -> str | None:
        return self._decomposer.subdomain(host)

    def subdomains(self, host: str) -> list[str]:
        return self._decomposer.subdomains(host)

    def parse(self, host: str) -> DomainParts:
        return self._decomposer.parse(host)

    @property
    def decomposer(self) -> DomainDecomposer:
        return self._decomposer
