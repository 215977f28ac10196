"""Split hostnames into public suffix, registrable domain and subdomains."""

from __future__ import annotations

from .models import DomainParts
from .suffix_store import SuffixStore
from .suffixes import WILDCARD_LABEL


def normalize_host(host: str) -> str:
    """Trim surrounding whitespace and lowercase. Idempotent."""
    return host.strip().lower()


def split_labels(host: str) -> list[str]:
    return host.split(".")


class DomainDecomposer:
    def __init__(self, store: SuffixStore) -> None:
        self.store = store

    def public_suffix(self, host: str) -> str | None:
        """Return the first known suffix scanning from the full host down to its last label.

        Each step tries the exact candidate, then the same candidate with its
        leftmost label replaced by ``*``. A wildcard hit yields the host minus
        its first label, whatever step it happened on; for a wildcard rule
        matching below the first step this includes more labels than the rule
        covers.
        """
        labels = split_labels(normalize_host(host))
        n = len(labels)

        for i in range(n):
            candidate = ".".join(labels[i:])
            if self.store.is_known_suffix(candidate):
                return candidate

            if n - i > 1:
                wildcard = ".".join([WILDCARD_LABEL, *labels[i + 1 :]])
                if self.store.is_known_suffix(wildcard):
                    return ".".join(labels[1:])

        return None

    def registrable_domain(self, host: str) -> str | None:
        """Public suffix plus one label, or None when there is no label left to add."""
        host = normalize_host(host)
        labels = split_labels(host)

        tld = self.public_suffix(host)
        if tld is None:
            return None

        tld_count = len(split_labels(tld))
        if len(labels) - tld_count - 1 < 0:
            return None

        return ".".join(labels[-(tld_count + 1) :])

    def subdomains(self, host: str) -> list[str]:
        """Labels left of the registrable domain, in host order."""
        host = normalize_host(host)
        domain = self.registrable_domain(host)
        if domain is None:
            return []

        labels = split_labels(host)
        return labels[: len(labels) - len(split_labels(domain))]

    def subdomain(self, host: str) -> str | None:
        # Leftmost label, not the one adjacent to the registrable domain
        subdomains = self.subdomains(host)
        if not subdomains:
            return None
        return subdomains[0]

    def parse(self, host: str) -> DomainParts:
        """Decompose ``host`` in one pass over the suffix lookups."""
        host = normalize_host(host)
        labels = split_labels(host)
        tld = self.public_suffix(host)

        domain = None
        subdomains: list[str] = []
        if tld is not None:
            tld_count = len(split_labels(tld))
            if len(labels) - tld_count - 1 >= 0:
                domain = ".".join(labels[-(tld_count + 1) :])
                subdomains = labels[: len(labels) - tld_count - 1]

        return DomainParts(
            host=host,
            public_suffix=tld,
            domain=domain,
            subdomain=subdomains[0] if subdomains else None,
            subdomains=subdomains,
        )
