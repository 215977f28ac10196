from __future__ import annotations

from collections.abc import Iterable

import structlog

from .decomposer import DomainDecomposer, normalize_host
from .models import DomainGroup

log = structlog.get_logger()


def split_matched(
    hosts: Iterable[str], decomposer: DomainDecomposer
) -> tuple[list[str], list[str]]:
    """Partition normalized hosts into those with and without a registrable domain."""
    matched: list[str] = []
    unmatched: list[str] = []
    for host in hosts:
        host = normalize_host(host)
        if decomposer.registrable_domain(host) is None:
            unmatched.append(host)
        else:
            matched.append(host)
    log.info("split_matched", matched=len(matched), unmatched=len(unmatched))
    return matched, unmatched


def group_by_registrable_domain(
    hosts: Iterable[str], decomposer: DomainDecomposer, keep_unmatched: bool = False
) -> list[DomainGroup]:
    """Group hosts by registrable domain, preserving first-seen order.

    Hosts without a registrable domain are dropped unless ``keep_unmatched``,
    in which case they are collected in a single group with ``domain=None``.
    """
    groups: dict[str, DomainGroup] = {}
    unmatched = DomainGroup(domain=None)
    total = 0

    for host in hosts:
        total += 1
        host = normalize_host(host)
        domain = decomposer.registrable_domain(host)
        if domain is None:
            unmatched.hosts.append(host)
            continue
        groups.setdefault(domain, DomainGroup(domain=domain)).hosts.append(host)

    result = list(groups.values())
    if keep_unmatched and unmatched.hosts:
        result.append(unmatched)

    log.info(
        "grouped_by_registrable_domain",
        hosts=total,
        groups=len(groups),
        unmatched=len(unmatched.hosts),
    )
    return result
