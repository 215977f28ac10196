from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class StoreMode(StrEnum):
    EAGER = "eager"
    LAZY = "lazy"


class DomainParts(BaseModel):
    """Full decomposition of a single normalized host."""

    host: str
    public_suffix: str | None = None
    domain: str | None = None
    subdomain: str | None = None
    subdomains: list[str] = Field(default_factory=list)

    @property
    def matched(self) -> bool:
        return self.domain is not None


class DomainGroup(BaseModel):
    """Hosts sharing one registrable domain."""

    domain: str | None
    hosts: list[str] = Field(default_factory=list)
