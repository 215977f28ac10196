"""Error types raised by domain-parser.

A hostname with no matching suffix rule is not an error: lookups return
``None`` or an empty list. Everything here is a configuration problem the
caller has to fix.
"""

from __future__ import annotations

from pathlib import Path


class DomainParserError(Exception):
    """Base class for all domain-parser errors."""


class ConfigurationError(DomainParserError):
    """Fatal setup problem. Never retried."""


class SuffixDataError(ConfigurationError):
    """Backing suffix data is missing, unreadable or cannot be produced."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class SuffixDownloadError(SuffixDataError):
    """The raw suffix list could not be fetched from its remote source."""

    def __init__(self, message: str, url: str, path: Path | str | None = None) -> None:
        super().__init__(message, path)
        self.url = url


class InvalidSuffixError(ConfigurationError, ValueError):
    """A caller-supplied suffix rule does not match the rule grammar."""

    def __init__(self, suffix: str) -> None:
        super().__init__(f"Invalid suffix format: {suffix}")
        self.suffix = suffix
