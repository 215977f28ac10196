"""Line-oriented suffix rule data backing a SuffixStore."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from .exceptions import SuffixDataError

COMMENT_PREFIX = "//"


def clean_line(line: str) -> str | None:
    """Return the rule on a line, or None for blank and comment lines."""
    line = line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None
    return line


class SuffixSource(ABC):
    """Backend-agnostic interface for reading suffix rules.

    Implementations:
        - FileSuffixSource: a processed rule file on disk, one rule per line
    """

    @abstractmethod
    def iter_rules(self) -> Iterator[str]:
        """Yield cleaned rules in file order. Missing data raises SuffixDataError."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable location used in diagnostics."""


class FileSuffixSource(SuffixSource):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def iter_rules(self) -> Iterator[str]:
        # Opened per scan: the file may have been replaced since the last one.
        try:
            f = open(self.path, encoding="utf-8")
        except OSError as e:
            raise SuffixDataError(
                f"Processed suffix file not found or not readable: {self.path}", self.path
            ) from e
        with f:
            for line in f:
                rule = clean_line(line)
                if rule is not None:
                    yield rule

    def describe(self) -> str:
        return str(self.path)
