from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

import structlog
from jinja2 import Environment, FileSystemLoader

from .models import DomainGroup, DomainParts
from .yaml_config import get_output_strings

log = structlog.get_logger()


class OutputHandler(ABC):
    @abstractmethod
    def emit_result(self, parts: DomainParts) -> None: ...

    @abstractmethod
    def emit_groups(self, groups: list[DomainGroup]) -> None: ...


class StdoutHandler(OutputHandler):
    """Plain-text report rendered from the bundled templates."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        template_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def _write(self, text: str) -> None:
        (self.stream or sys.stdout).write(text)

    def emit_result(self, parts: DomainParts) -> None:
        template = self.env.get_template("result.txt")
        self._write(template.render(parts=parts, strings=get_output_strings()))

    def emit_groups(self, groups: list[DomainGroup]) -> None:
        template = self.env.get_template("groups.txt")
        self._write(template.render(groups=groups, strings=get_output_strings()))


class JsonHandler(OutputHandler):
    """One JSON document per line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout)

    def emit_result(self, parts: DomainParts) -> None:
        self._write(parts.model_dump_json())

    def emit_groups(self, groups: list[DomainGroup]) -> None:
        for group in groups:
            self._write(group.model_dump_json())
        log.debug("groups_emitted", count=len(groups))
