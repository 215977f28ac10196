"""Load defaults, seed suffixes and output strings from config.yml."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from .exceptions import ConfigurationError

# Bundled next to this module; DOMAIN_PARSER_CONFIG_PATH points at a site-specific copy
_CONFIG_PATH = Path(
    os.environ.get("DOMAIN_PARSER_CONFIG_PATH", Path(__file__).parent / "config.yml")
)

_cache: dict | None = None


def _load() -> dict:
    global _cache
    if _cache is None:
        try:
            with open(_CONFIG_PATH) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Config file not readable: {_CONFIG_PATH}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Config file is not valid YAML: {_CONFIG_PATH}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must hold a mapping: {_CONFIG_PATH}")
        _cache = data
    return _cache


def _section(name: str) -> dict:
    section = _load().get(name)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config file has no '{name}' section: {_CONFIG_PATH}")
    return section


def get_defaults() -> dict:
    """Return the defaults section, or empty dict if config is unavailable.

    Read while ``config`` is imported, so problems surface later from the
    other getters instead.
    """
    try:
        return _load().get("defaults") or {}
    except ConfigurationError:
        return {}


def get_seed_suffixes() -> list[str]:
    return list(_load().get("seed_suffixes") or [])


def get_output_strings() -> dict[str, str]:
    return _section("output")
