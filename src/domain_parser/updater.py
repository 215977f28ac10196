"""Fetch the raw public suffix list and turn it into the processed rule file.

Both files are written to a temporary sibling and renamed into place, so a
store scanning the processed file never sees a half-written copy.
"""

from __future__ import annotations

import os
import tempfile
import time
from pathlib import Path

import requests
import structlog

from .config import Settings
from .datasource import clean_line
from .exceptions import SuffixDataError, SuffixDownloadError

log = structlog.get_logger()


def needs_update(path: Path, interval_seconds: int, now: float | None = None) -> bool:
    """True if ``path`` is missing or was last modified more than ``interval_seconds`` ago."""
    try:
        mtime = path.stat().st_mtime
    except OSError:
        return True
    now = time.time() if now is None else now
    return now - mtime >= interval_seconds


def _atomic_write(destination: Path, data: bytes) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=destination.parent, prefix=f".{destination.name}.")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, destination)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def download_suffix_list(
    url: str,
    destination: Path,
    timeout: float = 10,
    user_agent: str = "domain-parser/1.0",
    session: requests.Session | None = None,
) -> Path:
    """Download the raw suffix list to ``destination``.

    The body is written byte for byte, never decoded.
    """
    http = session or requests.Session()
    log.info("downloading_suffix_list", url=url, destination=str(destination))
    try:
        resp = http.get(url, timeout=timeout, headers={"User-Agent": user_agent})
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SuffixDownloadError(
            f"Failed to download suffix list from {url}: {e}", url, destination
        ) from e

    try:
        _atomic_write(destination, resp.content)
    except OSError as e:
        raise SuffixDataError(
            f"Failed to write suffix list to {destination}", destination
        ) from e

    log.info("suffix_list_downloaded", url=url, size=len(resp.content))
    return destination


def generate_processed_file(raw_path: Path, processed_path: Path) -> int:
    """Write the rules of ``raw_path`` to ``processed_path``, one per line.

    Returns the number of rules written.
    """
    try:
        with open(raw_path, encoding="utf-8") as f:
            rules = [rule for rule in map(clean_line, f) if rule is not None]
    except OSError as e:
        raise SuffixDataError(
            f"Original suffix list file is not readable or does not exist: {raw_path}", raw_path
        ) from e

    try:
        _atomic_write(processed_path, "".join(f"{rule}\n" for rule in rules).encode("utf-8"))
    except OSError as e:
        raise SuffixDataError(
            f"Failed to write processed suffix list file: {processed_path}", processed_path
        ) from e

    log.info("processed_file_generated", path=str(processed_path), rules=len(rules))
    return len(rules)


def _is_older(path: Path, than: Path) -> bool:
    try:
        return path.stat().st_mtime < than.stat().st_mtime
    except OSError:
        return True


def ensure_suffix_data(settings: Settings, session: requests.Session | None = None) -> Path:
    """Refresh the raw list if stale, regenerate the processed file if needed.

    Returns the processed file path.
    """
    raw_path = settings.raw_path
    processed_path = settings.resolved_processed_path

    if needs_update(raw_path, settings.update_interval_seconds):
        download_suffix_list(
            settings.suffix_list_url,
            raw_path,
            timeout=settings.fetch_timeout,
            user_agent=settings.user_agent,
            session=session,
        )

    if not processed_path.exists() or _is_older(processed_path, raw_path):
        generate_processed_file(raw_path, processed_path)

    return processed_path
