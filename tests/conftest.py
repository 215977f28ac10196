from pathlib import Path

import pytest
import structlog

from domain_parser.config import Settings
from domain_parser.datasource import FileSuffixSource
from domain_parser.decomposer import DomainDecomposer
from domain_parser.models import StoreMode
from domain_parser.suffix_store import SuffixStore

PROCESSED_RULES = """\
// sample rules
com

uk
co.uk
*.ck
org
"""

RAW_LIST = """\
// ===BEGIN ICANN DOMAINS===

// com : https://www.verisign.com/
com

// uk : https://www.nominet.uk/
uk
  co.uk
*.ck
// ===END ICANN DOMAINS===
"""


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "public_suffix_list.dat.processed"
    path.write_text(PROCESSED_RULES)
    return path


@pytest.fixture
def source(rules_file: Path) -> FileSuffixSource:
    return FileSuffixSource(rules_file)


@pytest.fixture(params=[StoreMode.LAZY, StoreMode.EAGER])
def store(request, source: FileSuffixSource) -> SuffixStore:
    return SuffixStore(source, mode=request.param)


@pytest.fixture
def decomposer(store: SuffixStore) -> DomainDecomposer:
    return DomainDecomposer(store)


@pytest.fixture
def offline_settings(tmp_path: Path, rules_file: Path) -> Settings:
    """Settings whose processed file already exists; the raw path is never fetched."""
    return Settings(
        suffix_list_path=tmp_path / "public_suffix_list.dat",
        processed_path=rules_file,
    )


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
