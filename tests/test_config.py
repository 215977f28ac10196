from pathlib import Path

import pytest

from domain_parser import yaml_config
from domain_parser.config import Settings
from domain_parser.exceptions import ConfigurationError
from domain_parser.yaml_config import get_defaults, get_output_strings, get_seed_suffixes


class TestSettings:
    def test_bundled_defaults(self) -> None:
        s = Settings()
        assert s.suffix_list_url == "https://publicsuffix.org/list/public_suffix_list.dat"
        assert s.update_interval_seconds == 259200
        assert s.memory_cache is True

    def test_processed_path_follows_raw_path(self, tmp_path: Path) -> None:
        s = Settings(suffix_list_path=tmp_path / "psl.dat")
        assert s.resolved_processed_path == tmp_path / "psl.dat.processed"

    def test_home_is_expanded(self) -> None:
        s = Settings(suffix_list_path="~/psl.dat")
        assert s.raw_path == Path.home() / "psl.dat"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("DOMAIN_PARSER_FETCH_TIMEOUT", "3.5")
        monkeypatch.setenv("DOMAIN_PARSER_PROCESSED_PATH", str(tmp_path / "rules"))
        s = Settings()
        assert s.fetch_timeout == 3.5
        assert s.resolved_processed_path == tmp_path / "rules"


def test_bundled_config_sections() -> None:
    strings = get_output_strings()
    assert strings["result_header"] == "Domain Parsing Result:"
    assert get_seed_suffixes() == []


class TestConfigFile:
    @pytest.fixture
    def config_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
        path = tmp_path / "config.yml"
        monkeypatch.setattr(yaml_config, "_CONFIG_PATH", path)
        monkeypatch.setattr(yaml_config, "_cache", None)
        return path

    def test_missing_file(self, config_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="config.yml"):
            get_output_strings()
        with pytest.raises(ConfigurationError, match="not readable"):
            get_seed_suffixes()

    def test_missing_file_falls_back_to_default_settings(self, config_path: Path) -> None:
        assert get_defaults() == {}

    def test_invalid_yaml(self, config_path: Path) -> None:
        config_path.write_text("output: [unclosed\n")
        with pytest.raises(ConfigurationError, match="not valid YAML"):
            get_output_strings()

    def test_not_a_mapping(self, config_path: Path) -> None:
        config_path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="must hold a mapping"):
            get_seed_suffixes()

    def test_missing_output_section(self, config_path: Path) -> None:
        config_path.write_text("seed_suffixes: [internal]\n")
        assert get_seed_suffixes() == ["internal"]
        with pytest.raises(ConfigurationError, match="no 'output' section"):
            get_output_strings()
