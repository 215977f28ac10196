from pathlib import Path

from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "DOMAIN_PARSER_"}

    # Remote source and refresh timer
    suffix_list_url: str = _defaults.get(
        "suffix_list_url", "https://publicsuffix.org/list/public_suffix_list.dat"
    )
    update_interval_seconds: int = _defaults.get("update_interval_seconds", 259200)
    fetch_timeout: float = _defaults.get("fetch_timeout", 10)
    user_agent: str = _defaults.get("user_agent", "domain-parser/1.0")

    # Local files
    suffix_list_path: Path = Path(
        _defaults.get("suffix_list_path", "~/.cache/domain-parser/public_suffix_list.dat")
    )
    processed_path: Path | None = _defaults.get("processed_path")

    # Store behavior
    memory_cache: bool = _defaults.get("memory_cache", True)

    # Logging
    log_level: str = _defaults.get("log_level", "WARNING")
    log_json: bool = _defaults.get("log_json", True)

    @property
    def raw_path(self) -> Path:
        return self.suffix_list_path.expanduser()

    @property
    def resolved_processed_path(self) -> Path:
        """Processed rule file; ``<suffix_list_path>.processed`` unless set explicitly."""
        if self.processed_path is not None:
            return Path(self.processed_path).expanduser()
        raw = self.raw_path
        return raw.with_name(raw.name + ".processed")


settings = Settings()
