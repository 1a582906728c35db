"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from macro_lookup.domain.items import BareItemDefault, UnknownUnitPolicy
from macro_lookup.errors import UsageError

CONFIG_FILE_ENV = "MACRO_LOOKUP_CONFIG"
API_KEY_ENV = "FDC_API_KEY"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and env files."""

    fdc_api_key: str | None = None
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_data_types: list[str] = ["Foundation", "SR Legacy", "Survey (FNDDS)"]
    request_timeout_seconds: float = 15
    bare_item_default: BareItemDefault = BareItemDefault.GRAMS
    default_grams_per_unit: float = 100.0
    unknown_unit_policy: UnknownUnitPolicy = UnknownUnitPolicy.DEFAULT
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def default_config_file() -> Path:
    """Return the per-user config file path."""
    override = os.getenv(CONFIG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    base = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "macro-lookup" / "config.env"


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings; a local .env overrides the per-user config file."""
    path = config_file or default_config_file()
    return Settings(_env_file=(path, ".env"))


def require_api_key(settings: Settings) -> str:
    """Return the FDC API key or raise a usage error when it is missing."""
    api_key = (settings.fdc_api_key or "").strip()
    if not api_key:
        raise UsageError(
            "No FoodData Central API key configured. "
            "Run `macro-lookup --setup <API_KEY>` or set FDC_API_KEY."
        )
    return api_key


def save_api_key(api_key: str, config_file: Path | None = None) -> Path:
    """Store the API key in the config file, keeping other entries."""
    cleaned = api_key.strip()
    if not cleaned:
        raise UsageError("API key must not be empty")
    path = config_file or default_config_file()
    lines: list[str] = []
    if path.exists():
        lines = [
            line
            for line in path.read_text(encoding="utf-8").splitlines()
            if not line.strip().startswith(f"{API_KEY_ENV}=")
        ]
    lines.append(f"{API_KEY_ENV}={cleaned}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
