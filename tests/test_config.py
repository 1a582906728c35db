"""Tests for configuration helpers."""

from pathlib import Path

import pytest

from macro_lookup.config import (
    Settings,
    default_config_file,
    load_settings,
    require_api_key,
    save_api_key,
)
from macro_lookup.domain.items import BareItemDefault, UnknownUnitPolicy
from macro_lookup.errors import UsageError


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FDC_API_KEY", raising=False)
    monkeypatch.delenv("MACRO_LOOKUP_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


def test_default_config_file_uses_xdg(tmp_path: Path) -> None:
    assert default_config_file() == tmp_path / "xdg" / "macro-lookup" / "config.env"


def test_default_config_file_override(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("MACRO_LOOKUP_CONFIG", str(tmp_path / "custom.env"))

    assert default_config_file() == tmp_path / "custom.env"


def test_save_api_key_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.env"
    path.parent.mkdir()
    path.write_text("FDC_API_KEY=old\nLOG_LEVEL=INFO\n", encoding="utf-8")

    saved = save_api_key("  new-key ", path)
    settings = load_settings(path)

    assert saved == path
    assert path.read_text(encoding="utf-8") == "LOG_LEVEL=INFO\nFDC_API_KEY=new-key\n"
    assert settings.fdc_api_key == "new-key"
    assert settings.log_level == "INFO"


def test_save_api_key_rejects_blank(tmp_path: Path) -> None:
    with pytest.raises(UsageError):
        save_api_key("   ", tmp_path / "config.env")


def test_load_settings_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "missing.env")

    assert settings.fdc_api_key is None
    assert settings.bare_item_default is BareItemDefault.GRAMS
    assert settings.unknown_unit_policy is UnknownUnitPolicy.DEFAULT
    assert settings.default_grams_per_unit == 100.0


def test_environment_overrides_config_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    path = tmp_path / "config.env"
    save_api_key("file-key", path)
    monkeypatch.setenv("FDC_API_KEY", "env-key")
    monkeypatch.setenv("UNKNOWN_UNIT_POLICY", "strict")

    settings = load_settings(path)

    assert settings.fdc_api_key == "env-key"
    assert settings.unknown_unit_policy is UnknownUnitPolicy.STRICT


def test_require_api_key() -> None:
    assert require_api_key(Settings(_env_file=None, fdc_api_key=" key ")) == "key"
    with pytest.raises(UsageError):
        require_api_key(Settings(_env_file=None))
