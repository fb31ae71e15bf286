# tests/test_config.py
import json

import pytest

from termnav.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TERMNAV_CONFIG", "TERMNAV_ANIMATION_DELAY", "TERMNAV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ═══════════════════════════════════════════════════════════════════
# Defaults
# ═══════════════════════════════════════════════════════════════════

def test_settings_defaults_from_bundled_config():
    settings = Settings()
    assert settings.animation_delay == 2
    assert settings.separator == "-" * 15
    assert settings.log_level == "WARNING"


def test_missing_config_file_keeps_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("TERMNAV_CONFIG", str(tmp_path / "missing.json"))
    settings = Settings()
    assert settings.animation_delay == 2.0
    assert settings.separator == "---------------"


# ═══════════════════════════════════════════════════════════════════
# Config file
# ═══════════════════════════════════════════════════════════════════

def test_settings_loads_config_file(monkeypatch, tmp_path):
    config_file = tmp_path / "termnav.json"
    config_file.write_text(json.dumps({
        "navigation": {"animation_delay": 0.5, "separator": "==="},
        "logging": {"level": "info"},
    }))
    monkeypatch.setenv("TERMNAV_CONFIG", str(config_file))

    settings = Settings()

    assert settings.animation_delay == 0.5
    assert settings.separator == "==="
    assert settings.log_level == "INFO"
    assert settings.config_file == str(config_file)


def test_invalid_config_file_is_ignored(monkeypatch, tmp_path):
    config_file = tmp_path / "termnav.json"
    config_file.write_text("{not json")
    monkeypatch.setenv("TERMNAV_CONFIG", str(config_file))

    settings = Settings()

    assert settings.animation_delay == 2.0


def test_non_object_config_file_is_ignored(monkeypatch, tmp_path):
    config_file = tmp_path / "termnav.json"
    config_file.write_text("[1, 2]")
    monkeypatch.setenv("TERMNAV_CONFIG", str(config_file))

    settings = Settings()

    assert settings.animation_delay == 2.0


# ═══════════════════════════════════════════════════════════════════
# Environment overrides
# ═══════════════════════════════════════════════════════════════════

def test_env_overrides_animation_delay(monkeypatch):
    monkeypatch.setenv("TERMNAV_ANIMATION_DELAY", "0.25")
    settings = Settings()
    assert settings.animation_delay == 0.25


def test_invalid_env_delay_is_ignored(monkeypatch):
    monkeypatch.setenv("TERMNAV_ANIMATION_DELAY", "soon")
    settings = Settings()
    assert settings.animation_delay == 2.0


def test_env_overrides_log_level(monkeypatch):
    monkeypatch.setenv("TERMNAV_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.log_level == "DEBUG"


# ═══════════════════════════════════════════════════════════════════
# Bad values
# ═══════════════════════════════════════════════════════════════════

def _write_config(monkeypatch, tmp_path, data):
    config_file = tmp_path / "termnav.json"
    config_file.write_text(json.dumps(data))
    monkeypatch.setenv("TERMNAV_CONFIG", str(config_file))


def test_non_numeric_file_delay_is_ignored(monkeypatch, tmp_path):
    _write_config(monkeypatch, tmp_path, {"navigation": {"animation_delay": "soon", "separator": "==="}})

    settings = Settings()

    assert settings.animation_delay == 2.0
    assert settings.separator == "==="


@pytest.mark.parametrize("section", ["navigation", "logging"])
@pytest.mark.parametrize("value", [None, "fast", [1, 2]])
def test_non_object_sections_are_ignored(monkeypatch, tmp_path, section, value):
    _write_config(monkeypatch, tmp_path, {section: value})

    settings = Settings()

    assert settings.animation_delay == 2.0
    assert settings.separator == "-" * 15
    assert settings.log_level == "WARNING"


@pytest.mark.parametrize("value", [-1, "nan", "inf", "-inf"])
def test_negative_or_non_finite_file_delay_is_ignored(monkeypatch, tmp_path, value):
    _write_config(monkeypatch, tmp_path, {"navigation": {"animation_delay": value}})

    settings = Settings()

    assert settings.animation_delay == 2.0


@pytest.mark.parametrize("value", ["-1", "nan", "inf"])
def test_negative_or_non_finite_env_delay_is_ignored(monkeypatch, value):
    monkeypatch.setenv("TERMNAV_ANIMATION_DELAY", value)

    settings = Settings()

    assert settings.animation_delay == 2.0


def test_zero_delay_is_allowed(monkeypatch):
    monkeypatch.setenv("TERMNAV_ANIMATION_DELAY", "0")
    settings = Settings()
    assert settings.animation_delay == 0.0
