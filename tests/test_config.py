from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_defaults():
    settings = AppSettings()

    assert settings.log_level == "WARNING"
    assert settings.show_banner is True
    assert settings.sample_values == ["a", "b", "c"]
    assert settings.node_default_value == "(empty)"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PROTOPLAY_SAMPLE_VALUES", '["x", "y"]')
    monkeypatch.setenv("PROTOPLAY_LOG_LEVEL", "debug")
    monkeypatch.setenv("PROTOPLAY_SHOW_BANNER", "false")

    settings = AppSettings()

    assert settings.sample_values == ["x", "y"]
    assert settings.log_level == "DEBUG"
    assert settings.show_banner is False


def test_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("PROTOPLAY_NODE_DEFAULT_VALUE=n/a\n", encoding="utf-8")

    assert AppSettings().node_default_value == "n/a"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("PROTOPLAY_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        AppSettings()


def test_empty_sample_values_are_rejected(monkeypatch):
    monkeypatch.setenv("PROTOPLAY_SAMPLE_VALUES", "[]")

    with pytest.raises(ValidationError):
        AppSettings()
