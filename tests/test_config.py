"""Settings loaded from the environment."""

from __future__ import annotations

from lei_validator.config import DEFAULT_LOG_LEVEL, get_settings


def test_default_log_level(monkeypatch) -> None:
    monkeypatch.delenv("LEI_VALIDATOR_LOG_LEVEL", raising=False)
    monkeypatch.setattr("lei_validator.config.load_dotenv", lambda: False)
    assert get_settings().log_level == DEFAULT_LOG_LEVEL


def test_log_level_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LEI_VALIDATOR_LOG_LEVEL", " debug ")
    assert get_settings().log_level == "DEBUG"


def test_unknown_log_level_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("LEI_VALIDATOR_LOG_LEVEL", "LOUD")
    assert get_settings().log_level == DEFAULT_LOG_LEVEL
