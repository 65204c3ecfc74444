import pytest
from pydantic import ValidationError

from core.config import DEFAULT_TARGET_URL, AppSettings


def test_defaults():
    settings = AppSettings()

    assert settings.target_url == DEFAULT_TARGET_URL
    assert settings.http_timeout_seconds == 10.0
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_FETCHER_HTTP_TIMEOUT_SECONDS", "3")
    monkeypatch.setenv("API_FETCHER_LOG_LEVEL", "debug")

    settings = AppSettings()

    assert settings.http_timeout_seconds == 3.0
    assert settings.log_level == "DEBUG"


def test_rejects_bad_values():
    with pytest.raises(ValidationError):
        AppSettings(http_timeout_seconds=0)
    with pytest.raises(ValidationError):
        AppSettings(log_level="chatty")
