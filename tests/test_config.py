"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kyc_screening.config import DEFAULT_DEEPSEEK_API_URL, Settings


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DEEPSEEK_API_KEY",
        "KYC_DEEPSEEK_API_KEY",
        "KYC_DEEPSEEK_MODEL",
        "KYC_COMPLETION_TIMEOUT_SECONDS",
        "KYC_DEFAULT_DATE_RANGE_DAYS",
        "KYC_ADVERSE_MEDIA_TEMPERATURE",
        "KYC_ANALYSIS_MAX_TOKENS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults_without_environment() -> None:
    settings = Settings(_env_file=None)

    assert settings.deepseek_api_key is None
    assert settings.completion_api_configured is False
    assert settings.deepseek_api_url == DEFAULT_DEEPSEEK_API_URL
    assert settings.deepseek_model == "deepseek-chat"
    assert settings.adverse_media_max_tokens == 3000
    assert settings.analysis_max_tokens == 2000
    assert settings.default_date_range_days == 30


def test_settings_accept_prefixed_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KYC_DEEPSEEK_API_KEY", "prefixed-key")

    settings = Settings(_env_file=None)

    assert settings.deepseek_api_key == "prefixed-key"
    assert settings.completion_api_configured is True


def test_settings_accept_plain_deepseek_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEEPSEEK_API_KEY", "plain-key")

    settings = Settings(_env_file=None)

    assert settings.deepseek_api_key == "plain-key"


def test_settings_blank_key_is_not_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KYC_DEEPSEEK_API_KEY", "   ")

    settings = Settings(_env_file=None)

    assert settings.completion_api_configured is False


def test_settings_load_overrides_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KYC_DEEPSEEK_MODEL", "deepseek-reasoner")
    monkeypatch.setenv("KYC_COMPLETION_TIMEOUT_SECONDS", "45")
    monkeypatch.setenv("KYC_DEFAULT_DATE_RANGE_DAYS", "90")

    settings = Settings(_env_file=None)

    assert settings.deepseek_model == "deepseek-reasoner"
    assert settings.completion_timeout_seconds == 45
    assert settings.default_date_range_days == 90


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("KYC_COMPLETION_TIMEOUT_SECONDS", "0"),
        ("KYC_DEFAULT_DATE_RANGE_DAYS", "-5"),
        ("KYC_ADVERSE_MEDIA_TEMPERATURE", "3.5"),
        ("KYC_ANALYSIS_MAX_TOKENS", "0"),
    ],
)
def test_settings_reject_invalid_values(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_reject_non_http_api_url() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, deepseek_api_url="ftp://api.example.test")
