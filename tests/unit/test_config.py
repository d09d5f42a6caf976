"""Tests for Settings loading and validation."""

import pytest
from pydantic import ValidationError

from usertasks.core.config import Settings, get_settings


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setenv("UTB_BASE_URL", "http://bridge.test/")
    monkeypatch.setenv("UTB_TENANT_ID", "acme")
    return monkeypatch


def test_settings_read_prefixed_env(env: pytest.MonkeyPatch) -> None:
    env.setenv("UTB_ACCESS_TOKEN", "secret-token")
    env.setenv("UTB_REQUEST_TIMEOUT_SECONDS", "5")
    settings = Settings(_env_file=None)
    assert settings.base_url == "http://bridge.test"
    assert settings.tenant_id == "acme"
    assert settings.access_token is not None
    assert settings.access_token.get_secret_value() == "secret-token"
    assert "secret-token" not in repr(settings)
    assert settings.request_timeout_seconds == 5.0
    assert settings.telemetry_enabled is False


def test_missing_base_url_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("UTB_BASE_URL", raising=False)
    monkeypatch.setenv("UTB_TENANT_ID", "acme")
    with pytest.raises(ValidationError, match="UTB_BASE_URL"):
        Settings(_env_file=None)


def test_missing_tenant_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UTB_BASE_URL", "http://bridge.test")
    monkeypatch.delenv("UTB_TENANT_ID", raising=False)
    with pytest.raises(ValidationError, match="UTB_TENANT_ID"):
        Settings(_env_file=None)


def test_otlp_exporter_needs_endpoint(env: pytest.MonkeyPatch) -> None:
    env.setenv("UTB_TELEMETRY_EXPORTER", "otlp")
    with pytest.raises(ValidationError, match="OTLP_ENDPOINT"):
        Settings(_env_file=None)


def test_unknown_exporter_is_rejected(env: pytest.MonkeyPatch) -> None:
    env.setenv("UTB_TELEMETRY_EXPORTER", "zipkin")
    with pytest.raises(ValidationError, match="telemetry_exporter"):
        Settings(_env_file=None)


def test_non_positive_timeout_is_rejected(env: pytest.MonkeyPatch) -> None:
    env.setenv("UTB_REQUEST_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError, match="positive"):
        Settings(_env_file=None)


def test_get_settings_is_cached(env: pytest.MonkeyPatch) -> None:
    first = get_settings()
    assert get_settings() is first
    get_settings.cache_clear()
    env.setenv("UTB_TENANT_ID", "other")
    assert get_settings().tenant_id == "other"
