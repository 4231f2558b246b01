"""Tests for Settings validation and the secret overlay in load_settings."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings, load_settings


def _settings(**overrides) -> Settings:
    values = {
        "_env_file": None,
        "database_url": "sqlite+aiosqlite:///./config-test.db",
        "secret_key": "k",
    }
    values.update(overrides)
    return Settings(**values)


def test_defaults() -> None:
    s = _settings()
    assert s.default_page_size == 10
    assert s.internal_error_status == 400
    assert s.api_prefix == "/api"
    assert s.max_page_size is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"database_url": ""},
        {"secret_key": ""},
        {"default_page_size": -1},
        {"max_page_size": 0},
        {"db_operation_timeout_seconds": 0},
    ],
)
def test_invalid_settings_rejected(overrides) -> None:
    with pytest.raises(ValidationError):
        _settings(**overrides)


def test_normalized_public_routes() -> None:
    s = _settings(public_routes=[" /Login/ ", "", "/", "/health"])
    assert s.normalized_public_routes() == frozenset({"/login", "/", "/health"})


def test_load_settings_without_secret(monkeypatch) -> None:
    monkeypatch.delenv("SECRET_NAME", raising=False)
    s = load_settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///./x.db",
        secret_key="plain",
    )
    assert s.secret_key.get_secret_value() == "plain"


def test_load_settings_overlays_secret(monkeypatch) -> None:
    pytest.importorskip("boto3")
    from app.infrastructure.external import aws_secrets

    calls = []

    def fake_load(secret_name, region=None, source=None):
        calls.append((secret_name, region))
        return {
            "secret_key": "from-secret",
            "database_url": "sqlite+aiosqlite:///./secret.db",
            "default_page_size": 20,
        }

    monkeypatch.setattr(aws_secrets, "load_secret_config", fake_load)
    s = load_settings(
        _env_file=None,
        secret_name="devices/app",
        aws_region="eu-west-1",
        default_page_size=5,
    )
    assert calls == [("devices/app", "eu-west-1")]
    assert s.secret_key.get_secret_value() == "from-secret"
    assert s.database_url == "sqlite+aiosqlite:///./secret.db"
    # explicit overrides win over the secret
    assert s.default_page_size == 5
