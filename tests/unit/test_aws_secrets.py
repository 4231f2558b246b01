"""Tests for the AWS Secrets Manager configuration source (fake client)."""

import json

import pytest

pytest.importorskip("boto3")

from botocore.exceptions import ClientError  # noqa: E402

from app.infrastructure.external.aws_secrets import (  # noqa: E402
    SecretConfigError,
    SecretsManagerSource,
    load_secret_config,
)


class FakeSecretsClient:
    def __init__(self, secrets: dict[str, dict]):
        self.secrets = secrets
        self.requested: list[str] = []

    def get_secret_value(self, SecretId: str) -> dict:
        self.requested.append(SecretId)
        if SecretId not in self.secrets:
            raise ClientError(
                {"Error": {"Code": "ResourceNotFoundException", "Message": "missing"}},
                "GetSecretValue",
            )
        return self.secrets[SecretId]


def _string(value) -> dict:
    return {"SecretString": json.dumps(value)}


def test_load_merges_nested_secrets_in_order() -> None:
    client = FakeSecretsClient(
        {
            "root": _string({"SECRET_KEY": "root-key", "secrets": ["db", "extra"]}),
            "db": _string({"DATABASE_URL": "postgresql+asyncpg://db/devices"}),
            "extra": _string({"SECRET_KEY": "extra-key"}),
        }
    )
    config = load_secret_config("root", source=SecretsManagerSource(client=client))
    assert config == {
        "secret_key": "extra-key",
        "database_url": "postgresql+asyncpg://db/devices",
    }
    assert client.requested == ["root", "db", "extra"]


def test_secret_binary_is_decoded() -> None:
    client = FakeSecretsClient({"bin": {"SecretBinary": b'{"DEBUG": true}'}})
    assert SecretsManagerSource(client=client).load("bin") == {"DEBUG": True}


def test_missing_secret() -> None:
    source = SecretsManagerSource(client=FakeSecretsClient({}))
    with pytest.raises(SecretConfigError):
        source.load("nope")


def test_secret_must_be_json_object() -> None:
    client = FakeSecretsClient(
        {"list": _string([1, 2]), "text": {"SecretString": "not json"}, "empty": {}}
    )
    source = SecretsManagerSource(client=client)
    for name in ("list", "text", "empty"):
        with pytest.raises(SecretConfigError):
            source.load(name)
