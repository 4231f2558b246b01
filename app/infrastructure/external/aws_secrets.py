"""Configuration source backed by AWS Secrets Manager.

A secret holds a JSON object whose keys are Settings field names (any case).
An optional "secrets" list names further secrets that are merged on top, in
order, so shared values (e.g. database credentials) can live in their own
secret. Uses boto3 (sync); only called once at startup.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

NESTED_SECRETS_KEY = "secrets"


class SecretConfigError(RuntimeError):
    """Raised when a configured secret cannot be read or decoded."""


class SecretsManagerSource:
    """Read JSON secrets from AWS Secrets Manager."""

    def __init__(self, region: str | None = None, client: Any = None) -> None:
        self._client = client or boto3.client("secretsmanager", region_name=region)

    def get_secret_value(self, secret_name: str) -> str:
        """Return the secret payload as text (SecretString or decoded SecretBinary)."""
        try:
            result = self._client.get_secret_value(SecretId=secret_name)
        except ClientError as e:
            raise SecretConfigError(f"Unable to read secret {secret_name!r}") from e
        if result.get("SecretString") is not None:
            return result["SecretString"]
        if result.get("SecretBinary") is not None:
            # boto3 returns the blob already base64-decoded
            return bytes(result["SecretBinary"]).decode("utf-8")
        raise SecretConfigError(f"Secret {secret_name!r} has no value")

    def get_json(self, secret_name: str) -> dict[str, Any]:
        logger.debug("Loading secret %r", secret_name)
        payload = self.get_secret_value(secret_name)
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise SecretConfigError(f"Secret {secret_name!r} is not valid JSON") from e
        if not isinstance(data, dict):
            raise SecretConfigError(f"Secret {secret_name!r} must be a JSON object")
        return data

    def load(self, secret_name: str) -> dict[str, Any]:
        """Load the root secret and merge any nested secrets it lists."""
        root = self.get_json(secret_name)
        nested = root.pop(NESTED_SECRETS_KEY, None) or []
        merged = dict(root)
        for name in nested:
            logger.debug("Loading inner secret %r", name)
            merged.update(self.get_json(str(name)))
        return merged


def load_secret_config(
    secret_name: str,
    region: str | None = None,
    source: SecretsManagerSource | None = None,
) -> dict[str, Any]:
    """Return settings overrides from the named secret with lowercase keys."""
    source = source or SecretsManagerSource(region=region)
    values = source.load(secret_name)
    return {key.lower(): value for key, value in values.items()}
