"""Tests for token issue and verification (classification of every failure)."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt
from pydantic import SecretStr

from app.domain.enums import Role, TokenType
from app.domain.exceptions import AuthenticationError, ErrorKind
from app.infrastructure.security.jwt import (
    create_access_token,
    create_refresh_token,
    decode_token,
    principal_from_claims,
)


def _kind_of(token: str, settings, expected_type: TokenType = TokenType.ACCESS) -> ErrorKind:
    with pytest.raises(AuthenticationError) as exc_info:
        decode_token(token, settings, expected_type)
    return exc_info.value.kind


def test_access_token_round_trip(settings) -> None:
    issued = create_access_token(settings, 42)
    claims = decode_token(issued.token, settings)
    assert claims.account_id == 42
    assert claims.role == Role.ADMIN.value
    assert claims.typ is TokenType.ACCESS
    assert issued.expires_at.tzinfo is not None


def test_default_lifetimes(settings) -> None:
    now = datetime.now(UTC)
    access = create_access_token(settings, 1, now=now)
    refresh = create_refresh_token(settings, 1, now=now)
    assert access.expires_at - now == timedelta(minutes=settings.access_token_expire_minutes)
    assert refresh.expires_at - now == timedelta(minutes=settings.refresh_token_expire_minutes)


def test_principal_from_claims(settings) -> None:
    issued = create_access_token(settings, 7, expires_delta=timedelta(minutes=5))
    principal = principal_from_claims(decode_token(issued.token, settings))
    assert principal.account_id == 7
    assert principal.expires_at - principal.issued_at == timedelta(minutes=5)


def test_garbage_is_malformed(settings) -> None:
    assert _kind_of("not-a-jwt", settings) is ErrorKind.MALFORMED_TOKEN


def test_other_secret_is_invalid(settings) -> None:
    other = settings.model_copy(update={"secret_key": SecretStr("another-secret")})
    issued = create_access_token(other, 1)
    assert _kind_of(issued.token, settings) is ErrorKind.INVALID_TOKEN


def test_expired_token(settings) -> None:
    issued = create_access_token(settings, 1, expires_delta=timedelta(seconds=-30))
    assert _kind_of(issued.token, settings) is ErrorKind.EXPIRED_TOKEN


def test_refresh_token_is_not_an_access_token(settings) -> None:
    issued = create_refresh_token(settings, 1)
    assert _kind_of(issued.token, settings) is ErrorKind.INVALID_CLAIMS
    assert decode_token(issued.token, settings, TokenType.REFRESH).account_id == 1


def test_wrong_issuer_is_invalid_claims(settings) -> None:
    other = settings.model_copy(update={"jwt_issuer": "someone-else"})
    issued = create_access_token(other, 1)
    assert _kind_of(issued.token, settings) is ErrorKind.INVALID_CLAIMS


def test_non_numeric_subject_is_invalid_claims(settings) -> None:
    now = int(datetime.now(UTC).timestamp())
    token = jwt.encode(
        {
            "sub": "alice",
            "role": "ADMIN",
            "typ": "access",
            "iss": settings.jwt_issuer,
            "iat": now,
            "exp": now + 600,
        },
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    assert _kind_of(token, settings) is ErrorKind.INVALID_CLAIMS
