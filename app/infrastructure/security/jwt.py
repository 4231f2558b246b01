"""JWT creation and verification for access and refresh tokens.

Tokens are HS256 by default, carry the account id as "sub", the role, iat,
exp, the issuer and a "typ" claim separating access from refresh tokens.
Settings are passed in explicitly (from the application context).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, cast

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError
from pydantic import BaseModel, ValidationError, field_validator

from app.core.config import Settings
from app.domain.enums import Role, TokenType
from app.domain.exceptions import AuthenticationError, ErrorKind
from app.domain.value_objects.principal import Principal
from app.shared.utils.datetime import from_timestamp_utc, utc_now


@dataclass(frozen=True)
class IssuedToken:
    """Encoded token plus its expiry instant."""

    token: str
    expires_at: datetime


class TokenClaims(BaseModel):
    """Expected shape of a decoded token payload."""

    sub: str
    role: str
    iat: int
    exp: int
    typ: TokenType

    @field_validator("sub")
    @classmethod
    def sub_is_account_id(cls, value: str) -> str:
        if not value.isdigit() or int(value) <= 0:
            raise ValueError("sub must be a positive integer account id")
        return value

    @property
    def account_id(self) -> int:
        return int(self.sub)


def create_token(
    settings: Settings,
    account_id: int,
    token_type: TokenType,
    role: str = Role.ADMIN.value,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> IssuedToken:
    """Create a signed token for account_id.

    Args:
        settings: Secret, algorithm, issuer and default lifetimes.
        account_id: Account the token identifies (stored as "sub").
        token_type: ACCESS or REFRESH.
        role: Role claim.
        expires_delta: Optional TTL; else the configured lifetime for token_type.
        now: Issue instant (defaults to the current UTC time).

    Returns:
        IssuedToken with the encoded JWT and its expiry.
    """
    issued_at = now or utc_now()
    if expires_delta is None:
        minutes = (
            settings.access_token_expire_minutes
            if token_type is TokenType.ACCESS
            else settings.refresh_token_expire_minutes
        )
        expires_delta = timedelta(minutes=minutes)
    expires_at = issued_at + expires_delta
    claims: dict[str, Any] = {
        "sub": str(account_id),
        "role": role,
        "typ": token_type.value,
        "iss": settings.jwt_issuer,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return IssuedToken(token=cast(str, encoded), expires_at=expires_at)


def create_access_token(
    settings: Settings,
    account_id: int,
    role: str = Role.ADMIN.value,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> IssuedToken:
    return create_token(settings, account_id, TokenType.ACCESS, role, expires_delta, now)


def create_refresh_token(
    settings: Settings,
    account_id: int,
    role: str = Role.ADMIN.value,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> IssuedToken:
    return create_token(settings, account_id, TokenType.REFRESH, role, expires_delta, now)


def decode_token(
    token: str,
    settings: Settings,
    expected_type: TokenType = TokenType.ACCESS,
) -> TokenClaims:
    """Verify and decode a token, classifying every failure.

    Malformed encoding → MalformedToken; bad signature or structure →
    InvalidToken; past expiry → ExpiredToken; claims of the wrong shape, wrong
    issuer or wrong token type → InvalidClaims.

    Raises:
        AuthenticationError: With the matching ErrorKind.
    """
    try:
        jwt.get_unverified_header(token)
    except JWTError as e:
        raise AuthenticationError(ErrorKind.MALFORMED_TOKEN, str(e)) from e
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            issuer=settings.jwt_issuer,
            options={"require_exp": True, "require_iat": True, "require_sub": True},
        )
    except ExpiredSignatureError as e:
        raise AuthenticationError(ErrorKind.EXPIRED_TOKEN, str(e)) from e
    except JWTClaimsError as e:
        raise AuthenticationError(ErrorKind.INVALID_CLAIMS, str(e)) from e
    except JWTError as e:
        raise AuthenticationError(ErrorKind.INVALID_TOKEN, str(e)) from e
    try:
        claims = TokenClaims.model_validate(payload)
    except ValidationError as e:
        raise AuthenticationError(ErrorKind.INVALID_CLAIMS, str(e)) from e
    if claims.typ is not expected_type:
        raise AuthenticationError(
            ErrorKind.INVALID_CLAIMS, f"expected {expected_type.value} token"
        )
    return claims


def principal_from_claims(claims: TokenClaims) -> Principal:
    return Principal(
        account_id=claims.account_id,
        role=claims.role,
        issued_at=from_timestamp_utc(claims.iat),
        expires_at=from_timestamp_utc(claims.exp),
    )
