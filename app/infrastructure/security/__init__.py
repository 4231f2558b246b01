"""Security: JWT and password hashing."""

from app.infrastructure.security.jwt import (
    IssuedToken,
    TokenClaims,
    create_access_token,
    create_refresh_token,
    decode_token,
    principal_from_claims,
)
from app.infrastructure.security.password import get_password_hash, verify_password

__all__ = [
    "IssuedToken",
    "TokenClaims",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "get_password_hash",
    "principal_from_claims",
    "verify_password",
]
