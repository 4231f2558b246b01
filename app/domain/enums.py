"""Domain enumerations for the device backend.

Enums represent fixed sets of domain values (e.g. principal roles).
"""

from enum import Enum


class Role(str, Enum):
    """Role carried in an access token.

    Every account logs in as ADMIN of its own account. The role is carried
    through to the Principal but no authorization decision branches on it.
    """

    ADMIN = "ADMIN"


class TokenType(str, Enum):
    """Value of the "typ" claim distinguishing access from refresh tokens."""

    ACCESS = "access"
    REFRESH = "refresh"
