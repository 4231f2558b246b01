"""Domain layer: error taxonomy, pagination, principal, ownership, enums.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import Role, TokenType
from app.domain.exceptions import (
    AuthenticationError,
    DomainError,
    ErrorKind,
    MismatchError,
    NotFoundError,
    NotOwnedError,
    PaginationError,
    PayloadError,
)
from app.domain.ownership import check_ownership
from app.domain.value_objects import PageRequest, PageResult, Principal

__all__ = [
    # Enums
    "Role",
    "TokenType",
    # Exceptions
    "AuthenticationError",
    "DomainError",
    "ErrorKind",
    "MismatchError",
    "NotFoundError",
    "NotOwnedError",
    "PaginationError",
    "PayloadError",
    # Ownership
    "check_ownership",
    # Value objects
    "PageRequest",
    "PageResult",
    "Principal",
]
