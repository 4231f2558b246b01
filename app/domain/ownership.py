"""Ownership validation for account-scoped resources.

Callers load the resource by its own primary key first (to learn its true
owning account), then check, then act. The role carried by the principal is
not consulted: there is no administrative bypass.
"""

from app.domain.exceptions import ErrorKind, NotOwnedError


def is_owned_by(resource_account_id: int, principal_account_id: int) -> bool:
    """Return True if the resource belongs to the principal's account."""
    return resource_account_id == principal_account_id


def check_ownership(
    resource_account_id: int,
    principal_account_id: int,
    kind: ErrorKind,
) -> None:
    """Raise NotOwnedError(kind) unless the resource belongs to the principal's account.

    Args:
        resource_account_id: Owning account stored on the resource.
        principal_account_id: Account id of the authenticated caller.
        kind: NotOwned kind to raise on mismatch (e.g. NOT_OWNED_DEVICE_BY_ID).

    Raises:
        NotOwnedError: On any mismatch.
    """
    if not is_owned_by(resource_account_id, principal_account_id):
        raise NotOwnedError(
            kind,
            f"resource account {resource_account_id} != principal account {principal_account_id}",
        )
