"""Shared fetch-then-check helpers for services over account-scoped resources."""

from __future__ import annotations

import logging

from app.application.dtos.account import AccountResult
from app.application.interfaces.repositories import IAccountRepository
from app.domain.exceptions import ErrorKind, NotFoundError, NotOwnedError
from app.domain.ownership import check_ownership

logger = logging.getLogger(__name__)


class AccountScopedService:
    """Base for services whose routes are nested under /account/{accountID}."""

    def __init__(self, account_repo: IAccountRepository) -> None:
        self.account_repo = account_repo

    @staticmethod
    def ensure_owned(
        resource_account_id: int,
        principal_account_id: int,
        kind: ErrorKind,
        resource: str,
        resource_id: int,
    ) -> None:
        """check_ownership plus a warning log on denial (the response says not found)."""
        try:
            check_ownership(resource_account_id, principal_account_id, kind)
        except NotOwnedError:
            logger.warning(
                "account %s denied access to %s %s owned by account %s",
                principal_account_id,
                resource,
                resource_id,
                resource_account_id,
            )
            raise

    async def resolve_account(
        self, principal_account_id: int, account_id: int
    ) -> AccountResult:
        """Load the path account, then require it to be the caller's own.

        Raises:
            NotFoundError: Account missing or inactive.
            NotOwnedError: Account belongs to someone else (rendered as not found).
        """
        account = await self.account_repo.get_by_id(account_id)
        if account is None:
            logger.info("account %s not found", account_id)
            raise NotFoundError(ErrorKind.NOT_FOUND_ACCOUNT_BY_ID, f"account_id={account_id}")
        self.ensure_owned(
            account.id,
            principal_account_id,
            ErrorKind.NOT_OWNED_ACCOUNT_BY_ID,
            "account",
            account.id,
        )
        return account
