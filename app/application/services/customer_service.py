"""Customer service: accounts and their nested addresses and users.

Every operation on an existing resource follows the same order: load it by
its own id, check it belongs to the caller's account, then act. A
client-supplied account id on a body is never used for authorization.
"""

from __future__ import annotations

import logging

from app.application.dtos.account import AccountCreate, AccountResult, AccountUpdate
from app.application.dtos.address import AddressCreate, AddressResult, AddressUpdate
from app.application.dtos.user import UserCreate, UserResult, UserUpdate
from app.application.interfaces.repositories import (
    IAccountRepository,
    IAddressRepository,
    IUserRepository,
)
from app.application.services.account_scope import AccountScopedService
from app.domain.exceptions import AuthenticationError, ErrorKind, NotFoundError
from app.domain.value_objects.pagination import PageRequest, PageResult, build_page_result

logger = logging.getLogger(__name__)


class CustomerService(AccountScopedService):
    """Create and query accounts, addresses and users (account-scoped)."""

    def __init__(
        self,
        account_repo: IAccountRepository,
        address_repo: IAddressRepository,
        user_repo: IUserRepository,
    ) -> None:
        super().__init__(account_repo)
        self.address_repo = address_repo
        self.user_repo = user_repo

    # ---- Accounts ----

    async def create_account(self, data: AccountCreate) -> AccountResult:
        account = await self.account_repo.create_account(data)
        logger.info("account %s created", account.id)
        return account

    async def authenticate(self, email: str, password: str) -> AccountResult:
        """Return the account for valid credentials; Unauthorized otherwise.

        Unknown email and wrong password are indistinguishable to the caller.
        """
        account = await self.account_repo.authenticate(email, password)
        if account is None:
            logger.info("login rejected")
            raise AuthenticationError(ErrorKind.UNAUTHORIZED, "invalid credentials")
        return account

    async def ensure_active_account(self, account_id: int) -> AccountResult:
        """The account behind a refresh token must still exist and be active."""
        account = await self.account_repo.get_by_id(account_id)
        if account is None:
            logger.info("refresh rejected for inactive account %s", account_id)
            raise AuthenticationError(ErrorKind.UNAUTHORIZED, f"account_id={account_id}")
        return account

    async def fetch_account(
        self, principal_account_id: int, account_id: int
    ) -> AccountResult:
        return await self.resolve_account(principal_account_id, account_id)

    async def update_account(
        self, principal_account_id: int, account_id: int, data: AccountUpdate
    ) -> AccountResult:
        account = await self.resolve_account(principal_account_id, account_id)
        updated = await self.account_repo.update_account(account.id, data)
        if updated is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_ACCOUNT_BY_ID, f"account_id={account_id}")
        return updated

    async def delete_account(self, principal_account_id: int, account_id: int) -> None:
        account = await self.resolve_account(principal_account_id, account_id)
        if not await self.account_repo.soft_delete(account.id):
            raise NotFoundError(ErrorKind.NOT_FOUND_ACCOUNT_BY_ID, f"account_id={account_id}")
        logger.info("account %s deactivated", account.id)

    async def list_accounts(
        self, principal_account_id: int, page: PageRequest
    ) -> PageResult[AccountResult]:
        """Accounts visible to the caller: only its own."""
        data = await self.account_repo.list_accounts(
            principal_account_id, page.offset, page.limit
        )
        total = await self.account_repo.count_accounts(principal_account_id)
        return build_page_result(data, page.page, page.page_size, total)

    # ---- Addresses ----

    async def _owned_address(
        self, principal_account_id: int, account_id: int, address_id: int
    ) -> AddressResult:
        await self.resolve_account(principal_account_id, account_id)
        address = await self.address_repo.get_by_id(address_id)
        if address is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_ADDRESS_BY_ID, f"address_id={address_id}")
        self.ensure_owned(
            address.account_id,
            principal_account_id,
            ErrorKind.NOT_OWNED_ADDRESS_BY_ID,
            "address",
            address_id,
        )
        return address

    async def create_address(
        self, principal_account_id: int, account_id: int, data: AddressCreate
    ) -> AddressResult:
        account = await self.resolve_account(principal_account_id, account_id)
        return await self.address_repo.create_address(account.id, data)

    async def fetch_address(
        self, principal_account_id: int, account_id: int, address_id: int
    ) -> AddressResult:
        return await self._owned_address(principal_account_id, account_id, address_id)

    async def update_address(
        self,
        principal_account_id: int,
        account_id: int,
        address_id: int,
        data: AddressUpdate,
    ) -> AddressResult:
        address = await self._owned_address(principal_account_id, account_id, address_id)
        updated = await self.address_repo.update_address(address.id, data)
        if updated is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_ADDRESS_BY_ID, f"address_id={address_id}")
        return updated

    async def delete_address(
        self, principal_account_id: int, account_id: int, address_id: int
    ) -> None:
        address = await self._owned_address(principal_account_id, account_id, address_id)
        if not await self.address_repo.soft_delete(address.id):
            raise NotFoundError(ErrorKind.NOT_FOUND_ADDRESS_BY_ID, f"address_id={address_id}")

    async def list_addresses(
        self, principal_account_id: int, account_id: int, page: PageRequest
    ) -> PageResult[AddressResult]:
        account = await self.resolve_account(principal_account_id, account_id)
        data = await self.address_repo.list_for_account(account.id, page.offset, page.limit)
        total = await self.address_repo.count_for_account(account.id)
        return build_page_result(data, page.page, page.page_size, total)

    # ---- Users ----

    async def _owned_user(
        self, principal_account_id: int, account_id: int, user_id: int
    ) -> UserResult:
        await self.resolve_account(principal_account_id, account_id)
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_USER_BY_ID, f"user_id={user_id}")
        self.ensure_owned(
            user.account_id,
            principal_account_id,
            ErrorKind.NOT_OWNED_USER_BY_ID,
            "user",
            user_id,
        )
        return user

    async def create_user(
        self, principal_account_id: int, account_id: int, data: UserCreate
    ) -> UserResult:
        account = await self.resolve_account(principal_account_id, account_id)
        return await self.user_repo.create_user(account.id, data)

    async def fetch_user(
        self, principal_account_id: int, account_id: int, user_id: int
    ) -> UserResult:
        return await self._owned_user(principal_account_id, account_id, user_id)

    async def find_user_by_email(
        self, principal_account_id: int, account_id: int, email: str
    ) -> UserResult:
        """Lookup within the caller's account only, so other accounts' users never match."""
        account = await self.resolve_account(principal_account_id, account_id)
        user = await self.user_repo.get_by_email_for_account(account.id, email)
        if user is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_USER_BY_EMAIL)
        return user

    async def update_user(
        self,
        principal_account_id: int,
        account_id: int,
        user_id: int,
        data: UserUpdate,
    ) -> UserResult:
        user = await self._owned_user(principal_account_id, account_id, user_id)
        updated = await self.user_repo.update_user(user.id, data)
        if updated is None:
            raise NotFoundError(ErrorKind.NOT_FOUND_USER_BY_ID, f"user_id={user_id}")
        return updated

    async def delete_user(
        self, principal_account_id: int, account_id: int, user_id: int
    ) -> None:
        user = await self._owned_user(principal_account_id, account_id, user_id)
        if not await self.user_repo.soft_delete(user.id):
            raise NotFoundError(ErrorKind.NOT_FOUND_USER_BY_ID, f"user_id={user_id}")

    async def list_users(
        self, principal_account_id: int, account_id: int, page: PageRequest
    ) -> PageResult[UserResult]:
        account = await self.resolve_account(principal_account_id, account_id)
        data = await self.user_repo.list_for_account(account.id, page.offset, page.limit)
        total = await self.user_repo.count_for_account(account.id)
        return build_page_result(data, page.page, page.page_size, total)
