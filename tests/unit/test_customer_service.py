"""CustomerService unit tests with mocked repos."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.account import AccountResult, AccountUpdate
from app.application.dtos.user import UserResult
from app.application.services import CustomerService
from app.domain.exceptions import (
    AuthenticationError,
    ErrorKind,
    NotFoundError,
    NotOwnedError,
)

NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)


def _account(account_id: int = 1) -> AccountResult:
    return AccountResult(
        id=account_id,
        email=f"a{account_id}@x.com",
        name="Acme",
        verified=False,
        receives_updates=False,
        created_at=NOW,
        modified_at=NOW,
    )


def _user(user_id: int = 5, account_id: int = 1) -> UserResult:
    return UserResult(
        id=user_id,
        account_id=account_id,
        email="u@x.com",
        cell="",
        first_name="Jane",
        last_name="Doe",
        verified=False,
        receives_updates=False,
        created_at=NOW,
        modified_at=NOW,
    )


@pytest.fixture
def repos():
    account_repo = AsyncMock()
    account_repo.get_by_id.side_effect = lambda account_id: (
        _account(account_id) if account_id in (1, 2) else None
    )
    return account_repo, AsyncMock(), AsyncMock()


@pytest.fixture
def service(repos) -> CustomerService:
    return CustomerService(*repos)


async def test_authenticate_rejects_bad_credentials(service, repos) -> None:
    account_repo, _, _ = repos
    account_repo.authenticate.return_value = None
    with pytest.raises(AuthenticationError) as exc_info:
        await service.authenticate("a@x.com", "wrong")
    assert exc_info.value.kind is ErrorKind.UNAUTHORIZED


async def test_ensure_active_account(service) -> None:
    assert (await service.ensure_active_account(1)).id == 1
    with pytest.raises(AuthenticationError) as exc_info:
        await service.ensure_active_account(3)
    assert exc_info.value.kind is ErrorKind.UNAUTHORIZED


async def test_fetch_own_account(service) -> None:
    assert (await service.fetch_account(1, 1)).id == 1


async def test_fetch_foreign_account(service) -> None:
    with pytest.raises(NotOwnedError) as exc_info:
        await service.fetch_account(1, 2)
    assert exc_info.value.kind is ErrorKind.NOT_OWNED_ACCOUNT_BY_ID


async def test_fetch_missing_account(service) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await service.fetch_account(1, 3)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND_ACCOUNT_BY_ID


async def test_update_foreign_account_never_writes(service, repos) -> None:
    account_repo, _, _ = repos
    with pytest.raises(NotOwnedError):
        await service.update_account(1, 2, AccountUpdate(name="Mine now"))
    account_repo.update_account.assert_not_awaited()


async def test_delete_account_soft_deletes(service, repos) -> None:
    account_repo, _, _ = repos
    account_repo.soft_delete.return_value = True
    await service.delete_account(1, 1)
    account_repo.soft_delete.assert_awaited_once_with(1)


async def test_delete_account_already_gone(service, repos) -> None:
    account_repo, _, _ = repos
    account_repo.soft_delete.return_value = False
    with pytest.raises(NotFoundError):
        await service.delete_account(1, 1)


async def test_user_owned_by_other_account(service, repos) -> None:
    _, _, user_repo = repos
    user_repo.get_by_id.return_value = _user(account_id=2)
    with pytest.raises(NotOwnedError) as exc_info:
        await service.fetch_user(1, 1, 5)
    assert exc_info.value.kind is ErrorKind.NOT_OWNED_USER_BY_ID


async def test_find_user_by_email_scoped_to_account(service, repos) -> None:
    _, _, user_repo = repos
    user_repo.get_by_email_for_account.return_value = None
    with pytest.raises(NotFoundError) as exc_info:
        await service.find_user_by_email(1, 1, "u@x.com")
    assert exc_info.value.kind is ErrorKind.NOT_FOUND_USER_BY_EMAIL
    user_repo.get_by_email_for_account.assert_awaited_once_with(1, "u@x.com")


async def test_address_missing(service, repos) -> None:
    _, address_repo, _ = repos
    address_repo.get_by_id.return_value = None
    with pytest.raises(NotFoundError) as exc_info:
        await service.fetch_address(1, 1, 9)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND_ADDRESS_BY_ID
