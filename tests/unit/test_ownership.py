"""Tests for the ownership check."""

import pytest

from app.domain.exceptions import ErrorKind, NotOwnedError
from app.domain.ownership import check_ownership, is_owned_by


def test_is_owned_by() -> None:
    assert is_owned_by(1, 1)
    assert not is_owned_by(1, 2)


def test_check_ownership_passes_for_owner() -> None:
    check_ownership(5, 5, ErrorKind.NOT_OWNED_DEVICE_BY_ID)


def test_check_ownership_raises_given_kind() -> None:
    with pytest.raises(NotOwnedError) as exc_info:
        check_ownership(5, 6, ErrorKind.NOT_OWNED_USER_BY_ID)
    assert exc_info.value.kind is ErrorKind.NOT_OWNED_USER_BY_ID
    assert exc_info.value.code == "ERR_NOT_FOUND_USER_BY_ID"
