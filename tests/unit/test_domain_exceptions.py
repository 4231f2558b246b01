"""Tests for the error taxonomy: codes, descriptions, statuses and the fallback."""

import pytest

from app.core.exception_handlers import error_status, resolve_error
from app.domain.exceptions import (
    ERROR_CODES,
    ERROR_DESCRIPTIONS,
    FALLBACK_CODE,
    FALLBACK_DESCRIPTION,
    NOT_OWNED_AS_NOT_FOUND,
    AuthenticationError,
    ErrorKind,
    MismatchError,
    NotFoundError,
    NotOwnedError,
    PaginationError,
    PayloadError,
    error_code,
    error_description,
)


def test_every_kind_has_code_and_description() -> None:
    """Each kind that is not a NotOwned alias carries its own code and description."""
    for kind in ErrorKind:
        if kind in NOT_OWNED_AS_NOT_FOUND:
            continue
        assert kind in ERROR_CODES, kind
        assert kind in ERROR_DESCRIPTIONS, kind


def test_codes_are_unique() -> None:
    codes = list(ERROR_CODES.values())
    assert len(codes) == len(set(codes))
    assert FALLBACK_CODE not in codes


@pytest.mark.parametrize(
    ("kind", "code", "status"),
    [
        (ErrorKind.BAD_PAGE_SIZE, "ERR_BAD_PAGE_SIZE", 400),
        (ErrorKind.BAD_PAGE_INDEX, "ERR_BAD_PAGE_INDEX", 400),
        (ErrorKind.UNAUTHORIZED, "ERR_UNAUTHORIZED", 401),
        (ErrorKind.INVALID_TOKEN, "ERR_BAD_TOKEN", 401),
        (ErrorKind.EXPIRED_TOKEN, "ERR_EXPIRED_TOKEN", 401),
        (ErrorKind.MISSING_TOKEN, "ERR_MISSING_TOKEN", 401),
        (ErrorKind.NOT_FOUND_DEVICE_BY_ID, "ERR_NOT_FOUND_DEVICE_BY_ID", 404),
        (ErrorKind.SERIAL_NUMBER_MISMATCH, "ERR_SERIAL_NUMBER_NOT_MATCH", 400),
        (ErrorKind.DEVICE_ACCOUNT_MISMATCH, "ERR_DEVICE_AND_ACCOUNT_NOT_MATCH", 400),
    ],
)
def test_kind_code_and_status(kind: ErrorKind, code: str, status: int) -> None:
    assert error_code(kind) == code
    assert error_status(kind) == status


@pytest.mark.parametrize("not_owned, not_found", list(NOT_OWNED_AS_NOT_FOUND.items()))
def test_not_owned_is_indistinguishable_from_not_found(
    not_owned: ErrorKind, not_found: ErrorKind
) -> None:
    owned_error = NotOwnedError(not_owned, "resource account 2 != principal account 1")
    missing_error = NotFoundError(not_found, "id=9")
    assert resolve_error(owned_error) == resolve_error(missing_error)
    assert error_status(not_owned) == 404


def test_unrecognized_exception_uses_fallback() -> None:
    assert resolve_error(RuntimeError("boom")) == (FALLBACK_CODE, FALLBACK_DESCRIPTION, 400)


def test_fallback_status_is_configurable() -> None:
    code, _, status = resolve_error(ValueError("x"), fallback_status=500)
    assert code == FALLBACK_CODE
    assert status == 500
    assert error_status(None, fallback_status=500) == 500


def test_none_kind_maps_to_fallback() -> None:
    assert error_code(None) == FALLBACK_CODE
    assert error_description(None) == FALLBACK_DESCRIPTION


def test_detail_never_changes_identity() -> None:
    """Interpolated context lives in detail and str(); code and description stay static."""
    exc = NotFoundError(ErrorKind.NOT_FOUND_ACCOUNT_BY_ID, "account_id=77")
    assert str(exc) == "account_id=77"
    assert exc.code == "ERR_NOT_FOUND_ACCOUNT_BY_ID"
    assert "77" not in exc.description


def test_subclasses_share_base() -> None:
    assert PayloadError().kind is ErrorKind.BAD_PAYLOAD
    for exc in (
        PaginationError(ErrorKind.BAD_PAGE_SIZE),
        AuthenticationError(ErrorKind.MALFORMED_TOKEN),
        MismatchError(ErrorKind.MODEL_MISMATCH),
    ):
        assert str(exc) == exc.kind.value
        assert repr(exc).startswith(type(exc).__name__)
