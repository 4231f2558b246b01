"""Tests for page parameter parsing and the page result envelope."""

import pytest

from app.domain.exceptions import ErrorKind, PaginationError
from app.domain.value_objects.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_INT64,
    PageRequest,
    build_page_result,
    parse_page_params,
)


def test_defaults_when_absent() -> None:
    request = parse_page_params(None, None)
    assert request == PageRequest(page=0, page_size=DEFAULT_PAGE_SIZE)
    assert DEFAULT_PAGE_SIZE == 10


def test_blank_values_use_defaults() -> None:
    assert parse_page_params("", "  ") == PageRequest(page=0, page_size=10)


def test_explicit_values() -> None:
    request = parse_page_params("3", "2")
    assert (request.page, request.page_size) == (2, 3)
    assert request.offset == 6
    assert request.limit == 3


def test_zero_page_size_is_valid() -> None:
    request = parse_page_params("0", "5")
    assert request.page_size == 0
    assert request.offset == 0


def test_configured_default_page_size() -> None:
    assert parse_page_params(None, None, default_page_size=25).page_size == 25


@pytest.mark.parametrize("raw", ["-1", "abc", "1.5", True])
def test_bad_page_size(raw) -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_page_params(raw, None)
    assert exc_info.value.kind is ErrorKind.BAD_PAGE_SIZE


@pytest.mark.parametrize("raw", ["-1", "x", "2e3"])
def test_bad_page_index(raw) -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_page_params("10", raw)
    assert exc_info.value.kind is ErrorKind.BAD_PAGE_INDEX


def test_page_size_checked_before_page() -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_page_params("-1", "-1")
    assert exc_info.value.kind is ErrorKind.BAD_PAGE_SIZE


def test_max_page_size_clamps() -> None:
    assert parse_page_params("500", "0", max_page_size=100).page_size == 100
    assert parse_page_params("50", "0", max_page_size=100).page_size == 50


def test_page_request_rejects_negative_values() -> None:
    with pytest.raises(PaginationError):
        PageRequest(page=-1, page_size=10)
    with pytest.raises(PaginationError):
        PageRequest(page=0, page_size=-5)


def test_build_page_result_keeps_total() -> None:
    """total counts the whole scope, not the window."""
    result = build_page_result(["a", "b"], page=1, page_size=2, total=7)
    assert result.data == ["a", "b"]
    assert result.total == 7
    assert (result.page, result.page_size) == (1, 2)


def test_int64_bounds_are_accepted() -> None:
    assert parse_page_params(str(MAX_INT64), "0").page_size == MAX_INT64
    assert parse_page_params("0", str(MAX_INT64)).page == MAX_INT64
    assert parse_page_params("1", str(MAX_INT64)).offset == MAX_INT64


@pytest.mark.parametrize("raw", [str(MAX_INT64 + 1), "99999999999999999999", MAX_INT64 + 1])
def test_page_size_past_int64(raw) -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_page_params(raw, None)
    assert exc_info.value.kind is ErrorKind.BAD_PAGE_SIZE


@pytest.mark.parametrize("raw", [str(MAX_INT64 + 1), "99999999999999999999"])
def test_page_past_int64(raw) -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_page_params("10", raw)
    assert exc_info.value.kind is ErrorKind.BAD_PAGE_INDEX


def test_offset_overflow_is_bad_page_index() -> None:
    """page * pageSize past int64 is rejected even though each value fits."""
    with pytest.raises(PaginationError) as exc_info:
        parse_page_params("10", str(2**62))
    assert exc_info.value.kind is ErrorKind.BAD_PAGE_INDEX
    with pytest.raises(PaginationError):
        PageRequest(page=2**32, page_size=2**32)
