"""Pagination protocol: page request parsing and page result envelope.

Every list operation takes a PageRequest and returns a PageResult. total is
the count of all active rows matching the same scope as the window query,
not the length of data.

The window query and the count query are separate round trips and are not
snapshot-consistent: under concurrent writes total may be stale relative to
the returned page.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from app.domain.exceptions import ErrorKind, PaginationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE = 0
# Page parameters and the derived offset are int64 in storage
MAX_INT64 = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """Validated (page, page_size) pair; both non-negative and within int64.

    The offset page * page_size must fit in int64 as well; a page too far out
    for its size is a bad page index.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if not 0 <= self.page_size <= MAX_INT64:
            raise PaginationError(ErrorKind.BAD_PAGE_SIZE, f"page_size={self.page_size}")
        if not 0 <= self.page <= MAX_INT64 or self.page * self.page_size > MAX_INT64:
            raise PaginationError(ErrorKind.BAD_PAGE_INDEX, f"page={self.page}")

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One window of a list plus the total count in scope."""

    page: int
    page_size: int
    total: int
    data: list[T] = field(default_factory=list)


def _parse_non_negative(raw: str | int | None, default: int) -> int | None:
    """Return int value, default when absent, or None when invalid, negative or past int64."""
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return default
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            return None
    return value if 0 <= value <= MAX_INT64 else None


def parse_page_params(
    raw_page_size: str | int | None,
    raw_page: str | int | None,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int | None = None,
) -> PageRequest:
    """Normalize raw query parameters into a PageRequest.

    Absent pageSize defaults to default_page_size; absent page defaults to 0.
    A negative, non-integer or out-of-int64 value fails with BadPageSize /
    BadPageIndex, as does a page whose offset would overflow int64.
    When max_page_size is set, larger page sizes are clamped to it.

    Args:
        raw_page_size: Raw "pageSize" query value (None when absent).
        raw_page: Raw "page" query value (None when absent).
        default_page_size: Page size used when pageSize is absent.
        max_page_size: Optional upper bound (no bound when None).

    Returns:
        Validated PageRequest.

    Raises:
        PaginationError: BadPageSize or BadPageIndex.
    """
    page_size = _parse_non_negative(raw_page_size, default_page_size)
    if page_size is None:
        raise PaginationError(ErrorKind.BAD_PAGE_SIZE, f"pageSize={raw_page_size!r}")
    page = _parse_non_negative(raw_page, DEFAULT_PAGE)
    if page is None:
        raise PaginationError(ErrorKind.BAD_PAGE_INDEX, f"page={raw_page!r}")
    if max_page_size is not None and page_size > max_page_size:
        page_size = max_page_size
    return PageRequest(page=page, page_size=page_size)


def build_page_result(
    data: list[T], page: int, page_size: int, total: int
) -> PageResult[T]:
    """Wrap a list window into a PageResult. Inputs are assumed validated."""
    return PageResult(page=page, page_size=page_size, total=total, data=list(data))
