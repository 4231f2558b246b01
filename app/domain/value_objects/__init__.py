"""Domain value objects: immutable, identity-less types."""

from app.domain.value_objects.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    PageRequest,
    PageResult,
    build_page_result,
    parse_page_params,
)
from app.domain.value_objects.principal import Principal

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "PageRequest",
    "PageResult",
    "Principal",
    "build_page_result",
    "parse_page_params",
]
