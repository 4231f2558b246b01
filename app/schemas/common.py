"""Shared API schema pieces: camelCase base model, page envelope, error body."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.value_objects.pagination import PageResult

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for request and response bodies: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        protected_namespaces=(),
    )


class PageResponse(CamelModel, Generic[T]):
    """List envelope: {page, pageSize, total, data}."""

    page: int
    page_size: int
    total: int
    data: list[T]


class ErrorResponse(CamelModel):
    """Error body shared by every failure response."""

    request_id: str
    code: str
    error: str


class MessageResponse(BaseModel):
    message: str


def to_page_response(
    result: PageResult[Any],
    convert: Callable[[Any], T],
) -> PageResponse[T]:
    """Build the list envelope, converting each item with convert."""
    return PageResponse(
        page=result.page,
        page_size=result.page_size,
        total=result.total,
        data=[convert(item) for item in result.data],
    )


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Bad request"},
    401: {"model": ErrorResponse, "description": "Missing or invalid credentials"},
    404: {"model": ErrorResponse, "description": "Not found (or not owned)"},
}
