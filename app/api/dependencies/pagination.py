"""Pagination query dependency: ?page=&pageSize= -> PageRequest."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query

from app.api.dependencies.db import get_settings_dep
from app.core.config import Settings
from app.domain.value_objects.pagination import PageRequest, parse_page_params


def get_page_request(
    settings: Annotated[Settings, Depends(get_settings_dep)],
    page_size: Annotated[str | None, Query(alias="pageSize")] = None,
    page: Annotated[str | None, Query()] = None,
) -> PageRequest:
    """Parse raw values so bad input maps to BadPageSize / BadPageIndex, not BadPayload."""
    return parse_page_params(
        page_size,
        page,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
