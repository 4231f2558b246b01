"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the application context, DB sessions,
services, the request principal and pagination. Routes depend only on
these, not on infrastructure directly.
"""

from app.api.dependencies.auth import CurrentPrincipal, get_principal, get_refresh_claims
from app.api.dependencies.db import (
    get_app_context,
    get_db,
    get_db_transactional,
    get_settings_dep,
)
from app.api.dependencies.pagination import get_page_request
from app.api.dependencies.services import (
    get_customer_service,
    get_customer_service_for_write,
    get_device_service,
    get_device_service_for_write,
)

__all__ = [
    "CurrentPrincipal",
    "get_app_context",
    "get_customer_service",
    "get_customer_service_for_write",
    "get_db",
    "get_db_transactional",
    "get_device_service",
    "get_device_service_for_write",
    "get_page_request",
    "get_principal",
    "get_refresh_claims",
    "get_settings_dep",
]
