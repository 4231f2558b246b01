"""Shared utilities: request context, logging, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_request_id, set_request_id
from app.shared.utils import ensure_utc, from_timestamp_utc, utc_now

__all__ = [
    "get_request_id",
    "set_request_id",
    "utc_now",
    "ensure_utc",
    "from_timestamp_utc",
]
