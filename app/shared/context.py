"""Request context management using contextvars.

Holds the request id for the current request so log records emitted anywhere
below the middleware can carry it. Set by RequestIDMiddleware; scoped to the
current async task.

Usage:
    set_request_id("3f0c...")
    request_id = get_request_id()
"""

from contextvars import ContextVar

NO_REQUEST_ID = "-"

_current_request_id: ContextVar[str] = ContextVar(
    "current_request_id", default=NO_REQUEST_ID
)


def set_request_id(request_id: str | None) -> None:
    """Set the request id for this context (None resets to the placeholder)."""
    _current_request_id.set(request_id or NO_REQUEST_ID)


def get_request_id() -> str:
    """Return the current request id, or "-" outside a request."""
    return _current_request_id.get()
