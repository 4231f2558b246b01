"""Last-resort error answer, inside the request id middleware.

Exceptions no registered handler recognizes would otherwise reach Starlette's
ServerErrorMiddleware, outermost of all, where the response skips
X-Request-ID. This middleware sits innermost of the stack and answers them
with the fallback entry instead. Once the response has started nothing can be
answered, so the exception propagates unchanged.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

import logging
from typing import Callable

from app.core.exception_handlers import build_error_response
from app.shared.context import get_request_id

logger = logging.getLogger(__name__)


def UnhandledErrorMiddleware(app: Callable, fallback_status: int = 400) -> Callable:
    """Answer unhandled exceptions with the fallback error body. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            request_id = scope.get("state", {}).get("request_id") or get_request_id()
            logger.exception(
                "Unhandled exception on %s %s: %s",
                scope.get("method", ""),
                scope.get("path", ""),
                exc,
            )
            response = build_error_response(request_id, exc, fallback_status)
            await response(scope, receive, send)

    return asgi_app
