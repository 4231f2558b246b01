"""Request timeout middleware.

Cancels the request if it runs longer than the configured timeout (asyncio.wait_for)
and answers 504 in the error envelope. Outermost middleware, so the request id is
read back from the shared scope state.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

import asyncio
import json
import logging
from typing import Callable

from app.domain.exceptions import FALLBACK_CODE
from app.shared.context import NO_REQUEST_ID

logger = logging.getLogger(__name__)


def TimeoutMiddleware(
    app: Callable, timeout_seconds: int, header_name: str = "X-Request-ID"
) -> Callable:
    """Cancel request after timeout_seconds (sends 504 on timeout). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        try:
            await asyncio.wait_for(
                app(scope, receive, send),
                timeout=float(timeout_seconds),
            )
        except asyncio.TimeoutError:
            request_id = scope.get("state", {}).get("request_id", NO_REQUEST_ID)
            logger.warning(
                "Request %s timed out after %s seconds: %s %s",
                request_id,
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            body = json.dumps(
                {
                    "requestId": request_id,
                    "code": FALLBACK_CODE,
                    "error": f"Request timed out after {timeout_seconds} seconds",
                }
            ).encode()
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [
                    (b"content-type", b"application/json"),
                    (header_name.encode(), request_id.encode()),
                ],
            })
            await send({
                "type": "http.response.body",
                "body": body,
                "more_body": False,
            })

    return asgi_app
