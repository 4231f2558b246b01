"""Case-insensitive routing.

Lowercases the request path before routing, so /API/Account/1/Fetch reaches the
same handler as /api/account/1/fetch. Query strings are untouched; values whose
case matters (emails, serial numbers, codes) travel as query parameters.
Raw ASGI.
"""

from typing import Callable


def CaselessPathMiddleware(app: Callable) -> Callable:
    """Lowercase scope["path"] and scope["raw_path"] for HTTP requests."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        path = scope.get("path", "")
        lowered = path.lower()
        if lowered != path:
            scope = dict(scope)
            scope["path"] = lowered
            raw_path = scope.get("raw_path")
            if raw_path is not None:
                scope["raw_path"] = raw_path.lower()
        await app(scope, receive, send)

    return asgi_app
