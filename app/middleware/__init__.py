"""HTTP middleware: timeout, request ID, case-insensitive paths, authentication,
unhandled errors.

Applied in the main app; order matters (last added = outermost).
Import and use from app.main.
"""

from app.middleware.authentication import AuthenticationMiddleware
from app.middleware.caseless_path import CaselessPathMiddleware
from app.middleware.request_id import RequestIDMiddleware
from app.middleware.timeout import TimeoutMiddleware
from app.middleware.unhandled_error import UnhandledErrorMiddleware

__all__ = [
    "AuthenticationMiddleware",
    "CaselessPathMiddleware",
    "RequestIDMiddleware",
    "TimeoutMiddleware",
    "UnhandledErrorMiddleware",
]
