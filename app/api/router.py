"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.dependencies (no manual repo/service construction).
Mounted under settings.api_prefix ("/api") by create_app().
"""

from fastapi import APIRouter

from app.api.endpoints import (
    accounts,
    addresses,
    auth,
    devices,
    health,
    reference,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(accounts.router, prefix="/account", tags=["accounts"])
api_router.include_router(
    addresses.router, prefix="/account/{account_id}/address", tags=["addresses"]
)
api_router.include_router(
    users.router, prefix="/account/{account_id}/user", tags=["users"]
)
api_router.include_router(
    devices.router, prefix="/account/{account_id}/device", tags=["devices"]
)
api_router.include_router(reference.sensor_router, prefix="/sensor", tags=["sensors"])
api_router.include_router(reference.unit_router, prefix="/unit", tags=["units"])
api_router.include_router(reference.model_router, prefix="/model", tags=["models"])
