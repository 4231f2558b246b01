"""Pydantic request/response schemas for the API."""

from app.schemas.account import (
    AccountCreateRequest,
    AccountResponse,
    AccountUpdateRequest,
)
from app.schemas.address import (
    AddressCreateRequest,
    AddressResponse,
    AddressUpdateRequest,
)
from app.schemas.auth import LoginRequest, LoginResponse, TokenPairResponse
from app.schemas.common import (
    CamelModel,
    ErrorResponse,
    MessageResponse,
    PageResponse,
    to_page_response,
)
from app.schemas.device import DeviceCreateRequest, DeviceResponse, DeviceUpdateRequest
from app.schemas.health import HealthResponse
from app.schemas.reference import DeviceModelResponse, SensorResponse, UnitResponse
from app.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "AccountCreateRequest",
    "AccountResponse",
    "AccountUpdateRequest",
    "AddressCreateRequest",
    "AddressResponse",
    "AddressUpdateRequest",
    "CamelModel",
    "DeviceCreateRequest",
    "DeviceModelResponse",
    "DeviceResponse",
    "DeviceUpdateRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PageResponse",
    "SensorResponse",
    "TokenPairResponse",
    "UnitResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
    "to_page_response",
]
