"""Domain error taxonomy for the device backend.

Every failure the domain recognizes is one member of ErrorKind. Each kind
has a stable machine-readable code and a human description; the HTTP status
is assigned at the presentation layer (app.core.exception_handlers). Kinds
are static: interpolated context belongs in log messages, never in the
error identity.

NotOwned kinds are distinct internally (so ownership denials can be logged
as such) but share code and description with the matching NotFound kind, so
another account's resource is indistinguishable from a missing one.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of domain error kinds."""

    # Pagination
    BAD_PAGE_SIZE = "BadPageSize"
    BAD_PAGE_INDEX = "BadPageIndex"

    # Authentication
    UNAUTHORIZED = "Unauthorized"
    INVALID_TOKEN = "InvalidToken"
    EXPIRED_TOKEN = "ExpiredToken"
    MALFORMED_TOKEN = "MalformedToken"
    MISSING_TOKEN = "MissingToken"
    INVALID_CLAIMS = "InvalidClaims"

    # Request body
    BAD_PAYLOAD = "BadPayload"

    # Not found
    NOT_FOUND_ACCOUNT_BY_ID = "NotFoundAccountByID"
    NOT_FOUND_ACCOUNT_BY_EMAIL = "NotFoundAccountByEmail"
    NOT_FOUND_USER_BY_ID = "NotFoundUserByID"
    NOT_FOUND_USER_BY_EMAIL = "NotFoundUserByEmail"
    NOT_FOUND_ADDRESS_BY_ID = "NotFoundAddressByID"
    NOT_FOUND_ADDRESS_BY_ACCOUNT_ID = "NotFoundAddressByAccountID"
    NOT_FOUND_DEVICE_BY_ID = "NotFoundDeviceByID"
    NOT_FOUND_DEVICE_BY_SERIAL_NUMBER = "NotFoundDeviceBySerialNumber"
    NOT_FOUND_MODEL_BY_ID = "NotFoundModelByID"
    NOT_FOUND_UNIT_BY_ID = "NotFoundUnitByID"
    NOT_FOUND_UNIT_BY_NAME = "NotFoundUnitByName"
    NOT_FOUND_SENSOR_BY_ID = "NotFoundSensorByID"
    NOT_FOUND_SENSOR_BY_CODE = "NotFoundSensorByCode"

    # Not owned by the caller's account
    NOT_OWNED_ACCOUNT_BY_ID = "NotOwnedAccountByID"
    NOT_OWNED_USER_BY_ID = "NotOwnedUserByID"
    NOT_OWNED_ADDRESS_BY_ID = "NotOwnedAddressByID"
    NOT_OWNED_DEVICE_BY_ID = "NotOwnedDeviceByID"

    # Field mismatches
    SERIAL_NUMBER_MISMATCH = "SerialNumberMismatch"
    MODEL_MISMATCH = "ModelMismatch"
    DEVICE_ACCOUNT_MISMATCH = "DeviceAccountMismatch"


FALLBACK_CODE = "ERR_INTERNAL_EXCEPTION"
FALLBACK_DESCRIPTION = "An internal server error occurred."

# NotOwned kind -> NotFound kind it is rendered as
NOT_OWNED_AS_NOT_FOUND: dict[ErrorKind, ErrorKind] = {
    ErrorKind.NOT_OWNED_ACCOUNT_BY_ID: ErrorKind.NOT_FOUND_ACCOUNT_BY_ID,
    ErrorKind.NOT_OWNED_USER_BY_ID: ErrorKind.NOT_FOUND_USER_BY_ID,
    ErrorKind.NOT_OWNED_ADDRESS_BY_ID: ErrorKind.NOT_FOUND_ADDRESS_BY_ID,
    ErrorKind.NOT_OWNED_DEVICE_BY_ID: ErrorKind.NOT_FOUND_DEVICE_BY_ID,
}

ERROR_CODES: dict[ErrorKind, str] = {
    ErrorKind.BAD_PAGE_SIZE: "ERR_BAD_PAGE_SIZE",
    ErrorKind.BAD_PAGE_INDEX: "ERR_BAD_PAGE_INDEX",
    ErrorKind.UNAUTHORIZED: "ERR_UNAUTHORIZED",
    ErrorKind.INVALID_TOKEN: "ERR_BAD_TOKEN",
    ErrorKind.EXPIRED_TOKEN: "ERR_EXPIRED_TOKEN",
    ErrorKind.MALFORMED_TOKEN: "ERR_MALFORMED_TOKEN",
    ErrorKind.MISSING_TOKEN: "ERR_MISSING_TOKEN",
    ErrorKind.INVALID_CLAIMS: "ERR_BAD_TOKEN_CLAIMS",
    ErrorKind.BAD_PAYLOAD: "ERR_BAD_PAYLOAD_FIELDS",
    ErrorKind.NOT_FOUND_ACCOUNT_BY_ID: "ERR_NOT_FOUND_ACCOUNT_BY_ID",
    ErrorKind.NOT_FOUND_ACCOUNT_BY_EMAIL: "ERR_NOT_FOUND_ACCOUNT_BY_EMAIL",
    ErrorKind.NOT_FOUND_USER_BY_ID: "ERR_NOT_FOUND_USER_BY_ID",
    ErrorKind.NOT_FOUND_USER_BY_EMAIL: "ERR_NOT_FOUND_USER_BY_EMAIL",
    ErrorKind.NOT_FOUND_ADDRESS_BY_ID: "ERR_NOT_FOUND_ADDRESS_BY_ID",
    ErrorKind.NOT_FOUND_ADDRESS_BY_ACCOUNT_ID: "ERR_NOT_FOUND_ADDRESS_BY_ACCOUNT_ID",
    ErrorKind.NOT_FOUND_DEVICE_BY_ID: "ERR_NOT_FOUND_DEVICE_BY_ID",
    ErrorKind.NOT_FOUND_DEVICE_BY_SERIAL_NUMBER: "ERR_NOT_FOUND_DEVICE_BY_SERIAL_NUMBER",
    ErrorKind.NOT_FOUND_MODEL_BY_ID: "ERR_NOT_FOUND_MODEL_BY_ID",
    ErrorKind.NOT_FOUND_UNIT_BY_ID: "ERR_NOT_FOUND_UNIT_BY_ID",
    ErrorKind.NOT_FOUND_UNIT_BY_NAME: "ERR_NOT_FOUND_UNIT_BY_NAME",
    ErrorKind.NOT_FOUND_SENSOR_BY_ID: "ERR_NOT_FOUND_SENSOR_BY_ID",
    ErrorKind.NOT_FOUND_SENSOR_BY_CODE: "ERR_NOT_FOUND_SENSOR_BY_CODE",
    ErrorKind.SERIAL_NUMBER_MISMATCH: "ERR_SERIAL_NUMBER_NOT_MATCH",
    ErrorKind.MODEL_MISMATCH: "ERR_MODEL_NOT_MATCH",
    ErrorKind.DEVICE_ACCOUNT_MISMATCH: "ERR_DEVICE_AND_ACCOUNT_NOT_MATCH",
}

ERROR_DESCRIPTIONS: dict[ErrorKind, str] = {
    ErrorKind.BAD_PAGE_SIZE: "The page size provided is invalid.",
    ErrorKind.BAD_PAGE_INDEX: "The page index provided is invalid.",
    ErrorKind.UNAUTHORIZED: "Unauthorized access.",
    ErrorKind.INVALID_TOKEN: "The token provided is invalid.",
    ErrorKind.EXPIRED_TOKEN: "The token provided has expired.",
    ErrorKind.MALFORMED_TOKEN: "The token provided is malformed.",
    ErrorKind.MISSING_TOKEN: "No token provided.",
    ErrorKind.INVALID_CLAIMS: "The token claims are invalid.",
    ErrorKind.BAD_PAYLOAD: "The request payload contains invalid fields.",
    ErrorKind.NOT_FOUND_ACCOUNT_BY_ID: "No account found with the given ID.",
    ErrorKind.NOT_FOUND_ACCOUNT_BY_EMAIL: "No account found with the given email.",
    ErrorKind.NOT_FOUND_USER_BY_ID: "No user found with the given ID.",
    ErrorKind.NOT_FOUND_USER_BY_EMAIL: "No user found with the given email.",
    ErrorKind.NOT_FOUND_ADDRESS_BY_ID: "No address found with the given ID.",
    ErrorKind.NOT_FOUND_ADDRESS_BY_ACCOUNT_ID: "No address found with the given account ID.",
    ErrorKind.NOT_FOUND_DEVICE_BY_ID: "No device found with the given ID.",
    ErrorKind.NOT_FOUND_DEVICE_BY_SERIAL_NUMBER: "No device found with the given serial number.",
    ErrorKind.NOT_FOUND_MODEL_BY_ID: "No model found with the given ID.",
    ErrorKind.NOT_FOUND_UNIT_BY_ID: "No unit found with the given ID.",
    ErrorKind.NOT_FOUND_UNIT_BY_NAME: "No unit found with the given name.",
    ErrorKind.NOT_FOUND_SENSOR_BY_ID: "No sensor found with the given ID.",
    ErrorKind.NOT_FOUND_SENSOR_BY_CODE: "No sensor found with the given code.",
    ErrorKind.SERIAL_NUMBER_MISMATCH: "The serial number does not match.",
    ErrorKind.MODEL_MISMATCH: "The model does not match.",
    ErrorKind.DEVICE_ACCOUNT_MISMATCH: "The device and account do not match.",
}


def error_code(kind: ErrorKind | None) -> str:
    """Return the stable code for kind, or the fallback code."""
    if kind is None:
        return FALLBACK_CODE
    kind = NOT_OWNED_AS_NOT_FOUND.get(kind, kind)
    return ERROR_CODES.get(kind, FALLBACK_CODE)


def error_description(kind: ErrorKind | None) -> str:
    """Return the human description for kind, or the fallback description."""
    if kind is None:
        return FALLBACK_DESCRIPTION
    kind = NOT_OWNED_AS_NOT_FOUND.get(kind, kind)
    return ERROR_DESCRIPTIONS.get(kind, FALLBACK_DESCRIPTION)


class DomainError(Exception):
    """Base exception for every recognized domain failure.

    The presentation layer maps these to HTTP responses using kind only;
    detail is for server-side logs and never reaches a response body.

    Attributes:
        kind: Member of ErrorKind identifying the failure.
        detail: Optional log context (ids, keys) for this occurrence.
    """

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        """Initialize the exception.

        Args:
            kind: The error kind.
            detail: Optional context for logs.
        """
        self.kind = kind
        self.detail = detail
        super().__init__(detail or kind.value)

    @property
    def code(self) -> str:
        return error_code(self.kind)

    @property
    def description(self) -> str:
        return error_description(self.kind)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.value!r}, detail={self.detail!r})"


class PaginationError(DomainError):
    """Raised when page or pageSize query parameters are invalid."""


class AuthenticationError(DomainError):
    """Raised when a credential is missing, invalid, expired or malformed."""


class PayloadError(DomainError):
    """Raised when a request body fails validation."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(ErrorKind.BAD_PAYLOAD, detail)


class NotFoundError(DomainError):
    """Raised when a resource does not exist or is inactive (soft-deleted)."""


class NotOwnedError(DomainError):
    """Raised when a resource belongs to a different account than the caller's."""


class MismatchError(DomainError):
    """Raised when a supplied field contradicts the stored resource."""
