from enum import Enum
from typing import Dict, Optional, Type


class TrafficPortalError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def code(self) -> Optional[int]:
        return self.status_code


class TrafficPortalNetworkError(TrafficPortalError):
    """Raised when the request never produced a usable HTTP response (DNS, connect, TLS, timeout)."""


class TrafficPortalResponseFormatError(TrafficPortalNetworkError):
    """Raised when a 2xx response body is not valid JSON."""


class TrafficPortalApiError(TrafficPortalError):
    """Raised for non-2xx HTTP responses not covered by a more specific error."""


class TrafficPortalAuthenticationError(TrafficPortalApiError):
    """Raised when API returns 401 Unauthorized or 403 Forbidden."""


class TrafficPortalValidationError(TrafficPortalApiError):
    """Raised when API rejects the record (400, 422 and other 4xx), e.g. a duplicate key."""


class ErrorKind(str, Enum):
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    API = "api"


_ERROR_TYPES: Dict[ErrorKind, Type[TrafficPortalApiError]] = {
    ErrorKind.AUTHENTICATION: TrafficPortalAuthenticationError,
    ErrorKind.VALIDATION: TrafficPortalValidationError,
    ErrorKind.API: TrafficPortalApiError,
}

_DEFAULT_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: "Authentication failed",
    ErrorKind.VALIDATION: "Validation failed",
    ErrorKind.API: "API request failed",
}


def classify_status(status_code: int) -> Optional[ErrorKind]:
    """Map an HTTP status to the kind of error it signals, or None for 2xx."""
    if 200 <= status_code < 300:
        return None
    if status_code in (401, 403):
        return ErrorKind.AUTHENTICATION
    if 400 <= status_code < 500:
        return ErrorKind.VALIDATION
    return ErrorKind.API


def error_for_status(status_code: int, message: Optional[str] = None) -> TrafficPortalApiError:
    kind = classify_status(status_code)
    if kind is None:
        raise ValueError(f"Status code {status_code} is not an error")

    if not message:
        message = f"{_DEFAULT_MESSAGES[kind]} (HTTP {status_code})"
    return _ERROR_TYPES[kind](message, status_code=status_code)
