from .client import TrafficPortalApiClient
from .config import TrafficPortalSettings
from .exceptions import (
    ErrorKind,
    TrafficPortalApiError,
    TrafficPortalAuthenticationError,
    TrafficPortalError,
    TrafficPortalNetworkError,
    TrafficPortalResponseFormatError,
    TrafficPortalValidationError,
    classify_status,
    error_for_status,
)
from .models import MISSING, CreateMapRequest, CreateMapResponse

__all__ = [
    "TrafficPortalApiClient",
    "TrafficPortalSettings",
    "ErrorKind",
    "TrafficPortalApiError",
    "TrafficPortalAuthenticationError",
    "TrafficPortalError",
    "TrafficPortalNetworkError",
    "TrafficPortalResponseFormatError",
    "TrafficPortalValidationError",
    "classify_status",
    "error_for_status",
    "MISSING",
    "CreateMapRequest",
    "CreateMapResponse",
]
