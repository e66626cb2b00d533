import logging
from typing import Any, Dict, Optional, Union

import httpx

from .config import TrafficPortalSettings
from .exceptions import (
    TrafficPortalNetworkError,
    TrafficPortalResponseFormatError,
    classify_status,
    error_for_status,
)
from .models import CreateMapRequest, CreateMapResponse

MASKED_RECORD_PATH = "/items"


class TrafficPortalApiClient:
    """
    Client for creating masked records (short links) through the Traffic Portal API.

    Every call opens its own connection and performs exactly one request; the
    client itself only holds its configuration and can be shared between threads.

    Example:
        >>> from src.rest.client import TrafficPortalApiClient
        >>> client = TrafficPortalApiClient("https://api.example.com/dev", api_key="...")
        >>> response = client.create_masked_record({
        ...     "uid": 125,
        ...     "tp_key": "spring-sale",
        ...     "domain": "dev.trfc.link",
        ...     "destination": "https://example.com",
        ... })
        >>> response.mid
    """

    def __init__(
        self,
        api_endpoint: str,
        api_key: str,
        timeout: int = 30,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._api_endpoint = api_endpoint[:-1] if api_endpoint.endswith("/") else api_endpoint
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Optional[TrafficPortalSettings] = None, **kwargs: Any) -> "TrafficPortalApiClient":
        settings = settings or TrafficPortalSettings()
        return cls(
            settings.api_endpoint,
            settings.api_key.get_secret_value(),
            settings.timeout,
            **kwargs,
        )

    @property
    def api_endpoint(self) -> str:
        return self._api_endpoint

    @property
    def timeout(self) -> int:
        return self._timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_endpoint={self._api_endpoint!r}, timeout={self._timeout!r})"

    def create_masked_record(self, request: Union[CreateMapRequest, Dict[str, Any]]) -> CreateMapResponse:
        if isinstance(request, dict):
            request = CreateMapRequest(**request)

        url = f"{self._api_endpoint}{MASKED_RECORD_PATH}"
        headers = {
            "x-api-key": self._api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        self._logger.debug("POST %s (tpKey=%s)", url, request.tp_key)
        try:
            with httpx.Client(timeout=httpx.Timeout(self._timeout), transport=self._transport) as client:
                response = client.post(url, json=request.to_payload(), headers=headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            self._logger.warning("Request to %s failed: %s", url, e)
            raise TrafficPortalNetworkError(f"Request failed: {e}") from e

        self._logger.debug("POST %s -> %s", url, response.status_code)

        if classify_status(response.status_code) is not None:
            error = error_for_status(response.status_code, _error_message(response))
            self._logger.warning("Traffic Portal rejected tpKey=%s: %s", request.tp_key, error)
            raise error

        try:
            data = response.json()
        except ValueError as e:
            self._logger.warning("Undecodable response body from %s: %s", url, e)
            raise TrafficPortalResponseFormatError(f"Invalid response format: {e}") from e

        return CreateMapResponse.from_payload(data)


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value

    text = response.text.strip()
    return text or None
