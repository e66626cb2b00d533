from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrafficPortalSettings(BaseSettings):
    """
    Connection settings for the Traffic Portal API, read from ``TP_*``
    environment variables or a local ``.env`` file.

    Example:
        TP_API_ENDPOINT=https://api.example.com/dev
        TP_API_KEY=...
        TP_TIMEOUT=30
    """

    model_config = SettingsConfigDict(
        env_prefix="TP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_endpoint: str = Field(..., min_length=1, description="Base URL of the API stage.")
    api_key: SecretStr = Field(..., description="API key sent with every request.")
    timeout: int = Field(default=30, gt=0, description="Request timeout in seconds.")
    test_uid: Optional[int] = Field(default=None, description="Account uid used by examples and live tests.")
