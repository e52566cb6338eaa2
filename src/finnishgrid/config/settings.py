"""Configuration loaded from environment variables using Pydantic Settings.

All variables share the ``FINGRID_OPENDATA_`` prefix:

- ``FINGRID_OPENDATA_API_KEY``: default API key, used when no key is passed
  to a fetch call.
- ``FINGRID_OPENDATA_API_URL``: API base URL.
- ``FINGRID_OPENDATA_TIMEOUT``: request timeout in seconds.

Settings are rebuilt on every ``get_settings()`` call. The environment is
the single source of truth at call time, so exporting a new key takes
effect on the next request without restarting the process.

Example:
    >>> from finnishgrid.config import get_settings
    >>> get_settings().api_url
    'https://api.fingrid.fi/v1'
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER = logging.getLogger(__name__)

API_KEY_ENV_VAR = "FINGRID_OPENDATA_API_KEY"
DEFAULT_API_URL = "https://api.fingrid.fi/v1"
DEFAULT_TIMEOUT = 30


class FingridSettings(BaseSettings):
    """Fingrid open data API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FINGRID_OPENDATA_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: Optional[str] = Field(
        default=None,
        description="Default API key, overridable per call",
        repr=False,
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Fingrid open data API base URL",
    )
    timeout: int = Field(
        default=DEFAULT_TIMEOUT,
        ge=1,
        description="Request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def blank_key_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty or whitespace-only key as not set."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Ensure the base URL starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API URL must start with http:// or https://")
        return v.rstrip("/")


def get_settings() -> FingridSettings:
    """Build settings from the current environment.

    Returns:
        Fresh FingridSettings instance.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    settings = FingridSettings()
    LOGGER.debug(
        "Loaded settings (api_url=%s, timeout=%s, api_key set=%s)",
        settings.api_url,
        settings.timeout,
        settings.api_key is not None,
    )
    return settings


__all__ = [
    "API_KEY_ENV_VAR",
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT",
    "FingridSettings",
    "get_settings",
]
