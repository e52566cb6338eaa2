"""Configuration management for finnishgrid."""

from __future__ import annotations

from .settings import (
    API_KEY_ENV_VAR,
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    FingridSettings,
    get_settings,
)

__all__ = [
    "API_KEY_ENV_VAR",
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT",
    "FingridSettings",
    "get_settings",
]
