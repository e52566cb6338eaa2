"""Fingrid open data API client package.

This package provides a small, testable interface to the Fingrid open data
events endpoint with support for:
- One generic fetch call for every dataset id
- Dependency injection for the HTTP client (testability)
- Explicit errors for every precondition and response check

Example usage:
    >>> from finnishgrid.clients.fingrid import FingridClient
    >>> client = FingridClient()
    >>> df = client.fetch(124, "2021-01-01T00:00:00+0200", "2021-01-03T00:00:00+0200",
    ...                   user_key="your-key")

    # Or the module function:
    >>> from finnishgrid.clients.fingrid import get_data
    >>> df = get_data(124, "2021-01-01T00:00:00+0200", "2021-01-03T00:00:00+0200")
"""

from __future__ import annotations

from .client import (
    API_KEY_HEADER,
    CLIENT_ID_HEADER,
    FingridClient,
    HTTPClient,
    RequestsHTTPClient,
    get_data,
    resolve_api_key,
)
from .errors import (
    ApiError,
    FingridError,
    MissingCredentialError,
    MissingParameterError,
    UnexpectedContentTypeError,
    UnknownDatasetError,
)
from .models import (
    DEFAULT_CLIENT_ID,
    EVENT_FIELDS,
    OBSERVATION_COLUMNS,
    ClientConfig,
    DatasetEntry,
    HTTPResponse,
)
from .parsers import (
    build_observation_frame,
    drop_duplicate_observations,
    is_json_media_type,
    media_type,
    parse_events,
    parse_timestamps,
)


__all__ = [
    # Main client
    "FingridClient",
    "HTTPClient",
    "RequestsHTTPClient",
    "resolve_api_key",
    "get_data",
    "API_KEY_HEADER",
    "CLIENT_ID_HEADER",
    # Errors
    "FingridError",
    "MissingParameterError",
    "MissingCredentialError",
    "UnexpectedContentTypeError",
    "ApiError",
    "UnknownDatasetError",
    # Models
    "ClientConfig",
    "HTTPResponse",
    "DatasetEntry",
    "OBSERVATION_COLUMNS",
    "EVENT_FIELDS",
    "DEFAULT_CLIENT_ID",
    # Parsers
    "media_type",
    "is_json_media_type",
    "parse_events",
    "parse_timestamps",
    "drop_duplicate_observations",
    "build_observation_frame",
]
