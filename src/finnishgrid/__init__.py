"""Client for the Fingrid open data API.

Example:
    >>> from finnishgrid import get_data
    >>> df = get_data(124, "2021-01-01T00:00:00+0200", "2021-01-03T00:00:00+0200",
    ...               user_key="your-key")
"""

from __future__ import annotations

from ._version import __version__
from .catalog import fetch_named, get_dataset, list_datasets
from .clients.fingrid import (
    ApiError,
    ClientConfig,
    FingridClient,
    FingridError,
    MissingCredentialError,
    MissingParameterError,
    UnexpectedContentTypeError,
    UnknownDatasetError,
    get_data,
)

__all__ = [
    "__version__",
    "get_data",
    "FingridClient",
    "ClientConfig",
    "fetch_named",
    "get_dataset",
    "list_datasets",
    "FingridError",
    "MissingParameterError",
    "MissingCredentialError",
    "UnexpectedContentTypeError",
    "ApiError",
    "UnknownDatasetError",
]
