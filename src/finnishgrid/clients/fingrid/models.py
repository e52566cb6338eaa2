from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from finnishgrid._version import __version__
from finnishgrid.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, FingridSettings

# Canonical column order of an observation table
OBSERVATION_COLUMNS = ["start_time", "end_time", "value", "dataset_id"]
# Fields every event record in the payload must carry
EVENT_FIELDS = ["start_time", "end_time", "value"]

DEFAULT_CLIENT_ID = f"finnishgrid-python-client {__version__}"


class ClientConfig(BaseModel):
    """Configuration settings for the Fingrid client.

    Attributes:
        base_url: API base URL.
        timeout: Request timeout in seconds.
        client_id: Value sent in the client-identifier ('version') header.
    """

    base_url: str = DEFAULT_API_URL
    timeout: int = Field(DEFAULT_TIMEOUT, ge=1)
    client_id: str = DEFAULT_CLIENT_ID

    @classmethod
    def from_settings(cls, settings: FingridSettings) -> "ClientConfig":
        """Build a config from environment-backed settings."""
        return cls(base_url=settings.api_url, timeout=settings.timeout)


class HTTPResponse(BaseModel):
    """Transport-neutral view of an HTTP response.

    Attributes:
        status_code: HTTP status code.
        content_type: Raw Content-Type header value (may include parameters).
        text: Decoded response body.
    """

    status_code: int
    content_type: str = ""
    text: str = ""


class DatasetEntry(BaseModel):
    """One row of the dataset catalog.

    Attributes:
        name: Python identifier used for the generated convenience function.
        dataset_id: Fingrid variable id.
        title: Human-readable dataset description.
        url: Dataset documentation page.
    """

    name: str
    dataset_id: int = Field(..., gt=0, alias="id")
    title: str
    url: Optional[str] = None

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("name")
    @classmethod
    def name_is_identifier(cls, v: str) -> str:
        """Names become function names, so they must be valid identifiers."""
        if not v.isidentifier():
            raise ValueError(f"Dataset name '{v}' is not a valid Python identifier")
        return v


__all__ = [
    "OBSERVATION_COLUMNS",
    "EVENT_FIELDS",
    "DEFAULT_CLIENT_ID",
    "ClientConfig",
    "HTTPResponse",
    "DatasetEntry",
]
