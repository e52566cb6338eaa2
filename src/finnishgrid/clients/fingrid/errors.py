"""Exceptions raised by the Fingrid open data client.

Every failure of a fetch call is terminal: nothing is retried and no partial
result is returned. The empty-result case is not an error and has no
exception here.
"""

from __future__ import annotations


class FingridError(Exception):
    """Base class for all errors raised by the client."""


class MissingParameterError(FingridError, ValueError):
    """A required fetch parameter was not supplied.

    Attributes:
        field: Human-readable name of the missing parameter
            ('dataset id', 'start time' or 'end time').
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required parameter: {field} was not given")


class MissingCredentialError(FingridError, RuntimeError):
    """No API key was passed and none is set in the environment."""

    def __init__(self, env_var: str = "FINGRID_OPENDATA_API_KEY") -> None:
        self.env_var = env_var
        super().__init__(
            f"Missing API key. Pass user_key or set the {env_var} environment variable."
        )


class UnexpectedContentTypeError(FingridError):
    """The API answered with something other than JSON.

    Attributes:
        content_type: Media type observed on the response.
    """

    def __init__(self, content_type: str) -> None:
        self.content_type = content_type
        super().__init__(f"API did not return json (content type: {content_type or 'missing'})")


class ApiError(FingridError):
    """The API answered with a non-200 status code.

    Attributes:
        status_code: HTTP status code of the response.
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API did not succeed (HTTP error status: {status_code})")


class UnknownDatasetError(FingridError, KeyError):
    """A dataset name is not present in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown dataset name: {self.name!r}"


__all__ = [
    "FingridError",
    "MissingParameterError",
    "MissingCredentialError",
    "UnexpectedContentTypeError",
    "ApiError",
    "UnknownDatasetError",
]
