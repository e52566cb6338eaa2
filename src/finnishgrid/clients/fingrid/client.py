from __future__ import annotations
import logging
from typing import Dict, Optional, Protocol
import pandas as pd
import requests
from finnishgrid.config import API_KEY_ENV_VAR, get_settings
from .errors import (
    ApiError,
    MissingCredentialError,
    MissingParameterError,
    UnexpectedContentTypeError,
)
from .models import ClientConfig, HTTPResponse
from .parsers import build_observation_frame, is_json_media_type, media_type, parse_events

LOGGER = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"
CLIENT_ID_HEADER = "version"

# HTTP Client Protocol
class HTTPClient(Protocol):
    def get(
        self,
        url: str,
        headers: Dict[str, str],
        params: Dict[str, str],
        timeout: int,
    ) -> HTTPResponse:
        ...

class RequestsHTTPClient:
    """One plain ``requests.get`` per call; no session is kept between calls."""

    def get(
        self,
        url: str,
        headers: Dict[str, str],
        params: Dict[str, str],
        timeout: int,
    ) -> HTTPResponse:
        response: Optional[requests.Response] = None

        try:
            response = requests.get(url, headers=headers, params=params, timeout=timeout)
            return HTTPResponse(
                status_code=response.status_code,
                content_type=response.headers.get("Content-Type", ""),
                text=response.text,
            )

        except requests.exceptions.Timeout as exc:
            raise requests.exceptions.Timeout(
                f"Request timed out after {timeout} seconds while connecting to {url}"
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise requests.exceptions.ConnectionError(
                f"Failed to establish connection to {url}: {exc}"
            ) from exc
        finally:
            if response is not None:
                response.close()

# Resolve API key
def resolve_api_key(user_key: Optional[str] = None) -> str:
    """Return the effective API key for one call.

    An explicitly passed non-empty ``user_key`` always wins; otherwise the
    FINGRID_OPENDATA_API_KEY environment variable is read at call time.

    Raises:
        MissingCredentialError: If neither source yields a key.
    """
    if user_key:
        return user_key
    env_key = get_settings().api_key
    if env_key:
        return env_key
    raise MissingCredentialError(API_KEY_ENV_VAR)

# Main client class for the Fingrid open data API
class FingridClient:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[HTTPClient] = None,
    ):
        self._config = config or ClientConfig.from_settings(get_settings())
        self._http_client = http_client or RequestsHTTPClient()
        base_url = self._config.base_url.rstrip("/")
        self._events_endpoint_template = f"{base_url}/variable/{{dataset_id}}/events/json"

    @property
    def config(self) -> ClientConfig:
        return self._config

    def events_url(self, dataset_id: int) -> str:
        return self._events_endpoint_template.format(dataset_id=dataset_id)

    # Return request headers
    def _get_headers(self, api_key: str) -> Dict[str, str]:
        return {
            API_KEY_HEADER: api_key,
            CLIENT_ID_HEADER: self._config.client_id,
        }

    def _validate_response(self, response: HTTPResponse) -> None:
        # Content type is checked before status: a 403 text/html page is
        # reported as a content-type failure.
        if not is_json_media_type(response.content_type):
            raise UnexpectedContentTypeError(media_type(response.content_type))
        if response.status_code != 200:
            raise ApiError(response.status_code)

    def fetch(
        self,
        dataset_id: Optional[int] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        user_key: Optional[str] = None,
    ) -> Optional[pd.DataFrame]:
        """Fetch one dataset for one time window.

        Args:
            dataset_id: Fingrid variable id, e.g. 124 for electricity
                consumption in Finland.
            start_time: Window start, ISO-8601 with UTC offset
                (YYYY-MM-DDTHH:MM:SS+0200). Sent to the API verbatim.
            end_time: Window end, same format as ``start_time``.
            user_key: API key. Overrides FINGRID_OPENDATA_API_KEY.

        Returns:
            DataFrame with columns start_time, end_time, value, dataset_id,
            or None when the API has no data for the window.

        Raises:
            MissingParameterError: If dataset_id, start_time or end_time is
                None (checked in that order).
            ValueError: If dataset_id is not an integer. Raised before any
                request is sent.
            MissingCredentialError: If no API key is available.
            UnexpectedContentTypeError: If the response is not JSON.
            ApiError: If the response status is not 200.
        """
        if dataset_id is None:
            raise MissingParameterError("dataset id")
        try:
            dataset_id = int(dataset_id)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"dataset id must be an integer, got {dataset_id!r}") from exc
        if start_time is None:
            raise MissingParameterError("start time")
        if end_time is None:
            raise MissingParameterError("end time")
        api_key = resolve_api_key(user_key)

        url = self.events_url(dataset_id)
        params = {"start_time": start_time, "end_time": end_time}
        LOGGER.debug("GET %s params=%s", url, params)
        response = self._http_client.get(
            url=url,
            headers=self._get_headers(api_key),
            params=params,
            timeout=self._config.timeout,
        )
        self._validate_response(response)

        records = parse_events(response.text)
        if not records:
            LOGGER.info(
                "No datapoints found for dataset %s (timespan %s - %s), returning None",
                dataset_id,
                start_time,
                end_time,
            )
            return None

        dataframe = build_observation_frame(records, dataset_id)
        LOGGER.debug(
            "Dataset %s: %d records received, %d after de-duplication",
            dataset_id,
            len(records),
            len(dataframe),
        )
        return dataframe


def get_data(
    dataset_id: Optional[int] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    user_key: Optional[str] = None,
    *,
    config: Optional[ClientConfig] = None,
    http_client: Optional[HTTPClient] = None,
) -> Optional[pd.DataFrame]:
    """Fetch one dataset for one time window with a fresh client.

    Example:
        >>> df = get_data(124, "2021-01-01T00:00:00+0200", "2021-01-03T00:00:00+0200")
    """
    client = FingridClient(config=config, http_client=http_client)
    return client.fetch(dataset_id, start_time, end_time, user_key)


__all__ = [
    "API_KEY_HEADER",
    "CLIENT_ID_HEADER",
    "HTTPClient",
    "RequestsHTTPClient",
    "resolve_api_key",
    "FingridClient",
    "get_data",
]
