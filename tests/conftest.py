"""Shared pytest fixtures for finnishgrid tests."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import pytest

from finnishgrid.clients.fingrid.models import ClientConfig, HTTPResponse

TEST_BASE_URL = "https://api.example.test/v1"


class MockHTTPClient:
    """HTTP client double that records calls and replays canned responses."""

    def __init__(self, responses: Optional[List[HTTPResponse]] = None):
        self.responses = responses or []
        self.calls: List[Dict[str, Any]] = []
        self._response_index = 0

    def get(
        self,
        url: str,
        headers: Dict[str, str],
        params: Dict[str, str],
        timeout: int,
    ) -> HTTPResponse:
        self.calls.append({
            "url": url,
            "headers": headers,
            "params": params,
            "timeout": timeout,
        })
        if self._response_index < len(self.responses):
            response = self.responses[self._response_index]
            self._response_index += 1
            return response
        return HTTPResponse(status_code=200, content_type="application/json", text="[]")


def json_response(
    payload: Any,
    status_code: int = 200,
    content_type: str = "application/json",
) -> HTTPResponse:
    """Build an HTTPResponse carrying a JSON-encoded payload."""
    return HTTPResponse(status_code=status_code, content_type=content_type, text=json.dumps(payload))


def hourly_events(values: List[float], start_hour: int = 0) -> List[Dict[str, Any]]:
    """Build hourly event records starting 2021-01-01 (UTC) for the given values."""
    events = []
    for offset, value in enumerate(values):
        hour = start_hour + offset
        day, hour_of_day = divmod(hour, 24)
        next_day, next_hour = divmod(hour + 1, 24)
        events.append({
            "start_time": f"2021-01-{1 + day:02d}T{hour_of_day:02d}:00:00+0000",
            "end_time": f"2021-01-{1 + next_day:02d}T{next_hour:02d}:00:00+0000",
            "value": value,
        })
    return events


@pytest.fixture
def clean_env(monkeypatch) -> None:
    """Remove all finnishgrid env vars for isolated testing."""
    for var in (
        "FINGRID_OPENDATA_API_KEY",
        "FINGRID_OPENDATA_API_URL",
        "FINGRID_OPENDATA_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env_api_key(monkeypatch, clean_env) -> str:
    """Set the default API key in the environment."""
    monkeypatch.setenv("FINGRID_OPENDATA_API_KEY", "env-key-456")
    return "env-key-456"


@pytest.fixture
def client_config() -> ClientConfig:
    """Client config pointing at a non-routable test host."""
    return ClientConfig(base_url=TEST_BASE_URL)


@pytest.fixture
def mock_http_factory() -> Callable[..., MockHTTPClient]:
    """Factory for MockHTTPClient instances."""
    return MockHTTPClient


@pytest.fixture
def make_json_response() -> Callable[..., HTTPResponse]:
    """Factory for JSON HTTPResponse objects."""
    return json_response


@pytest.fixture
def make_hourly_events() -> Callable[..., List[Dict[str, Any]]]:
    """Factory for hourly event payloads."""
    return hourly_events
