"""Parsers and data transformation functions for the Fingrid open data API.

This module turns raw event payloads into observation tables. Nothing here
knows about individual datasets: units, signs and interval lengths are the
API's business.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

import pandas as pd

from .models import EVENT_FIELDS, OBSERVATION_COLUMNS


# ─────────────────────────────────────────────────────────────────────────────
# Response Helpers
# ─────────────────────────────────────────────────────────────────────────────

def media_type(content_type: str) -> str:
    """Strip parameters from a Content-Type header value.

    >>> media_type("application/json; charset=utf-8")
    'application/json'
    """
    return (content_type or "").split(";", 1)[0].strip().lower()


def is_json_media_type(content_type: str) -> bool:
    """Return True when a Content-Type header declares a JSON body."""
    return media_type(content_type) == "application/json"


def parse_events(text: str) -> List[Dict[str, Any]]:
    """Decode an events payload into a list of records.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON.
        ValueError: If the body is valid JSON but not an array.
    """
    payload = json.loads(text)
    if not isinstance(payload, list):
        raise ValueError(
            f"Expected a JSON array of events, got {type(payload).__name__}"
        )
    return payload


# ─────────────────────────────────────────────────────────────────────────────
# Observation Table
# ─────────────────────────────────────────────────────────────────────────────

def parse_timestamps(values: pd.Series) -> pd.Series:
    """Parse ISO-8601 strings with UTC offset into tz-aware UTC timestamps."""
    return pd.to_datetime(values, format="ISO8601", utc=True)


def drop_duplicate_observations(frame: pd.DataFrame) -> pd.DataFrame:
    """Remove fully identical rows, keeping the first occurrence in order."""
    return frame.drop_duplicates(keep="first").reset_index(drop=True)


def build_observation_frame(records: List[Dict[str, Any]], dataset_id: int) -> pd.DataFrame:
    """Convert raw event records into a de-duplicated observation table.

    Args:
        records: Event objects as returned by the API, each carrying
            ``start_time``, ``end_time`` and ``value``.
        dataset_id: Dataset id injected into every row; the API does not
            echo it.

    Returns:
        DataFrame with columns start_time, end_time, value, dataset_id in
        API response order, exact duplicates removed.

    Raises:
        KeyError: If the records lack a required field.
        ValueError: If a timestamp or value cannot be parsed.
    """
    frame = pd.DataFrame.from_records(records)
    missing = [field for field in EVENT_FIELDS if field not in frame.columns]
    if missing:
        raise KeyError(f"Event records are missing required fields: {', '.join(missing)}")

    frame = frame.loc[:, EVENT_FIELDS].copy()
    frame["start_time"] = parse_timestamps(frame["start_time"])
    frame["end_time"] = parse_timestamps(frame["end_time"])
    frame["value"] = pd.to_numeric(frame["value"]).astype("float64")
    frame["dataset_id"] = int(dataset_id)
    frame["dataset_id"] = frame["dataset_id"].astype("int64")

    return drop_duplicate_observations(frame[OBSERVATION_COLUMNS])


__all__ = [
    "media_type",
    "is_json_media_type",
    "parse_events",
    "parse_timestamps",
    "drop_duplicate_observations",
    "build_observation_frame",
]
