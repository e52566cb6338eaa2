"""Named dataset catalog.

The catalog is a static table (``data/datasets.yaml``) mapping readable
dataset names to Fingrid variable ids. It carries no fetch logic of its own:
``fetch_named()`` and the generated per-dataset functions all delegate to
``FingridClient.fetch``.

Example:
    >>> from finnishgrid.catalog import get_dataset
    >>> get_dataset("electricity_consumption_FI").dataset_id
    124
"""

from __future__ import annotations

import functools
import logging
from importlib import resources
from typing import Any, Callable, Dict, List, Optional

import pandas as pd
import yaml

from finnishgrid.clients.fingrid import DatasetEntry, FingridClient, UnknownDatasetError

LOGGER = logging.getLogger(__name__)

CATALOG_RESOURCE = "datasets.yaml"


def parse_catalog(raw: Dict[str, Any]) -> Dict[str, DatasetEntry]:
    """Validate a decoded catalog document into entries keyed by name.

    Raises:
        ValueError: If the document has no ``datasets`` list or a name
            appears twice.
    """
    items = (raw or {}).get("datasets")
    if not isinstance(items, list):
        raise ValueError("Catalog must contain a 'datasets' list")

    entries: Dict[str, DatasetEntry] = {}
    for item in items:
        entry = DatasetEntry.model_validate(item)
        if entry.name in entries:
            raise ValueError(f"Duplicate dataset name in catalog: {entry.name}")
        entries[entry.name] = entry
    return entries


@functools.lru_cache(maxsize=1)
def load_catalog() -> Dict[str, DatasetEntry]:
    """Load the bundled dataset catalog (read once per process)."""
    text = resources.files("finnishgrid.data").joinpath(CATALOG_RESOURCE).read_text(encoding="utf-8")
    entries = parse_catalog(yaml.safe_load(text))
    LOGGER.debug("Loaded %d catalog entries", len(entries))
    return entries


def get_dataset(name: str) -> DatasetEntry:
    """Look up a catalog entry by name.

    Raises:
        UnknownDatasetError: If the name is not in the catalog.
    """
    try:
        return load_catalog()[name]
    except KeyError:
        raise UnknownDatasetError(name) from None


def list_datasets() -> List[DatasetEntry]:
    """Return all catalog entries ordered by dataset id."""
    return sorted(load_catalog().values(), key=lambda entry: (entry.dataset_id, entry.name))


def fetch_named(
    name: str,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    user_key: Optional[str] = None,
    *,
    client: Optional[FingridClient] = None,
) -> Optional[pd.DataFrame]:
    """Fetch a dataset by catalog name.

    Same contract as ``FingridClient.fetch``; raises UnknownDatasetError for
    names missing from the catalog.
    """
    entry = get_dataset(name)
    client = client or FingridClient()
    return client.fetch(entry.dataset_id, start_time, end_time, user_key)


def make_dataset_function(entry: DatasetEntry) -> Callable[..., Optional[pd.DataFrame]]:
    """Build the thin convenience function for one catalog entry."""

    def fetch_dataset(
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        user_key: Optional[str] = None,
        *,
        client: Optional[FingridClient] = None,
    ) -> Optional[pd.DataFrame]:
        client = client or FingridClient()
        return client.fetch(entry.dataset_id, start_time, end_time, user_key)

    fetch_dataset.__name__ = entry.name
    fetch_dataset.__qualname__ = entry.name
    fetch_dataset.__doc__ = (
        f"{entry.title} (dataset {entry.dataset_id}).\n\n"
        "Args:\n"
        "    start_time: Window start, ISO-8601 with UTC offset.\n"
        "    end_time: Window end, ISO-8601 with UTC offset.\n"
        "    user_key: API key. Overrides FINGRID_OPENDATA_API_KEY.\n\n"
        "Returns:\n"
        "    Observation DataFrame, or None when no data exists for the window.\n"
    )
    if entry.url:
        fetch_dataset.__doc__ += f"\nSee {entry.url}\n"
    fetch_dataset.dataset = entry  # type: ignore[attr-defined]
    return fetch_dataset


__all__ = [
    "CATALOG_RESOURCE",
    "parse_catalog",
    "load_catalog",
    "get_dataset",
    "list_datasets",
    "fetch_named",
    "make_dataset_function",
]
