"""One convenience function per catalog dataset.

Functions are generated from ``data/datasets.yaml`` at import time, so
``finnishgrid.datasets.electricity_consumption_FI(start, end)`` is the same
call as ``get_data(124, start, end)``.

Example:
    >>> from finnishgrid import datasets
    >>> df = datasets.electricity_consumption_FI(
    ...     "2021-01-01T00:00:00+0200", "2021-01-03T00:00:00+0200", user_key="your-key"
    ... )
"""

from __future__ import annotations

from finnishgrid.catalog import load_catalog, make_dataset_function

_FUNCTIONS = {name: make_dataset_function(entry) for name, entry in load_catalog().items()}

globals().update(_FUNCTIONS)

__all__ = sorted(_FUNCTIONS)
