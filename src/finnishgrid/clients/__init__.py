"""API clients.

Available clients:
- fingrid: Fingrid open data API client for grid time series
"""

from . import fingrid

__all__ = ["fingrid"]
