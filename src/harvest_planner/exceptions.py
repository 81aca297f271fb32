"""Errors raised at the I/O boundary.

The evaluation core never raises these; missing humidity and "no optimal
day" are modelled as ``None`` and a sentinel string instead.
"""

from __future__ import annotations


class HarvestPlannerError(Exception):
    """Base class for harvest planner errors."""


class LocationNotFound(HarvestPlannerError):
    """Geocoding returned no candidates for the query."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"Location not found: {query!r}")


class ForecastUnavailable(HarvestPlannerError):
    """The forecast could not be fetched or parsed."""
