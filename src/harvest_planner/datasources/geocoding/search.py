"""Resolve a free-text place name to coordinates."""

from __future__ import annotations

import logging
from typing import Any

from harvest_planner.datasources.geocoding.client import ACCEPT_LANGUAGE, NOMINATIM_API
from harvest_planner.exceptions import LocationNotFound
from harvest_planner.schemas import Location
from harvest_planner.services.http import session

logger = logging.getLogger(__name__)


def search_location(query: str) -> Location:
    """
    Look up the best match for ``query`` via Nominatim.

    Args:
        query: Free-text location, e.g. ``"Hamburg"``.

    Returns:
        Coordinates and display name of the top match.

    Raises:
        LocationNotFound: If Nominatim returns no candidates.
        requests.RequestException: On transport or HTTP errors.
    """
    params: dict[str, str | int] = {"q": query, "format": "json", "limit": 1}
    headers = {"Accept-Language": ACCEPT_LANGUAGE}

    resp = session.get(NOMINATIM_API, params=params, headers=headers)
    resp.raise_for_status()
    results: list[dict[str, Any]] = resp.json()

    if not results:
        raise LocationNotFound(query)

    top = results[0]
    location = Location(
        lat=float(top["lat"]),
        lon=float(top["lon"]),
        place_name=top.get("display_name", query),
    )
    logger.debug("Geocoded %r to (%s, %s)", query, location.lat, location.lon)
    return location
