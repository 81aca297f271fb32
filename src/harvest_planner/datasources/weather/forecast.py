"""Multi-day daily + hourly forecast from Open-Meteo Forecast API."""

from __future__ import annotations

from typing import Any

from harvest_planner.datasources.weather.client import (
    DAILY_VARS,
    DEFAULT_FORECAST_DAYS,
    HOURLY_VARS,
    OPEN_METEO_API,
)
from harvest_planner.services.http import session


def fetch_forecast(
    lat: float,
    lon: float,
    *,
    timezone: str = "Europe/Berlin",
    forecast_days: int = DEFAULT_FORECAST_DAYS,
) -> dict[str, Any]:
    """
    Fetch the daily and hourly forecast from Open-Meteo.

    All timestamps in the response are local to ``timezone``, so day
    boundaries are unambiguous when slicing hourly data by date.

    Args:
        lat: Latitude.
        lon: Longitude.
        timezone: IANA timezone the whole response is aligned to.
        forecast_days: Number of days to forecast (max 16).

    Returns:
        Raw API response dict with ``daily`` and ``hourly`` keys containing arrays.
    """
    params: dict[str, str | int | float | list[str]] = {
        "latitude": lat,
        "longitude": lon,
        "daily": DAILY_VARS,
        "hourly": HOURLY_VARS,
        "timezone": timezone,
        "forecast_days": forecast_days,
    }

    resp = session.get(OPEN_METEO_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
