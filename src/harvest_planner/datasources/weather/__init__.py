"""Open-Meteo weather data source.

Fetches the daily + hourly forecast from Open-Meteo (free, no API key).

Public API:
  - forecast: fetch_forecast (9-day daily + hourly forecast)
  - client: API URL, requested variables
"""

from harvest_planner.datasources.weather.client import (
    DAILY_VARS,
    HOURLY_VARS,
    OPEN_METEO_API,
)
from harvest_planner.datasources.weather.forecast import fetch_forecast

__all__ = [
    "DAILY_VARS",
    "HOURLY_VARS",
    "OPEN_METEO_API",
    "fetch_forecast",
]
