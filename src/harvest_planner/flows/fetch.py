"""
Prefect flow for loading a location's forecast.

Geocodes the place name, then fetches the forecast for the resulting
coordinates (sequential: the second call needs the first one's result).
Either a complete ``ForecastBundle`` comes out or an error is raised; the
evaluation core never sees a partial bundle.

Run locally:
    python -m harvest_planner.flows.fetch
"""

from __future__ import annotations

from typing import Any

import requests
from prefect import flow, get_run_logger, task

from harvest_planner.config import get_settings
from harvest_planner.datasources import geocoding
from harvest_planner.datasources.weather import forecast as weather_forecast
from harvest_planner.exceptions import ForecastUnavailable, LocationNotFound
from harvest_planner.schemas import ForecastBundle, Location


@task(name="geocode-location")
def geocode(city: str) -> Location:
    """Resolve a place name to coordinates via Nominatim."""
    return geocoding.search_location(city)


@task(name="fetch-weather")
def fetch_weather(lat: float, lon: float, timezone: str, forecast_days: int) -> dict[str, Any]:
    """Fetch the daily + hourly forecast from Open-Meteo."""
    return weather_forecast.fetch_forecast(
        lat, lon, timezone=timezone, forecast_days=forecast_days
    )


@task(name="parse-forecast")
def parse_forecast(raw: dict[str, Any], location: Location) -> ForecastBundle:
    """Validate the raw response into a ``ForecastBundle``."""
    return ForecastBundle.from_open_meteo(raw, location)


@flow(name="fetch-forecast", log_prints=True)
def fetch_bundle(city: str | None = None) -> ForecastBundle:
    """
    Load the forecast bundle for ``city``.

    Raises:
        LocationNotFound: If the place name cannot be geocoded.
        ForecastUnavailable: On transport or parse failures.
    """
    logger = get_run_logger()
    settings = get_settings()
    city = city or settings.default_city

    try:
        print(f"Geocoding {city!r}...")
        location = geocode(city)
        print(f"Fetching forecast for ({location.lat}, {location.lon})...")
        raw = fetch_weather(location.lat, location.lon, settings.timezone, settings.forecast_days)
        bundle = parse_forecast(raw, location)
    except LocationNotFound:
        logger.warning("No geocoding match for %r", city)
        raise
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        logger.error("Failed to load weather data for %r: %s", city, exc)
        msg = f"Failed to load weather data for {city!r}"
        raise ForecastUnavailable(msg) from exc

    print(f"Loaded {len(bundle.daily)} days of forecast data")
    return bundle


if __name__ == "__main__":
    result = fetch_bundle()
    print(f"Flow complete: {len(result.daily)} days")
