"""Shared fixtures: Open-Meteo shaped forecast data."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta
from typing import Any

import pytest

from harvest_planner.schemas import ForecastBundle

# 2026-03-05 is a Thursday
START_DATE = date(2026, 3, 5)

HourlyHumidity = float | list[float] | None


def build_raw_forecast(
    temp_max: list[float | None],
    *,
    humidity_max: list[float | None] | None = None,
    hourly_humidity: list[HourlyHumidity] | None = None,
    precip_sum: list[float] | None = None,
    start: date = START_DATE,
) -> dict[str, Any]:
    """Build a raw Open-Meteo forecast response.

    ``hourly_humidity`` has one entry per day: a constant humidity for all
    24 hours, a list of 24 per-hour values, or None for "no hourly samples
    for this day". Omit it entirely for a response without hourly data.
    """
    n = len(temp_max)
    days = [(start + timedelta(days=i)).isoformat() for i in range(n)]
    daily: dict[str, Any] = {
        "time": days,
        "temperature_2m_max": temp_max,
        "temperature_2m_min": [None if t is None else t - 8 for t in temp_max],
        "precipitation_sum": precip_sum if precip_sum is not None else [0.0] * n,
        "precipitation_probability_max": [10] * n,
    }
    if humidity_max is not None:
        daily["relative_humidity_2m_max"] = humidity_max

    raw: dict[str, Any] = {"timezone": "Europe/Berlin", "daily": daily}

    if hourly_humidity is not None:
        times: list[str] = []
        temps: list[float] = []
        probs: list[int] = []
        hums: list[float] = []
        for day, rh in zip(days, hourly_humidity, strict=True):
            if rh is None:
                continue
            for hour in range(24):
                times.append(f"{day}T{hour:02d}:00")
                temps.append(10.0 + hour / 2)
                probs.append(min(hour * 5, 100))
                hums.append(rh[hour] if isinstance(rh, list) else rh)
        raw["hourly"] = {
            "time": times,
            "temperature_2m": temps,
            "precipitation_probability": probs,
            "relative_humidity_2m": hums,
        }

    return raw


@pytest.fixture
def make_bundle() -> Callable[..., ForecastBundle]:
    """Factory fixture: same arguments as ``build_raw_forecast``."""

    def _make(*args: Any, **kwargs: Any) -> ForecastBundle:
        return ForecastBundle.from_open_meteo(build_raw_forecast(*args, **kwargs))

    return _make


@pytest.fixture
def raw_forecast() -> dict[str, Any]:
    """A 9-day raw forecast with hourly data for every day."""
    return build_raw_forecast(
        [24.0, 19.0, 21.0, 23.0, 25.0, 27.0, 18.0, 16.0, 14.0],
        humidity_max=[70.0] * 9,
        hourly_humidity=[55.0] * 9,
        precip_sum=[0.0, 1.2, 0.0, 0.0, 3.4, 0.0, 0.0, 0.0, 0.5],
    )
