"""Hourly temperature / precipitation-probability series for one day."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from harvest_planner.analysis.models import HourlySeries

if TYPE_CHECKING:
    from harvest_planner.schemas import ForecastBundle


def slice_day(bundle: ForecastBundle, day: str) -> HourlySeries:
    """
    Extract the hourly chart series belonging to ``day``.

    Samples are matched by timestamp prefix rather than by parsed date, so
    the forecast's single timezone is never reinterpreted. Order is kept.

    Args:
        bundle: Forecast bundle.
        day: ISO date (YYYY-MM-DD).

    Returns:
        Parallel ``HH:00`` labels, temperatures and precipitation
        probabilities. Empty when there is no hourly data for the day.
    """
    hourly = bundle.hourly
    if hourly is None:
        return HourlySeries()

    labels: list[str] = []
    temps: list[float | None] = []
    probs: list[float | None] = []
    for i, time_str in enumerate(hourly.time):
        if not time_str.startswith(day):
            continue
        labels.append(f"{datetime.fromisoformat(time_str).hour:02d}:00")
        temps.append(hourly.value("temperature_2m", i))
        probs.append(hourly.value("precipitation_probability", i))

    return HourlySeries(hour_labels=labels, temperatures=temps, precip_probabilities=probs)
