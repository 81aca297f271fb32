"""Daytime mean humidity from hourly forecast samples.

A single reading or the daily maximum overstates the humidity a crop is
exposed to during the working day, so the evaluation uses the mean over a
daytime window (08:00-20:00 by default).
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from harvest_planner.schemas import ForecastBundle

DEFAULT_START_HOUR = 8
DEFAULT_END_HOUR = 20


def mean_humidity(
    bundle: ForecastBundle,
    day: str,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> int | None:
    """
    Mean relative humidity for ``day`` between ``start_hour`` and ``end_hour``.

    Samples are matched to the day by timestamp prefix and kept when their
    hour lies in ``[start_hour, end_hour]`` inclusive.

    Args:
        bundle: Forecast bundle with hourly data.
        day: ISO date (YYYY-MM-DD).
        start_hour: First hour of the window.
        end_hour: Last hour of the window.

    Returns:
        The mean rounded to the nearest integer (halves round up), or None
        when no sample matched. None is "unavailable", not zero.
    """
    hourly = bundle.hourly
    if hourly is None or hourly.relative_humidity_2m is None:
        return None

    total = 0.0
    count = 0
    for time_str, humidity in zip(hourly.time, hourly.relative_humidity_2m, strict=True):
        if humidity is None or not time_str.startswith(day):
            continue
        if start_hour <= datetime.fromisoformat(time_str).hour <= end_hour:
            total += humidity
            count += 1

    if not count:
        return None
    return math.floor(total / count + 0.5)
