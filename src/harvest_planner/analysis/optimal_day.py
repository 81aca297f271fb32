"""Earliest forecast day that meets a crop's full threshold set.

Each day is checked for temperature (daily maximum inside the crop's band)
and humidity. Humidity is resolved from the best signal the forecast has
for that day:

  1. ``HourlyMean``  - daytime mean of the hourly samples
  2. ``DailyMax``    - the daily maximum relative humidity
  3. ``NoSignal``    - no humidity data at all; the criterion passes

The permissive third case is a known policy gap: a day with no humidity data
can be recommended even if it turns out to be too damp.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import TYPE_CHECKING

from harvest_planner.analysis.humidity import DEFAULT_END_HOUR, DEFAULT_START_HOUR, mean_humidity
from harvest_planner.reference.crops import get_profile

if TYPE_CHECKING:
    from harvest_planner.schemas import CropProfile, ForecastBundle

DEFAULT_SCAN_DAYS = 7
NO_OPTIMAL_DAY_TEMPLATE = "No optimal day in the next {days} days"
NO_OPTIMAL_DAY = NO_OPTIMAL_DAY_TEMPLATE.format(days=DEFAULT_SCAN_DAYS)


class ScanStart(StrEnum):
    """Named scan starting points."""

    TODAY = "today"
    TOMORROW = "tomorrow"

    @property
    def offset(self) -> int:
        """Day index the scan starts at."""
        return 1 if self is ScanStart.TOMORROW else 0


# ---------------------------------------------------------------------------
# Humidity signal
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HourlyMean:
    """Daytime mean from hourly samples."""

    value: int


@dataclass(frozen=True)
class DailyMax:
    """Daily maximum relative humidity."""

    value: float


@dataclass(frozen=True)
class NoSignal:
    """No humidity data for the day."""


HumiditySignal = HourlyMean | DailyMax | NoSignal


def resolve_humidity(
    bundle: ForecastBundle,
    index: int,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> HumiditySignal:
    """Pick the best available humidity signal for day ``index``."""
    mean = mean_humidity(bundle, bundle.daily.time[index], start_hour, end_hour)
    if mean is not None:
        return HourlyMean(mean)
    daily_max = bundle.daily.value("relative_humidity_2m_max", index)
    if daily_max is not None:
        return DailyMax(daily_max)
    return NoSignal()


def humidity_satisfied(signal: HumiditySignal, profile: CropProfile) -> bool:
    """Whether a resolved humidity signal is within the crop's ceiling."""
    match signal:
        case HourlyMean(value=value):
            return profile.humidity_ok(value)
        case DailyMax(value=value):
            return profile.humidity_ok(value)
        case NoSignal():
            return True
    msg = f"Unknown humidity signal: {signal!r}"
    raise TypeError(msg)


# ---------------------------------------------------------------------------
# Scan
# ---------------------------------------------------------------------------


def format_harvest_date(day: str) -> str:
    """Format an ISO date as full weekday plus day-first date, e.g. ``Thursday, 05.03.``."""
    return date.fromisoformat(day).strftime("%A, %d.%m.")


def _start_index(start: int | ScanStart) -> int:
    if isinstance(start, ScanStart):
        return start.offset
    return max(start, 0)


def day_qualifies(
    profile: CropProfile,
    bundle: ForecastBundle,
    index: int,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> bool:
    """Whether day ``index`` meets both the temperature and humidity criteria."""
    temp_max = bundle.daily.value("temperature_2m_max", index)
    if temp_max is None or not profile.temp_in_band(temp_max):
        return False
    signal = resolve_humidity(bundle, index, start_hour, end_hour)
    return humidity_satisfied(signal, profile)


def find_next_optimal_index(
    crop: str,
    bundle: ForecastBundle,
    start: int | ScanStart = 0,
    *,
    scan_days: int = DEFAULT_SCAN_DAYS,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> int | None:
    """
    Index of the earliest qualifying day, or None.

    Scans indices from ``start`` up to ``min(scan_days, len(daily)) - 1``.
    A forecast shorter than ``scan_days`` simply shortens the scan.

    Raises:
        KeyError: If ``crop`` is not registered.
    """
    profile = get_profile(crop)
    end = min(scan_days, len(bundle.daily))
    for index in range(_start_index(start), end):
        if day_qualifies(profile, bundle, index, start_hour, end_hour):
            return index
    return None


def find_next_optimal_day(
    crop: str,
    bundle: ForecastBundle,
    start: int | ScanStart = 0,
    *,
    scan_days: int = DEFAULT_SCAN_DAYS,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> str:
    """
    Next recommended harvest day for ``crop`` as display text.

    Args:
        crop: Registered crop name.
        bundle: Forecast to scan.
        start: Day offset to start from (0 = today), or a ``ScanStart``.
        scan_days: Horizon in days, counted from today.
        start_hour: First hour of the daytime humidity window.
        end_hour: Last hour of the daytime humidity window.

    Returns:
        The formatted date of the earliest qualifying day, or the
        "no optimal day" sentinel when none qualifies.
    """
    index = find_next_optimal_index(
        crop, bundle, start, scan_days=scan_days, start_hour=start_hour, end_hour=end_hour
    )
    if index is None:
        return NO_OPTIMAL_DAY_TEMPLATE.format(days=scan_days)
    return format_harvest_date(bundle.daily.time[index])
