"""Assemble the per-load harvest report from a forecast bundle.

Combines the evaluation core (readiness, daytime humidity, optimal-day scan,
hourly series) into the structures the renderers consume:

  - today / tomorrow day summaries and hourly chart series
  - the outlook strip: up to 7 days starting the day after tomorrow
  - one ``CropAssessment`` per selected crop
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from harvest_planner.analysis.daily_series import slice_day
from harvest_planner.analysis.humidity import DEFAULT_END_HOUR, DEFAULT_START_HOUR, mean_humidity
from harvest_planner.analysis.models import CropAssessment, DaySummary, HarvestReport, HourlySeries
from harvest_planner.analysis.optimal_day import DEFAULT_SCAN_DAYS, ScanStart, find_next_optimal_day
from harvest_planner.analysis.readiness import evaluate_status
from harvest_planner.reference.crops import get_profile

if TYPE_CHECKING:
    from collections.abc import Sequence

    from harvest_planner.schemas import ForecastBundle

OUTLOOK_FIRST_INDEX = 2
OUTLOOK_DAYS = 7


def summarize_day(
    bundle: ForecastBundle,
    index: int,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> DaySummary:
    """Daily aggregates plus daytime mean humidity for day ``index``.

    Raises:
        IndexError: If ``index`` is outside the forecast.
    """
    day = bundle.day(index)
    if day is None:
        msg = f"Day {index} is outside the {len(bundle.daily)}-day forecast"
        raise IndexError(msg)

    daily = bundle.daily
    return DaySummary(
        date=day,
        temp_max=daily.value("temperature_2m_max", index),
        temp_min=daily.value("temperature_2m_min", index),
        precip_sum=daily.value("precipitation_sum", index),
        precip_probability_max=daily.value("precipitation_probability_max", index),
        humidity_max=daily.value("relative_humidity_2m_max", index),
        humidity_mean=mean_humidity(bundle, day, start_hour, end_hour),
    )


def assess_crops(
    bundle: ForecastBundle,
    crops: Sequence[str],
    *,
    start: int | ScanStart = ScanStart.TODAY,
    scan_days: int = DEFAULT_SCAN_DAYS,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> list[CropAssessment]:
    """
    Evaluate each crop against today's conditions and the forecast.

    Today's status uses the daily maximum temperature and the daytime mean
    humidity. The next optimal date comes from the optimal-day scan.

    Raises:
        ValueError: If ``crops`` is empty.
        KeyError: If a crop is not registered.
    """
    if not crops:
        msg = "Select at least one crop."
        raise ValueError(msg)

    today = summarize_day(bundle, 0, start_hour, end_hour)
    assessments = []
    for crop in crops:
        profile = get_profile(crop)
        assessments.append(
            CropAssessment(
                crop=crop,
                status=evaluate_status(today.temp_max, today.humidity_mean, profile),
                next_optimal_date=find_next_optimal_day(
                    crop,
                    bundle,
                    start,
                    scan_days=scan_days,
                    start_hour=start_hour,
                    end_hour=end_hour,
                ),
                profile=profile,
            )
        )
    return assessments


def build_report(
    bundle: ForecastBundle,
    crops: Sequence[str],
    location_name: str,
    *,
    start: int | ScanStart = ScanStart.TODAY,
    scan_days: int = DEFAULT_SCAN_DAYS,
    start_hour: int = DEFAULT_START_HOUR,
    end_hour: int = DEFAULT_END_HOUR,
) -> HarvestReport:
    """Build the full report for one location load."""
    today = summarize_day(bundle, 0, start_hour, end_hour)
    tomorrow = summarize_day(bundle, 1, start_hour, end_hour) if len(bundle.daily) > 1 else None

    outlook_end = min(OUTLOOK_FIRST_INDEX + OUTLOOK_DAYS, len(bundle.daily))
    outlook = [
        summarize_day(bundle, i, start_hour, end_hour)
        for i in range(OUTLOOK_FIRST_INDEX, outlook_end)
    ]

    return HarvestReport(
        location_name=location_name,
        today=today,
        tomorrow=tomorrow,
        today_series=slice_day(bundle, today.date),
        tomorrow_series=slice_day(bundle, tomorrow.date) if tomorrow else HourlySeries(),
        outlook=outlook,
        assessments=assess_crops(
            bundle,
            crops,
            start=start,
            scan_days=scan_days,
            start_hour=start_hour,
            end_hour=end_hour,
        ),
    )
