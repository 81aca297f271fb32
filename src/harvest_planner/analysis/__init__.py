"""Harvest-readiness evaluation core.

Pure functions that turn a ``ForecastBundle`` and crop thresholds into
readiness statuses, recommended harvest days and chart series.

Dependency rule: analysis/ imports schemas and reference data only.
It never fetches data or produces HTML.

Modules:
  - readiness: observed temperature + humidity -> ReadinessStatus
  - humidity: hourly samples -> daytime mean humidity for one day
  - optimal_day: forecast horizon -> earliest day meeting all thresholds
  - daily_series: hourly samples -> one day's chart series
  - selection: selection mode + picks -> crops to evaluate
  - report: all of the above -> HarvestReport for renderers
"""

from harvest_planner.analysis.daily_series import slice_day
from harvest_planner.analysis.humidity import mean_humidity
from harvest_planner.analysis.models import (
    CropAssessment,
    DaySummary,
    HarvestReport,
    HourlySeries,
)
from harvest_planner.analysis.optimal_day import (
    NO_OPTIMAL_DAY,
    ScanStart,
    find_next_optimal_day,
    find_next_optimal_index,
)
from harvest_planner.analysis.readiness import evaluate_status
from harvest_planner.analysis.report import assess_crops, build_report, summarize_day
from harvest_planner.analysis.selection import resolve_selection

__all__ = [
    "NO_OPTIMAL_DAY",
    "CropAssessment",
    "DaySummary",
    "HarvestReport",
    "HourlySeries",
    "ScanStart",
    "assess_crops",
    "build_report",
    "evaluate_status",
    "find_next_optimal_day",
    "find_next_optimal_index",
    "mean_humidity",
    "resolve_selection",
    "slice_day",
    "summarize_day",
]
