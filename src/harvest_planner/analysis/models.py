"""Result types produced by the evaluation core for renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from harvest_planner.schemas import CropProfile, ReadinessStatus


@dataclass(frozen=True)
class HourlySeries:
    """Hourly chart series for one calendar day.

    The three lists are parallel: index ``i`` of each refers to the same hour.
    """

    hour_labels: list[str] = field(default_factory=list)
    temperatures: list[float | None] = field(default_factory=list)
    precip_probabilities: list[float | None] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.hour_labels)

    @property
    def is_empty(self) -> bool:
        """True when there was no hourly data for the day."""
        return not self.hour_labels


@dataclass(frozen=True)
class DaySummary:
    """Daily aggregates for one forecast day."""

    date: str
    temp_max: float | None
    temp_min: float | None
    precip_sum: float | None
    precip_probability_max: float | None
    humidity_max: float | None = None
    humidity_mean: int | None = None  # daytime mean, None when unavailable

    @property
    def is_rainy(self) -> bool:
        """Whether any precipitation is forecast."""
        return (self.precip_sum or 0) > 0


@dataclass(frozen=True)
class CropAssessment:
    """Readiness and next recommended harvest day for one crop."""

    crop: str
    status: ReadinessStatus
    next_optimal_date: str
    profile: CropProfile


@dataclass(frozen=True)
class HarvestReport:
    """Everything the report page shows for one location load."""

    location_name: str
    today: DaySummary
    tomorrow: DaySummary | None
    today_series: HourlySeries
    tomorrow_series: HourlySeries
    outlook: list[DaySummary]
    assessments: list[CropAssessment]
