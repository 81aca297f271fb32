"""
Domain models for harvest planner.

Pydantic models for crop thresholds and forecast data. These define the
canonical schema - data sources normalize API responses to these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# Readiness
# =============================================================================


class ReadinessStatus(StrEnum):
    """Traffic-light harvest readiness for one crop."""

    READY = "ready"
    ACCEPTABLE = "acceptable"
    PROBLEMATIC = "problematic"

    @property
    def color(self) -> str:
        """Traffic-light colour used by the status cards."""
        return _STATUS_COLORS[self]

    @property
    def label(self) -> str:
        """Human-readable status label."""
        return _STATUS_LABELS[self]


_STATUS_COLORS = {
    ReadinessStatus.READY: "green",
    ReadinessStatus.ACCEPTABLE: "orange",
    ReadinessStatus.PROBLEMATIC: "red",
}

_STATUS_LABELS = {
    ReadinessStatus.READY: "Ready to harvest",
    ReadinessStatus.ACCEPTABLE: "Acceptable",
    ReadinessStatus.PROBLEMATIC: "Problematic",
}


class SelectionMode(StrEnum):
    """How the set of crops to evaluate is chosen."""

    ALL = "all"
    MULTIPLE = "multiple"
    SINGLE = "single"


# =============================================================================
# Crops
# =============================================================================


class CropProfile(BaseModel):
    """Agronomic harvest thresholds for one crop."""

    model_config = {"frozen": True}

    optimal_humidity_max: float = Field(..., ge=0, le=100, description="Max relative humidity (%)")
    optimal_temp_min: float = Field(..., description="Lower bound of the temperature band (C)")
    optimal_temp_max: float = Field(..., description="Upper bound of the temperature band (C)")
    advisory: str = ""

    @model_validator(mode="after")
    def _check_band(self) -> CropProfile:
        if self.optimal_temp_min > self.optimal_temp_max:
            msg = (
                f"optimal_temp_min ({self.optimal_temp_min}) exceeds "
                f"optimal_temp_max ({self.optimal_temp_max})"
            )
            raise ValueError(msg)
        return self

    def temp_in_band(self, temp: float) -> bool:
        """Whether ``temp`` lies inside the inclusive temperature band."""
        return self.optimal_temp_min <= temp <= self.optimal_temp_max

    def humidity_ok(self, humidity: float) -> bool:
        """Whether ``humidity`` is at or below the humidity ceiling."""
        return humidity <= self.optimal_humidity_max


# =============================================================================
# Geographic
# =============================================================================


class Location(BaseModel):
    """Geocoded point."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    place_name: str | None = None


# =============================================================================
# Forecast
# =============================================================================


def _check_lengths(model: BaseModel, fields: tuple[str, ...]) -> None:
    """Raise if any present array differs in length from ``time``."""
    expected = len(model.time)  # type: ignore[attr-defined]
    for name in fields:
        values = getattr(model, name)
        if values is not None and len(values) != expected:
            msg = f"{name} has {len(values)} entries, expected {expected}"
            raise ValueError(msg)


class DailyData(BaseModel):
    """Per-day aggregates, index 0 = today (Open-Meteo ``daily`` block)."""

    model_config = {"frozen": True}

    time: tuple[str, ...] = Field(..., min_length=1, description="ISO dates, index 0 = today")
    temperature_2m_max: tuple[float | None, ...]
    temperature_2m_min: tuple[float | None, ...] | None = None
    precipitation_sum: tuple[float | None, ...] | None = None
    precipitation_probability_max: tuple[float | None, ...] | None = None
    relative_humidity_2m_max: tuple[float | None, ...] | None = None

    @model_validator(mode="after")
    def _check_aligned(self) -> DailyData:
        _check_lengths(
            self,
            (
                "temperature_2m_max",
                "temperature_2m_min",
                "precipitation_sum",
                "precipitation_probability_max",
                "relative_humidity_2m_max",
            ),
        )
        return self

    def __len__(self) -> int:
        return len(self.time)

    def value(self, name: str, index: int) -> float | None:
        """Value of daily variable ``name`` at ``index``, or None if absent."""
        values = getattr(self, name)
        if values is None or not 0 <= index < len(values):
            return None
        result: float | None = values[index]
        return result


class HourlyData(BaseModel):
    """Hourly samples in ascending time order (Open-Meteo ``hourly`` block)."""

    model_config = {"frozen": True}

    time: tuple[str, ...]
    temperature_2m: tuple[float | None, ...] | None = None
    precipitation_probability: tuple[float | None, ...] | None = None
    relative_humidity_2m: tuple[float | None, ...] | None = None

    @model_validator(mode="after")
    def _check_aligned(self) -> HourlyData:
        _check_lengths(
            self, ("temperature_2m", "precipitation_probability", "relative_humidity_2m")
        )
        return self

    def __len__(self) -> int:
        return len(self.time)

    def value(self, name: str, index: int) -> float | None:
        """Value of hourly variable ``name`` at ``index``, or None if absent."""
        values = getattr(self, name)
        if values is None or not 0 <= index < len(values):
            return None
        result: float | None = values[index]
        return result


class ForecastBundle(BaseModel):
    """Daily + hourly forecast for one queried location.

    Fetched once per load and never mutated; a new load builds a new bundle.
    All timestamps are local to ``timezone``.
    """

    model_config = {"frozen": True}

    daily: DailyData
    hourly: HourlyData | None = None
    timezone: str | None = None
    location: Location | None = None

    @classmethod
    def from_open_meteo(
        cls, raw: dict[str, Any], location: Location | None = None
    ) -> ForecastBundle:
        """Build a bundle from a raw Open-Meteo forecast response.

        Raises:
            pydantic.ValidationError: If ``daily`` is missing or malformed.
        """
        return cls.model_validate(
            {
                "daily": raw.get("daily"),
                "hourly": raw.get("hourly"),
                "timezone": raw.get("timezone"),
                "location": location,
            }
        )

    def day(self, index: int) -> str | None:
        """ISO date for day ``index``, or None past the end of the forecast."""
        if 0 <= index < len(self.daily):
            return self.daily.time[index]
        return None
