"""Traffic-light readiness from observed conditions and crop thresholds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from harvest_planner.schemas import ReadinessStatus

if TYPE_CHECKING:
    from harvest_planner.schemas import CropProfile


def evaluate_status(
    observed_temp: float | None,
    observed_humidity: float | None,
    profile: CropProfile,
) -> ReadinessStatus:
    """
    Map an observation to a readiness status for one crop.

    The temperature criterion holds when ``observed_temp`` lies inside the
    profile's inclusive band; the humidity criterion when ``observed_humidity``
    is at or below the ceiling. An unavailable reading (None) never
    satisfies its criterion.

    Args:
        observed_temp: Observed temperature (C), e.g. today's maximum, or None.
        observed_humidity: Observed relative humidity (%), or None.
        profile: The crop's thresholds.

    Returns:
        READY if both criteria hold, ACCEPTABLE if exactly one holds,
        PROBLEMATIC otherwise.
    """
    temp_ok = observed_temp is not None and profile.temp_in_band(observed_temp)
    humidity_ok = observed_humidity is not None and profile.humidity_ok(observed_humidity)

    if temp_ok and humidity_ok:
        return ReadinessStatus.READY
    if temp_ok or humidity_ok:
        return ReadinessStatus.ACCEPTABLE
    return ReadinessStatus.PROBLEMATIC
