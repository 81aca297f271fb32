"""Today / tomorrow weather info boxes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from harvest_planner.renderers import render_template
from harvest_planner.renderers.date_utils import format_value

if TYPE_CHECKING:
    from harvest_planner.analysis.models import DaySummary


def build_day_info_html(heading: str, location_name: str, summary: DaySummary | None) -> str:
    """Build the info box for one day; the mean humidity shows a dash when unavailable."""
    if summary is None:
        return f"<p>No forecast for {heading.lower()}.</p>"

    return render_template(
        "day_info.html.j2",
        heading=heading,
        location_name=location_name,
        temp_max=format_value(summary.temp_max, "°C"),
        temp_min=format_value(summary.temp_min, "°C"),
        precip_sum=format_value(summary.precip_sum, " mm"),
        precip_probability=format_value(summary.precip_probability_max, "%"),
        humidity_mean=format_value(summary.humidity_mean, "%"),
        humidity_max=format_value(summary.humidity_max, "%"),
    )
