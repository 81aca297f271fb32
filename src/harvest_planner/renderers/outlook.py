"""Forward-looking strip of daily summaries after tomorrow."""

from __future__ import annotations

from typing import TYPE_CHECKING

from harvest_planner.renderers import render_template
from harvest_planner.renderers.date_utils import format_short_day, format_value

if TYPE_CHECKING:
    from harvest_planner.analysis.models import DaySummary

RAIN_ICON = "\U0001f327\ufe0f"
SUN_ICON = "\u2600\ufe0f"


def build_outlook_html(days: list[DaySummary]) -> str:
    """Build the outlook strip; rainy days get a rain icon, the rest a sun."""
    if not days:
        return "<p>No outlook beyond tomorrow.</p>"

    rows = [
        {
            "label": format_short_day(day.date),
            "icon": RAIN_ICON if day.is_rainy else SUN_ICON,
            "temp_max": format_value(day.temp_max, "°C"),
            "temp_min": format_value(day.temp_min, "°C"),
            "precip_sum": format_value(day.precip_sum, " mm"),
            "precip_probability": format_value(day.precip_probability_max, " %"),
        }
        for day in days
    ]
    return render_template("outlook.html.j2", days=rows)
