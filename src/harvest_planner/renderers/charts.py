"""Hourly temperature / precipitation-probability charts.

Charts are drawn client-side by Chart.js; this module builds the chart
config (dual y-axis: temperature on the left, probability clamped to
0-100 % on the right) and embeds it in a canvas fragment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from harvest_planner.renderers import render_template

if TYPE_CHECKING:
    from harvest_planner.analysis.models import HourlySeries

MAX_X_TICKS = 12


def build_chart_config(series: HourlySeries) -> dict[str, Any]:
    """Chart.js line-chart config for one day's hourly series."""
    return {
        "type": "line",
        "data": {
            "labels": series.hour_labels,
            "datasets": [
                {
                    "label": "Temperature (°C)",
                    "data": series.temperatures,
                    "borderColor": "red",
                    "backgroundColor": "rgba(255,0,0,0.1)",
                    "yAxisID": "y",
                },
                {
                    "label": "Precipitation probability (%)",
                    "data": series.precip_probabilities,
                    "borderColor": "blue",
                    "backgroundColor": "rgba(0,0,255,0.1)",
                    "yAxisID": "y1",
                },
            ],
        },
        "options": {
            "responsive": True,
            "interaction": {"mode": "index", "intersect": False},
            "scales": {
                "x": {"ticks": {"maxTicksLimit": MAX_X_TICKS}},
                "y": {
                    "type": "linear",
                    "position": "left",
                    "title": {"display": True, "text": "°C"},
                },
                "y1": {
                    "type": "linear",
                    "position": "right",
                    "min": 0,
                    "max": 100,
                    "grid": {"drawOnChartArea": False},
                    "title": {"display": True, "text": "%"},
                },
            },
        },
    }


def build_day_chart_html(canvas_id: str, title: str, series: HourlySeries) -> str:
    """Build a canvas + Chart.js init fragment, or a notice when empty."""
    if series.is_empty:
        return f"<p>No hourly data for {title.lower()}.</p>"

    return render_template(
        "weather_chart.html.j2",
        canvas_id=canvas_id,
        title=title,
        config=build_chart_config(series),
    )
