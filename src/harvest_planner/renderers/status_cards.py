"""Per-crop status cards: traffic light, next harvest day, thresholds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from harvest_planner.renderers import render_template

if TYPE_CHECKING:
    from harvest_planner.analysis.models import CropAssessment


def build_status_cards_html(assessments: list[CropAssessment]) -> str:
    """Build one card per assessed crop."""
    cards = [
        {
            "crop": a.crop,
            "color": a.status.color,
            "label": a.status.label,
            "next_optimal_date": a.next_optimal_date,
            "temp_min": f"{a.profile.optimal_temp_min:g}",
            "temp_max": f"{a.profile.optimal_temp_max:g}",
            "humidity_max": f"{a.profile.optimal_humidity_max:g}",
            "advisory": a.profile.advisory,
        }
        for a in assessments
    ]
    return render_template("status_cards.html.j2", cards=cards)
