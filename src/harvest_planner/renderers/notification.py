"""User-facing notification banner for failed loads."""

from __future__ import annotations

from harvest_planner.renderers import render_template

LOCATION_NOT_FOUND = "Location not found."
LOAD_FAILED = "Failed to load weather data."
NO_CROPS_SELECTED = "Select at least one crop."


def build_notification_html(message: str) -> str:
    """Build a single non-blocking notification banner."""
    return render_template("notification.html.j2", message=message)
