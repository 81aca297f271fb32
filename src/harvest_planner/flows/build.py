"""
Prefect flow for building the harvest report page.

Loads the forecast for one location, evaluates the selected crops and
renders a static HTML page. A failed load renders nothing, so a page
from a previous run stays in place.

Run locally:
    python -m harvest_planner.flows.build
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from prefect import flow, task

from harvest_planner.analysis import ScanStart, build_report, resolve_selection
from harvest_planner.analysis.models import HarvestReport
from harvest_planner.config import get_settings
from harvest_planner.exceptions import ForecastUnavailable, LocationNotFound
from harvest_planner.flows.fetch import fetch_bundle
from harvest_planner.renderers import render_template
from harvest_planner.renderers.charts import build_day_chart_html
from harvest_planner.renderers.day_info import build_day_info_html
from harvest_planner.renderers.notification import (
    LOAD_FAILED,
    LOCATION_NOT_FOUND,
    NO_CROPS_SELECTED,
    build_notification_html,
)
from harvest_planner.renderers.outlook import build_outlook_html
from harvest_planner.renderers.status_cards import build_status_cards_html
from harvest_planner.schemas import ForecastBundle, SelectionMode

# =============================================================================
# Tasks
# =============================================================================


@task(name="assess-crops")
def assess(
    bundle: ForecastBundle,
    crops: list[str],
    location_name: str,
    start: ScanStart = ScanStart.TODAY,
) -> HarvestReport:
    """Run the evaluation core over the bundle for the selected crops."""
    settings = get_settings()
    return build_report(
        bundle,
        crops,
        location_name,
        start=start,
        scan_days=settings.scan_days,
        start_hour=settings.daytime_start_hour,
        end_hour=settings.daytime_end_hour,
    )


@task(name="build-html")
def build_html(report: HarvestReport) -> str:
    """Build the report page from a ``HarvestReport``."""
    tz = ZoneInfo(get_settings().timezone)
    updated = datetime.now(tz).strftime("%Y-%m-%d %H:%M")

    return render_template(
        "base.html.j2",
        location_name=report.location_name,
        updated=updated,
        today_info=build_day_info_html("Today", report.location_name, report.today),
        tomorrow_info=build_day_info_html("Tomorrow", report.location_name, report.tomorrow),
        today_chart=build_day_chart_html("todayChart", "Today", report.today_series),
        tomorrow_chart=build_day_chart_html("tomorrowChart", "Tomorrow", report.tomorrow_series),
        outlook=build_outlook_html(report.outlook),
        status_cards=build_status_cards_html(report.assessments),
    )


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


def _assessment_rows(report: HarvestReport) -> list[dict[str, str]]:
    return [
        {
            "crop": a.crop,
            "status": a.status.value,
            "next_optimal_date": a.next_optimal_date,
        }
        for a in report.assessments
    ]


def _failure(message: str) -> dict[str, Any]:
    return {"error": message, "notification": build_notification_html(message)}


# =============================================================================
# Flow
# =============================================================================


@flow(name="build-report", log_prints=True)
def build_all(
    city: str | None = None,
    mode: SelectionMode = SelectionMode.ALL,
    crops: Sequence[str] = (),
    start: ScanStart = ScanStart.TODAY,
    *,
    write: bool = True,
) -> dict[str, Any]:
    """
    Load, evaluate and render the harvest report for one location.

    Returns a summary dict. On failure it holds an ``error`` message and the
    rendered ``notification`` banner, and nothing is written.
    """
    settings = get_settings()
    city = city or settings.default_city

    try:
        selected = resolve_selection(mode, crops)
    except ValueError as exc:
        print(f"Invalid crop selection: {exc}")
        return _failure(str(exc))
    if not selected:
        print(NO_CROPS_SELECTED)
        return _failure(NO_CROPS_SELECTED)

    try:
        bundle = fetch_bundle(city)
    except LocationNotFound:
        print(f"{LOCATION_NOT_FOUND} ({city})")
        return _failure(LOCATION_NOT_FOUND)
    except ForecastUnavailable:
        print(LOAD_FAILED)
        return _failure(LOAD_FAILED)

    print(f"Evaluating {len(selected)} crop(s) for {city}...")
    report = assess(bundle, selected, city, start)
    result: dict[str, Any] = {"city": city, "assessments": _assessment_rows(report)}

    if write:
        print("Building HTML...")
        html = build_html(report)
        output_path = write_site(html, Path(settings.site_dir))
        print(f"Site built: {output_path}")
        result["output"] = str(output_path)

    return result


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
