"""
Tests for the fetch and build flows.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from harvest_planner.analysis import ScanStart
from harvest_planner.config import Settings
from harvest_planner.exceptions import ForecastUnavailable, LocationNotFound
from harvest_planner.flows import build, fetch
from harvest_planner.renderers.notification import (
    LOAD_FAILED,
    LOCATION_NOT_FOUND,
    NO_CROPS_SELECTED,
)
from harvest_planner.schemas import ForecastBundle, Location, SelectionMode

HAMBURG = Location(lat=53.55, lon=10.0, place_name="Hamburg, Deutschland")


@pytest.fixture
def site_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Point the build flow at a temporary site directory."""
    settings = Settings(site_dir=str(tmp_path / "site"))
    monkeypatch.setattr(build, "get_settings", lambda: settings)
    return settings


class TestFetchTasks:
    """Test the fetch tasks in isolation."""

    @patch("harvest_planner.flows.fetch.geocoding.search_location")
    def test_geocode(self, mock_search: Mock) -> None:
        mock_search.return_value = HAMBURG
        assert fetch.geocode("Hamburg") == HAMBURG
        mock_search.assert_called_once_with("Hamburg")

    @patch("harvest_planner.datasources.weather.forecast.session.get")
    def test_fetch_weather(self, mock_get: Mock, raw_forecast: dict[str, Any]) -> None:
        mock_response = Mock()
        mock_response.json.return_value = raw_forecast
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        result = fetch.fetch_weather(53.55, 10.0, "Europe/Berlin", 9)

        assert len(result["daily"]["time"]) == 9
        call_kwargs = mock_get.call_args.kwargs
        assert call_kwargs["params"]["latitude"] == 53.55
        assert call_kwargs["params"]["forecast_days"] == 9

    def test_parse_forecast(self, raw_forecast: dict[str, Any]) -> None:
        bundle = fetch.parse_forecast(raw_forecast, HAMBURG)
        assert isinstance(bundle, ForecastBundle)
        assert bundle.location == HAMBURG
        assert bundle.timezone == "Europe/Berlin"
        assert len(bundle.daily) == 9


class TestFetchBundleFlow:
    """Test the fetch flow's error boundary."""

    @patch("harvest_planner.flows.fetch.weather_forecast.fetch_forecast")
    @patch("harvest_planner.flows.fetch.geocoding.search_location")
    def test_success(
        self, mock_search: Mock, mock_forecast: Mock, raw_forecast: dict[str, Any]
    ) -> None:
        mock_search.return_value = HAMBURG
        mock_forecast.return_value = raw_forecast

        bundle = fetch.fetch_bundle("Hamburg")

        assert bundle.day(0) == "2026-03-05"
        mock_forecast.assert_called_once_with(
            53.55, 10.0, timezone="Europe/Berlin", forecast_days=9
        )

    @patch("harvest_planner.flows.fetch.weather_forecast.fetch_forecast")
    @patch("harvest_planner.flows.fetch.geocoding.search_location")
    def test_location_not_found(self, mock_search: Mock, mock_forecast: Mock) -> None:
        mock_search.side_effect = LocationNotFound("Atlantis")

        with pytest.raises(LocationNotFound):
            fetch.fetch_bundle("Atlantis")
        mock_forecast.assert_not_called()

    @patch("harvest_planner.flows.fetch.weather_forecast.fetch_forecast")
    @patch("harvest_planner.flows.fetch.geocoding.search_location")
    def test_transport_error(self, mock_search: Mock, mock_forecast: Mock) -> None:
        mock_search.return_value = HAMBURG
        mock_forecast.side_effect = requests.ConnectionError("offline")

        with pytest.raises(ForecastUnavailable):
            fetch.fetch_bundle("Hamburg")

    @patch("harvest_planner.flows.fetch.weather_forecast.fetch_forecast")
    @patch("harvest_planner.flows.fetch.geocoding.search_location")
    def test_malformed_response(self, mock_search: Mock, mock_forecast: Mock) -> None:
        mock_search.return_value = HAMBURG
        mock_forecast.return_value = {"error": True, "reason": "bad request"}

        with pytest.raises(ForecastUnavailable):
            fetch.fetch_bundle("Hamburg")

    @patch("harvest_planner.flows.fetch.weather_forecast.fetch_forecast")
    @patch("harvest_planner.flows.fetch.geocoding.search_location")
    def test_empty_daily_block(self, mock_search: Mock, mock_forecast: Mock) -> None:
        mock_search.return_value = HAMBURG
        mock_forecast.return_value = {"daily": {"time": [], "temperature_2m_max": []}}

        with pytest.raises(ForecastUnavailable):
            fetch.fetch_bundle("Hamburg")


class TestBuildTasks:
    """Test the build tasks in isolation."""

    def test_assess(self, raw_forecast: dict[str, Any]) -> None:
        bundle = ForecastBundle.from_open_meteo(raw_forecast, HAMBURG)
        report = build.assess(bundle, ["Wheat", "Maize"], "Hamburg")

        assert report.location_name == "Hamburg"
        assert [a.crop for a in report.assessments] == ["Wheat", "Maize"]

    def test_build_html(self, raw_forecast: dict[str, Any]) -> None:
        bundle = ForecastBundle.from_open_meteo(raw_forecast, HAMBURG)
        report = build.assess(bundle, ["Wheat"], "Hamburg")

        html = build.build_html(report)

        assert html.startswith("<!DOCTYPE html>")
        assert "Harvest Planner - Hamburg" in html
        assert 'id="todayChart"' in html
        assert 'id="tomorrowChart"' in html
        assert "<h4>Wheat</h4>" in html
        assert "&lt;div" not in html

    def test_write_site(self, tmp_path: Path) -> None:
        site_dir = tmp_path / "site"
        html_content = "<html><body>Test</body></html>"

        result = build.write_site(html_content, site_dir)

        assert result == site_dir / "index.html"
        assert result.read_text(encoding="utf-8") == html_content


class TestBuildAllFlow:
    """Test the main build flow."""

    def test_writes_site(self, site_settings: Settings, raw_forecast: dict[str, Any]) -> None:
        bundle = ForecastBundle.from_open_meteo(raw_forecast, HAMBURG)

        with patch("harvest_planner.flows.build.fetch_bundle", return_value=bundle):
            result = build.build_all("Hamburg")

        assert result["city"] == "Hamburg"
        assert len(result["assessments"]) == 7
        assert result["output"].endswith("index.html")
        assert (Path(site_settings.site_dir) / "index.html").exists()

    def test_no_write(self, site_settings: Settings, raw_forecast: dict[str, Any]) -> None:
        bundle = ForecastBundle.from_open_meteo(raw_forecast, HAMBURG)

        with patch("harvest_planner.flows.build.fetch_bundle", return_value=bundle):
            result = build.build_all(
                "Hamburg", SelectionMode.SINGLE, ["Wheat"], ScanStart.TOMORROW, write=False
            )

        assert "output" not in result
        assert result["assessments"] == [
            {
                "crop": "Wheat",
                "status": "ready",
                "next_optimal_date": "Sunday, 08.03.",
            }
        ]

    def test_location_not_found(self, site_settings: Settings) -> None:
        with patch(
            "harvest_planner.flows.build.fetch_bundle", side_effect=LocationNotFound("Atlantis")
        ):
            result = build.build_all("Atlantis")

        assert result["error"] == LOCATION_NOT_FOUND
        assert LOCATION_NOT_FOUND in result["notification"]
        assert not (Path(site_settings.site_dir) / "index.html").exists()

    def test_load_failed(self, site_settings: Settings) -> None:
        with patch(
            "harvest_planner.flows.build.fetch_bundle",
            side_effect=ForecastUnavailable("offline"),
        ):
            result = build.build_all("Hamburg")

        assert result["error"] == LOAD_FAILED
        assert LOAD_FAILED in result["notification"]
        assert not (Path(site_settings.site_dir) / "index.html").exists()

    @patch("harvest_planner.flows.fetch.weather_forecast.fetch_forecast")
    @patch("harvest_planner.flows.fetch.geocoding.search_location")
    def test_empty_forecast(
        self, mock_search: Mock, mock_forecast: Mock, site_settings: Settings
    ) -> None:
        mock_search.return_value = HAMBURG
        mock_forecast.return_value = {"daily": {"time": [], "temperature_2m_max": []}}

        result = build.build_all("Hamburg", write=False)

        assert result["error"] == LOAD_FAILED
        assert LOAD_FAILED in result["notification"]

    def test_empty_selection(self, site_settings: Settings) -> None:
        with patch("harvest_planner.flows.build.fetch_bundle") as mock_fetch:
            result = build.build_all("Hamburg", SelectionMode.MULTIPLE, [])

        assert result["error"] == NO_CROPS_SELECTED
        assert NO_CROPS_SELECTED in result["notification"]
        mock_fetch.assert_not_called()

    def test_unknown_crop(self, site_settings: Settings) -> None:
        with patch("harvest_planner.flows.build.fetch_bundle") as mock_fetch:
            result = build.build_all("Hamburg", SelectionMode.MULTIPLE, ["Kale"])

        assert "Kale" in result["error"]
        mock_fetch.assert_not_called()
