"""Tests for report assembly."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from harvest_planner.analysis.optimal_day import NO_OPTIMAL_DAY, ScanStart
from harvest_planner.analysis.report import assess_crops, build_report, summarize_day
from harvest_planner.schemas import ForecastBundle, ReadinessStatus

BundleFactory = Callable[..., ForecastBundle]


class TestSummarizeDay:
    """Test summarize_day."""

    def test_summary_fields(self, raw_forecast: dict[str, Any]) -> None:
        bundle = ForecastBundle.from_open_meteo(raw_forecast)
        summary = summarize_day(bundle, 1)

        assert summary.date == "2026-03-06"
        assert summary.temp_max == 19.0
        assert summary.temp_min == 11.0
        assert summary.precip_sum == 1.2
        assert summary.precip_probability_max == 10
        assert summary.humidity_max == 70.0
        assert summary.humidity_mean == 55
        assert summary.is_rainy

    def test_unavailable_mean(self, make_bundle: BundleFactory) -> None:
        summary = summarize_day(make_bundle([24.0]), 0)
        assert summary.humidity_mean is None
        assert summary.humidity_max is None
        assert not summary.is_rainy

    def test_outside_forecast(self, make_bundle: BundleFactory) -> None:
        with pytest.raises(IndexError):
            summarize_day(make_bundle([24.0]), 1)


class TestAssessCrops:
    """Test assess_crops."""

    def test_status_from_today(self, make_bundle: BundleFactory) -> None:
        """Today: 24 C max, 55 % mean humidity."""
        bundle = make_bundle([24.0, 12.0], hourly_humidity=[55.0, 55.0])
        result = {a.crop: a for a in assess_crops(bundle, ["Wheat", "Potatoes", "Barley"])}

        assert result["Wheat"].status is ReadinessStatus.READY
        assert result["Potatoes"].status is ReadinessStatus.ACCEPTABLE
        assert result["Barley"].status is ReadinessStatus.ACCEPTABLE
        assert result["Wheat"].next_optimal_date == "Thursday, 05.03."
        assert result["Potatoes"].next_optimal_date == "Friday, 06.03."

    def test_unavailable_humidity_not_treated_as_zero(
        self, make_bundle: BundleFactory
    ) -> None:
        bundle = make_bundle([24.0], humidity_max=[10.0])
        (wheat,) = assess_crops(bundle, ["Wheat"])
        assert wheat.status is ReadinessStatus.ACCEPTABLE

    def test_keeps_selection_order(self, make_bundle: BundleFactory) -> None:
        bundle = make_bundle([24.0])
        crops = [a.crop for a in assess_crops(bundle, ["Sunflowers", "Maize"])]
        assert crops == ["Sunflowers", "Maize"]

    def test_profile_attached(self, make_bundle: BundleFactory) -> None:
        (wheat,) = assess_crops(make_bundle([24.0]), ["Wheat"])
        assert wheat.profile.optimal_humidity_max == 60

    def test_start_tomorrow(self, make_bundle: BundleFactory) -> None:
        bundle = make_bundle([24.0, 30.0], hourly_humidity=[55.0, 55.0])
        (wheat,) = assess_crops(bundle, ["Wheat"], start=ScanStart.TOMORROW)
        assert wheat.next_optimal_date == NO_OPTIMAL_DAY

    def test_empty_selection(self, make_bundle: BundleFactory) -> None:
        with pytest.raises(ValueError, match="at least one crop"):
            assess_crops(make_bundle([24.0]), [])

    def test_unknown_crop(self, make_bundle: BundleFactory) -> None:
        with pytest.raises(KeyError):
            assess_crops(make_bundle([24.0]), ["Rice"])


class TestBuildReport:
    """Test build_report."""

    def test_full_report(self, raw_forecast: dict[str, Any]) -> None:
        bundle = ForecastBundle.from_open_meteo(raw_forecast)
        report = build_report(bundle, ["Wheat"], "Hamburg")

        assert report.location_name == "Hamburg"
        assert report.today.date == "2026-03-05"
        assert report.tomorrow is not None
        assert report.tomorrow.date == "2026-03-06"
        assert len(report.today_series) == 24
        assert len(report.tomorrow_series) == 24
        assert [d.date for d in report.outlook] == [
            "2026-03-07",
            "2026-03-08",
            "2026-03-09",
            "2026-03-10",
            "2026-03-11",
            "2026-03-12",
            "2026-03-13",
        ]
        assert len(report.assessments) == 1

    def test_short_forecast(self, make_bundle: BundleFactory) -> None:
        report = build_report(make_bundle([24.0, 20.0, 18.0]), ["Wheat"], "Kiel")
        assert [d.date for d in report.outlook] == ["2026-03-07"]
        assert report.today_series.is_empty

    def test_single_day_forecast(self, make_bundle: BundleFactory) -> None:
        report = build_report(make_bundle([24.0]), ["Wheat"], "Kiel")
        assert report.tomorrow is None
        assert report.tomorrow_series.is_empty
        assert report.outlook == []
