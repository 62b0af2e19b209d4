"""Tests for the footprint pipeline service."""

import logging

from clim8.services.footprint import FootprintService
from tests.conftest import FIXED_NOW, zero_form


def test_analyze_all_zero_form(footprint_service: FootprintService) -> None:
    analysis = footprint_service.analyze(zero_form())

    assert analysis.footprint.carbon.total == 0
    assert analysis.footprint.water.total == 0
    assert [tip.title for tip in analysis.recommendations] == ["Great Job!"]
    assert all(area.percent_of_total == 0 for area in analysis.impact_areas)


def test_analyze_ranks_impact_areas(footprint_service: FootprintService) -> None:
    form = zero_form() | {"car_distance_km": "1500", "electricity_kwh": "100"}

    analysis = footprint_service.analyze(form)

    assert analysis.activity.car_distance_km == 1500
    assert analysis.impact_areas[0].category == "transportation"
    assert analysis.impact_areas[-1].category == "diet"
    assert [tip.title for tip in analysis.recommendations] == ["Transportation"]


def test_screen_and_report_paths_share_recommendations(
    footprint_service: FootprintService,
) -> None:
    form = zero_form() | {
        "gas_m3": 300,
        "meat_meals_per_week": 60,
        "water_usage_liters_per_day": 400,
    }

    analysis = footprint_service.analyze(form)
    report = footprint_service.report(form)

    assert report.recommendations == analysis.recommendations
    assert [tip.title for tip in report.recommendations] == [
        "Energy Usage",
        "Diet",
        "Water Usage",
    ]


def test_report_uses_clock_and_title(footprint_service: FootprintService) -> None:
    report = footprint_service.report(zero_form())

    assert report.generated_at == FIXED_NOW
    assert report.title == "Test Report"


def test_repeated_reports_are_equal_with_fixed_clock(
    footprint_service: FootprintService,
) -> None:
    form = zero_form() | {"dairy_products_per_week": 12, "public_transport_km": 80}

    assert footprint_service.report(form) == footprint_service.report(form)


def test_debug_logs_analysis(caplog, monkeypatch) -> None:
    service = FootprintService(debug=True)
    logger = logging.getLogger("clim8")
    monkeypatch.setattr(logger, "propagate", True)

    with caplog.at_level(logging.INFO, logger="clim8.services.footprint"):
        service.analyze(zero_form())

    assert "Footprint analyzed" in caplog.text
