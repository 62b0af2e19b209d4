"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from clim8.config import Settings
from clim8.containers import AppContainer
from clim8.services.footprint import FootprintService

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def zero_form() -> dict[str, object]:
    return {
        "car_distance_km": 0,
        "public_transport_km": 0,
        "electricity_kwh": 0,
        "gas_m3": 0,
        "meat_meals_per_week": 0,
        "dairy_products_per_week": 0,
        "water_usage_liters_per_day": 0,
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(report_title="Test Report", environment="test")


@pytest.fixture
def footprint_service(settings: Settings) -> FootprintService:
    return FootprintService(
        report_title=settings.report_title,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def container(
    settings: Settings, footprint_service: FootprintService
) -> AppContainer:
    return AppContainer(settings=settings, footprint_service=footprint_service)
