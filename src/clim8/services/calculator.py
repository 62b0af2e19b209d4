"""Footprint calculation from normalized activity inputs."""

from types import MappingProxyType

from clim8.domain.activity import ActivityInput
from clim8.domain.footprint import CarbonFootprint, FootprintResult, WaterFootprint
from clim8.domain.reference import (
    CARBON_FACTORS,
    DAYS_PER_MONTH,
    WATER_FACTORS,
    WEEKS_PER_MONTH,
)
from clim8.services.normalizer import coerce_quantity


def compute_footprint(activity: ActivityInput) -> FootprintResult:
    """Compute monthly carbon and water footprints with per-category subtotals.

    Quantities are re-coerced first, so an activity built by hand with
    negative or oversized values still yields finite, non-negative results.
    """
    car_km = coerce_quantity(activity.car_distance_km)
    transit_km = coerce_quantity(activity.public_transport_km)
    electricity_kwh = coerce_quantity(activity.electricity_kwh)
    gas_m3 = coerce_quantity(activity.gas_m3)
    meat_meals = coerce_quantity(activity.meat_meals_per_week) * WEEKS_PER_MONTH
    dairy_products = (
        coerce_quantity(activity.dairy_products_per_week) * WEEKS_PER_MONTH
    )
    water_liters = coerce_quantity(activity.water_usage_liters_per_day)

    carbon_breakdown = {
        "transportation": (
            car_km * CARBON_FACTORS.car_km
            + transit_km * CARBON_FACTORS.public_transport_km
        ),
        "energy": (
            electricity_kwh * CARBON_FACTORS.electricity_kwh
            + gas_m3 * CARBON_FACTORS.gas_m3
        ),
        "diet": (
            meat_meals * CARBON_FACTORS.meat_meal
            + dairy_products * CARBON_FACTORS.dairy_product
        ),
    }
    water_breakdown = {
        "daily": water_liters * DAYS_PER_MONTH * WATER_FACTORS.daily_usage_liter,
        "diet": (
            meat_meals * WATER_FACTORS.meat_meal
            + dairy_products * WATER_FACTORS.dairy_product
        ),
    }

    return FootprintResult(
        carbon=CarbonFootprint(
            total=sum(carbon_breakdown.values()),
            breakdown=MappingProxyType(carbon_breakdown),
        ),
        water=WaterFootprint(
            total=sum(water_breakdown.values()),
            breakdown=MappingProxyType(water_breakdown),
        ),
    )
