"""Coercion of raw form values into activity inputs."""

import logging
import math
from collections.abc import Mapping
from dataclasses import fields

from clim8.domain.activity import ActivityInput
from clim8.domain.reference import MAX_ACTIVITY_QUANTITY

_logger = logging.getLogger(__name__)

# Alternate keys accepted for each field: the calculator form ids and camelCase names.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "car_distance_km": ("car-distance", "carDistanceKm"),
    "public_transport_km": ("public-transport", "publicTransportKm"),
    "electricity_kwh": ("electricity", "electricityKwh"),
    "gas_m3": ("gas", "gasM3"),
    "meat_meals_per_week": ("meat-meals", "meatMealsPerWeek"),
    "dairy_products_per_week": ("dairy-products", "dairyProductsPerWeek"),
    "water_usage_liters_per_day": ("water-usage", "waterUsageLitersPerDay"),
}


def normalize_activity(raw: Mapping[str, object]) -> ActivityInput:
    """Build an activity input, treating missing or invalid values as zero."""
    values: dict[str, float] = {}
    for field in fields(ActivityInput):
        value = _lookup(raw, field.name)
        quantity = _parse_quantity(value)
        if quantity is None:
            if value not in (None, ""):
                _logger.debug("Dropped invalid %s value: %r", field.name, value)
            quantity = 0.0
        values[field.name] = quantity
    return ActivityInput(**values)


def coerce_quantity(value: object) -> float:
    """Return a finite non-negative float capped at the activity maximum.

    Anything that is not a finite non-negative number, including integers too
    large to represent as a float, becomes 0.0.
    """
    quantity = _parse_quantity(value)
    return 0.0 if quantity is None else quantity


def _parse_quantity(value: object) -> float | None:
    number = _parse_number(value)
    if number is None or not math.isfinite(number) or number < 0:
        return None
    return min(number, MAX_ACTIVITY_QUANTITY)


def _parse_number(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _lookup(raw: Mapping[str, object], name: str) -> object | None:
    if name in raw:
        return raw[name]
    for alias in FIELD_ALIASES[name]:
        if alias in raw:
            return raw[alias]
    return None
