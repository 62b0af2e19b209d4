"""Tests for input normalization."""

import math

from clim8.domain.activity import ActivityInput
from clim8.domain.reference import MAX_ACTIVITY_QUANTITY
from clim8.services.normalizer import coerce_quantity, normalize_activity


def test_missing_fields_default_to_zero() -> None:
    assert normalize_activity({}) == ActivityInput()


def test_numeric_strings_are_parsed() -> None:
    activity = normalize_activity({"car_distance_km": " 120.5 ", "gas_m3": "3"})

    assert activity.car_distance_km == 120.5
    assert activity.gas_m3 == 3.0


def test_invalid_values_become_zero() -> None:
    activity = normalize_activity(
        {
            "car_distance_km": "abc",
            "public_transport_km": -10,
            "electricity_kwh": float("nan"),
            "gas_m3": float("inf"),
            "meat_meals_per_week": True,
            "dairy_products_per_week": [3],
            "water_usage_liters_per_day": "",
        }
    )

    assert activity == ActivityInput()


def test_form_ids_and_camel_case_aliases() -> None:
    activity = normalize_activity(
        {
            "car-distance": "10",
            "publicTransportKm": 20,
            "meat-meals": 5,
            "waterUsageLitersPerDay": "150",
        }
    )

    assert activity.car_distance_km == 10
    assert activity.public_transport_km == 20
    assert activity.meat_meals_per_week == 5
    assert activity.water_usage_liters_per_day == 150


def test_canonical_name_wins_over_alias() -> None:
    activity = normalize_activity({"gas_m3": 2, "gas": 9})

    assert activity.gas_m3 == 2


def test_coerce_quantity_results_are_finite_and_non_negative() -> None:
    for raw in [None, "x", -1, "-2.5", float("-inf"), "1e400", 0, "7"]:
        value = coerce_quantity(raw)
        assert math.isfinite(value)
        assert value >= 0
    assert coerce_quantity("7") == 7.0


def test_integers_too_large_for_float_become_zero() -> None:
    activity = normalize_activity(
        {"car_distance_km": 10**400, "gas_m3": -(10**400), "electricity_kwh": 5}
    )

    assert activity.car_distance_km == 0
    assert activity.gas_m3 == 0
    assert activity.electricity_kwh == 5
    assert coerce_quantity(10**400) == 0


def test_huge_finite_values_are_capped() -> None:
    activity = normalize_activity({"electricity_kwh": 1e308, "gas_m3": "1e300"})

    assert activity.electricity_kwh == MAX_ACTIVITY_QUANTITY
    assert activity.gas_m3 == MAX_ACTIVITY_QUANTITY
    assert coerce_quantity(MAX_ACTIVITY_QUANTITY * 10) == MAX_ACTIVITY_QUANTITY
