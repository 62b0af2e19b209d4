"""Domain models for household activity inputs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityInput:
    """Normalized monthly activity quantities, all non-negative."""

    car_distance_km: float = 0.0
    public_transport_km: float = 0.0
    electricity_kwh: float = 0.0
    gas_m3: float = 0.0
    meat_meals_per_week: float = 0.0
    dairy_products_per_week: float = 0.0
    water_usage_liters_per_day: float = 0.0
