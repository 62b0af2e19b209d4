"""Fixed reference factors and benchmarks."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CarbonFactors:
    """Emission factors in kg CO2 per activity unit."""

    car_km: float = 0.404
    public_transport_km: float = 0.104
    electricity_kwh: float = 0.233
    gas_m3: float = 2.162
    meat_meal: float = 2.5
    dairy_product: float = 1.0


@dataclass(frozen=True)
class WaterFactors:
    """Water factors in liters per activity unit."""

    daily_usage_liter: float = 1.0
    meat_meal: float = 100.0
    dairy_product: float = 200.0


@dataclass(frozen=True)
class Benchmark:
    """Monthly reference values for one resource."""

    carbon: float
    water: float


CARBON_FACTORS = CarbonFactors()
WATER_FACTORS = WaterFactors()

# kg CO2/month and liters/month
GLOBAL_AVERAGE = Benchmark(carbon=600, water=9000)
SAFE_LIMIT = Benchmark(carbon=200, water=8000)

# A month is approximated as exactly 4 weeks for weekly diet inputs.
WEEKS_PER_MONTH = 4
DAYS_PER_MONTH = 30

CATEGORY_ALERT_THRESHOLD_KG = 500

CARBON_CATEGORIES = ("transportation", "energy", "diet")
WATER_CATEGORIES = ("daily", "diet")

CARBON_UNIT = "kg CO2/month"
WATER_UNIT = "liters/month"

# Upper bound for any single normalized activity quantity; keeps every product finite.
MAX_ACTIVITY_QUANTITY = 1e12
