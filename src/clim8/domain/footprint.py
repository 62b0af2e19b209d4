"""Domain models for computed footprints."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class CarbonFootprint:
    """Monthly carbon footprint in kg CO2."""

    total: float
    breakdown: Mapping[str, float]


@dataclass(frozen=True)
class WaterFootprint:
    """Monthly water footprint in liters."""

    total: float
    breakdown: Mapping[str, float]


@dataclass(frozen=True)
class FootprintResult:
    """Carbon and water footprints for one activity input."""

    carbon: CarbonFootprint
    water: WaterFootprint


@dataclass(frozen=True)
class RankedImpactArea:
    """Carbon category with its share of the total."""

    category: str
    absolute_value: float
    percent_of_total: float
