"""Ranking of carbon categories by impact."""

import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from clim8.domain.footprint import RankedImpactArea


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals with ties going away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_display(value: float) -> int:
    """Round a footprint value to a whole display unit."""
    return int(round_half_up(value))


def percent_of(value: float, total: float) -> float:
    """Return value as a percentage of total, rounded to one decimal place."""
    if total == 0 or not math.isfinite(total) or not math.isfinite(value):
        return 0.0
    return round_half_up(value * 100 / total, 1)


def rank_areas(
    breakdown: Mapping[str, float], total: float | None = None
) -> list[RankedImpactArea]:
    """Sort categories by value descending, keeping declaration order for ties."""
    resolved_total = sum(breakdown.values()) if total is None else total
    ordered = sorted(breakdown.items(), key=lambda item: item[1], reverse=True)
    return [
        RankedImpactArea(
            category=category,
            absolute_value=value,
            percent_of_total=percent_of(value, resolved_total),
        )
        for category, value in ordered
    ]
