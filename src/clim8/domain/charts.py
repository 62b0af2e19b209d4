"""Chart-ready data structures."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonChart:
    """Bar comparison of a footprint against the benchmarks."""

    title: str
    unit: str
    labels: tuple[str, ...]
    values: tuple[float, ...]


@dataclass(frozen=True)
class BreakdownSlice:
    """Single slice of a proportional breakdown chart."""

    category: str
    label: str
    value: float
    rounded_value: int
    percent_of_total: float


@dataclass(frozen=True)
class ChartData:
    """All chart series derived from one footprint."""

    carbon_comparison: ComparisonChart
    water_comparison: ComparisonChart
    carbon_breakdown: tuple[BreakdownSlice, ...]
