"""Domain models for the downloadable report."""

from dataclasses import dataclass
from datetime import datetime

from clim8.domain.recommendations import Recommendation


@dataclass(frozen=True)
class BenchmarkComparison:
    """Side-by-side values for the user, the global average and the safe limit."""

    yours: int
    global_average: float
    safe_limit: float


@dataclass(frozen=True)
class BreakdownRow:
    """Report table row for one footprint category."""

    category: str
    label: str
    value: int
    percent_of_total: float


@dataclass(frozen=True)
class FootprintSummary:
    """Report section for a single resource."""

    total: int
    unit: str
    comparison: BenchmarkComparison
    breakdown: tuple[BreakdownRow, ...]


@dataclass(frozen=True)
class ReportDocument:
    """Self-contained report handed to a renderer."""

    title: str
    generated_at: datetime
    carbon: FootprintSummary
    water: FootprintSummary
    recommendations: tuple[Recommendation, ...]
    notes: tuple[str, ...]
