"""Assembly of the downloadable footprint report."""

from collections.abc import Mapping
from datetime import UTC, datetime

from clim8.domain.footprint import FootprintResult
from clim8.domain.recommendations import Recommendation
from clim8.domain.reference import (
    CARBON_UNIT,
    GLOBAL_AVERAGE,
    SAFE_LIMIT,
    WATER_UNIT,
)
from clim8.domain.report import (
    BenchmarkComparison,
    BreakdownRow,
    FootprintSummary,
    ReportDocument,
)
from clim8.services.ranking import percent_of, round_display

DEFAULT_REPORT_TITLE = "Environmental Impact Report"

REPORT_NOTES = (
    (
        "This report was generated using Clim8's environmental impact calculator. "
        "The calculations are based on widely accepted environmental impact "
        "factors and global averages."
    ),
    (
        "Note: This is an estimate based on the information provided. For more "
        "accurate results, consider tracking your actual usage over time."
    ),
)


def build_report(
    result: FootprintResult,
    recommendations: list[Recommendation],
    generated_at: datetime | None = None,
    title: str = DEFAULT_REPORT_TITLE,
) -> ReportDocument:
    """Combine a footprint and its recommendations into a report document."""
    return ReportDocument(
        title=title,
        generated_at=generated_at or datetime.now(tz=UTC),
        carbon=_summarize(
            result.carbon.total,
            result.carbon.breakdown,
            CARBON_UNIT,
            GLOBAL_AVERAGE.carbon,
            SAFE_LIMIT.carbon,
        ),
        water=_summarize(
            result.water.total,
            result.water.breakdown,
            WATER_UNIT,
            GLOBAL_AVERAGE.water,
            SAFE_LIMIT.water,
        ),
        recommendations=tuple(recommendations),
        notes=REPORT_NOTES,
    )


def category_label(category: str) -> str:
    """Return the display label for a category name."""
    return category[:1].upper() + category[1:]


def _summarize(
    total: float,
    breakdown: Mapping[str, float],
    unit: str,
    global_average: float,
    safe_limit: float,
) -> FootprintSummary:
    rounded_total = round_display(total)
    return FootprintSummary(
        total=rounded_total,
        unit=unit,
        comparison=BenchmarkComparison(
            yours=rounded_total,
            global_average=global_average,
            safe_limit=safe_limit,
        ),
        breakdown=tuple(
            BreakdownRow(
                category=category,
                label=category_label(category),
                value=round_display(value),
                percent_of_total=percent_of(value, total),
            )
            for category, value in breakdown.items()
        ),
    )
