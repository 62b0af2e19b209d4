"""Chart series for the results view."""

from clim8.domain.charts import BreakdownSlice, ChartData, ComparisonChart
from clim8.domain.footprint import FootprintResult
from clim8.domain.reference import CARBON_UNIT, GLOBAL_AVERAGE, SAFE_LIMIT, WATER_UNIT
from clim8.services.ranking import percent_of, round_display
from clim8.services.reports import category_label

COMPARISON_LABELS = ("Your Footprint", "Global Average", "Safe Limit")


def build_chart_data(result: FootprintResult) -> ChartData:
    """Return benchmark comparisons and the carbon breakdown for charting."""
    return ChartData(
        carbon_comparison=ComparisonChart(
            title=f"Carbon Footprint ({CARBON_UNIT})",
            unit=CARBON_UNIT,
            labels=COMPARISON_LABELS,
            values=(result.carbon.total, GLOBAL_AVERAGE.carbon, SAFE_LIMIT.carbon),
        ),
        water_comparison=ComparisonChart(
            title=f"Water Footprint ({WATER_UNIT})",
            unit=WATER_UNIT,
            labels=COMPARISON_LABELS,
            values=(result.water.total, GLOBAL_AVERAGE.water, SAFE_LIMIT.water),
        ),
        carbon_breakdown=tuple(
            BreakdownSlice(
                category=category,
                label=category_label(category),
                value=value,
                rounded_value=round_display(value),
                percent_of_total=percent_of(value, result.carbon.total),
            )
            for category, value in result.carbon.breakdown.items()
        ),
    )
