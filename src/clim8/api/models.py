"""Response models for the footprint API."""

from collections.abc import Mapping
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ActivityModel(_ResponseModel):
    """Normalized activity quantities."""

    car_distance_km: float = Field(ge=0)
    public_transport_km: float = Field(ge=0)
    electricity_kwh: float = Field(ge=0)
    gas_m3: float = Field(ge=0)
    meat_meals_per_week: float = Field(ge=0)
    dairy_products_per_week: float = Field(ge=0)
    water_usage_liters_per_day: float = Field(ge=0)


class ResourceFootprintModel(_ResponseModel):
    """Total and per-category values for one resource."""

    total: float = Field(ge=0, allow_inf_nan=False)
    breakdown: dict[str, float]

    @field_validator("breakdown", mode="before")
    @classmethod
    def _copy_breakdown(cls, value: object) -> object:
        if isinstance(value, Mapping):
            return dict(value)
        return value


class FootprintModel(_ResponseModel):
    carbon: ResourceFootprintModel
    water: ResourceFootprintModel


class ImpactAreaModel(_ResponseModel):
    category: str
    absolute_value: float
    percent_of_total: float


class RecommendationModel(_ResponseModel):
    title: str
    body: str


class ComparisonChartModel(_ResponseModel):
    title: str
    unit: str
    labels: list[str]
    values: list[float]


class BreakdownSliceModel(_ResponseModel):
    category: str
    label: str
    value: float
    rounded_value: int
    percent_of_total: float


class ChartDataModel(_ResponseModel):
    carbon_comparison: ComparisonChartModel
    water_comparison: ComparisonChartModel
    carbon_breakdown: list[BreakdownSliceModel]


class FootprintAnalysisResponse(_ResponseModel):
    """Payload for the results view."""

    activity: ActivityModel
    footprint: FootprintModel
    impact_areas: list[ImpactAreaModel]
    recommendations: list[RecommendationModel]
    charts: ChartDataModel


class BenchmarkComparisonModel(_ResponseModel):
    yours: int
    global_average: float
    safe_limit: float


class BreakdownRowModel(_ResponseModel):
    category: str
    label: str
    value: int
    percent_of_total: float


class FootprintSummaryModel(_ResponseModel):
    total: int
    unit: str
    comparison: BenchmarkComparisonModel
    breakdown: list[BreakdownRowModel]


class ReportResponse(_ResponseModel):
    """Report document as JSON."""

    title: str
    generated_at: datetime
    carbon: FootprintSummaryModel
    water: FootprintSummaryModel
    recommendations: list[RecommendationModel]
    notes: list[str]
