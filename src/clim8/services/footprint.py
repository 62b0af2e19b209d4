"""Footprint pipeline shared by the results view and the report download."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime

from clim8.domain.activity import ActivityInput
from clim8.domain.charts import ChartData
from clim8.domain.footprint import FootprintResult, RankedImpactArea
from clim8.domain.recommendations import Recommendation
from clim8.domain.report import ReportDocument
from clim8.services.calculator import compute_footprint
from clim8.services.charts import build_chart_data
from clim8.services.normalizer import normalize_activity
from clim8.services.ranking import rank_areas
from clim8.services.recommendations import derive_recommendations
from clim8.services.reports import DEFAULT_REPORT_TITLE, build_report

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class FootprintAnalysis:
    """Everything the results view needs for one calculation."""

    activity: ActivityInput
    footprint: FootprintResult
    impact_areas: tuple[RankedImpactArea, ...]
    recommendations: tuple[Recommendation, ...]
    charts: ChartData


@dataclass
class FootprintService:
    """Runs the footprint pipeline for raw form values."""

    report_title: str = DEFAULT_REPORT_TITLE
    clock: Callable[[], datetime] = _utc_now
    debug: bool = False

    def analyze(self, raw: Mapping[str, object]) -> FootprintAnalysis:
        """Compute the footprint, impact ranking, tips and chart data."""
        activity = normalize_activity(raw)
        footprint = compute_footprint(activity)
        recommendations = derive_recommendations(footprint)
        if self.debug:
            _logger.info(
                "Footprint analyzed: carbon=%.1f water=%.1f tips=%s",
                footprint.carbon.total,
                footprint.water.total,
                len(recommendations),
            )
        return FootprintAnalysis(
            activity=activity,
            footprint=footprint,
            impact_areas=tuple(
                rank_areas(footprint.carbon.breakdown, footprint.carbon.total)
            ),
            recommendations=tuple(recommendations),
            charts=build_chart_data(footprint),
        )

    def report(self, raw: Mapping[str, object]) -> ReportDocument:
        """Build the downloadable report for raw form values."""
        footprint = compute_footprint(normalize_activity(raw))
        document = build_report(
            footprint,
            derive_recommendations(footprint),
            generated_at=self.clock(),
            title=self.report_title,
        )
        if self.debug:
            _logger.info(
                "Footprint report built: carbon=%s water=%s",
                document.carbon.total,
                document.water.total,
            )
        return document
