"""Threshold rules that turn a footprint into recommendations."""

from collections.abc import Callable
from dataclasses import dataclass

from clim8.domain.footprint import FootprintResult
from clim8.domain.recommendations import Recommendation
from clim8.domain.reference import CATEGORY_ALERT_THRESHOLD_KG, GLOBAL_AVERAGE


@dataclass(frozen=True)
class RecommendationRule:
    """Condition over a footprint paired with the advice it emits."""

    name: str
    condition: Callable[[FootprintResult], bool]
    recommendation: Recommendation

    def applies(self, result: FootprintResult) -> bool:
        """Return true when the rule fires for the footprint."""
        return self.condition(result)


def _carbon_category_above(category: str) -> Callable[[FootprintResult], bool]:
    def condition(result: FootprintResult) -> bool:
        return result.carbon.breakdown[category] > CATEGORY_ALERT_THRESHOLD_KG

    return condition


def _water_above_global_average(result: FootprintResult) -> bool:
    return result.water.total > GLOBAL_AVERAGE.water


RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="transportation",
        condition=_carbon_category_above("transportation"),
        recommendation=Recommendation(
            title="Transportation",
            body=(
                "Consider using public transport more often or carpooling to "
                "reduce your carbon footprint. Each kilometer saved can reduce "
                "your carbon footprint by up to 0.4 kg CO2."
            ),
        ),
    ),
    RecommendationRule(
        name="energy",
        condition=_carbon_category_above("energy"),
        recommendation=Recommendation(
            title="Energy Usage",
            body=(
                "Switch to energy-efficient appliances and turn off devices when "
                "not in use. Consider using LED bulbs and setting your thermostat "
                "1°C lower to save energy."
            ),
        ),
    ),
    RecommendationRule(
        name="diet",
        condition=_carbon_category_above("diet"),
        recommendation=Recommendation(
            title="Diet",
            body=(
                "Try incorporating more plant-based meals into your diet. Each "
                "meat-free meal can save up to 2.5 kg CO2 and 1000 liters of water."
            ),
        ),
    ),
    RecommendationRule(
        name="water",
        condition=_water_above_global_average,
        recommendation=Recommendation(
            title="Water Usage",
            body=(
                "Install water-saving devices and be mindful of water usage during "
                "daily activities. Consider taking shorter showers and fixing any "
                "leaks promptly."
            ),
        ),
    ),
)

FALLBACK_RECOMMENDATION = Recommendation(
    title="Great Job!",
    body=(
        "Your environmental impact is below average! Keep up the good work and "
        "continue looking for ways to reduce your footprint even further."
    ),
)


def derive_recommendations(result: FootprintResult) -> list[Recommendation]:
    """Evaluate every rule in order; fall back to praise when none fire."""
    recommendations = [
        rule.recommendation for rule in RULES if rule.applies(result)
    ]
    return recommendations or [FALLBACK_RECOMMENDATION]
