"""Sell-or-hold recommendation across a fixed set of holding scenarios."""

import math
from datetime import date

from propfolio.calculations.dates import AVERAGE_DAYS_PER_MONTH, days_between, resolve_as_of
from propfolio.calculations.projection import (
    DEFAULT_APPRECIATION_RATE,
    calculate_hold_proceeds,
    calculate_sell_now_proceeds,
)
from propfolio.calculations.taxes import SSD_HOLDING_PERIOD_DAYS
from propfolio.formatting import format_currency
from propfolio.models.property import PropertyRecord, RefinanceRecord
from propfolio.models.results import Recommendation, ScenarioResult

SELL_NOW_LABEL = "Sell now"


def months_to_ssd_free(purchase_date: date, as_of: date | None = None) -> int:
    """Whole months (rounded up) until 1095 days of ownership."""
    days_owned = days_between(purchase_date, resolve_as_of(as_of))
    days_left = max(0, SSD_HOLDING_PERIOD_DAYS - days_owned)
    return math.ceil(days_left / AVERAGE_DAYS_PER_MONTH)


def build_scenarios(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    appreciation_rate: float = DEFAULT_APPRECIATION_RATE,
    as_of: date | None = None,
) -> list[ScenarioResult]:
    """Sell now, hold one year, hold two years and hold until SSD-free."""
    as_of = resolve_as_of(as_of)
    ssd_free_months = months_to_ssd_free(prop.purchase_date, as_of)

    def hold(months: int) -> float:
        return calculate_hold_proceeds(prop, months, appreciation_rate, refinances, as_of)

    return [
        ScenarioResult(SELL_NOW_LABEL, 0, calculate_sell_now_proceeds(prop, refinances, as_of)),
        ScenarioResult("Hold 1 year", 12, hold(12)),
        ScenarioResult("Hold 2 years", 24, hold(24)),
        ScenarioResult("Hold until SSD-free", ssd_free_months, hold(ssd_free_months)),
    ]


def select_best_scenario(scenarios: list[ScenarioResult]) -> ScenarioResult:
    """Scenario with the highest proceeds; the earliest wins a tie.

    Raises ValueError when ``scenarios`` is empty.
    """
    if not scenarios:
        raise ValueError("At least one scenario is required")
    best = scenarios[0]
    for scenario in scenarios[1:]:
        if scenario.projected_net_proceeds > best.projected_net_proceeds:
            best = scenario
    return best


def recommend(scenarios: list[ScenarioResult]) -> Recommendation:
    """Pick the best scenario. ``scenarios[0]`` must be the sell-now baseline."""
    best = select_best_scenario(scenarios)
    baseline = scenarios[0]

    if best.hold_months == 0:
        return Recommendation(
            best=best,
            message="Recommended: Sell now",
            additional_proceeds_vs_sell_now=0.0,
            scenarios=tuple(scenarios),
        )

    additional = best.projected_net_proceeds - baseline.projected_net_proceeds
    return Recommendation(
        best=best,
        message=(
            f"Recommended: Hold {best.hold_months} more months to save "
            f"{format_currency(additional)} in SSD-adjusted proceeds"
        ),
        additional_proceeds_vs_sell_now=additional,
        scenarios=tuple(scenarios),
    )


def get_sell_recommendation(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> Recommendation:
    """Recommend selling or holding using a fixed 3% appreciation assumption."""
    as_of = resolve_as_of(as_of)
    return recommend(build_scenarios(prop, refinances, DEFAULT_APPRECIATION_RATE, as_of))
