"""One-shot property and portfolio summaries.

``as_of`` is sampled once here and passed to every calculator so all
figures in a summary describe the same day.
"""

import logging
from datetime import date

from propfolio.calculations.accrual import calculate_cpf_accrued_interest
from propfolio.calculations.dates import resolve_as_of
from propfolio.calculations.projection import DEFAULT_APPRECIATION_RATE, project_value
from propfolio.calculations.recommendation import build_scenarios, get_sell_recommendation
from propfolio.calculations.returns import (
    calculate_annualized_return,
    calculate_break_even_price,
    calculate_gross_yield,
    calculate_mortgage_interest,
    calculate_net_profit,
    calculate_net_yield,
    calculate_roi,
    calculate_total_cost,
    estimate_annual_expenses,
)
from propfolio.calculations.taxes import (
    calculate_ssd,
    get_days_to_ssd_free,
    get_ssd_countdown,
    get_ssd_free_date,
)
from propfolio.models.property import PropertyRecord, RefinanceRecord, effective_current_value
from propfolio.models.results import PortfolioSummary, PropertySummary, ValuePoint

logger = logging.getLogger(__name__)

PROJECTION_YEARS = 5


def build_value_projection(
    prop: PropertyRecord,
    appreciation_rate: float,
    as_of: date,
) -> list[ValuePoint]:
    """Purchase, current and five yearly projected values for charting."""
    current_value = effective_current_value(prop)
    points = [
        ValuePoint(prop.purchase_date.year, prop.purchase_price, "historical"),
        ValuePoint(as_of.year, current_value, "current"),
    ]
    for year in range(1, PROJECTION_YEARS + 1):
        points.append(
            ValuePoint(
                as_of.year + year,
                project_value(current_value, appreciation_rate, year),
                "projection",
            )
        )
    return points


def build_property_summary(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    appreciation_rate: float = DEFAULT_APPRECIATION_RATE,
    as_of: date | None = None,
) -> PropertySummary:
    """Compute every investment metric for ``prop`` on a single day.

    ``appreciation_rate`` drives the scenario table and value chart; the
    recommendation always uses the fixed 3% assumption.
    """
    as_of = resolve_as_of(as_of)
    current_value = effective_current_value(prop)
    annual_expenses = estimate_annual_expenses(prop.monthly_rental)

    summary = PropertySummary(
        property_id=prop.property_id,
        as_of=as_of,
        current_value=current_value,
        total_cost=calculate_total_cost(prop, refinances, as_of),
        net_profit=calculate_net_profit(prop, refinances, as_of),
        roi=calculate_roi(prop, refinances, as_of),
        annualized_return=calculate_annualized_return(prop, refinances, as_of),
        break_even_price=calculate_break_even_price(prop, refinances, as_of),
        ssd_amount=calculate_ssd(current_value, prop.purchase_date, as_of),
        ssd_countdown=get_ssd_countdown(prop.purchase_date, as_of),
        ssd_free_date=get_ssd_free_date(prop.purchase_date),
        days_to_ssd_free=get_days_to_ssd_free(prop.purchase_date, as_of),
        cpf_accrued_interest=calculate_cpf_accrued_interest(
            prop.cpf_amount, prop.purchase_date, as_of
        ),
        mortgage_interest_paid=calculate_mortgage_interest(prop, refinances, as_of),
        annual_expenses=annual_expenses,
        gross_yield=calculate_gross_yield(prop.monthly_rental, current_value),
        net_yield=calculate_net_yield(prop.monthly_rental, current_value, annual_expenses),
        appreciation_rate=appreciation_rate,
        scenarios=build_scenarios(prop, refinances, appreciation_rate, as_of),
        recommendation=get_sell_recommendation(prop, refinances, as_of),
        value_projection=build_value_projection(prop, appreciation_rate, as_of),
    )
    logger.debug(
        "Summary for %s as of %s: total_cost=%.2f roi=%.2f%%",
        prop.property_id,
        as_of,
        summary.total_cost,
        summary.roi,
        extra={"property_id": prop.property_id, "as_of": as_of},
    )
    return summary


def build_portfolio_summary(
    properties: list[PropertyRecord],
    refinances_by_property: dict[str, list[RefinanceRecord]] | None = None,
    as_of: date | None = None,
) -> PortfolioSummary:
    """Dashboard totals: invested cost, current value and paper profit."""
    as_of = resolve_as_of(as_of)
    refinances_by_property = refinances_by_property or {}

    total_investment = 0.0
    total_value = 0.0
    within_ssd = 0
    for prop in properties:
        refinances = refinances_by_property.get(prop.property_id)
        total_investment += calculate_total_cost(prop, refinances, as_of)
        total_value += effective_current_value(prop)
        if not get_ssd_countdown(prop.purchase_date, as_of).is_exempt:
            within_ssd += 1

    return PortfolioSummary(
        as_of=as_of,
        property_count=len(properties),
        total_investment=total_investment,
        total_current_value=total_value,
        total_profit=total_value - total_investment,
        properties_within_ssd=within_ssd,
    )
