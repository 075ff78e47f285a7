"""Net sale proceeds now and after holding for a number of months."""

import logging
from datetime import date

from propfolio.calculations.accrual import cpf_refund_at_sale
from propfolio.calculations.dates import resolve_as_of
from propfolio.calculations.returns import calculate_total_cost
from propfolio.calculations.taxes import calculate_ssd, ssd_rate_at_sale
from propfolio.models.property import (
    PropertyRecord,
    RefinanceRecord,
    effective_current_value,
    sort_refinances,
)

logger = logging.getLogger(__name__)

DEFAULT_APPRECIATION_RATE = 3.0
OPPORTUNITY_COST_RATE = 3.0


def project_value(current_value: float, appreciation_rate: float, years: float) -> float:
    """Value after ``years`` of compound appreciation at ``appreciation_rate`` percent."""
    return current_value * (1 + appreciation_rate / 100) ** years


def estimate_additional_mortgage_interest(
    prop: PropertyRecord,
    hold_months: int,
    refinances: list[RefinanceRecord] | None = None,
) -> float:
    """Simple interest on the latest loan terms for the extra holding period."""
    loan_amount = prop.mortgage_amount
    rate = prop.mortgage_interest_rate

    ordered = sort_refinances(refinances)
    if ordered:
        loan_amount = ordered[-1].loan_amount
        rate = ordered[-1].interest_rate

    if not loan_amount or not rate or hold_months <= 0:
        return 0.0
    return loan_amount * (rate / 100) * (hold_months / 12)


def calculate_sell_now_proceeds(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Cash left after selling at current value and settling costs, SSD and CPF."""
    as_of = resolve_as_of(as_of)
    sale_price = effective_current_value(prop)
    total_cost = calculate_total_cost(prop, refinances, as_of)
    ssd = calculate_ssd(sale_price, prop.purchase_date, as_of)
    cpf_refund = cpf_refund_at_sale(prop.cpf_amount, prop.purchase_date, 0, as_of)
    return sale_price - total_cost - ssd - cpf_refund


def calculate_hold_proceeds(
    prop: PropertyRecord,
    hold_months: int,
    appreciation_rate: float = DEFAULT_APPRECIATION_RATE,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Projected proceeds from selling ``hold_months`` after ``as_of``.

    Parameters
    ----------
    prop : PropertyRecord
        Property to project.
    hold_months : int
        Months to keep holding before the sale.
    appreciation_rate : float
        Annual appreciation in percent.
    refinances : list[RefinanceRecord] | None
        Refinances on the property, any order.
    as_of : date | None
        Evaluation date (defaults to today).

    Returns
    -------
    float
        Projected value less total cost, extra mortgage interest, SSD at the
        future sale date, CPF refund and the opportunity cost of not
        reinvesting today's sale proceeds.
    """
    as_of = resolve_as_of(as_of)
    projected_value = project_value(
        effective_current_value(prop), appreciation_rate, hold_months / 12
    )
    total_cost = calculate_total_cost(prop, refinances, as_of)
    ssd = projected_value * ssd_rate_at_sale(prop.purchase_date, hold_months, as_of) / 100
    cpf_refund = cpf_refund_at_sale(prop.cpf_amount, prop.purchase_date, hold_months, as_of)
    additional_interest = estimate_additional_mortgage_interest(prop, hold_months, refinances)

    sell_now = calculate_sell_now_proceeds(prop, refinances, as_of)
    opportunity_cost = max(sell_now, 0) * OPPORTUNITY_COST_RATE / 100 * (hold_months / 12)

    proceeds = (
        projected_value
        - total_cost
        - additional_interest
        - ssd
        - cpf_refund
        - opportunity_cost
    )
    logger.debug(
        "Hold %d months: value=%.2f ssd=%.2f cpf=%.2f interest=%.2f opportunity=%.2f",
        hold_months,
        projected_value,
        ssd,
        cpf_refund,
        additional_interest,
        opportunity_cost,
    )
    return proceeds
