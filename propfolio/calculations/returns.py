"""Cost basis and return metrics for a single property.

Callers resolve the current value with ``effective_current_value`` so every
metric agrees on the same figure.
"""

from datetime import date

from propfolio.calculations.accrual import calculate_cpf_accrued_interest
from propfolio.calculations.amortization import calculate_mortgage_interest_paid_with_refinances
from propfolio.calculations.dates import resolve_as_of, years_elapsed
from propfolio.calculations.taxes import calculate_ssd
from propfolio.models.property import PropertyRecord, RefinanceRecord, effective_current_value

ANNUAL_MAINTENANCE = 3000.0
ANNUAL_INSURANCE = 300.0
PROPERTY_TAX_PROXY_RATE = 0.01


def calculate_mortgage_interest(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Mortgage interest paid on ``prop`` to ``as_of``, refinances included."""
    return calculate_mortgage_interest_paid_with_refinances(
        prop.mortgage_amount,
        prop.mortgage_interest_rate,
        prop.mortgage_tenure,
        prop.purchase_date,
        refinances,
        as_of,
    )


def calculate_total_cost(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Purchase price plus stamp duty, renovation, agent fees and interest paid."""
    return (
        prop.purchase_price
        + prop.stamp_duty
        + prop.renovation_cost
        + prop.agent_fees
        + calculate_mortgage_interest(prop, refinances, as_of)
    )


def calculate_net_profit(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Current value less total cost and CPF accrued interest."""
    as_of = resolve_as_of(as_of)
    total_cost = calculate_total_cost(prop, refinances, as_of)
    cpf_interest = calculate_cpf_accrued_interest(prop.cpf_amount, prop.purchase_date, as_of)
    return effective_current_value(prop) - total_cost - cpf_interest


def calculate_roi(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Net profit as a percentage of total cost (0 when cost is 0)."""
    as_of = resolve_as_of(as_of)
    total_cost = calculate_total_cost(prop, refinances, as_of)
    if total_cost == 0:
        return 0.0
    return calculate_net_profit(prop, refinances, as_of) / total_cost * 100


def calculate_annualized_return(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Cumulative ROI compounded down to a per-year percentage.

    This annualizes the profit ratio ``1 + ROI/100`` over the holding
    period, not the growth of the property's value.
    """
    as_of = resolve_as_of(as_of)
    years = years_elapsed(prop.purchase_date, as_of)
    if years <= 0:
        return 0.0

    growth = 1 + calculate_roi(prop, refinances, as_of) / 100
    if growth <= 0:
        return -100.0
    return growth ** (1 / years) * 100 - 100


def calculate_break_even_price(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Sale price needed to recover every cost, with SSD levied on that cost basis."""
    as_of = resolve_as_of(as_of)
    total_cost = calculate_total_cost(prop, refinances, as_of)
    cpf_interest = calculate_cpf_accrued_interest(prop.cpf_amount, prop.purchase_date, as_of)
    ssd = calculate_ssd(total_cost + cpf_interest, prop.purchase_date, as_of)
    return total_cost + cpf_interest + ssd


def calculate_gross_yield(monthly_rental: float, current_value: float) -> float:
    if not current_value or current_value <= 0:
        return 0.0
    return monthly_rental * 12 * 100 / current_value


def calculate_net_yield(monthly_rental: float, current_value: float, annual_expenses: float) -> float:
    if not current_value or current_value <= 0:
        return 0.0
    return (monthly_rental * 12 - annual_expenses) * 100 / current_value


def estimate_annual_expenses(monthly_rental: float) -> float:
    """Maintenance, a 1%-of-rent property tax proxy and insurance."""
    annual_rental = (monthly_rental or 0) * 12
    return ANNUAL_MAINTENANCE + annual_rental * PROPERTY_TAX_PROXY_RATE + ANNUAL_INSURANCE
