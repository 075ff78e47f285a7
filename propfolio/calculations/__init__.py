"""Pure calculators for stamp duty, mortgage interest, returns and projections."""

from propfolio.calculations.accrual import calculate_cpf_accrued_interest, cpf_refund_at_sale
from propfolio.calculations.amortization import (
    build_segments,
    calculate_mortgage_interest_paid,
    calculate_mortgage_interest_paid_with_refinances,
)
from propfolio.calculations.projection import (
    calculate_hold_proceeds,
    calculate_sell_now_proceeds,
)
from propfolio.calculations.recommendation import (
    build_scenarios,
    get_sell_recommendation,
    select_best_scenario,
)
from propfolio.calculations.returns import (
    calculate_annualized_return,
    calculate_break_even_price,
    calculate_gross_yield,
    calculate_net_profit,
    calculate_net_yield,
    calculate_roi,
    calculate_total_cost,
    estimate_annual_expenses,
)
from propfolio.calculations.summary import build_portfolio_summary, build_property_summary
from propfolio.calculations.taxes import (
    calculate_bsd,
    calculate_ssd,
    estimate_ssd_sale,
    get_days_to_ssd_free,
    get_ssd_countdown,
    get_ssd_free_date,
)

__all__ = [
    "build_portfolio_summary",
    "build_property_summary",
    "build_scenarios",
    "build_segments",
    "calculate_annualized_return",
    "calculate_break_even_price",
    "calculate_bsd",
    "calculate_cpf_accrued_interest",
    "calculate_gross_yield",
    "calculate_hold_proceeds",
    "calculate_mortgage_interest_paid",
    "calculate_mortgage_interest_paid_with_refinances",
    "calculate_net_profit",
    "calculate_net_yield",
    "calculate_roi",
    "calculate_sell_now_proceeds",
    "calculate_ssd",
    "calculate_total_cost",
    "cpf_refund_at_sale",
    "estimate_annual_expenses",
    "estimate_ssd_sale",
    "get_days_to_ssd_free",
    "get_sell_recommendation",
    "get_ssd_countdown",
    "get_ssd_free_date",
    "select_best_scenario",
]
