"""Property and refinance records."""

from dataclasses import dataclass
from datetime import date, datetime

from propfolio.models.enums import PropertyType


@dataclass
class PropertyRecord:
    """A purchased property with its cost, mortgage and rental inputs.

    Monetary fields are SGD amounts, ``mortgage_interest_rate`` is an annual
    percentage (``2.75`` for 2.75%) and ``mortgage_tenure`` is in years.
    A ``current_value`` of 0 means "not valued yet"; see
    :func:`effective_current_value`.
    """

    property_id: str
    name: str
    purchase_price: float
    purchase_date: date
    property_type: PropertyType = PropertyType.CONDO
    address: str = ""
    stamp_duty: float = 0.0
    renovation_cost: float = 0.0
    agent_fees: float = 0.0
    current_value: float = 0.0
    cpf_amount: float = 0.0
    mortgage_amount: float = 0.0
    mortgage_interest_rate: float = 0.0
    mortgage_tenure: int = 0
    monthly_rental: float = 0.0
    target_profit_percentage: float = 0.0
    target_profit_alert_sent: bool = False
    created_at: datetime | None = None


@dataclass
class RefinanceRecord:
    """A refinance event. Each one starts a fresh amortization schedule."""

    refinance_id: str
    property_id: str
    refinance_date: date
    loan_amount: float
    interest_rate: float  # Annual percentage
    tenure: int  # Years
    description: str = ""


def effective_current_value(prop: PropertyRecord) -> float:
    """Current value, falling back to the purchase price when unset."""
    return prop.current_value or prop.purchase_price


def sort_refinances(refinances: list[RefinanceRecord] | None) -> list[RefinanceRecord]:
    """Return a new list of refinances in ascending date order."""
    return sorted(refinances or [], key=lambda r: r.refinance_date)
