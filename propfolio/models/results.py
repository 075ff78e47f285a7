"""Derived, per-call results produced by the calculation engine."""

from dataclasses import dataclass, field
from datetime import date

from propfolio.models.enums import SegmentKind


@dataclass(frozen=True)
class SSDCountdown:
    """Seller's Stamp Duty position measured in days since purchase."""

    years_owned: int
    current_rate: float  # Percent
    next_rate: float  # Percent
    days_to_next_tier: int
    is_exempt: bool


@dataclass(frozen=True)
class SSDSaleEstimate:
    """Net proceeds of an immediate sale after SSD and agent fees."""

    sale_price: float
    ssd: float
    agent_fees: float
    net_proceeds: float
    potential_savings: float  # SSD saved by waiting for the next tier
    countdown: SSDCountdown


@dataclass(frozen=True)
class AmortizationSegment:
    """A stretch of the loan timeline amortized under one set of terms.

    ``ordinal`` is 0 for the original mortgage and N for the N-th refinance.
    """

    kind: SegmentKind
    ordinal: int
    loan_amount: float
    interest_rate: float
    tenure_years: int
    start_date: date
    end_date: date

    @property
    def label(self) -> str:
        if self.kind == SegmentKind.ORIGINAL:
            return "original"
        return f"refinance {self.ordinal}"


@dataclass(frozen=True)
class ScenarioResult:
    """Projected net proceeds for selling after ``hold_months``."""

    label: str
    hold_months: int
    projected_net_proceeds: float


@dataclass(frozen=True)
class Recommendation:
    """Outcome of the sell-or-hold comparison."""

    best: ScenarioResult
    message: str
    additional_proceeds_vs_sell_now: float
    scenarios: tuple[ScenarioResult, ...] = ()

    @property
    def best_scenario(self) -> str:
        return self.best.label

    @property
    def hold_months(self) -> int:
        return self.best.hold_months


@dataclass(frozen=True)
class ValuePoint:
    """A single point on the property value chart."""

    year: int
    value: float
    kind: str  # historical | current | projection


@dataclass
class PropertySummary:
    """All investment metrics for one property at a single instant."""

    property_id: str
    as_of: date
    current_value: float
    total_cost: float
    net_profit: float
    roi: float
    annualized_return: float
    break_even_price: float
    ssd_amount: float
    ssd_countdown: SSDCountdown
    ssd_free_date: date
    days_to_ssd_free: int
    cpf_accrued_interest: float
    mortgage_interest_paid: float
    annual_expenses: float
    gross_yield: float
    net_yield: float
    appreciation_rate: float
    scenarios: list[ScenarioResult] = field(default_factory=list)
    recommendation: Recommendation | None = None
    value_projection: list[ValuePoint] = field(default_factory=list)


@dataclass
class PortfolioSummary:
    """Dashboard totals across every property a user holds."""

    as_of: date
    property_count: int
    total_investment: float
    total_current_value: float
    total_profit: float
    properties_within_ssd: int
