"""Domain models for property investment tracking."""

from propfolio.models.base import Event
from propfolio.models.enums import AlertType, PropertyType, SegmentKind
from propfolio.models.property import (
    PropertyRecord,
    RefinanceRecord,
    effective_current_value,
    sort_refinances,
)
from propfolio.models.results import (
    AmortizationSegment,
    PortfolioSummary,
    PropertySummary,
    Recommendation,
    ScenarioResult,
    SSDCountdown,
    SSDSaleEstimate,
    ValuePoint,
)

__all__ = [
    "AlertType",
    "AmortizationSegment",
    "Event",
    "PortfolioSummary",
    "PropertyRecord",
    "PropertySummary",
    "PropertyType",
    "Recommendation",
    "RefinanceRecord",
    "SSDCountdown",
    "SSDSaleEstimate",
    "ScenarioResult",
    "SegmentKind",
    "ValuePoint",
    "effective_current_value",
    "sort_refinances",
]
