"""Reference interest rates published by the Monetary Authority of Singapore.

The MAS table is not reliably scrapeable, so a maintained snapshot is kept
here and updated by hand.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MasRates:
    sor_3m: float
    sora_1m: float
    sora_3m: float
    fixed_deposit_12m: float
    savings_reference: float
    estimated_home_loan_rate: float


@dataclass(frozen=True)
class MasRatesSnapshot:
    source: str
    last_updated: str
    rates: MasRates


LATEST_RATES = MasRatesSnapshot(
    source="MAS Table of Rates Snapshot (maintained in app)",
    last_updated="2026-02-26",
    rates=MasRates(
        sor_3m=2.84,
        sora_1m=2.91,
        sora_3m=2.96,
        fixed_deposit_12m=2.35,
        savings_reference=0.15,
        estimated_home_loan_rate=2.95,
    ),
)


def get_mas_rates() -> MasRatesSnapshot:
    """Return the latest maintained rate snapshot."""
    return LATEST_RATES
