"""Singapore Buyer's and Seller's Stamp Duty.

``calculate_ssd`` picks its rate from completed calendar years of ownership,
while ``get_ssd_countdown`` and ``ssd_rate_at_sale`` use 365/730/1095-day
thresholds. The two granularities disagree for a few days around each
anniversary.
"""

import logging
from datetime import date

from propfolio.calculations.dates import (
    add_months,
    days_between,
    full_years_between,
    resolve_as_of,
)
from propfolio.models.results import SSDCountdown, SSDSaleEstimate

logger = logging.getLogger(__name__)

# (upper bound of bracket, marginal rate in percent); None is unbounded
BSD_BRACKETS: tuple[tuple[float | None, float], ...] = (
    (180_000, 1),
    (360_000, 2),
    (1_000_000, 3),
    (None, 4),
)

# SSD rate in percent by completed years of ownership
SSD_RATES_BY_YEAR = {0: 12, 1: 8, 2: 4}

# (days owned below which the rate applies, rate in percent)
SSD_DAY_TIERS: tuple[tuple[int, float], ...] = (
    (365, 12),
    (730, 8),
    (1095, 4),
)

SSD_HOLDING_PERIOD_DAYS = 1095
SSD_HOLDING_PERIOD_MONTHS = 36
AGENT_FEE_RATE = 0.02


def calculate_bsd(purchase_price: float) -> float:
    """Buyer's Stamp Duty on a purchase price, summed bracket by bracket."""
    bsd = 0.0
    lower = 0.0
    for upper, rate in BSD_BRACKETS:
        if upper is None:
            band = max(0.0, purchase_price - lower)
        else:
            band = max(0.0, min(purchase_price, upper) - lower)
        bsd += band * rate / 100
        if upper is None or purchase_price <= upper:
            break
        lower = upper
    return bsd


def calculate_ssd(sale_price: float, purchase_date: date, as_of: date | None = None) -> float:
    """Seller's Stamp Duty payable on ``sale_price`` if sold on ``as_of``."""
    as_of = resolve_as_of(as_of)
    years_owned = full_years_between(purchase_date, as_of)
    rate = SSD_RATES_BY_YEAR.get(max(years_owned, 0), 0)
    return sale_price * rate / 100


def get_ssd_countdown(purchase_date: date, as_of: date | None = None) -> SSDCountdown:
    """Current SSD tier and the days left until the next, lower tier."""
    as_of = resolve_as_of(as_of)
    years_owned = full_years_between(purchase_date, as_of)
    days_owned = days_between(purchase_date, as_of)

    if years_owned < 3:
        for index, (threshold, rate) in enumerate(SSD_DAY_TIERS):
            if days_owned < threshold:
                if index + 1 < len(SSD_DAY_TIERS):
                    next_rate = SSD_DAY_TIERS[index + 1][1]
                else:
                    next_rate = 0
                return SSDCountdown(
                    years_owned=years_owned,
                    current_rate=rate,
                    next_rate=next_rate,
                    days_to_next_tier=threshold - days_owned,
                    is_exempt=False,
                )

    # Exempt once three calendar years or 1095 days have passed
    return SSDCountdown(
        years_owned=years_owned,
        current_rate=0,
        next_rate=0,
        days_to_next_tier=0,
        is_exempt=True,
    )


def ssd_rate_at_sale(
    purchase_date: date,
    hold_months: int = 0,
    as_of: date | None = None,
) -> float:
    """SSD rate (percent) for a sale ``hold_months`` calendar months after ``as_of``."""
    sale_date = add_months(resolve_as_of(as_of), hold_months)
    days_owned = days_between(purchase_date, sale_date)

    for threshold, rate in SSD_DAY_TIERS:
        if days_owned < threshold:
            return rate
    return 0


def get_ssd_free_date(purchase_date: date) -> date:
    """First date on which a sale attracts no SSD (36 calendar months on)."""
    return add_months(purchase_date, SSD_HOLDING_PERIOD_MONTHS)


def get_days_to_ssd_free(purchase_date: date, as_of: date | None = None) -> int:
    """Days until the SSD-free date; negative once it has passed."""
    return days_between(resolve_as_of(as_of), get_ssd_free_date(purchase_date))


def estimate_ssd_sale(
    sale_price: float,
    purchase_date: date,
    as_of: date | None = None,
) -> SSDSaleEstimate:
    """Quote an immediate sale: SSD, 2% agent fees and what waiting would save."""
    as_of = resolve_as_of(as_of)
    ssd = calculate_ssd(sale_price, purchase_date, as_of)
    countdown = get_ssd_countdown(purchase_date, as_of)
    agent_fees = sale_price * AGENT_FEE_RATE

    if countdown.is_exempt:
        savings = 0.0
    else:
        savings = sale_price * (countdown.current_rate - countdown.next_rate) / 100

    logger.debug(
        "SSD estimate: price=%.2f ssd=%.2f days_to_next_tier=%d",
        sale_price,
        ssd,
        countdown.days_to_next_tier,
    )

    return SSDSaleEstimate(
        sale_price=sale_price,
        ssd=ssd,
        agent_fees=agent_fees,
        net_proceeds=sale_price - ssd - agent_fees,
        potential_savings=savings,
        countdown=countdown,
    )
