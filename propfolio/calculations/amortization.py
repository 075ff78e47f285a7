"""Fixed-payment mortgage amortization.

Elapsed time is converted to months on a 30.44-day average month and the
schedule is stepped one whole month at a time. A refinance is modelled as a
brand new loan: its segment starts a fresh schedule with the refinance's own
amount, rate and tenure rather than carrying over the previous balance.
"""

import logging
from datetime import date

from propfolio.calculations.dates import AVERAGE_DAYS_PER_MONTH, days_between, resolve_as_of
from propfolio.models.enums import SegmentKind
from propfolio.models.property import RefinanceRecord, sort_refinances
from propfolio.models.results import AmortizationSegment

logger = logging.getLogger(__name__)


def monthly_payment(loan_amount: float, monthly_rate: float, total_months: int) -> float:
    """Level payment that retires ``loan_amount`` over ``total_months``."""
    if total_months <= 0:
        return 0.0
    if monthly_rate == 0:
        return loan_amount / total_months
    growth = (1 + monthly_rate) ** total_months
    return loan_amount * monthly_rate * growth / (growth - 1)


def calculate_mortgage_interest_paid(
    loan_amount: float,
    interest_rate: float,
    tenure_years: int,
    start_date: date,
    as_of: date | None = None,
) -> float:
    """Interest paid on a fixed-payment loan from ``start_date`` to ``as_of``.

    Parameters
    ----------
    loan_amount : float
        Principal borrowed.
    interest_rate : float
        Annual rate in percent.
    tenure_years : int
        Loan term in years.
    start_date : date
        First day of the schedule.
    as_of : date | None
        Evaluation date (defaults to today).

    Returns
    -------
    float
        Cumulative interest. Once the full term has elapsed this is the
        closed-form total ``payment * months - principal``.
    """
    if loan_amount == 0 or interest_rate == 0 or tenure_years <= 0:
        return 0.0

    as_of = resolve_as_of(as_of)
    months_elapsed = days_between(start_date, as_of) / AVERAGE_DAYS_PER_MONTH
    monthly_rate = interest_rate / 100 / 12
    total_months = tenure_years * 12

    if months_elapsed <= 0:
        return 0.0

    payment = monthly_payment(loan_amount, monthly_rate, total_months)

    if months_elapsed >= total_months:
        return payment * total_months - loan_amount

    balance = loan_amount
    interest_paid = 0.0
    for _ in range(int(months_elapsed)):
        interest = balance * monthly_rate
        interest_paid += interest
        balance -= payment - interest

    return interest_paid


def build_segments(
    loan_amount: float,
    interest_rate: float,
    tenure_years: int,
    purchase_date: date,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> list[AmortizationSegment]:
    """Split the loan timeline at each refinance date, up to ``as_of``.

    The original mortgage runs from ``purchase_date`` to the first refinance;
    every refinance then runs to the next one, the last to ``as_of``.
    Refinances dated after ``as_of`` are left out and no segment ends later
    than ``as_of``.
    """
    as_of = resolve_as_of(as_of)
    ordered = [r for r in sort_refinances(refinances) if r.refinance_date <= as_of]

    first_end = ordered[0].refinance_date if ordered else as_of
    segments = [
        AmortizationSegment(
            kind=SegmentKind.ORIGINAL,
            ordinal=0,
            loan_amount=loan_amount,
            interest_rate=interest_rate,
            tenure_years=tenure_years,
            start_date=purchase_date,
            end_date=first_end,
        )
    ]

    for index, refinance in enumerate(ordered):
        if index + 1 < len(ordered):
            end_date = ordered[index + 1].refinance_date
        else:
            end_date = as_of
        segments.append(
            AmortizationSegment(
                kind=SegmentKind.REFINANCE,
                ordinal=index + 1,
                loan_amount=refinance.loan_amount,
                interest_rate=refinance.interest_rate,
                tenure_years=refinance.tenure,
                start_date=refinance.refinance_date,
                end_date=end_date,
            )
        )

    return segments


def segment_interest(segment: AmortizationSegment) -> float:
    """Interest accrued within one segment of the timeline."""
    return calculate_mortgage_interest_paid(
        segment.loan_amount,
        segment.interest_rate,
        segment.tenure_years,
        segment.start_date,
        segment.end_date,
    )


def calculate_mortgage_interest_paid_with_refinances(
    loan_amount: float,
    interest_rate: float,
    tenure_years: int,
    purchase_date: date,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> float:
    """Interest paid to ``as_of`` summed across the original loan and refinances."""
    as_of = resolve_as_of(as_of)
    if not refinances:
        return calculate_mortgage_interest_paid(
            loan_amount, interest_rate, tenure_years, purchase_date, as_of
        )

    segments = build_segments(
        loan_amount, interest_rate, tenure_years, purchase_date, refinances, as_of
    )
    total = 0.0
    for segment in segments:
        interest = segment_interest(segment)
        logger.debug(
            "Segment %s %s..%s interest=%.2f",
            segment.label,
            segment.start_date,
            segment.end_date,
            interest,
        )
        total += interest
    return total
