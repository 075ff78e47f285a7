"""Calendar helpers shared by the calculators.

All arithmetic is on ``datetime.date`` values; there is no time-of-day or
timezone component anywhere in the engine.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

AVERAGE_DAYS_PER_MONTH = 30.44
DAYS_PER_YEAR = 365.25


def resolve_as_of(as_of: date | None) -> date:
    """Return ``as_of`` or today's date when it is not supplied."""
    return as_of if as_of is not None else date.today()


def days_between(start: date, end: date) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if reversed)."""
    return (end - start).days


def full_years_between(start: date, end: date) -> int:
    """Completed calendar years from ``start`` to ``end``."""
    return relativedelta(end, start).years


def add_months(start: date, months: int) -> date:
    """Shift by calendar months, clamping to the last day of short months."""
    return start + relativedelta(months=months)


def years_elapsed(start: date, end: date) -> float:
    """Fractional years between two dates on a 365.25-day year."""
    return days_between(start, end) / DAYS_PER_YEAR
