"""Presentation helpers for alert and report text."""

from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: float) -> str:
    """Format as whole Singapore dollars, e.g. ``S$1,234`` or ``-S$500``."""
    rounded = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if rounded < 0:
        return f"-S${-rounded:,}"
    return f"S${rounded:,}"


def format_percent(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"
