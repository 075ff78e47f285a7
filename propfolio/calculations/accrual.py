"""CPF accrued interest on funds used for the purchase."""

from datetime import date

from propfolio.calculations.dates import add_months, resolve_as_of, years_elapsed

CPF_INTEREST_RATE = 2.5  # Annual percent


def calculate_cpf_accrued_interest(
    cpf_amount: float,
    purchase_date: date,
    as_of: date | None = None,
) -> float:
    """Interest owed back to the CPF account, compounded annually at 2.5%."""
    if cpf_amount == 0:
        return 0.0

    years = years_elapsed(purchase_date, resolve_as_of(as_of))
    if years <= 0:
        return 0.0
    return cpf_amount * (1 + CPF_INTEREST_RATE / 100) ** years - cpf_amount


def cpf_refund_at_sale(
    cpf_amount: float,
    purchase_date: date,
    hold_months: int = 0,
    as_of: date | None = None,
) -> float:
    """Principal plus accrued interest refunded to CPF on a sale ``hold_months`` out."""
    if not cpf_amount or cpf_amount <= 0:
        return 0.0

    sale_date = add_months(resolve_as_of(as_of), hold_months)
    years = years_elapsed(purchase_date, sale_date)
    return cpf_amount * (1 + CPF_INTEREST_RATE / 100) ** years
