"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from propfolio.calculations.taxes import calculate_bsd
from propfolio.models import PropertyRecord, PropertyType, RefinanceRecord


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def as_of() -> date:
    """Evaluation date shared by time-dependent tests."""
    return date(2024, 6, 15)


@pytest.fixture
def sample_property() -> PropertyRecord:
    """Condo bought two years before ``as_of`` with a mortgage and CPF."""
    return PropertyRecord(
        property_id="prop-test-001",
        name="Marina Heights",
        purchase_price=450_000.0,
        purchase_date=date(2022, 6, 15),
        property_type=PropertyType.CONDO,
        stamp_duty=calculate_bsd(450_000),
        renovation_cost=20_000.0,
        agent_fees=4_500.0,
        current_value=480_000.0,
        cpf_amount=150_000.0,
        mortgage_amount=360_000.0,
        mortgage_interest_rate=2.75,
        mortgage_tenure=25,
        monthly_rental=3_000.0,
    )


@pytest.fixture
def sample_refinances() -> list[RefinanceRecord]:
    """Two refinances, deliberately out of date order."""
    return [
        RefinanceRecord(
            refinance_id="refi-002",
            property_id="prop-test-001",
            refinance_date=date(2024, 1, 15),
            loan_amount=330_000.0,
            interest_rate=3.1,
            tenure=22,
            description="Repriced",
        ),
        RefinanceRecord(
            refinance_id="refi-001",
            property_id="prop-test-001",
            refinance_date=date(2023, 3, 1),
            loan_amount=345_000.0,
            interest_rate=3.6,
            tenure=24,
            description="Lock-in expired",
        ),
    ]
