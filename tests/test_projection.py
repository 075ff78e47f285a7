"""Tests for sell-now and hold projections."""

from dataclasses import replace
from datetime import date

import pytest

from propfolio.calculations.accrual import cpf_refund_at_sale
from propfolio.calculations.projection import (
    calculate_hold_proceeds,
    calculate_sell_now_proceeds,
    estimate_additional_mortgage_interest,
    project_value,
)
from propfolio.calculations.returns import calculate_total_cost
from propfolio.models import PropertyRecord, RefinanceRecord


class TestProjectValue:
    """Tests for compound appreciation."""

    def test_compounds(self) -> None:
        assert project_value(100, 10, 2) == pytest.approx(121)

    def test_zero_years(self) -> None:
        assert project_value(480_000, 3, 0) == 480_000


class TestAdditionalMortgageInterest:
    """Tests for estimate_additional_mortgage_interest."""

    def test_original_terms(self, sample_property: PropertyRecord) -> None:
        assert estimate_additional_mortgage_interest(sample_property, 12) == pytest.approx(9_900)

    def test_latest_refinance_terms(
        self,
        sample_property: PropertyRecord,
        sample_refinances: list[RefinanceRecord],
    ) -> None:
        interest = estimate_additional_mortgage_interest(sample_property, 12, sample_refinances)
        assert interest == pytest.approx(330_000 * 0.031)

    def test_zero_months(self, sample_property: PropertyRecord) -> None:
        assert estimate_additional_mortgage_interest(sample_property, 0) == 0

    def test_no_mortgage(self, sample_property: PropertyRecord) -> None:
        prop = replace(sample_property, mortgage_amount=0)
        assert estimate_additional_mortgage_interest(prop, 24) == 0


class TestProceeds:
    """Tests for sell-now and hold proceeds."""

    def test_sell_now(self, sample_property: PropertyRecord, as_of: date) -> None:
        total_cost = calculate_total_cost(sample_property, as_of=as_of)
        cpf_refund = cpf_refund_at_sale(150_000, date(2022, 6, 15), 0, as_of)
        expected = 480_000 - total_cost - 480_000 * 0.04 - cpf_refund

        assert calculate_sell_now_proceeds(sample_property, as_of=as_of) == pytest.approx(expected)

    def test_hold_zero_matches_sell_now(self, sample_property: PropertyRecord, as_of: date) -> None:
        """Both SSD rules give 4% on a 731-day, two-year holding."""
        hold = calculate_hold_proceeds(sample_property, 0, as_of=as_of)
        sell_now = calculate_sell_now_proceeds(sample_property, as_of=as_of)

        assert hold == pytest.approx(sell_now, abs=0.01)

    def test_hold_one_year(self, sample_property: PropertyRecord, as_of: date) -> None:
        """A sale on 2025-06-15 falls past 1095 days, so no SSD applies."""
        projected = 480_000 * 1.03
        total_cost = calculate_total_cost(sample_property, as_of=as_of)
        cpf_refund = cpf_refund_at_sale(150_000, date(2022, 6, 15), 12, as_of)
        sell_now = calculate_sell_now_proceeds(sample_property, as_of=as_of)
        opportunity = max(sell_now, 0) * 0.03
        expected = projected - total_cost - 9_900 - cpf_refund - opportunity

        assert calculate_hold_proceeds(sample_property, 12, 3.0, as_of=as_of) == pytest.approx(expected)

    def test_higher_appreciation_helps(self, sample_property: PropertyRecord, as_of: date) -> None:
        slow = calculate_hold_proceeds(sample_property, 24, 1.0, as_of=as_of)
        fast = calculate_hold_proceeds(sample_property, 24, 6.0, as_of=as_of)
        assert fast > slow
