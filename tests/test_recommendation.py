"""Tests for the sell-or-hold recommendation."""

from datetime import date

import pytest

from propfolio.calculations.projection import calculate_hold_proceeds, calculate_sell_now_proceeds
from propfolio.calculations.recommendation import (
    SELL_NOW_LABEL,
    build_scenarios,
    get_sell_recommendation,
    months_to_ssd_free,
    recommend,
    select_best_scenario,
)
from propfolio.models import PropertyRecord, ScenarioResult


def make_scenarios(*proceeds: float) -> list[ScenarioResult]:
    labels = [("Sell now", 0), ("Hold 1 year", 12), ("Hold 2 years", 24), ("Hold until SSD-free", 12)]
    return [
        ScenarioResult(label, months, value)
        for (label, months), value in zip(labels, proceeds)
    ]


class TestSelectBestScenario:
    """Tests for scenario selection."""

    def test_highest_wins(self) -> None:
        best = select_best_scenario(make_scenarios(100, 150, 120, 90))
        assert best.label == "Hold 1 year"

    def test_tie_keeps_earliest(self) -> None:
        best = select_best_scenario(make_scenarios(100, 100, 100, 100))
        assert best.label == SELL_NOW_LABEL

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="At least one scenario"):
            select_best_scenario([])


class TestRecommend:
    """Tests for the recommendation message and delta."""

    def test_hold(self) -> None:
        recommendation = recommend(make_scenarios(100, 150, 120, 90))

        assert recommendation.best_scenario == "Hold 1 year"
        assert recommendation.hold_months == 12
        assert recommendation.additional_proceeds_vs_sell_now == pytest.approx(50)
        assert recommendation.message == (
            "Recommended: Hold 12 more months to save S$50 in SSD-adjusted proceeds"
        )

    def test_sell_now_on_tie(self) -> None:
        recommendation = recommend(make_scenarios(100, 100, 80, 60))

        assert recommendation.best_scenario == SELL_NOW_LABEL
        assert recommendation.message == "Recommended: Sell now"
        assert recommendation.additional_proceeds_vs_sell_now == 0

    def test_keeps_scenarios(self) -> None:
        scenarios = make_scenarios(100, 150, 120, 90)
        assert recommend(scenarios).scenarios == tuple(scenarios)


class TestMonthsToSSDFree:
    """Tests for months_to_ssd_free."""

    def test_rounds_up(self, as_of: date) -> None:
        # 364 days left / 30.44
        assert months_to_ssd_free(date(2022, 6, 15), as_of) == 12

    def test_already_exempt(self, as_of: date) -> None:
        assert months_to_ssd_free(date(2019, 1, 1), as_of) == 0


class TestBuildScenarios:
    """Tests for the scenario table."""

    def test_labels_and_months(self, sample_property: PropertyRecord, as_of: date) -> None:
        scenarios = build_scenarios(sample_property, as_of=as_of)

        assert [s.label for s in scenarios] == [
            "Sell now",
            "Hold 1 year",
            "Hold 2 years",
            "Hold until SSD-free",
        ]
        assert [s.hold_months for s in scenarios] == [0, 12, 24, 12]

    def test_values(self, sample_property: PropertyRecord, as_of: date) -> None:
        scenarios = build_scenarios(sample_property, appreciation_rate=5.0, as_of=as_of)

        assert scenarios[0].projected_net_proceeds == pytest.approx(
            calculate_sell_now_proceeds(sample_property, as_of=as_of)
        )
        assert scenarios[2].projected_net_proceeds == pytest.approx(
            calculate_hold_proceeds(sample_property, 24, 5.0, as_of=as_of)
        )

    def test_recommendation_uses_fixed_rate(self, sample_property: PropertyRecord, as_of: date) -> None:
        expected = recommend(build_scenarios(sample_property, appreciation_rate=3.0, as_of=as_of))
        recommendation = get_sell_recommendation(sample_property, as_of=as_of)

        assert recommendation.best_scenario == expected.best_scenario
        assert recommendation.additional_proceeds_vs_sell_now == pytest.approx(
            expected.additional_proceeds_vs_sell_now
        )
