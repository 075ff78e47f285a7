"""Tests for SSD countdown and profit target alerts."""

import logging
from datetime import date
from unittest.mock import MagicMock

import pytest

from propfolio.alerts import build_profit_alert, build_ssd_alert, run_profit_check, run_ssd_check
from propfolio.alerts.ssd_check import is_within_ssd_window
from propfolio.calculations.returns import calculate_roi
from propfolio.config import TelegramConfig
from propfolio.exceptions import NotificationError
from propfolio.models import AlertType, PropertyRecord
from propfolio.store import PortfolioStore


def make_property(property_id: str, purchase_date: date, **kwargs) -> PropertyRecord:
    defaults = {
        "name": f"Residence {property_id}",
        "purchase_price": 500_000.0,
        "current_value": 500_000.0,
    }
    defaults.update(kwargs)
    return PropertyRecord(property_id=property_id, purchase_date=purchase_date, **defaults)


@pytest.fixture
def recipient() -> TelegramConfig:
    return TelegramConfig(bot_token="123:abc", chat_id="42")


class TestBuildSSDAlert:
    """Tests for build_ssd_alert."""

    def test_thirty_day_reminder(self, as_of: date) -> None:
        prop = make_property("p1", date(2021, 7, 15), name="Sunset Villa")
        event = build_ssd_alert(prop, as_of)

        assert event is not None
        assert event.event_type == "alert.ssd_countdown"
        assert event.subject == "p1"
        assert event.data["alert_type"] == AlertType.SSD_COUNTDOWN.value
        assert event.data["days_to_ssd_free"] == 30
        assert event.data["message"] == (
            "🎉 Your property Sunset Villa will be SSD-free in 30 days! "
            "(SSD-free date: 15/07/2024)"
        )

    @pytest.mark.parametrize(
        ("purchase_date", "days"),
        [(date(2021, 6, 22), 7), (date(2021, 6, 16), 1)],
    )
    def test_other_reminder_days(self, as_of: date, purchase_date: date, days: int) -> None:
        event = build_ssd_alert(make_property("p1", purchase_date), as_of)

        assert event is not None
        assert f"SSD-free in {days} days" in event.data["message"]

    def test_ssd_free_day(self, as_of: date) -> None:
        prop = make_property("p1", date(2021, 6, 15), name="Sunset Villa")
        event = build_ssd_alert(prop, as_of)

        assert event is not None
        assert event.data["alert_type"] == AlertType.SSD_FREE.value
        assert event.data["message"] == (
            "🎊 Congratulations! Sunset Villa is now SSD-FREE! "
            "You can sell without paying Seller Stamp Duty."
        )

    def test_not_a_reminder_day(self, as_of: date) -> None:
        assert build_ssd_alert(make_property("p1", date(2021, 6, 25)), as_of) is None

    def test_custom_alert_days(self, as_of: date) -> None:
        prop = make_property("p1", date(2021, 6, 25))
        event = build_ssd_alert(prop, as_of, alert_days=frozenset({10}))

        assert event is not None
        assert event.data["days_to_ssd_free"] == 10


class TestSSDWindow:
    """Tests for is_within_ssd_window."""

    def test_inside(self, as_of: date) -> None:
        assert is_within_ssd_window(make_property("p1", date(2022, 1, 1)), as_of)

    def test_on_anniversary(self, as_of: date) -> None:
        assert is_within_ssd_window(make_property("p1", date(2021, 6, 15)), as_of)

    def test_outside(self, as_of: date) -> None:
        assert not is_within_ssd_window(make_property("p1", date(2021, 6, 14)), as_of)


class TestRunSSDCheck:
    """Tests for run_ssd_check."""

    def test_sends_due_alerts(self, as_of: date, recipient: TelegramConfig) -> None:
        notifier = MagicMock()
        properties = [
            make_property("due", date(2021, 7, 15)),
            make_property("quiet", date(2022, 1, 1)),
            make_property("old", date(2018, 1, 1)),
        ]

        result = run_ssd_check(properties, notifier, recipient, as_of)

        assert result.checked == 2
        assert result.sent == 1
        assert result.errors == []
        notifier.notify.assert_called_once()
        assert notifier.notify.call_args.args[0].subject == "due"

    @pytest.mark.parametrize(
        "config",
        [
            TelegramConfig(),
            TelegramConfig(bot_token="123:abc"),
            TelegramConfig(bot_token="123:abc", chat_id="42", alerts_enabled=False),
        ],
    )
    def test_skips_unconfigured_recipient(self, as_of: date, config: TelegramConfig) -> None:
        notifier = MagicMock()
        result = run_ssd_check([make_property("due", date(2021, 7, 15))], notifier, config, as_of)

        assert result.checked == 0
        assert result.sent == 0
        notifier.notify.assert_not_called()

    def test_records_delivery_errors(self, as_of: date, recipient: TelegramConfig) -> None:
        notifier = MagicMock()
        notifier.notify.side_effect = [NotificationError("Telegram API error (400): bad"), None]
        properties = [
            make_property("first", date(2021, 7, 15)),
            make_property("second", date(2021, 6, 15)),
        ]

        result = run_ssd_check(properties, notifier, recipient, as_of)

        assert result.sent == 1
        assert result.errors == ["property_id=first: Telegram API error (400): bad"]
        assert [e.subject for e in result.events] == ["second"]


class TestProfitAlert:
    """Tests for build_profit_alert."""

    def test_achieved_percentage_is_roi(self, as_of: date) -> None:
        prop = make_property(
            "p1", date(2020, 1, 1), current_value=700_000.0, target_profit_percentage=10.0
        )
        event = build_profit_alert(prop, as_of=as_of)

        assert event is not None
        assert event.data["profit_percentage"] == pytest.approx(calculate_roi(prop, as_of=as_of))
        assert event.data["profit_percentage"] == pytest.approx(40.0)

    def test_target_reached(self, as_of: date) -> None:
        prop = make_property(
            "p1",
            date(2020, 1, 1),
            name="Bayview",
            current_value=700_000.0,
            target_profit_percentage=10.0,
        )
        event = build_profit_alert(prop, as_of=as_of)

        assert event is not None
        assert event.event_type == "alert.profit_target"
        assert event.data["message"] == (
            "🎯 Target reached! Bayview has hit 40.00% profit (target: 10.00%). "
            "Current value: S$700,000"
        )

    def test_below_target(self, as_of: date) -> None:
        prop = make_property(
            "p1", date(2020, 1, 1), current_value=520_000.0, target_profit_percentage=10.0
        )
        assert build_profit_alert(prop, as_of=as_of) is None

    def test_no_target(self, as_of: date) -> None:
        prop = make_property("p1", date(2020, 1, 1), current_value=700_000.0)
        assert build_profit_alert(prop, as_of=as_of) is None

    def test_already_sent(self, as_of: date) -> None:
        prop = make_property(
            "p1",
            date(2020, 1, 1),
            current_value=700_000.0,
            target_profit_percentage=10.0,
            target_profit_alert_sent=True,
        )
        assert build_profit_alert(prop, as_of=as_of) is None


class TestRunProfitCheck:
    """Tests for run_profit_check."""

    @pytest.fixture
    def store(self) -> PortfolioStore:
        store = PortfolioStore()
        store.add_property(
            make_property(
                "hit", date(2020, 1, 1), current_value=700_000.0, target_profit_percentage=10.0
            )
        )
        store.add_property(
            make_property(
                "miss", date(2020, 1, 1), current_value=520_000.0, target_profit_percentage=10.0
            )
        )
        store.add_property(make_property("none", date(2020, 1, 1), current_value=900_000.0))
        return store

    def test_marks_sent(self, store: PortfolioStore, recipient: TelegramConfig, as_of: date) -> None:
        notifier = MagicMock()
        result = run_profit_check(store, notifier, recipient, as_of)

        assert result.checked == 2
        assert result.sent == 1
        assert store.get_property("hit").target_profit_alert_sent is True
        assert store.get_property("miss").target_profit_alert_sent is False

    def test_alert_sent_once(self, store: PortfolioStore, recipient: TelegramConfig, as_of: date) -> None:
        notifier = MagicMock()
        run_profit_check(store, notifier, recipient, as_of)
        second = run_profit_check(store, notifier, recipient, as_of)

        assert second.checked == 1
        assert second.sent == 0
        assert notifier.notify.call_count == 1

    def test_failure_leaves_flag_unset(
        self,
        store: PortfolioStore,
        recipient: TelegramConfig,
        as_of: date,
    ) -> None:
        notifier = MagicMock()
        notifier.notify.side_effect = NotificationError("timeout")

        result = run_profit_check(store, notifier, recipient, as_of)

        assert result.sent == 0
        assert result.errors == ["property_id=hit: timeout"]
        assert store.get_property("hit").target_profit_alert_sent is False

    def test_skips_unconfigured_recipient(self, store: PortfolioStore, as_of: date) -> None:
        notifier = MagicMock()
        result = run_profit_check(store, notifier, TelegramConfig(), as_of)

        assert result.checked == 0
        notifier.notify.assert_not_called()


class TestAlertLogging:
    """Delivery failures are logged with property context."""

    def test_failure_log_has_property_id(
        self,
        as_of: date,
        recipient: TelegramConfig,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        notifier = MagicMock()
        notifier.notify.side_effect = NotificationError("down")

        with caplog.at_level(logging.WARNING, logger="propfolio.alerts"):
            run_ssd_check([make_property("due", date(2021, 7, 15))], notifier, recipient, as_of)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].property_id == "due"
        assert warnings[0].alert_type == AlertType.SSD_COUNTDOWN.value
