"""SSD-free countdown alerts.

Sends a reminder 30, 7 and 1 day(s) before a property's SSD-free date and a
congratulation on the day itself.
"""

import logging
from datetime import date

from dateutil.relativedelta import relativedelta

from propfolio.alerts.base import AlertCheckResult, Notifier, make_alert_event
from propfolio.calculations.dates import resolve_as_of
from propfolio.calculations.taxes import get_days_to_ssd_free, get_ssd_free_date
from propfolio.config import TelegramConfig
from propfolio.exceptions import SinkError
from propfolio.models.base import Event
from propfolio.models.enums import AlertType
from propfolio.models.property import PropertyRecord

logger = logging.getLogger(__name__)

DEFAULT_ALERT_DAYS = frozenset({30, 7, 1})


def is_within_ssd_window(prop: PropertyRecord, as_of: date) -> bool:
    """True until the third purchase anniversary has passed."""
    return prop.purchase_date + relativedelta(years=3) >= as_of


def build_ssd_alert(
    prop: PropertyRecord,
    as_of: date | None = None,
    alert_days: frozenset[int] = DEFAULT_ALERT_DAYS,
) -> Event | None:
    """Alert event for ``prop`` if today is a reminder day, else None."""
    as_of = resolve_as_of(as_of)
    days_to_free = get_days_to_ssd_free(prop.purchase_date, as_of)
    free_date = get_ssd_free_date(prop.purchase_date)

    if days_to_free in alert_days:
        message = (
            f"🎉 Your property {prop.name} will be SSD-free in {days_to_free} days! "
            f"(SSD-free date: {free_date.strftime('%d/%m/%Y')})"
        )
        alert_type = AlertType.SSD_COUNTDOWN
    elif days_to_free == 0:
        message = (
            f"🎊 Congratulations! {prop.name} is now SSD-FREE! "
            "You can sell without paying Seller Stamp Duty."
        )
        alert_type = AlertType.SSD_FREE
    else:
        return None

    return make_alert_event(
        alert_type,
        prop.property_id,
        message,
        days_to_ssd_free=days_to_free,
        ssd_free_date=free_date,
    )


def run_ssd_check(
    properties: list[PropertyRecord],
    notifier: Notifier,
    recipient: TelegramConfig,
    as_of: date | None = None,
    alert_days: frozenset[int] = DEFAULT_ALERT_DAYS,
) -> AlertCheckResult:
    """Send SSD reminders for every property still inside the SSD window."""
    as_of = resolve_as_of(as_of)
    result = AlertCheckResult()

    if not recipient.is_configured:
        logger.info("SSD check skipped: alerts disabled or Telegram not configured")
        return result

    candidates = [p for p in properties if is_within_ssd_window(p, as_of)]
    result.checked = len(candidates)

    for prop in candidates:
        event = build_ssd_alert(prop, as_of, alert_days)
        if event is None:
            continue

        try:
            notifier.notify(event)
        except SinkError as exc:
            logger.warning(
                "SSD alert for %s failed: %s",
                prop.property_id,
                exc,
                extra={"property_id": prop.property_id, "alert_type": event.data["alert_type"]},
            )
            result.errors.append(f"property_id={prop.property_id}: {exc}")
            continue

        result.sent += 1
        result.events.append(event)

    logger.info(
        "SSD check complete: checked=%d sent=%d errors=%d",
        result.checked,
        result.sent,
        len(result.errors),
        extra={"as_of": as_of},
    )
    return result
