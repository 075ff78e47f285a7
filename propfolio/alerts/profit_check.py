"""One-shot alerts when a property reaches its target profit percentage."""

import logging
from datetime import date

from propfolio.alerts.base import AlertCheckResult, Notifier, make_alert_event
from propfolio.calculations.dates import resolve_as_of
from propfolio.calculations.returns import calculate_roi
from propfolio.config import TelegramConfig
from propfolio.exceptions import SinkError
from propfolio.formatting import format_currency
from propfolio.models.base import Event
from propfolio.models.enums import AlertType
from propfolio.models.property import PropertyRecord, RefinanceRecord, effective_current_value
from propfolio.store.portfolio import PortfolioStore

logger = logging.getLogger(__name__)


def build_profit_alert(
    prop: PropertyRecord,
    refinances: list[RefinanceRecord] | None = None,
    as_of: date | None = None,
) -> Event | None:
    """Alert event when ``prop`` is at or above its target, else None."""
    target = prop.target_profit_percentage or 0
    if target <= 0 or prop.target_profit_alert_sent:
        return None

    achieved = calculate_roi(prop, refinances, as_of)
    if achieved < target:
        return None

    current_value = effective_current_value(prop)
    message = (
        f"🎯 Target reached! {prop.name} has hit {achieved:.2f}% profit "
        f"(target: {target:.2f}%). Current value: {format_currency(current_value)}"
    )
    return make_alert_event(
        AlertType.PROFIT_TARGET,
        prop.property_id,
        message,
        profit_percentage=achieved,
        target_percentage=target,
        current_value=current_value,
    )


def run_profit_check(
    store: PortfolioStore,
    notifier: Notifier,
    recipient: TelegramConfig,
    as_of: date | None = None,
) -> AlertCheckResult:
    """Notify every property that crossed its target and mark it as alerted."""
    as_of = resolve_as_of(as_of)
    result = AlertCheckResult()

    if not recipient.is_configured:
        logger.info("Profit check skipped: alerts disabled or Telegram not configured")
        return result

    candidates = [
        p
        for p in store.properties.values()
        if (p.target_profit_percentage or 0) > 0 and not p.target_profit_alert_sent
    ]
    result.checked = len(candidates)

    for prop in candidates:
        event = build_profit_alert(prop, store.refinances_for(prop.property_id), as_of)
        if event is None:
            continue

        try:
            notifier.notify(event)
        except SinkError as exc:
            logger.warning(
                "Profit alert for %s failed: %s",
                prop.property_id,
                exc,
                extra={"property_id": prop.property_id, "alert_type": event.data["alert_type"]},
            )
            result.errors.append(f"property_id={prop.property_id}: {exc}")
            continue

        store.mark_profit_alert_sent(prop.property_id)
        result.sent += 1
        result.events.append(event)

    logger.info(
        "Profit check complete: checked=%d sent=%d errors=%d",
        result.checked,
        result.sent,
        len(result.errors),
        extra={"as_of": as_of},
    )
    return result
