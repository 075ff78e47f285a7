"""Shared types for alert checks."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from propfolio.models.base import Event
from propfolio.models.enums import AlertType

ALERT_SOURCE = "propfolio.alerts"


class Notifier(Protocol):
    """Anything that can deliver an alert event."""

    def notify(self, event: Event) -> None: ...


@dataclass
class AlertCheckResult:
    """Outcome of one alert run."""

    checked: int = 0
    sent: int = 0
    errors: list[str] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)


def make_alert_event(alert_type: AlertType, property_id: str, message: str, **data) -> Event:
    """Wrap an alert message in the standard event envelope."""
    return Event(
        event_id=uuid.uuid4().hex,
        event_type=f"alert.{alert_type.value.lower()}",
        event_time=datetime.now(),
        source=ALERT_SOURCE,
        subject=property_id,
        data={"alert_type": alert_type.value, "message": message, **data},
    )
