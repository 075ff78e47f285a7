"""Event envelope shared by alert checks and sinks."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Event:
    """A notification about one property, ready for any sink."""

    event_id: str
    event_type: str  # alert.<alert_type>, e.g. alert.ssd_free
    event_time: datetime
    source: str  # e.g. propfolio.alerts
    subject: str  # Property ID
    data: dict
    metadata: dict = field(default_factory=dict)

    @property
    def message(self) -> str:
        """Human-readable text delivered to the recipient."""
        return self.data.get("message", "")
