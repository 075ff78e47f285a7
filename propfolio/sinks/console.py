"""Console sink for dry runs of summaries and alerts."""

import json
from typing import Any

from propfolio.formatting import format_currency, format_percent
from propfolio.models.base import Event
from propfolio.models.results import PropertySummary
from propfolio.sinks.serialization import to_dict


class ConsoleSink:
    """Print records, property summaries and alert messages to stdout."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Print a batch; property summaries get a one-line digest instead of JSON."""
        print(f"\n{'=' * 60}")
        print(f"{entity_type} ({len(records)} records)")
        print("=" * 60)

        shown = records[: self.max_records] if self.max_records else records
        for record in shown:
            if isinstance(record, PropertySummary):
                print(format_summary_line(record))
            else:
                print(self._dumps(to_dict(record)))

        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def notify(self, event: Event) -> None:
        """Print an alert message instead of delivering it."""
        print(f"[{event.event_type}] {event.subject}: {event.message}")
        self._counts[event.event_type] = self._counts.get(event.event_type, 0) + 1

    def close(self) -> None:
        print(f"\n{'=' * 60}")
        print("Console Sink Summary")
        print("=" * 60)
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _dumps(self, data: dict) -> str:
        if self.pretty:
            return json.dumps(data, indent=2, ensure_ascii=False, default=str)
        return json.dumps(data, ensure_ascii=False, default=str)


def format_summary_line(summary: PropertySummary) -> str:
    """One-line digest: value, profit, ROI, SSD position and recommendation."""
    countdown = summary.ssd_countdown
    if countdown.is_exempt:
        ssd = "SSD-free"
    else:
        ssd = (
            f"SSD {countdown.current_rate:g}% "
            f"({countdown.days_to_next_tier} days to {countdown.next_rate:g}%)"
        )

    parts = [
        summary.property_id,
        f"value {format_currency(summary.current_value)}",
        f"profit {format_currency(summary.net_profit)}",
        f"ROI {format_percent(summary.roi)}",
        ssd,
    ]
    if summary.recommendation is not None:
        parts.append(summary.recommendation.message)
    return " | ".join(parts)
