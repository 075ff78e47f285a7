"""JSON file sink for summaries, reports and an alert log."""

import json
from pathlib import Path
from typing import Any

from propfolio.models.base import Event
from propfolio.models.results import PortfolioSummary, PropertySummary
from propfolio.sinks.serialization import to_dict

ALERT_LOG_NAME = "alerts.jsonl"


class JsonFileSink:
    """Write one JSON file per entity type and append alerts to a JSON Lines log."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files (created if missing).
        pretty : bool
            Indent JSON documents. The alert log is always one line per event.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def _write_json(self, file_path: Path, data: Any) -> None:
        tmp_path = file_path.with_suffix(file_path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False, default=str)
        tmp_path.replace(file_path)

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Replace ``<entity_type>.json`` with ``records``."""
        self._write_json(
            self.output_dir / f"{entity_type}.json",
            [to_dict(record) for record in records],
        )
        self._counts[entity_type] = len(records)

    def write_report(
        self,
        portfolio: PortfolioSummary,
        summaries: list[PropertySummary],
    ) -> Path:
        """Write ``report_<as_of>.json`` holding the portfolio totals and every property."""
        file_path = self.output_dir / f"report_{portfolio.as_of.isoformat()}.json"
        self._write_json(
            file_path,
            {
                "portfolio": to_dict(portfolio),
                "properties": [to_dict(summary) for summary in summaries],
            },
        )
        self._counts["report"] = self._counts.get("report", 0) + 1
        return file_path

    def notify(self, event: Event) -> None:
        """Append an alert event to the alert log."""
        with open(self.output_dir / ALERT_LOG_NAME, "a", encoding="utf-8") as f:
            f.write(json.dumps(to_dict(event), ensure_ascii=False, default=str) + "\n")
        self._counts[event.event_type] = self._counts.get(event.event_type, 0) + 1

    def close(self) -> None:
        print(f"JSON files written to: {self.output_dir}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
