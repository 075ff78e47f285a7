"""Kafka sink for publishing alert events and property summaries.

Alert events are keyed by their subject and summaries by ``property_id``,
both of which are the property id.
"""

import json
import logging
import time
from dataclasses import dataclass, is_dataclass
from typing import Any

from confluent_kafka import KafkaException, Producer

from propfolio.config import KafkaConfig
from propfolio.exceptions import NotificationError, SinkError
from propfolio.models.base import Event
from propfolio.models.results import PropertySummary
from propfolio.sinks.serialization import to_dict

logger = logging.getLogger(__name__)

ALERTS_TOPIC = "propfolio.alerts"
SUMMARIES_TOPIC = "propfolio.summaries"


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaSink:
    """Publish alert events and summaries to Kafka as JSON."""

    def __init__(
        self,
        config: KafkaConfig | str,
        alerts_topic: str = ALERTS_TOPIC,
        summaries_topic: str = SUMMARIES_TOPIC,
    ) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or a bootstrap servers string.
        alerts_topic : str
            Topic that ``notify`` publishes alert events to.
        summaries_topic : str
            Topic that ``publish_summaries`` writes to.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.alerts_topic = alerts_topic
        self.summaries_topic = summaries_topic
        self.key_fields = {alerts_topic: "subject", summaries_topic: "property_id"}
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats()

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def _get_key(self, topic: str, record: Any) -> str | None:
        """Key by subject on the alerts topic and by property id on summaries."""
        key_field = self.key_fields.get(topic)
        if not key_field:
            return None

        if is_dataclass(record):
            return getattr(record, key_field, None)
        if isinstance(record, dict):
            return record.get(key_field)
        return None

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Produce one record; events also carry an ``event_type`` header."""
        value = json.dumps(to_dict(record), ensure_ascii=False, default=str).encode("utf-8")

        if key is None:
            key = self._get_key(topic, record)

        headers = None
        if isinstance(record, Event):
            headers = [("event_type", record.event_type.encode("utf-8"))]

        try:
            self.producer.produce(
                topic=topic,
                key=key.encode("utf-8") if key else None,
                value=value,
                headers=headers,
                callback=self._delivery_callback,
            )
        except (BufferError, KafkaException) as exc:
            raise SinkError(f"Failed to produce to {topic}: {exc}") from exc

        if self.stats.start_time is None:
            self.stats.start_time = time.time()
        self.stats.sent += 1
        self.producer.poll(0)

    def notify(self, event: Event) -> None:
        """Publish an alert event to the alerts topic."""
        try:
            self.send(self.alerts_topic, event)
        except SinkError as exc:
            raise NotificationError(str(exc)) from exc

    def publish_summaries(self, summaries: list[PropertySummary]) -> None:
        """Publish one message per property summary and wait for delivery."""
        self.write_batch(self.summaries_topic, summaries)

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Write a batch of records to a Kafka topic."""
        logger.info("Writing batch to %s: %d records", topic, len(records))

        for record in records:
            self.send(topic, record)

        self.flush()
        logger.info(
            "Batch complete: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        remaining = self.producer.flush(timeout)
        if remaining:
            logger.warning("%d messages still queued after %.0fs flush", remaining, timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        self.stats.end_time = time.time()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
