"""Configuration management for propfolio."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from propfolio.exceptions import ConfigurationError


@dataclass
class AssumptionConfig:
    """Market assumptions for the sample generator, as annual percentages."""

    appreciation_rate: float = 3.0


@dataclass
class TelegramConfig:
    """Telegram bot delivery settings for a single recipient."""

    bot_token: str = ""
    chat_id: str = ""
    alerts_enabled: bool = True
    api_base_url: str = "https://api.telegram.org"
    timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        """True when alerts are on and both credentials are present."""
        return self.alerts_enabled and bool(self.bot_token) and bool(self.chat_id)


@dataclass
class AlertConfig:
    """Alert scheduling configuration."""

    ssd_alert_days: frozenset[int] = field(default_factory=lambda: frozenset({30, 7, 1}))
    topic: str = "propfolio.alerts"


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class PropfolioConfig:
    """Main configuration for propfolio."""

    assumptions: AssumptionConfig = field(default_factory=AssumptionConfig)
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    alerts: AlertConfig = field(default_factory=AlertConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "PropfolioConfig":
        """Create config from environment variables."""
        assumptions = AssumptionConfig(
            appreciation_rate=_env_float("APPRECIATION_RATE", 3.0),
        )

        telegram = TelegramConfig(
            bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            chat_id=os.getenv("TELEGRAM_CHAT_ID", ""),
            alerts_enabled=os.getenv("ALERTS_ENABLED", "true").lower() == "true",
            timeout_seconds=_env_float("TELEGRAM_TIMEOUT", 10.0),
        )

        alert_days_str = os.getenv("SSD_ALERT_DAYS")
        if alert_days_str:
            try:
                alert_days = frozenset(int(d) for d in alert_days_str.split(",") if d.strip())
            except ValueError as exc:
                raise ConfigurationError(f"Invalid SSD_ALERT_DAYS: {alert_days_str!r}") from exc
            alerts = AlertConfig(
                ssd_alert_days=alert_days,
                topic=os.getenv("ALERT_TOPIC", "propfolio.alerts"),
            )
        else:
            alerts = AlertConfig(topic=os.getenv("ALERT_TOPIC", "propfolio.alerts"))

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid SEED: {seed_str!r}") from exc

        return cls(
            assumptions=assumptions,
            telegram=telegram,
            alerts=alerts,
            kafka=kafka,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_float(name: str, default: float) -> float:
    """Read a float environment variable."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {name}: {raw!r}") from exc
