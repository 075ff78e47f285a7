#!/usr/bin/env python3
"""Run the SSD countdown and profit target alert checks once.

Intended to be scheduled daily. Properties are generated for demonstration;
a deployment feeds its own records into the store.
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from propfolio.alerts import run_profit_check, run_ssd_check
from propfolio.config import PropfolioConfig, TelegramConfig
from propfolio.exceptions import ConfigurationError
from propfolio.generators import PropertyGenerator
from propfolio.logging import get_logger, setup_logging
from propfolio.sinks import ConsoleSink, JsonFileSink, KafkaSink, TelegramSink
from propfolio.store import PortfolioStore

logger = get_logger("propfolio.scripts.run_alert_checks")


def main() -> int:
    """Run both checks and print their results as JSON."""
    config = PropfolioConfig.from_env()

    parser = argparse.ArgumentParser(description="Run SSD and profit alert checks")
    parser.add_argument("--properties", type=int, default=20, help="Number of sample properties")
    parser.add_argument("--seed", type=int, default=config.seed or 42, help="Random seed (default: 42)")
    parser.add_argument("--as-of", type=date.fromisoformat, default=date.today(), help="Evaluation date (YYYY-MM-DD)")
    parser.add_argument(
        "--sink",
        choices=["telegram", "kafka", "json", "console"],
        default="console",
        help="Where to deliver alerts (default: console)",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, format_type="json")

    if args.sink == "telegram":
        if not config.telegram.is_configured:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID are required")
        notifier = TelegramSink(config.telegram)
        recipient = config.telegram
    else:
        if args.sink == "kafka":
            notifier = KafkaSink(config.kafka, alerts_topic=config.alerts.topic)
        elif args.sink == "json":
            notifier = JsonFileSink(config.output.json_output_dir)
        else:
            notifier = ConsoleSink(pretty=False)
        # Non-Telegram delivery only honours the alerts_enabled switch
        recipient = TelegramConfig(
            bot_token=args.sink,
            chat_id=args.sink,
            alerts_enabled=config.telegram.alerts_enabled,
        )

    store = PortfolioStore()
    for prop in PropertyGenerator(seed=args.seed).generate_batch(args.properties, args.as_of):
        store.add_property(prop)

    ssd_result = run_ssd_check(
        list(store.properties.values()),
        notifier,
        recipient,
        args.as_of,
        config.alerts.ssd_alert_days,
    )
    profit_result = run_profit_check(store, notifier, recipient, args.as_of)
    notifier.close()

    print(
        json.dumps(
            {
                "ssd": {
                    "checked": ssd_result.checked,
                    "notificationsSent": ssd_result.sent,
                    "errors": ssd_result.errors,
                },
                "profit": {
                    "checked": profit_result.checked,
                    "alertsTriggered": profit_result.sent,
                    "errors": profit_result.errors,
                },
            },
            indent=2,
        )
    )
    return 1 if ssd_result.errors or profit_result.errors else 0


if __name__ == "__main__":
    sys.exit(main())
