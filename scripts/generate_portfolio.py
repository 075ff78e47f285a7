#!/usr/bin/env python3
"""Generate a sample portfolio and its investment summaries.

Writes properties, refinances, per-property summaries and the portfolio
summary as JSON files for manual inspection.
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from propfolio.calculations import build_portfolio_summary, build_property_summary
from propfolio.config import PropfolioConfig
from propfolio.generators import PropertyGenerator, RefinanceGenerator
from propfolio.logging import get_logger, setup_logging
from propfolio.sinks import ConsoleSink, JsonFileSink, KafkaSink
from propfolio.store import PortfolioStore

logger = get_logger("propfolio.scripts.generate_portfolio")


def build_store(num_properties: int, seed: int, as_of: date) -> PortfolioStore:
    """Generate properties with occasional refinances into a fresh store."""
    store = PortfolioStore()
    property_gen = PropertyGenerator(seed=seed)
    refinance_gen = RefinanceGenerator(seed=seed)

    for prop in property_gen.generate_batch(num_properties, as_of):
        store.add_property(prop)
        for refinance in refinance_gen.generate_for(prop, count=2, as_of=as_of):
            store.add_refinance(refinance)

    logger.info("Generated portfolio: %s", store.summary())
    return store


def main() -> None:
    """Generate the sample portfolio and write it out."""
    config = PropfolioConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample property portfolio")
    parser.add_argument("--properties", type=int, default=10, help="Number of properties (default: 10)")
    parser.add_argument("--seed", type=int, default=config.seed or 42, help="Random seed (default: 42)")
    parser.add_argument("--as-of", type=date.fromisoformat, default=date.today(), help="Evaluation date (YYYY-MM-DD)")
    parser.add_argument("--output", type=Path, default=config.output.json_output_dir, help="Output directory")
    parser.add_argument(
        "--appreciation",
        type=float,
        default=config.assumptions.appreciation_rate,
        help="Annual appreciation for scenarios (default: 3.0)",
    )
    parser.add_argument("--console", action="store_true", help="Print to stdout instead of writing files")
    parser.add_argument("--kafka", action="store_true", help="Also publish summaries to Kafka")
    args = parser.parse_args()

    setup_logging(config.log_level)

    store = build_store(args.properties, args.seed, args.as_of)
    refinances = store.refinances_by_property()

    summaries = [
        build_property_summary(prop, refinances[prop.property_id], args.appreciation, args.as_of)
        for prop in store.properties.values()
    ]
    portfolio = build_portfolio_summary(list(store.properties.values()), refinances, args.as_of)

    if args.console:
        console = ConsoleSink(pretty=True, max_records=3)
        console.write_batch("properties", list(store.properties.values()))
        console.write_batch("property_summaries", summaries)
        console.write_batch("portfolio_summary", [portfolio])
        console.close()
    else:
        json_sink = JsonFileSink(args.output, pretty=config.output.pretty_json)
        json_sink.write_batch("properties", list(store.properties.values()))
        json_sink.write_batch("refinances", list(store.refinances.values()))
        report_path = json_sink.write_report(portfolio, summaries)
        json_sink.close()
        logger.info("Report written to %s", report_path)

    if args.kafka:
        kafka = KafkaSink(config.kafka)
        kafka.publish_summaries(summaries)
        kafka.close()


if __name__ == "__main__":
    main()
