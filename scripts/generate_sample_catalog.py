#!/usr/bin/env python3
"""Generate a sample agency catalog and print it to the console.

Settings come from the environment (see ``CatalogConfig.from_env``) and can
be overridden on the command line. Listings are printed as JSON followed by
one report per residence type.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from realty_catalog.config import CatalogConfig
from realty_catalog.exceptions import CatalogError
from realty_catalog.logging import setup_logging
from realty_catalog.models import ListingOrder
from realty_catalog.scenarios import SampleCatalogScenario
from realty_catalog.sinks import ConsoleSink

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a sample real estate catalog"
    )
    parser.add_argument(
        "--properties",
        type=int,
        default=None,
        help="Number of properties to generate (default: SAMPLE_SIZE or 25)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED)",
    )
    parser.add_argument(
        "--locale",
        choices=["en_US", "en_CA"],
        default=None,
        help="Faker locale for addresses (default: FAKER_LOCALE or en_US)",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in ListingOrder],
        default=None,
        help="Scan order used for report numbering (default: LISTING_ORDER or insertion)",
    )
    parser.add_argument(
        "--max-records",
        type=int,
        default=None,
        help="Maximum listings printed as JSON (default: all)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print one JSON object per line",
    )
    args = parser.parse_args()

    try:
        config = CatalogConfig.from_env()
    except CatalogError as exc:
        parser.error(str(exc))

    if args.properties is not None:
        config.sample.num_properties = args.properties
    if args.seed is not None:
        config.seed = args.seed
    if args.locale is not None:
        config.sample.locale = args.locale
    if args.order is not None:
        config.ordering = ListingOrder(args.order)

    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        scenario = SampleCatalogScenario(config)
        scenario.generate()
    except CatalogError:
        logger.exception("Could not build the sample catalog")
        sys.exit(1)

    sink = ConsoleSink(pretty=not args.compact, max_records=args.max_records)
    scenario.export([sink])
    sink.close()


if __name__ == "__main__":
    main()
