#!/usr/bin/env python3
"""
Become.com Feed Generation

Generates the Become.com product feed for a store from a catalog snapshot.

Usage:
    python3 scripts/generate_feed.py --catalog data/catalog.yaml
    python3 scripts/generate_feed.py --catalog data/catalog.yaml --store-id 2
    python3 scripts/generate_feed.py --catalog data/catalog.yaml --output-dir output/feeds --verbose
    python3 scripts/generate_feed.py --catalog data/catalog.yaml --log-file files/exportimport/become_feed.log

Environment (.env supported):
    BECOME_FEED_CATALOG   - default catalog snapshot path
    BECOME_FEED_SETTINGS  - default settings file (default: config/feed_settings.yaml)
    BECOME_FEED_LOG_FILE  - default run log file (default: none)
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from become_feed.catalog import load_catalog
from become_feed.common.config_loader import load_feed_settings
from become_feed.common.log_config import setup_logging
from become_feed.feed import FeedExporter

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Generate the Become.com product feed"
    )
    parser.add_argument(
        "--catalog", "-c",
        default=os.getenv("BECOME_FEED_CATALOG"),
        help="Catalog snapshot YAML (default: $BECOME_FEED_CATALOG)"
    )
    parser.add_argument(
        "--settings", "-s",
        default=os.getenv("BECOME_FEED_SETTINGS"),
        help="Feed settings YAML (default: config/feed_settings.yaml)"
    )
    parser.add_argument(
        "--output-dir", "-o",
        help="Directory for the feed file (default: output_dir from settings)"
    )
    parser.add_argument(
        "--store-id",
        type=int,
        default=0,
        help="Store to export (default: the catalog's current store)"
    )
    parser.add_argument(
        "--log-file",
        default=os.getenv("BECOME_FEED_LOG_FILE"),
        help="Also write the run log to this file, e.g. files/exportimport/become_feed.log"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)

    if not args.catalog:
        parser.error("--catalog is required (or set BECOME_FEED_CATALOG)")

    if not os.path.exists(args.catalog):
        print(f"Catalog file not found: {args.catalog}")
        sys.exit(1)

    settings = load_feed_settings(args.settings)
    catalog = load_catalog(args.catalog)

    store = None
    if args.store_id:
        store = catalog.get_store_by_id(args.store_id)
        if store is None:
            logger.error("Store %d not found in catalog", args.store_id)
            sys.exit(1)

    exporter = FeedExporter(catalog, settings)
    result = exporter.export(store=store, output_dir=args.output_dir)

    print(result.message)
    if not result.success:
        sys.exit(1)

    print(f"  File:  {result.file_path}")
    print(f"  Rows:  {result.row_count}")


if __name__ == "__main__":
    main()
