#!/usr/bin/env python3
"""
Become.com Feed Configuration

Shows and updates the feed settings: product thumbnail size and the
currency the feed prices are converted to.

Usage:
    python3 scripts/configure_feed.py --show
    python3 scripts/configure_feed.py --show --catalog data/catalog.yaml
    python3 scripts/configure_feed.py --list-currencies --catalog data/catalog.yaml
    python3 scripts/configure_feed.py --picture-size 200 --currency-id 2
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from become_feed.catalog import load_catalog
from become_feed.common.config_loader import load_feed_settings, save_feed_settings
from become_feed.common.log_config import setup_logging
from become_feed.feed import get_configuration_page_url
from become_feed.models import FeedSettings, Store

load_dotenv(Path(__file__).parent.parent / ".env")


def print_settings(settings: FeedSettings, store: Optional[Store] = None) -> None:
    print("Become.com feed settings")
    print(f"  Product thumbnail image size: {settings.product_picture_size}px")
    print(f"  Currency:                     {settings.currency_id or 'primary store currency'}")
    print(f"  Primary store currency:       {settings.primary_store_currency_id}")
    print(f"  Output directory:             {settings.output_dir}")
    if store is not None:
        print(f"  Configuration page:           {get_configuration_page_url(store)}")


def main():
    parser = argparse.ArgumentParser(
        description="Configure the Become.com feed"
    )
    parser.add_argument(
        "--settings", "-s",
        default=os.getenv("BECOME_FEED_SETTINGS"),
        help="Feed settings YAML (default: config/feed_settings.yaml)"
    )
    parser.add_argument(
        "--catalog", "-c",
        default=os.getenv("BECOME_FEED_CATALOG"),
        help="Catalog snapshot YAML, used to list currencies and the configuration page URL"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Show current settings"
    )
    parser.add_argument(
        "--list-currencies",
        action="store_true",
        help="List currencies available for the feed"
    )
    parser.add_argument(
        "--picture-size",
        type=int,
        help="Product thumbnail image size in pixels"
    )
    parser.add_argument(
        "--currency-id",
        type=int,
        help="Currency used to generate the feed"
    )

    args = parser.parse_args()
    setup_logging()

    settings = load_feed_settings(args.settings)
    catalog = load_catalog(args.catalog) if args.catalog else None
    store = catalog.get_current_store() if catalog is not None and catalog.stores else None

    if args.list_currencies:
        if catalog is None:
            parser.error("--list-currencies needs --catalog (or BECOME_FEED_CATALOG)")
        print("Available currencies:")
        for currency in catalog.get_all_currencies():
            marker = "*" if currency.id == settings.currency_id else " "
            print(f"  {marker} {currency.id:>3}  {currency.name} ({currency.currency_code})")

    if args.picture_size is not None or args.currency_id is not None:
        try:
            settings = FeedSettings(
                product_picture_size=(
                    args.picture_size if args.picture_size is not None
                    else settings.product_picture_size
                ),
                currency_id=args.currency_id if args.currency_id is not None else settings.currency_id,
                primary_store_currency_id=settings.primary_store_currency_id,
                output_dir=settings.output_dir,
            )
        except ValueError as e:
            print(f"Invalid settings: {e}")
            sys.exit(1)

        path = save_feed_settings(settings, args.settings)
        print(f"Settings saved to {path}")
        print_settings(settings, store)
    elif args.show or not args.list_currencies:
        print_settings(settings, store)


if __name__ == "__main__":
    main()
