"""
Become.com feed generation.

Modules:
    generator - BecomeFeedGenerator (catalog to feed lines)
    exporter  - FeedExporter (timestamped feed file, success/failure result)
    errors    - Feed generation errors
"""

from .errors import CatalogLookupError, CurrencyNotFoundError, FeedError
from .exporter import (
    FeedExporter,
    FeedExportResult,
    generate_feed_filename,
    get_configuration_page_url,
)
from .generator import (
    FEED_FIELDNAMES,
    FEED_HEADER,
    BecomeFeedGenerator,
    get_store_location,
)

__all__ = [
    # Generation
    'BecomeFeedGenerator',
    'FEED_FIELDNAMES',
    'FEED_HEADER',
    'get_store_location',
    # Export
    'FeedExporter',
    'FeedExportResult',
    'generate_feed_filename',
    'get_configuration_page_url',
    # Errors
    'FeedError',
    'CurrencyNotFoundError',
    'CatalogLookupError',
]
