"""
Feed Exporter

Runs feed generation into a timestamped file and reports the outcome.
Generation errors are caught here, logged and returned as a failed result;
the partially written file is left in place.
"""

import logging
import os
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..catalog.base import CatalogReader
from ..models import FeedSettings, Store
from .generator import BecomeFeedGenerator, get_store_location

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Become.com feed has been successfully generated. {0} to see generated feed"
CLICK_HERE = "Click here"


@dataclass
class FeedExportResult:
    """Outcome of a feed export."""
    success: bool
    message: str
    file_path: str = ""
    file_url: str = ""
    row_count: int = 0


def generate_feed_filename(now: Optional[datetime] = None) -> str:
    """
    Build a feed file name: become_{timestamp}_{4 random digits}.csv

    Example:
        'become_2024-03-05-14-07-09_0421.csv'
    """
    now = now or datetime.now()
    code = f"{random.randint(0, 9999):04d}"
    return f"become_{now:%Y-%m-%d-%H-%M-%S}_{code}.csv"


def get_configuration_page_url(store: Store) -> str:
    """Admin configuration page of the feed, on the scheme the store is configured with."""
    use_ssl = store.url.lower().startswith('https://')
    return f"{get_store_location(store, use_ssl)}Admin/FeedBecome/Configure"


class FeedExporter:
    """
    Exports the Become.com feed to a file.

    Usage:
        exporter = FeedExporter(catalog, settings)
        result = exporter.export()
        print(result.message)
    """

    def __init__(self, catalog: CatalogReader, settings: FeedSettings):
        self.catalog = catalog
        self.settings = settings
        self.generator = BecomeFeedGenerator(catalog, settings)

    def get_file_url(self, store: Store, file_name: str, output_dir: Optional[str] = None) -> str:
        """
        Public URL of an exported file, relative to the store location.

        Args:
            store: Store the feed was generated for
            file_name: Feed file name
            output_dir: Directory the file was written to (default: settings.output_dir)
        """
        output_dir = output_dir or self.settings.output_dir
        if os.path.isabs(output_dir):
            # Absolute directories are served relative to the working directory
            output_dir = os.path.relpath(output_dir)
        output_dir = output_dir.replace(os.sep, '/').strip('/')
        return f"{get_store_location(store)}{output_dir}/{file_name}"

    def export(
        self,
        store: Optional[Store] = None,
        output_dir: Optional[str] = None,
        file_name: Optional[str] = None,
    ) -> FeedExportResult:
        """
        Generate the feed file.

        Args:
            store: Store to export (default: the catalog's current store)
            output_dir: Directory for the file (default: settings.output_dir)
            file_name: File name (default: generated from the current time)

        Returns:
            FeedExportResult; on failure the message is the error message
        """
        output_dir = output_dir or self.settings.output_dir
        file_name = file_name or generate_feed_filename()
        file_path = os.path.join(output_dir, file_name)

        try:
            store = store or self.catalog.get_current_store()
            os.makedirs(output_dir, exist_ok=True)

            with open(file_path, 'wb') as f:
                row_count = self.generator.generate_feed(f, store)
        except Exception as e:
            logger.exception("Become.com feed generation failed: %s", e)
            return FeedExportResult(success=False, message=str(e), file_path=file_path)

        file_url = self.get_file_url(store, file_name, output_dir)
        click_here = f'<a href="{file_url}" target="_blank">{CLICK_HERE}</a>'

        logger.info("Feed written to %s (%d rows)", file_path, row_count)

        return FeedExportResult(
            success=True,
            message=SUCCESS_MESSAGE.format(click_here),
            file_path=file_path,
            file_url=file_url,
            row_count=row_count,
        )
