"""
Become.com Feed Generator

Writes a store's catalog as a semicolon-delimited Become.com product feed.
One header line, then one line per sellable unit: each simple product, and
each associated child of a grouped product.
"""

import logging
import os
from typing import BinaryIO, List, Optional, Tuple

from ..catalog.base import CatalogReader
from ..common.text_utils import (
    ensure_maximum_length,
    format_price,
    format_sku,
    remove_special_chars,
    strip_tags,
)
from ..models import Category, Currency, FeedRow, FeedSettings, Product, ProductType, Store
from .errors import CatalogLookupError, CurrencyNotFoundError

logger = logging.getLogger(__name__)

FEED_FIELDNAMES = [
    'UPC', 'Mfr Part #', 'Manufacturer', 'Product URL', 'Image URL',
    'Product Title', 'Product Description', 'Category', 'Price',
    'Condition', 'Stock Status',
]

FEED_HEADER = ';'.join(FEED_FIELDNAMES)

MAX_TITLE_LENGTH = 80
MAX_DESCRIPTION_LENGTH = 250

NO_CATEGORY = "no category"
IN_STOCK = "In Stock"
OUT_OF_STOCK = "Out of Stock"

FEED_ENCODING = 'utf-8'


def get_store_location(store: Store, use_ssl: bool = False) -> str:
    """
    Store base URL with the requested scheme, always ending in '/'.

    Args:
        store: Store
        use_ssl: Use https:// (default: force http://)
    """
    url = store.url
    for scheme in ('https://', 'http://'):
        if url.lower().startswith(scheme):
            url = url[len(scheme):]
            break

    scheme = 'https://' if use_ssl else 'http://'
    location = f"{scheme}{url}"
    if not location.endswith('/'):
        location += '/'
    return location


class BecomeFeedGenerator:
    """
    Generates the Become.com feed from a catalog.

    Usage:
        generator = BecomeFeedGenerator(catalog, settings)
        with open("become.csv", "wb") as f:
            generator.generate_feed(f, catalog.get_current_store())
    """

    def __init__(self, catalog: CatalogReader, settings: Optional[FeedSettings] = None):
        """
        Initialize the generator.

        Args:
            catalog: Catalog to read products from
            settings: Feed settings (default: install-time defaults)
        """
        self.catalog = catalog
        self.settings = settings or FeedSettings()

    def get_used_currency(self) -> Currency:
        """
        Resolve the feed currency.

        The configured currency is used if it exists and is published,
        otherwise the primary store currency.

        Raises:
            CurrencyNotFoundError: If neither currency exists
        """
        currency = self.catalog.get_currency_by_id(self.settings.currency_id)

        if currency is None or not currency.published:
            currency = self.catalog.get_currency_by_id(self.settings.primary_store_currency_id)

        if currency is None:
            raise CurrencyNotFoundError(
                f"Feed currency {self.settings.currency_id} and primary store currency "
                f"{self.settings.primary_store_currency_id} not found"
            )

        return currency

    def get_category_breadcrumb(self, category: Category) -> List[Category]:
        """
        Walk from a category up to the root.

        Stops at the first category that is missing, deleted or unpublished;
        that category and its ancestors are not included.

        Args:
            category: Leaf category

        Returns:
            Categories in root-to-leaf order
        """
        if category is None:
            raise ValueError("category is required")

        breadcrumb = []
        visited = set()

        while category is not None and not category.deleted and category.published:
            # Stop on a parent cycle
            if category.id in visited:
                break
            visited.add(category.id)

            breadcrumb.append(category)
            category = self.catalog.get_category_by_id(category.parent_category_id)

        breadcrumb.reverse()
        return breadcrumb

    def get_category_path(self, product: Product) -> str:
        """
        Breadcrumb of the product's first category, or 'no category'.

        Raises:
            CatalogLookupError: If the first category is itself deleted or unpublished
        """
        product_categories = self.catalog.get_product_categories_by_product_id(product.id)
        if not product_categories:
            return NO_CATEGORY

        first_category = self.catalog.get_category_by_id(product_categories[0].category_id)
        if first_category is None:
            return NO_CATEGORY

        breadcrumb = self.get_category_breadcrumb(first_category)
        if not breadcrumb:
            raise CatalogLookupError(
                f"Category {first_category.id} of product {product.id} is deleted or unpublished"
            )

        return '>'.join(c.name for c in breadcrumb)

    def get_manufacturer_fields(self, product: Product) -> Tuple[str, str]:
        """
        Manufacturer part number and name from the product's first manufacturer.

        Returns:
            (manufacturer_part_number, manufacturer_name), both empty without a manufacturer

        Raises:
            CatalogLookupError: If the linked manufacturer does not exist
        """
        product_manufacturers = self.catalog.get_product_manufacturers_by_product_id(product.id)
        if not product_manufacturers:
            return "", ""

        manufacturer_id = product_manufacturers[0].manufacturer_id
        manufacturer = self.catalog.get_manufacturer_by_id(manufacturer_id)
        if manufacturer is None:
            raise CatalogLookupError(
                f"Manufacturer {manufacturer_id} linked to product {product.id} not found"
            )

        return product.manufacturer_part_number, manufacturer.name

    def get_image_url(self, product: Product, store: Store) -> str:
        size = self.settings.product_picture_size
        pictures = self.catalog.get_pictures_by_product_id(product.id, 1)

        if pictures:
            return self.catalog.get_picture_url(pictures[0], size, store.url)
        return self.catalog.get_default_picture_url(size, store.url)

    @staticmethod
    def get_description(product: Product) -> str:
        """Full description, falling back to short description, then name."""
        return product.full_description or product.short_description or product.name

    def rows_for_product(self, product: Product, store: Store) -> List[Product]:
        """
        Products that produce feed rows for a top-level product.

        Simple products produce themselves, grouped products their associated
        children, other product types nothing.
        """
        if product.product_type == ProductType.SIMPLE:
            return [product]

        if product.product_type == ProductType.GROUPED:
            return self.catalog.get_associated_products(product.id, store.id)

        logger.debug("Skipping product %d of type %r", product.id, product.product_type)
        return []

    def product_to_row(self, product: Product, store: Store, currency: Currency) -> FeedRow:
        """
        Build the feed row of a single product.

        Args:
            product: Simple product or grouped product child
            store: Store the feed is generated for
            currency: Feed currency

        Returns:
            Fully computed FeedRow
        """
        manufacturer_part_number, manufacturer_name = self.get_manufacturer_fields(product)

        product_url = f"{get_store_location(store)}{self.catalog.get_se_name(product)}"
        image_url = self.get_image_url(product, store)

        price = self.catalog.convert_from_primary_store_currency(product.price, currency)
        stock_status = IN_STOCK if product.stock_quantity > 0 else OUT_OF_STOCK

        title = ensure_maximum_length(product.name, MAX_TITLE_LENGTH)

        description = strip_tags(self.get_description(product))
        description = ensure_maximum_length(description, MAX_DESCRIPTION_LENGTH)

        return FeedRow(
            sku=format_sku(product.id),
            manufacturer_part_number=remove_special_chars(manufacturer_part_number) or "",
            manufacturer_name=remove_special_chars(manufacturer_name) or "",
            product_url=product_url,
            image_url=image_url,
            title=remove_special_chars(title) or "",
            description=remove_special_chars(description) or "",
            category=remove_special_chars(self.get_category_path(product)) or "",
            price=format_price(price),
            stock_status=stock_status,
        )

    def _write_line(self, stream: BinaryIO, line: str) -> None:
        stream.write(f"{line}{os.linesep}".encode(FEED_ENCODING))

    def generate_feed(self, stream: BinaryIO, store: Store) -> int:
        """
        Write the feed for a store.

        Lookup and I/O errors propagate; lines written before the error stay
        in the stream.

        Args:
            stream: Writable binary stream
            store: Store to generate the feed for

        Returns:
            Number of product rows written

        Raises:
            ValueError: If stream or store is missing
        """
        if stream is None:
            raise ValueError("stream is required")
        if store is None:
            raise ValueError("store is required")

        logger.info("Generating Become.com feed for store %s", store.name)

        self._write_line(stream, FEED_HEADER)

        currency = None
        row_count = 0

        products = self.catalog.search_products(store_id=store.id, visible_individually_only=True)
        for top_level_product in products:
            for product in self.rows_for_product(top_level_product, store):
                if currency is None:
                    currency = self.get_used_currency()

                row = self.product_to_row(product, store, currency)
                self._write_line(stream, row.to_line())
                row_count += 1

        logger.info("Wrote %d feed rows from %d catalog products", row_count, len(products))
        return row_count
