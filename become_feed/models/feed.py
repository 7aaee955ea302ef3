"""
Feed data models.

FeedRow is the per-product output line; FeedSettings holds the two
user-configurable values plus the store's primary currency.
"""

from dataclasses import dataclass

CONDITION_NEW = "New"

DEFAULT_PRODUCT_PICTURE_SIZE = 125


@dataclass
class FeedSettings:
    """Feed generation settings."""
    product_picture_size: int = DEFAULT_PRODUCT_PICTURE_SIZE
    currency_id: int = 0                # Preferred feed currency (0 = not set)
    primary_store_currency_id: int = 1
    output_dir: str = "files/exportimport"

    def __post_init__(self):
        if self.product_picture_size < 1:
            raise ValueError("Product picture size must be a positive number of pixels")


@dataclass
class FeedRow:
    """
    One line of the Become.com feed.

    Text fields are expected to be sanitized before construction.
    """
    sku: str
    manufacturer_part_number: str
    manufacturer_name: str
    product_url: str
    image_url: str
    title: str
    description: str
    category: str
    price: str
    stock_status: str
    condition: str = CONDITION_NEW

    def to_fields(self) -> list:
        """Field values in feed column order."""
        return [
            self.sku,
            self.manufacturer_part_number,
            self.manufacturer_name,
            self.product_url,
            self.image_url,
            self.title,
            self.description,
            self.category,
            self.price,
            self.condition,
            self.stock_status,
        ]

    def to_line(self) -> str:
        """Semicolon-joined line (no terminator)."""
        return ';'.join(self.to_fields())
