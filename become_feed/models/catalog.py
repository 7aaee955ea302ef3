"""
Catalog data models.

Read-only entities supplied by the store catalog. Entities reference each
other by id only; lookups go through the catalog reader.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


class ProductType:
    """Product type identifiers."""
    SIMPLE = "simple"
    GROUPED = "grouped"


@dataclass
class Product:
    """Catalog product."""
    id: int
    name: str
    product_type: str = ProductType.SIMPLE
    short_description: str = ""
    full_description: str = ""
    price: Decimal = Decimal("0")       # In primary store currency
    stock_quantity: int = 0
    manufacturer_part_number: str = ""
    se_name: str = ""                   # Canonical URL slug
    visible_individually: bool = True
    published: bool = True
    deleted: bool = False
    parent_grouped_product_id: int = 0  # 0 = not an associated product
    display_order: int = 0
    store_ids: List[int] = field(default_factory=list)  # Empty = all stores

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))

    def is_available_in_store(self, store_id: int) -> bool:
        return not self.store_ids or store_id in self.store_ids


@dataclass
class Manufacturer:
    """Product manufacturer."""
    id: int
    name: str


@dataclass
class ProductManufacturer:
    """Product-manufacturer mapping."""
    id: int
    product_id: int
    manufacturer_id: int
    display_order: int = 0


@dataclass
class Category:
    """Catalog category. Categories form a tree through parent_category_id."""
    id: int
    name: str
    parent_category_id: int = 0  # 0 = root
    published: bool = True
    deleted: bool = False


@dataclass
class ProductCategory:
    """Product-category mapping."""
    id: int
    product_id: int
    category_id: int
    display_order: int = 0


@dataclass
class Picture:
    """Product picture metadata."""
    id: int
    product_id: int
    mime_type: str = "image/jpeg"
    seo_filename: str = ""
    display_order: int = 0


@dataclass
class Currency:
    """Currency with its rate against the primary store currency."""
    id: int
    name: str
    currency_code: str = ""
    rate: Decimal = Decimal("1")
    published: bool = True

    def __post_init__(self):
        if not isinstance(self.rate, Decimal):
            self.rate = Decimal(str(self.rate))


@dataclass
class Store:
    """Store the feed is generated for."""
    id: int
    name: str
    url: str

    def __post_init__(self):
        if not self.url:
            raise ValueError("Store URL is required")
        if not self.url.endswith('/'):
            self.url += '/'
