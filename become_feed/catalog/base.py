"""
Catalog Reader Interface

The read operations the feed generator needs from the store catalog.
Implementations own the data; the generator never mutates it.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional

from ..models import (
    Category,
    Currency,
    Manufacturer,
    Picture,
    Product,
    ProductCategory,
    ProductManufacturer,
    Store,
)


class CatalogReader(ABC):
    """Read-only access to products, categories, manufacturers, pictures and currencies."""

    # Products

    @abstractmethod
    def search_products(self, store_id: int = 0, visible_individually_only: bool = False) -> List[Product]:
        """Published products available in the store, in catalog order."""

    @abstractmethod
    def get_associated_products(self, parent_grouped_product_id: int, store_id: int = 0) -> List[Product]:
        """Published child products of a grouped product, in display order."""

    @abstractmethod
    def get_se_name(self, product: Product) -> str:
        """Canonical URL slug of a product."""

    # Manufacturers

    @abstractmethod
    def get_product_manufacturers_by_product_id(self, product_id: int) -> List[ProductManufacturer]:
        """Product-manufacturer links in display order."""

    @abstractmethod
    def get_manufacturer_by_id(self, manufacturer_id: int) -> Optional[Manufacturer]:
        pass

    # Categories

    @abstractmethod
    def get_product_categories_by_product_id(self, product_id: int) -> List[ProductCategory]:
        """Product-category links in display order."""

    @abstractmethod
    def get_category_by_id(self, category_id: int) -> Optional[Category]:
        """Category by id; None for 0 or an unknown id."""

    # Pictures

    @abstractmethod
    def get_pictures_by_product_id(self, product_id: int, limit: int = 0) -> List[Picture]:
        """Product pictures in display order (limit 0 = all)."""

    @abstractmethod
    def get_picture_url(self, picture: Picture, target_size: int, store_location: str) -> str:
        """Public URL of a picture thumbnail at target_size pixels."""

    @abstractmethod
    def get_default_picture_url(self, target_size: int, store_location: str) -> str:
        """Public URL of the placeholder image at target_size pixels."""

    # Currencies

    @abstractmethod
    def get_currency_by_id(self, currency_id: int) -> Optional[Currency]:
        pass

    @abstractmethod
    def get_all_currencies(self, show_hidden: bool = False) -> List[Currency]:
        """Currencies for selection (unpublished ones only with show_hidden)."""

    @abstractmethod
    def convert_from_primary_store_currency(self, amount: Decimal, currency: Currency) -> Decimal:
        """Convert an amount from the primary store currency into currency."""

    # Stores

    @abstractmethod
    def get_store_by_id(self, store_id: int) -> Optional[Store]:
        pass

    @abstractmethod
    def get_current_store(self) -> Store:
        """The store the feed is generated for by default."""
