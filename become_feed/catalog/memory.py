"""
In-Memory Catalog

CatalogReader over plain lists of catalog entities, indexed by id.
Used for YAML catalog snapshots and in tests.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ..common.seo_names import generate_se_name
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
from .base import CatalogReader

logger = logging.getLogger(__name__)

# Mime type subtypes that do not match the file extension
MIME_EXTENSION_OVERRIDES = {
    'pjpeg': 'jpg',
    'x-png': 'png',
    'x-icon': 'ico',
}

DEFAULT_IMAGE_FILENAME = 'default-image.png'


def _index(items: Optional[Iterable]) -> Dict[int, object]:
    return {item.id: item for item in items or []}


def _ordered(items: Iterable) -> list:
    return sorted(items, key=lambda item: (item.display_order, item.id))


def file_extension_from_mime_type(mime_type: str) -> str:
    """
    Get a file extension from a mime type.

    Example:
        >>> file_extension_from_mime_type("image/pjpeg")
        'jpg'
    """
    if not mime_type:
        return ''

    subtype = mime_type.split('/')[-1]
    return MIME_EXTENSION_OVERRIDES.get(subtype, subtype)


class InMemoryCatalog(CatalogReader):
    """
    Catalog held in memory.

    Usage:
        catalog = InMemoryCatalog(stores=[store], products=[product], currencies=[usd])
        products = catalog.search_products(store_id=store.id, visible_individually_only=True)
    """

    def __init__(
        self,
        stores: Optional[List[Store]] = None,
        products: Optional[List[Product]] = None,
        manufacturers: Optional[List[Manufacturer]] = None,
        product_manufacturers: Optional[List[ProductManufacturer]] = None,
        categories: Optional[List[Category]] = None,
        product_categories: Optional[List[ProductCategory]] = None,
        pictures: Optional[List[Picture]] = None,
        currencies: Optional[List[Currency]] = None,
        current_store_id: int = 0,
    ):
        self.stores: Dict[int, Store] = _index(stores)
        self.products: Dict[int, Product] = _index(products)
        self.manufacturers: Dict[int, Manufacturer] = _index(manufacturers)
        self.product_manufacturers: Dict[int, ProductManufacturer] = _index(product_manufacturers)
        self.categories: Dict[int, Category] = _index(categories)
        self.product_categories: Dict[int, ProductCategory] = _index(product_categories)
        self.pictures: Dict[int, Picture] = _index(pictures)
        self.currencies: Dict[int, Currency] = _index(currencies)
        self.current_store_id = current_store_id

    def _is_listed(self, product: Product, store_id: int) -> bool:
        if not product.published or product.deleted:
            return False
        return not store_id or product.is_available_in_store(store_id)

    def search_products(self, store_id: int = 0, visible_individually_only: bool = False) -> List[Product]:
        products = [
            p for p in self.products.values()
            if self._is_listed(p, store_id)
            and (p.visible_individually or not visible_individually_only)
        ]
        logger.debug("Found %d products for store %d", len(products), store_id)
        return _ordered(products)

    def get_associated_products(self, parent_grouped_product_id: int, store_id: int = 0) -> List[Product]:
        products = [
            p for p in self.products.values()
            if p.parent_grouped_product_id == parent_grouped_product_id
            and self._is_listed(p, store_id)
        ]
        return _ordered(products)

    def get_se_name(self, product: Product) -> str:
        return product.se_name or generate_se_name(product.name)

    def get_product_manufacturers_by_product_id(self, product_id: int) -> List[ProductManufacturer]:
        return _ordered(
            link for link in self.product_manufacturers.values() if link.product_id == product_id
        )

    def get_manufacturer_by_id(self, manufacturer_id: int) -> Optional[Manufacturer]:
        return self.manufacturers.get(manufacturer_id)

    def get_product_categories_by_product_id(self, product_id: int) -> List[ProductCategory]:
        return _ordered(
            link for link in self.product_categories.values() if link.product_id == product_id
        )

    def get_category_by_id(self, category_id: int) -> Optional[Category]:
        if not category_id:
            return None
        return self.categories.get(category_id)

    def get_pictures_by_product_id(self, product_id: int, limit: int = 0) -> List[Picture]:
        pictures = _ordered(p for p in self.pictures.values() if p.product_id == product_id)
        if limit > 0:
            pictures = pictures[:limit]
        return pictures

    def get_picture_url(self, picture: Picture, target_size: int, store_location: str) -> str:
        extension = file_extension_from_mime_type(picture.mime_type)
        if picture.seo_filename:
            thumb = f"{picture.id:07d}_{picture.seo_filename}_{target_size}.{extension}"
        else:
            thumb = f"{picture.id:07d}_{target_size}.{extension}"
        return f"{store_location}images/thumbs/{thumb}"

    def get_default_picture_url(self, target_size: int, store_location: str) -> str:
        name, extension = DEFAULT_IMAGE_FILENAME.rsplit('.', 1)
        return f"{store_location}images/thumbs/{name}_{target_size}.{extension}"

    def get_currency_by_id(self, currency_id: int) -> Optional[Currency]:
        return self.currencies.get(currency_id)

    def get_all_currencies(self, show_hidden: bool = False) -> List[Currency]:
        return [c for c in self.currencies.values() if show_hidden or c.published]

    def convert_from_primary_store_currency(self, amount: Decimal, currency: Currency) -> Decimal:
        if currency is None:
            raise ValueError("Currency is required for conversion")
        return amount * currency.rate

    def get_store_by_id(self, store_id: int) -> Optional[Store]:
        return self.stores.get(store_id)

    def get_current_store(self) -> Store:
        if self.current_store_id:
            store = self.stores.get(self.current_store_id)
            if store is None:
                raise ValueError(f"Current store {self.current_store_id} not found in catalog")
            return store

        if not self.stores:
            raise ValueError("Catalog has no stores")
        return self.stores[min(self.stores)]
