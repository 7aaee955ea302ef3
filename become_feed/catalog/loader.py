"""
Catalog Snapshot Loader

Builds an InMemoryCatalog from a YAML catalog snapshot.

Snapshot layout:
    current_store_id: 1
    stores:        [{id, name, url}]
    currencies:    [{id, name, currency_code, rate, published}]
    manufacturers: [{id, name}]
    categories:    [{id, name, parent_category_id, published, deleted}]
    products:
      - id: 7
        name: Widget
        product_type: simple          # simple | grouped
        price: 9.99
        stock_quantity: 3
        manufacturer_ids: [1]         # link order = list order
        category_ids: [4]
        pictures: [{id, mime_type, seo_filename}]
        parent_grouped_product_id: 0  # set on children of grouped products
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Dict, List

from ..common.config_loader import load_yaml
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
from .memory import InMemoryCatalog

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = (
    'id', 'name', 'product_type', 'short_description', 'full_description',
    'stock_quantity', 'manufacturer_part_number', 'se_name',
    'visible_individually', 'published', 'deleted',
    'parent_grouped_product_id', 'display_order', 'store_ids',
)


def _to_decimal(value: Any, field_name: str) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid {field_name}: {value!r}") from e


def _build_product(data: Dict[str, Any]) -> Product:
    kwargs = {key: data[key] for key in PRODUCT_FIELDS if key in data and data[key] is not None}
    kwargs['price'] = _to_decimal(data.get('price', 0), 'price')
    return Product(**kwargs)


def catalog_from_dict(data: Dict[str, Any]) -> InMemoryCatalog:
    """
    Build an in-memory catalog from a parsed snapshot.

    Link entities (product-manufacturer, product-category) get sequential
    ids and a display order equal to their position in the product's list.

    Raises:
        ValueError: If an entity is malformed
    """
    stores = [Store(**s) for s in data.get('stores', [])]
    manufacturers = [Manufacturer(**m) for m in data.get('manufacturers', [])]
    categories = [Category(**c) for c in data.get('categories', [])]

    currencies = []
    for c in data.get('currencies', []):
        c = dict(c)
        c['rate'] = _to_decimal(c.get('rate', 1), 'currency rate')
        currencies.append(Currency(**c))

    products: List[Product] = []
    product_manufacturers: List[ProductManufacturer] = []
    product_categories: List[ProductCategory] = []
    pictures: List[Picture] = []

    for product_data in data.get('products', []):
        product = _build_product(product_data)
        products.append(product)

        for order, manufacturer_id in enumerate(product_data.get('manufacturer_ids', [])):
            product_manufacturers.append(ProductManufacturer(
                id=len(product_manufacturers) + 1,
                product_id=product.id,
                manufacturer_id=manufacturer_id,
                display_order=order,
            ))

        for order, category_id in enumerate(product_data.get('category_ids', [])):
            product_categories.append(ProductCategory(
                id=len(product_categories) + 1,
                product_id=product.id,
                category_id=category_id,
                display_order=order,
            ))

        for order, picture_data in enumerate(product_data.get('pictures', [])):
            pictures.append(Picture(
                product_id=product.id,
                display_order=picture_data.get('display_order', order),
                **{k: v for k, v in picture_data.items() if k not in ('product_id', 'display_order')},
            ))

    logger.debug(
        "Loaded catalog: %d stores, %d products, %d categories, %d currencies",
        len(stores), len(products), len(categories), len(currencies),
    )

    return InMemoryCatalog(
        stores=stores,
        products=products,
        manufacturers=manufacturers,
        product_manufacturers=product_manufacturers,
        categories=categories,
        product_categories=product_categories,
        pictures=pictures,
        currencies=currencies,
        current_store_id=data.get('current_store_id', 0),
    )


def load_catalog(path: str | Path) -> InMemoryCatalog:
    """
    Load a catalog snapshot from a YAML file.

    Args:
        path: Snapshot file path

    Returns:
        InMemoryCatalog

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    logger.info("Loading catalog snapshot from %s", path)
    return catalog_from_dict(load_yaml(path))
