"""
Data models for the product feed.

This module contains pure data classes with no business logic.
"""

from .catalog import (
    Category,
    Currency,
    Manufacturer,
    Picture,
    Product,
    ProductCategory,
    ProductManufacturer,
    ProductType,
    Store,
)
from .feed import CONDITION_NEW, FeedRow, FeedSettings

__all__ = [
    'Category',
    'Currency',
    'Manufacturer',
    'Picture',
    'Product',
    'ProductCategory',
    'ProductManufacturer',
    'ProductType',
    'Store',
    'CONDITION_NEW',
    'FeedRow',
    'FeedSettings',
]
