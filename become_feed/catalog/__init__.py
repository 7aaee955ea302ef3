"""
Catalog access for feed generation.

Modules:
    base   - CatalogReader abstract interface
    memory - InMemoryCatalog implementation
    loader - Load an InMemoryCatalog from a YAML snapshot
"""

from .base import CatalogReader
from .loader import catalog_from_dict, load_catalog
from .memory import InMemoryCatalog

__all__ = [
    'CatalogReader',
    'InMemoryCatalog',
    'catalog_from_dict',
    'load_catalog',
]
