"""Shared test fixtures."""

from decimal import Decimal
from pathlib import Path

import pytest

from become_feed.catalog import InMemoryCatalog
from become_feed.models import Currency, FeedSettings, Product, Store

FIXTURES_DIR = Path(__file__).parent / "fixtures"

STORE_URL = "http://shop.example.com/"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def store():
    return Store(id=1, name="Demo Store", url=STORE_URL)


@pytest.fixture
def primary_currency():
    return Currency(id=1, name="US Dollar", currency_code="USD", rate=Decimal("1.0"))


@pytest.fixture
def euro():
    return Currency(id=2, name="Euro", currency_code="EUR", rate=Decimal("0.5"))


@pytest.fixture
def settings():
    """Install-time defaults: 125px thumbnails, primary currency id 1."""
    return FeedSettings()


@pytest.fixture
def widget():
    """Simple product with nothing linked."""
    return Product(id=7, name="Widget", price=Decimal("9.99"), stock_quantity=3)


@pytest.fixture
def make_catalog(store, primary_currency, euro):
    """Build an InMemoryCatalog with the demo store and both currencies."""
    def _make(**kwargs):
        kwargs.setdefault("stores", [store])
        kwargs.setdefault("currencies", [primary_currency, euro])
        return InMemoryCatalog(**kwargs)
    return _make
