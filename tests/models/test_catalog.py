"""Tests for become_feed/models/catalog.py and feed.py"""

from decimal import Decimal

import pytest

from become_feed.models import Currency, FeedRow, FeedSettings, Product, ProductType, Store


class TestProduct:
    def test_defaults(self, widget):
        assert widget.product_type == ProductType.SIMPLE
        assert widget.full_description == ""
        assert widget.published is True
        assert widget.store_ids == []

    def test_price_converted_to_decimal(self):
        product = Product(id=1, name="P", price=9.99)
        assert product.price == Decimal("9.99")

    def test_available_in_all_stores_without_mapping(self, widget):
        assert widget.is_available_in_store(1)
        assert widget.is_available_in_store(99)

    def test_limited_to_mapped_stores(self):
        product = Product(id=1, name="P", store_ids=[2])
        assert product.is_available_in_store(2)
        assert not product.is_available_in_store(1)


class TestCurrency:
    def test_rate_converted_to_decimal(self):
        assert Currency(id=1, name="Euro", rate=0.92).rate == Decimal("0.92")


class TestStore:
    def test_url_gets_trailing_slash(self):
        assert Store(id=1, name="S", url="http://shop.example.com").url == "http://shop.example.com/"

    def test_raises_on_empty_url(self):
        with pytest.raises(ValueError, match="URL is required"):
            Store(id=1, name="S", url="")


class TestFeedSettings:
    def test_install_defaults(self):
        settings = FeedSettings()
        assert settings.product_picture_size == 125
        assert settings.currency_id == 0

    def test_raises_on_invalid_picture_size(self):
        with pytest.raises(ValueError):
            FeedSettings(product_picture_size=0)


class TestFeedRow:
    def test_column_order(self):
        row = FeedRow(
            sku="000000000001",
            manufacturer_part_number="MPN",
            manufacturer_name="Acme",
            product_url="http://s/p",
            image_url="http://s/i.png",
            title="Title",
            description="Desc",
            category="A>B",
            price="1.5",
            stock_status="In Stock",
        )
        assert row.to_line() == "000000000001;MPN;Acme;http://s/p;http://s/i.png;Title;Desc;A>B;1.5;New;In Stock"
        assert len(row.to_fields()) == 11
