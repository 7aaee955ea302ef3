"""Tests for become_feed/catalog/memory.py"""

from decimal import Decimal

import pytest

from become_feed.catalog.memory import InMemoryCatalog, file_extension_from_mime_type
from become_feed.models import (
    Category,
    Picture,
    Product,
    ProductCategory,
    ProductManufacturer,
    ProductType,
    Store,
)


class TestFileExtensionFromMimeType:
    def test_plain_subtype(self):
        assert file_extension_from_mime_type("image/png") == "png"
        assert file_extension_from_mime_type("image/jpeg") == "jpeg"

    def test_overrides(self):
        assert file_extension_from_mime_type("image/pjpeg") == "jpg"
        assert file_extension_from_mime_type("image/x-png") == "png"

    def test_empty(self):
        assert file_extension_from_mime_type("") == ""


class TestSearchProducts:
    def test_excludes_unpublished_and_deleted(self, make_catalog):
        catalog = make_catalog(products=[
            Product(id=1, name="Live"),
            Product(id=2, name="Hidden", published=False),
            Product(id=3, name="Gone", deleted=True),
        ])
        assert [p.id for p in catalog.search_products(store_id=1)] == [1]

    def test_visible_individually_only(self, make_catalog):
        catalog = make_catalog(products=[
            Product(id=1, name="Top"),
            Product(id=2, name="Child", visible_individually=False, parent_grouped_product_id=5),
        ])
        assert [p.id for p in catalog.search_products(store_id=1, visible_individually_only=True)] == [1]
        assert len(catalog.search_products(store_id=1)) == 2

    def test_store_mapping(self, make_catalog):
        catalog = make_catalog(products=[
            Product(id=1, name="Everywhere"),
            Product(id=2, name="Store 2 only", store_ids=[2]),
        ])
        assert [p.id for p in catalog.search_products(store_id=1)] == [1]
        assert [p.id for p in catalog.search_products(store_id=2)] == [1, 2]

    def test_ordered_by_display_order_then_id(self, make_catalog):
        catalog = make_catalog(products=[
            Product(id=3, name="C", display_order=0),
            Product(id=1, name="A", display_order=1),
            Product(id=2, name="B", display_order=0),
        ])
        assert [p.id for p in catalog.search_products()] == [2, 3, 1]


class TestAssociatedProducts:
    def test_returns_children_in_order(self, make_catalog):
        catalog = make_catalog(products=[
            Product(id=10, name="Group", product_type=ProductType.GROUPED),
            Product(id=12, name="Second", parent_grouped_product_id=10, display_order=2),
            Product(id=11, name="First", parent_grouped_product_id=10, display_order=1),
            Product(id=13, name="Unpublished", parent_grouped_product_id=10, published=False),
            Product(id=20, name="Other"),
        ])
        assert [p.id for p in catalog.get_associated_products(10, store_id=1)] == [11, 12]


class TestLinks:
    def test_manufacturer_links_in_display_order(self, make_catalog):
        catalog = make_catalog(product_manufacturers=[
            ProductManufacturer(id=1, product_id=5, manufacturer_id=100, display_order=2),
            ProductManufacturer(id=2, product_id=5, manufacturer_id=200, display_order=1),
            ProductManufacturer(id=3, product_id=6, manufacturer_id=300),
        ])
        links = catalog.get_product_manufacturers_by_product_id(5)
        assert [link.manufacturer_id for link in links] == [200, 100]

    def test_category_links(self, make_catalog):
        catalog = make_catalog(product_categories=[
            ProductCategory(id=1, product_id=5, category_id=9),
        ])
        assert [link.category_id for link in catalog.get_product_categories_by_product_id(5)] == [9]
        assert catalog.get_product_categories_by_product_id(6) == []

    def test_category_zero_is_none(self, make_catalog):
        catalog = make_catalog(categories=[Category(id=1, name="Root")])
        assert catalog.get_category_by_id(0) is None
        assert catalog.get_category_by_id(1).name == "Root"
        assert catalog.get_category_by_id(2) is None


class TestPictures:
    @pytest.fixture
    def catalog(self, make_catalog):
        return make_catalog(pictures=[
            Picture(id=3, product_id=1, mime_type="image/jpeg", display_order=2),
            Picture(id=12, product_id=1, mime_type="image/png", seo_filename="widget", display_order=1),
        ])

    def test_limit(self, catalog):
        pictures = catalog.get_pictures_by_product_id(1, 1)
        assert [p.id for p in pictures] == [12]
        assert len(catalog.get_pictures_by_product_id(1)) == 2

    def test_picture_url_with_seo_filename(self, catalog):
        picture = catalog.get_pictures_by_product_id(1, 1)[0]
        url = catalog.get_picture_url(picture, 125, "http://shop.example.com/")
        assert url == "http://shop.example.com/images/thumbs/0000012_widget_125.png"

    def test_picture_url_without_seo_filename(self, catalog):
        picture = catalog.pictures[3]
        url = catalog.get_picture_url(picture, 300, "http://shop.example.com/")
        assert url == "http://shop.example.com/images/thumbs/0000003_300.jpeg"

    def test_default_picture_url(self, catalog):
        url = catalog.get_default_picture_url(125, "http://shop.example.com/")
        assert url == "http://shop.example.com/images/thumbs/default-image_125.png"


class TestCurrencies:
    def test_conversion(self, make_catalog, euro):
        catalog = make_catalog()
        assert catalog.convert_from_primary_store_currency(Decimal("10.00"), euro) == Decimal("5.000")

    def test_conversion_requires_currency(self, make_catalog):
        with pytest.raises(ValueError):
            make_catalog().convert_from_primary_store_currency(Decimal("1"), None)

    def test_hidden_currencies(self, make_catalog, primary_currency, euro):
        euro.published = False
        catalog = make_catalog(currencies=[primary_currency, euro])
        assert [c.id for c in catalog.get_all_currencies()] == [1]
        assert [c.id for c in catalog.get_all_currencies(show_hidden=True)] == [1, 2]


class TestSeName:
    def test_stored_slug_wins(self, make_catalog):
        product = Product(id=1, name="Widget", se_name="custom-widget")
        assert make_catalog().get_se_name(product) == "custom-widget"

    def test_generated_from_name(self, make_catalog, widget):
        assert make_catalog().get_se_name(widget) == "widget"


class TestStores:
    def test_current_store_defaults_to_lowest_id(self, store):
        other = Store(id=5, name="Other", url="http://other.example.com/")
        catalog = InMemoryCatalog(stores=[other, store])
        assert catalog.get_current_store() is store

    def test_current_store_by_id(self, store):
        other = Store(id=5, name="Other", url="http://other.example.com/")
        catalog = InMemoryCatalog(stores=[store, other], current_store_id=5)
        assert catalog.get_current_store() is other

    def test_unknown_current_store(self, store):
        with pytest.raises(ValueError):
            InMemoryCatalog(stores=[store], current_store_id=9).get_current_store()

    def test_no_stores(self):
        with pytest.raises(ValueError, match="no stores"):
            InMemoryCatalog().get_current_store()
