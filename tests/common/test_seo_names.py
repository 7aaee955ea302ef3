"""Tests for become_feed/common/seo_names.py"""

from become_feed.common.seo_names import generate_se_name, transliterate


class TestTransliterate:
    def test_cyrillic_to_latin(self):
        assert transliterate("козметика") == "kozmetika"

    def test_latin_passthrough(self):
        assert transliterate("hello world") == "hello world"

    def test_empty_string(self):
        assert transliterate("") == ""


class TestGenerateSeName:
    def test_basic_name(self):
        assert generate_se_name("Widget") == "widget"

    def test_spaces_become_hyphens(self):
        assert generate_se_name("Studio Headphones") == "studio-headphones"

    def test_special_chars_removed(self):
        assert generate_se_name("Test! @Product# $100") == "test-product-100"

    def test_consecutive_hyphens_collapsed(self):
        assert "--" not in generate_se_name("Test  --  Product")

    def test_cyrillic_transliterated(self):
        assert generate_se_name("Козметика за лице") == "kozmetika-za-litse"

    def test_cyrillic_dropped_without_conversion(self):
        assert generate_se_name("Козметика 1", convert_non_western_chars=False) == "-1"

    def test_empty_name(self):
        assert generate_se_name("") == ""
