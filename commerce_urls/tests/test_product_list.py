"""Tests for product list assembly."""

import logging
from unittest.mock import MagicMock

import pytest

from commerce_urls.catalog import InMemoryCatalog
from commerce_urls.config import ConfigurationError
from commerce_urls.formats import PRODUCT_URL_FORMATS
from commerce_urls.models import CatalogProduct, ProductListItem, ProductVariant
from commerce_urls.product_list import ProductCarousel, assemble_product_list, find_variant

PAGE = "/content/shop/product"


@pytest.fixture
def sku_url_path():
    return PRODUCT_URL_FORMATS["sku-url-path"]


class TestFindVariant:
    """Tests for find_variant."""

    def test_finds_matching_variant(self, jacket):
        variant = find_variant(jacket, "MJ01-S-Red")
        assert variant.name == "Beaumont Summit Kit-S-Red"

    def test_unknown_variant(self, jacket):
        assert find_variant(jacket, "MJ01-XL-Blue") is None

    def test_simple_product(self, bag):
        assert find_variant(bag, "24-MB01-X") is None


class TestAssembleProductList:
    """Tests for assemble_product_list."""

    def test_keeps_input_order_and_repeats(self, jacket, bag, sku_url_path):
        items = assemble_product_list(["24-MB01", "MJ01", "24-MB01"], [jacket, bag], sku_url_path, PAGE)

        assert [item.sku for item in items] == ["24-MB01", "MJ01", "24-MB01"]

    def test_missing_variant_uses_base_data(self, jacket, bag, sku_url_path):
        """[A, B#variant, A] with an unknown variant gives three base items."""
        items = assemble_product_list(
            ["24-MB01", "MJ01#MJ01-XL-Blue", "24-MB01"], [bag, jacket], sku_url_path, PAGE
        )

        assert len(items) == 3
        assert [item.sku for item in items] == ["24-MB01", "MJ01", "24-MB01"]
        assert items[1].name == "Beaumont Summit Kit"
        assert items[1].thumbnail == "https://cdn.example.com/mj01.jpg"

    def test_unknown_product_is_skipped(self, bag, sku_url_path):
        items = assemble_product_list(["24-MB01", "UNKNOWN"], [bag], sku_url_path, PAGE)

        assert len(items) == 1
        assert items[0].sku == "24-MB01"

    def test_variant_data_with_base_url(self, jacket, sku_url_path):
        items = assemble_product_list(["MJ01#MJ01-XS-Orange"], [jacket], sku_url_path, PAGE)

        item = items[0]
        assert item.sku == "MJ01-XS-Orange"
        assert item.name == "Beaumont Summit Kit-XS-Orange"
        assert item.thumbnail == "https://cdn.example.com/mj01-xs-orange.jpg"
        assert item.variant_sku == "MJ01-XS-Orange"
        assert item.url_key == "beaumont-summit-kit"
        assert item.url_path == "men/tops/jackets/beaumont-summit-kit"
        assert item.url == (
            "/content/shop/product.html/MJ01/men/tops/jackets/beaumont-summit-kit.html#MJ01-XS-Orange"
        )

    def test_url_uses_base_rewrites(self, bag):
        items = assemble_product_list(["24-MB01"], [bag], PRODUCT_URL_FORMATS["url-path"], PAGE)
        assert items[0].url == "/content/shop/product.html/gear/bags/joust-duffle-bag.html"

    def test_path_tokens(self, bag, sku_url_path):
        items = assemble_product_list(["/var/commerce/products/24-MB01"], [bag], sku_url_path, PAGE)
        assert items[0].sku == "24-MB01"

    def test_failing_item_is_dropped(self, jacket, bag, caplog):
        url_format = MagicMock()
        url_format.format.side_effect = [RuntimeError("boom"), "/ok.html"]

        with caplog.at_level(logging.ERROR, logger="commerce_urls"):
            items = assemble_product_list(["MJ01", "24-MB01"], [jacket, bag], url_format, PAGE)

        assert [item.sku for item in items] == ["24-MB01"]
        assert items[0].url == "/ok.html"
        assert "Failed to build product list item 'MJ01'" in caplog.text

    def test_invalid_token_is_dropped(self, bag, sku_url_path):
        items = assemble_product_list([None, "24-MB01"], [bag], sku_url_path, PAGE)
        assert [item.sku for item in items] == ["24-MB01"]

    def test_empty_fetch_result(self, sku_url_path):
        assert assemble_product_list(["MJ01"], [], sku_url_path, PAGE) == []


class TestProductCarousel:
    """Tests for ProductCarousel."""

    def test_fetches_distinct_base_skus_once(self, jacket, bag):
        catalog = MagicMock()
        catalog.fetch_products.return_value = [bag, jacket]

        carousel = ProductCarousel(
            ["MJ01#MJ01-XS-Orange", "24-MB01", "MJ01"],
            catalog,
            url_format=PRODUCT_URL_FORMATS["sku"],
            page=PAGE,
        )
        items = carousel.get_products()

        catalog.fetch_products.assert_called_once_with(["MJ01", "24-MB01"])
        assert [item.sku for item in items] == ["MJ01-XS-Orange", "24-MB01", "MJ01"]
        assert items[0].url == "/content/shop/product.html/MJ01.html#MJ01-XS-Orange"

    def test_not_configured(self):
        carousel = ProductCarousel(None, None)

        assert not carousel.is_configured
        assert carousel.get_products() == []

    def test_configured_without_catalog(self):
        with pytest.raises(ConfigurationError):
            ProductCarousel(["MJ01"], None)

    def test_defaults_from_environment(self, monkeypatch, jacket):
        monkeypatch.setenv("COMMERCE_URL_FORMAT", "url-key")
        monkeypatch.setenv("COMMERCE_PRODUCT_PAGE", "/shop/p")

        carousel = ProductCarousel(["MJ01"], InMemoryCatalog([jacket]))

        assert carousel.url_format is PRODUCT_URL_FORMATS["url-key"]
        assert carousel.get_products()[0].url == "/shop/p.html/beaumont-summit-kit.html"

    def test_unknown_format_in_environment(self, monkeypatch, jacket):
        monkeypatch.setenv("COMMERCE_URL_FORMAT", "nope")

        with pytest.raises(ConfigurationError):
            ProductCarousel(["MJ01"], InMemoryCatalog([jacket]))

    def test_items_are_list_items(self, bag):
        carousel = ProductCarousel(["24-MB01"], InMemoryCatalog([bag]), page=PAGE)
        assert all(isinstance(item, ProductListItem) for item in carousel.get_products())

    def test_variants_resolve_only_on_configurable_products(self):
        simple = CatalogProduct(sku="S1", name="Simple", url_key="simple")
        configurable = CatalogProduct(
            sku="C1", name="Configurable", url_key="conf", variants=[ProductVariant(sku="S1-V")]
        )
        catalog = InMemoryCatalog([simple, configurable])

        items = ProductCarousel(["S1#S1-V", "C1#S1-V"], catalog, page=PAGE).get_products()

        assert [item.sku for item in items] == ["S1", "S1-V"]
        assert items[1].url == "/content/shop/product.html/C1/conf.html#S1-V"
