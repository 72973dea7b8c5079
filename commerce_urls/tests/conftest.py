"""Shared fixtures for the commerce_urls tests."""

import json

import pytest

from commerce_urls.models import CatalogProduct, ProductVariant


@pytest.fixture
def jacket():
    """A configurable product with two variants."""
    return CatalogProduct(
        sku="MJ01",
        name="Beaumont Summit Kit",
        thumbnail="https://cdn.example.com/mj01.jpg",
        url_key="beaumont-summit-kit",
        url_path="men/tops/jackets/beaumont-summit-kit",
        url_rewrites=["men/beaumont-summit-kit.html", "men/tops/jackets/beaumont-summit-kit.html"],
        variants=[
            ProductVariant(sku="MJ01-XS-Orange", name="Beaumont Summit Kit-XS-Orange",
                           thumbnail="https://cdn.example.com/mj01-xs-orange.jpg"),
            ProductVariant(sku="MJ01-S-Red", name="Beaumont Summit Kit-S-Red"),
        ],
    )


@pytest.fixture
def bag():
    """A simple product with no url_path, only rewrites."""
    return CatalogProduct(
        sku="24-MB01",
        name="Joust Duffle Bag",
        thumbnail="https://cdn.example.com/mb01.jpg",
        url_key="joust-duffle-bag",
        url_rewrites=["gear/bags/joust-duffle-bag.html"],
    )


@pytest.fixture
def catalog_file(tmp_path):
    """Write a small catalog export in the GraphQL response shape."""
    data = {
        "products": [
            {
                "sku": "MJ01",
                "name": "Beaumont Summit Kit",
                "thumbnail": {"url": "https://cdn.example.com/mj01.jpg", "label": "Beaumont"},
                "url_key": "beaumont-summit-kit",
                "url_path": "men/tops/jackets/beaumont-summit-kit",
                "url_rewrites": [{"url": "men/tops/jackets/beaumont-summit-kit.html"}],
                "variants": [
                    {
                        "product": {
                            "sku": "MJ01-XS-Orange",
                            "name": "Beaumont Summit Kit-XS-Orange",
                            "thumbnail": {"url": "https://cdn.example.com/mj01-xs-orange.jpg"},
                        }
                    }
                ],
            },
            {
                "sku": "24-MB01",
                "name": "Joust Duffle Bag",
                "url_key": "joust-duffle-bag",
                "url_rewrites": ["gear/bags/joust-duffle-bag.html"],
            },
        ]
    }
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep deployment settings from the environment out of the tests."""
    for name in (
        "COMMERCE_URL_FORMAT",
        "COMMERCE_PRODUCT_PAGE",
        "COMMERCE_CATALOG_PATH",
        "COMMERCE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
