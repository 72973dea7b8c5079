"""Commerce product URL formats."""

__version__ = "0.1.0"

# Re-export main components for convenient imports
from commerce_urls.config import ConfigurationError
from commerce_urls.formats import (
    PRODUCT_URL_FORMATS,
    ProductPageWithSku,
    ProductPageWithSkuAndUrlPath,
    ProductPageWithUrlKey,
    ProductPageWithUrlPath,
    ProductUrlFormat,
    get_product_url_format,
)
from commerce_urls.identifiers import split_combined_sku, to_base_skus
from commerce_urls.models import CatalogProduct, Params, ProductListItem, ProductVariant, RequestPathInfo
from commerce_urls.product_list import ProductCarousel, assemble_product_list, find_variant
from commerce_urls.url_utils import select_url_path

__all__ = [
    # Version
    "__version__",
    # Models
    "Params",
    "RequestPathInfo",
    "CatalogProduct",
    "ProductVariant",
    "ProductListItem",
    # URL formats
    "ProductUrlFormat",
    "ProductPageWithSkuAndUrlPath",
    "ProductPageWithSku",
    "ProductPageWithUrlKey",
    "ProductPageWithUrlPath",
    "PRODUCT_URL_FORMATS",
    "get_product_url_format",
    "select_url_path",
    # Identifiers and lists
    "split_combined_sku",
    "to_base_skus",
    "find_variant",
    "assemble_product_list",
    "ProductCarousel",
    # Errors
    "ConfigurationError",
]
