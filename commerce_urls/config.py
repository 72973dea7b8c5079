"""Configuration and constants for the URL formats."""

import os
from typing import Optional

__all__ = [
    "HTML_EXTENSION",
    "HTML_EXTENSION_AND_SUFFIX",
    "CONTENT_NODE",
    "VARIANT_SEPARATOR",
    "DEFAULT_PRODUCT_URL_FORMAT",
    "DEFAULT_PAGE",
    "ConfigurationError",
    "get_product_url_format_name",
    "get_product_page",
    "get_catalog_path",
    "get_log_level",
]


class ConfigurationError(Exception):
    """Raised when a deployment setting cannot be resolved."""
    pass


# Page extension used by every URL shape
HTML_EXTENSION = ".html"
HTML_EXTENSION_AND_SUFFIX = HTML_EXTENSION + "/"

# Trailing resource segment removed from request paths
CONTENT_NODE = "/jcr:content"

# Combined tokens look like "base-sku#variant-sku"
VARIANT_SEPARATOR = "#"

# Deployment defaults (overridable through the environment / .env)
DEFAULT_PRODUCT_URL_FORMAT = "sku-url-path"
DEFAULT_PAGE = "/content/venia/us/en/products/product-page"


def get_product_url_format_name() -> str:
    """Name or pattern of the URL format selected for this deployment."""
    return os.getenv("COMMERCE_URL_FORMAT", DEFAULT_PRODUCT_URL_FORMAT).strip()


def get_product_page() -> str:
    """Page path product URLs are rendered under."""
    return os.getenv("COMMERCE_PRODUCT_PAGE", DEFAULT_PAGE)


def get_catalog_path() -> Optional[str]:
    """Path of the JSON catalog used by the CLI, if configured."""
    return os.getenv("COMMERCE_CATALOG_PATH") or None


def get_log_level() -> str:
    return os.getenv("COMMERCE_LOG_LEVEL", "INFO").upper()
