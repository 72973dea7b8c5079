"""Assembly of ordered product lists (carousels, teasers).

A list is configured with combined tokens in display order. The catalog
returns base products in no particular order; assembly puts them back into
the configured order, substitutes variant data where a variant was requested
and renders each item's link with the deployment's URL format.
"""

import logging
from typing import Iterable, List, Optional

from commerce_urls.catalog import Catalog
from commerce_urls.config import ConfigurationError, get_product_page, get_product_url_format_name
from commerce_urls.formats import ProductUrlFormat, get_product_url_format
from commerce_urls.identifiers import split_combined_sku, to_base_skus
from commerce_urls.logging_config import get_logger, log_url_event
from commerce_urls.models import CatalogProduct, Params, ProductListItem, ProductVariant

__all__ = ["find_variant", "assemble_product_list", "ProductCarousel"]

logger = get_logger(__name__)


def find_variant(product: CatalogProduct, variant_sku: str) -> Optional[ProductVariant]:
    """Return the variant of a configurable product with the given sku."""
    if not product.variants:
        return None
    for variant in product.variants:
        if variant.sku == variant_sku:
            return variant
    return None


def _build_item(
    product: CatalogProduct,
    variant_sku: Optional[str],
    url_format: ProductUrlFormat,
    page: Optional[str],
) -> ProductListItem:
    source = product
    if variant_sku and product.is_configurable:
        variant = find_variant(product, variant_sku)
        if variant is not None:
            source = variant

    # Links always target the base product page; the variant is only an anchor
    params = Params(
        page=page,
        sku=product.sku,
        url_key=product.url_key,
        url_path=product.url_path,
        url_rewrites=list(product.url_rewrites),
        variant_sku=variant_sku,
    )

    return ProductListItem(
        sku=source.sku,
        url=url_format.format(params),
        name=source.name,
        thumbnail=source.thumbnail,
        variant_sku=variant_sku,
        url_key=product.url_key,
        url_path=product.url_path,
    )


def assemble_product_list(
    combined_skus: Iterable[str],
    products: Iterable[CatalogProduct],
    url_format: ProductUrlFormat,
    page: Optional[str] = None,
) -> List[ProductListItem]:
    """Build one display item per configured token, in configured order.

    Repeated tokens give repeated items. Tokens whose base product was not
    returned by the catalog are skipped, and an item that fails to build is
    logged and dropped without affecting the others.

    Args:
        combined_skus: Tokens like "MJ01" or "MJ01#MJ01-XS-Orange"
        products: Base product records fetched for the tokens
        url_format: Format used to render item links
        page: Product page path links are rendered under

    Returns:
        List of ProductListItem
    """
    by_sku = {}
    for product in products:
        by_sku.setdefault(product.sku, product)

    items: List[ProductListItem] = []
    for token in combined_skus:
        try:
            base_sku, variant_sku = split_combined_sku(token)
            product = by_sku.get(base_sku)
            if product is None:
                log_url_event(
                    "product_not_found",
                    {"message": f"Product not found: {token}", "sku": base_sku},
                    level=logging.DEBUG,
                    logger_name=__name__,
                )
                continue

            items.append(_build_item(product, variant_sku, url_format, page))
        except Exception as e:
            logger.error(f"Failed to build product list item {token!r}: {e}", exc_info=True)

    return items


class ProductCarousel:
    """An ordered product list backed by a catalog.

    Args:
        combined_skus: Configured tokens in display order (None = not configured)
        catalog: Catalog used to fetch base products
        url_format: URL format for item links (default: deployment setting)
        page: Product page path (default: deployment setting)

    Raises:
        ConfigurationError: If the list is configured but no catalog is given,
            or the deployment URL format is unknown
    """

    def __init__(
        self,
        combined_skus: Optional[Iterable[str]],
        catalog: Optional[Catalog],
        url_format: Optional[ProductUrlFormat] = None,
        page: Optional[str] = None,
    ):
        self.combined_skus: List[str] = list(combined_skus) if combined_skus is not None else []
        self.base_skus: List[str] = to_base_skus(self.combined_skus)

        if self.is_configured and catalog is None:
            raise ConfigurationError("A product list needs a catalog to fetch products from")

        self.catalog = catalog
        self.url_format = url_format or get_product_url_format(get_product_url_format_name())
        self.page = page or get_product_page()

    @property
    def is_configured(self) -> bool:
        return bool(self.combined_skus)

    def get_products(self) -> List[ProductListItem]:
        """Fetch the configured products once and assemble the list."""
        if not self.is_configured:
            return []

        products = self.catalog.fetch_products(self.base_skus)
        logger.debug(f"Fetched {len(products)} of {len(self.base_skus)} products")
        return assemble_product_list(self.combined_skus, products, self.url_format, self.page)
