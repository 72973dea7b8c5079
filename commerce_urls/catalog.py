"""Catalog lookups consumed by product lists.

The real catalog is a remote service; product lists only need something that
returns base product records for a list of skus. ``JsonCatalog`` reads an
exported catalog file (the CLI uses it), ``InMemoryCatalog`` wraps records that
are already loaded.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Protocol, Union

from commerce_urls.logging_config import get_logger
from commerce_urls.models import CatalogProduct

__all__ = ["Catalog", "CatalogError", "InMemoryCatalog", "JsonCatalog"]

logger = get_logger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be read."""
    pass


class Catalog(Protocol):
    def fetch_products(self, skus: List[str]) -> List[CatalogProduct]:
        ...


class InMemoryCatalog:
    """Catalog over records already in memory, keyed by base sku."""

    def __init__(self, products: Iterable[CatalogProduct]):
        self.products: Dict[str, CatalogProduct] = {p.sku: p for p in products}

    def fetch_products(self, skus: List[str]) -> List[CatalogProduct]:
        """Return the records for the requested skus, in catalog order."""
        wanted = set(skus)
        return [p for sku, p in self.products.items() if sku in wanted]

    def __len__(self) -> int:
        return len(self.products)


class JsonCatalog(InMemoryCatalog):
    """Catalog loaded from a JSON export.

    The file holds either ``{"products": [...]}`` or a bare list of product
    objects, in the shape the catalog GraphQL API returns them.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(self._load())
        logger.info(f"Loaded {len(self.products)} products from {self.path}")

    def _load(self) -> List[CatalogProduct]:
        if not self.path.exists():
            raise FileNotFoundError(f"Catalog not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in catalog {self.path}: {e}") from e

        items = data.get("products", []) if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise CatalogError(f"Catalog {self.path} has no product list")

        try:
            return [CatalogProduct.from_dict(item) for item in items]
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogError(f"Malformed product in catalog {self.path}: {e}") from e
