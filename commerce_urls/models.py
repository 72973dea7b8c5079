"""Data models for URL parameters and catalog records."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

from commerce_urls.config import HTML_EXTENSION

__all__ = [
    "Params",
    "RequestPathInfo",
    "ProductVariant",
    "CatalogProduct",
    "ProductListItem",
]


@dataclass
class Params:
    """All fields a URL format may read (format) or write (parse).

    Every field is optional; None means unknown. ``category_url_key`` is only
    ever set by parsing.
    """

    page: Optional[str] = None
    sku: Optional[str] = None
    url_key: Optional[str] = None
    url_path: Optional[str] = None
    category_url_key: Optional[str] = None
    variant_sku: Optional[str] = None
    variant_url_key: Optional[str] = None

    # Candidate paths known for the item, tried in order
    url_rewrites: List[str] = field(default_factory=list)

    def copy(self) -> "Params":
        return replace(self, url_rewrites=list(self.url_rewrites))

    def to_dict(self) -> Dict[str, Any]:
        """Non-empty fields as a plain dict (for logging and the CLI)."""
        return {
            key: value
            for key, value in self.__dict__.items()
            if value is not None and value != []
        }


@dataclass
class RequestPathInfo:
    """The page resource path of a request and the suffix that follows it."""

    resource_path: Optional[str] = None
    suffix: Optional[str] = None

    @classmethod
    def from_path(cls, path: str) -> "RequestPathInfo":
        """Split a request path or URL such as ``/page.html/sku.html?x=1``.

        The resource path ends at the first ``.html``; anything after the
        extension that starts with ``/`` is the suffix. Query string and
        fragment are dropped.
        """
        request_path = urlsplit(path or "").path
        idx = request_path.find(HTML_EXTENSION)
        if idx < 0:
            return cls(resource_path=request_path or None)

        rest = request_path[idx + len(HTML_EXTENSION):]
        return cls(
            resource_path=request_path[:idx] or None,
            suffix=rest if rest.startswith("/") and len(rest) > 1 else None,
        )


@dataclass
class ProductVariant:
    """A purchasable variant of a configurable product."""

    sku: str
    name: Optional[str] = None
    thumbnail: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductVariant":
        # GraphQL nests the variant record under "product"
        product = data.get("product", data)
        return cls(
            sku=product["sku"],
            name=product.get("name"),
            thumbnail=_thumbnail_url(product.get("thumbnail")),
        )


@dataclass
class CatalogProduct:
    """A base product record as returned by the catalog.

    ``variants`` is None for simple products and a list (possibly empty) for
    configurable products.
    """

    sku: str
    name: Optional[str] = None
    thumbnail: Optional[str] = None
    url_key: Optional[str] = None
    url_path: Optional[str] = None
    url_rewrites: List[str] = field(default_factory=list)
    variants: Optional[List[ProductVariant]] = None

    @property
    def is_configurable(self) -> bool:
        return self.variants is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogProduct":
        """Build a record from catalog JSON (GraphQL shape or flat strings)."""
        rewrites = []
        for rewrite in data.get("url_rewrites") or []:
            url = rewrite.get("url") if isinstance(rewrite, dict) else rewrite
            if url:
                rewrites.append(url)

        variants = data.get("variants")
        return cls(
            sku=data["sku"],
            name=data.get("name"),
            thumbnail=_thumbnail_url(data.get("thumbnail")),
            url_key=data.get("url_key"),
            url_path=data.get("url_path"),
            url_rewrites=rewrites,
            variants=[ProductVariant.from_dict(v) for v in variants] if variants is not None else None,
        )


@dataclass
class ProductListItem:
    """One display item of an assembled product list."""

    sku: str
    url: str
    name: Optional[str] = None
    thumbnail: Optional[str] = None
    variant_sku: Optional[str] = None
    url_key: Optional[str] = None
    url_path: Optional[str] = None


def _thumbnail_url(thumbnail: Any) -> Optional[str]:
    if isinstance(thumbnail, dict):
        return thumbnail.get("url")
    return thumbnail
