"""Product URL formats.

Each format renders a ``Params`` record into a URL of one fixed shape and
parses request paths of that shape back into ``Params``:

    sku-url-path  {{page}}.html/{{sku}}/{{url_path}}.html#{{variant_sku}}
    sku           {{page}}.html/{{sku}}.html#{{variant_sku}}
    url-key       {{page}}.html/{{url_key}}.html#{{variant_sku}}
    url-path      {{page}}.html/{{url_path}}.html#{{variant_sku}}

Missing fields are rendered as literal "{{field}}" placeholders so that a
misconfigured template stays recognisable in the output.

Formats hold no state; the module-level instances are shared by all callers.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol

from commerce_urls.config import ConfigurationError
from commerce_urls.models import Params, RequestPathInfo
from commerce_urls.url_utils import (
    HTML_EXTENSION,
    HTML_EXTENSION_AND_SUFFIX,
    get_url_key,
    optional_anchor,
    remove_content_node,
    select_url_path,
    split_url_path,
    strip_suffix,
    value_or_placeholder,
)

__all__ = [
    "ProductUrlFormat",
    "ProductPageWithSkuAndUrlPath",
    "ProductPageWithSku",
    "ProductPageWithUrlKey",
    "ProductPageWithUrlPath",
    "PRODUCT_URL_FORMATS",
    "get_product_url_format",
    "list_product_url_formats",
]

QueryParameters = Optional[Mapping[str, Any]]


class ProductUrlFormat(Protocol):
    name: str
    pattern: str

    def format(self, params: Params) -> str:
        ...

    def parse(self, path_info: Optional[RequestPathInfo], parameters: QueryParameters = None) -> Params:
        ...

    def retain_parsable_parameters(self, params: Params) -> Params:
        ...


def _page_only(path_info: Optional[RequestPathInfo]) -> Params:
    params = Params()
    if path_info is not None:
        params.page = remove_content_node(path_info.resource_path)
    return params


def _prefix(params: Params) -> str:
    return value_or_placeholder(params.page, "page") + HTML_EXTENSION_AND_SUFFIX


class ProductPageWithSkuAndUrlPath:
    """Hybrid format: the sku followed by the full category url path."""

    name = "sku-url-path"
    pattern = "{{page}}.html/{{sku}}/{{url_path}}.html#{{variant_sku}}"

    def format(self, params: Params) -> str:
        url_key = get_url_key(params.url_path, params.url_key)
        url_path = select_url_path(params.url_path, params.url_rewrites, url_key) or url_key

        return (
            _prefix(params)
            + value_or_placeholder(params.sku, "sku")
            + ("/" + url_path if url_path else "")
            + HTML_EXTENSION
            + optional_anchor(params.variant_sku)
        )

    def parse(self, path_info: Optional[RequestPathInfo], parameters: QueryParameters = None) -> Params:
        params = _page_only(path_info)
        suffix = strip_suffix(path_info.suffix) if path_info else None
        if not suffix:
            return params

        # A suffix without a further "/" is a bare sku
        if suffix.find("/") <= 0:
            params.sku = suffix
            return params

        params.sku, url_path = suffix.split("/", 1)
        params.url_path = url_path
        params.url_key, params.category_url_key = split_url_path(url_path)
        return params

    def retain_parsable_parameters(self, params: Params) -> Params:
        return Params(
            page=params.page,
            sku=params.sku,
            url_key=params.url_key,
            url_path=params.url_path,
        )


class ProductPageWithSku:
    """The sku is the only identifying segment."""

    name = "sku"
    pattern = "{{page}}.html/{{sku}}.html#{{variant_sku}}"

    def format(self, params: Params) -> str:
        return (
            _prefix(params)
            + value_or_placeholder(params.sku, "sku")
            + HTML_EXTENSION
            + optional_anchor(params.variant_sku)
        )

    def parse(self, path_info: Optional[RequestPathInfo], parameters: QueryParameters = None) -> Params:
        params = _page_only(path_info)
        if path_info is not None:
            params.sku = strip_suffix(path_info.suffix)
        return params

    def retain_parsable_parameters(self, params: Params) -> Params:
        """Keep only what parsing this format's own URLs can recover."""
        return Params(page=params.page, sku=params.sku)


class ProductPageWithUrlKey:
    """The url key is the only identifying segment.

    This is the one format that accepts url_path as a stand-in for a missing
    url_key.
    """

    name = "url-key"
    pattern = "{{page}}.html/{{url_key}}.html#{{variant_sku}}"

    def format(self, params: Params) -> str:
        return (
            _prefix(params)
            + value_or_placeholder(params.url_key or params.url_path, "url_key")
            + HTML_EXTENSION
            + optional_anchor(params.variant_sku)
        )

    def parse(self, path_info: Optional[RequestPathInfo], parameters: QueryParameters = None) -> Params:
        params = _page_only(path_info)
        if path_info is not None:
            params.url_key = strip_suffix(path_info.suffix)
        return params

    def retain_parsable_parameters(self, params: Params) -> Params:
        return Params(page=params.page, url_key=params.url_key)


class ProductPageWithUrlPath:
    """The full category url path identifies the product."""

    name = "url-path"
    pattern = "{{page}}.html/{{url_path}}.html#{{variant_sku}}"

    def format(self, params: Params) -> str:
        url_key = get_url_key(params.url_path, params.url_key)
        url_path = select_url_path(params.url_path, params.url_rewrites, url_key) or url_key

        return (
            _prefix(params)
            + value_or_placeholder(url_path, "url_path")
            + HTML_EXTENSION
            + optional_anchor(params.variant_sku)
        )

    def parse(self, path_info: Optional[RequestPathInfo], parameters: QueryParameters = None) -> Params:
        params = _page_only(path_info)
        suffix = strip_suffix(path_info.suffix) if path_info else None
        if not suffix:
            return params

        params.url_path = suffix
        params.url_key, params.category_url_key = split_url_path(suffix)
        return params

    def retain_parsable_parameters(self, params: Params) -> Params:
        return Params(page=params.page, url_key=params.url_key, url_path=params.url_path)


PRODUCT_URL_FORMATS: Dict[str, ProductUrlFormat] = {
    url_format.name: url_format
    for url_format in (
        ProductPageWithSkuAndUrlPath(),
        ProductPageWithSku(),
        ProductPageWithUrlKey(),
        ProductPageWithUrlPath(),
    )
}


def get_product_url_format(name_or_pattern: str) -> ProductUrlFormat:
    """Look up a format by short name (e.g. "url-path") or by its pattern.

    Raises:
        ConfigurationError: If no format matches
    """
    key = (name_or_pattern or "").strip()
    if key in PRODUCT_URL_FORMATS:
        return PRODUCT_URL_FORMATS[key]

    for url_format in PRODUCT_URL_FORMATS.values():
        if url_format.pattern == key:
            return url_format

    raise ConfigurationError(
        f"Unknown product URL format '{name_or_pattern}'. "
        f"Available: {list_product_url_formats()}"
    )


def list_product_url_formats() -> List[str]:
    return list(PRODUCT_URL_FORMATS.keys())
