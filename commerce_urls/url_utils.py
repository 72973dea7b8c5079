"""String helpers shared by the URL formats."""

from typing import Optional, Sequence, Tuple

from commerce_urls.config import CONTENT_NODE, HTML_EXTENSION, HTML_EXTENSION_AND_SUFFIX

__all__ = [
    "HTML_EXTENSION",
    "HTML_EXTENSION_AND_SUFFIX",
    "select_url_path",
    "get_url_key",
    "optional_anchor",
    "placeholder",
    "value_or_placeholder",
    "remove_content_node",
    "strip_suffix",
    "split_url_path",
]


def select_url_path(
    url_path: Optional[str],
    url_rewrites: Optional[Sequence[str]],
    url_key: Optional[str],
) -> Optional[str]:
    """Pick the best available path for an item.

    An explicit url_path always wins. Otherwise the first non-empty rewrite is
    used; when a url_key is known only rewrites ending with that key are
    candidates. Returns None when nothing matches (the url_key itself is never
    returned here, that fallback is up to the caller).

    Args:
        url_path: Explicit path, e.g. "gear/bags/bag-x"
        url_rewrites: Rewrite urls known for the item, in catalog order
        url_key: Key the selected rewrite must end with, if known

    Returns:
        Selected path without ".html", or None
    """
    if url_path:
        return url_path

    for rewrite in url_rewrites or []:
        candidate = _remove_html_extension(rewrite or "")
        if not candidate:
            continue
        if url_key and candidate.rsplit("/", 1)[-1] != url_key:
            continue
        return candidate

    return None


def get_url_key(url_path: Optional[str], url_key: Optional[str]) -> Optional[str]:
    """Return url_key, or the last segment of url_path when no key is set."""
    if url_key:
        return url_key
    if url_path:
        return url_path.rsplit("/", 1)[-1] or None
    return None


def optional_anchor(variant_sku: Optional[str]) -> str:
    return "#" + variant_sku if variant_sku else ""


def placeholder(name: str) -> str:
    return "{{" + name + "}}"


def value_or_placeholder(value: Optional[str], name: str) -> str:
    """Render a field, keeping "{{name}}" literally when it is missing."""
    return value if value else placeholder(name)


def remove_content_node(resource_path: Optional[str]) -> Optional[str]:
    if resource_path and resource_path.endswith(CONTENT_NODE):
        return resource_path[: -len(CONTENT_NODE)]
    return resource_path


def strip_suffix(suffix: Optional[str]) -> Optional[str]:
    """Remove the trailing ".html" and one leading "/" from a request suffix.

    Returns None for a missing or blank suffix.
    """
    if suffix is None:
        return None
    suffix = _remove_html_extension(suffix)
    if suffix.startswith("/"):
        suffix = suffix[1:]
    return suffix if suffix.strip() else None


def split_url_path(url_path: str) -> Tuple[Optional[str], Optional[str]]:
    """Split "a/b/c" into the url key "c" and its category url key "b".

    Only the immediate parent is kept; deeper ancestors are discarded.
    """
    segments = url_path.split("/")
    url_key = segments[-1]
    category_url_key = segments[-2] if len(segments) > 1 else None
    return url_key or None, category_url_key or None


def _remove_html_extension(value: str) -> str:
    if value.endswith(HTML_EXTENSION):
        return value[: -len(HTML_EXTENSION)]
    return value
