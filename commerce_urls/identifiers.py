"""Splitting of combined product identifiers.

Product lists are configured with combined tokens such as ``"MJ01"`` or
``"MJ01#MJ01-XS-Orange"`` (base sku and variant sku). The tokens may also be
full resource paths like ``"/var/commerce/products/MJ01#MJ01-XS-Orange"``, in
which case only the last segment is used. Every list consumer must split the
token before grouping or looking anything up: the base sku is the grouping
key, the variant sku names one purchasable variant.
"""

from typing import Iterable, List, Optional, Tuple

from commerce_urls.config import VARIANT_SEPARATOR

__all__ = ["split_combined_sku", "to_base_skus"]


def split_combined_sku(token: str) -> Tuple[str, Optional[str]]:
    """Split a combined token into (base_sku, variant_sku).

    Examples:
        >>> split_combined_sku("MJ01#MJ01-XS-Orange")
        ('MJ01', 'MJ01-XS-Orange')
        >>> split_combined_sku("/var/commerce/products/MJ01")
        ('MJ01', None)
    """
    if token.startswith("/"):
        token = token.rsplit("/", 1)[-1]

    base_sku, separator, variant_sku = token.partition(VARIANT_SEPARATOR)
    if not separator or not variant_sku:
        return base_sku, None
    return base_sku, variant_sku


def to_base_skus(tokens: Iterable[str]) -> List[str]:
    """Distinct base skus of the given tokens, in first-seen order."""
    base_skus: List[str] = []
    seen = set()
    for token in tokens:
        base_sku, _ = split_combined_sku(token)
        if base_sku in seen:
            continue
        seen.add(base_sku)
        base_skus.append(base_sku)
    return base_skus
