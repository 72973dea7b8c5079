"""Command-line interface for formatting and parsing product URLs."""

import argparse
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv

from commerce_urls.catalog import CatalogError, JsonCatalog
from commerce_urls.config import (
    ConfigurationError,
    get_catalog_path,
    get_log_level,
    get_product_page,
    get_product_url_format_name,
)
from commerce_urls.formats import PRODUCT_URL_FORMATS, get_product_url_format
from commerce_urls.logging_config import get_logger, setup_logging
from commerce_urls.models import Params, RequestPathInfo
from commerce_urls.product_list import ProductCarousel

__all__ = ["main", "parse_args", "build_parser"]

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commerce-urls",
        description="Format and parse commerce product URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the available URL formats
  python -m commerce_urls.cli --list-formats

  # Format a product URL with the deployment's format (COMMERCE_URL_FORMAT)
  python -m commerce_urls.cli format --sku MJ01 --url-path men/tops/jackets/mj01

  # Parse a request path with the url-path format
  python -m commerce_urls.cli --format url-path parse /products/product-page.html/men/tops/mj01.html

  # Render a product list from an exported catalog
  python -m commerce_urls.cli list MJ01 "MJ01#MJ01-XS-Orange" WJ12 --catalog data/catalog.json
        """,
    )

    parser.add_argument(
        "--format",
        dest="url_format",
        help="URL format name or pattern (default: $COMMERCE_URL_FORMAT or sku-url-path)",
    )
    parser.add_argument(
        "--page",
        help="Product page path (default: $COMMERCE_PRODUCT_PAGE)",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="List available URL formats and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to the console",
    )

    subparsers = parser.add_subparsers(dest="command")

    format_parser = subparsers.add_parser("format", help="Render a product URL")
    format_parser.add_argument("--sku")
    format_parser.add_argument("--url-key")
    format_parser.add_argument("--url-path")
    format_parser.add_argument(
        "--url-rewrite",
        action="append",
        default=[],
        metavar="URL",
        help="Rewrite candidate, may be repeated (tried in order)",
    )
    format_parser.add_argument("--variant-sku")

    parse_parser = subparsers.add_parser("parse", help="Parse a request path into parameters")
    parse_parser.add_argument("path", help="Request path or URL, e.g. /page.html/MJ01.html")

    list_parser = subparsers.add_parser("list", help="Render a product list from a JSON catalog")
    list_parser.add_argument("skus", nargs="+", help="Combined skus (base or base#variant)")
    list_parser.add_argument(
        "--catalog",
        help="JSON catalog path (default: $COMMERCE_CATALOG_PATH)",
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def list_formats() -> None:
    print("Available URL formats:")
    for name, url_format in PRODUCT_URL_FORMATS.items():
        print(f"  {name}: {url_format.pattern}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level="DEBUG" if args.verbose else get_log_level(),
        log_to_file=False,
    )

    if args.list_formats:
        list_formats()
        return 0

    if args.command is None:
        parser.print_help()
        return 1

    try:
        url_format = get_product_url_format(args.url_format or get_product_url_format_name())
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    page = args.page or get_product_page()

    if args.command == "format":
        params = Params(
            page=page,
            sku=args.sku,
            url_key=args.url_key,
            url_path=args.url_path,
            url_rewrites=args.url_rewrite,
            variant_sku=args.variant_sku,
        )
        print(url_format.format(params))
        return 0

    if args.command == "parse":
        params = url_format.parse(RequestPathInfo.from_path(args.path))
        print(json.dumps(params.to_dict(), indent=2, ensure_ascii=False))
        return 0

    catalog_path = args.catalog or get_catalog_path()
    if not catalog_path:
        print("Error: no catalog given (use --catalog or COMMERCE_CATALOG_PATH)", file=sys.stderr)
        return 2

    try:
        catalog = JsonCatalog(catalog_path)
    except (FileNotFoundError, CatalogError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    carousel = ProductCarousel(args.skus, catalog, url_format=url_format, page=page)
    items = carousel.get_products()
    for item in items:
        label = item.name or item.sku
        print(f"{item.sku}\t{label}\t{item.url}")

    logger.info(f"Rendered {len(items)} of {len(args.skus)} configured products")
    return 0


if __name__ == "__main__":
    sys.exit(main())
