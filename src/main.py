import argparse
import logging
import sys

import requests

from utils import setup_logging
from database import DatabaseConfig
from storefront.backend import make_catalog, make_collaborators
from storefront.catalog import (
    ImportAbortedError,
    SpreadsheetParseError,
    UnsupportedFileTypeError,
    load_image_files,
    load_import_rows,
    preview_frame,
    run_import,
    write_sample_csv,
)
from storefront.persistence import repositories as repo
from browse import CatalogView, FilterState, active_filter_count
from browse.constants import DEFAULT_PRICE_RANGE, SORT_KEYS
from browse.normalize import MATERIAL_LABELS, OCCASION_LABELS, TYPE_LABELS

LOG_FILE = "storefront.log"


def cmd_sample_csv(args, config):
    path = write_sample_csv(args.output)
    print(f"Sample CSV written to {path}")
    return 0


def cmd_import(args, config):
    uploader, catalog = make_collaborators(config)
    images = load_image_files(args.images) if args.images else None
    try:
        rows = load_import_rows(args.spreadsheet, store=catalog, images=images)
    except (SpreadsheetParseError, UnsupportedFileTypeError) as e:
        logging.error(str(e))
        return 2

    print(preview_frame(rows).to_string(index=False))
    for row in rows:
        for error in row.errors:
            print(f"Row {row.row_index} ({row.name}): {error}")
        for warning in row.warnings:
            print(f"Row {row.row_index} ({row.name}) warning: {warning}")

    valid = sum(1 for r in rows if r.is_valid)
    logging.info(f"Found {len(rows)} products: {valid} valid, {len(rows) - valid} with errors")
    if args.dry_run:
        return 0
    if not valid:
        logging.error("No valid products to upload. Please fix the errors in your data")
        return 1

    def progress(fraction):
        logging.info(f"Uploading... {round(fraction * 100)}%")

    try:
        report = run_import(
            rows,
            uploader,
            catalog,
            acting_user=args.user,
            progress=progress,
            bucket=config.image_bucket,
        )
    except ImportAbortedError as e:
        logging.error(f"Upload failed: {e} ({e.report.message} before the failure)")
        return 1

    print(report.message)
    print(f"  with images: {len(report.with_images)}")
    print(f"  without images: {len(report.without_images)}")
    for row in report.degraded:
        print(f"  missing some images: {row.name} ({len(row.image_urls)}/{len(row.images)})")
    for row in report.failed:
        print(f"  failed: {row.name or f'row {row.row_index}'} - {', '.join(row.errors)}")
    return 0


def _labels(values, labels):
    # CLI accepts stored enum values ("rose-gold") as well as sidebar labels
    return [labels.get(v, v) for v in values]


def cmd_browse(args, config):
    store = make_catalog(config)
    low = args.min_price if args.min_price is not None else DEFAULT_PRICE_RANGE[0]
    high = args.max_price if args.max_price is not None else DEFAULT_PRICE_RANGE[1]
    filters = FilterState(
        search=args.search,
        materials=_labels(args.material, MATERIAL_LABELS),
        types=_labels(args.type, TYPE_LABELS),
        occasions=_labels(args.occasion, OCCASION_LABELS),
        collections=args.collection,
        price_range=(low, high),
        sort_by=args.sort,
    )
    view = CatalogView.from_store(store, filters)
    print(
        f"{len(view.filtered_items)} of {len(view.items)} products "
        f"({active_filter_count(filters)} filters active)"
    )
    for item in view.filtered_items:
        print(f"{item.name} | {item.type} | {item.material} | {item.collection} | {item.price_range}")
    return 0


def cmd_stock(args, config):
    store = make_catalog(config)
    if args.action == "list":
        for p in repo.list_products(store):
            print(f"{p.id} | {p.name} | {p.stock} | {repo.stock_status(p.stock)}")
        print(f"Low stock: {len(repo.low_stock_products(store))}")
        print(f"Out of stock: {len(repo.out_of_stock_products(store))}")
        return 0
    try:
        if args.action == "set":
            item = repo.update_stock(store, args.product_id, args.value, acting_user=args.user)
        else:
            item = repo.adjust_stock(store, args.product_id, args.value, acting_user=args.user)
    except KeyError:
        logging.error(f"Product not found: {args.product_id}")
        return 1
    except ValueError as e:
        logging.error(str(e))
        return 1
    print(f"{item.name}: {item.stock}")
    return 0


def cmd_collection(args, config):
    store = make_catalog(config)
    collection = store.create_collection(args.name, handle=args.handle, description=args.description)
    print(f"Created collection {collection.name} ({collection.handle}) id={collection.id}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Jewelry catalog tools")
    parser.add_argument("--config", help="Path to a key=value config file (default: environment)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("sample-csv", help="Write the sample import spreadsheet")
    p.add_argument("--output", default="sample-products.csv")
    p.set_defaults(func=cmd_sample_csv)

    p = sub.add_parser("import", help="Bulk import products from CSV/Excel")
    p.add_argument("spreadsheet")
    p.add_argument("--images", help="Directory of product images to auto-match")
    p.add_argument("--user", help="Acting user id recorded as created_by")
    p.add_argument("--dry-run", action="store_true", help="Validate and preview only")
    p.set_defaults(func=cmd_import)

    p = sub.add_parser("browse", help="List products through the catalog filters")
    p.add_argument("--search", default="")
    p.add_argument("--material", action="append", default=[])
    p.add_argument("--type", action="append", default=[])
    p.add_argument("--occasion", action="append", default=[])
    p.add_argument("--collection", action="append", default=[])
    p.add_argument("--min-price", type=float)
    p.add_argument("--max-price", type=float)
    p.add_argument("--sort", choices=SORT_KEYS, default="featured")
    p.set_defaults(func=cmd_browse)

    p = sub.add_parser("stock", help="Stock management")
    p.add_argument("action", choices=["list", "set", "adjust"])
    p.add_argument("product_id", nargs="?")
    p.add_argument("value", nargs="?", type=int)
    p.add_argument("--user")
    p.set_defaults(func=cmd_stock)

    p = sub.add_parser("collection", help="Create a collection")
    p.add_argument("name")
    p.add_argument("--handle")
    p.add_argument("--description")
    p.set_defaults(func=cmd_collection)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "stock" and args.action != "list" and (
        args.product_id is None or args.value is None
    ):
        parser.error("stock set/adjust need a product id and a value")
    setup_logging(LOG_FILE)
    config = DatabaseConfig.from_config_file(args.config) if args.config else DatabaseConfig.from_env()
    try:
        return args.func(args, config)
    except ValueError as e:
        logging.error(str(e))
        return 2
    except requests.exceptions.RequestException as e:
        logging.error(f"Catalog backend request failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
