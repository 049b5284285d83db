"""CLI entry point for wordstock."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv

from .config import WordstockConfig, load_config
from .db import StockDB
from .errors import WordstockError
from .inventory import InventoryAggregator, StockImporter, format_amount
from .text import WordFrequencyPipeline, read_texts


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="wordstock",
        description="Word frequency ranking and stock CSV totals",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=os.environ.get("WORDSTOCK_CONFIG"),
        help="Path to a TOML config file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # words
    words_parser = sub.add_parser("words", help="Show the most frequent words")
    words_parser.add_argument("files", nargs="+", help="Text files ('-' for stdin)")
    words_parser.add_argument(
        "--top", "-n", type=int, default=None, help="Number of words to show"
    )
    words_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # stock
    stock_parser = sub.add_parser("stock", help="Load stock CSV files and report totals")
    stock_parser.add_argument("files", nargs="+", help="CSV files with a header row")
    stock_parser.add_argument("--json", action="store_true", help="Output as JSON")
    stock_parser.add_argument(
        "--save",
        action="store_true",
        help="Save loaded items to the database (always on with database.enabled)",
    )

    # snapshot
    snap_parser = sub.add_parser("snapshot", help="Report on saved stock items")
    snap_parser.add_argument("--json", action="store_true", help="Output as JSON")
    snap_parser.add_argument(
        "--clear", action="store_true", help="Delete all saved items"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config.logging.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        match args.command:
            case "words":
                _cmd_words(config, args)
            case "stock":
                _cmd_stock(config, args)
            case "snapshot":
                _cmd_snapshot(config, args)
    except (WordstockError, FileNotFoundError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_words(config: WordstockConfig, args) -> None:
    n = args.top if args.top is not None else config.text.top_n

    pipeline = WordFrequencyPipeline()
    for text in read_texts(args.files, encoding=config.text.encoding):
        pipeline.feed(text)
    ranked = pipeline.top(n)

    if args.json:
        data = [{"word": word, "count": count} for word, count in ranked]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not ranked:
        print("No words found.")
        return
    for word, count in ranked:
        print(f"{word}: {count}")


def _cmd_stock(config: WordstockConfig, args) -> None:
    importer = StockImporter.from_config(config.inventory)
    importer.load_files(args.files)
    aggregator = importer.aggregator

    _print_report(aggregator, as_json=args.json)

    if args.save or config.database.enabled:
        db = StockDB(db_path=config.database.path)
        try:
            ids = db.save_items(aggregator.items, source=",".join(args.files))
        finally:
            db.close()
        if not args.json:
            print(f"Saved {len(ids)} item(s) to {config.database.path}")


def _cmd_snapshot(config: WordstockConfig, args) -> None:
    db = StockDB(db_path=config.database.path)
    try:
        if args.clear:
            removed = db.clear()
            print(f"Deleted {removed} item(s)")
            return
        aggregator = InventoryAggregator()
        db.load_into(aggregator)
    finally:
        db.close()

    _print_report(aggregator, as_json=args.json)


def _print_report(aggregator: InventoryAggregator, as_json: bool) -> None:
    if as_json:
        data = {
            "items": len(aggregator),
            "total_value": format_amount(aggregator.total_value()),
            "count_by_code": aggregator.count_by_code(),
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return

    print(f"Items loaded: {len(aggregator)}")
    print(f"Total value of stock: {format_amount(aggregator.total_value())}")
    print("Count by code:")
    for code, n in aggregator.count_by_code().items():
        print(f"  {code}: {n}")
