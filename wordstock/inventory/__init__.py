"""Inventory line items, aggregation and CSV import."""

from .aggregator import InventoryAggregator
from .importer import StockImporter
from .models import LineItem, normalize_code
from .money import format_amount, from_cents, parse_price, to_cents

__all__ = [
    "InventoryAggregator",
    "StockImporter",
    "LineItem",
    "normalize_code",
    "parse_price",
    "to_cents",
    "from_cents",
    "format_amount",
]
