"""SQLite storage for inventory snapshots."""

from .schema import ensure_schema
from .stock import StockDB

__all__ = [
    "StockDB",
    "ensure_schema",
]
