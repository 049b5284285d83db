"""Stock snapshot storage for inventory line items."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from ..inventory.money import from_cents
from .schema import ensure_schema

if TYPE_CHECKING:
    from ..inventory import InventoryAggregator, LineItem

logger = logging.getLogger(__name__)


class StockDB:
    """Manages the line_items table. Prices are stored as integer cents."""

    def __init__(self, db_path: str | Path = "~/.config/wordstock/stock.db") -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = ensure_schema(self._db_path)
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def save_items(self, items: Iterable[LineItem], source: str = "") -> list[int]:
        """Insert line items in a single transaction.

        Returns:
            List of inserted row IDs.
        """
        conn = self._get_conn()
        ids: list[int] = []
        with conn:
            for item in items:
                cur = conn.execute(
                    "INSERT INTO line_items (code, price_cents, source) VALUES (?, ?, ?)",
                    (item.code, item.cents, source or None),
                )
                ids.append(cur.lastrowid)
        logger.info("Saved %d line item(s) to %s", len(ids), self._db_path)
        return ids

    def get_items(self) -> list[dict]:
        """Return all stored items in insertion order."""
        conn = self._get_conn()
        rows = conn.execute("SELECT * FROM line_items ORDER BY id").fetchall()
        return [dict(r) for r in rows]

    def load_into(self, aggregator: InventoryAggregator) -> int:
        """Append every stored item to ``aggregator``.

        Returns:
            Number of items added.
        """
        rows = [
            {"code": r["code"], "unit_price": from_cents(r["price_cents"])}
            for r in self.get_items()
        ]
        return aggregator.load_from_rows(rows)

    def count_by_code(self) -> dict[str, int]:
        conn = self._get_conn()
        rows = conn.execute(
            "SELECT code, COUNT(*) AS n FROM line_items GROUP BY code ORDER BY MIN(id)"
        ).fetchall()
        return {r["code"]: r["n"] for r in rows}

    def total_value_cents(self) -> int:
        conn = self._get_conn()
        row = conn.execute(
            "SELECT COALESCE(SUM(price_cents), 0) AS total FROM line_items"
        ).fetchone()
        return row["total"]

    def clear(self) -> int:
        """Delete all stored items. Returns the number of rows removed."""
        conn = self._get_conn()
        with conn:
            cur = conn.execute("DELETE FROM line_items")
        return cur.rowcount
