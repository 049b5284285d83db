"""SQLite schema for stock snapshots."""

from __future__ import annotations

import sqlite3
from pathlib import Path

# Stored in PRAGMA user_version
_SCHEMA_VERSION = 1

_DDL = """
CREATE TABLE IF NOT EXISTS line_items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    code TEXT NOT NULL,
    price_cents INTEGER NOT NULL CHECK (price_cents >= 0),
    source TEXT,
    created_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime'))
);

CREATE INDEX IF NOT EXISTS idx_line_items_code ON line_items(code);
"""


def ensure_schema(db_path: str | Path) -> sqlite3.Connection:
    """Open (or create) the stock database with the line_items table.

    Returns:
        An open sqlite3.Connection using sqlite3.Row rows.
    """
    db_path = Path(db_path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    version = conn.execute("PRAGMA user_version").fetchone()[0]
    if version < _SCHEMA_VERSION:
        conn.executescript(_DDL)
        conn.execute(f"PRAGMA user_version = {_SCHEMA_VERSION}")
        conn.commit()

    return conn
