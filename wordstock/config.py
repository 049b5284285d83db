"""TOML configuration loader for wordstock."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from logging import getLevelName
from pathlib import Path

from .errors import InvalidArgument

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class TextConfig:
    top_n: int = 5
    encoding: str = "utf-8"


@dataclass
class InventoryConfig:
    code_field: str = "Code"
    price_field: str = "UnitPrice"
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass
class DatabaseConfig:
    enabled: bool = False
    path: str = "~/.config/wordstock/stock.db"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class WordstockConfig:
    text: TextConfig = field(default_factory=TextConfig)
    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> WordstockConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The database path and log level can be overridden via environment
    variables (WORDSTOCK_DB_PATH, WORDSTOCK_LOG_LEVEL).
    """
    raw: dict = {}

    if path is not None:
        p = Path(path).expanduser()
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                try:
                    raw = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise InvalidArgument(f"Invalid config file {p}: {e}") from e

    txt = raw.get("text", {})
    inv = raw.get("inventory", {})
    dbs = raw.get("database", {})
    lg = raw.get("logging", {})

    top_n = txt.get("top_n", 5)
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 0:
        raise InvalidArgument(f"text.top_n must be a non-negative integer: {top_n!r}")

    # Environment variable takes precedence for deploy-specific settings
    db_path = os.environ.get("WORDSTOCK_DB_PATH", "") or dbs.get(
        "path", "~/.config/wordstock/stock.db"
    )
    log_level = str(
        os.environ.get("WORDSTOCK_LOG_LEVEL", "") or lg.get("level", "WARNING")
    ).upper()
    if not isinstance(getLevelName(log_level), int):
        raise InvalidArgument(f"logging.level is not a known level: {log_level!r}")

    return WordstockConfig(
        text=TextConfig(
            top_n=top_n,
            encoding=txt.get("encoding", "utf-8"),
        ),
        inventory=InventoryConfig(
            code_field=inv.get("code_field", "Code"),
            price_field=inv.get("price_field", "UnitPrice"),
            delimiter=inv.get("delimiter", ","),
            encoding=inv.get("encoding", "utf-8"),
        ),
        database=DatabaseConfig(
            enabled=dbs.get("enabled", False),
            path=db_path,
        ),
        logging=LoggingConfig(level=log_level),
    )
