"""Word frequency ranking and stock inventory aggregation."""

from .config import (
    DatabaseConfig,
    InventoryConfig,
    LoggingConfig,
    TextConfig,
    WordstockConfig,
    load_config,
)
from .errors import InvalidArgument, InvalidCode, InvalidPrice, WordstockError
from .inventory import InventoryAggregator, LineItem, StockImporter
from .text import FrequencyTable, WordFrequencyPipeline, count, tokenize, top_n

__all__ = [
    "WordFrequencyPipeline",
    "FrequencyTable",
    "tokenize",
    "count",
    "top_n",
    "InventoryAggregator",
    "LineItem",
    "StockImporter",
    "WordstockError",
    "InvalidArgument",
    "InvalidCode",
    "InvalidPrice",
    "WordstockConfig",
    "TextConfig",
    "InventoryConfig",
    "DatabaseConfig",
    "LoggingConfig",
    "load_config",
]
