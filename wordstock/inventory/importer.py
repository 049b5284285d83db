"""CSV stock file loading into an InventoryAggregator."""

from __future__ import annotations

import csv
import logging
from decimal import Decimal
from pathlib import Path

from .aggregator import InventoryAggregator
from .models import LineItem

logger = logging.getLogger(__name__)


class StockImporter:
    """Reads stock CSV files (header row required) into an aggregator.

    Blank cells count as missing, so rows with an empty code or price are
    skipped rather than rejected.
    """

    def __init__(
        self,
        aggregator: InventoryAggregator | None = None,
        code_field: str = "Code",
        price_field: str = "UnitPrice",
        delimiter: str = ",",
        encoding: str = "utf-8",
    ) -> None:
        self._aggregator = aggregator if aggregator is not None else InventoryAggregator()
        self._code_field = code_field
        self._price_field = price_field
        self._delimiter = delimiter
        self._encoding = encoding

    @classmethod
    def from_config(cls, config, aggregator: InventoryAggregator | None = None) -> StockImporter:
        """Build an importer from an InventoryConfig."""
        return cls(
            aggregator=aggregator,
            code_field=config.code_field,
            price_field=config.price_field,
            delimiter=config.delimiter,
            encoding=config.encoding,
        )

    @property
    def aggregator(self) -> InventoryAggregator:
        return self._aggregator

    def load_csv(self, path: str | Path) -> int:
        """Load one CSV file.

        Returns:
            Number of items added.

        Raises:
            FileNotFoundError: If the file does not exist.
            InvalidCode, InvalidPrice: If a row has a malformed value.
        """
        p = Path(path).expanduser()
        if not p.exists():
            raise FileNotFoundError(f"Stock file not found: {p}")

        with open(p, newline="", encoding=self._encoding) as f:
            reader = csv.DictReader(f, delimiter=self._delimiter)
            rows = [_blank_to_none(row) for row in reader]

        added = self._aggregator.load_from_rows(
            rows,
            code_fields=(self._code_field,),
            price_fields=(self._price_field,),
        )
        logger.info("Loaded %d item(s) from %s", added, p)
        return added

    def load_files(self, paths: list[str | Path]) -> int:
        """Load several CSV files in order. Returns the total added."""
        return sum(self.load_csv(path) for path in paths)

    def total_value(self) -> Decimal:
        return self._aggregator.total_value()

    def count_by_code(self) -> dict[str, int]:
        return self._aggregator.count_by_code()

    def all(self) -> list[LineItem]:
        return self._aggregator.all()


def _blank_to_none(row: dict) -> dict:
    return {key: (None if value == "" else value) for key, value in row.items()}
