"""In-memory inventory of line items with total and per-code queries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Iterable, Iterator

from .models import LineItem
from .money import from_cents

logger = logging.getLogger(__name__)

# Field names accepted on incoming rows, checked in order
CODE_FIELDS: tuple[str, ...] = ("code", "Code")
PRICE_FIELDS: tuple[str, ...] = ("unit_price", "unitPrice", "UnitPrice", "price", "Price")


class InventoryAggregator:
    """Collects line items and answers total-value and count queries.

    Not thread-safe; callers sharing an instance must serialize writes.
    """

    def __init__(self) -> None:
        self._items: list[LineItem] = []

    def add_item(self, code: object, raw_price: str | int | float | Decimal) -> LineItem:
        """Validate a record and append it.

        Raises:
            InvalidCode: If the code is blank after trimming.
            InvalidPrice: If the price is not a number or is negative.
        """
        item = LineItem.create(code, raw_price)
        self._items.append(item)
        logger.debug("Added %s", item)
        return item

    def load_from_rows(
        self,
        rows: Iterable[Any],
        code_fields: tuple[str, ...] = CODE_FIELDS,
        price_fields: tuple[str, ...] = PRICE_FIELDS,
    ) -> int:
        """Add an item per row. Rows missing a code or price are skipped.

        Rows may be mappings or objects with attributes. A field that is
        present but invalid raises, and in that case no row from this call
        is added.

        Returns:
            Number of items added.
        """
        pending: list[LineItem] = []
        skipped = 0
        for index, row in enumerate(rows):
            code = _get_field(row, code_fields)
            price = _get_field(row, price_fields)
            if code is None or price is None:
                skipped += 1
                logger.debug("Skipping row %d with missing code or price: %r", index, row)
                continue
            pending.append(LineItem.create(code, price))

        self._items.extend(pending)
        if skipped:
            logger.info("Loaded %d row(s), skipped %d incomplete row(s)", len(pending), skipped)
        return len(pending)

    def total_value_cents(self) -> int:
        return sum(item.cents for item in self._items)

    def total_value(self) -> Decimal:
        """Sum of all unit prices. Zero for an empty inventory."""
        return from_cents(self.total_value_cents())

    def count_by_code(self) -> dict[str, int]:
        """Number of items per code, in first-seen order."""
        counts: dict[str, int] = {}
        for item in self._items:
            counts[item.code] = counts.get(item.code, 0) + 1
        return counts

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def all(self) -> list[LineItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(list(self._items))


def _get_field(row: Any, names: tuple[str, ...]) -> Any:
    """Return the first non-None value among ``names`` on a row, else None."""
    for name in names:
        if isinstance(row, Mapping):
            value = row.get(name)
        else:
            value = getattr(row, name, None)
        if value is not None:
            return value
    return None
