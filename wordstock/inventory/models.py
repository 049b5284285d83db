"""Data model for inventory line items."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ..errors import InvalidArgument, InvalidCode, InvalidPrice
from .money import format_amount, from_cents, parse_price, to_cents


def normalize_code(raw) -> str:
    """Trim an item code.

    Raises:
        InvalidCode: If the code is missing or blank after trimming.
    """
    if raw is None:
        raise InvalidCode("Code is missing")
    code = str(raw).strip()
    if not code:
        raise InvalidCode(f"Code is empty: {raw!r}")
    return code


@dataclass
class LineItem:
    """A single inventory record: a code and a unit price in cents."""

    code: str
    cents: int = 0

    def __post_init__(self) -> None:
        self.code = normalize_code(self.code)
        self.cents = _check_cents(self.cents)

    @classmethod
    def create(cls, code: object, raw_price: str | int | float | Decimal) -> LineItem:
        """Build an item from a raw code and a raw price (str, int, float, Decimal)."""
        return cls(code=code, cents=to_cents(parse_price(raw_price)))

    @property
    def unit_price(self) -> Decimal:
        return from_cents(self.cents)

    @unit_price.setter
    def unit_price(self, value) -> None:
        self.cents = to_cents(parse_price(value))

    @property
    def price_in_cents(self) -> int:
        return self.cents

    @price_in_cents.setter
    def price_in_cents(self, cents: int) -> None:
        self.cents = _check_cents(cents)

    def update_price(self, new_price) -> None:
        """Replace the unit price, rounding half up to the cent."""
        self.unit_price = new_price

    def apply_discount(self, percent) -> Decimal:
        """Reduce the price by ``percent`` (0-100) and return the new price.

        12.34 at 25% off is 9.255, which rounds half up to 9.26.
        """
        try:
            pct = Decimal(str(percent).strip())
        except InvalidOperation:
            raise InvalidArgument(f"Discount is not a number: {percent!r}") from None
        if not pct.is_finite() or not 0 <= pct <= 100:
            raise InvalidArgument(f"Discount must be between 0 and 100: {percent!r}")

        self.unit_price = self.unit_price * (100 - pct) / 100
        return self.unit_price

    def __str__(self) -> str:
        return f"Code: {self.code}, Unit price: {format_amount(self.unit_price)}"


def _check_cents(cents) -> int:
    if isinstance(cents, bool) or not isinstance(cents, int):
        raise InvalidPrice(f"Cents must be an integer: {cents!r}")
    if cents < 0:
        raise InvalidPrice(f"Cents must not be negative: {cents!r}")
    return cents
