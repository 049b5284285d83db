"""Decimal price parsing and cent conversion.

Prices are rounded to whole cents with ROUND_HALF_UP at the decimal level,
so 9.255 becomes 9.26 (925.5 cents → 926).
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from ..errors import InvalidPrice

_CENT = Decimal("0.01")
_CENTS_PER_UNIT = 100


def parse_price(raw) -> Decimal:
    """Parse a raw price into a non-negative Decimal.

    Args:
        raw: e.g. 3, 3.14, "5.67", Decimal("12.34")

    Raises:
        InvalidPrice: If the value is not a finite number or is negative.
    """
    if raw is None or isinstance(raw, bool):
        raise InvalidPrice(f"Price is not a number: {raw!r}")

    if isinstance(raw, Decimal):
        value = raw
    else:
        # str() keeps floats like 3.14 from expanding to their binary value
        text = raw.strip() if isinstance(raw, str) else str(raw)
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidPrice(f"Price is not a number: {raw!r}") from None

    if not value.is_finite():
        raise InvalidPrice(f"Price is not a number: {raw!r}")
    if value < 0:
        raise InvalidPrice(f"Price must not be negative: {raw!r}")
    return value


def to_cents(price: Decimal) -> int:
    """Convert a Decimal price to whole cents, rounding half up.

    Raises:
        InvalidPrice: If the amount has too many digits to hold in cents.
    """
    try:
        cents = (price * _CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidPrice(f"Price is too large: {price}") from None
    return int(cents)


def from_cents(cents: int) -> Decimal:
    """Convert whole cents to a Decimal with two places."""
    # Exact at any size, unlike division under the context precision
    return Decimal(f"{cents}e-2")


def format_amount(amount: Decimal | int | float) -> str:
    """Format an amount for display with two decimals."""
    value = Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return f"{value.quantize(_CENT, rounding=ROUND_HALF_UP):.2f}"
