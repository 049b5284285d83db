"""Validation errors raised by the text and inventory modules."""

from __future__ import annotations


class WordstockError(ValueError):
    """Base class for wordstock validation errors."""


class InvalidArgument(WordstockError):
    """An argument is outside its accepted range (e.g. a negative top-N)."""


class InvalidCode(WordstockError):
    """An inventory code is empty after trimming."""


class InvalidPrice(WordstockError):
    """A price is not a number or is negative."""
