"""Small string and sequence helpers."""

from __future__ import annotations

import re
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

_WHITESPACE_RUN = re.compile(r"\s+")


def squish(text: str) -> str:
    """Collapse whitespace runs to single spaces and strip both ends.

    Args:
        text: e.g. "This \\n string \\t has   whitespace"

    Returns:
        e.g. "This string has whitespace"
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()


def detect_first(
    items: Iterable[T],
    predicate: Callable[[T], bool],
    default: T | None = None,
) -> T | None:
    """Return the first item satisfying ``predicate``, else ``default``."""
    for item in items:
        if predicate(item):
            return item
    return default
