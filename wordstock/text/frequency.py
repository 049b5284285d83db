"""Word extraction, frequency counting and top-N ranking."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from ..errors import InvalidArgument

logger = logging.getLogger(__name__)

# Letters, digits, underscore and apostrophe (keeps "dev's" whole)
_WORD_PATTERN = re.compile(r"[\w']+")


class FrequencyTable(dict):
    """Mapping of token → occurrence count, in first-seen order."""

    def count_of(self, token: str) -> int:
        """Return the count for ``token``, or 0 if it was never seen."""
        return self.get(token, 0)

    def add(self, token: str, amount: int = 1) -> int:
        self[token] = self.count_of(token) + amount
        return self[token]

    def update_from(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.add(token)


def tokenize(text: str | None) -> list[str]:
    """Split text into lowercase word tokens.

    Punctuation and symbols act as separators and are dropped.

    Args:
        text: e.g. "clean, dev's guide!"

    Returns:
        e.g. ["clean", "dev's", "guide"]. Empty for blank input.
    """
    if not text:
        return []
    return _WORD_PATTERN.findall(text.lower())


def count(tokens: Iterable[str]) -> FrequencyTable:
    """Count occurrences of each token."""
    table = FrequencyTable()
    table.update_from(tokens)
    return table


def top_n(table: dict[str, int], n: int) -> list[tuple[str, int]]:
    """Return the ``n`` most frequent (word, count) pairs, highest first.

    Entries are stably sorted ascending by count, the last ``n`` are taken
    and the result is reversed. Among equal counts the word seen later
    therefore ranks first.

    Raises:
        InvalidArgument: If ``n`` is negative or not an integer.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"n must be an integer, got {n!r}")
    if n < 0:
        raise InvalidArgument(f"n must not be negative, got {n}")

    ranked = sorted(table.items(), key=lambda entry: entry[1])
    start = max(len(ranked) - n, 0)
    return list(reversed(ranked[start:]))


class WordFrequencyPipeline:
    """Accumulates word counts over one or more texts."""

    def __init__(self) -> None:
        self._table = FrequencyTable()

    def feed(self, text: str | None) -> list[str]:
        """Tokenize ``text`` and add its words to the running counts.

        Returns:
            The tokens extracted from ``text``.
        """
        tokens = tokenize(text)
        self._table.update_from(tokens)
        logger.debug("Counted %d tokens (%d distinct so far)", len(tokens), len(self._table))
        return tokens

    def top(self, n: int) -> list[tuple[str, int]]:
        return top_n(self._table, n)

    @property
    def table(self) -> FrequencyTable:
        """A copy of the current frequency table."""
        return FrequencyTable(self._table)

    def count_of(self, token: str) -> int:
        return self._table.count_of(token)

    def reset(self) -> None:
        self._table.clear()

    def __len__(self) -> int:
        return len(self._table)
