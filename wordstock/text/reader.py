"""Read text sources for the word frequency pipeline."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def read_texts(paths: list[str | Path], encoding: str = "utf-8") -> list[str]:
    """Read each path into a string.

    ``-`` reads from standard input.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    texts: list[str] = []
    for path in paths:
        if str(path) == "-":
            texts.append(sys.stdin.read())
            continue

        p = Path(path).expanduser()
        if not p.exists():
            raise FileNotFoundError(f"Text file not found: {p}")
        text = p.read_text(encoding=encoding)
        if not text.strip():
            logger.warning("Text file is empty: %s", p)
        texts.append(text)
    logger.info("Read %d text source(s)", len(texts))
    return texts
