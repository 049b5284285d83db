"""Text tokenizing and word frequency ranking."""

from .frequency import FrequencyTable, WordFrequencyPipeline, count, tokenize, top_n
from .reader import read_texts
from .utils import detect_first, squish

__all__ = [
    "FrequencyTable",
    "WordFrequencyPipeline",
    "tokenize",
    "count",
    "top_n",
    "read_texts",
    "squish",
    "detect_first",
]
