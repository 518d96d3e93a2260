# File: page_digest/analysis/__init__.py
"""page_digest.analysis: Частотный анализ слов и экстрактивное резюме."""

from .frequency import count_words, rank_words, tokenize
from .summarizer import split_sentences, summarize, summary_text

__all__ = [
    "count_words",
    "rank_words",
    "tokenize",
    "split_sentences",
    "summarize",
    "summary_text",
]
