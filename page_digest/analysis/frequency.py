# File: page_digest/analysis/frequency.py
"""page_digest.analysis.frequency: Подсчёт и ранжирование частот слов."""

from __future__ import annotations

from collections import Counter
from typing import AbstractSet, List, Sequence

from page_digest.models import WordFrequency

__all__: Sequence[str] = ("tokenize", "count_words", "rank_words")


def tokenize(text: str) -> List[str]:
    """Разбивает текст по пробельным символам и приводит токены к нижнему регистру.

    Пунктуация не удаляется: ``"fast."`` и ``"fast"`` — разные токены.
    """
    return [token.lower() for token in text.split()]


def count_words(text: str, stopwords: AbstractSet[str] = frozenset()) -> Counter[str]:
    """Частоты токенов текста без стоп-слов."""
    return Counter(token for token in tokenize(text) if token not in stopwords)


def rank_words(
    text: str, stopwords: AbstractSet[str] = frozenset(), limit: int = 10
) -> List[WordFrequency]:
    """Возвращает не более *limit* самых частых слов.

    Порядок: по убыванию частоты, при равенстве — по слову в алфавитном порядке.
    """
    if limit <= 0:
        return []
    counts = count_words(text, stopwords)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [WordFrequency(word, count) for word, count in ranked[:limit]]
