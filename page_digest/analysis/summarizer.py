# File: page_digest/analysis/summarizer.py
"""Extractive summarization by word frequency.

Sentences are scored by the average global frequency of their tokens; the
best ``sentence_count`` sentences are returned in their original order so the
summary reads as prose rather than a ranked list.
"""
from __future__ import annotations

import re
from typing import List, Sequence

from page_digest.analysis.frequency import count_words, tokenize
from page_digest.errors import SummarizerInputError

__all__: Sequence[str] = ("split_sentences", "score_sentence", "summarize", "summary_text")

_TERMINALS = ".!?"
_CLOSERS = "\"')]"
# text up to a run of terminators plus any closing quotes or brackets, or to the end
_SENTENCE_RE = re.compile(r"[^.!?]*(?:[.!?]+[\"')\]]*|$)")


def split_sentences(text: str) -> List[str]:
    """Split *text* on ``.``, ``!`` and ``?``, keeping the terminator with its sentence.

    Closing quotes and brackets right after the terminator stay with it:
    ``He said "Stop." Then he left.`` is two sentences, the first ending in ``."``.
    """
    sentences = (part.strip() for part in _SENTENCE_RE.findall(text))
    return [s for s in sentences if s.strip(_TERMINALS + _CLOSERS)]


def score_sentence(sentence: str, frequencies) -> float:
    tokens = tokenize(sentence)
    if not tokens:
        return 0.0
    return sum(frequencies.get(token, 0) for token in tokens) / len(tokens)


def summarize(text: str, sentence_count: int) -> List[str]:
    """Return up to *sentence_count* top-scoring sentences of *text* in document order.

    Raises
    ------
    SummarizerInputError
        If *sentence_count* is less than 1.
    """
    if sentence_count < 1:
        raise SummarizerInputError(
            f"sentence_count must be >= 1, got {sentence_count}"
        )

    sentences = split_sentences(text)
    if len(sentences) <= sentence_count:
        return sentences

    # stopwords stay in: this is raw importance, not keyword selection
    frequencies = count_words(text)
    scored = [(score_sentence(s, frequencies), i) for i, s in enumerate(sentences)]
    best = sorted(scored, key=lambda item: (-item[0], item[1]))[:sentence_count]
    return [sentences[i] for i in sorted(i for _, i in best)]


def summary_text(sentences: Sequence[str]) -> str:
    return " ".join(sentences)
