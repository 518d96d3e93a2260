# File: page_digest/engine.py
"""page_digest.engine: Запуск конвейера по конфигурации: чтение входных файлов и Pipeline."""

from __future__ import annotations

from typing import List, Optional, Sequence

from page_digest.config import DigestConfig
from page_digest.models import PageResult
from page_digest.pipeline import Pipeline, ResultSink
from page_digest.sources import load_stopwords, load_urls

__all__ = ["start_digest"]


async def start_digest(
    config: DigestConfig,
    urls: Optional[Sequence[str]] = None,
    sink: Optional[ResultSink] = None,
) -> List[PageResult]:
    """
    Загружает стоп-слова и URL (если urls не переданы) и запускает Pipeline.

    Входные файлы читаются до первого сетевого запроса; ошибка чтения —
    ConfigurationError.

    Returns
    -------
    List[PageResult]
        По одному результату на каждый входной URL, в порядке входного списка.
    """
    stopwords = load_stopwords(config.exclude)
    if urls is None:
        urls = load_urls(config.targets)
    async with Pipeline(config, stopwords) as pipeline:
        return await pipeline.run(urls, sink=sink)
