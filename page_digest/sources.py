# File: page_digest/sources.py
"""page_digest.sources: Чтение списка URL и стоп-слов из текстовых файлов."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, List, Optional, Sequence, Union

from page_digest.errors import ConfigurationError
from page_digest.logger import logger

__all__: Sequence[str] = ("read_lines", "load_urls", "load_stopwords")


def read_lines(path: Union[str, Path]) -> List[str]:
    """Читает файл, возвращает непустые строки без пробелов по краям."""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("File not found: %s", p)
        raise ConfigurationError(f"File not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read {p}: {exc}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_urls(path: Union[str, Path]) -> List[str]:
    """Список URL в порядке файла. Дубликаты сохраняются: каждая строка — отдельная задача."""
    urls = read_lines(path)
    logger.debug("Loaded %d URLs from %s", len(urls), path)
    return urls


def load_stopwords(path: Optional[Union[str, Path]]) -> FrozenSet[str]:
    """Множество стоп-слов в нижнем регистре; без файла — пустое множество."""
    if path is None:
        return frozenset()
    words = frozenset(word.lower() for word in read_lines(path))
    logger.debug("Loaded %d stopwords from %s", len(words), path)
    return words
