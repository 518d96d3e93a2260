# File: page_digest/errors.py
"""page_digest.errors: Иерархия исключений конвейера PageDigest."""

from __future__ import annotations

__all__ = [
    "DigestError",
    "ConfigurationError",
    "SummarizerInputError",
    "FetchError",
    "ParseError",
]


class DigestError(Exception):
    """Базовое исключение PageDigest."""


class ConfigurationError(DigestError):
    """Отсутствует обязательный параметр или задано недопустимое значение."""


class SummarizerInputError(ConfigurationError, ValueError):
    """Запрошено меньше одного предложения в резюме."""


class FetchError(DigestError):
    """Сетевая ошибка, таймаут или неразборчивое тело ответа для одного URL."""

    def __init__(self, url: str, cause: BaseException | str) -> None:
        self.url = url
        self.cause = cause
        reason = str(cause) or type(cause).__name__
        super().__init__(f"{url}: {reason}")


class ParseError(DigestError):
    """HTML не удалось разобрать."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)
