# File: page_digest/fetcher/__init__.py
"""page_digest.fetcher: Загрузка страниц по HTTP(S)."""

from .fetcher import Fetcher, normalize_scheme

__all__ = ["Fetcher", "normalize_scheme"]
