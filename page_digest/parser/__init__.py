# File: page_digest/parser/__init__.py
"""page_digest.parser: Извлечение видимого текста из HTML."""

from .html_parser import extract_text, iter_leaves

__all__ = ["extract_text", "iter_leaves"]
