# File: page_digest/report/__init__.py
"""page_digest.report: Вывод результатов: консоль, JSON и HTML."""

from .console import CollectingSink, ConsoleSink, format_result
from .html_report import render_html
from .json_report import render_json

__all__ = ["CollectingSink", "ConsoleSink", "format_result", "render_html", "render_json"]
