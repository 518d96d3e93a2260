# File: page_digest/report/html_report.py
"""page_digest.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, PackageLoader, select_autoescape

from page_digest.aggregator import DigestReport

_TEMPLATE = "report.html.j2"


def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("page_digest", "templates"),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )


def render_html(report: DigestReport, output_path: Union[Path, str]) -> Path:
    """Рендерит HTML-отчёт из встроенного шаблона и сохраняет его по указанному пути.

    Args:
        report: объект DigestReport.
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    context: dict[str, Any] = {
        "pages": report.pages,
        "failures": report.failures,
        "total": report.total,
        "succeeded": report.succeeded,
        "failed": report.failed,
    }

    html_content = _environment().get_template(_TEMPLATE).render(**context)
    output_path.write_text(html_content, encoding="utf-8")
    return output_path
