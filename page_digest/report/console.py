# File: page_digest/report/console.py
"""page_digest.report.console: Приёмники результатов (ResultSink) для CLI и тестов."""

from __future__ import annotations

from typing import List

import click

from page_digest.models import PageResult

__all__ = ["ConsoleSink", "CollectingSink", "format_result"]


def format_result(result: PageResult) -> str:
    """Человекочитаемый блок для одного URL."""
    if not result.ok:
        stage = result.failed_stage.value if result.failed_stage else "unknown"
        return f"\nError for {result.url} ({stage}): {result.error}"

    lines = [f"\nTop words for {result.url}:"]
    if result.words:
        width = max(len(w.word) for w in result.words)
        lines.extend(f"  {w.word:<{width}}  {w.count}" for w in result.words)
    else:
        lines.append("  (no words)")
    lines.append(f"Summary for {result.url}:")
    lines.append(result.summary_text or "(no summary available)")
    return "\n".join(lines)


class ConsoleSink:
    """Печатает результаты по мере поступления."""

    def __init__(self) -> None:
        self.count = 0
        self.failed = 0
        self.closed = False

    def emit(self, result: PageResult) -> None:
        self.count += 1
        if result.ok:
            click.echo(format_result(result))
        else:
            self.failed += 1
            click.secho(format_result(result), fg="red")

    def close(self) -> None:
        self.closed = True
        click.echo(f"\nProcessed {self.count} URLs, {self.failed} failed.")


class CollectingSink:
    """Накапливает результаты в списке."""

    def __init__(self) -> None:
        self.results: List[PageResult] = []
        self.closed = False

    def emit(self, result: PageResult) -> None:
        if self.closed:
            raise RuntimeError("emit() after close()")
        self.results.append(result)

    def close(self) -> None:
        self.closed = True
