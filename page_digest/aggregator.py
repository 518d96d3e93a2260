# File: page_digest/aggregator.py
"""page_digest.aggregator: Сборка итогового отчёта по результатам конвейера."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from page_digest.models import PageResult

__all__ = ["DigestReport", "aggregate_results"]


@dataclass(slots=True)
class DigestReport:
    """Результаты запуска: успешно обработанные страницы и ошибки."""

    pages: List[PageResult] = field(default_factory=list)
    failures: List[PageResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.pages) + len(self.failures)

    @property
    def succeeded(self) -> int:
        return len(self.pages)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "pages": [p.to_dict() for p in self.pages],
            "failures": [f.to_dict() for f in self.failures],
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(results: Iterable[PageResult]) -> DigestReport:
    """Делит результаты на успешные и ошибочные, сохраняя порядок входного списка."""
    report = DigestReport()
    for result in sorted(results, key=lambda r: r.index):
        (report.pages if result.ok else report.failures).append(result)
    return report
