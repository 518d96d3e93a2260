# page_digest/models.py
"""
Data models for the PageDigest pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple, Union

__all__ = ("Job", "JobState", "WordFrequency", "PageData", "PageResult")


class JobState(str, Enum):
    """Состояния одной задачи в конвейере."""

    QUEUED = "queued"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    ANALYZING = "analyzing"
    DONE = "done"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (JobState.DONE, JobState.FAILED)


@dataclass(frozen=True, slots=True)
class Job:
    """One input URL and its position in the input list."""

    index: int
    url: str


@dataclass(frozen=True, slots=True)
class WordFrequency:
    word: str
    count: int


@dataclass(slots=True)
class PageData:
    """Holds the requested URL and the body of a fetched page.

    ``content`` is ``str`` when the response declared its charset and raw
    ``bytes`` otherwise.
    """

    url: str
    content: Union[str, bytes]
    status: int = 200
    content_type: str = ""


@dataclass(frozen=True, slots=True)
class PageResult:
    """Итог обработки одного URL: успех (слова + резюме) или ошибка."""

    url: str
    index: int = 0
    words: Tuple[WordFrequency, ...] = ()
    summary: Tuple[str, ...] = ()
    error: Optional[str] = None
    failed_stage: Optional[JobState] = None
    elapsed: float = field(default=0.0, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def summary_text(self) -> str:
        return " ".join(self.summary)

    @classmethod
    def success(
        cls,
        job: Job,
        words: Sequence[WordFrequency],
        summary: Sequence[str],
        elapsed: float = 0.0,
    ) -> PageResult:
        return cls(
            url=job.url,
            index=job.index,
            words=tuple(words),
            summary=tuple(summary),
            elapsed=elapsed,
        )

    @classmethod
    def failure(
        cls, job: Job, stage: JobState, error: BaseException | str, elapsed: float = 0.0
    ) -> PageResult:
        message = str(error) or type(error).__name__
        return cls(
            url=job.url,
            index=job.index,
            error=message,
            failed_stage=stage,
            elapsed=elapsed,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Представление для JSON-отчёта."""
        data: Dict[str, Any] = {"url": self.url, "ok": self.ok}
        if self.ok:
            data["words"] = [{"word": w.word, "count": w.count} for w in self.words]
            data["summary"] = self.summary_text
        else:
            data["error"] = self.error
            data["stage"] = self.failed_stage.value if self.failed_stage else None
        data["elapsed"] = round(self.elapsed, 3)
        return data
