# === FILE: page_digest/pipeline.py ===
"""Bounded worker pool that runs fetch → extract → analyze for each URL.

Every input URL becomes a :class:`~page_digest.models.Job`; all jobs are put
on a queue up front and at most ``config.workers`` of them execute at the
same time.  A worker owns its job from the fetch to the final
:class:`~page_digest.models.PageResult` and never gives up its slot half-way.

Results travel through a second queue (many producers, one consumer).  The
end-of-stream marker is put on that queue only after every worker task has
returned, so the consumer sees exactly one result per job.
"""
from __future__ import annotations

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import (
    AbstractSet,
    AsyncIterator,
    Dict,
    Iterable,
    List,
    Optional,
    Protocol,
    Tuple,
)

from aiohttp import ClientSession

from page_digest.analysis.frequency import rank_words
from page_digest.analysis.summarizer import summarize
from page_digest.config import DigestConfig
from page_digest.errors import ConfigurationError, DigestError, FetchError
from page_digest.fetcher.fetcher import Fetcher
from page_digest.logger import LOGGER_NAME
from page_digest.models import Job, JobState, PageResult, WordFrequency
from page_digest.parser.html_parser import extract_text

__all__ = ("Pipeline", "ResultSink", "analyze_text")

_DONE = object()


class ResultSink(Protocol):
    """Consumer of PageResults; ``close`` is called once, after the last result."""

    def emit(self, result: PageResult) -> None: ...

    def close(self) -> None: ...


def analyze_text(
    text: str, stopwords: AbstractSet[str], top_words: int, summary_sentences: int
) -> Tuple[List[WordFrequency], List[str]]:
    """Rank words and summarize the same text snapshot."""
    return rank_words(text, stopwords, top_words), summarize(text, summary_sentences)


class Pipeline:
    """Асинхронный конвейер с ограниченным числом одновременных задач."""

    def __init__(self, config: DigestConfig, stopwords: AbstractSet[str] = frozenset()) -> None:
        self.config = config
        self._validate_config()
        self.stopwords = frozenset(stopwords)
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self._executor: Optional[ThreadPoolExecutor] = None
        self.states: Dict[int, JobState] = {}
        self.active = 0
        self.peak_active = 0
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> Pipeline:
        self.session = ClientSession()
        self.fetcher = Fetcher(self.session, self.config.timeout, self.config.user_agent)
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.workers, thread_name_prefix="page-digest"
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #

    async def stream(self, urls: Iterable[str]) -> AsyncIterator[PageResult]:
        """Yield one PageResult per URL in completion order."""
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        jobs: asyncio.Queue[Job] = asyncio.Queue()
        for index, url in enumerate(urls):
            self.states[index] = JobState.QUEUED
            jobs.put_nowait(Job(index, url))
        if jobs.empty():
            return

        results: asyncio.Queue = asyncio.Queue()
        n_workers = min(self.config.workers, jobs.qsize())
        workers = [asyncio.create_task(self._worker(jobs, results)) for _ in range(n_workers)]
        closer = asyncio.create_task(self._close_after(workers, results))
        try:
            while True:
                item = await results.get()
                if item is _DONE:
                    break
                yield item
            await closer
        finally:
            if not closer.done():
                for w in workers:
                    w.cancel()
                closer.cancel()
                await asyncio.gather(closer, *workers, return_exceptions=True)

    async def run(self, urls: Iterable[str], sink: Optional[ResultSink] = None) -> List[PageResult]:
        """Process every URL; forward results to *sink* as they arrive.

        Returns all results sorted by input position.
        """
        url_list = list(urls)
        self.logger.info("Старт обработки: %d URL, %d workers", len(url_list), self.config.workers)
        start = time.monotonic()
        collected: List[PageResult] = []
        async for result in self.stream(url_list):
            collected.append(result)
            if sink is not None:
                sink.emit(result)
        if sink is not None:
            sink.close()
        duration = time.monotonic() - start
        failed = sum(1 for r in collected if not r.ok)
        self.logger.info(
            "Завершено: %d страниц, %d ошибок за %.2f с", len(collected), failed, duration
        )
        return sorted(collected, key=lambda r: r.index)

    # ------------------------------------------------------------------ #
    # Workers                                                            #
    # ------------------------------------------------------------------ #

    async def _close_after(self, workers: List[asyncio.Task], results: asyncio.Queue) -> None:
        await asyncio.gather(*workers)
        await results.put(_DONE)

    async def _worker(self, jobs: asyncio.Queue[Job], results: asyncio.Queue) -> None:
        while True:
            try:
                job = jobs.get_nowait()
            except asyncio.QueueEmpty:
                return
            self.active += 1
            self.peak_active = max(self.peak_active, self.active)
            try:
                result = await self._run_job(job)
            finally:
                self.active -= 1
                jobs.task_done()
            await results.put(result)

    async def _run_job(self, job: Job) -> PageResult:
        start = time.monotonic()
        self.logger.debug("Job %d started: %s", job.index, job.url)
        try:
            if self.config.job_timeout is not None:
                words, summary = await asyncio.wait_for(
                    self._process(job), timeout=self.config.job_timeout
                )
            else:
                words, summary = await self._process(job)
        except asyncio.TimeoutError:
            return self._fail(job, f"job exceeded {self.config.job_timeout}s deadline", start)
        except FetchError as exc:
            # the URL is already on the result
            return self._fail(job, exc.cause, start)
        except DigestError as exc:
            return self._fail(job, exc, start)
        except Exception as exc:
            self.logger.exception("Unexpected error for %s", job.url)
            return self._fail(job, exc, start)

        self.states[job.index] = JobState.DONE
        elapsed = time.monotonic() - start
        self.logger.info("OK %s (%d words, %d sentences, %.2f s)", job.url, len(words), len(summary), elapsed)
        return PageResult.success(job, words, summary, elapsed)

    async def _process(self, job: Job) -> Tuple[List[WordFrequency], List[str]]:
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        loop = asyncio.get_running_loop()

        self.states[job.index] = JobState.FETCHING
        page = await self.fetcher.fetch(job.url)

        self.states[job.index] = JobState.EXTRACTING
        text = await loop.run_in_executor(self._executor, extract_text, page.content)
        self.logger.debug("Extracted %d chars from %s", len(text), job.url)

        self.states[job.index] = JobState.ANALYZING
        return await loop.run_in_executor(
            self._executor,
            analyze_text,
            text,
            self.stopwords,
            self.config.top_words,
            self.config.summary_sentences,
        )

    def _fail(self, job: Job, error: BaseException | str, start: float) -> PageResult:
        stage = self.states.get(job.index, JobState.QUEUED)
        self.states[job.index] = JobState.FAILED
        self.logger.warning("Failed %s at %s: %s", job.url, stage.value, error)
        return PageResult.failure(job, stage, error, time.monotonic() - start)

    def _validate_config(self) -> None:
        for name in ("top_words", "summary_sentences", "workers"):
            value = getattr(self.config, name, None)
            if not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be an integer >= 1, got {value!r}")
        if self.config.timeout <= 0:
            raise ConfigurationError("timeout must be > 0")
