# File: tests/conftest.py
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Callable

import pytest
from aiohttp import web

from page_digest.config import DigestConfig, build_config

SAMPLE_TEXT = "The cat sat. The cat ran fast. Dogs bark loudly."


@pytest.fixture()
def targets_file(tmp_path) -> Path:
    """Файл targets с двумя URL (и пустой строкой между ними)."""
    path = tmp_path / "targets.txt"
    path.write_text("example.com\n\nhttp://example.org/page\n", encoding="utf-8")
    return path


@pytest.fixture()
def stopwords_file(tmp_path) -> Path:
    path = tmp_path / "stopwords.txt"
    path.write_text("The\nand\n", encoding="utf-8")
    return path


@pytest.fixture()
def make_config(targets_file) -> Callable[..., DigestConfig]:
    """Фабрика конфигураций с валидным targets-файлом."""

    def _make(**overrides) -> DigestConfig:
        values = {"targets": targets_file, "timeout": 2.0}
        values.update(overrides)
        return build_config(**values)

    return _make


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


def html_page(body: str) -> str:
    return f"<html><head><title>t</title></head><body>{body}</body></html>"
