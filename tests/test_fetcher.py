# File: tests/test_fetcher.py
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web

from page_digest.errors import FetchError
from page_digest.fetcher.fetcher import Fetcher, normalize_scheme
from page_digest.parser.html_parser import extract_text

from conftest import html_page, serve_app

#: User-Agent headers received by the test site
SEEN_AGENTS: list[str] = []
#: Latin-1 page whose charset is declared only in <meta>
LATIN1_PAGE: bytes = (
    b'<html><head><meta charset="iso-8859-1"></head>'
    b"<body><p>Caf\xe9 au lait.</p></body></html>"
)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("example.com", "https://example.com"),
        ("example.com/a?b=1", "https://example.com/a?b=1"),
        ("http://example.com", "http://example.com"),
        ("https://example.com/x", "https://example.com/x"),
        ("ftp://example.com", "https://ftp://example.com"),
    ],
)
def test_normalize_scheme(url, expected):
    assert normalize_scheme(url) == expected


@pytest_asyncio.fixture
async def site(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()
    SEEN_AGENTS.clear()

    async def ok(request):
        SEEN_AGENTS.append(request.headers.get("User-Agent", ""))
        return web.Response(text=html_page("<p>Hello there.</p>"), content_type="text/html")

    async def missing(_):
        return web.Response(status=404, text="nope")

    async def broken(_):
        return web.Response(status=500)

    async def slow(_):
        await asyncio.sleep(2)
        return web.Response(text=html_page("late"), content_type="text/html")

    async def garbage(_):
        return web.Response(
            body=b"\xc3\x28\xa0\xa1", headers={"Content-Type": "text/html; charset=utf-8"}
        )

    async def latin1(_):
        return web.Response(body=LATIN1_PAGE, headers={"Content-Type": "text/html"})

    app.router.add_get("/ok", ok)
    app.router.add_get("/missing", missing)
    app.router.add_get("/broken", broken)
    app.router.add_get("/slow", slow)
    app.router.add_get("/garbage", garbage)
    app.router.add_get("/latin1", latin1)

    async for url in serve_app(app, unused_tcp_port):
        yield url


@pytest.mark.asyncio()
async def test_fetch_ok_sends_user_agent(site: str):
    async with ClientSession() as session:
        page = await Fetcher(session, timeout=2.0, user_agent="DigestTest/1.0").fetch(f"{site}/ok")
    assert page.url == f"{site}/ok"
    assert page.status == 200
    assert page.content_type == "text/html"
    assert "Hello there." in page.content
    assert SEEN_AGENTS == ["DigestTest/1.0"]


@pytest.mark.asyncio()
@pytest.mark.parametrize("path", ["/missing", "/broken"])
async def test_error_status_raises_fetch_error(site: str, path: str):
    async with ClientSession() as session:
        with pytest.raises(FetchError) as info:
            await Fetcher(session, timeout=2.0).fetch(site + path)
    assert info.value.url == site + path


@pytest.mark.asyncio()
async def test_timeout_raises_fetch_error(site: str):
    async with ClientSession() as session:
        with pytest.raises(FetchError, match="timed out"):
            await Fetcher(session, timeout=0.3).fetch(f"{site}/slow")


@pytest.mark.asyncio()
async def test_undecodable_body_raises_fetch_error(site: str):
    async with ClientSession() as session:
        with pytest.raises(FetchError, match="undecodable"):
            await Fetcher(session, timeout=2.0).fetch(f"{site}/garbage")


@pytest.mark.asyncio()
async def test_connection_refused_raises_fetch_error(unused_tcp_port: int):
    async with ClientSession() as session:
        with pytest.raises(FetchError):
            await Fetcher(session, timeout=2.0).fetch(f"http://localhost:{unused_tcp_port}/")


@pytest.mark.asyncio()
async def test_body_without_header_charset_is_left_to_the_parser(site: str):
    async with ClientSession() as session:
        page = await Fetcher(session, timeout=2.0).fetch(f"{site}/latin1")
    assert page.content == LATIN1_PAGE
    assert "Café au lait." in extract_text(page.content)


@pytest.mark.asyncio()
async def test_fetch_error_keeps_reason_apart_from_url(site: str):
    async with ClientSession() as session:
        with pytest.raises(FetchError) as info:
            await Fetcher(session, timeout=2.0).fetch(f"{site}/missing")
    assert str(info.value.cause) == "HTTP 404 Not Found"
