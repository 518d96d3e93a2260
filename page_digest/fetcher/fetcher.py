# page_digest/fetcher/fetcher.py
"""
Fetcher module: a single time-bounded GET per URL, no retries.
"""
from __future__ import annotations

import asyncio
import logging

from aiohttp import ClientError, ClientSession, ClientTimeout

from page_digest.errors import FetchError
from page_digest.logger import LOGGER_NAME
from page_digest.models import PageData

__all__ = ("Fetcher", "normalize_scheme")

_SCHEMES = ("http://", "https://")


def normalize_scheme(url: str) -> str:
    """Prepend ``https://`` when *url* has no http(s) scheme. No other validation."""
    if url.startswith(_SCHEMES):
        return url
    return "https://" + url


class Fetcher:
    """Fetches one page per call with its own deadline."""

    def __init__(self, session: ClientSession, timeout: float, user_agent: str | None = None) -> None:
        self.session = session
        self.timeout = ClientTimeout(total=timeout)
        self.headers = {"User-Agent": user_agent} if user_agent else {}
        self.logger = logging.getLogger(LOGGER_NAME)

    async def fetch(self, url: str) -> PageData:
        """
        GET the URL and return its body.

        The body is decoded here only when the Content-Type header names a
        charset; otherwise the raw bytes are returned and the HTML parser
        picks the encoding up from <meta charset> or by sniffing.

        Raises FetchError on transport errors, timeout, HTTP status >= 400
        or a body that does not decode with its declared charset. The
        response is released on every path.
        """
        target = normalize_scheme(url)
        try:
            async with self.session.get(
                target, timeout=self.timeout, headers=self.headers, raise_for_status=False
            ) as resp:
                self.logger.debug("GET %s -> %s", target, resp.status)
                if resp.status >= 400:
                    raise FetchError(url, f"HTTP {resp.status} {resp.reason or ''}".rstrip())
                ctype = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                if resp.charset:
                    content: str | bytes = await resp.text(errors="strict")
                else:
                    content = await resp.read()
                return PageData(url, content, resp.status, ctype)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out after {self.timeout.total:g}s") from exc
        except ClientError as exc:
            raise FetchError(url, exc) from exc
        except (UnicodeDecodeError, LookupError) as exc:
            raise FetchError(url, f"undecodable body: {exc}") from exc
