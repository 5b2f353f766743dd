# gleam_finder/crawler/fetcher.py
"""
Fetcher module: one GET per call, timeout, status and content-type checks.

Search, resolver and giveaway parser never open connections themselves; they
receive anything implementing :class:`PageFetcher`, which lets tests serve
fixture pages instead of the network.
"""
from __future__ import annotations

import asyncio
from typing import Mapping, Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout
from gleam_finder.config import FinderConfig
from gleam_finder.crawler.models import PageData
from gleam_finder.errors import FetchError
from gleam_finder.logger import logger

_TEXT_MARKERS = ("text/", "html", "json", "xml")


class PageFetcher(Protocol):
    """Anything able to turn a URL into a :class:`PageData`."""

    async def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None) -> PageData:
        ...


class Fetcher:
    """aiohttp based :class:`PageFetcher`.

    Use as an async context manager; a session passed in by the caller is left open::

        async with Fetcher(config) as fetcher:
            page = await fetcher.fetch("https://gleam.io/abcde/-")
    """

    def __init__(self, config: FinderConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    async def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None) -> PageData:
        """
        GET *url* and return its decoded body.

        Raises FetchError on transport errors, timeouts, non-2xx statuses and
        bodies that are not text.
        """
        if self.session is None:
            raise RuntimeError("Fetcher must be entered with 'async with' before use")

        request_headers = {"User-Agent": self.config.user_agent}
        if headers:
            request_headers.update(headers)

        logger.debug("GET %s", url)
        try:
            async with self.session.get(
                url, headers=request_headers, raise_for_status=False
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}", resp.status)
                ctype = resp.headers.get("Content-Type", "").lower()
                if ctype and not any(marker in ctype for marker in _TEXT_MARKERS):
                    raise FetchError(url, f"unsupported content type {ctype!r}", resp.status)
                try:
                    text = await resp.text()
                except UnicodeDecodeError as exc:
                    raise FetchError(url, f"undecodable body: {exc}", resp.status) from exc
                return PageData(
                    url=str(resp.url),
                    content=text,
                    status=resp.status,
                    content_type=ctype,
                )
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out after {self.config.timeout}s") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
