# js_scout/crawler/fetcher.py
"""
Fetcher module: the HTTP collaborator shared by the crawl and verification phases.

Owns one :class:`aiohttp.ClientSession` configured with the per-request timeout
and User-Agent from :class:`~js_scout.config.ScannerConfig`. Redirects are
followed by aiohttp itself.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from js_scout.config import ScannerConfig
from js_scout.crawler.models import PageData
from js_scout.exceptions import FetchError, ReadError


class Fetcher:
    """Fetches pages as text and probes resources for their status code."""

    def __init__(self, config: ScannerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    def _session(self) -> ClientSession:
        if not self.session:
            raise RuntimeError("Session not initialized")
        return self.session

    async def fetch_page(self, url: str) -> PageData:
        """
        GET *url* and return its decoded body.

        Raises FetchError when no response was obtained and ReadError when the
        body could not be read or decoded. The HTTP status is not a failure here.
        """
        session = self._session()
        try:
            async with session.get(url) as resp:
                try:
                    text = await resp.text()
                except (ClientError, asyncio.TimeoutError, UnicodeDecodeError, LookupError) as exc:
                    raise ReadError(url, exc) from exc
                return PageData(url=url, content=text, status=resp.status)
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, exc) from exc

    async def probe(self, url: str) -> int:
        """Request *url* with the configured probe method and return the status code."""
        session = self._session()
        try:
            async with session.request(self.config.probe_method, url, allow_redirects=True) as resp:
                return resp.status
        except (ClientError, asyncio.TimeoutError, ValueError) as exc:
            raise FetchError(url, exc) from exc
