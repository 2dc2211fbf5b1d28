# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Mapping
from pathlib import Path

import pytest
from aiohttp import web

from js_scout.config import ScannerConfig
from js_scout.crawler.models import PageData
from js_scout.exceptions import FetchError
from js_scout.logger import init_logging


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on 127.0.0.1:*port*, yield its host:port, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"127.0.0.1:{port}"
    finally:
        await runner.cleanup()


def html_handler(markup: str, status: int = 200):
    async def handler(_):
        return web.Response(text=markup, status=status, content_type="text/html")

    return handler


class FakeFetcher:
    """In-memory fetcher: pages by URL, probe statuses by URL, anything else fails."""

    def __init__(
        self,
        pages: Mapping[str, str] | None = None,
        statuses: Mapping[str, int] | None = None,
    ) -> None:
        self.pages = dict(pages or {})
        self.statuses = dict(statuses or {})
        self.fetched: list[str] = []
        self.probed: list[str] = []

    async def fetch_page(self, url: str) -> PageData:
        self.fetched.append(url)
        if url not in self.pages:
            raise FetchError(url, ConnectionRefusedError("connection refused"))
        return PageData(url=url, content=self.pages[url])

    async def probe(self, url: str) -> int:
        self.probed.append(url)
        if url not in self.statuses:
            raise FetchError(url, ConnectionRefusedError("connection refused"))
        return self.statuses[url]


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests point the log handler at CliRunner streams; restore it afterwards."""
    yield
    init_logging()


@pytest.fixture()
def make_config(tmp_path: Path) -> Callable[..., ScannerConfig]:
    """Factory for ScannerConfig writing its lists under tmp_path."""

    def _make(domain: str = "example.com", **kwargs) -> ScannerConfig:
        kwargs.setdefault("timeout", 2.0)
        kwargs.setdefault("output_dir", tmp_path)
        return ScannerConfig(domain=domain, **kwargs)

    return _make
