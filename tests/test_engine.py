# File: tests/test_engine.py
"""End-to-end: crawl a local site, write the three lists, classify the JS files."""
from __future__ import annotations

import json
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web

from conftest import html_handler, serve_app
from js_scout import engine
from js_scout.engine import start_scan
from js_scout.report import render_json


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


@pytest_asyncio.fixture
async def site(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()
    app.router.add_get(
        "/",
        html_handler(
            '<script src="/app.js"></script>'
            '<script src="/missing.js"></script>'
            '<a href="/about">About</a>'
        ),
    )
    app.router.add_get(
        "/about",
        html_handler('<link rel="modulepreload" as="script" href="/chunk1.js">'),
    )
    app.router.add_get("/app.js", html_handler("console.log('app')"))
    app.router.add_get("/chunk1.js", html_handler("export {}"))

    async for host in serve_app(app, unused_tcp_port):
        yield host


@pytest.mark.asyncio()
async def test_full_scan_writes_three_lists(make_config, site: str, tmp_path):
    config = make_config(domain=site, scheme="http://")
    report = await start_scan(config)

    base = f"http://{site}"
    assert report.ok
    assert report.crawl.visited_count == 2
    assert report.crawl.resources == {f"{base}/app.js", f"{base}/missing.js", f"{base}/chunk1.js"}

    all_js = tmp_path / f"{site}_all_js.txt"
    good_js = tmp_path / f"{site}_good_js.txt"
    bad_js = tmp_path / f"{site}_bad_js.txt"
    assert sorted(read_lines(all_js)) == sorted(report.crawl.resources)
    assert read_lines(good_js) == [f"{base}/app.js", f"{base}/chunk1.js"]
    assert read_lines(bad_js) == [f"{base}/missing.js"]
    assert f"{base}/missing.js" not in read_lines(good_js)

    summary = json.loads(render_json(report, tmp_path / "report.json").read_text(encoding="utf-8"))
    assert summary["pages_visited"] == 2
    assert summary["broken"] == [{"url": f"{base}/missing.js", "status": 404, "error": None}]


@pytest.mark.asyncio()
async def test_no_js_creates_no_files(make_config, unused_tcp_port: int, tmp_path):
    app = web.Application()
    app.router.add_get("/", html_handler("<p>plain</p>"))

    async for host in serve_app(app, unused_tcp_port):
        report = await start_scan(make_config(domain=host, scheme="http"))

    assert report.classified is None
    assert report.files == {}
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio()
async def test_unwritable_output_is_reported(make_config, site: str, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    report = await start_scan(make_config(domain=site, scheme="http", output_dir=blocker / "out"))

    assert not report.ok
    assert len(report.errors) == 3
    assert report.files == {}
    # verification still ran
    assert len(report.classified) == 3


@pytest.mark.asyncio()
async def test_all_list_written_before_verification(make_config, site: str, tmp_path, monkeypatch):
    all_js = tmp_path / f"{site}_all_js.txt"
    seen_on_verify = []

    class CheckingVerifier(engine.ResourceVerifier):
        async def verify(self, resources):
            seen_on_verify.append(sorted(read_lines(all_js)) if all_js.exists() else None)
            assert not (tmp_path / f"{site}_good_js.txt").exists()
            return await super().verify(resources)

    monkeypatch.setattr(engine, "ResourceVerifier", CheckingVerifier)
    report = await start_scan(make_config(domain=site, scheme="http"))

    assert seen_on_verify == [sorted(report.crawl.resources)]
