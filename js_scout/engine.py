# File: js_scout/engine.py
"""js_scout.engine: orchestration layer: crawl, write the lists, verify, write the verdicts."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable, Optional

from js_scout.aggregator import ScanReport, aggregate_results
from js_scout.config import ScannerConfig
from js_scout.crawler.crawler import AsyncCrawler
from js_scout.crawler.fetcher import Fetcher
from js_scout.logger import logger
from js_scout.report.text_report import ALL_JS, BAD_JS, GOOD_JS, list_paths, render_list
from js_scout.verifier import ResourceVerifier

__all__ = ["start_scan"]


def _write(report: ScanReport, kind: str, path: Path, urls: Iterable[str]) -> None:
    try:
        report.files[kind] = render_list(urls, path)
    except OSError as exc:
        logger.error("Create %s: %s", path, exc)
        report.errors.append(f"{path}: {exc}")


async def start_scan(config: ScannerConfig, stop_event: Optional[asyncio.Event] = None) -> ScanReport:
    """
    Run a full scan of ``config.domain`` and return the summary.

    The all-JS list is written before verification starts. When no JS
    resource was found no file is created at all.
    """
    paths = list_paths(config.domain, config.output_dir)

    async with Fetcher(config) as fetcher:
        crawl = await AsyncCrawler(config, fetcher).crawl(stop_event)
        report = aggregate_results(config.domain, crawl)

        if not crawl.resources:
            logger.info("No JS files found; exiting.")
            return report

        _write(report, ALL_JS, paths[ALL_JS], crawl.resources)
        if ALL_JS in report.files:
            logger.info("Wrote all JS to %s", report.files[ALL_JS])

        report.classified = await ResourceVerifier(config, fetcher).verify(frozenset(crawl.resources))

    _write(report, GOOD_JS, paths[GOOD_JS], report.classified.reachable)
    _write(report, BAD_JS, paths[BAD_JS], report.classified.broken)
    logger.info("Good JS in %s, bad JS in %s", paths[GOOD_JS], paths[BAD_JS])
    logger.info("Pages visited: %d, JS files found: %d", crawl.visited_count, len(crawl.resources))
    return report
