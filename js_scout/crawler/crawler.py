# === FILE: js_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from collections import deque
from typing import Deque, Optional, Protocol, Set

from js_scout.config import ScannerConfig
from js_scout.crawler.extractor import extract
from js_scout.crawler.models import CrawlResult, PageData
from js_scout.exceptions import FetchError
from js_scout.logger import logger
from js_scout.utils import in_scope

__all__ = ("AsyncCrawler", "PageFetcher")


class PageFetcher(Protocol):
    async def fetch_page(self, url: str) -> PageData: ...


class AsyncCrawler:
    """Breadth-first crawler confined to a single host.

    Pages are fetched strictly one after another; the visited set, the work
    queue and the JS resource set all belong to the running :meth:`crawl` call.
    """

    def __init__(self, config: ScannerConfig, fetcher: PageFetcher) -> None:
        self.config = config
        self.fetcher = fetcher

    async def crawl(self, stop_event: Optional[asyncio.Event] = None) -> CrawlResult:
        root = self.config.root_url
        domain = self.config.domain
        limit = self.config.max_pages
        logger.info("Starting crawl for %s", root)
        start = time.monotonic()

        result = CrawlResult(root=root, visited=[root])
        seen: Set[str] = {root}
        queue: Deque[str] = deque([root])
        attempts = 0

        while queue:
            if stop_event is not None and stop_event.is_set():
                logger.info("Crawl cancelled with %d page(s) still queued", len(queue))
                result.cancelled = True
                break
            if limit is not None and attempts >= limit:
                logger.info("Page limit %d reached, %d page(s) left in queue", limit, len(queue))
                result.truncated = True
                break

            page_url = queue.popleft()
            attempts += 1
            logger.info("Crawling page: %s", page_url)
            try:
                page = await self.fetcher.fetch_page(page_url)
            except FetchError as exc:
                logger.warning("%s", exc)
                result.failed.append(page_url)
                continue
            if page.status >= 400:
                logger.debug("%s answered %d, extracting anyway", page_url, page.status)
            result.fetched.append(page_url)

            scripts, links = extract(page.content, page_url)
            result.references += len(scripts)
            result.resources.update(scripts)

            for link in links:
                if in_scope(link, domain) and link not in seen:
                    seen.add(link)
                    result.visited.append(link)
                    queue.append(link)

        duration = time.monotonic() - start
        logger.info(
            "Crawl finished: %d page(s) fetched, %d failed, %d JS file(s) in %.2f s",
            len(result.fetched), len(result.failed), len(result.resources), duration,
        )
        return result
