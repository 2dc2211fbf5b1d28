# File: js_scout/verifier.py
"""js_scout.verifier: probes every discovered JS resource and sorts it into reachable or broken."""

from __future__ import annotations

import asyncio
from typing import AbstractSet, Protocol

from js_scout.config import ScannerConfig
from js_scout.crawler.models import ClassifiedResult, ProbeOutcome, Verdict
from js_scout.exceptions import FetchError
from js_scout.logger import logger

__all__ = ["ResourceVerifier", "ResourceProber", "BROKEN_STATUS"]

#: first status code treated as broken
BROKEN_STATUS = 400


class ResourceProber(Protocol):
    async def probe(self, url: str) -> int: ...


class ResourceVerifier:
    """Classifies a frozen set of JS URLs by HTTP status.

    Any failure to get a response counts as broken, the same as a 4xx/5xx.
    Probes run concurrently up to ``config.verify_concurrency``.
    """

    def __init__(self, config: ScannerConfig, prober: ResourceProber) -> None:
        self.config = config
        self.prober = prober

    async def verify(self, resources: AbstractSet[str]) -> ClassifiedResult:
        frozen = frozenset(resources)
        logger.info("Testing %d JS file(s)...", len(frozen))
        semaphore = asyncio.Semaphore(self.config.verify_concurrency)

        async def _bounded(url: str) -> ProbeOutcome:
            async with semaphore:
                return await self._classify(url)

        outcomes = await asyncio.gather(*(_bounded(url) for url in frozen))
        result = ClassifiedResult()
        for outcome in outcomes:
            result.add(outcome)
        logger.info("Reachable: %d, broken: %d", len(result.reachable), len(result.broken))
        return result

    async def _classify(self, url: str) -> ProbeOutcome:
        attempts = 0
        while True:
            try:
                status = await self.prober.probe(url)
            except FetchError as exc:
                attempts += 1
                if attempts > self.config.retry_times:
                    logger.warning("[ERROR] Fetch JS %s: %s", url, exc.original)
                    return ProbeOutcome(url, Verdict.BROKEN, error=str(exc.original) or type(exc.original).__name__)
                backoff = min(2**attempts, 60)
                logger.debug("Retry %d/%d for %s after %d s", attempts, self.config.retry_times, url, backoff)
                await asyncio.sleep(backoff)
                continue

            if status >= BROKEN_STATUS:
                logger.warning("[FLAG] %s returned %d", url, status)
                return ProbeOutcome(url, Verdict.BROKEN, status=status)
            logger.info("[OK]   %s returned %d", url, status)
            return ProbeOutcome(url, Verdict.REACHABLE, status=status)
