# File: js_scout/aggregator.py
"""js_scout.aggregator: сводный отчёт о запуске (обход + проверка JS-ресурсов)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict

from js_scout.crawler.models import ClassifiedResult, CrawlResult


class ResourceInfo(TypedDict):
    """Итог проверки одного JS-ресурса."""

    url: str
    status: Optional[int]
    error: Optional[str]


@dataclass(slots=True)
class ScanReport:
    """Результаты обхода домена и проверки найденных JS-файлов."""

    domain: str
    crawl: CrawlResult
    classified: Optional[ClassifiedResult] = None
    files: Dict[str, Path] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Сериализуемое представление без внутренних объектов."""
        classified = self.classified or ClassifiedResult()
        return {
            "domain": self.domain,
            "root": self.crawl.root,
            "pages_visited": self.crawl.visited_count,
            "pages_fetched": len(self.crawl.fetched),
            "pages_failed": list(self.crawl.failed),
            "truncated": self.crawl.truncated,
            "cancelled": self.crawl.cancelled,
            "js_found": len(self.crawl.resources),
            "reachable": [_resource_info(classified, u) for u in classified.reachable],
            "broken": [_resource_info(classified, u) for u in classified.broken],
            "files": {name: str(path) for name, path in self.files.items()},
            "errors": list(self.errors),
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление ScanReport."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _resource_info(classified: ClassifiedResult, url: str) -> ResourceInfo:
    outcome = classified.outcomes[url]
    return {"url": url, "status": outcome.status, "error": outcome.error}


def aggregate_results(
    domain: str,
    crawl: CrawlResult,
    classified: Optional[ClassifiedResult] = None,
) -> ScanReport:
    """Собирает все части отчёта в ScanReport."""
    return ScanReport(domain=domain, crawl=crawl, classified=classified)


__all__ = ["ScanReport", "ResourceInfo", "aggregate_results"]
