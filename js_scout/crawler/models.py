# js_scout/crawler/models.py
"""
Data models for the JsScout crawler and verifier.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Set


@dataclass(slots=True)
class PageData:
    """Holds the URL, HTTP status and decoded body of a fetched page."""

    url: str
    content: str
    status: int = 200


class Extraction(NamedTuple):
    """What one page contributes: JS resource URLs and anchor link URLs."""

    scripts: Set[str]
    links: List[str]


@dataclass(slots=True)
class CrawlResult:
    """State handed back by :meth:`AsyncCrawler.crawl` once the queue has drained."""

    root: str
    visited: List[str] = field(default_factory=list)
    fetched: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    resources: Set[str] = field(default_factory=set)
    references: int = 0
    truncated: bool = False
    cancelled: bool = False

    @property
    def visited_count(self) -> int:
        return len(self.visited)


class Verdict(str, Enum):
    REACHABLE = "reachable"
    BROKEN = "broken"


@dataclass(slots=True, frozen=True)
class ProbeOutcome:
    """Result of probing one JS resource; *status* is None when no response arrived."""

    url: str
    verdict: Verdict
    status: Optional[int] = None
    error: Optional[str] = None


@dataclass(slots=True)
class ClassifiedResult:
    """Total, disjoint partition of a JS resource set into reachable and broken."""

    outcomes: Dict[str, ProbeOutcome] = field(default_factory=dict)

    def add(self, outcome: ProbeOutcome) -> None:
        self.outcomes[outcome.url] = outcome

    def _urls(self, verdict: Verdict) -> List[str]:
        return sorted(url for url, o in self.outcomes.items() if o.verdict is verdict)

    @property
    def reachable(self) -> List[str]:
        return self._urls(Verdict.REACHABLE)

    @property
    def broken(self) -> List[str]:
        return self._urls(Verdict.BROKEN)

    def __len__(self) -> int:
        return len(self.outcomes)
