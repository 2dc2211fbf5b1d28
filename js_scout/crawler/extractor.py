# js_scout/crawler/extractor.py
"""
JS resource and anchor link extraction for JsScout.

Only static markup is inspected: ``<script src>``, ``<link rel=modulepreload|prefetch
as=script href>`` and ``<a href>``. Nothing is executed.
"""
from __future__ import annotations

from typing import Iterator, List, Set

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from js_scout.crawler.models import Extraction
from js_scout.exceptions import InvalidURLError
from js_scout.logger import logger
from js_scout.utils import resolve_url

JS_SUFFIX = ".js"
PRELOAD_RELS = frozenset({"modulepreload", "prefetch"})


def parse_markup(markup: str) -> BeautifulSoup:
    # rel="..." must stay the literal attribute string, not a token list
    return BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)


def walk(node: Tag) -> Iterator[Tag]:
    """Yield every element below *node*, depth-first in document order."""
    for child in node.descendants:
        if isinstance(child, Tag):
            yield child


def _resolve(page_url: str, ref: str) -> str | None:
    try:
        return resolve_url(page_url, ref)
    except InvalidURLError as exc:
        logger.debug("Skipping reference on %s: %s", page_url, exc)
        return None


def extract_tree(root: Tag, page_url: str) -> Extraction:
    """
    Collect JS resource URLs and anchor links from an already parsed tree.

    Each element contributes on its own; a reference that fails to resolve
    is dropped without affecting the rest of the document.
    """
    scripts: Set[str] = set()
    links: List[str] = []
    for tag in walk(root):
        if tag.name == "script":
            src = tag.get("src")
            if src is None:
                continue
            url = _resolve(page_url, src)
            if url is not None and url.endswith(JS_SUFFIX):
                scripts.add(url)
        elif tag.name == "link":
            rel, as_, href = tag.get("rel"), tag.get("as"), tag.get("href")
            if rel is None or as_ is None or href is None:
                continue
            if rel not in PRELOAD_RELS or as_ != "script":
                continue
            url = _resolve(page_url, href)
            if url is not None and url.endswith(JS_SUFFIX):
                scripts.add(url)
        elif tag.name == "a":
            href = tag.get("href")
            if href is None:
                continue
            url = _resolve(page_url, href)
            if url is not None:
                links.append(url)
    return Extraction(scripts, links)


def extract(markup: str, page_url: str) -> Extraction:
    """Parse *markup* fetched from *page_url* and extract from it.

    Markup the parser rejects yields an empty result.
    """
    try:
        soup = parse_markup(markup)
    except ParserRejectedMarkup as exc:
        logger.warning("Parse HTML %s: %s", page_url, exc)
        return Extraction(set(), [])
    return extract_tree(soup, page_url)


__all__ = ["extract", "extract_tree", "parse_markup", "walk", "JS_SUFFIX", "PRELOAD_RELS"]
