# File: js_scout/utils.py
"""js_scout.utils: URL resolution and domain scoping shared by the crawler and extractor."""

from __future__ import annotations

import re
from typing import Sequence
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from js_scout.exceptions import InvalidURLError

__all__: Sequence[str] = (
    "resolve_url",
    "host_of",
    "in_scope",
)

# Whitespace trimmed from attribute values before parsing (HTML "ASCII whitespace").
_ASCII_WS = " \t\n\f\r"
_CTL_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _split(ref: str) -> SplitResult:
    """Parse *ref* strictly; raise InvalidURLError instead of guessing."""
    if _CTL_RE.search(ref):
        raise InvalidURLError(ref, "control character")
    try:
        parts = urlsplit(ref)
        parts.port  # raises ValueError on a non-numeric or out-of-range port
    except ValueError as exc:
        raise InvalidURLError(ref, str(exc)) from exc
    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_ESCAPE_RE.search(component):
            raise InvalidURLError(ref, "invalid percent escape")
    if not parts.scheme and not parts.netloc and ":" in parts.path.split("/", 1)[0]:
        raise InvalidURLError(ref, "first path segment contains a colon")
    return parts


def resolve_url(base: str, ref: str) -> str:
    """Make *ref* absolute against *base*.

    Absolute references (with a scheme) come back in normalised string form;
    anything else is resolved per RFC 3986. Raises :class:`InvalidURLError`
    for malformed input, so callers can drop just that one reference.
    """
    ref = ref.strip(_ASCII_WS)
    parts = _split(ref)
    resolved = urlunsplit(parts) if parts.scheme else urljoin(base, ref)
    return _keep_empty_query(resolved, parts, ref)


def _keep_empty_query(resolved: str, parts: SplitResult, ref: str) -> str:
    # urlunsplit/urljoin drop a bare "?"; "/app.js?" must not end with ".js"
    if parts.query or "?" not in ref.partition("#")[0]:
        return resolved
    head, sep, fragment = urlunsplit(urlsplit(resolved)._replace(query="")).partition("#")
    return f"{head}?{sep}{fragment}"


def host_of(url: str) -> str:
    """Host component of *url* as written: port kept, userinfo dropped, case untouched."""
    return urlsplit(url).netloc.rpartition("@")[2]


def in_scope(link: str, target_domain: str) -> bool:
    """True iff *link* parses and its host is exactly *target_domain*."""
    try:
        return host_of(link) == target_domain
    except ValueError:
        return False
