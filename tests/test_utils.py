# File: tests/test_utils.py
import pytest

from js_scout.exceptions import InvalidURLError
from js_scout.utils import host_of, in_scope, resolve_url

BASE = "https://example.com/dir/page.html?x=1"


@pytest.mark.parametrize(
    "ref,expected",
    [
        ("other.html", "https://example.com/dir/other.html"),
        ("../up.js", "https://example.com/up.js"),
        ("/root.js", "https://example.com/root.js"),
        ("?y=2", "https://example.com/dir/page.html?y=2"),
        ("#top", "https://example.com/dir/page.html?x=1#top"),
        ("//cdn.example.net/lib.js", "https://cdn.example.net/lib.js"),
        ("  /padded.js\n", "https://example.com/padded.js"),
        ("/app.js?", "https://example.com/app.js?"),
        ("?", "https://example.com/dir/page.html?"),
        ("/p?#top", "https://example.com/p?#top"),
    ],
)
def test_resolve_relative_references(ref, expected):
    assert resolve_url(BASE, ref) == expected


@pytest.mark.parametrize(
    "ref",
    [
        "http://other.org/a/b.js",
        "https://example.com/x?q=1#frag",
        "mailto:someone@example.com",
        "javascript:void(0)",
        "https://example.com/app.js?",
        "https://example.com/p?#frag",
    ],
)
def test_absolute_reference_returned_unchanged(ref):
    assert resolve_url(BASE, ref) == ref


@pytest.mark.parametrize(
    "ref",
    ["/a/b.js", "../c.js", "https://example.com/d.js", "?v=1", "#x", "/e.js?", "?"],
)
def test_resolution_is_idempotent(ref):
    once = resolve_url(BASE, ref)
    assert resolve_url(BASE, once) == once


@pytest.mark.parametrize(
    "ref",
    [
        "/bad%zzescape.js",
        "/trailing%",
        "http://[::1/broken-ipv6",
        "http://example.com:port/x.js",
        "/with\x00nul.js",
        "/tab\tinside.js",
        "1a:b",
    ],
)
def test_malformed_reference_raises(ref):
    with pytest.raises(InvalidURLError):
        resolve_url(BASE, ref)


def test_invalid_url_error_is_value_error():
    with pytest.raises(ValueError):
        resolve_url(BASE, "/x%g1")


@pytest.mark.parametrize(
    "link,domain,expected",
    [
        ("https://example.com/a", "example.com", True),
        ("http://example.com/a", "example.com", True),
        ("http://sub.example.com/x", "example.com", False),
        ("https://www.example.com/", "example.com", False),
        ("https://Example.com/", "example.com", False),
        ("https://example.com:8080/", "example.com", False),
        ("https://example.com:8080/", "example.com:8080", True),
        ("https://user:pw@example.com/", "example.com", True),
        ("mailto:a@example.com", "example.com", False),
        ("/relative/only", "example.com", False),
        ("http://[::1/broken", "example.com", False),
    ],
)
def test_in_scope_exact_host_match(link, domain, expected):
    assert in_scope(link, domain) is expected


def test_host_of_keeps_port_and_case():
    assert host_of("http://User@Example.COM:81/p") == "Example.COM:81"
