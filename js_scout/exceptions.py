"""Custom exceptions for JsScout."""


class JsScoutError(Exception):
    """Base class for all JsScout errors."""


class InvalidURLError(ValueError, JsScoutError):
    """Raised when an href/src value can not be parsed as a URL."""

    def __init__(self, ref: str, reason: str = "malformed URL"):
        self.ref = ref
        self.reason = reason
        super().__init__(f"Invalid URL {ref!r}: {reason}")


class FetchError(JsScoutError):
    """Raised when an HTTP request fails due to network/transport errors."""

    def __init__(self, url: str, original: BaseException):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original!r}")


class ReadError(FetchError):
    """Raised when a response arrived but its body could not be read or decoded."""

    def __init__(self, url: str, original: BaseException):
        super().__init__(url, original)
        self.args = (f"Reading body of {url} failed: {original!r}",)
