class ScrapeError(Exception):
    """Base class for failures that abort a scrape request."""

    stage = "scrape"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RequestBuildError(ScrapeError):
    """Raised when the outbound search request cannot be built."""

    stage = "request"


class FetchError(ScrapeError):
    """Raised when the search page cannot be fetched (DNS, connect, timeout)."""

    stage = "fetch"


class UpstreamStatusError(ScrapeError):
    """Raised when the search page answers with anything but HTTP 200."""

    stage = "upstream"

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Upstream returned unexpected status: {status_code}")


class HtmlParseError(ScrapeError):
    """Raised when the search page HTML is rejected by the parser."""

    stage = "parse"


class EncodeError(ScrapeError):
    """Raised when the product list cannot be serialized to JSON."""

    stage = "encode"
