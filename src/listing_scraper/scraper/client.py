"""HTTP client for fetching Amazon search result pages."""

from __future__ import annotations

import logging

import httpx

from ..config import settings
from . import FetchError, RequestBuildError, UpstreamStatusError

logger = logging.getLogger(__name__)

_HEADERS = {
    "User-Agent": settings.scraper_user_agent,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": settings.scraper_accept_language,
}


def build_search_url(keyword: str) -> str:
    """Return the search page URL for *keyword*, percent-encoded."""
    return str(httpx.URL(settings.search_url, params={settings.search_param: keyword}))


class AmazonClient:
    """Async HTTP client for the upstream search endpoint."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._client: httpx.AsyncClient | None = None
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=_HEADERS,
                timeout=settings.scraper_request_timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def fetch_search_page(self, keyword: str) -> str:
        """Fetch the search page HTML for *keyword*.

        Raises RequestBuildError, FetchError or UpstreamStatusError; the
        response is closed on every path.
        """
        client = await self._get_client()
        try:
            url = build_search_url(keyword)
            request = client.build_request("GET", url)
        except (httpx.InvalidURL, ValueError) as e:
            logger.warning("Failed to build search request for '%s': %s", keyword, e)
            raise RequestBuildError(f"Failed to build search request: {e}") from e

        try:
            resp = await client.send(request, stream=True)
        except httpx.RequestError as e:
            logger.warning("Request error for %s: %s", url, e)
            raise FetchError(f"Failed to fetch search page: {e}") from e

        try:
            if resp.status_code != 200:
                logger.warning(
                    "Status error: %d %s for %s", resp.status_code, resp.reason_phrase, url,
                )
                raise UpstreamStatusError(url, resp.status_code)
            await resp.aread()
            return resp.text
        except httpx.RequestError as e:
            logger.warning("Failed reading body from %s: %s", url, e)
            raise FetchError(f"Failed to read search page: {e}") from e
        finally:
            await resp.aclose()

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
