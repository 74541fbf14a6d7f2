"""Amazon search scraping orchestrator."""

from __future__ import annotations

import logging

from ..schemas import Product
from .client import AmazonClient
from .parser import SearchResultsParser

logger = logging.getLogger(__name__)


class AmazonScraper:
    """High-level scraping orchestrator."""

    def __init__(self, client: AmazonClient | None = None) -> None:
        self.client = client or AmazonClient()
        self._search_parser = SearchResultsParser()

    async def search(self, keyword: str) -> list[Product]:
        html = await self.client.fetch_search_page(keyword)
        products = self._search_parser.parse(html)
        logger.info("Search '%s': %d products", keyword, len(products))
        return products

    async def close(self) -> None:
        await self.client.close()
