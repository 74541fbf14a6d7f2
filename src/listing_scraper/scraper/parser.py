"""Parser for Amazon search result pages (BS4 DOM parsing)."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from ..schemas import Product
from . import HtmlParseError

logger = logging.getLogger(__name__)

RESULT_SELECTOR = 'div[data-component-type="s-search-result"]'
TITLE_SELECTOR = "a h2"
RATING_SELECTOR = "span.a-icon-alt"
REVIEWS_SELECTOR = "span.a-size-base.s-underline-text"
IMAGE_SELECTOR = "img.s-image"


def _text(node: Tag, selector: str) -> str:
    el = node.select_one(selector)
    if el is None:
        return ""
    return el.get_text().strip()


def _attr(node: Tag, selector: str, name: str) -> str:
    el = node.select_one(selector)
    if el is None:
        return ""
    value = el.get(name)
    if not isinstance(value, str):
        return ""
    return value.strip()


class SearchResultsParser:
    """Parse an Amazon search results page into Product records."""

    def parse(self, html: str | bytes) -> list[Product]:
        try:
            soup = BeautifulSoup(html, "lxml")
        except ParserRejectedMarkup as e:
            logger.warning("Failed to parse search page HTML: %s", e)
            raise HtmlParseError(f"Failed to parse HTML: {e}") from e

        results = [self._parse_product(node) for node in soup.select(RESULT_SELECTOR)]

        incomplete = sum(1 for p in results if not p.is_complete)
        if incomplete:
            logger.debug("%d of %d search results have missing fields", incomplete, len(results))
        return results

    def _parse_product(self, node: Tag) -> Product:
        return Product(
            title=_text(node, TITLE_SELECTOR),
            rating=_text(node, RATING_SELECTOR),
            reviews=_text(node, REVIEWS_SELECTOR),
            image_url=_attr(node, IMAGE_SELECTOR, "src"),
        )
