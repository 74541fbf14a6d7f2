"""Amazon search scrape endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from ..scraper import EncodeError
from ..scraper.amazon import AmazonScraper

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["scrape"])


def _get_scraper() -> AmazonScraper:
    from ..main import app_state
    return app_state["scraper"]


@router.get("/scrape")
async def scrape_amazon(
    keyword: str | None = Query(None, description="Search keyword"),
):
    if not keyword:
        return PlainTextResponse("keyword query parameter is required", status_code=400)

    # ScrapeError propagates to the handler registered in main.
    products = await _get_scraper().search(keyword)

    try:
        return JSONResponse([p.model_dump(by_alias=True) for p in products])
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Failed to encode response as JSON: {e}") from e
