"""FastAPI application with a lifespan-managed scraper."""

from __future__ import annotations

import logging
import socket
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .api.router import api_router
from .config import settings
from .scraper import ScrapeError
from .scraper.amazon import AmazonScraper

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Shared state accessible by API endpoints
app_state: dict = {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    scraper = AmazonScraper()
    app_state["scraper"] = scraper
    logger.info("Listing Scraper started on port %d", settings.port)
    yield

    # Shutdown
    await scraper.close()
    app_state.clear()
    logger.info("Listing Scraper stopped")


app = FastAPI(
    title="Listing Scraper",
    description="Amazon search results as JSON for the local front-end",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_methods,
)


@app.exception_handler(ScrapeError)
async def scrape_error_handler(request: Request, exc: ScrapeError):
    logger.warning("Scrape failed at %s stage: %s", exc.stage, exc.message)
    return PlainTextResponse(exc.message, status_code=500)


app.include_router(api_router)


def port_in_use(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
            return False
        except OSError:
            return True


def run() -> None:
    """Serve the scrape API on the configured host and port."""
    if port_in_use(settings.host, settings.port):
        print(
            f"ERROR: port {settings.port} is already in use. "
            "Stop the other server or set PORT in .env.",
            file=sys.stderr,
        )
        sys.exit(1)

    logger.info(
        "Scrape endpoint: http://%s:%d/api/scrape?keyword=... (CORS: %s)",
        settings.host, settings.port, ", ".join(settings.cors_origins),
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
