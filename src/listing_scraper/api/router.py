"""Aggregate all API routers."""

from fastapi import APIRouter

from . import scrape, system

api_router = APIRouter()
api_router.include_router(scrape.router)
api_router.include_router(system.router)
