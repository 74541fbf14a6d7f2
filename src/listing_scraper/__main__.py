"""Allow running with: python -m listing_scraper"""

from .main import run

run()
