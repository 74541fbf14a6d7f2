"""Test fixtures: sample HTML loading."""

from pathlib import Path

import pytest

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


@pytest.fixture()
def search_html() -> str:
    return (SAMPLES_DIR / "amazon_search.html").read_text(encoding="utf-8")
