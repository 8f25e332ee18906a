"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from pocket_bookmarks.models import Bookmark

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def retrieve_response() -> dict:
    """Load the sample /get response."""
    with open(FIXTURES_DIR / "retrieve_response.json") as f:
        return json.load(f)


@pytest.fixture
def sample_bookmarks() -> dict[str, Bookmark]:
    """Bookmarks as decoded from the sample response."""
    return {
        "229279689": Bookmark(
            id=229279689,
            title="The Massive Ryder Cup Preview",
            url="http://www.grantland.com/blog/the-triangle/post/_/id/38347/ryder-cup-preview",
        ),
        "1050211032": Bookmark(
            id=1050211032,
            title="Understanding Python Protocols",
            url="https://example.com/python-protocols",
        ),
        "873945612": Bookmark(
            id=873945612,
            title="",
            url="https://example.org/untitled",
        ),
    }
