"""Shared fixtures for NASA TUI tests."""

import threading

import pytest

from nasatui.models import ImageEntry


def make_item(title="Pillars of Creation", date_created="2020-05-01T00:00:00Z", href="https://images-assets.nasa.gov/image/PIA1/PIA1~thumb.jpg", nasa_id="PIA1"):
    """Build one raw item the way the search endpoint returns it."""
    data = {"title": title, "nasa_id": nasa_id}
    if date_created is not None:
        data["date_created"] = date_created
    links = [{"href": href, "rel": "preview", "render": "image"}] if href is not None else []
    return {"href": "https://images-assets.nasa.gov/image/PIA1/collection.json", "data": [data], "links": links}


def make_entries(query: str, page: int, count: int) -> list[ImageEntry]:
    return [
        ImageEntry(
            id=f"{query}-{page}-{i}",
            title=f"{query} image {page}.{i}",
            date="2021-01-01",
            url=f"https://images-assets.nasa.gov/image/{query}-{page}-{i}/{query}-{page}-{i}~thumb.jpg",
        )
        for i in range(count)
    ]


class FakeSearchService:
    """Stands in for ImageSearchService and records every fetch."""

    def __init__(self, page_sizes=None, default_count=100, error=None):
        self.page_sizes = page_sizes or {}
        self.default_count = default_count
        self.error = error
        self.calls = []
        self._lock = threading.Lock()

    def fetch_page(self, query: str, page: int = 1) -> list[ImageEntry]:
        with self._lock:
            self.calls.append((query, page))
        if self.error is not None:
            raise self.error
        return make_entries(query, page, self.page_sizes.get(page, self.default_count))


@pytest.fixture
def raw_item():
    return make_item()


@pytest.fixture
def search_response():
    return {
        "collection": {
            "version": "1.0",
            "href": "https://images-api.nasa.gov/search?q=mars&media_type=image&page=1",
            "items": [
                make_item(title="Mars Rover", date_created="2012-08-06T00:00:00Z", href="https://img/1.jpg", nasa_id="M1"),
                make_item(title="No Links", href=None, nasa_id="M2"),
                make_item(title="Olympus Mons", date_created=None, href="https://img/3.jpg", nasa_id="M3"),
            ],
            "metadata": {"total_hits": 3},
        }
    }


@pytest.fixture
def fake_service():
    return FakeSearchService()
