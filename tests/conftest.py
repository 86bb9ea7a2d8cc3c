"""Shared fixtures: canned Unsplash payloads and a recording fake client."""

import copy

import pytest

from core.models import SearchQuery


def make_photo(photo_id, description=None, alt_description=None, name="Jane Doe", username="janedoe"):
    return {
        "id": photo_id,
        "description": description,
        "alt_description": alt_description,
        "urls": {
            "raw": f"https://images.unsplash.com/{photo_id}?raw",
            "full": f"https://images.unsplash.com/{photo_id}?full",
            "regular": f"https://images.unsplash.com/{photo_id}?regular",
            "small": f"https://images.unsplash.com/{photo_id}?small",
            "thumb": f"https://images.unsplash.com/{photo_id}?thumb",
        },
        "links": {
            "self": f"https://api.unsplash.com/photos/{photo_id}",
            "html": f"https://unsplash.com/photos/{photo_id}",
            "download": f"https://unsplash.com/photos/{photo_id}/download",
        },
        "user": {"name": name, "username": username},
    }


class FakeUnsplashClient:
    """Stands in for UnsplashClient; records every query it receives."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls: list[SearchQuery] = []

    def search_photos(self, query):
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.payload)


@pytest.fixture
def cats_payload():
    return {
        "total": 2,
        "total_pages": 1,
        "results": [
            make_photo("x1", description=None, alt_description="a cat"),
            make_photo("x2", description="a dog", alt_description="ignored"),
        ],
    }


@pytest.fixture
def empty_payload():
    return {"total": 0, "total_pages": 0, "results": []}
