"""Shared fakes for the HTTP layer. No test touches the network."""

from __future__ import annotations

import pytest
import requests

from google_image_scraper import collector
from google_image_scraper.scraper import SEARCH_URL


class FakeResponse:
    def __init__(self, status_code=200, text="", content=b""):
        self.status_code = status_code
        self.text = text
        self.content = content
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def close(self):
        self.closed = True


class FakeSession:
    """Serves search pages by offset and images by URL.

    A page or image value may be a string/bytes body, a FakeResponse, or an
    exception instance to raise.
    """

    def __init__(self, pages=None, images=None):
        self.pages = pages or {}
        self.images = images or {}
        self.calls = []
        self.closed = False

    def close(self):
        self.closed = True

    @property
    def page_offsets(self):
        return [params["start"] for url, params, _ in self.calls if url == SEARCH_URL]

    @property
    def image_urls(self):
        return [url for url, _, _ in self.calls if url != SEARCH_URL]

    def get(self, url, params=None, headers=None, stream=False, **kwargs):
        self.calls.append((url, params, headers))
        if url == SEARCH_URL:
            value = self.pages.get(params["start"], "<html><body></body></html>")
            if isinstance(value, str):
                value = FakeResponse(text=value)
        else:
            value = self.images.get(url, FakeResponse(status_code=404))
            if isinstance(value, bytes):
                value = FakeResponse(content=value)
        if isinstance(value, Exception):
            raise value
        return value


def page_with(*srcs: str) -> str:
    imgs = "".join(f'<img src="{src}">' for src in srcs)
    return f"<html><body><div>{imgs}</div></body></html>"


@pytest.fixture
def delays(monkeypatch):
    """Records every inter-item delay instead of sleeping."""
    recorded = []
    monkeypatch.setattr(collector, "delay", recorded.append)
    return recorded
