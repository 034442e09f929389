"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable

import httpx
import pytest

# Set test environment before any app code runs
os.environ["ENV"] = "test"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make each test read settings from its own environment."""
    from site_analysis.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_fetcher():
    """Build a Fetcher whose requests are answered by a handler instead of the network."""
    from site_analysis.crawler.fetcher import Fetcher

    def _make(handler: Handler, **kwargs) -> Fetcher:
        return Fetcher(transport=httpx.MockTransport(handler), **kwargs)

    return _make


@pytest.fixture
def serve_html():
    """Handler factory that serves fixed markup and records the requests it saw."""

    def _serve(html: str, status_code: int = 200) -> tuple[Handler, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                status_code,
                text=html,
                headers={"content-type": "text/html; charset=utf-8"},
            )

        return handler, seen

    return _serve
