"""Page fetching."""

from site_analysis.crawler.fetcher import (
    DEFAULT_TIMEOUT_MS,
    USER_AGENT,
    Fetcher,
    FetchResult,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "USER_AGENT",
    "Fetcher",
    "FetchResult",
]
