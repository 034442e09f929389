"""HTTP fetcher for single-page analysis."""

import re
import time
from dataclasses import dataclass
from urllib.parse import urlparse

import httpx
import structlog
from bs4 import BeautifulSoup, ParserRejectedMarkup

from site_analysis.exceptions import FetchError, FetchErrorReason
from site_analysis.extraction.document import parse_html

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_MS = 10_000
USER_AGENT = "USDS Site Analysis Tool/1.0"

# application/xml, application/xhtml+xml, text/rss+xml, ...
XML_CONTENT_TYPE = re.compile(r"(application|text)/\w*\+?xml")


def is_markup_content_type(content_type: str) -> bool:
    """Check whether a Content-Type header names something we can parse.

    A missing header is given the benefit of the doubt.
    """
    media_type = content_type.split(";", 1)[0].strip().lower()
    if not media_type:
        return True
    return media_type.startswith("text/") or XML_CONTENT_TYPE.match(media_type) is not None


@dataclass(frozen=True)
class FetchResult:
    """A successfully fetched and parsed page."""

    url: str
    final_url: str  # After redirects
    status_code: int
    html: str
    document: BeautifulSoup
    elapsed_ms: int  # Request plus parse


class Fetcher:
    """
    Fetches one page per call and parses it.

    Makes exactly one attempt: timeouts, transport failures and non-2xx
    responses surface as FetchError and are never retried here.
    """

    def __init__(
        self,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        user_agent: str = USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout_ms = timeout_ms
        self.user_agent = user_agent
        self._transport = transport

    def _validate_url(self, url: str) -> None:
        """Reject URLs that cannot name an http(s) resource."""
        try:
            parsed = urlparse(url)
        except ValueError as e:
            raise FetchError(url, FetchErrorReason.MALFORMED_URL, f"Malformed URL: {e}") from e

        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise FetchError(
                url,
                FetchErrorReason.MALFORMED_URL,
                f"Malformed URL: {url!r} is not an absolute http(s) URL",
            )

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.timeout_ms / 1000,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        )

    def fetch(self, url: str) -> FetchResult:
        """
        Fetch and parse a URL.

        Args:
            url: Absolute http(s) URL

        Returns:
            FetchResult with the parsed document and timing

        Raises:
            FetchError: on malformed URL, timeout, transport failure,
                non-2xx status, a non-markup content type or markup the
                parser rejects
        """
        self._validate_url(url)
        logger.info("fetch_starting", url=url, timeout_ms=self.timeout_ms)

        start = time.perf_counter()
        try:
            with self._client() as client:
                response = client.get(url)
                html = response.text
        except httpx.TimeoutException as e:
            logger.warning("fetch_failed", url=url, reason=FetchErrorReason.TIMEOUT.value)
            raise FetchError(
                url,
                FetchErrorReason.TIMEOUT,
                f"Request timed out after {self.timeout_ms}ms",
            ) from e
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            logger.warning("fetch_failed", url=url, reason=FetchErrorReason.MALFORMED_URL.value)
            raise FetchError(url, FetchErrorReason.MALFORMED_URL, f"Malformed URL: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(
                "fetch_failed", url=url, reason=FetchErrorReason.NETWORK.value, error=str(e)
            )
            raise FetchError(url, FetchErrorReason.NETWORK, f"Network error: {e}") from e

        if not response.is_success:
            logger.warning(
                "fetch_failed",
                url=url,
                reason=FetchErrorReason.NON_2XX.value,
                status_code=response.status_code,
            )
            raise FetchError(
                url,
                FetchErrorReason.NON_2XX,
                f"HTTP error fetching URL. Status={response.status_code}",
                upstream_status=response.status_code,
            )

        content_type = response.headers.get("content-type", "")
        if not is_markup_content_type(content_type):
            logger.warning(
                "fetch_failed",
                url=url,
                reason=FetchErrorReason.NETWORK.value,
                content_type=content_type,
            )
            raise FetchError(
                url,
                FetchErrorReason.NETWORK,
                f"Unsupported content type {content_type!r}",
            )

        try:
            document = parse_html(html)
        except ParserRejectedMarkup as e:
            logger.warning("fetch_failed", url=url, reason=FetchErrorReason.NETWORK.value)
            raise FetchError(url, FetchErrorReason.NETWORK, f"Unparsable response: {e}") from e

        elapsed_ms = int((time.perf_counter() - start) * 1000)

        logger.info(
            "fetch_complete",
            url=url,
            final_url=str(response.url),
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
            size=len(html),
        )

        return FetchResult(
            url=url,
            final_url=str(response.url),
            status_code=response.status_code,
            html=html,
            document=document,
            elapsed_ms=elapsed_ms,
        )

