"""Site analysis runner.

Fetches a page once, runs the six assessments over it and assembles a
single AnalysisResult:
- accessibility
- performance
- content
- technical
- usability
- government compliance

A fetch failure aborts the run; no partial result is ever returned.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog
from bs4 import BeautifulSoup

from site_analysis.crawler.fetcher import Fetcher
from site_analysis.exceptions import AnalysisError, FetchError
from site_analysis.scoring.accessibility import AccessibilityAssessment, analyze_accessibility
from site_analysis.scoring.compliance import ComplianceAssessment, analyze_compliance
from site_analysis.scoring.content import ContentAssessment, analyze_content
from site_analysis.scoring.performance import PerformanceAssessment, analyze_performance
from site_analysis.scoring.technical import TechnicalAssessment, analyze_technical
from site_analysis.scoring.usability import UsabilityAssessment, analyze_usability

logger = structlog.get_logger(__name__)

DEFAULT_CONCURRENCY = 5


@dataclass(frozen=True)
class AnalysisResult:
    """Complete analysis of one page."""

    url: str
    analyzed_at: datetime
    response_time_ms: int
    status_code: int
    accessibility: AccessibilityAssessment
    performance: PerformanceAssessment
    content: ContentAssessment
    technical: TechnicalAssessment
    usability: UsabilityAssessment
    compliance: ComplianceAssessment

    @property
    def scores(self) -> dict[str, int]:
        """The bounded scores, keyed by assessment."""
        return {
            "accessibility": self.accessibility.score,
            "performance": self.performance.score,
            "usability": self.usability.score,
            "compliance": self.compliance.compliance_score,
        }

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "analyzed_at": self.analyzed_at.isoformat(),
            "response_time_ms": self.response_time_ms,
            "status_code": self.status_code,
            "accessibility": self.accessibility.to_dict(),
            "performance": self.performance.to_dict(),
            "content": self.content.to_dict(),
            "technical": self.technical.to_dict(),
            "usability": self.usability.to_dict(),
            "compliance": self.compliance.to_dict(),
        }


def analyze_document(
    document: BeautifulSoup,
    url: str,
    response_time_ms: int,
    status_code: int,
) -> AnalysisResult:
    """
    Run all six assessments over an already-parsed page.

    Args:
        document: Parsed page
        url: URL the page was requested from
        response_time_ms: Fetch time, feeds the performance assessment
        status_code: Status the page was served with

    Returns:
        AnalysisResult
    """
    return AnalysisResult(
        url=url,
        analyzed_at=datetime.now(UTC),
        response_time_ms=response_time_ms,
        status_code=status_code,
        accessibility=analyze_accessibility(document),
        performance=analyze_performance(document, response_time_ms),
        content=analyze_content(document),
        technical=analyze_technical(document, url),
        usability=analyze_usability(document),
        compliance=analyze_compliance(document),
    )


def analyze(url: str, fetcher: Fetcher | None = None) -> AnalysisResult:
    """
    Fetch a page and analyze it.

    This is the main entry point for single-page analysis.

    Args:
        url: Absolute http(s) URL
        fetcher: Fetcher to use; defaults to one with the standard
            timeout and client identity

    Returns:
        AnalysisResult

    Raises:
        AnalysisError: wrapping the FetchError when the page could not
            be fetched

    Example:
        result = analyze("https://www.ecfr.gov/")
        print(result.scores)
    """
    fetcher = fetcher or Fetcher()

    logger.info("site_analysis_starting", url=url)

    try:
        fetched = fetcher.fetch(url)
    except FetchError as e:
        logger.error(
            "site_analysis_failed",
            url=url,
            reason=e.reason.value,
            error=e.message,
        )
        raise AnalysisError(url, e) from e

    result = analyze_document(
        fetched.document,
        url=url,
        response_time_ms=fetched.elapsed_ms,
        status_code=fetched.status_code,
    )

    logger.info(
        "site_analysis_complete",
        url=url,
        response_time_ms=result.response_time_ms,
        wcag_level=result.accessibility.wcag_level,
        **result.scores,
    )

    return result


async def analyze_async(url: str, fetcher: Fetcher | None = None) -> AnalysisResult:
    """Same as analyze, run in a worker thread so callers can await it."""
    return await asyncio.to_thread(analyze, url, fetcher)


async def analyze_many(
    urls: Sequence[str],
    concurrency: int = DEFAULT_CONCURRENCY,
    fetcher: Fetcher | None = None,
) -> list[AnalysisResult | AnalysisError]:
    """
    Analyze several pages with bounded concurrency.

    Args:
        urls: URLs to analyze
        concurrency: Maximum analyses in flight
        fetcher: Shared fetcher (holds no per-request state)

    Returns:
        One AnalysisResult or AnalysisError per URL, in input order
    """
    semaphore = asyncio.Semaphore(concurrency)

    async def analyze_with_semaphore(url: str) -> AnalysisResult | AnalysisError:
        async with semaphore:
            try:
                return await analyze_async(url, fetcher)
            except AnalysisError as e:
                return e

    tasks = [analyze_with_semaphore(url) for url in urls]
    return await asyncio.gather(*tasks)
