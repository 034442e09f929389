"""Performance assessment from fetch timing and page weight."""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from site_analysis.scoring.base import MAX_SCORE, clamp_score

# Thresholds and deductions
SLOW_LOAD_MS = 3000
VERY_SLOW_LOAD_MS = 5000
LOAD_TIME_PENALTY = 20  # Applied once per exceeded load threshold
MAX_REQUESTS = 50
TOO_MANY_REQUESTS_PENALTY = 15
MAX_IMAGES = 20
TOO_MANY_IMAGES_PENALTY = 10
MAX_PAGE_SIZE_BYTES = 1_000_000
PAGE_TOO_LARGE_PENALTY = 15


@dataclass(frozen=True)
class PerformanceAssessment:
    """Page weight and load time for a single page."""

    load_time_ms: int
    page_size_bytes: int  # Serialized markup length, not bytes on the wire
    request_count: int
    image_count: int
    script_count: int
    stylesheet_count: int
    score: int

    def to_dict(self) -> dict:
        return {
            "load_time_ms": self.load_time_ms,
            "page_size_bytes": self.page_size_bytes,
            "request_count": self.request_count,
            "image_count": self.image_count,
            "script_count": self.script_count,
            "stylesheet_count": self.stylesheet_count,
            "score": self.score,
        }


def calculate_performance_score(
    load_time_ms: int,
    request_count: int,
    image_count: int,
    page_size_bytes: int,
) -> int:
    """Apply the fixed performance deductions."""
    score = MAX_SCORE
    if load_time_ms > SLOW_LOAD_MS:
        score -= LOAD_TIME_PENALTY
    if load_time_ms > VERY_SLOW_LOAD_MS:
        score -= LOAD_TIME_PENALTY
    if request_count > MAX_REQUESTS:
        score -= TOO_MANY_REQUESTS_PENALTY
    if image_count > MAX_IMAGES:
        score -= TOO_MANY_IMAGES_PENALTY
    if page_size_bytes > MAX_PAGE_SIZE_BYTES:
        score -= PAGE_TOO_LARGE_PENALTY
    return clamp_score(score)


def analyze_performance(document: BeautifulSoup, load_time_ms: int) -> PerformanceAssessment:
    """
    Estimate page performance.

    Args:
        document: Parsed page
        load_time_ms: Time taken to fetch the page

    Returns:
        PerformanceAssessment
    """
    image_count = len(document.select("img"))
    script_count = len(document.select("script[src]"))
    stylesheet_count = len(document.select("link[rel=stylesheet i]"))

    page_size_bytes = len(str(document))
    # The document itself plus one request per referenced resource
    request_count = 1 + image_count + script_count + stylesheet_count

    return PerformanceAssessment(
        load_time_ms=load_time_ms,
        page_size_bytes=page_size_bytes,
        request_count=request_count,
        image_count=image_count,
        script_count=script_count,
        stylesheet_count=stylesheet_count,
        score=calculate_performance_score(
            load_time_ms=load_time_ms,
            request_count=request_count,
            image_count=image_count,
            page_size_bytes=page_size_bytes,
        ),
    )
