"""Tests for custom exceptions."""

import httpx

from site_analysis.exceptions import (
    AnalysisError,
    FetchError,
    FetchErrorReason,
    SiteAnalysisError,
)


def test_site_analysis_error_base() -> None:
    error = SiteAnalysisError(message="Test error", code="test_error")
    assert error.message == "Test error"
    assert error.code == "test_error"
    assert error.status_code == httpx.codes.INTERNAL_SERVER_ERROR
    assert error.details == {}
    assert str(error) == "Test error"


def test_fetch_error() -> None:
    error = FetchError("https://example.gov/", FetchErrorReason.TIMEOUT, "Request timed out")
    assert error.code == "fetch_error"
    assert error.reason == FetchErrorReason.TIMEOUT
    assert error.status_code == httpx.codes.GATEWAY_TIMEOUT
    assert error.details == {"url": "https://example.gov/", "reason": "timeout"}
    assert isinstance(error, SiteAnalysisError)


def test_fetch_error_status_hints() -> None:
    url = "https://example.gov/"
    assert FetchError(url, FetchErrorReason.NETWORK, "x").status_code == 502
    assert FetchError(url, FetchErrorReason.NON_2XX, "x", 404).status_code == 502
    assert FetchError(url, FetchErrorReason.MALFORMED_URL, "x").status_code == 400


def test_fetch_error_reason_values() -> None:
    assert [reason.value for reason in FetchErrorReason] == [
        "network",
        "timeout",
        "non-2xx",
        "malformed-url",
    ]


def test_analysis_error_wraps_fetch_error() -> None:
    fetch_error = FetchError(
        "https://example.gov/", FetchErrorReason.NON_2XX, "HTTP error", upstream_status=500
    )
    error = AnalysisError("https://example.gov/", fetch_error)

    assert error.code == "analysis_error"
    assert error.fetch_error is fetch_error
    assert error.reason == FetchErrorReason.NON_2XX
    assert error.status_code == fetch_error.status_code
    assert error.details["upstream_status"] == 500
    assert error.message == "Failed to analyze site: HTTP error"
