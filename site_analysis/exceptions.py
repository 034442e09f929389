"""Custom exceptions and error handling."""

from enum import StrEnum
from typing import Any

import httpx


class FetchErrorReason(StrEnum):
    """Why a page could not be fetched."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    NON_2XX = "non-2xx"
    MALFORMED_URL = "malformed-url"


# HTTP status an outer service should answer with for each fetch failure
_REASON_STATUS = {
    FetchErrorReason.NETWORK: httpx.codes.BAD_GATEWAY,
    FetchErrorReason.TIMEOUT: httpx.codes.GATEWAY_TIMEOUT,
    FetchErrorReason.NON_2XX: httpx.codes.BAD_GATEWAY,
    FetchErrorReason.MALFORMED_URL: httpx.codes.BAD_REQUEST,
}


class SiteAnalysisError(Exception):
    """Base exception for the site analysis package."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        status_code: int = httpx.codes.INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class FetchError(SiteAnalysisError):
    """The page could not be retrieved or parsed."""

    def __init__(
        self,
        url: str,
        reason: FetchErrorReason,
        message: str,
        upstream_status: int | None = None,
    ):
        self.url = url
        self.reason = reason
        self.upstream_status = upstream_status
        details: dict[str, Any] = {"url": url, "reason": reason.value}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        super().__init__(
            message=message,
            code="fetch_error",
            status_code=_REASON_STATUS[reason],
            details=details,
        )


class AnalysisError(SiteAnalysisError):
    """The analysis pipeline stopped before producing a result."""

    def __init__(self, url: str, fetch_error: FetchError):
        self.url = url
        self.fetch_error = fetch_error
        super().__init__(
            message=f"Failed to analyze site: {fetch_error.message}",
            code="analysis_error",
            status_code=fetch_error.status_code,
            details=dict(fetch_error.details),
        )

    @property
    def reason(self) -> FetchErrorReason:
        return self.fetch_error.reason
