"""Exception hierarchy and HTTP error mapping for paperfinder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class PaperFinderError(Exception):
    """
    Base exception for paperfinder.

    Attributes:
        details: Optional structured information (e.g., HTTP status, query).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigError(PaperFinderError):
    """Raised when required configuration is missing or malformed."""


class InvalidQueryError(PaperFinderError):
    """Raised when a structured query violates its field-presence rules."""


class MissingCredentialError(PaperFinderError):
    """
    Raised when no valid token can be obtained for the remote store.

    Unlike transport errors this is never swallowed: callers are expected to
    re-authenticate.
    """


class RemoteTransportError(PaperFinderError):
    """Base for non-success responses, timeouts and network failures."""


class RateLimitError(RemoteTransportError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(RemoteTransportError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class AccessDeniedError(RemoteTransportError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class RemoteNotFoundError(RemoteTransportError):
    """Raised when a remote resource is not found (HTTP 404)."""


class NetworkError(RemoteTransportError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(RemoteTransportError):
    """Raised for unclassified API errors (400, 5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to paperfinder exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> PaperFinderError:
    """
    Map an HTTP error to a paperfinder exception.

    Policy:
        - 401 -> MissingCredentialError
        - 403 -> AccessDeniedError, but QuotaExceededError if quota-related
        - 404 -> RemoteNotFoundError
        - 429 -> RateLimitError
        - otherwise (400, 5xx, ...) -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 401:
        return MissingCredentialError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return AccessDeniedError(message, details=details, cause=cause)
    if info.status_code == 404:
        return RemoteNotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
