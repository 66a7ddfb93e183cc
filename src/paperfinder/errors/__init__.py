"""Public error exports for paperfinder."""

from __future__ import annotations

from .exceptions import (
    AccessDeniedError,
    ApiError,
    ConfigError,
    HttpErrorInfo,
    InvalidQueryError,
    MissingCredentialError,
    NetworkError,
    PaperFinderError,
    QuotaExceededError,
    RateLimitError,
    RemoteNotFoundError,
    RemoteTransportError,
    map_http_error,
)

__all__ = [
    "PaperFinderError",
    "ConfigError",
    "InvalidQueryError",
    "MissingCredentialError",
    "RemoteTransportError",
    "RateLimitError",
    "QuotaExceededError",
    "AccessDeniedError",
    "RemoteNotFoundError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
