"""paperfinder public API."""

from __future__ import annotations

from paperfinder.auth import AuthInfo, CredentialProvider
from paperfinder.config import Settings
from paperfinder.controller import DriveClient
from paperfinder.errors import (
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
from paperfinder.finder import PaperFinder
from paperfinder.models import (
    FileContent,
    FileKind,
    FolderHandle,
    Level,
    Month,
    RemoteFile,
    StructuredQuery,
)
from paperfinder.navigator import FolderNavigator, MetadataCache
from paperfinder.search import PaperSearch, StrategyResult

__all__ = [
    # High-level
    "PaperFinder",
    "Settings",
    # Components
    "DriveClient",
    "FolderNavigator",
    "MetadataCache",
    "PaperSearch",
    "StrategyResult",
    # Auth
    "AuthInfo",
    "CredentialProvider",
    # Models
    "StructuredQuery",
    "Month",
    "Level",
    "RemoteFile",
    "FileKind",
    "FolderHandle",
    "FileContent",
    # Errors
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
