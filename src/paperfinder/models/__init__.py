"""Public model exports for paperfinder."""

from __future__ import annotations

from .query import Level, Month, StructuredQuery
from .remote_file import (
    FileContent,
    FileKind,
    FolderHandle,
    RemoteFile,
    download_link_for,
    view_link_for,
)

__all__ = [
    "Month",
    "Level",
    "StructuredQuery",
    "FileKind",
    "RemoteFile",
    "FolderHandle",
    "FileContent",
    "view_link_for",
    "download_link_for",
]
