"""Folder navigation exports for paperfinder."""

from __future__ import annotations

from .cache import MetadataCache
from .folder_navigator import FolderNavigator

__all__ = ["FolderNavigator", "MetadataCache"]
