"""Remote store client exports for paperfinder."""

from __future__ import annotations

from .drive_client import DriveClient

__all__ = ["DriveClient"]
