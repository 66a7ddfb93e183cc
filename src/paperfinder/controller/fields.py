"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "parents,"
    "trashed,"
    "modifiedTime,"
    "createdTime,"
    "size,"
    "webViewLink"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"

# Drive caps pageSize at 1000.
PAGE_SIZE: int = 1000
ORDER_BY: str = "name"
