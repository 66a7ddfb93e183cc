"""PaperFinder: one client, one cache, one navigator, one search."""

from __future__ import annotations

import logging
from typing import Any, Optional

from paperfinder.config import Settings
from paperfinder.controller import DriveClient
from paperfinder.errors import ConfigError, InvalidQueryError
from paperfinder.models import (
    FileContent,
    FileKind,
    RemoteFile,
    StructuredQuery,
    download_link_for,
    view_link_for,
)
from paperfinder.navigator import FolderNavigator, MetadataCache
from paperfinder.query import FullTextContains, NameContains, is_pdf
from paperfinder.search import PaperSearch
from paperfinder.util.mime import DEFAULT_AUDIO_MIME, PDF_MIME

logger = logging.getLogger(__name__)


class PaperFinder:
    """
    Entry point for searches and picker options.

    Owns its client and metadata cache; nothing is shared between two
    finders. Use as a context manager, or call `close()` when done.
    """

    def __init__(self, settings: Settings) -> None:
        if settings.auth_info is None:
            raise ConfigError("Settings.auth_info is required to build a Drive client")
        client = DriveClient(
            settings.auth_info,
            timeout=settings.request_timeout,
            supports_all_drives=settings.supports_all_drives,
        )
        self._setup(
            client,
            settings.root_folder_id,
            min_year=settings.min_year,
            max_year=settings.max_year,
        )

    @classmethod
    def from_client(
        cls,
        client: Any,
        root_folder_id: str,
        *,
        min_year: int = 2010,
        max_year: Optional[int] = None,
    ) -> "PaperFinder":
        """Create a finder around an existing client (useful for tests)."""
        obj = cls.__new__(cls)
        obj._setup(client, root_folder_id, min_year=min_year, max_year=max_year)
        return obj

    def _setup(
        self,
        client: Any,
        root_folder_id: str,
        *,
        min_year: int,
        max_year: Optional[int],
    ) -> None:
        self._client = client
        self._root_folder_id = root_folder_id
        self._cache = MetadataCache()
        self._navigator = FolderNavigator(
            client,
            root_folder_id,
            self._cache,
            min_year=min_year,
            max_year=max_year,
        )
        self._search = PaperSearch(client, self._navigator)

    def __enter__(self) -> "PaperFinder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def navigator(self) -> FolderNavigator:
        return self._navigator

    @property
    def cache(self) -> MetadataCache:
        return self._cache

    # ----------------------------
    # Search
    # ----------------------------
    def search(self, query: StructuredQuery) -> list[RemoteFile]:
        return self._search.search(query)

    def search_papers(
        self,
        year: Any,
        month: Any,
        group: str,
        subject: str,
        level: Any = None,
        paper: Any = None,
    ) -> list[RemoteFile]:
        """
        Search with picker values, e.g. ("2023", "May", group, "French B",
        "HL", "Paper 2").

        Raises:
            InvalidQueryError: if the values do not form a valid query.
        """
        query = StructuredQuery.create(year, month, group, subject, level, paper)
        return self.search(query)

    def search_text(self, text: str) -> list[RemoteFile]:
        """PDFs whose name or content mentions `text`."""
        text = text.strip()
        if not text:
            return []
        expr = is_pdf() & (NameContains(text) | FullTextContains(text))
        return self._client.find(expr)

    def list_pdf_files(self, folder_id: Optional[str] = None) -> list[RemoteFile]:
        """PDFs directly under `folder_id`, or anywhere when not given."""
        return self._client.find(is_pdf(), parent_id=folder_id)

    # ----------------------------
    # Picker options
    # ----------------------------
    def available_years(self) -> list[int]:
        return self._navigator.list_available_years()

    def available_months(self, year: Any) -> list[str]:
        return self._navigator.list_available_months(_year(year))

    def available_options(
        self,
        year: Any,
        month: Any,
        group: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Groups of a session, or the subjects of one group.

        Returns:
            {"type": "groups" | "subjects", "data": [...]}
        """
        year = _year(year)
        month = str(getattr(month, "value", month))
        if group:
            return {
                "type": "subjects",
                "data": self._navigator.list_available_subjects(year, month, group),
            }
        return {"type": "groups", "data": self._navigator.list_available_groups(year, month)}

    # ----------------------------
    # File retrieval
    # ----------------------------
    def get_file(self, file_id: str) -> Optional[RemoteFile]:
        return self._client.get_file(file_id)

    def get_content(self, file_id: str) -> Optional[FileContent]:
        """
        Bytes and content type for serving a file inline.

        Returns None when the file or its content cannot be fetched.
        """
        info = self._client.get_file(file_id)
        if info is None:
            return None
        data = self._client.get_content(file_id)
        if data is None:
            return None
        return FileContent(
            file_id=file_id,
            name=info.name,
            content_type=_content_type(info),
            data=data,
        )

    def view_link(self, file_id: str) -> str:
        info = self._client.get_file(file_id)
        if info is not None and info.view_link:
            return info.view_link
        return view_link_for(file_id)

    def download_link(self, file_id: str) -> str:
        return download_link_for(file_id)

    def close(self) -> None:
        self._cache.clear()
        self._client.close()


def _content_type(info: RemoteFile) -> str:
    if info.kind is FileKind.AUDIO:
        return info.mime_type if info.mime_type.startswith("audio/") else DEFAULT_AUDIO_MIME
    return info.mime_type or PDF_MIME


def _year(value: Any) -> int:
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise InvalidQueryError("year must be numeric", details={"year": value}, cause=exc) from exc
