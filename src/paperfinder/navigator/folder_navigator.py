"""Year -> Month -> Group folder resolution."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Optional

from paperfinder.models import FolderHandle, Month, RemoteFile
from paperfinder.naming import (
    LANGUAGE_ACQUISITION_GROUP,
    extract_subject_from_audio_filename,
    extract_subject_from_filename,
    is_audio_group,
)
from paperfinder.query import Expr, NameIs, all_of, any_of, is_audio, is_folder, is_pdf

from .cache import MetadataCache

if TYPE_CHECKING:
    from paperfinder.controller import DriveClient

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"^\d{4}$")
_LANGUAGE_ACQUISITION_SUFFIXES: tuple[str, ...] = ("_B", "_ab_initio")


class FolderNavigator:
    """
    Walks the archive tree: root / <Year> / <Month> / <Group>.

    Every resolved level and every listing is memoized in the shared
    `MetadataCache`. Misses and empty listings are not memoized, so a remote
    failure that degraded to "nothing found" is retried on the next call.
    """

    def __init__(
        self,
        client: DriveClient,
        root_folder_id: str,
        cache: Optional[MetadataCache] = None,
        *,
        min_year: int = 2010,
        max_year: Optional[int] = None,
    ) -> None:
        self._client = client
        self._root_folder_id = root_folder_id
        self._cache = cache if cache is not None else MetadataCache()
        self._min_year = min_year
        self._max_year = max_year

    @property
    def cache(self) -> MetadataCache:
        return self._cache

    @property
    def root_folder_id(self) -> str:
        return self._root_folder_id

    # ----------------------------
    # Resolution
    # ----------------------------
    def resolve_year_folder(self, year: int) -> Optional[FolderHandle]:
        key = (int(year),)
        cached = self._cache.get_folder(key)
        if cached is not None:
            return cached

        handle = self._find_child_folder(self._root_folder_id, str(int(year)))
        if handle is None:
            logger.info("Year folder %r not found", str(year))
            return None
        self._cache.put_folder(key, handle)
        return handle

    def resolve_month_folder(self, year: int, month: Any) -> Optional[FolderHandle]:
        month_name = _month_name(month)
        key = (int(year), month_name)
        cached = self._cache.get_folder(key)
        if cached is not None:
            return cached

        year_folder = self.resolve_year_folder(year)
        if year_folder is None:
            return None

        handle = self._find_child_folder(year_folder.folder_id, month_name)
        if handle is None:
            logger.info("Month folder %r not found in year %s", month_name, year)
            return None
        self._cache.put_folder(key, handle)
        return handle

    def resolve_group_folder(self, year: int, month: Any, group: str) -> Optional[FolderHandle]:
        """
        Returns:
            The group folder, or None when any level of the path is missing.
        """
        month_name = _month_name(month)
        key = (int(year), month_name, group)
        cached = self._cache.get_folder(key)
        if cached is not None:
            logger.debug("Using cached group folder %r (%s)", group, cached.folder_id)
            return cached

        month_folder = self.resolve_month_folder(year, month_name)
        if month_folder is None:
            return None

        handle = self._find_child_folder(month_folder.folder_id, group)
        if handle is None:
            logger.info("Group folder %r not found in %s %s", group, year, month_name)
            return None
        self._cache.put_folder(key, handle)
        return handle

    # ----------------------------
    # Listings
    # ----------------------------
    def list_subject_folders(self, year: int, month: Any) -> list[FolderHandle]:
        """All folders directly under the month folder (the groups)."""
        month_name = _month_name(month)
        cached = self._cache.get_subject_folders(int(year), month_name)
        if cached is not None:
            return cached

        month_folder = self.resolve_month_folder(year, month_name)
        if month_folder is None:
            return []

        folders = [
            FolderHandle.from_remote_file(f)
            for f in self._client.find(is_folder(), parent_id=month_folder.folder_id)
        ]
        if folders:
            self._cache.put_subject_folders(int(year), month_name, folders)
        return folders

    def list_available_years(self) -> list[int]:
        """Four-digit year folders under the root, newest first."""
        cached = self._cache.get_years()
        if cached is not None:
            return cached

        folders = self._client.find(is_folder(), parent_id=self._root_folder_id)
        years = sorted(
            {int(f.name) for f in folders if _YEAR_RE.match(f.name) and self._in_year_range(int(f.name))},
            reverse=True,
        )
        if years:
            self._cache.put_years(years)
        logger.debug("Found %d year folder(s)", len(years))
        return years

    def list_available_months(self, year: int) -> list[str]:
        cached = self._cache.get_months(int(year))
        if cached is not None:
            return cached

        year_folder = self.resolve_year_folder(year)
        if year_folder is None:
            return []

        expr = all_of(is_folder(), any_of(*(NameIs(m.value) for m in Month)))
        names = {m.value for m in Month}
        months = sorted(
            {f.name for f in self._client.find(expr, parent_id=year_folder.folder_id) if f.name in names}
        )
        if months:
            self._cache.put_months(int(year), months)
        return months

    def list_available_groups(self, year: int, month: Any) -> list[str]:
        return [f.name for f in self.list_subject_folders(year, month)]

    def list_available_subjects(self, year: int, month: Any, group: str) -> list[str]:
        """
        Subjects offered for a group, derived from the file names in it.

        The audio group lists recordings, every other group lists PDFs. For
        the language-acquisition group only `*_B` and `*_ab_initio`
        subjects are kept.
        """
        month_name = _month_name(month)
        cached = self._cache.get_subjects(int(year), month_name, group)
        if cached is not None:
            return cached

        folder = self.resolve_group_folder(year, month_name, group)
        if folder is None:
            return []

        audio = is_audio_group(group)
        expr: Expr = is_audio() if audio else is_pdf()
        files = self._client.find(expr, parent_id=folder.folder_id)

        subjects: set[str] = set()
        for f in files:
            if audio:
                name = extract_subject_from_audio_filename(f.name)
            else:
                name = extract_subject_from_filename(f.name)
            if name:
                subjects.add(name)

        result = sorted(subjects)
        if group == LANGUAGE_ACQUISITION_GROUP:
            result = [s for s in result if s.endswith(_LANGUAGE_ACQUISITION_SUFFIXES)]

        logger.debug(
            "Found %d subject(s) in %s %s %r from %d file(s)",
            len(result), year, month_name, group, len(files),
        )
        if result:
            self._cache.put_subjects(int(year), month_name, group, result)
        return result

    # ----------------------------
    # Internals
    # ----------------------------
    def _find_child_folder(self, parent_id: str, name: str) -> Optional[FolderHandle]:
        matches: list[RemoteFile] = [
            f
            for f in self._client.find(all_of(is_folder(), NameIs(name)), parent_id=parent_id)
            if f.name == name
        ]
        if not matches:
            return None
        if len(matches) > 1:
            logger.debug("%d folders named %r under %s, using the first", len(matches), name, parent_id)
        return FolderHandle.from_remote_file(matches[0])

    def _in_year_range(self, year: int) -> bool:
        if year < self._min_year:
            return False
        return self._max_year is None or year <= self._max_year


def _month_name(month: Any) -> str:
    return str(getattr(month, "value", month))
