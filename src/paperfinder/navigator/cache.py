"""Memoized folder-tree metadata."""

from __future__ import annotations

from typing import Optional

from paperfinder.models import FolderHandle

FolderKey = tuple


class MetadataCache:
    """
    Append-only lookups keyed by folder path.

    Keys:
        folders:          (year,) / (year, month) / (year, month, group)
        months:           year
        subject_folders:  (year, month)
        subjects:         (year, month, group)

    Writers are idempotent (same key, same value), so concurrent population
    needs no lock; the last write wins. Nothing is ever evicted except by
    `clear()`.
    """

    def __init__(self) -> None:
        self._folders: dict[FolderKey, FolderHandle] = {}
        self._years: Optional[list[int]] = None
        self._months: dict[int, list[str]] = {}
        self._subject_folders: dict[tuple[int, str], list[FolderHandle]] = {}
        self._subjects: dict[tuple[int, str, str], list[str]] = {}

    # Folder handles
    def get_folder(self, key: FolderKey) -> Optional[FolderHandle]:
        return self._folders.get(key)

    def put_folder(self, key: FolderKey, handle: FolderHandle) -> None:
        self._folders[key] = handle

    # Listings
    def get_years(self) -> Optional[list[int]]:
        return list(self._years) if self._years is not None else None

    def put_years(self, years: list[int]) -> None:
        self._years = list(years)

    def get_months(self, year: int) -> Optional[list[str]]:
        months = self._months.get(year)
        return list(months) if months is not None else None

    def put_months(self, year: int, months: list[str]) -> None:
        self._months[year] = list(months)

    def get_subject_folders(self, year: int, month: str) -> Optional[list[FolderHandle]]:
        folders = self._subject_folders.get((year, month))
        return list(folders) if folders is not None else None

    def put_subject_folders(self, year: int, month: str, folders: list[FolderHandle]) -> None:
        self._subject_folders[(year, month)] = list(folders)

    def get_subjects(self, year: int, month: str, group: str) -> Optional[list[str]]:
        subjects = self._subjects.get((year, month, group))
        return list(subjects) if subjects is not None else None

    def put_subjects(self, year: int, month: str, group: str, subjects: list[str]) -> None:
        self._subjects[(year, month, group)] = list(subjects)

    def clear(self) -> None:
        self._folders.clear()
        self._years = None
        self._months.clear()
        self._subject_folders.clear()
        self._subjects.clear()

    def __len__(self) -> int:
        return (
            len(self._folders)
            + (1 if self._years is not None else 0)
            + len(self._months)
            + len(self._subject_folders)
            + len(self._subjects)
        )
