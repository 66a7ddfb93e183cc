"""Data model for remote store items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from paperfinder.util.mime import is_audio, is_folder, is_pdf

VIEW_LINK_TEMPLATE = "https://drive.google.com/file/d/{file_id}/view"
DOWNLOAD_LINK_TEMPLATE = "https://www.googleapis.com/drive/v3/files/{file_id}?alt=media"


class FileKind(str, Enum):
    """What a remote item is, as far as the viewers care."""

    PDF = "pdf"
    AUDIO = "audio"
    FOLDER = "folder"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class RemoteFile:
    """
    Immutable snapshot of a remote object.

    Notes:
        - Not owned beyond the lifetime of the request that fetched it.
        - `view_link` falls back to the public Drive viewer URL when the
          remote did not send one.
    """

    file_id: str
    name: str
    mime_type: str
    parents: tuple[str, ...] = field(default_factory=tuple)

    size: Optional[int] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    view_link: Optional[str] = None
    trashed: bool = False

    def __post_init__(self) -> None:
        if self.view_link is None and self.file_id:
            object.__setattr__(self, "view_link", view_link_for(self.file_id))

    @property
    def kind(self) -> FileKind:
        if is_folder(self.mime_type):
            return FileKind.FOLDER
        if is_pdf(self.mime_type):
            return FileKind.PDF
        if is_audio(self.mime_type, self.name):
            return FileKind.AUDIO
        return FileKind.OTHER


@dataclass(slots=True, frozen=True)
class FolderHandle:
    """A resolved folder. Cached for the process lifetime, never mutated."""

    folder_id: str
    name: str

    @classmethod
    def from_remote_file(cls, info: RemoteFile) -> FolderHandle:
        return cls(folder_id=info.file_id, name=info.name)


@dataclass(slots=True, frozen=True)
class FileContent:
    """Bytes of a remote file plus what a proxy needs to serve them inline."""

    file_id: str
    name: str
    content_type: str
    data: bytes


def view_link_for(file_id: str) -> str:
    return VIEW_LINK_TEMPLATE.format(file_id=file_id)


def download_link_for(file_id: str) -> str:
    return DOWNLOAD_LINK_TEMPLATE.format(file_id=file_id)
