"""English-edition preference among translated papers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .languages import base_file_name, has_language_token

if TYPE_CHECKING:
    from paperfinder.models import RemoteFile

TIMEZONE_MARKER: str = "TZ"


def filter_english_files(files: list[RemoteFile]) -> list[RemoteFile]:
    """
    Keep one English edition per paper.

    Files are grouped by base name (translation suffix removed). Each group
    contributes its file without a translation token, preferring one without
    a timezone marker; a group with only translations contributes nothing.
    """
    groups: dict[str, list[RemoteFile]] = {}
    for f in files:
        groups.setdefault(base_file_name(f.name), []).append(f)

    english: list[RemoteFile] = []
    for members in groups.values():
        chosen = _english_version(members)
        if chosen is not None:
            english.append(chosen)
    return english


def _english_version(members: list[RemoteFile]) -> Optional[RemoteFile]:
    candidates = [f for f in members if not has_language_token(f.name)]
    if not candidates:
        return None
    without_tz = [f for f in candidates if TIMEZONE_MARKER not in f.name]
    return (without_tz or candidates)[0]
