"""
Supplementary searches for language B paper 2 requests.

Each strategy is one remote lookup returning a `StrategyResult`. The audio
strategies escalate from the session's audio folder, to any audio folder of
the session, to the whole store, and stop at the first that finds something.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Sequence

from paperfinder.models import RemoteFile
from paperfinder.naming import (
    AUDIO_GROUP,
    audio_level,
    auxiliary_paper2_condition,
    extract_language_name,
    listening_audio_condition,
    matches_auxiliary_paper2,
)
from paperfinder.naming.groups import AUDIO_FOLDER_TOKEN, LANGUAGE_ACQUISITION_TOKEN

if TYPE_CHECKING:
    from paperfinder.controller import DriveClient
    from paperfinder.models import StructuredQuery
    from paperfinder.navigator import FolderNavigator

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class StrategyResult:
    found: bool
    files: list[RemoteFile] = field(default_factory=list)

    @classmethod
    def of(cls, files: list[RemoteFile]) -> StrategyResult:
        return cls(found=bool(files), files=list(files))

    @classmethod
    def empty(cls) -> StrategyResult:
        return cls(found=False, files=[])


class SearchStrategy:
    """Base class for one supplementary lookup."""

    name: str = "strategy"

    def __init__(self, client: DriveClient, navigator: FolderNavigator) -> None:
        self._client = client
        self._navigator = navigator

    def run(self, query: StructuredQuery) -> StrategyResult:  # pragma: no cover - abstract
        raise NotImplementedError


class ScopedAudioSearch(SearchStrategy):
    """Recordings in the audio group folder of the same session."""

    name = "scoped-audio"

    def run(self, query: StructuredQuery) -> StrategyResult:
        folder = self._navigator.resolve_group_folder(query.year, query.month, AUDIO_GROUP)
        if folder is None:
            return StrategyResult.empty()

        language = extract_language_name(query.subject)
        files = self._client.find(
            listening_audio_condition(language, query.level),
            parent_id=folder.folder_id,
        )
        return StrategyResult.of(files)


class BroaderAudioSearch(SearchStrategy):
    """Recordings in any folder of the session whose name mentions audio."""

    name = "broader-audio"

    def run(self, query: StructuredQuery) -> StrategyResult:
        folders = [
            f for f in self._navigator.list_subject_folders(query.year, query.month)
            if AUDIO_FOLDER_TOKEN.lower() in f.name.lower()
        ]
        if not folders:
            return StrategyResult.empty()

        language = extract_language_name(query.subject)
        condition = listening_audio_condition(language, query.level)
        files: list[RemoteFile] = []
        for folder in folders:
            files.extend(self._client.find(condition, parent_id=folder.folder_id))
        return StrategyResult.of(merge_distinct(files))


class GlobalAudioSearch(SearchStrategy):
    """
    Recordings filed directly under the archive root, ignoring year and
    month. Never searches outside the archive.
    """

    name = "global-audio"

    def run(self, query: StructuredQuery) -> StrategyResult:
        language = extract_language_name(query.subject)
        files = self._client.find(
            listening_audio_condition(language, query.level, loose_mime=True),
            parent_id=self._navigator.root_folder_id,
        )
        return StrategyResult.of(files)


class AuxiliaryPaper2Search(SearchStrategy):
    """
    Paper 2 booklets and comprehension parts of a language B course, taken
    from the session's language-acquisition folder.
    """

    name = "auxiliary-paper2"

    def run(self, query: StructuredQuery) -> StrategyResult:
        folders = [
            f for f in self._navigator.list_subject_folders(query.year, query.month)
            if LANGUAGE_ACQUISITION_TOKEN in f.name
        ]
        if not folders:
            return StrategyResult.empty()

        language = extract_language_name(query.subject)
        level = audio_level(query.level)
        files = self._client.find(auxiliary_paper2_condition(language), parent_id=folders[0].folder_id)
        kept = [f for f in files if matches_auxiliary_paper2(f.name, language, level)]
        logger.debug("Auxiliary paper 2 search kept %d of %d file(s)", len(kept), len(files))
        return StrategyResult.of(kept)


def run_escalating(strategies: Sequence[SearchStrategy], query: StructuredQuery) -> StrategyResult:
    """Run strategies in order; the first that finds anything wins."""
    for strategy in strategies:
        result = strategy.run(query)
        logger.debug("%s found %d file(s)", strategy.name, len(result.files))
        if result.found:
            return result
    return StrategyResult.empty()


def merge_distinct(*groups: Iterable[RemoteFile]) -> list[RemoteFile]:
    """Concatenate, dropping repeated file ids; first occurrence wins."""
    seen: set[str] = set()
    merged: list[RemoteFile] = []
    for group in groups:
        for f in group:
            if f.file_id in seen:
                continue
            seen.add(f.file_id)
            merged.append(f)
    return merged
