"""Structured query -> merged file list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from paperfinder.models import FileKind, RemoteFile, StructuredQuery
from paperfinder.naming import (
    LANGUAGE_ACQUISITION_GROUP,
    build_primary_filter,
    filter_by_paper,
    filter_english_files,
    filter_music_level,
    filter_subjects,
    is_language_b_subject,
    is_language_group,
)

from .strategies import (
    AuxiliaryPaper2Search,
    BroaderAudioSearch,
    GlobalAudioSearch,
    ScopedAudioSearch,
    SearchStrategy,
    merge_distinct,
    run_escalating,
)

if TYPE_CHECKING:
    from paperfinder.controller import DriveClient
    from paperfinder.navigator import FolderNavigator

logger = logging.getLogger(__name__)

# Listening recordings are filed next to the paper 2 PDFs from this session on.
FIRST_AUDIO_YEAR: int = 2022


class PaperSearch:
    """
    Runs one structured query against the archive.

    Steps:
        1. resolve the group folder (missing -> [])
        2. primary search inside it
        3. post-filters: English edition, subject, Music level, paper
        4. supplementary searches for language B paper 2
        5. merge by file id, first occurrence wins

    Supplementary searches run one after another on the same client.
    """

    def __init__(
        self,
        client: DriveClient,
        navigator: FolderNavigator,
        *,
        audio_strategies: Optional[Sequence[SearchStrategy]] = None,
        auxiliary_strategy: Optional[SearchStrategy] = None,
    ) -> None:
        self._client = client
        self._navigator = navigator
        if audio_strategies is None:
            audio_strategies = (
                ScopedAudioSearch(client, navigator),
                BroaderAudioSearch(client, navigator),
                GlobalAudioSearch(client, navigator),
            )
        self._audio_strategies = tuple(audio_strategies)
        self._auxiliary_strategy = (
            auxiliary_strategy if auxiliary_strategy is not None
            else AuxiliaryPaper2Search(client, navigator)
        )

    def search(self, query: StructuredQuery) -> list[RemoteFile]:
        folder = self._navigator.resolve_group_folder(query.year, query.month, query.group)
        if folder is None:
            logger.info(
                "No folder for %s %s %r; returning no results",
                query.year, query.month.value, query.group,
            )
            return []

        files = self._client.find(build_primary_filter(query), parent_id=folder.folder_id)
        logger.debug("Primary search found %d file(s) in %r", len(files), folder.name)

        if query.is_audio:
            primary = [f for f in files if f.kind is FileKind.AUDIO]
        else:
            primary = self._post_filter(query, files)

        results = [primary]
        if self._wants_supplements(query):
            results.append(self._supplementary(query))

        merged = merge_distinct(*results)
        logger.info(
            "Search %s %s %r %r level=%s paper=%s -> %d file(s)",
            query.year, query.month.value, query.group, query.subject,
            query.level.value if query.level else None, query.paper, len(merged),
        )
        return merged

    # ----------------------------
    # Internals
    # ----------------------------
    def _post_filter(self, query: StructuredQuery, files: list[RemoteFile]) -> list[RemoteFile]:
        if not is_language_group(query.group):
            files = filter_english_files(files)
        files = filter_subjects(files, query.subject)
        if query.is_music:
            files = filter_music_level(files, query.level)
        return filter_by_paper(files, query.paper)

    def _wants_supplements(self, query: StructuredQuery) -> bool:
        return (
            query.paper == 2
            and query.year >= FIRST_AUDIO_YEAR
            and is_language_b_subject(query.subject)
        )

    def _supplementary(self, query: StructuredQuery) -> list[RemoteFile]:
        audio = run_escalating(self._audio_strategies, query)
        if not audio.found:
            logger.info("No listening audio found for %r %s", query.subject, query.year)

        files = list(audio.files)
        if query.group != LANGUAGE_ACQUISITION_GROUP:
            files.extend(self._auxiliary_strategy.run(query).files)
        return files
