"""Group-level special cases of the archive's folder naming."""

from __future__ import annotations

from typing import Optional

AUDIO_GROUP: str = "Group Ex - Audio"
LANGUAGE_ACQUISITION_GROUP: str = "Group 2 - Language Acquisition"
ARTS_GROUP: str = "Group 6 - The Arts"

MUSIC_SUBJECT: str = "music"

# Audio folders found by the broader search contain this token.
AUDIO_FOLDER_TOKEN: str = "Audio"
LANGUAGE_ACQUISITION_TOKEN: str = "Language Acquisition"

# Group names containing one of these keep every language variant.
_LANGUAGE_GROUP_TOKENS: tuple[str, ...] = ("Language", "Studies in Language")


def is_audio_group(group: str) -> bool:
    return group == AUDIO_GROUP


def is_language_group(group: str) -> bool:
    """Groups 1 and 2 hold the language papers themselves."""
    return any(token in group for token in _LANGUAGE_GROUP_TOKENS)


def is_music_request(group: str, subject: Optional[str]) -> bool:
    """Music files in the arts group carry no paper number."""
    if not subject:
        return False
    return ARTS_GROUP in group and subject.strip().lower() == MUSIC_SUBJECT


def is_language_acquisition_paper2(group: str, paper: Optional[int]) -> bool:
    """
    Paper 2 of the language-acquisition group is split into reading and
    listening sub-files that do not all carry the paper token.
    """
    return group == LANGUAGE_ACQUISITION_GROUP and paper == 2


def skips_paper_condition(group: str, subject: Optional[str], paper: Optional[int]) -> bool:
    """True when the remote query must not be narrowed by paper number."""
    return is_language_acquisition_paper2(group, paper) or is_music_request(group, subject)
