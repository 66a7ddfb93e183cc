"""Naming-convention rules for the paper archive (pure functions)."""

from __future__ import annotations

from .conditions import (
    audio_level,
    audio_subject_condition,
    auxiliary_paper2_condition,
    build_primary_filter,
    level_condition,
    listening_audio_condition,
    paper_condition,
    subject_condition,
)
from .groups import (
    ARTS_GROUP,
    AUDIO_GROUP,
    LANGUAGE_ACQUISITION_GROUP,
    is_audio_group,
    is_language_acquisition_paper2,
    is_language_group,
    is_music_request,
    skips_paper_condition,
)
from .languages import (
    LANGUAGE_ABBREVIATIONS,
    LANGUAGES,
    base_file_name,
    extract_language_name,
    has_language_token,
    is_language_b_subject,
)
from .levels import filter_music_level, level_markers, matches_music_level
from .papers import filter_by_paper, matches_auxiliary_paper2, matches_paper, paper_numbers
from .preference import filter_english_files
from .subjects import (
    SUBJECT_RULES,
    SubjectRule,
    SubjectVariant,
    extract_subject_from_audio_filename,
    extract_subject_from_filename,
    filter_subjects,
    matches_subject,
    split_subject_variant,
)

__all__ = [
    # Groups
    "AUDIO_GROUP",
    "LANGUAGE_ACQUISITION_GROUP",
    "ARTS_GROUP",
    "is_audio_group",
    "is_language_group",
    "is_music_request",
    "is_language_acquisition_paper2",
    "skips_paper_condition",
    # Languages
    "LANGUAGES",
    "LANGUAGE_ABBREVIATIONS",
    "has_language_token",
    "base_file_name",
    "extract_language_name",
    "is_language_b_subject",
    # Subjects
    "SubjectVariant",
    "SubjectRule",
    "SUBJECT_RULES",
    "split_subject_variant",
    "matches_subject",
    "filter_subjects",
    "extract_subject_from_filename",
    "extract_subject_from_audio_filename",
    # Papers / levels / preference
    "paper_numbers",
    "matches_paper",
    "filter_by_paper",
    "matches_auxiliary_paper2",
    "level_markers",
    "matches_music_level",
    "filter_music_level",
    "filter_english_files",
    # Conditions
    "subject_condition",
    "level_condition",
    "paper_condition",
    "audio_subject_condition",
    "audio_level",
    "listening_audio_condition",
    "auxiliary_paper2_condition",
    "build_primary_filter",
]
