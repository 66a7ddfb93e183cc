"""Filter expressions built from query fields."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from paperfinder.query import (
    Expr,
    MimeTypeContains,
    NameContains,
    all_of,
    any_of,
    is_audio,
    is_pdf,
    name_contains_any,
)

from .groups import skips_paper_condition
from .levels import JOINT_LEVEL, level_value
from .papers import paper_patterns
from .subjects import split_subject_variant

if TYPE_CHECKING:
    from paperfinder.models import StructuredQuery

# Loose audio mime match used when searching outside the audio folders.
_AUDIO_MIME_TOKENS: tuple[str, ...] = ("audio", "mp3", "wav", "m4a")


def subject_condition(subject: str) -> Expr:
    """
    A/B subjects need the variant delimiter right after the base name;
    other subjects match as given or with a capitalized first letter.
    """
    base, variant = split_subject_variant(subject)
    if variant is not None:
        return name_contains_any(f"{base}{d}" for d in variant.delimiters())

    text = subject.strip()
    return name_contains_any(_unique([text, _proper_case(text)]))


def level_condition(level: Any) -> Expr:
    """Requested level, or papers shared by both levels."""
    return name_contains_any(_unique([level_value(level), JOINT_LEVEL]))


def paper_condition(paper: int) -> Expr:
    return name_contains_any(paper_patterns(paper))


def audio_subject_condition(subject: str) -> Expr:
    return is_audio() & NameContains(subject.strip())


def audio_level(level: Any) -> str:
    """Recordings exist per level; ab initio courses are SL only."""
    return "HL" if level is not None and level_value(level) == "HL" else "SL"


def listening_audio_condition(language: str, level: Any, *, loose_mime: bool = False) -> Expr:
    """
    Recordings named `<Language>_B_<Level>` or `<Language>_ab_initio_<Level>`.

    With `loose_mime`, also require something audio-like in the mime type;
    used when the search is not confined to an audio folder.
    """
    lvl = audio_level(level)
    names = name_contains_any((f"{language}_B_{lvl}", f"{language}_ab_initio_{lvl}"))
    if not loose_mime:
        return names
    return names & any_of(*(MimeTypeContains(t) for t in _AUDIO_MIME_TOKENS))


def auxiliary_paper2_condition(language: str) -> Expr:
    """PDFs belonging to a language B paper 2 (booklets, comprehension parts)."""
    patterns = (
        f"{language}_B_paper_2",
        f"{language} B paper 2",
        f"{language}_B_paper2",
        f"{language} B paper2",
    )
    return is_pdf() & name_contains_any(patterns)


def build_primary_filter(query: StructuredQuery) -> Expr:
    """
    The filter for the main search inside the group folder.

    Audio group: audio files named after the subject, no level or paper.
    Otherwise: PDFs matching subject, level (unless Music) and paper (unless
    one of the paper exceptions applies).
    """
    if query.is_audio:
        return audio_subject_condition(query.subject)

    terms: list[Expr] = [is_pdf(), subject_condition(query.subject)]
    if query.level is not None and not query.is_music:
        terms.append(level_condition(query.level))
    if query.paper is not None and not skips_paper_condition(
        query.group, query.subject, query.paper
    ):
        terms.append(paper_condition(query.paper))
    return all_of(*terms)


def _proper_case(text: str) -> str:
    return text[:1].upper() + text[1:].lower()


def _unique(values: Iterable[str]) -> list[str]:
    seen: list[str] = []
    for v in values:
        if v and v not in seen:
            seen.append(v)
    return seen
