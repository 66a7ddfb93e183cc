"""
Subject names in both directions.

Forward: a requested subject ("French B") becomes a filename predicate that
keeps A and B language courses apart. Reverse: a filename becomes the subject
shown in the picker, via an ordered list of pattern rules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from paperfinder.models import RemoteFile

_VARIANT_RE = re.compile(r"^(.+?)[\s_]+([ab])[\s_]*$", re.IGNORECASE)
_TOKEN_SEPARATORS = "_ .-"


class SubjectVariant(str, Enum):
    """Language course variant."""

    A = "A"
    B = "B"

    @property
    def other(self) -> SubjectVariant:
        return SubjectVariant.B if self is SubjectVariant.A else SubjectVariant.A

    def delimiters(self) -> tuple[str, ...]:
        upper = self.value
        lower = upper.lower()
        return (f"_{upper}_", f" {upper} ", f"_{lower}_", f" {lower} ")


def split_subject_variant(subject: str) -> tuple[str, Optional[SubjectVariant]]:
    """
    Split a trailing A/B marker off a subject.

    "English B" -> ("English", B), "french_a" -> ("french", A),
    "Biology" -> ("Biology", None).
    """
    text = subject.strip()
    m = _VARIANT_RE.match(text)
    if not m:
        return text, None
    return m.group(1).strip(" _"), SubjectVariant(m.group(2).upper())


def matches_subject(filename: str, subject: str) -> bool:
    """
    Subject predicate applied after the remote search.

    Every subject must be the leading token of the filename, so "English B"
    never picks up "Chinese_B_..." and "Art" never picks up "Artificial...".
    A variant subject additionally needs its own delimiter right after the
    base name and must not carry the other variant's delimiter.
    """
    base, variant = split_subject_variant(subject)
    name = filename.lower()
    bases = _base_spellings(base)

    if not any(_starts_with_token(name, b) for b in bases):
        return False
    if variant is None:
        return True

    own = _has_variant(name, bases, variant)
    other = _has_variant(name, bases, variant.other)
    return own and not other


def filter_subjects(files: list[RemoteFile], subject: str) -> list[RemoteFile]:
    return [f for f in files if matches_subject(f.name, subject)]


def _base_spellings(base: str) -> tuple[str, ...]:
    lowered = base.lower()
    underscored = lowered.replace(" ", "_")
    if underscored == lowered:
        return (lowered,)
    return (lowered, underscored)


def _starts_with_token(name: str, token: str) -> bool:
    if not token or not name.startswith(token):
        return False
    return len(name) == len(token) or name[len(token)] in _TOKEN_SEPARATORS


def _has_variant(name: str, bases: tuple[str, ...], variant: SubjectVariant) -> bool:
    delimiters = {d.lower() for d in variant.delimiters()}
    return any(f"{b}{d}" in name for b in bases for d in delimiters)


# ----------------------------
# Reverse direction: filename -> subject
# ----------------------------
@dataclass(frozen=True)
class SubjectRule:
    """One extraction rule. Rules are tried in list order; first hit wins."""

    name: str
    pattern: re.Pattern[str]
    accept: Callable[[str], bool] = lambda subject: bool(subject)

    def extract(self, filename: str) -> Optional[str]:
        m = self.pattern.match(filename)
        if not m:
            return None
        subject = m.group(1).strip()
        return subject if self.accept(subject) else None


_RESERVED_TOKEN_RE = re.compile(r"^(paper|HL|SL|TZ|\d+)$")


def _accept_leading(subject: str) -> bool:
    return bool(subject) and not _RESERVED_TOKEN_RE.match(subject) and len(subject) < 100


SUBJECT_RULES: tuple[SubjectRule, ...] = (
    # Music papers have no paper number: "Music___HLSL_markscheme.pdf".
    SubjectRule("music", re.compile(r"^(Music)(?:___|_)")),
    # "Global_politics_paper_1__TZ1_SL.pdf"
    SubjectRule("paper", re.compile(r"^(.+?)_paper_")),
    # "Computer_Science_paper_2_HL.pdf"
    SubjectRule("paper_level", re.compile(r"^(.+?)_paper_\d+_[A-Z]+")),
    # "Chemistry_HL.pdf", "Business Management paper 1.pdf"
    SubjectRule(
        "leading",
        re.compile(r"^([A-Za-z\s_]+?)(?:_|paper|HL|SL|TZ|\d|\.pdf)"),
        accept=_accept_leading,
    ),
)


def extract_subject_from_filename(filename: Optional[str]) -> Optional[str]:
    """Subject token for a paper filename, or None when no rule applies."""
    if not filename or not isinstance(filename, str):
        return None
    for rule in SUBJECT_RULES:
        subject = rule.extract(filename)
        if subject:
            return subject
    return None


_AUDIO_EXT_RE = re.compile(r"\.mp3$", re.IGNORECASE)
_AUDIO_LEVELS: tuple[str, ...] = ("HL", "SL")


def extract_subject_from_audio_filename(filename: Optional[str]) -> Optional[str]:
    """
    Subject for a recording named `<Language>_B_<Level>.mp3` or
    `<Language>_ab_initio_<Level>.mp3`.

    The whole stem ("Arabic_ab_initio_SL") is the subject, since the audio
    group has no level or paper picker.
    """
    if not filename or not isinstance(filename, str):
        return None

    stem = _AUDIO_EXT_RE.sub("", filename)
    parts = stem.split("_")
    if len(parts) < 3:
        return None

    if parts[1] == "B":
        level = parts[2]
    elif parts[1] == "ab" and parts[2] == "initio" and len(parts) > 3:
        level = parts[3]
    else:
        return None

    if level not in _AUDIO_LEVELS:
        return None
    return stem
