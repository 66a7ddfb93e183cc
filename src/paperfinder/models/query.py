"""Structured query model."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from paperfinder.errors import InvalidQueryError
from paperfinder.naming.groups import is_audio_group, is_music_request

_PAPER_RE = re.compile(r"^(?:paper[\s_]*)?(\d+)$", re.IGNORECASE)
VALID_PAPERS: tuple[int, ...] = (1, 2, 3)


class Month(str, Enum):
    """Examination sessions."""

    MAY = "May"
    NOVEMBER = "November"


class Level(str, Enum):
    """Course levels."""

    HL = "HL"
    SL = "SL"


@dataclass(slots=True, frozen=True)
class StructuredQuery:
    """
    A fully specified selection from the paper picker.

    Which of level/paper are present depends on group and subject:
        - audio group: neither
        - Music in the arts group: level only
        - everything else: both
    """

    year: int
    month: Month
    group: str
    subject: str
    level: Optional[Level] = None
    paper: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.year, int) or isinstance(self.year, bool):
            raise InvalidQueryError("year must be an int", details={"year": self.year})
        if not isinstance(self.month, Month):
            raise InvalidQueryError("month must be a Month", details={"month": self.month})
        for key in ("group", "subject"):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise InvalidQueryError(f"{key} must be a non-empty string")
        if self.level is not None and not isinstance(self.level, Level):
            raise InvalidQueryError("level must be a Level", details={"level": self.level})
        if self.paper is not None and self.paper not in VALID_PAPERS:
            raise InvalidQueryError("paper must be 1, 2 or 3", details={"paper": self.paper})

        if self.is_audio:
            if self.level is not None or self.paper is not None:
                raise InvalidQueryError(
                    "audio group queries take no level or paper",
                    details={"group": self.group},
                )
            return

        if self.is_music:
            if self.paper is not None:
                raise InvalidQueryError("Music queries take no paper number")
            if self.level is None:
                raise InvalidQueryError("Music queries require a level")
            return

        if self.level is None or self.paper is None:
            raise InvalidQueryError(
                "level and paper are required for this group",
                details={"group": self.group, "subject": self.subject},
            )

    @classmethod
    def create(
        cls,
        year: Any,
        month: Any,
        group: str,
        subject: str,
        level: Any = None,
        paper: Any = None,
    ) -> StructuredQuery:
        """
        Build a query from picker strings, dropping fields the group/subject
        makes inapplicable.

        Raises:
            InvalidQueryError: if a value cannot be parsed.
        """
        group = (group or "").strip()
        subject = (subject or "").strip()

        parsed_level = _parse_level(level)
        parsed_paper = _parse_paper(paper)
        if is_audio_group(group):
            parsed_level = None
            parsed_paper = None
        elif is_music_request(group, subject):
            parsed_paper = None

        return cls(
            year=_parse_year(year),
            month=_parse_month(month),
            group=group,
            subject=subject,
            level=parsed_level,
            paper=parsed_paper,
        )

    @property
    def is_audio(self) -> bool:
        return is_audio_group(self.group)

    @property
    def is_music(self) -> bool:
        return is_music_request(self.group, self.subject)


def _parse_year(value: Any) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise InvalidQueryError("year must be numeric", details={"year": value}, cause=exc) from exc


def _parse_month(value: Any) -> Month:
    if isinstance(value, Month):
        return value
    text = str(value or "").strip().lower()
    for month in Month:
        if month.value.lower() == text:
            return month
    raise InvalidQueryError("month must be May or November", details={"month": value})


def _parse_level(value: Any) -> Optional[Level]:
    if value is None or isinstance(value, Level):
        return value
    text = str(value).strip().upper()
    if not text:
        return None
    try:
        return Level(text)
    except ValueError as exc:
        raise InvalidQueryError("level must be HL or SL", details={"level": value}, cause=exc) from exc


def _parse_paper(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if not text:
        return None
    m = _PAPER_RE.match(text)
    if not m:
        raise InvalidQueryError("paper must look like '2' or 'Paper 2'", details={"paper": value})
    return int(m.group(1))
