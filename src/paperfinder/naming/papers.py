"""Paper-number rules."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional

from .levels import JOINT_LEVEL, level_markers, level_value

if TYPE_CHECKING:
    from paperfinder.models import RemoteFile

KNOWN_PAPERS: frozenset[int] = frozenset({1, 2, 3})

# "Paper 1", "paper_2", "paper3"; never the "1" of "Paper 12".
_PAPER_TOKEN_RE = re.compile(r"paper[\s_]?(\d+)(?!\d)", re.IGNORECASE)
_COMPREHENSION_RE = re.compile(r"(?:reading|listening)[\s_]comprehension", re.IGNORECASE)


def paper_patterns(paper: int) -> tuple[str, ...]:
    """Substrings used to narrow a remote search to one paper."""
    return (f"Paper {paper}", f"paper_{paper}", f"paper {paper}", f"Paper_{paper}")


def paper_numbers(filename: str) -> set[int]:
    return {int(n) for n in _PAPER_TOKEN_RE.findall(filename)}


def is_comprehension_file(filename: str) -> bool:
    """Reading/listening comprehension parts of a language paper 2."""
    return _COMPREHENSION_RE.search(filename) is not None


def matches_paper(filename: str, paper: int) -> bool:
    """
    Exact paper match: the requested paper token is present and no other
    known paper token is. Paper 2 also admits comprehension sub-files.
    """
    if paper == 2 and is_comprehension_file(filename):
        return True

    numbers = paper_numbers(filename)
    if paper not in numbers:
        return False
    return not (numbers & (KNOWN_PAPERS - {paper}))


def filter_by_paper(files: list[RemoteFile], paper: Optional[int]) -> list[RemoteFile]:
    if paper is None:
        return files
    return [f for f in files if matches_paper(f.name, paper)]


def matches_auxiliary_paper2(filename: str, language: str, level: str) -> bool:
    """
    Post-filter for the broadened language B paper 2 search: the file must
    start with the language, carry the level (or the joint HLSL) marker, and
    be a paper 2 part.
    """
    if not filename.lower().startswith(language.lower()):
        return False
    markers = level_markers(filename)
    if level_value(level) not in markers and JOINT_LEVEL not in markers:
        return False
    return 2 in paper_numbers(filename) or is_comprehension_file(filename)
