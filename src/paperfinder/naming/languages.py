"""Language names, abbreviations and language-suffix handling in filenames."""

from __future__ import annotations

import re

# Languages that appear either as language-course subjects or as translation
# suffixes on papers of other subjects ("Biology_paper_1_HL_French.pdf").
SUFFIX_LANGUAGES: tuple[str, ...] = (
    "French", "Spanish", "German", "Chinese", "Japanese", "Korean",
    "Arabic", "Russian", "Portuguese", "Italian", "Dutch", "Swedish",
    "Norwegian", "Danish", "Finnish", "Polish", "Czech", "Hungarian",
    "Romanian", "Bulgarian", "Greek", "Turkish", "Hebrew", "Hindi",
    "Bengali", "Thai", "Vietnamese", "Indonesian", "Malay", "Filipino",
)

LANGUAGES: tuple[str, ...] = ("English",) + SUFFIX_LANGUAGES

LANGUAGE_ABBREVIATIONS: dict[str, str] = {
    "eng": "English",
    "fr": "French",
    "sp": "Spanish",
    "ger": "German",
    "chi": "Chinese",
    "jap": "Japanese",
    "kor": "Korean",
    "ara": "Arabic",
    "rus": "Russian",
    "por": "Portuguese",
    "ita": "Italian",
    "dut": "Dutch",
    "swe": "Swedish",
    "nor": "Norwegian",
    "dan": "Danish",
    "fin": "Finnish",
    "pol": "Polish",
    "cze": "Czech",
    "hun": "Hungarian",
    "rom": "Romanian",
    "bul": "Bulgarian",
    "gre": "Greek",
    "tur": "Turkish",
    "heb": "Hebrew",
    "hin": "Hindi",
    "ben": "Bengali",
    "tha": "Thai",
    "vie": "Vietnamese",
    "ind": "Indonesian",
    "may": "Malay",
    "fil": "Filipino",
}

_SUFFIX_ALTERNATION = "|".join(SUFFIX_LANGUAGES)

# A language token delimited by separators: "_French", " French.", "__German_".
_LANGUAGE_TOKEN_RE = re.compile(
    rf"(?:^|[_\s])({_SUFFIX_ALTERNATION})(?=[_\s.]|$)",
    re.IGNORECASE,
)
_LANGUAGE_SUFFIX_RE = re.compile(
    rf"_{{1,2}}({_SUFFIX_ALTERNATION})(?=[_\s.]|$)",
    re.IGNORECASE,
)
_PDF_EXT_RE = re.compile(r"\.pdf$", re.IGNORECASE)

# Applied in this order; each strips one trailing course marker.
_COURSE_SUFFIX_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"[\s_]+language[\s_]+b\s*$", re.IGNORECASE),
    re.compile(r"[\s_]+ab[\s_]initio\s*$", re.IGNORECASE),
    re.compile(r"[\s_]+b\s*$", re.IGNORECASE),
)

_LANGUAGE_NAMES_LOWER = {lang.lower() for lang in LANGUAGES}

_LANGUAGE_B_RE = re.compile(r"^([a-z]+)[\s_]+(?:language[\s_]+b|b|ab[\s_]initio)$")


def has_language_token(filename: str) -> bool:
    """True if the name carries a translation token such as `_French`."""
    return _LANGUAGE_TOKEN_RE.search(filename) is not None


def base_file_name(filename: str) -> str:
    """
    Filename with the first translation suffix and the `.pdf` extension
    removed, used to group translations of the same paper.
    """
    base = _LANGUAGE_SUFFIX_RE.sub("", filename, count=1)
    return _PDF_EXT_RE.sub("", base)


def extract_language_name(subject: str) -> str:
    """
    Canonical language name for a language-course subject.

    "Chinese Language B" -> "Chinese", "fr B" -> "French",
    "Arabic_ab_initio" -> "Arabic".
    """
    name = subject.strip()
    for pattern in _COURSE_SUFFIX_RES:
        name = pattern.sub("", name).strip()

    lowered = name.lower()
    if lowered in LANGUAGE_ABBREVIATIONS:
        return LANGUAGE_ABBREVIATIONS[lowered]
    return name[:1].upper() + name[1:].lower()


def is_language_b_subject(subject: str) -> bool:
    """
    True for language B and ab initio courses, written with spaces or
    underscores ("French B", "french_b", "Arabic ab_initio", "fr B").
    """
    m = _LANGUAGE_B_RE.match(subject.strip().lower())
    if not m:
        return False
    token = m.group(1)
    return token in _LANGUAGE_NAMES_LOWER or token in LANGUAGE_ABBREVIATIONS
