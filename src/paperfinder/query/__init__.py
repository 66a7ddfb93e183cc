"""Filter expression exports for paperfinder."""

from __future__ import annotations

from .expr import (
    And,
    Expr,
    FullTextContains,
    MimeTypeContains,
    MimeTypeIs,
    NameContains,
    NameIs,
    Or,
    ParentIn,
    Trashed,
    all_of,
    any_of,
    is_audio,
    is_folder,
    is_pdf,
    name_contains_any,
    not_trashed,
)
from .render import quote, render_query

__all__ = [
    "Expr",
    "ParentIn",
    "MimeTypeIs",
    "MimeTypeContains",
    "NameIs",
    "NameContains",
    "FullTextContains",
    "Trashed",
    "And",
    "Or",
    "all_of",
    "any_of",
    "name_contains_any",
    "is_folder",
    "is_pdf",
    "is_audio",
    "not_trashed",
    "render_query",
    "quote",
]
