"""
Typed filter expressions for remote listings.

Expressions are built by the naming rules and rendered to the remote syntax
only at the client boundary (see `render.py`). Each node can also be
evaluated against a `RemoteFile`, which keeps naming policy testable without
a live store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from paperfinder.util.mime import AUDIO_MIMES, AUDIO_SUFFIX, FOLDER_MIME, PDF_MIME

if TYPE_CHECKING:
    from paperfinder.models import RemoteFile


class Expr:
    """Base class for filter expressions. Combine with `&` and `|`."""

    __slots__ = ()

    def matches(self, item: RemoteFile) -> bool:  # pragma: no cover - abstract
        raise NotImplementedError

    def __and__(self, other: Expr) -> Expr:
        return all_of(self, other)

    def __or__(self, other: Expr) -> Expr:
        return any_of(self, other)


@dataclass(frozen=True, slots=True)
class ParentIn(Expr):
    folder_id: str

    def matches(self, item: RemoteFile) -> bool:
        return self.folder_id in item.parents


@dataclass(frozen=True, slots=True)
class MimeTypeIs(Expr):
    mime_type: str

    def matches(self, item: RemoteFile) -> bool:
        return item.mime_type == self.mime_type


@dataclass(frozen=True, slots=True)
class MimeTypeContains(Expr):
    text: str

    def matches(self, item: RemoteFile) -> bool:
        return self.text.lower() in item.mime_type.lower()


@dataclass(frozen=True, slots=True)
class NameIs(Expr):
    name: str

    def matches(self, item: RemoteFile) -> bool:
        return item.name == self.name


@dataclass(frozen=True, slots=True)
class NameContains(Expr):
    """Case-insensitive substring match on the item name."""

    text: str

    def matches(self, item: RemoteFile) -> bool:
        return self.text.lower() in item.name.lower()


@dataclass(frozen=True, slots=True)
class FullTextContains(Expr):
    """
    Remote full-text search. In memory there is no content index, so only
    the name is checked.
    """

    text: str

    def matches(self, item: RemoteFile) -> bool:
        return self.text.lower() in item.name.lower()


@dataclass(frozen=True, slots=True)
class Trashed(Expr):
    value: bool

    def matches(self, item: RemoteFile) -> bool:
        return item.trashed is self.value


@dataclass(frozen=True, slots=True)
class And(Expr):
    terms: tuple[Expr, ...]

    def matches(self, item: RemoteFile) -> bool:
        return all(term.matches(item) for term in self.terms)


@dataclass(frozen=True, slots=True)
class Or(Expr):
    terms: tuple[Expr, ...]

    def matches(self, item: RemoteFile) -> bool:
        return any(term.matches(item) for term in self.terms)


def all_of(*exprs: Expr) -> Expr:
    """Conjunction, flattening nested `And` nodes."""
    return And(_flatten(And, exprs))


def any_of(*exprs: Expr) -> Expr:
    """Disjunction, flattening nested `Or` nodes."""
    return Or(_flatten(Or, exprs))


def name_contains_any(texts: Iterable[str]) -> Expr:
    return any_of(*(NameContains(t) for t in texts))


def is_folder() -> Expr:
    return MimeTypeIs(FOLDER_MIME)


def is_pdf() -> Expr:
    return MimeTypeIs(PDF_MIME)


def is_audio() -> Expr:
    """Audio mime types, or anything named like an mp3."""
    return any_of(*(MimeTypeIs(m) for m in AUDIO_MIMES), NameContains(AUDIO_SUFFIX))


def not_trashed() -> Expr:
    return Trashed(False)


def _flatten(kind: type, exprs: Iterable[Expr]) -> tuple[Expr, ...]:
    out: list[Expr] = []
    for e in exprs:
        if isinstance(e, kind):
            out.extend(e.terms)  # type: ignore[attr-defined]
        else:
            out.append(e)
    if not out:
        raise ValueError("at least one expression is required")
    return tuple(out)
