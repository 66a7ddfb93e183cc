"""Render filter expressions to the Drive v3 `q` syntax."""

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
)


def render_query(expr: Expr) -> str:
    """
    Render an expression tree.

    Compound terms are parenthesized only when nested, so a flat conjunction
    reads like a hand-written query.
    """
    return _render(expr, nested=False)


def quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _render(expr: Expr, *, nested: bool) -> str:
    if isinstance(expr, ParentIn):
        return f"{quote(expr.folder_id)} in parents"
    if isinstance(expr, MimeTypeIs):
        return f"mimeType={quote(expr.mime_type)}"
    if isinstance(expr, MimeTypeContains):
        return f"mimeType contains {quote(expr.text)}"
    if isinstance(expr, NameIs):
        return f"name={quote(expr.name)}"
    if isinstance(expr, NameContains):
        return f"name contains {quote(expr.text)}"
    if isinstance(expr, FullTextContains):
        return f"fullText contains {quote(expr.text)}"
    if isinstance(expr, Trashed):
        return f"trashed={'true' if expr.value else 'false'}"
    if isinstance(expr, (And, Or)):
        if len(expr.terms) == 1:
            return _render(expr.terms[0], nested=nested)
        joiner = " and " if isinstance(expr, And) else " or "
        body = joiner.join(_render(t, nested=True) for t in expr.terms)
        return f"({body})" if nested else body

    raise TypeError(f"Unsupported expression: {type(expr).__name__}")
