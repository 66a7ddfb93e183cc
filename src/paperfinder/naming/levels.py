"""Level markers in filenames."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from paperfinder.models import RemoteFile

JOINT_LEVEL: str = "HLSL"

_LEVEL_RE = re.compile(r"(?<![a-z])(hlsl|hl|sl)(?![a-z])")


def level_value(level: Any) -> str:
    """Accept a Level enum or a plain string."""
    return str(getattr(level, "value", level)).upper()


def level_markers(filename: str) -> set[str]:
    """Level tokens in a name: {"HL"}, {"HLSL"}, or empty when unmarked."""
    return {m.upper() for m in _LEVEL_RE.findall(filename.lower())}


def matches_music_level(filename: str, level: Any) -> bool:
    """
    Music files match the requested level, the joint HLSL marker, or carry
    no level at all (the default English edition).
    """
    markers = level_markers(filename)
    if not markers:
        return True
    return level_value(level) in markers or JOINT_LEVEL in markers


def filter_music_level(files: list[RemoteFile], level: Any) -> list[RemoteFile]:
    return [f for f in files if matches_music_level(f.name, level)]
