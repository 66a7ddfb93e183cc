from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def parse_rfc3339(value: str) -> datetime:
    """
    Parse a Drive timestamp ("2024-05-01T08:00:00.000Z") into a tz-aware
    UTC datetime.

    Raises:
        ValueError: empty, malformed or naive values.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("RFC3339 value must be a non-empty string")

    s = value.strip()
    # fromisoformat rejects a trailing 'Z' before Python 3.11.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"

    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        raise ValueError("naive timestamp is not allowed; timezone-aware required")
    return dt.astimezone(timezone.utc)


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """RFC3339 in UTC with a 'Z' suffix, or None."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt.astimezone(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
