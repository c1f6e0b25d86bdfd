"""Display formatting for entry sizes and modification times."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone

SIZE_UNITS = "KMGTPEZY"
UNKNOWN_TIMESTAMP = "unknown"
TIMESTAMP_FORMAT = "%m/%d/%Y, %H:%M"
_FRACTION_RE = re.compile(r"\.(\d+)")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def human_size(size: int | float) -> str:
    """Convert a byte count into a short human-readable string.

    Counts under 1 KiB are shown as whole bytes. Larger counts are scaled into
    the highest binary unit not exceeding them and shown with two decimals
    below 10, one decimal below 100, and none otherwise.
    """
    if size < 1024:
        return f"{size} B"

    tier = 1
    while tier < len(SIZE_UNITS) and size >= 1024 ** (tier + 1):
        tier += 1
    scaled = size / 1024**tier
    rounded = _round_half_up(scaled)
    if rounded < 10:
        formatted = f"{scaled:.2f}"
    elif rounded < 100:
        formatted = f"{scaled:.1f}"
    else:
        formatted = str(rounded)
    return f"{formatted} {SIZE_UNITS[tier - 1]}B"


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp (``Z`` suffix accepted); ``None`` when invalid."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat on 3.10 only takes 3 or 6 fraction digits
    text = _FRACTION_RE.sub(lambda match: "." + match.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_timestamp(value: datetime | None) -> str:
    """Render a modification time as ``MM/DD/YYYY, HH:MM`` (24-hour clock).

    Aware datetimes are shown in UTC so output does not depend on the host zone.
    """
    if value is None:
        return UNKNOWN_TIMESTAMP
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


__all__ = [
    "SIZE_UNITS",
    "UNKNOWN_TIMESTAMP",
    "human_size",
    "parse_timestamp",
    "format_timestamp",
]
