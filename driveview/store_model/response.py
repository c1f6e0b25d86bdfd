"""Turn raw store JSON into ``ResourceState`` values at the fetch boundary.

The store answers with a drive item: folders carry a ``folder`` facet plus
``children``; files carry a ``file`` facet and a download URL. Each child is
parsed independently so one malformed entry never hides the rest of a folder.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from ..formatting import parse_timestamp
from .types import DirectoryEntry, FetchError, FetchErrorKind, File, Folder, ResourceState

DOWNLOAD_URL_KEY = "@microsoft.graph.downloadUrl"


def safe_size(value: object) -> int:
    """Return a non-negative byte count, ``0`` for missing or invalid values."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        return max(0, int(value)) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return max(0, int(value))
        except ValueError:
            return 0
    return 0


def parse_entry(raw: object, position: int = 0) -> DirectoryEntry:
    """Build a ``DirectoryEntry`` from one raw item, degrading bad fields to defaults.

    Entries without an id fall back to ``#<position>`` so ids stay unique within
    one listing.
    """
    if not isinstance(raw, Mapping):
        return DirectoryEntry(id=f"#{position}", name="")

    name = raw.get("name")
    raw_id = raw.get("id")
    is_folder = "folder" in raw
    download_url = raw.get(DOWNLOAD_URL_KEY)
    return DirectoryEntry(
        id=str(raw_id) if raw_id not in (None, "") else f"#{position}",
        name=name if isinstance(name, str) else "",
        size=safe_size(raw.get("size")),
        last_modified=parse_timestamp(raw.get("lastModifiedDateTime")),
        is_folder=is_folder,
        download_url=None if is_folder or not isinstance(download_url, str) else download_url,
    )


def parse_children(raw_children: object) -> tuple[DirectoryEntry, ...]:
    if not isinstance(raw_children, list):
        return ()
    return tuple(parse_entry(raw, position) for position, raw in enumerate(raw_children))


def parse_resource(payload: object) -> ResourceState:
    """Discriminate folder/file payloads into the matching ``ResourceState`` variant."""
    if not isinstance(payload, Mapping):
        return FetchError(FetchErrorKind.OTHER, "Cannot preview response: unexpected payload.")

    if "folder" in payload:
        return Folder(item=parse_entry(payload), children=parse_children(payload.get("children")))
    if "file" in payload:
        return File(entry=parse_entry(payload))

    name = payload.get("name")
    return FetchError(FetchErrorKind.OTHER, f"Cannot preview {name if isinstance(name, str) else 'item'}.")


__all__ = [
    "DOWNLOAD_URL_KEY",
    "safe_size",
    "parse_entry",
    "parse_children",
    "parse_resource",
]
