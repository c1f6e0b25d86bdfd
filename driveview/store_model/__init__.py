"""Domain model for remote store entries and fetch outcomes.

This package contains non-UI primitives:
- directory entry datatypes
- the ``ResourceState`` tagged union produced at the fetch boundary
- parsing of raw store JSON into those types
"""

from __future__ import annotations

from .types import DirectoryEntry, FetchError, FetchErrorKind, File, Folder, Loading, ResourceState
from .response import DOWNLOAD_URL_KEY, parse_children, parse_entry, parse_resource, safe_size

__all__ = [
    "DirectoryEntry",
    "FetchError",
    "FetchErrorKind",
    "File",
    "Folder",
    "Loading",
    "ResourceState",
    "DOWNLOAD_URL_KEY",
    "parse_children",
    "parse_entry",
    "parse_resource",
    "safe_size",
]
