"""Domain datatypes for store entries and fetch outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..preview_types import PreviewCategory, classify


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a folder, or the item a file fetch resolved to."""

    id: str
    name: str
    size: int = 0
    last_modified: datetime | None = None
    is_folder: bool = False
    download_url: str | None = None


class FetchErrorKind(Enum):
    UNAUTHORIZED = "unauthorized"
    OTHER = "other"


@dataclass(frozen=True)
class Loading:
    """Fetch still outstanding."""


@dataclass(frozen=True)
class FetchError:
    kind: FetchErrorKind
    message: str

    @property
    def is_unauthorized(self) -> bool:
        return self.kind is FetchErrorKind.UNAUTHORIZED


@dataclass(frozen=True)
class Folder:
    """Folder fetch result: the folder item plus its children in store order."""

    item: DirectoryEntry
    children: tuple[DirectoryEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class File:
    """Single-file fetch result."""

    entry: DirectoryEntry

    @property
    def category(self) -> PreviewCategory:
        return classify(self.entry.name)


ResourceState = Loading | FetchError | Folder | File


__all__ = [
    "DirectoryEntry",
    "FetchErrorKind",
    "Loading",
    "FetchError",
    "Folder",
    "File",
    "ResourceState",
]
