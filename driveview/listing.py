"""Single-pass folder listing: gallery index, README detection, row display data.

``process_listing`` is a pure fold over the children of one folder fetch. It
never fails on individual entries; missing sizes and timestamps were already
defaulted when the response was parsed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

import emoji

from .formatting import format_timestamp, human_size
from .path import child_path
from .preview_types import file_is_image
from .store_model import DirectoryEntry

README_NAME = "readme.md"


@dataclass(frozen=True)
class GalleryDescriptor:
    """Lightbox-ready record for one image entry."""

    src: str | None
    alt: str
    download_url: str | None
    index: int


@dataclass(frozen=True)
class EntryDisplay:
    """Display data for one listing row.

    ``emoji`` is set when the name starts with an emoji; it replaces the type
    icon and ``label`` is the name with that emoji removed.
    """

    emoji: str | None
    label: str
    size: str
    modified: str


@dataclass(frozen=True)
class ListingRow:
    entry: DirectoryEntry
    display: EntryDisplay
    gallery_index: int | None = None


@dataclass(frozen=True)
class ListingResult:
    """Aggregate over one folder fetch."""

    rows: tuple[ListingRow, ...]
    gallery: tuple[GalleryDescriptor, ...]
    gallery_index: Mapping[str, int]
    readme: DirectoryEntry | None = None

    def row_for(self, name: str) -> ListingRow | None:
        """Return the first row whose raw entry name equals ``name``."""
        return next((row for row in self.rows if row.entry.name == name), None)


@dataclass(frozen=True)
class OpenGallery:
    index: int


@dataclass(frozen=True)
class Navigate:
    target: str


def split_leading_emoji(name: str) -> tuple[str | None, str]:
    """Return ``(emoji, label)`` for names that start with an emoji.

    Names without a leading emoji come back as ``(None, name)`` unchanged.
    """
    matches = emoji.emoji_list(name)
    if not matches or matches[0]["match_start"] != 0:
        return None, name
    leading = matches[0]["emoji"]
    return leading, name.replace(leading, "", 1).strip()


def entry_display(entry: DirectoryEntry) -> EntryDisplay:
    leading, label = split_leading_emoji(entry.name)
    return EntryDisplay(
        emoji=leading,
        label=label,
        size=human_size(entry.size),
        modified=format_timestamp(entry.last_modified),
    )


def _is_gallery_member(entry: DirectoryEntry) -> bool:
    return not entry.is_folder and file_is_image(entry.name)


def process_listing(entries: Iterable[DirectoryEntry]) -> ListingResult:
    """Fold folder children into rows, gallery descriptors, and the README reference.

    Gallery indices are dense and follow entry order. The README is the first
    entry whose raw name matches ``readme.md`` case-insensitively.
    Folders never join the gallery or count as the README, even when their
    names match; a folder has no download URL to show or render.
    """
    rows: list[ListingRow] = []
    gallery: list[GalleryDescriptor] = []
    gallery_index: dict[str, int] = {}
    readme: DirectoryEntry | None = None

    for entry in entries:
        index: int | None = None
        if _is_gallery_member(entry):
            index = len(gallery)
            gallery.append(
                GalleryDescriptor(
                    src=entry.download_url,
                    alt=entry.name,
                    download_url=entry.download_url,
                    index=index,
                )
            )
            gallery_index[entry.id] = index

        if readme is None and not entry.is_folder and entry.name.lower() == README_NAME:
            readme = entry

        rows.append(ListingRow(entry=entry, display=entry_display(entry), gallery_index=index))

    return ListingResult(
        rows=tuple(rows),
        gallery=tuple(gallery),
        gallery_index=MappingProxyType(gallery_index),
        readme=readme,
    )


def click_action(listing: ListingResult, entry: DirectoryEntry, path: str) -> OpenGallery | Navigate:
    """Decide what activating a row does: open the lightbox or navigate into it."""
    index = listing.gallery_index.get(entry.id)
    if index is not None and _is_gallery_member(entry):
        return OpenGallery(index=index)
    return Navigate(target=child_path(path, entry.name))


__all__ = [
    "README_NAME",
    "GalleryDescriptor",
    "EntryDisplay",
    "ListingRow",
    "ListingResult",
    "OpenGallery",
    "Navigate",
    "split_leading_emoji",
    "entry_display",
    "process_listing",
    "click_action",
]
