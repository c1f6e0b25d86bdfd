"""Shareable, raw-content, and API URLs built from a path and an entry name.

Everything here is plain string construction; identical inputs always give
byte-identical URLs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing import GalleryDescriptor
from .path import ROOT_PATH, child_path
from .store_model import DirectoryEntry

FOLDER_COPIED_MESSAGE = "Copied folder permalink."
RAW_FILE_COPIED_MESSAGE = "Copied raw file permalink."
IMAGE_COPIED_MESSAGE = "Copied image permanent link to clipboard."


@dataclass(frozen=True)
class CopyLink:
    """Clipboard payload plus the confirmation shown once it is copied."""

    url: str
    message: str


def normalize_origin(origin: str) -> str:
    return origin.rstrip("/")


def api_url(origin: str, path: str, raw: bool = False) -> str:
    """Return the store API key for ``path``, optionally asking for raw content."""
    url = f"{normalize_origin(origin)}/api?path={path or ROOT_PATH}"
    return f"{url}&raw=true" if raw else url


def folder_permalink(origin: str, path: str, name: str) -> str:
    return f"{normalize_origin(origin)}{child_path(path, name)}"


def raw_file_permalink(origin: str, path: str, name: str) -> str:
    return api_url(origin, child_path(path, name), raw=True)


def gallery_permalink(origin: str, path: str, descriptor: GalleryDescriptor) -> str:
    """Raw-file link for a gallery item, built from its original file name."""
    return raw_file_permalink(origin, path, descriptor.alt)


def copy_entry_link(origin: str, path: str, entry: DirectoryEntry) -> CopyLink:
    """Return the link copied from a listing row's copy action."""
    if entry.is_folder:
        return CopyLink(folder_permalink(origin, path, entry.name), FOLDER_COPIED_MESSAGE)
    return CopyLink(raw_file_permalink(origin, path, entry.name), RAW_FILE_COPIED_MESSAGE)


def copy_gallery_link(origin: str, path: str, descriptor: GalleryDescriptor) -> CopyLink:
    return CopyLink(gallery_permalink(origin, path, descriptor), IMAGE_COPIED_MESSAGE)


__all__ = [
    "FOLDER_COPIED_MESSAGE",
    "RAW_FILE_COPIED_MESSAGE",
    "IMAGE_COPIED_MESSAGE",
    "CopyLink",
    "normalize_origin",
    "api_url",
    "folder_permalink",
    "raw_file_permalink",
    "gallery_permalink",
    "copy_entry_link",
    "copy_gallery_link",
]
