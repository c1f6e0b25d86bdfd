"""Select the preview outcome for a fetched resource.

This module decides how the current ``ResourceState`` should be shown:
- loading placeholder while the fetch is outstanding
- re-authentication or error display for failed fetches
- folder listing, with an embedded README when the folder has one
- inline image, a renderer delegate per preview category, or a
  download-only fallback for files nothing can preview
"""

from __future__ import annotations

from dataclasses import dataclass

from ..listing import ListingResult, process_listing
from ..preview_types import PreviewCategory
from ..store_model import DirectoryEntry, FetchError, File, Folder, Loading, ResourceState

LOADING_TEXT = "Loading ..."

DELEGATED_CATEGORIES = frozenset(
    {
        PreviewCategory.TEXT,
        PreviewCategory.CODE,
        PreviewCategory.MARKDOWN,
        PreviewCategory.VIDEO,
        PreviewCategory.AUDIO,
        PreviewCategory.PDF,
        PreviewCategory.OFFICE,
    }
)


@dataclass(frozen=True)
class LoadingView:
    text: str = LOADING_TEXT


@dataclass(frozen=True)
class AuthRequired:
    """Route to the login collaborator, returning to ``redirect`` afterwards."""

    redirect: str


@dataclass(frozen=True)
class ErrorView:
    message: str


@dataclass(frozen=True)
class RendererRequest:
    """Hand-off to the external renderer for ``category``.

    ``path`` is only set for markdown, which resolves relative links against it.
    """

    category: PreviewCategory
    file: DirectoryEntry
    path: str | None = None
    standalone: bool = True


@dataclass(frozen=True)
class FolderView:
    path: str
    listing: ListingResult
    readme: RendererRequest | None = None


@dataclass(frozen=True)
class ImageView:
    src: str | None
    alt: str


@dataclass(frozen=True)
class UnavailableView:
    message: str
    download_url: str | None


PreviewOutcome = (
    LoadingView | AuthRequired | ErrorView | FolderView | ImageView | RendererRequest | UnavailableView
)


def unavailable_message(name: str) -> str:
    return f"Preview for file {name} is not available, download directly with the button below."


def renderer_payload(request: RendererRequest) -> dict[str, object]:
    """Return the keyword payload a renderer collaborator expects."""
    if request.category is not PreviewCategory.MARKDOWN:
        return {"file": request.file}
    return {"file": request.file, "path": request.path, "standalone": request.standalone}


def dispatch_folder(folder: Folder, path: str) -> FolderView:
    listing = process_listing(folder.children)
    readme = None
    if listing.readme is not None:
        readme = RendererRequest(
            category=PreviewCategory.MARKDOWN,
            file=listing.readme,
            path=path,
            standalone=False,
        )
    return FolderView(path=path, listing=listing, readme=readme)


def dispatch_file(resource: File, path: str) -> ImageView | RendererRequest | UnavailableView:
    entry = resource.entry
    category = resource.category
    if category is PreviewCategory.IMAGE:
        return ImageView(src=entry.download_url, alt=entry.name)
    if category is PreviewCategory.MARKDOWN:
        return RendererRequest(category=category, file=entry, path=path)
    if category in DELEGATED_CATEGORIES:
        return RendererRequest(category=category, file=entry)
    return UnavailableView(message=unavailable_message(entry.name), download_url=entry.download_url)


def dispatch(state: ResourceState, path: str) -> PreviewOutcome:
    """Map one render cycle's ``ResourceState`` to exactly one outcome."""
    if isinstance(state, Loading):
        return LoadingView()
    if isinstance(state, FetchError):
        if state.is_unauthorized:
            return AuthRequired(redirect=path)
        return ErrorView(message=state.message)
    if isinstance(state, Folder):
        return dispatch_folder(state, path)
    if isinstance(state, File):
        return dispatch_file(state, path)
    raise TypeError(f"unsupported resource state: {state!r}")


__all__ = [
    "LOADING_TEXT",
    "DELEGATED_CATEGORIES",
    "LoadingView",
    "AuthRequired",
    "ErrorView",
    "RendererRequest",
    "FolderView",
    "ImageView",
    "UnavailableView",
    "PreviewOutcome",
    "unavailable_message",
    "renderer_payload",
    "dispatch_folder",
    "dispatch_file",
    "dispatch",
]
