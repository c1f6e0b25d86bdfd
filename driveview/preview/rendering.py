"""Terminal rendering of preview outcomes.

These are minimal stand-ins for the renderer collaborators: a folder table with
an optional embedded README, highlighted text for text-like files, and link
placeholders for media, pdf, office and unavailable previews.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..listing import ListingRow
from ..fetch import FetchFailure
from ..preview_types import PreviewCategory
from ..store_model import DirectoryEntry
from .dispatch import (
    AuthRequired,
    ErrorView,
    FolderView,
    ImageView,
    LoadingView,
    PreviewOutcome,
    RendererRequest,
    UnavailableView,
)
from .syntax import DEFAULT_STYLE, colorize_source, sanitize_terminal_text

NAME_COLUMN_WIDTH = 48
MODIFIED_COLUMN_WIDTH = 17
SIZE_COLUMN_WIDTH = 9

TEXT_CATEGORIES = frozenset({PreviewCategory.TEXT, PreviewCategory.CODE, PreviewCategory.MARKDOWN})


@dataclass(frozen=True)
class _Palette:
    folder: str = "\033[1;34m"
    file: str = "\033[38;5;252m"
    header: str = "\033[1m"
    note: str = "\033[2;38;5;250m"
    size: str = "\033[38;5;109m"
    error: str = "\033[31m"
    reset: str = "\033[0m"


_COLOR = _Palette()
_PLAIN = _Palette(folder="", file="", header="", note="", size="", error="", reset="")


@dataclass(frozen=True)
class RenderContext:
    """Collaborators and options shared by all renderers of one outcome."""

    fetch_text: Callable[[DirectoryEntry], str] | None = None
    style: str = DEFAULT_STYLE
    no_color: bool = False

    @property
    def palette(self) -> _Palette:
        return _PLAIN if self.no_color else _COLOR


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3].rstrip() + "..."


def render_row(row: ListingRow, palette: _Palette) -> str:
    entry = row.entry
    display = row.display
    marker = display.emoji or ("+" if entry.is_folder else " ")
    suffix = "/" if entry.is_folder else ""
    name_color = palette.folder if entry.is_folder else palette.file
    label = _truncate(sanitize_terminal_text(display.label) + suffix, NAME_COLUMN_WIDTH)
    return (
        f"{marker} {name_color}{label:<{NAME_COLUMN_WIDTH}}{palette.reset} "
        f"{display.modified:>{MODIFIED_COLUMN_WIDTH}} "
        f"{palette.size}{display.size:>{SIZE_COLUMN_WIDTH}}{palette.reset}"
    )


def render_folder(view: FolderView, context: RenderContext) -> str:
    palette = context.palette
    header = (
        f"  {'Name':<{NAME_COLUMN_WIDTH}} {'Last Modified':>{MODIFIED_COLUMN_WIDTH}} {'Size':>{SIZE_COLUMN_WIDTH}}"
    )
    lines_out = [f"{palette.folder}{view.path}{palette.reset}", "", f"{palette.header}{header}{palette.reset}"]
    lines_out.extend(render_row(row, palette) for row in view.listing.rows)
    if not view.listing.rows:
        lines_out.append(f"{palette.note}<empty folder>{palette.reset}")

    image_count = len(view.listing.gallery)
    if image_count:
        lines_out.append("")
        plural = "image" if image_count == 1 else "images"
        lines_out.append(f"{palette.note}{image_count} {plural} in gallery{palette.reset}")

    if view.readme is not None:
        lines_out.append("")
        lines_out.append(render_request(view.readme, context))
    return "\n".join(lines_out)


def render_text_request(request: RendererRequest, context: RenderContext) -> str:
    palette = context.palette
    entry = request.file
    if context.fetch_text is None:
        return f"{entry.name}\n\n{palette.note}<text preview unavailable offline>{palette.reset}"
    try:
        source = context.fetch_text(entry)
    except FetchFailure as exc:
        return f"{entry.name}\n\n{palette.error}<error reading file: {exc}>{palette.reset}"
    source = sanitize_terminal_text(source)
    if context.no_color:
        return source
    return colorize_source(source, entry.name, context.style)


def render_request(request: RendererRequest, context: RenderContext) -> str:
    if request.category in TEXT_CATEGORIES:
        return render_text_request(request, context)
    palette = context.palette
    entry = request.file
    return (
        f"{entry.name}\n\n"
        f"{palette.note}<{request.category.value} preview>{palette.reset}\n"
        f"{entry.download_url or ''}"
    )


def render_outcome(outcome: PreviewOutcome, context: RenderContext) -> str:
    """Render one preview outcome as terminal text."""
    palette = context.palette
    if isinstance(outcome, LoadingView):
        return outcome.text
    if isinstance(outcome, AuthRequired):
        return f"{palette.error}Authentication required for {outcome.redirect}{palette.reset}"
    if isinstance(outcome, ErrorView):
        return f"{palette.error}{outcome.message}{palette.reset}"
    if isinstance(outcome, FolderView):
        return render_folder(outcome, context)
    if isinstance(outcome, ImageView):
        return f"{outcome.alt}\n\n{palette.note}<image>{palette.reset}\n{outcome.src or ''}"
    if isinstance(outcome, RendererRequest):
        return render_request(outcome, context)
    if isinstance(outcome, UnavailableView):
        return f"{outcome.message}\n\nDownload: {outcome.download_url or '<no download link>'}"
    raise TypeError(f"unsupported preview outcome: {outcome!r}")


__all__ = [
    "RenderContext",
    "render_row",
    "render_folder",
    "render_request",
    "render_outcome",
]
