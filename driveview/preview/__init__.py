"""Public preview API.

Dispatch decides which outcome a fetched resource gets; rendering turns an
outcome into terminal text. This package file keeps the public imports.
"""

from __future__ import annotations

from .dispatch import (
    DELEGATED_CATEGORIES,
    LOADING_TEXT,
    AuthRequired,
    ErrorView,
    FolderView,
    ImageView,
    LoadingView,
    PreviewOutcome,
    RendererRequest,
    UnavailableView,
    dispatch,
    renderer_payload,
    unavailable_message,
)
from .rendering import RenderContext, render_outcome

__all__ = [
    "DELEGATED_CATEGORIES",
    "LOADING_TEXT",
    "AuthRequired",
    "ErrorView",
    "FolderView",
    "ImageView",
    "LoadingView",
    "PreviewOutcome",
    "RendererRequest",
    "UnavailableView",
    "dispatch",
    "renderer_payload",
    "unavailable_message",
    "RenderContext",
    "render_outcome",
]
