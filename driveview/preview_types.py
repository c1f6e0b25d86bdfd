"""Extension to preview-category classification.

``EXTENSIONS`` is the one lookup table consulted by both the folder listing
(gallery membership) and single-file preview routing.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class PreviewCategory(Enum):
    """Renderer family a file is previewed with."""

    IMAGE = "image"
    TEXT = "text"
    CODE = "code"
    MARKDOWN = "markdown"
    VIDEO = "video"
    AUDIO = "audio"
    PDF = "pdf"
    OFFICE = "ms-office"
    NONE = "none"


_BY_CATEGORY: dict[PreviewCategory, tuple[str, ...]] = {
    PreviewCategory.IMAGE: ("gif", "jpeg", "jpg", "png", "webp", "bmp"),
    PreviewCategory.MARKDOWN: ("md", "mdown", "markdown"),
    PreviewCategory.TEXT: ("txt", "vtt", "srt", "log", "diff"),
    PreviewCategory.CODE: (
        "c",
        "cpp",
        "h",
        "hpp",
        "cs",
        "css",
        "dart",
        "go",
        "html",
        "java",
        "js",
        "jsx",
        "json",
        "kt",
        "lua",
        "php",
        "py",
        "r",
        "rb",
        "rs",
        "sass",
        "scss",
        "sh",
        "sql",
        "swift",
        "toml",
        "ts",
        "tsx",
        "vue",
        "xml",
        "yaml",
        "yml",
    ),
    PreviewCategory.VIDEO: ("mp4", "flv", "webm", "m3u8", "mkv", "mov"),
    PreviewCategory.AUDIO: ("mp3", "m4a", "aac", "wav", "ogg", "oga", "opus", "flac"),
    PreviewCategory.PDF: ("pdf",),
    PreviewCategory.OFFICE: ("doc", "docx", "ppt", "pptx", "xls", "xlsx"),
}

EXTENSIONS: MappingProxyType[str, PreviewCategory] = MappingProxyType(
    {extension: category for category, extensions in _BY_CATEGORY.items() for extension in extensions}
)


def get_extension(file_name: str) -> str:
    """Return the lower-cased text after the last ``.``, or ``""`` when absent."""
    _head, dot, extension = file_name.rpartition(".")
    if not dot:
        return ""
    return extension.lower()


def classify(file_name: str) -> PreviewCategory:
    """Map a file name to its preview category; unknown extensions give ``NONE``."""
    return EXTENSIONS.get(get_extension(file_name), PreviewCategory.NONE)


def file_is_image(file_name: str) -> bool:
    return classify(file_name) is PreviewCategory.IMAGE


__all__ = [
    "PreviewCategory",
    "EXTENSIONS",
    "get_extension",
    "classify",
    "file_is_image",
]
