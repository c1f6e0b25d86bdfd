"""Canonical store paths and navigation targets.

A store path is slash-separated with every segment percent-encoded; the root is
``"/"`` and no other path ends with a slash.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import quote, unquote

ROOT_PATH = "/"

# Characters ``encodeURIComponent`` leaves untouched besides alphanumerics.
_SEGMENT_SAFE = "-_.!~*'()"


def encode_segment(text: str) -> str:
    """Percent-encode one path segment, slashes included."""
    return quote(str(text), safe=_SEGMENT_SAFE)


def resolve_path(segments: str | Sequence[str] | None = None) -> str:
    """Normalize navigation input into a canonical path string.

    ``None`` or empty input yields the root. A single string is treated as one
    segment; a sequence is encoded segment by segment and joined with ``/``.
    """
    if not segments:
        return ROOT_PATH
    if isinstance(segments, str):
        return f"/{encode_segment(segments)}"
    return "/" + "/".join(encode_segment(segment) for segment in segments)


def path_from_query(query: Mapping[str, object] | None) -> str:
    """Resolve the ``path`` entry of a parsed URL query mapping."""
    if query is None:
        return ROOT_PATH
    value = query.get("path")
    if isinstance(value, str):
        return resolve_path(value)
    if isinstance(value, Sequence):
        return resolve_path([str(item) for item in value])
    return ROOT_PATH


def join_path(path: str, encoded_name: str) -> str:
    """Append an already-encoded segment to ``path`` without doubling the root slash."""
    prefix = "" if path == ROOT_PATH else path
    return f"{prefix}/{encoded_name}"


def child_path(path: str, name: str) -> str:
    """Return the navigation target for child ``name`` of folder ``path``."""
    return join_path(path, encode_segment(name))


def path_segments(path: str) -> list[str]:
    """Decode a canonical path back into its raw segments."""
    return [unquote(segment) for segment in path.split("/") if segment]


def parent_path(path: str) -> str:
    """Return the folder enclosing ``path``; the root is its own parent."""
    head, _sep, _tail = path.rstrip("/").rpartition("/")
    return head or ROOT_PATH


__all__ = [
    "ROOT_PATH",
    "encode_segment",
    "resolve_path",
    "path_from_query",
    "join_path",
    "child_path",
    "path_segments",
    "parent_path",
]
