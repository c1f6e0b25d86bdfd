"""Lightbox viewer state for one folder render.

The viewer is reset on every navigation; transitions return new values.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .listing import GalleryDescriptor


@dataclass(frozen=True)
class GalleryViewer:
    size: int
    visible: bool = False
    active_index: int = 0

    def _clamp(self, index: int) -> int:
        if self.size <= 0:
            return 0
        return max(0, min(self.size - 1, index))

    def open(self, index: int) -> GalleryViewer:
        if self.size <= 0:
            return self
        return replace(self, visible=True, active_index=self._clamp(index))

    def close(self) -> GalleryViewer:
        return replace(self, visible=False)

    def step(self, delta: int) -> GalleryViewer:
        """Move to a neighbouring image without wrapping past either end."""
        return replace(self, active_index=self._clamp(self.active_index + delta))

    def current(self, gallery: tuple[GalleryDescriptor, ...]) -> GalleryDescriptor | None:
        if not self.visible or not gallery:
            return None
        return gallery[self._clamp(self.active_index)]


__all__ = ["GalleryViewer"]
