"""Shared builders for the test modules."""

import numpy as np

from skinscan.models.geometry import Rectangle
from skinscan.repositories.image_repository import ImageRepository


def rgb_image(rows, origin=(0, 0)):
    """RGBAImage from nested [[(r, g, b), ...], ...] rows."""
    return ImageRepository.create_rgba(np.array(rows, dtype=np.uint8), origin=origin)


class PerPixelSource:
    """Plain accessor around another source, so the packed walk never applies."""

    def __init__(self, inner):
        self.inner = inner
        self.reads = []

    @property
    def bounds(self) -> Rectangle:
        return self.inner.bounds

    def rgba(self, x, y):
        self.reads.append((x, y))
        return self.inner.rgba(x, y)


class DictMask:
    """Opacity sink backed by a dict, for masks that are not AlphaMask."""

    def __init__(self, bounds, fill=0):
        self._bounds = bounds
        self.cells = {}
        self.fill = fill
        self.writes = []

    @property
    def bounds(self):
        return self._bounds

    def opacity(self, x, y):
        return self.cells.get((x, y), self.fill)

    def set_opacity(self, x, y, value):
        self.writes.append((x, y))
        self.cells[(x, y)] = value
