from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .geometry import Rectangle
from .pixel_source import scale16

CHANNELS = 4  # R, G, B, A interleaved


def _check_geometry(pix: np.ndarray, stride: int, rect: Rectangle, bpp: int, kind: str) -> None:
    if pix.dtype != np.uint8 or pix.ndim != 1:
        raise ValueError(f"{kind}: pix must be a flat uint8 array, got {pix.dtype} with shape {pix.shape}")
    if rect.max_x < rect.min_x or rect.max_y < rect.min_y:
        raise ValueError(f"{kind}: negative dimensions in {rect}")
    if rect.empty():
        return
    if stride < rect.dx * bpp:
        raise ValueError(f"{kind}: stride {stride} shorter than a {rect.dx}px row")
    needed = (rect.dy - 1) * stride + rect.dx * bpp
    if pix.size < needed:
        raise ValueError(f"{kind}: buffer holds {pix.size} bytes, {needed} needed for {rect}")


@dataclass(eq=False)
class RGBAImage:
    """
    Packed 8-bit RGBA pixels in one flat buffer.
    Row y starts `stride` bytes after row y-1; stride may exceed 4 * width
    (padding, or a sub-image sharing its parent's buffer).
    """
    pix: np.ndarray  # Shape (N,), dtype uint8.
    stride: int      # Bytes between vertically adjacent pixels.
    rect: Rectangle  # Pixel coordinates covered by pix.

    def __post_init__(self):
        _check_geometry(self.pix, self.stride, self.rect, CHANNELS, "RGBAImage")

    @property
    def bounds(self) -> Rectangle:
        return self.rect

    def pix_offset(self, x: int, y: int) -> int:
        return (y - self.rect.min_y) * self.stride + (x - self.rect.min_x) * CHANNELS

    def rgba8(self, x: int, y: int) -> Tuple[int, int, int, int]:
        if not self.rect.contains(x, y):
            return 0, 0, 0, 0
        i = self.pix_offset(x, y)
        r, g, b, a = self.pix[i:i + CHANNELS]
        return int(r), int(g), int(b), int(a)

    def rgba(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.rgba8(x, y)
        return scale16(r), scale16(g), scale16(b), scale16(a)

    def set_rgba(self, x: int, y: int, color: Tuple[int, int, int, int]) -> None:
        if not self.rect.contains(x, y):
            return
        i = self.pix_offset(x, y)
        self.pix[i:i + CHANNELS] = color

    def sub_image(self, r: Rectangle) -> "RGBAImage":
        """View of the pixels in r ∩ bounds. Shares the buffer."""
        r = r.intersect(self.rect)
        if r.empty():
            return RGBAImage(pix=np.zeros(0, np.uint8), stride=0, rect=r)
        return RGBAImage(pix=self.pix[self.pix_offset(r.min_x, r.min_y):], stride=self.stride, rect=r)


@dataclass(eq=False)
class AlphaMask:
    """
    8-bit opacity grid, one byte per pixel.
    0 = transparent, 255 = opaque.
    """
    pix: np.ndarray
    stride: int
    rect: Rectangle

    def __post_init__(self):
        _check_geometry(self.pix, self.stride, self.rect, 1, "AlphaMask")

    @property
    def bounds(self) -> Rectangle:
        return self.rect

    def pix_offset(self, x: int, y: int) -> int:
        return (y - self.rect.min_y) * self.stride + (x - self.rect.min_x)

    def opacity(self, x: int, y: int) -> int:
        if not self.rect.contains(x, y):
            return 0
        return int(self.pix[self.pix_offset(x, y)])

    def set_opacity(self, x: int, y: int, value: int) -> None:
        if not self.rect.contains(x, y):
            return
        self.pix[self.pix_offset(x, y)] = value

    def sub_image(self, r: Rectangle) -> "AlphaMask":
        r = r.intersect(self.rect)
        if r.empty():
            return AlphaMask(pix=np.zeros(0, np.uint8), stride=0, rect=r)
        return AlphaMask(pix=self.pix[self.pix_offset(r.min_x, r.min_y):], stride=self.stride, rect=r)
