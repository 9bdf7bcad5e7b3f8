# models/pixel_source.py
"""
Capability interfaces the engines consume.

• PixelSource  – random-access colour lookup, channels scaled to 16 bits.
• OpacitySink  – settable per-pixel opacity (0 = transparent, 255 = opaque).

Any object with the right attributes qualifies; no base class needed.
"""
from __future__ import annotations
from typing import Protocol, Tuple, runtime_checkable

from PIL import Image as PILImage

from .geometry import Rectangle

OPAQUE = 255
TRANSPARENT = 0


@runtime_checkable
class PixelSource(Protocol):
    @property
    def bounds(self) -> Rectangle: ...

    def rgba(self, x: int, y: int) -> Tuple[int, int, int, int]: ...


@runtime_checkable
class OpacitySink(Protocol):
    @property
    def bounds(self) -> Rectangle: ...

    def opacity(self, x: int, y: int) -> int: ...

    def set_opacity(self, x: int, y: int, value: int) -> None: ...


def scale16(v8: int) -> int:
    """Widen an 8-bit channel to 16 bits (0xab -> 0xabab)."""
    return v8 * 257


class PILPixelSource:
    """
    Generic accessor over a Pillow image.

    Never takes the buffer fast path; useful when the caller only has a
    PIL image and does not want to copy it into a packed buffer.
    """

    def __init__(self, image: PILImage.Image, origin: Tuple[int, int] = (0, 0)):
        self.image = image if image.mode == "RGBA" else image.convert("RGBA")
        self.origin = origin
        self._bounds = Rectangle.from_size(*self.image.size, origin=origin)

    @property
    def bounds(self) -> Rectangle:
        return self._bounds

    def rgba(self, x: int, y: int) -> Tuple[int, int, int, int]:
        if not self._bounds.contains(x, y):
            return 0, 0, 0, 0
        r, g, b, a = self.image.getpixel((x - self.origin[0], y - self.origin[1]))
        return scale16(r), scale16(g), scale16(b), scale16(a)
