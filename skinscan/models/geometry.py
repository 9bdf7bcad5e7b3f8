from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned pixel rectangle, half-open on both axes:
    a point (x, y) is inside iff min_x <= x < max_x and min_y <= y < max_y.
    A rectangle whose max is not past its min holds no pixels.
    """
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_size(cls, width: int, height: int, origin: tuple[int, int] = (0, 0)) -> "Rectangle":
        x, y = origin
        return cls(x, y, x + width, y + height)

    @property
    def dx(self) -> int:
        return max(0, self.max_x - self.min_x)

    @property
    def dy(self) -> int:
        return max(0, self.max_y - self.min_y)

    @property
    def area(self) -> int:
        return self.dx * self.dy

    def empty(self) -> bool:
        return self.min_x >= self.max_x or self.min_y >= self.max_y

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y

    def contains_rect(self, other: "Rectangle") -> bool:
        """Empty rectangles are contained in every rectangle."""
        if other.empty():
            return True
        return (self.min_x <= other.min_x and other.max_x <= self.max_x and
                self.min_y <= other.min_y and other.max_y <= self.max_y)

    def intersect(self, other: "Rectangle") -> "Rectangle":
        r = Rectangle(max(self.min_x, other.min_x), max(self.min_y, other.min_y),
                      min(self.max_x, other.max_x), min(self.max_y, other.max_y))
        if r.empty():
            return Rectangle(0, 0, 0, 0)
        return r

    def translate(self, dx: int, dy: int) -> "Rectangle":
        return Rectangle(self.min_x + dx, self.min_y + dy, self.max_x + dx, self.max_y + dy)
