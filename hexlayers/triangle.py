"""Triangular cell shapes."""

from __future__ import annotations

from contextlib import suppress

from hexlayers.shape import Bounds, OutOfShapeError, Shape


class Triangle(Shape):
    """A triangle of cells with its base horizontal at the bottom."""

    _outside_message = "coordinates out of bounds or outside triangle shape"

    def __init__(self, x: int, y: int, size: int, name: str) -> None:
        center = size // 2
        super().__init__(
            name,
            (
                (x + col, y + row)
                for row in range(size)
                for col in range(size)
                if center - row <= col <= center + row
            ),
        )
        self._bounds = Bounds(x, y, size, size)
        self.size = size

    @classmethod
    def isosceles(cls, x: int, y: int, height: int, name: str) -> Triangle:
        """Build a centred triangle of the given height and base 2*height-1."""
        triangle = cls.__new__(cls)
        apex = x + height - 1
        Shape.__init__(
            triangle,
            name,
            (
                (col, y + row)
                for row in range(height)
                for col in range(apex - row, apex + row + 1)
            ),
        )
        triangle._bounds = Bounds(x, y, 2 * height - 1, height)
        triangle.size = height
        return triangle

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @bounds.setter
    def bounds(self, value: Bounds) -> None:
        self._bounds = value
        self.size = min(value.width, value.height)

    @property
    def area(self) -> int:
        return int(0.433 * (self.size * self.size))

    @property
    def perimeter(self) -> int:
        return 3 * self.size

    @property
    def kind(self) -> str:
        return "triangle"

    def _transformed(self, suffix: str, mapping) -> Triangle:
        b = self._bounds
        result = Triangle(b.x, b.y, self.size, self.name + suffix)
        for y in range(b.y, b.y + self.size):
            for x in range(b.x, b.x + self.size):
                if (x, y) not in self._cells:
                    continue
                new_x, new_y = mapping(x - b.x, y - b.y)
                with suppress(OutOfShapeError):
                    result.set_color_at(b.x + new_x, b.y + new_y, self._cells[(x, y)])
        result.color = self.color
        return result

    def rotate90(self) -> Triangle:
        """Return a new triangle with colours rotated 90 degrees clockwise."""
        return self._transformed("_rot90", lambda col, row: (self.size - 1 - row, col))

    def flip(self) -> Triangle:
        """Return a new triangle with colours mirrored about the vertical axis."""
        return self._transformed("_flip", lambda col, row: (self.size - 1 - col, row))