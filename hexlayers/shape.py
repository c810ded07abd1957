"""Cell-based shapes: rectangles, squares and circles with per-cell colours."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


class OutOfShapeError(LookupError):
    """Raised when a coordinate lies outside a shape."""


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box; (x, y) is the top-left corner."""

    x: int
    y: int
    width: int
    height: int


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Shape(ABC):
    """A named set of integer cells, each holding a colour."""

    _outside_message = "coordinates out of bounds"

    def __init__(self, name: str, cells: Iterable[tuple[int, int]]) -> None:
        self.name = name
        self.color = 0
        self._cells: dict[tuple[int, int], int] = dict.fromkeys(cells, 0)

    def __contains__(self, point: object) -> bool:
        return point in self._cells

    def color_at(self, x: int, y: int) -> int:
        """Return the colour of the cell at (x, y)."""
        try:
            return self._cells[(x, y)]
        except KeyError:
            raise OutOfShapeError(self._outside_message) from None

    def set_color_at(self, x: int, y: int, color: int) -> None:
        """Set the colour of the cell at (x, y)."""
        if (x, y) not in self._cells:
            raise OutOfShapeError(self._outside_message)
        self._cells[(x, y)] = color

    @property
    @abstractmethod
    def bounds(self) -> Bounds:
        """The bounding box of the shape."""

    @bounds.setter
    @abstractmethod
    def bounds(self, value: Bounds) -> None: ...

    @property
    @abstractmethod
    def area(self) -> int:
        """The area of the shape."""

    @property
    @abstractmethod
    def perimeter(self) -> int:
        """The perimeter of the shape."""

    @property
    def position(self) -> tuple[int, int]:
        """The top-left corner of the bounding box."""
        b = self.bounds
        return b.x, b.y

    @property
    def dimensions(self) -> tuple[int, int]:
        """Width and height of the bounding box."""
        b = self.bounds
        return b.width, b.height

    @property
    @abstractmethod
    def kind(self) -> str:
        """The type name of the shape."""


class Rectangle(Shape):
    """An axis-aligned rectangle."""

    def __init__(self, x: int, y: int, width: int, height: int, name: str) -> None:
        super().__init__(
            name,
            ((x + col, y + row) for row in range(height) for col in range(width)),
        )
        self._bounds = Bounds(x, y, width, height)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @bounds.setter
    def bounds(self, value: Bounds) -> None:
        self._bounds = value

    @property
    def area(self) -> int:
        return self._bounds.width * self._bounds.height

    @property
    def perimeter(self) -> int:
        return 2 * (self._bounds.width + self._bounds.height)

    @property
    def kind(self) -> str:
        return "rectangle"


class Square(Rectangle):
    """An axis-aligned square."""

    def __init__(self, x: int, y: int, size: int, name: str) -> None:
        super().__init__(x, y, size, size, name)

    @property
    def perimeter(self) -> int:
        return 4 * self._bounds.width

    @property
    def kind(self) -> str:
        return "square"


class Circle(Shape):
    """A filled circle of cells around a centre point."""

    _outside_message = "coordinates out of bounds or outside circle shape"

    def __init__(self, x: int, y: int, radius: int, name: str) -> None:
        span = range(-radius, radius + 1)
        super().__init__(
            name,
            (
                (x + col, y + row)
                for row in span
                for col in span
                if col * col + row * row <= radius * radius
            ),
        )
        self.center_x = x
        self.center_y = y
        self.radius = radius

    @property
    def bounds(self) -> Bounds:
        side = 2 * self.radius + 1
        return Bounds(self.center_x - self.radius, self.center_y - self.radius, side, side)

    @bounds.setter
    def bounds(self, value: Bounds) -> None:
        self.center_x = value.x + value.width // 2
        self.center_y = value.y + value.height // 2
        self.radius = min(value.width, value.height) // 2

    @property
    def area(self) -> int:
        return _round_half_away(math.pi * self.radius * self.radius)

    @property
    def perimeter(self) -> int:
        return _round_half_away(2 * math.pi * self.radius)

    @property
    def position(self) -> tuple[int, int]:
        return self.center_x, self.center_y

    @property
    def kind(self) -> str:
        return "circle"