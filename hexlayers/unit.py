"""Game units that occupy a position on the map."""

from __future__ import annotations

from hexlayers.position import Position


class Unit:
    """A named unit with a current position."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._position = Position()

    def move(self, pos: Position) -> None:
        """Place the unit at the given position."""
        self._position = pos

    @property
    def position(self) -> Position:
        """The unit's current position."""
        return self._position

    def __repr__(self) -> str:
        return f"Unit(name={self.name!r}, position={self._position})"