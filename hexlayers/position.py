"""Axial hex coordinates and grid cells."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A coordinate on the hex grid in axial form."""

    q: int = 0
    r: int = 0

    def __str__(self) -> str:
        return f"Pos(q:{self.q}, r:{self.r})"


class Cell:
    """A single hex cell that knows its own position."""

    __slots__ = ("_position",)

    def __init__(self, q: int, r: int) -> None:
        self._position = Position(q, r)

    @property
    def position(self) -> Position:
        """The position of the cell in its grid."""
        return self._position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._position == other._position

    def __hash__(self) -> int:
        return hash(self._position)

    def __repr__(self) -> str:
        return f"Cell(q={self._position.q}, r={self._position.r})"