"""Rectangular grids of hex cells, used as map layers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from hexlayers.position import Cell, Position


class Grid:
    """A named two-dimensional layer of cells, indexed as cells[r][q]."""

    def __init__(
        self,
        position: Position,
        name: str,
        width: int,
        height: int,
        cells: Sequence[Sequence[Cell | None]] | None,
    ) -> None:
        self.position = position
        self.name = name
        self.width = width
        self.height = height
        self._cells = cells if cells is not None else []

    def _in_bounds(self, q: int, r: int) -> bool:
        return 0 <= q < self.width and 0 <= r < self.height

    def cell_at(self, q: int, r: int) -> Cell | None:
        """Return the cell at column q, row r."""
        if not self._in_bounds(q, r):
            raise IndexError(f"cell at ({q}, {r}) is out of bounds")
        return self._cells[r][q]

    def cell_at_position(self, pos: Position) -> Cell | None:
        """Return the cell at the given position."""
        if not self._in_bounds(pos.q, pos.r):
            raise IndexError(f"cell at position {pos} is out of bounds")
        return self.cell_at(pos.q, pos.r)

    def cell_at_index(self, index: int) -> Cell | None:
        """Return the cell at a row-major index."""
        if not 0 <= index < self.cell_count:
            raise IndexError(f"cell at index {index} is out of bounds")
        r, q = divmod(index, self.width)
        return self.cell_at(q, r)

    @property
    def cell_count(self) -> int:
        """Total number of cell slots in the grid."""
        return self.width * self.height

    def copy_cells_to(
        self, destination: MutableSequence[MutableSequence[Cell | None] | None] | None
    ) -> None:
        """Copy the grid's cells into a pre-shaped destination of rows."""
        if destination is None:
            raise ValueError("destination cannot be None")
        if len(destination) != self.height:
            raise ValueError(
                f"destination has {len(destination)} rows, expected {self.height}"
            )
        for r, (target, source) in enumerate(zip(destination, self._cells)):
            if target is None:
                raise ValueError(
                    f"destination row {r} cannot be None, expected a "
                    f"pre-initialized row of width {self.width}"
                )
            if len(target) != self.width:
                raise ValueError(
                    f"destination row {r} has {len(target)} columns, expected {self.width}"
                )
            target[:] = source[: self.width]

    def __str__(self) -> str:
        return (
            f"Grid(name: {self.name}, position: {self.position}, "
            f"width: {self.width}, height: {self.height})"
        )

    def __repr__(self) -> str:
        return str(self)