"""Building grids from shapes."""

from __future__ import annotations

import sys

from hexlayers.grid import Grid
from hexlayers.position import Cell, Position
from hexlayers.shape import Shape


def grid_from_shape(shape: Shape) -> Grid:
    """Create a grid covering the shape's bounds with a cell wherever the shape has one.

    A rough outline of the shape is written to stderr while the grid is built.
    """
    b = shape.bounds
    cells: list[list[Cell | None]] = []
    for r in range(b.height):
        row = [
            Cell(q, r) if (b.x + q, b.y + r) in shape else None
            for q in range(b.width)
        ]
        cells.append(row)
        sys.stderr.write("".join(" " if cell is None else "x" for cell in row) + "\n")
    return Grid(Position(b.x, b.y), shape.name, b.width, b.height, cells)