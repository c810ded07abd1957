"""The game map: a stack of named grid layers."""

from __future__ import annotations

from collections.abc import Callable

from hexlayers.grid import Grid
from hexlayers.shape import Rectangle, Shape

GenerateGrid = Callable[[Shape], Grid]


class HexMap:
    """A map of fixed dimensions holding an ordered list of grid layers."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._grids: list[Grid] = []

    @property
    def dimensions(self) -> tuple[int, int]:
        """Width and height of the map."""
        return self.width, self.height

    @property
    def grids(self) -> list[Grid]:
        """The map's grids, in the order they were added."""
        return list(self._grids)

    def grid_by_name(self, name: str) -> Grid:
        """Return the first grid with the given name."""
        for grid in self._grids:
            if grid.name == name:
                return grid
        raise KeyError(f"grid with name {name} not found")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._grids):
            raise IndexError(f"index {index} out of bounds")

    def grid_by_index(self, index: int) -> Grid:
        """Return the grid at the given position in the layer list."""
        self._check_index(index)
        return self._grids[index]

    def add_grid(self, grid: Grid | None) -> None:
        """Append a grid as the top layer."""
        if grid is None:
            raise ValueError("cannot add a None grid")
        self._grids.append(grid)

    def remove_grid(self, name: str) -> None:
        """Remove the first grid with the given name."""
        for index, grid in enumerate(self._grids):
            if grid.name == name:
                del self._grids[index]
                return
        raise KeyError(f"grid with name {name} not found")

    def remove_grid_by_index(self, index: int) -> None:
        """Remove the grid at the given index."""
        self._check_index(index)
        del self._grids[index]

    def add_layer(self, generate: GenerateGrid | None) -> None:
        """Generate a grid from a rectangle covering the map and add it."""
        if generate is None:
            raise ValueError("generate function cannot be None")
        shape = Rectangle(0, 0, self.width, self.height, f"Layer_{len(self._grids)}")
        try:
            grid = generate(shape)
        except Exception as err:
            raise RuntimeError(f"failed to generate grid: {err}") from err
        self.add_grid(grid)

    def __str__(self) -> str:
        return f"Map(width: {self.width}, height: {self.height}, grids: {len(self._grids)})"

    def __repr__(self) -> str:
        return str(self)