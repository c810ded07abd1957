# hexlayers

Building blocks for turn-based games played on hexagonal maps.

A `HexMap` (in `hexlayers.board`) holds an ordered stack of named
`Grid` layers. Each grid is a rectangle of `Cell`s addressed by axial
`(q, r)` coordinates, stored row by row. A cell slot may be `None`, so
a layer can take any outline. Layers are made from shapes
(`Rectangle`, `Square`, `Circle` and `Triangle`) by a generator
function such as `grid_from_shape`. `Player`s own `Unit`s that move
between `Position`s, and a `Game` ties a map and its players together.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Building a map

```python
from hexlayers.board import HexMap
from hexlayers.generator import grid_from_shape
from hexlayers.position import Position
from hexlayers.unit import Unit
from hexlayers.game import Game, Player

board = HexMap(10, 10)
board.add_layer(grid_from_shape)   # adds a grid named "Layer_0"
base = board.grid_by_name("Layer_0")
print(base)                        # Grid(name: Layer_0, position: Pos(q:0, r:0), width: 10, height: 10)

game = Game()
game.set_map(board)

alice = Player("Alice")
game.add_player(alice)

warrior = Unit("Warrior")
alice.add_unit(warrior)
warrior.move(Position(1, 1))
print(warrior.position)            # Pos(q:1, r:1)
```

`HexMap.add_layer(generate)` calls `generate` with a `Rectangle`
covering the whole map, named `Layer_<n>` after the number of layers
already present, and adds the grid it returns. An exception raised by
the generator is re-raised as `RuntimeError`.

A grid offers `cell_at(q, r)`, `cell_at_position(pos)`,
`cell_at_index(index)` (row-major), `cell_count` and
`copy_cells_to(destination)`, which fills a list of pre-sized rows.
A map offers `dimensions`, `grids`, `grid_by_name`, `grid_by_index`,
`add_grid`, `remove_grid` and `remove_grid_by_index`.

Lookups never return a placeholder when they miss:

- out-of-range indices and coordinates raise `IndexError`
  (grids, maps, `Player.unit_at` and `Player.set_unit_at`);
- unknown grid names raise `KeyError`;
- adding `None` as a grid, or a `None` generator, raises `ValueError`,
  as does `copy_cells_to` with a destination of the wrong shape.

## Shapes

```python
from hexlayers.shape import Circle
from hexlayers.triangle import Triangle

circle = Circle(0, 0, 3, "pond")
circle.set_color_at(0, 0, 42)
print(circle.color_at(0, 0))       # 42

peak = Triangle.isosceles(0, 0, 5, "peak")
turned = Triangle(0, 0, 5, "ridge").rotate90()
mirrored = Triangle(0, 0, 5, "ridge").flip()
```

Every shape holds a colour per cell, starting at 0. Reading or setting
a colour outside the shape raises `hexlayers.shape.OutOfShapeError`, a
subclass of `LookupError`; `(x, y) in shape` tests membership. Shapes
also expose `bounds` (a `Bounds` with `x`, `y`, `width`, `height`,
assignable), `area`, `perimeter`, `position`, `dimensions` and `kind`.

Any shape can become a grid with `grid_from_shape(shape)`. Points
inside the shape become cells and every other point in its bounds is
left empty. While building, it writes a rough outline of the shape to
standard error.

## Viewing a grid in the terminal

```
hexlayers [WIDTH] [HEIGHT] [SHAPE]
```

`WIDTH` and `HEIGHT` default to 10. `SHAPE` is one of `square`
(the default), `hexagonal` (currently drawn as a square),
`circular`, `triangular` or `isoceles`. The command builds a shape
whose size is the smaller of the two dimensions, turns it into a grid
and prints the grid as hexagons. The chosen options are written to
standard error as JSON. An unknown shape prints an error and exits
with status 1.

The same steps are available from Python through
`hexlayers.cli.parse_args`, `build_shape`, `run` and `main`, and
`hexlayers.render.render_grid` and `render_cell`, which return the
drawing as a string.

## What it does not do

The package models maps, layers, players and units, but it has no game
rules: there are no turns, no movement checks, no combat and no
victory conditions. Maps and games are held in memory only and cannot
be saved or loaded. The terminal view draws a grid once; it is not an
interactive screen.

## Running the tests

```
pip install .[test]
pytest
```