"""Command line entry point: build a shape, turn it into a grid and draw it."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, dataclass

from hexlayers.generator import grid_from_shape
from hexlayers.render import render_grid
from hexlayers.shape import Circle, Shape, Square
from hexlayers.triangle import Triangle


@dataclass
class Options:
    """Visualisation options given on the command line."""

    width: int = 10
    height: int = 10
    shape: str = "square"

    def to_json(self) -> str:
        """Serialise the options as compact JSON."""
        return json.dumps({"positional": asdict(self)}, separators=(",", ":"))


def parse_args(argv: list[str] | None = None) -> Options:
    """Parse positional width, height and shape arguments."""
    defaults = Options()
    parser = argparse.ArgumentParser(
        prog="hexlayers", description="Draw a shape as a grid of hex cells."
    )
    parser.add_argument(
        "width", nargs="?", type=int, default=defaults.width,
        help="Width of the visualization",
    )
    parser.add_argument(
        "height", nargs="?", type=int, default=defaults.height,
        help="Height of the visualization",
    )
    parser.add_argument("shape", nargs="?", default=defaults.shape, help="Shape to draw")
    ns = parser.parse_args(argv)
    return Options(width=ns.width, height=ns.height, shape=ns.shape)


def build_shape(options: Options) -> Shape:
    """Build the shape named by the options, sized by the smaller dimension."""
    size = min(options.width, options.height)
    builders = {
        "hexagonal": lambda: Square(0, 0, size, "TestHexGrid"),
        "circular": lambda: Circle(0, 0, size, "TestCircularGrid"),
        "square": lambda: Square(0, 0, size, "TestSquareGrid"),
        "triangular": lambda: Triangle(0, 0, size, "TestTriangularGrid"),
        "isoceles": lambda: Triangle.isosceles(0, 0, size, "TestIsocelesGrid"),
    }
    try:
        builder = builders[options.shape]
    except KeyError:
        raise ValueError(f"Unsupported shape: {options.shape}") from None
    return builder()


def run(options: Options) -> None:
    """Generate a grid from the chosen shape and print it."""
    print(f"Visualization options: {options.to_json()}", file=sys.stderr)
    shape = build_shape(options)
    grid = grid_from_shape(shape)
    print(render_grid(grid))


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    options = parse_args(argv)
    try:
        run(options)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())