"""Layered hexagonal game maps built from shapes, with players, units and a text viewer."""

__version__ = "0.1.0"

__all__ = [
    "board",
    "cli",
    "game",
    "generator",
    "grid",
    "position",
    "render",
    "shape",
    "triangle",
    "unit",
]