"""Plain-text rendering of cells and grids."""

from __future__ import annotations

import sys

from hexlayers.grid import Grid
from hexlayers.position import Cell

CELL_TEMPLATE = " _____\n /     \\\n/       \\\n\\{q:3d} {r:3d}/\n \\_____/\n"

_PLACEHOLDER_WIDTH = len(CELL_TEMPLATE.split("\n")[2])
_ODD_OFFSET = "     "


def _format_cell(cell: Cell) -> str:
    pos = cell.position
    return CELL_TEMPLATE.format(q=pos.q, r=pos.r)


def _boxed(inner_width: int, inner_height: int) -> str:
    top = "┌" + "─" * inner_width + "┐"
    middle = ["│" + " " * inner_width + "│"] * inner_height
    bottom = "└" + "─" * inner_width + "┘"
    return "\n".join([top, *middle, bottom])


def render_cell(cell: Cell) -> str:
    """Render a cell as a small box followed by a hexagon labelled with its position."""
    return _boxed(4, 3) + "\n" + _format_cell(cell)


def _styled(text: str) -> list[str]:
    """Centre each line within the block and pad one space on each side."""
    lines = text.split("\n")
    width = max(len(line) for line in lines)
    result = []
    for line in lines:
        short = width - len(line)
        left = short // 2
        right = short - left
        result.append(" " + " " * left + line + " " * right + " ")
    return result


def _join_horizontal(blocks: list[list[str]]) -> str:
    if not blocks:
        return ""
    height = max(len(block) for block in blocks)
    padded = []
    for block in blocks:
        width = max((len(line) for line in block), default=0)
        missing = height - len(block)
        bottom = (missing + 1) // 2
        top = missing - bottom
        lines = [""] * top + block + [""] * bottom
        padded.append([line.ljust(width) for line in lines])
    return "\n".join("".join(parts) for parts in zip(*padded))


def _join_vertical(texts: list[str]) -> str:
    lines = [line for text in texts for line in text.split("\n")]
    width = max((len(line) for line in lines), default=0)
    return "\n".join(line.ljust(width) for line in lines)


def render_grid(grid: Grid) -> str:
    """Render a grid as text, one band per column, with even bands offset."""
    bands = []
    for q in range(grid.width):
        blocks: list[list[str]] = []
        for r in range(grid.height):
            try:
                cell = grid.cell_at(q, r)
            except IndexError as err:
                print(f"Error getting cell at position: {q} {r} - {err}", file=sys.stderr)
                continue
            if cell is not None:
                blocks.append(_styled(_format_cell(cell)))
            else:
                blocks.append(_styled(" " * _PLACEHOLDER_WIDTH))
        if q % 2 == 0:
            blocks.insert(0, [_ODD_OFFSET])
        bands.append(_join_horizontal(blocks))
    return _join_vertical(bands)