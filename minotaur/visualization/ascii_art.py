"""
ASCII art rendering.

Each cell is drawn three characters wide between ``+`` corner posts:

    +---+---+
    |       |
    +---+   +
    |       |
    +---+---+
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from minotaur.grid import Direction

if TYPE_CHECKING:
    from minotaur.grid import Grid


def to_ascii(grid: Grid) -> str:
    """
    Render a grid as ASCII art.

    Only east and south walls are read per cell; the northern boundary is
    drawn as a fixed first line and the western boundary as the leading
    ``|`` of every body line.

    Returns:
        Multi-line string; every line, including the last, ends in a newline
    """
    lines = ["+" + "---+" * grid.width]

    for y in range(grid.height):
        body = ["|"]
        floor = ["+"]
        for x in range(grid.width):
            cell = (x, y)
            body.append("   ")
            body.append("|" if grid.has_wall(cell, Direction.EAST) else " ")
            floor.append("---" if grid.has_wall(cell, Direction.SOUTH) else "   ")
            floor.append("+")
        lines.append("".join(body))
        lines.append("".join(floor))

    return "\n".join(lines) + "\n"
