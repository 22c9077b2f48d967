"""
ASCII rendering of a planned delivery route.

Draws the grid as a bordered character map with the origin at the bottom
left, marking every cell the agent walks through and every drop.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Callable

from simple_chalk import chalk  # type: ignore[import-untyped]

from grid_types import GridSize, Point

__all__ = ["MAX_MAP_CELLS", "map_fits", "trace_cells", "render_route"]

EMPTY_CHAR = "_"
WALK_CHAR = "·"
DROP_CHAR = "D"
ORIGIN_CHAR = "@"

# Larger grids are not drawn
MAX_MAP_CELLS = 10_000


def map_fits(grid: GridSize) -> bool:
    """Whether the grid is small enough to draw."""
    return (grid.width + 1) * (grid.height + 1) <= MAX_MAP_CELLS


def trace_cells(points: Iterable[Point]) -> list[tuple[int, int]]:
    """Return every cell visited by the agent, in walk order, starting at the origin.

    Mirrors the direction generator: the X leg is walked before the Y leg.
    """
    x, y = 0, 0
    cells = [(x, y)]

    for point in points:
        step = 1 if point.x > x else -1
        while x != point.x:
            x += step
            cells.append((x, y))
        step = 1 if point.y > y else -1
        while y != point.y:
            y += step
            cells.append((x, y))

    return cells


def render_route(
    grid: GridSize,
    points: Sequence[Point],
    cell_width: int = 3,
    color: bool = True,
) -> str:
    """
    Render the route over the grid, highest row first.

    Args:
        grid: Grid bounds (inclusive)
        points: Delivery points in order
        cell_width: Characters per cell (default 3)
        color: Apply terminal colours with chalk

    Returns:
        Rendered ASCII string, one line per grid row plus borders

    Raises:
        ValueError: If the grid has more than MAX_MAP_CELLS cells
    """
    if not map_fits(grid):
        raise ValueError(f"Grid {grid} is too large to draw (limit {MAX_MAP_CELLS} cells)")

    walked = set(trace_cells(points))
    drops = {(p.x, p.y) for p in points}

    def plain(s: str) -> str:
        return s

    border: Callable[[str], str] = chalk.white if color else plain
    styles: dict[str, Callable[[str], str]] = {
        EMPTY_CHAR: plain,
        WALK_CHAR: chalk.dim if color else plain,
        DROP_CHAR: chalk.green if color else plain,
        ORIGIN_CHAR: chalk.yellow if color else plain,
    }

    cols = grid.width + 1
    grid_width = cols * cell_width + 2  # +2 for borders
    title = f" {grid} "

    lines: list[str] = []

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if len(title) <= grid_width - 2:
        title_start = (grid_width - len(title)) // 2
        title_line = (
            "┌" +
            "─" * (title_start - 1) +
            title +
            "─" * (grid_width - title_start - len(title) - 1) +
            "┐"
        )
    lines.append(border(title_line))

    for y in range(grid.height, -1, -1):
        line_parts = [border("│")]

        for x in range(cols):
            if (x, y) in drops:
                char = DROP_CHAR
            elif (x, y) == (0, 0):
                char = ORIGIN_CHAR
            elif (x, y) in walked:
                char = WALK_CHAR
            else:
                char = EMPTY_CHAR

            content = char if cell_width == 1 else char.center(cell_width)
            line_parts.append(styles[char](content))

        line_parts.append(border("│"))
        lines.append("".join(line_parts))

    # Bottom border
    lines.append(border("└" + "─" * (grid_width - 2) + "┘"))

    return "\n".join(lines)
