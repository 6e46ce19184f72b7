"""Step -> pixel grid mapping.

Columns activate right to left, one every `height` steps. Inside an active
column a cell goes dark once the column has been active for longer than its
reveal delay, and each dark cell throws a single lit highlight `offset`
cells to its right, which reads as a comet trail sweeping across the bar.
"""

from __future__ import annotations

from typing import List, Sequence

from falling_pixels.errors import DimensionMismatch, PreconditionViolation

LIT = 1
DARK = 0

Grid = List[List[int]]


def max_step(width: int, height: int) -> int:
    return width * height + width - 1


def _check_shape(width: int, height: int, orders: Sequence[Sequence[int]]) -> None:
    if width < 1 or height < 1:
        raise PreconditionViolation(f"grid must be at least 1x1 (got {width}x{height})")
    if len(orders) != width:
        raise DimensionMismatch(width, height, f"{len(orders)} columns")
    for x, order in enumerate(orders):
        if len(order) != height:
            raise DimensionMismatch(width, height, f"column {x} has {len(order)} rows")


def render(step: int, width: int, height: int, orders: Sequence[Sequence[int]]) -> Grid:
    """Return grid[y][x] of LIT/DARK for the given step.

    The result depends only on the arguments; calling it twice with the same
    inputs gives equal grids.
    """
    _check_shape(width, height, orders)

    grid = [[LIT for _ in range(width)] for __ in range(height)]

    # Columns left of col are not active yet at this step.
    col = max(0, width - -(-step // height))
    for x in range(width - 1, col - 1, -1):
        order = orders[x]
        base = step - (width - x - 1) * height
        for y in range(height):
            offset = base - order[y]
            if offset > 0:
                grid[y][x] = DARK
                if x + offset < width:
                    grid[y][x + offset] = LIT
    return grid


def format_grid(grid: Grid, lit: str = "#", dark: str = ".") -> str:
    return "\n".join("".join(lit if cell == LIT else dark for cell in row) for row in grid)
