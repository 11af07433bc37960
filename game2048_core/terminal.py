from __future__ import annotations

from .grid import MAX_EXPONENT, Grid, count_empty
from .rotation import rotate_grid


def has_vertical_pair(grid: Grid) -> bool:
    """True when two vertically adjacent cells hold the same mergeable value."""
    for x in range(grid.size):
        for y in range(grid.size - 1):
            value = grid.at(x, y)
            if value == grid.at(x, y + 1) and value < MAX_EXPONENT:
                return True
    return False


def is_terminal(grid: Grid) -> bool:
    """
    A grid is terminal when it is full and no two orthogonal neighbours match.
    Horizontal neighbours are checked by reusing the vertical scan on a rotated
    copy; the caller's grid keeps its orientation.
    """
    if count_empty(grid) > 0:
        return False
    if has_vertical_pair(grid):
        return False
    return not has_vertical_pair(rotate_grid(grid))
