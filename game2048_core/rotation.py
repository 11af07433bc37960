from __future__ import annotations

from typing import List

from .grid import Exponent, Grid


def rotate_grid(grid: Grid) -> Grid:
    """
    Rotates the grid 90 degrees clockwise.
    Works ring by ring from the outside in, cycling four cells at a time on a
    working copy, so the caller's grid is never modified.
    """
    n = grid.size
    cells: List[Exponent] = list(grid.cells)

    def idx(x: int, y: int) -> int:
        return y * n + x

    for i in range(n // 2):
        for j in range(i, n - i - 1):
            tmp = cells[idx(i, j)]
            cells[idx(i, j)] = cells[idx(j, n - i - 1)]
            cells[idx(j, n - i - 1)] = cells[idx(n - i - 1, n - j - 1)]
            cells[idx(n - i - 1, n - j - 1)] = cells[idx(n - j - 1, i)]
            cells[idx(n - j - 1, i)] = tmp
    return Grid(n, tuple(cells))


def rotate_times(grid: Grid, times: int) -> Grid:
    for _ in range(times % 4):
        grid = rotate_grid(grid)
    return grid
