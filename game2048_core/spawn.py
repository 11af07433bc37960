from __future__ import annotations

import random
import time
from typing import Optional, Tuple

from .grid import SIZE, Coord, Grid, empty_cells, empty_grid

SEED_RANGE = 2 ** 31


def advance_seed(seed: int) -> int:
    """Next seed in the chain; depends on nothing but the current seed."""
    return random.Random(seed).randrange(SEED_RANGE)


def clock_seed() -> int:
    """Seed derived from the wall clock, used at session start and for seed hacking."""
    return advance_seed(int(time.time()))


def add_random_tile(grid: Grid, seed: int) -> Tuple[Grid, Optional[Coord]]:
    """
    Places one new tile on an empty cell chosen by a generator reseeded from `seed`.
    The tile is exponent 1 (a 2) nine times in ten and exponent 2 (a 4) otherwise.
    Returns the grid unchanged and None when there is no empty cell.
    """
    rng = random.Random(seed)
    empties = empty_cells(grid)
    if not empties:
        return grid, None
    x, y = empties[rng.randrange(len(empties))]
    value = rng.randrange(10) // 9 + 1
    return grid.with_cell(x, y, value), (x, y)


def new_grid(seed: int, size: int = SIZE) -> Tuple[Grid, int]:
    """Deals a fresh grid with two tiles. Returns (grid, next_seed)."""
    grid = empty_grid(size)
    for _ in range(2):
        grid, _coord = add_random_tile(grid, seed)
        seed = advance_seed(seed)
    return grid, seed
