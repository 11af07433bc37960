from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from .collapse import slide_line
from .grid import Grid, grid_from_columns
from .rotation import rotate_times


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


# Clockwise quarter turns that bring each direction onto the "slide up" primitive.
ROTATIONS: Dict[Direction, int] = {
    Direction.UP: 0,
    Direction.LEFT: 1,
    Direction.DOWN: 2,
    Direction.RIGHT: 3,
}


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one directional move."""
    grid: Grid
    score_delta: int
    changed: bool


def _slide_columns_up(grid: Grid) -> MoveResult:
    columns = []
    score = 0
    changed = False
    for x in range(grid.size):
        line, gained, line_changed = slide_line(grid.column(x))
        columns.append(line)
        score += gained
        changed |= line_changed
    if not changed:
        return MoveResult(grid, 0, False)
    return MoveResult(grid_from_columns(columns), score, True)


def apply_move(grid: Grid, direction: Direction) -> MoveResult:
    """
    Slides and merges every line of the grid toward `direction`.
    When nothing moves, the same grid object comes back with score_delta 0 so
    callers can skip spawning and snapshotting.
    """
    turns = ROTATIONS[direction]
    result = _slide_columns_up(rotate_times(grid, turns))
    if not result.changed:
        return MoveResult(grid, 0, False)
    return MoveResult(rotate_times(result.grid, 4 - turns), result.score_delta, True)


def move_up(grid: Grid) -> MoveResult:
    return apply_move(grid, Direction.UP)


def move_down(grid: Grid) -> MoveResult:
    return apply_move(grid, Direction.DOWN)


def move_left(grid: Grid) -> MoveResult:
    return apply_move(grid, Direction.LEFT)


def move_right(grid: Grid) -> MoveResult:
    return apply_move(grid, Direction.RIGHT)


def legal_directions(grid: Grid) -> List[Direction]:
    """Directions whose move would change the grid."""
    return [d for d in Direction if apply_move(grid, d).changed]
