from __future__ import annotations

from typing import List, Sequence, Tuple

from .grid import MAX_EXPONENT, Exponent


def find_target(line: Sequence[Exponent], x: int, stop: int) -> int:
    """
    Finds where the tile at position x lands when sliding toward index 0.
    The scan walks back from x - 1: an equal tile is a merge target, a different
    tile blocks at the position after it, and empty cells run down to `stop`.
    Tiles at MAX_EXPONENT never merge.
    """
    if x == 0:
        return x
    t = x - 1
    while True:
        if line[t] != 0:
            if line[t] != line[x] or line[x] >= MAX_EXPONENT:
                return t + 1
            return t
        if t == stop:
            return t
        t -= 1


def slide_line(line: Sequence[Exponent]) -> Tuple[Tuple[Exponent, ...], int, bool]:
    """
    Collapses one line toward index 0, merging each equal pair at most once.
    Returns (new_line, score_delta, changed); the input is left untouched.
    """
    cells: List[Exponent] = list(line)
    score = 0
    changed = False
    stop = 0
    for x in range(len(cells)):
        if cells[x] == 0:
            continue
        t = find_target(cells, x, stop)
        if t == x:
            continue
        if cells[t] == 0:
            cells[t] = cells[x]
        elif cells[t] == cells[x]:
            cells[t] += 1
            score += 1 << cells[t]
            # a merged tile cannot absorb a third one in the same pass
            stop = t + 1
        cells[x] = 0
        changed = True
    return tuple(cells), score, changed


# (input, output, points) rows for a 4-wide line; exponents, not tile values.
SLIDE_CASES: Tuple[Tuple[Tuple[int, ...], Tuple[int, ...], int], ...] = (
    ((0, 0, 0, 1), (1, 0, 0, 0), 0),
    ((0, 0, 1, 1), (2, 0, 0, 0), 4),
    ((0, 1, 0, 1), (2, 0, 0, 0), 4),
    ((1, 0, 0, 1), (2, 0, 0, 0), 4),
    ((1, 0, 1, 0), (2, 0, 0, 0), 4),
    ((1, 1, 1, 0), (2, 1, 0, 0), 4),
    ((1, 0, 1, 1), (2, 1, 0, 0), 4),
    ((1, 1, 0, 1), (2, 1, 0, 0), 4),
    ((1, 1, 1, 1), (2, 2, 0, 0), 8),
    ((2, 2, 1, 1), (3, 2, 0, 0), 12),
    ((1, 1, 2, 2), (2, 3, 0, 0), 12),
    ((3, 0, 1, 1), (3, 2, 0, 0), 4),
    ((2, 0, 1, 1), (2, 2, 0, 0), 4),
)
