from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

Exponent = int  # 0 = empty, otherwise the tile shows 2 ** exponent
Coord = Tuple[int, int]  # (x, y) == (column, row)

SIZE = 4
MAX_EXPONENT = 31  # largest tile; two of them do not merge, so a merge scores at most 2 ** 31


@dataclass(frozen=True)
class Grid:
    """Square grid of tile exponents, stored row-major."""
    size: int
    cells: Tuple[Exponent, ...]  # length == size * size

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError('Grid size must be a positive integer')
        if len(self.cells) != self.size * self.size:
            raise ValueError(f'Expected {self.size * self.size} cells, got {len(self.cells)}')
        for value in self.cells:
            if value < 0 or value > MAX_EXPONENT:
                raise ValueError(f'Invalid tile exponent: {value}')

    def index(self, x: int, y: int) -> int:
        """Calculates the 1D index for a given column and row."""
        return y * self.size + x

    def at(self, x: int, y: int) -> Exponent:
        return self.cells[self.index(x, y)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all cells, column by column."""
        for x in range(self.size):
            for y in range(self.size):
                yield (x, y)

    def column(self, x: int) -> Tuple[Exponent, ...]:
        """Column x read from the top row down."""
        return tuple(self.at(x, y) for y in range(self.size))

    def rows(self) -> List[List[Exponent]]:
        return [list(self.cells[y * self.size:(y + 1) * self.size]) for y in range(self.size)]

    def with_cell(self, x: int, y: int, value: Exponent) -> 'Grid':
        cells = list(self.cells)
        cells[self.index(x, y)] = value
        return Grid(self.size, tuple(cells))

    def pretty(self) -> str:
        """Plain text view: tile numbers right-aligned, '·' for empty cells."""
        lines: List[str] = []
        for y in range(self.size):
            row: List[str] = []
            for x in range(self.size):
                value = self.at(x, y)
                row.append(f"{1 << value:>6}" if value else f"{'·':>6}")
            lines.append("".join(row))
        return "\n".join(lines)


def empty_grid(size: int = SIZE) -> Grid:
    return Grid(size, (0,) * (size * size))


def grid_from_rows(rows: Sequence[Sequence[int]]) -> Grid:
    """Builds a grid from nested rows of exponents (top row first)."""
    size = len(rows)
    flat: List[int] = []
    for row in rows:
        if len(row) != size:
            raise ValueError('Grid rows must form a square')
        flat.extend(int(v) for v in row)
    return Grid(size, tuple(flat))


def grid_from_columns(columns: Sequence[Sequence[int]]) -> Grid:
    """Builds a grid from columns, each read from the top row down."""
    size = len(columns)
    cells = [0] * (size * size)
    for x, column in enumerate(columns):
        if len(column) != size:
            raise ValueError('Grid columns must form a square')
        for y, value in enumerate(column):
            cells[y * size + x] = int(value)
    return Grid(size, tuple(cells))


def count_empty(grid: Grid) -> int:
    return sum(1 for value in grid.cells if value == 0)


def empty_cells(grid: Grid) -> List[Coord]:
    """Empty cells in spawn scan order (column by column, top to bottom)."""
    return [coord for coord in grid.coords() if grid.at(*coord) == 0]
