from typing import NamedTuple, Sequence, Set
import numpy as np


class Location(NamedTuple):
    row: int
    col: int


# north, south, east, west
DIRECTIONS = [(-1, 0), (1, 0), (0, 1), (0, -1)]


class Grid:
    """Immutable rows x cols maze. True is an open corridor, False a wall."""

    def __init__(self, cells):
        arr = np.array(cells, dtype=bool)
        if arr.ndim != 2 or arr.shape[0] < 1 or arr.shape[1] < 1:
            raise ValueError('grid must be 2-D with at least one row and one column')
        arr.setflags(write=False)
        self._cells = arr

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> 'Grid':
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise ValueError(f'ragged rows: widths {sorted(widths)}')
        return cls([list(r) for r in rows])

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self):
        return self.rows, self.cols

    @property
    def entry(self) -> Location:
        return Location(0, 0)

    @property
    def exit(self) -> Location:
        return Location(self.rows - 1, self.cols - 1)

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_open(self, loc) -> bool:
        r, c = loc
        return self.in_bounds(r, c) and bool(self._cells[r, c])

    def __getitem__(self, loc) -> bool:
        r, c = loc
        if not self.in_bounds(r, c):
            raise IndexError(f'location {(r, c)} outside {self.rows}x{self.cols} grid')
        return bool(self._cells[r, c])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self):
        return hash((self._cells.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f'Grid({self.rows}x{self.cols})'

    def tolist(self):
        return self._cells.tolist()


def neighbors(grid: Grid, loc) -> Set[Location]:
    """Open, in-bounds cells one orthogonal step away from loc.

    loc itself may lie outside the grid; bounds are checked per candidate.
    """
    r, c = loc
    res = set()
    for dr, dc in DIRECTIONS:
        nr, nc = r+dr, c+dc
        if grid.in_bounds(nr, nc) and grid[nr, nc]:
            res.add(Location(nr, nc))
    return res
