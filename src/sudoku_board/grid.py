"""
Board storage and geometry.

Cells are kept row-major in a flat numpy array (index = x + y * side),
with a matching boolean mask of revealed cells. Geometry helpers (rows,
columns, boxes, peers) are computed once per grid.
"""

from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from .constants import EMPTY


class Coord(NamedTuple):
    """Cell position. Tuple ordering gives (x, then y)."""

    x: int
    y: int


class BoxBounds(NamedTuple):
    """Half-open cell range [x0, x1) x [y0, y1) of one box."""

    x0: int
    y0: int
    x1: int
    y1: int


class Grid:
    """
    An N x N board split into box_width x box_height boxes.

    Holds no validation beyond bounds checking; callers validate the
    dimensions (see config.validate_dimensions) before building one.
    """

    def __init__(self, side: int, box_width: int, box_height: int):
        self.side = side
        self.box_width = box_width
        self.box_height = box_height
        self.box_rows = side // box_height
        self.box_columns = side // box_width
        self.box_count = self.box_rows * self.box_columns

        self.cells = np.full(side * side, EMPTY, dtype=np.int64)
        self.filled = np.zeros(side * side, dtype=bool)

        self._coords = [Coord(i % side, i // side) for i in range(side * side)]
        self._peers = [self._compute_peers(c) for c in self._coords]
        self._units = (
            [self.row_coords(y) for y in range(side)]
            + [self.column_coords(x) for x in range(side)]
            + [self.box_coords(b) for b in range(self.box_count)]
        )

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.side and 0 <= y < self.side):
            raise IndexError(f"cell ({x},{y}) outside {self.side}x{self.side} grid")
        return x + y * self.side

    def coord(self, index: int) -> Coord:
        if not 0 <= index < self.side * self.side:
            raise IndexError(f"cell index {index} out of range")
        return self._coords[index]

    def coords(self) -> List[Coord]:
        """All coordinates in row-major order."""
        return list(self._coords)

    def value(self, x: int, y: int) -> int:
        return int(self.cells[self.index(x, y)])

    def set_value(self, x: int, y: int, value: int) -> None:
        self.cells[self.index(x, y)] = value

    def __getitem__(self, coord: Tuple[int, int]) -> int:
        return self.value(*coord)

    def is_filled(self, x: int, y: int) -> bool:
        return bool(self.filled[self.index(x, y)])

    @property
    def rows(self) -> np.ndarray:
        """2-D view of the cells, indexed [y, x]."""
        return self.cells.reshape(self.side, self.side)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Reset every cell to EMPTY and hide everything."""
        self.cells.fill(EMPTY)
        self.filled.fill(False)

    def is_complete(self) -> bool:
        return bool(np.all(self.cells != EMPTY))

    def set_filled(self, visible) -> None:
        """Replace the filled mask: True exactly on the given coordinates."""
        self.filled.fill(False)
        for c in visible:
            self.filled[self.index(c.x, c.y)] = True

    def copy(self) -> "Grid":
        other = Grid(self.side, self.box_width, self.box_height)
        other.cells[:] = self.cells
        other.filled[:] = self.filled
        return other

    def to_rows(self, hide: bool = False) -> List[List[int]]:
        """Values as nested lists; with hide=True unrevealed cells read EMPTY."""
        values = np.where(self.filled, self.cells, EMPTY) if hide else self.cells
        return values.reshape(self.side, self.side).tolist()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def box_index(self, x: int, y: int) -> int:
        self.index(x, y)
        return (y // self.box_height) * self.box_columns + x // self.box_width

    def box_position(self, box: int) -> Tuple[int, int]:
        """(box row, box column) of a box index."""
        if not 0 <= box < self.box_count:
            raise IndexError(f"box index {box} out of range")
        return box // self.box_columns, box % self.box_columns

    def box_bounds(self, box: int) -> BoxBounds:
        by, bx = self.box_position(box)
        x0 = bx * self.box_width
        y0 = by * self.box_height
        return BoxBounds(x0, y0, x0 + self.box_width, y0 + self.box_height)

    def row_coords(self, y: int) -> List[Coord]:
        return [Coord(x, y) for x in range(self.side)]

    def column_coords(self, x: int) -> List[Coord]:
        return [Coord(x, y) for y in range(self.side)]

    def box_coords(self, box: int) -> List[Coord]:
        b = self.box_bounds(box)
        return [Coord(x, y) for y in range(b.y0, b.y1) for x in range(b.x0, b.x1)]

    def units(self) -> List[List[Coord]]:
        """Every row, then every column, then every box."""
        return self._units

    def peers(self, coord: Coord) -> List[Coord]:
        """Cells sharing a row, column or box with coord (coord excluded)."""
        return self._peers[self.index(coord.x, coord.y)]

    def _compute_peers(self, coord: Coord) -> List[Coord]:
        seen = set()
        result = []
        box = (coord.y // self.box_height) * self.box_columns + coord.x // self.box_width
        for c in self.row_coords(coord.y) + self.column_coords(coord.x) + self.box_coords(box):
            if c != coord and c not in seen:
                seen.add(c)
                result.append(c)
        return result

    # ------------------------------------------------------------------
    # Searches
    # ------------------------------------------------------------------

    def find_in_row(self, y: int, value: int) -> Optional[int]:
        """x of the first cell in row y holding value, or None."""
        hits = np.flatnonzero(self.rows[y] == value)
        return int(hits[0]) if hits.size else None

    def find_in_column(self, x: int, value: int) -> Optional[int]:
        """y of the first cell in column x holding value, or None."""
        hits = np.flatnonzero(self.rows[:, x] == value)
        return int(hits[0]) if hits.size else None

    def positions_of(self, value: int) -> List[Coord]:
        """Every cell holding value, row-major."""
        return [self._coords[int(i)] for i in np.flatnonzero(self.cells == value)]

    def placed_values_before(self, x: int, y: int) -> set:
        """
        Values already placed ahead of (x, y) in row-major fill order.

        Covers the row to the left, the column above and the box cells
        preceding (x, y) in box-scan order.
        """
        rows = self.rows
        b = self.box_bounds(self.box_index(x, y))
        seen = set(rows[y, :x].tolist())
        seen.update(rows[:y, x].tolist())
        seen.update(rows[b.y0:y, b.x0:b.x1].ravel().tolist())
        seen.update(rows[y, b.x0:x].tolist())
        seen.discard(EMPTY)
        return seen

    def __repr__(self) -> str:
        return (
            f"Grid(side={self.side}, box={self.box_width}x{self.box_height}, "
            f"complete={self.is_complete()})"
        )
