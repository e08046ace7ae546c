"""
Board facade used by the presentation layer.

Owns one Grid and one random source, runs generator -> chain analysis ->
elimination on request, and exposes read accessors per cell and per box.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional

import numpy as np

from .chains import ChainAnalyzer, ChainResult
from .config import BoardConfig, validate_dimensions
from .constants import (
    SELECTION_SAME_LINE,
    SELECTION_SAME_VALUE,
    SELECTION_UNRELATED,
    format_grid,
)
from .elimination import EliminationEngine, EliminationResult
from .errors import GenerationError
from .generator import BoardGenerator
from .grid import BoxBounds, Grid

logger = logging.getLogger(__name__)


class Board:
    """
    Generalized Sudoku board.

    - configure() resets the grid (or raises ConfigurationError and keeps
      the current one).
    - generate_board() fills the grid and computes the clue mask.
    - select_cell() classifies every cell relative to one cell.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[np.random.RandomState] = None,
    ):
        # Own copy: configure() writes the dimensions back
        self.config = replace(config) if config is not None else BoardConfig()
        self.rng = rng if rng is not None else self.config.make_rng()
        self.grid: Grid = None
        self.selection: np.ndarray = None
        self.chain: Optional[ChainResult] = None
        self.elimination: Optional[EliminationResult] = None
        self.configure(self.config.side, self.config.box_width, self.config.box_height)

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def side(self) -> int:
        return self.grid.side

    @property
    def box_width(self) -> int:
        return self.grid.box_width

    @property
    def box_height(self) -> int:
        return self.grid.box_height

    @property
    def box_rows(self) -> int:
        return self.grid.box_rows

    @property
    def box_columns(self) -> int:
        return self.grid.box_columns

    @property
    def box_count(self) -> int:
        return self.grid.box_count

    def configure(self, side: int, box_width: int, box_height: int) -> None:
        """
        Reset to an all-empty board of the given dimensions.

        Raises:
            ConfigurationError: if the dimensions cannot form a board. The
                current grid is left untouched.
        """
        validate_dimensions(side, box_width, box_height)

        self.config.side = side
        self.config.box_width = box_width
        self.config.box_height = box_height
        self.grid = Grid(side, box_width, box_height)
        self.selection = np.full(side * side, SELECTION_UNRELATED, dtype=np.int64)
        self.chain = None
        self.elimination = None

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_board(self) -> Grid:
        """
        Generate a complete board and choose its clues.

        Returns:
            The grid, with values and filled mask set.

        Raises:
            GenerationError: if no complete assignment was found.
            EliminationError: if clue selection did not converge.
        """
        grid = self.grid
        self.selection.fill(SELECTION_UNRELATED)
        self.chain = None
        self.elimination = None

        if not BoardGenerator(self.rng).generate(grid):
            raise GenerationError(
                f"Failed to generate board {grid.side}x{grid.side} "
                f"with {grid.box_width}x{grid.box_height} boxes"
            )

        self.chain = ChainAnalyzer(grid).find_longest()
        s11, s12 = self.chain.seed_partition()

        engine = EliminationEngine(
            grid, self.rng, max_rounds=self.config.elimination_round_limit()
        )
        self.elimination = engine.eliminate(s11, s12)

        logger.debug(
            "Board ready: pair %s, %d clues after %d round(s)\n%s",
            self.chain.pair, self.elimination.clue_count, self.elimination.rounds,
            format_grid(grid.cells, grid.side, grid.box_width, grid.box_height, grid.filled),
        )
        return grid

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_cell(self, x: int, y: int) -> np.ndarray:
        """
        Classify every cell relative to (x, y).

        Cells holding the same value are SELECTION_SAME_VALUE, other cells
        in the same row or column SELECTION_SAME_LINE, the rest
        SELECTION_UNRELATED.
        """
        grid = self.grid
        value = grid.value(x, y)
        rows = grid.rows
        ys, xs = np.indices((grid.side, grid.side))

        selection = np.full((grid.side, grid.side), SELECTION_UNRELATED, dtype=np.int64)
        selection[(xs == x) | (ys == y)] = SELECTION_SAME_LINE
        selection[rows == value] = SELECTION_SAME_VALUE

        self.selection = selection.ravel()
        return self.selection

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def value_at(self, x: int, y: int) -> int:
        return self.grid.value(x, y)

    def is_filled(self, x: int, y: int) -> bool:
        return self.grid.is_filled(x, y)

    def box_geometry(self, box: int) -> BoxBounds:
        return self.grid.box_bounds(box)

    def box_position(self, box: int):
        """(row, column) of a box within the board."""
        return self.grid.box_position(box)

    def box_cells(self, box: int) -> List[Dict]:
        """
        Per-cell records of one box, row by row.

        Each record has: value, column and row inside the box, absolute x
        and y, selection class and filled flag.
        """
        grid = self.grid
        b = grid.box_bounds(box)
        cells = []
        for y in range(b.y0, b.y1):
            for x in range(b.x0, b.x1):
                i = grid.index(x, y)
                cells.append(
                    {
                        "value": int(grid.cells[i]),
                        "column": x - b.x0,
                        "row": y - b.y0,
                        "x": x,
                        "y": y,
                        "selection": int(self.selection[i]),
                        "filled": bool(grid.filled[i]),
                    }
                )
        return cells

    def format(self, hide: bool = True) -> str:
        """Text rendering; hidden cells shown as '.' when hide is True."""
        grid = self.grid
        mask = grid.filled if hide else None
        return format_grid(grid.cells, grid.side, grid.box_width, grid.box_height, mask)
