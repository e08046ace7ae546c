"""
Randomized backtracking generator for complete boards.

Cells are filled in row-major order. Each cell tries the values not yet
used ahead of it (row to the left, column above, earlier box cells) in a
shuffled order; a dead end resets the cell and backtracks to the previous
one.
"""

import logging
from typing import List, Optional

import numpy as np

from .constants import EMPTY, format_grid
from .grid import Grid

logger = logging.getLogger(__name__)


class BoardGenerator:
    """
    Fills an empty Grid with a valid complete assignment.

    - Randomness comes from the injected RandomState only.
    - The search keeps its own stack of remaining options per cell, so the
      depth is not bounded by the interpreter's recursion limit.
    """

    def __init__(self, rng: Optional[np.random.RandomState] = None):
        self.rng = rng if rng is not None else np.random.RandomState()
        self.placements = 0
        self.backtracks = 0

    def candidates(self, grid: Grid, index: int) -> List[int]:
        """Shuffled values still allowed at cell `index`."""
        x, y = grid.coord(index)
        forbidden = grid.placed_values_before(x, y)
        options = [v for v in range(grid.side) if v not in forbidden]
        order = self.rng.permutation(len(options))
        return [options[k] for k in order]

    def generate(self, grid: Grid) -> bool:
        """
        Fill every cell of grid.

        Returns:
            True on success. False if no assignment exists, in which case
            the grid is left all-empty.
        """
        grid.clear()
        self.placements = 0
        self.backtracks = 0

        last = grid.side * grid.side - 1
        stack = [self.candidates(grid, 0)]

        while stack:
            index = len(stack) - 1
            options = stack[-1]

            if not options:
                # Dead end: undo and return to the previous cell
                grid.cells[index] = EMPTY
                stack.pop()
                self.backtracks += 1
                continue

            grid.cells[index] = options.pop(0)
            self.placements += 1

            if index == last:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(
                        "Generated board (%d placements, %d backtracks):\n%s",
                        self.placements, self.backtracks,
                        format_grid(grid.cells, grid.side, grid.box_width, grid.box_height),
                    )
                return True

            stack.append(self.candidates(grid, index + 1))

        logger.debug("Failed to generate board after %d backtracks", self.backtracks)
        return False
