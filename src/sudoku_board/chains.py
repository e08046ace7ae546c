"""
Alternating row/column cycles between two symbols.

For a complete board and a pair of values (i, j), starting at an
occurrence of i and moving alternately along the row and the column to
the cell holding the other value of the pair always closes a cycle.
Swapping i and j along such a cycle gives another valid board, so a
puzzle that hides a whole cycle is ambiguous. The pair whose cycles are
longest in total seeds the elimination pass.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .grid import Coord, Grid

logger = logging.getLogger(__name__)


@dataclass
class ChainResult:
    """Winning pair, its total cycle length and its cycles (ordered cells)."""

    pair: Optional[Tuple[int, int]] = None
    length: int = 0
    cycles: List[List[Coord]] = field(default_factory=list)

    def seed_partition(self) -> Tuple[Set[Coord], Set[Coord]]:
        """
        Split every cycle into interleaved halves.

        Returns:
            (S11, S12): cells at even offsets along each cycle (the
            occurrences of the pair's first value) and the cells at odd
            offsets.
        """
        s11: Set[Coord] = set()
        s12: Set[Coord] = set()
        for cycle in self.cycles:
            s11.update(cycle[0::2])
            s12.update(cycle[1::2])
        return s11, s12

    def cells(self) -> Set[Coord]:
        return {c for cycle in self.cycles for c in cycle}


class ChainAnalyzer:
    """Finds the symbol pair with the longest alternating cycles."""

    def __init__(self, grid: Grid):
        self.grid = grid

    def trace_cycles(self, i: int, j: int) -> Tuple[List[List[Coord]], int]:
        """
        Trace every cycle of the pair (i, j).

        Cycles start at the first row-major occurrence of i not yet
        visited; the first move is along the row.

        Returns:
            (cycles, total_length) where total_length sums the coordinate
            deltas of every move.
        """
        grid = self.grid
        pair = (i, j)
        visited: Set[Coord] = set()
        cycles: List[List[Coord]] = []
        total = 0

        for start in grid.positions_of(i):
            if start in visited:
                continue

            cycle = [start]
            visited.add(start)
            c = start
            along_row = True

            for _ in range(2 * grid.side):
                target = j if grid[c] == i else i
                if along_row:
                    nx = grid.find_in_row(c.y, target)
                    if nx is None:
                        raise ValueError(f"value {target} missing from row {c.y}")
                    total += abs(nx - c.x)
                    c = Coord(nx, c.y)
                else:
                    ny = grid.find_in_column(c.x, target)
                    if ny is None:
                        raise ValueError(f"value {target} missing from column {c.x}")
                    total += abs(ny - c.y)
                    c = Coord(c.x, ny)
                along_row = not along_row

                if c == start:
                    break
                cycle.append(c)
                visited.add(c)
            else:
                raise ValueError(f"cycle for pair {pair} did not close")

            cycles.append(cycle)

        return cycles, total

    def find_longest(self) -> ChainResult:
        """
        Scan all pairs i < j and keep the one with the largest total length.

        Ties keep the first pair in enumeration order; a pair of total
        length 0 is never selected.

        Raises:
            ValueError: if the grid is not complete.
        """
        if not self.grid.is_complete():
            raise ValueError("chain analysis needs a complete grid")

        best = ChainResult()
        side = self.grid.side

        for i in range(side):
            for j in range(i + 1, side):
                cycles, length = self.trace_cycles(i, j)
                logger.debug(
                    "Entries %d %d: %d cycle(s), lengths %s, total %d",
                    i, j, len(cycles), [len(c) for c in cycles], length,
                )
                if length > best.length:
                    best = ChainResult(pair=(i, j), length=length, cycles=cycles)

        logger.debug("The longest chain: %s length %d", best.pair, best.length)
        return best
