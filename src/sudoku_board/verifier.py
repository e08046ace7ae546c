"""
Board verifier.

Deterministic checks for generated boards: full-solution validity, chain
soundness, mask coverage, solvability of the clues by singles alone,
and a bounded solution counter for uniqueness. The clue mask is a
heuristic, so neither of the last two is guaranteed for a generated board.
"""

from typing import List, Optional, Set, Tuple

from .chains import ChainResult
from .constants import EMPTY
from .elimination import EliminationResult
from .grid import Coord, Grid


def _revealed_values(grid: Grid) -> List[int]:
    """Row-major values with unrevealed cells set to EMPTY."""
    return [
        int(v) if f else EMPTY for v, f in zip(grid.cells.tolist(), grid.filled.tolist())
    ]


def _candidates(grid: Grid, values: List[int], coord: Coord) -> Set[int]:
    """Values not used by any assigned peer of coord."""
    used = {values[p.x + p.y * grid.side] for p in grid.peers(coord)}
    return set(range(grid.side)) - used


class BoardVerifier:
    """Deterministic board checker."""

    @staticmethod
    def verify_complete_solution(grid: Grid) -> Tuple[bool, str]:
        """Verify every row, column and box holds each symbol once."""
        side = grid.side
        target = list(range(side))
        rows = grid.rows

        for y in range(side):
            for x in range(side):
                if not 0 <= rows[y, x] < side:
                    return False, f"Invalid value at ({x},{y}): {rows[y, x]}"

        for y in range(side):
            if sorted(rows[y].tolist()) != target:
                return False, f"Row {y} invalid: {rows[y].tolist()}"

        for x in range(side):
            if sorted(rows[:, x].tolist()) != target:
                return False, f"Column {x} invalid: {rows[:, x].tolist()}"

        for box in range(grid.box_count):
            b = grid.box_bounds(box)
            vals = rows[b.y0:b.y1, b.x0:b.x1].ravel().tolist()
            if sorted(vals) != target:
                return False, f"Box {box} invalid: {vals}"

        return True, "Solution is correct!"

    @staticmethod
    def verify_chain(grid: Grid, chain: ChainResult) -> Tuple[bool, str]:
        """Check every cycle alternates rows and columns over the pair's values."""
        if chain.pair is None:
            return (not chain.cycles), "No pair selected"

        pair = set(chain.pair)
        for n, cycle in enumerate(chain.cycles):
            if len(cycle) < 4 or len(cycle) % 2:
                return False, f"Cycle {n} has bad length {len(cycle)}"
            for k, c in enumerate(cycle):
                if grid[c] not in pair:
                    return False, f"Cycle {n} cell {tuple(c)} holds {grid[c]}"
                nxt = cycle[(k + 1) % len(cycle)]
                # even offsets move along the row, odd offsets along the column
                shared = c.y == nxt.y if k % 2 == 0 else c.x == nxt.x
                if not shared or c == nxt:
                    return False, f"Cycle {n} breaks between {tuple(c)} and {tuple(nxt)}"
        return True, "Chain is sound"

    @staticmethod
    def verify_mask(grid: Grid, result: EliminationResult) -> Tuple[bool, str]:
        """Check the clue / hidden split covers the board and matches the mask."""
        total = grid.side * grid.side
        if result.visible & result.hidden:
            return False, "Cells both visible and hidden"
        if len(result.visible) + len(result.hidden) != total:
            return False, (
                f"Split covers {len(result.visible) + len(result.hidden)} "
                f"of {total} cells"
            )
        for c in grid.coords():
            if grid.is_filled(c.x, c.y) != (c in result.visible):
                return False, f"Mask disagrees at {tuple(c)}"
        return True, "Mask is consistent"

    @staticmethod
    def is_solvable_by_singles(grid: Grid) -> bool:
        """
        True if naked and hidden singles alone complete the revealed cells.

        Candidates are recomputed from the values placed so far before
        every deduction, so a True result implies a unique solution.
        """
        side = grid.side
        values = _revealed_values(grid)

        progress = True
        while progress:
            progress = False

            # Naked singles
            for c in grid.coords():
                i = c.x + c.y * side
                if values[i] != EMPTY:
                    continue
                cands = _candidates(grid, values, c)
                if not cands:
                    return False
                if len(cands) == 1:
                    values[i] = cands.pop()
                    progress = True

            # Hidden singles
            for unit in grid.units():
                placed = {values[c.x + c.y * side] for c in unit}
                for v in range(side):
                    if v in placed:
                        continue
                    spots = [
                        c for c in unit
                        if values[c.x + c.y * side] == EMPTY
                        and v in _candidates(grid, values, c)
                    ]
                    if len(spots) == 1:
                        values[spots[0].x + spots[0].y * side] = v
                        placed.add(v)
                        progress = True

        return EMPTY not in values

    @staticmethod
    def count_solutions(grid: Grid, limit: int = 2) -> int:
        """
        Count completions of the revealed cells, stopping at limit.

        Args:
            grid: Board whose filled mask marks the clues.
            limit: Stop once this many solutions are found.

        Returns:
            Number of solutions found (at most limit).
        """
        values = _revealed_values(grid)
        coords = grid.coords()

        def search() -> int:
            # Fewest candidates first
            best: Optional[Coord] = None
            best_cands: Set[int] = set()
            for c in coords:
                if values[c.x + c.y * grid.side] != EMPTY:
                    continue
                cands = _candidates(grid, values, c)
                if not cands:
                    return 0
                if best is None or len(cands) < len(best_cands):
                    best, best_cands = c, cands
                    if len(cands) == 1:
                        break
            if best is None:
                return 1

            found = 0
            i = best.x + best.y * grid.side
            for v in sorted(best_cands):
                values[i] = v
                found += search()
                if found >= limit:
                    break
            values[i] = EMPTY
            return found

        return min(search(), limit)
