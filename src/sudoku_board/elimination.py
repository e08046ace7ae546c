"""
Greedy clue selection with constraint propagation.

Starting from the chain seed partition, every cell ends up either revealed
(a clue) or hidden. Before each decision the engine propagates from the
current clues with two local rules:

- simple elimination: a cell whose row, column and box clues leave a
  single value is known;
- lone rangers: a value that fits only one unknown cell of a row, column
  or box is known there.

A pool cell that propagation already knows is hidden; when no such cell
exists the most ambiguous pool cell becomes a clue. Lone rangers are read
from the candidate sets of the current pass, which may predate cells
committed later in that pass, so a hidden cell is not always deducible.
The mask is best effort: it neither minimises the clue count nor
guarantees a unique solution (see BoardVerifier.count_solutions).
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from .constants import FORCED
from .errors import EliminationError
from .grid import Coord, Grid

logger = logging.getLogger(__name__)

CandidateMap = Dict[Coord, Set[int]]


@dataclass
class EliminationResult:
    """Final split of the board into clues and hidden cells."""

    visible: Set[Coord] = field(default_factory=set)
    hidden: Set[Coord] = field(default_factory=set)
    rounds: int = 0

    @property
    def clue_count(self) -> int:
        return len(self.visible)


class EliminationEngine:
    """Decides, for every cell of a complete grid, whether it stays visible."""

    def __init__(
        self,
        grid: Grid,
        rng: Optional[np.random.RandomState] = None,
        max_rounds: Optional[int] = None,
    ):
        self.grid = grid
        self.rng = rng if rng is not None else np.random.RandomState()
        self.max_rounds = max_rounds if max_rounds is not None else grid.side * grid.side + 1
        self._values = {c: int(grid.cells[i]) for i, c in enumerate(grid.coords())}

    # ------------------------------------------------------------------
    # Propagation rules
    # ------------------------------------------------------------------

    def candidates(self, committed: Set[Coord], coord: Coord) -> Set[int]:
        """Values left at coord once committed peers are removed."""
        values = set(range(self.grid.side))
        for peer in self.grid.peers(coord):
            if peer in committed:
                values.discard(self._values[peer])
        return values

    def _lone_rangers(
        self, unit: List[Coord], working: Set[Coord], candidates: CandidateMap
    ) -> bool:
        rangers: Dict[int, List[Coord]] = defaultdict(list)
        for coord in unit:
            if coord in working:
                continue
            for value in candidates[coord]:
                rangers[value].append(coord)

        found = False
        for value in sorted(rangers):
            cells = rangers[value]
            if len(cells) == 1:
                candidates[cells[0]] = {value}
                working.add(cells[0])
                found = True
        return found

    def propagate(self, committed: Iterable[Coord]) -> Tuple[Set[Coord], CandidateMap]:
        """
        Apply both rules until a full pass commits nothing.

        Args:
            committed: Cells whose values are known (the clues).

        Returns:
            (working, candidates): every known cell after propagation, and
            the candidate set of every cell. Known cells carry the single
            FORCED marker.
        """
        working = set(committed)
        candidates: CandidateMap = {}
        coords = self.grid.coords()

        found = True
        while found:
            found = False

            for coord in coords:
                if coord in working:
                    continue
                values = self.candidates(working, coord)
                if len(values) == 1:
                    working.add(coord)
                    found = True
                candidates[coord] = values

            for unit in self.grid.units():
                if self._lone_rangers(unit, working, candidates):
                    found = True

        for coord in working:
            candidates[coord] = {FORCED}
        return working, candidates

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @staticmethod
    def select(pool: Set[Coord], candidates: CandidateMap) -> Tuple[Coord, bool]:
        """
        Pick the next pool cell to decide.

        Returns:
            (coord, reveal). The first cell (in Coord order) with a single
            candidate is returned with reveal=False; otherwise the cell with
            the most candidates is returned with reveal=True.
        """
        chosen = None
        most = 0
        for coord in sorted(pool):
            count = len(candidates[coord])
            if count == 1:
                return coord, False
            if count > most:
                chosen, most = coord, count
        return chosen, True

    def _sample_fresh(self, visible: Set[Coord], pool: Set[Coord]) -> List[Coord]:
        fresh = [c for c in self.grid.coords() if c not in visible and c not in pool]
        order = self.rng.permutation(len(fresh))
        return [fresh[k] for k in order[: self.grid.side]]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def eliminate(self, s11: Iterable[Coord], s12: Iterable[Coord]) -> EliminationResult:
        """
        Extend the seed partition to a full visible/hidden split.

        Writes the grid's filled mask (True exactly on the clues).

        Args:
            s11: Cells committed as clues from the start.
            s12: Cells that start in the undecided pool.

        Raises:
            EliminationError: if the round limit is exceeded.
        """
        total = self.grid.side * self.grid.side
        visible = set(s11)
        pool = set(s12) - visible
        rounds = 0

        while True:
            rounds += 1
            if rounds > self.max_rounds:
                raise EliminationError(
                    f"Elimination still running after {self.max_rounds} rounds",
                    limit=self.max_rounds,
                    observed=len(visible) + len(pool),
                )

            pool.update(self._sample_fresh(visible, pool))
            hidden: Set[Coord] = set()

            while pool:
                _, candidates = self.propagate(visible)
                coord, reveal = self.select(pool, candidates)
                pool.discard(coord)
                if reveal:
                    visible.add(coord)
                else:
                    hidden.add(coord)

            pool = hidden
            logger.debug(
                "Round %d: %d clues, %d hidden", rounds, len(visible), len(pool)
            )
            if len(visible) + len(pool) == total:
                break

        self.grid.set_filled(visible)
        return EliminationResult(visible=visible, hidden=pool, rounds=rounds)
