# tests/test_generator.py
import numpy as np
import pytest

from sudoku_board import EMPTY, BoardGenerator, BoardVerifier, Grid


@pytest.mark.parametrize("side,bw,bh", [(4, 2, 2), (6, 3, 2), (6, 2, 3), (8, 4, 2), (9, 3, 3)])
def test_generated_grid_is_valid(side, bw, bh, rng):
    grid = Grid(side, bw, bh)
    assert BoardGenerator(rng).generate(grid)
    ok, msg = BoardVerifier.verify_complete_solution(grid)
    assert ok, msg
    assert grid.is_complete()
    assert not grid.filled.any()


def test_same_seed_same_grid():
    a, b = Grid(9, 3, 3), Grid(9, 3, 3)
    BoardGenerator(np.random.RandomState(5)).generate(a)
    BoardGenerator(np.random.RandomState(5)).generate(b)
    assert a.cells.tolist() == b.cells.tolist()


def test_different_seeds_differ():
    a, b = Grid(9, 3, 3), Grid(9, 3, 3)
    BoardGenerator(np.random.RandomState(1)).generate(a)
    BoardGenerator(np.random.RandomState(2)).generate(b)
    assert a.cells.tolist() != b.cells.tolist()


def test_generate_overwrites_previous_contents(rng):
    grid = Grid(4, 2, 2)
    grid.cells[:] = 0
    grid.filled[:] = True
    assert BoardGenerator(rng).generate(grid)
    assert BoardVerifier.verify_complete_solution(grid)[0]
    assert not grid.filled.any()


def test_candidates_exclude_placed_values(sample_grid, rng):
    grid = sample_grid.copy()
    grid.cells[grid.index(3, 1):] = EMPTY
    options = BoardGenerator(rng).candidates(grid, grid.index(3, 1))
    assert sorted(options) == [1]


def test_unsatisfiable_box_reports_failure(rng):
    # A single 4x4 box cannot hold 16 cells with only 4 symbols
    grid = Grid(4, 4, 4)
    gen = BoardGenerator(rng)
    assert gen.generate(grid) is False
    assert (grid.cells == EMPTY).all()
    assert gen.backtracks > 0


def test_single_cell_board(rng):
    grid = Grid(1, 1, 1)
    assert BoardGenerator(rng).generate(grid)
    assert grid.cells.tolist() == [0]
