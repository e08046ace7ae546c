# tests/conftest.py
import os
import sys
from pathlib import Path

import numpy as np
import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

# Add src/ to sys.path so "sudoku_board" imports without an install
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sudoku_board import Board, BoardConfig, Grid  # noqa: E402

# Valid 4x4 board with 2x2 boxes, rows top to bottom
SAMPLE_ROWS_4 = [
    [0, 1, 2, 3],
    [2, 3, 0, 1],
    [1, 0, 3, 2],
    [3, 2, 1, 0],
]


@pytest.fixture(autouse=True)
def _no_env_seed(monkeypatch):
    monkeypatch.delenv("SUDOKU_BOARD_SEED", raising=False)


@pytest.fixture
def rng():
    return np.random.RandomState(1234)


@pytest.fixture
def sample_grid():
    grid = Grid(4, 2, 2)
    grid.cells[:] = np.array(SAMPLE_ROWS_4).ravel()
    return grid


@pytest.fixture(scope="session")
def board_9():
    board = Board(BoardConfig(side=9, box_width=3, box_height=3, seed=2024))
    board.generate_board()
    return board


@pytest.fixture
def board_4():
    board = Board(BoardConfig(side=4, box_width=2, box_height=2, seed=7))
    board.generate_board()
    return board
