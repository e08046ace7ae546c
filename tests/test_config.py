# tests/test_config.py
import numpy as np
import pytest

from sudoku_board import BoardConfig, ConfigurationError, load_config, make_board_config
from sudoku_board.config import validate_dimensions


def test_defaults_are_classic_board():
    cfg = BoardConfig()
    assert (cfg.side, cfg.box_width, cfg.box_height) == (9, 3, 3)
    assert cfg.box_rows == 3 and cfg.box_columns == 3
    assert cfg.seed is None
    assert cfg.elimination_round_limit() == 82


def test_seed_read_from_environment(monkeypatch):
    monkeypatch.setenv("SUDOKU_BOARD_SEED", "99")
    assert BoardConfig().seed == 99
    assert BoardConfig(seed=5).seed == 5


def test_make_rng_is_reproducible():
    a = BoardConfig(seed=3).make_rng()
    b = BoardConfig(seed=3).make_rng()
    assert a.permutation(20).tolist() == b.permutation(20).tolist()
    assert isinstance(a, np.random.RandomState)


@pytest.mark.parametrize("side,bw,bh", [(9, 3, 3), (4, 2, 2), (6, 3, 2), (6, 2, 3), (8, 4, 2), (1, 1, 1)])
def test_valid_dimensions(side, bw, bh):
    validate_dimensions(side, bw, bh)


@pytest.mark.parametrize(
    "side,bw,bh",
    [(6, 2, 4), (9, 2, 3), (4, 4, 4), (8, 2, 2), (0, 1, 1), (4, -2, -2), (4.0, 2, 2), (True, 1, 1)],
)
def test_invalid_dimensions(side, bw, bh):
    with pytest.raises(ConfigurationError) as err:
        validate_dimensions(side, bw, bh)
    assert err.value.side == side
    assert isinstance(err.value, ValueError)


def test_make_board_config_ignores_unknown_keys():
    cfg = make_board_config(side=4, box_width=2, box_height=2, seed=11, box_rows=7, colour="red")
    assert (cfg.side, cfg.box_rows, cfg.seed) == (4, 2, 11)


def test_make_board_config_validates():
    with pytest.raises(ConfigurationError):
        make_board_config(side=6, box_width=2, box_height=4)


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "board.yaml"
    path.write_text("side: 6\nbox_width: 3\nbox_height: 2\nseed: 42\nmax_elimination_rounds: 10\n")
    cfg = load_config(str(path))
    assert (cfg.side, cfg.box_width, cfg.box_height, cfg.seed) == (6, 3, 2, 42)
    assert cfg.elimination_round_limit() == 10


def test_load_config_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)).side == 9
