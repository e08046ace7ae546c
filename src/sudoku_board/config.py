"""
Board configuration.

Dimensions, random seed and the elimination round limit. The seed is read
from the SUDOKU_BOARD_SEED environment variable when not given directly.
"""

from dataclasses import dataclass, fields
import os
from typing import Optional

import numpy as np
import yaml

from .constants import DEFAULT_BOX_HEIGHT, DEFAULT_BOX_WIDTH, DEFAULT_SIDE
from .errors import ConfigurationError


@dataclass
class BoardConfig:
    """Configuration for board generation."""

    # Dimensions
    side: int = DEFAULT_SIDE
    box_width: int = DEFAULT_BOX_WIDTH
    box_height: int = DEFAULT_BOX_HEIGHT

    # Randomness (None = fresh entropy)
    seed: Optional[int] = None

    # Elimination guard (None = side * side + 1)
    max_elimination_rounds: Optional[int] = None

    def __post_init__(self):
        if self.seed is None:
            raw = os.getenv("SUDOKU_BOARD_SEED", "")
            if raw:
                self.seed = int(raw)

    @property
    def box_rows(self) -> int:
        return self.side // self.box_height

    @property
    def box_columns(self) -> int:
        return self.side // self.box_width

    def validate(self) -> None:
        """Raise ConfigurationError if the dimensions cannot form a board."""
        validate_dimensions(self.side, self.box_width, self.box_height)

    def make_rng(self) -> np.random.RandomState:
        """Build the random source for one board."""
        return np.random.RandomState(self.seed)

    def elimination_round_limit(self) -> int:
        if self.max_elimination_rounds is not None:
            return self.max_elimination_rounds
        return self.side * self.side + 1


def validate_dimensions(side: int, box_width: int, box_height: int) -> None:
    """
    Check a side / box combination.

    Raises:
        ConfigurationError: if any value is not a positive integer, if side
            is not divisible by both box sides, or if a box does not hold
            exactly `side` cells.
    """
    for name, value in (("side", side), ("box_width", box_width), ("box_height", box_height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise ConfigurationError(
                f"{name} must be a positive integer, got {value!r}",
                side=side, box_width=box_width, box_height=box_height,
            )
    if side % box_width or side % box_height:
        raise ConfigurationError(
            f"side {side} is not divisible by box {box_width}x{box_height}",
            side=side, box_width=box_width, box_height=box_height,
        )
    if box_width * box_height != side:
        raise ConfigurationError(
            f"box {box_width}x{box_height} holds {box_width * box_height} "
            f"cells, expected {side}",
            side=side, box_width=box_width, box_height=box_height,
        )


def load_config(yaml_path: str) -> BoardConfig:
    """Load a board config from a YAML file."""
    with open(yaml_path, "r") as f:
        data = yaml.safe_load(f) or {}
    return make_board_config(**data)


def make_board_config(**overrides) -> BoardConfig:
    """Create BoardConfig, applying only known keys from overrides."""
    cfg = BoardConfig()
    known = {f.name for f in fields(cfg)}
    for k, v in overrides.items():
        if k in known:
            setattr(cfg, k, v)
    cfg.validate()
    return cfg
