from .config import BoardConfig, load_config, make_board_config, validate_dimensions
from .constants import (
    EMPTY, FORCED, SELECTION_SAME_LINE, SELECTION_SAME_VALUE,
    SELECTION_UNRELATED, format_grid,
)
from .errors import BoardError, ConfigurationError, EliminationError, GenerationError
from .grid import BoxBounds, Coord, Grid
from .generator import BoardGenerator
from .chains import ChainAnalyzer, ChainResult
from .elimination import EliminationEngine, EliminationResult
from .board import Board
from .verifier import BoardVerifier
from .analysis import (
    BoardSnapshot, generate_boards, snapshot_board,
    summarize_boards, plot_clue_distribution,
)
