"""
Batch generation and clue statistics.

Generates many boards with consecutive seeds, collects per-board metrics
into a DataFrame and plots the clue-count distribution.
"""

import time
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from tqdm.auto import tqdm

from .board import Board
from .config import BoardConfig


# ============================================================================
# Data classes
# ============================================================================

@dataclass
class BoardSnapshot:
    board_id: int
    side: int
    box_width: int
    box_height: int
    values: List[List[int]] = field(default_factory=list)
    filled: List[List[bool]] = field(default_factory=list)
    pair: Optional[Tuple[int, int]] = None
    chain_length: int = 0
    clue_count: int = 0
    rounds: int = 0
    seed: Optional[int] = None
    generation_time_seconds: float = 0.0

    @property
    def hidden_count(self) -> int:
        return self.side * self.side - self.clue_count

    def to_dict(self) -> Dict:
        return {
            "board_id": self.board_id,
            "side": self.side,
            "box_width": self.box_width,
            "box_height": self.box_height,
            "seed": self.seed,
            "pair": self.pair,
            "chain_length": self.chain_length,
            "clue_count": self.clue_count,
            "hidden_count": self.hidden_count,
            "rounds": self.rounds,
            "generation_time_seconds": self.generation_time_seconds,
        }


# ============================================================================
# Generation
# ============================================================================

def snapshot_board(board: Board, board_id: int = 0, seconds: float = 0.0) -> BoardSnapshot:
    """Capture a generated board's values, mask and metrics."""
    grid = board.grid
    return BoardSnapshot(
        board_id=board_id,
        side=grid.side,
        box_width=grid.box_width,
        box_height=grid.box_height,
        values=grid.to_rows(),
        filled=grid.filled.reshape(grid.side, grid.side).tolist(),
        pair=board.chain.pair if board.chain else None,
        chain_length=board.chain.length if board.chain else 0,
        clue_count=board.elimination.clue_count if board.elimination else 0,
        rounds=board.elimination.rounds if board.elimination else 0,
        seed=board.config.seed,
        generation_time_seconds=seconds,
    )


def generate_boards(
    config: BoardConfig,
    num_boards: int,
    seed: Optional[int] = None,
    show_progress: bool = True,
) -> List[BoardSnapshot]:
    """
    Generate num_boards boards.

    Args:
        config: Dimensions and round limit shared by every board.
        num_boards: How many boards to generate.
        seed: Board k uses seed + k; None falls back to config.seed, and
            fresh entropy when that is None too.
        show_progress: Show a tqdm progress bar.

    Returns:
        List of BoardSnapshot, in generation order.
    """
    config.validate()
    base = seed if seed is not None else config.seed

    snapshots = []
    for k in tqdm(range(num_boards), desc="Boards", disable=not show_progress):
        board_seed = None if base is None else base + k
        board = Board(replace(config, seed=board_seed))
        start = time.time()
        board.generate_board()
        snapshots.append(snapshot_board(board, board_id=k, seconds=time.time() - start))
    return snapshots


# ============================================================================
# Analysis
# ============================================================================

def summarize_boards(snapshots: List[BoardSnapshot]) -> pd.DataFrame:
    """Print summary statistics and return one row per board."""
    df = pd.DataFrame([s.to_dict() for s in snapshots])

    print(f"\n{'=' * 70}")
    print("BOARD SUMMARY")
    print(f"{'=' * 70}")
    print(f"Boards: {len(df)}")
    if df.empty:
        return df

    print(
        f"Clues: mean={df['clue_count'].mean():.1f}, "
        f"min={df['clue_count'].min()}, max={df['clue_count'].max()}"
    )
    print(f"Rounds: mean={df['rounds'].mean():.1f}")
    print(f"Time: mean={df['generation_time_seconds'].mean():.3f}s")
    print("\nBy Size:")
    for (side, bw, bh), sub in df.groupby(["side", "box_width", "box_height"]):
        print(
            f"  {side}x{side} ({bw}x{bh} boxes): {len(sub)} boards, "
            f"clue ratio={(sub['clue_count'] / (side * side)).mean():.2%}"
        )
    return df


def plot_clue_distribution(
    df: pd.DataFrame, save_path: Optional[str] = None, show: bool = False
) -> plt.Figure:
    """Histogram of clue counts, one bar per count."""
    fig, ax = plt.subplots(figsize=(8, 5))

    counts = df["clue_count"].to_numpy() if not df.empty else np.array([], dtype=int)
    if counts.size:
        bins = np.arange(counts.min(), counts.max() + 2) - 0.5
        ax.hist(counts, bins=bins, color="steelblue", edgecolor="black", alpha=0.8)
        ax.axvline(counts.mean(), color="red", linestyle="--", label=f"mean={counts.mean():.1f}")
        ax.legend()

    ax.set_xlabel("Clues")
    ax.set_ylabel("Boards")
    ax.set_title("Clue count distribution")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
        print(f"✓ Saved plot to {save_path}")
    if show:
        plt.show()
    return fig
