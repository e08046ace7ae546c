# tests/test_analysis.py
import matplotlib.pyplot as plt

from sudoku_board import BoardConfig, generate_boards, plot_clue_distribution, summarize_boards


def _config():
    return BoardConfig(side=4, box_width=2, box_height=2)


def test_generate_boards_uses_consecutive_seeds():
    snapshots = generate_boards(_config(), 3, seed=7, show_progress=False)
    assert [s.seed for s in snapshots] == [7, 8, 9]
    assert [s.board_id for s in snapshots] == [0, 1, 2]
    for s in snapshots:
        assert len(s.values) == 4 and len(s.filled) == 4
        assert s.clue_count == sum(map(sum, s.filled))
        assert s.clue_count + s.hidden_count == 16
        assert s.pair is not None and s.chain_length > 0


def test_generate_boards_is_reproducible():
    a = generate_boards(_config(), 2, seed=100, show_progress=False)
    b = generate_boards(_config(), 2, seed=100, show_progress=False)
    assert [s.values for s in a] == [s.values for s in b]
    assert [s.filled for s in a] == [s.filled for s in b]


def test_config_not_mutated():
    cfg = _config()
    generate_boards(cfg, 1, seed=1, show_progress=False)
    assert cfg.seed is None


def test_summary_and_plot(tmp_path, capsys):
    snapshots = generate_boards(_config(), 4, seed=0, show_progress=False)
    df = summarize_boards(snapshots)
    out = capsys.readouterr().out
    assert "BOARD SUMMARY" in out
    assert "4x4 (2x2 boxes)" in out
    assert len(df) == 4
    assert {"clue_count", "hidden_count", "rounds", "chain_length"} <= set(df.columns)

    path = tmp_path / "clues.png"
    fig = plot_clue_distribution(df, save_path=str(path))
    assert path.exists()
    plt.close(fig)


def test_empty_summary(capsys):
    df = summarize_boards([])
    assert df.empty
    fig = plot_clue_distribution(df)
    plt.close(fig)
