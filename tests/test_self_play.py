import logging

from ai.minimax_ai import MinimaxAI
from ai.self_play import GameRecord, SelfPlayConfig, SelfPlayRunner
from engine.board import Board
from engine.pieces import Outcome, Side


def test_minimax_self_play_is_always_a_draw():
    ai = MinimaxAI()
    runner = SelfPlayRunner(SelfPlayConfig(log_every=1))
    records = runner.run_games(ai, ai, n_games=2)
    assert runner.summarize(records) == {"x_wins": 0, "o_wins": 0, "draws": 2}


def test_game_record_tracks_moves_and_positions():
    ai = MinimaxAI()
    record = SelfPlayRunner().play_game(ai, ai)
    assert isinstance(record, GameRecord)
    assert record.outcome is Outcome.DRAW
    assert record.plies == 9
    assert len(record.moves) == len(record.positions) == 9
    assert record.moves[0].side is Side.X
    assert record.moves[0].pos == (0, 0)
    assert record.moves[1].side is Side.O
    assert record.positions[0].shape == (3, 3, 3)
    assert record.positions[0][1:].sum() == 0.0


def test_start_symbols_and_move_callback():
    seen = []
    runner = SelfPlayRunner(SelfPlayConfig(start_symbols="XX_OO____"))
    ai = MinimaxAI()
    record = runner.play_game(ai, ai, on_move=lambda board, move: seen.append((board.to_symbols("_"), move.pos)))
    assert record.outcome is Outcome.X_WINS
    assert record.plies == 1
    assert seen == [("XXXOO____", (0, 2))]


def test_explicit_board_overrides_config():
    runner = SelfPlayRunner(SelfPlayConfig(start_symbols="XX_OO____"))
    ai = MinimaxAI()
    record = runner.play_game(ai, ai, board=Board.from_symbols("XX__O____"))
    assert record.moves[0].side is Side.O
    assert record.moves[0].pos == (0, 2)


def test_finished_start_board_plays_nothing():
    runner = SelfPlayRunner(SelfPlayConfig(start_symbols="XXXOO____"))
    ai = MinimaxAI()
    record = runner.play_game(ai, ai)
    assert record.plies == 0
    assert record.outcome is Outcome.X_WINS


def test_summarize_counts_each_outcome():
    records = [
        GameRecord(outcome=Outcome.X_WINS),
        GameRecord(outcome=Outcome.O_WINS),
        GameRecord(outcome=Outcome.O_WINS),
        GameRecord(outcome=Outcome.DRAW),
    ]
    assert SelfPlayRunner.summarize(records) == {"x_wins": 1, "o_wins": 2, "draws": 1}


def test_run_games_logs_progress(caplog):
    ai = MinimaxAI()
    runner = SelfPlayRunner(SelfPlayConfig(log_every=1, start_symbols="XX_OO____"))
    with caplog.at_level(logging.INFO, logger="ai.self_play"):
        runner.run_games(ai, ai, n_games=1)
    assert "Self-play game 1/1 | outcome=X wins plies=1" in caplog.text


def test_game_record_keeps_legal_mask_per_position():
    ai = MinimaxAI()
    record = SelfPlayRunner().play_game(ai, ai)
    assert len(record.legal_masks) == record.plies
    assert record.legal_masks[0].all()
    for mask, move in zip(record.legal_masks, record.moves):
        row, col = move.pos
        assert mask[row * 3 + col]
    assert record.legal_masks[-1].sum() == 1
