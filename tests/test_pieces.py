import pytest

from engine.errors import InvalidBoardError
from engine.pieces import Outcome, Side, cell_symbol, parse_symbol
from engine.rules import in_bounds, index_to_pos, pos_to_index, winning_lines


def test_opponent_swaps_sides():
    assert Side.X.opponent() is Side.O
    assert Side.O.opponent() is Side.X


def test_parse_symbol_accepts_pieces_and_both_empty_markers():
    assert parse_symbol("X") is Side.X
    assert parse_symbol("O") is Side.O
    assert parse_symbol("_") is None
    assert parse_symbol(" ") is None


@pytest.mark.parametrize("symbol", ["x", "o", "0", "-", "A"])
def test_parse_symbol_rejects_unknown(symbol):
    with pytest.raises(InvalidBoardError):
        parse_symbol(symbol)


def test_cell_symbol():
    assert cell_symbol(Side.X) == "X"
    assert cell_symbol(None) == " "
    assert cell_symbol(None, "_") == "_"


def test_outcome_helpers():
    assert Outcome.wins(Side.X) is Outcome.X_WINS
    assert Outcome.wins(Side.O) is Outcome.O_WINS
    assert Outcome.X_WINS.winner is Side.X
    assert Outcome.DRAW.winner is None
    assert not Outcome.UNFINISHED.is_finished
    assert Outcome.DRAW.is_finished
    assert Outcome.UNFINISHED.message == "Game not finished"
    assert Outcome.O_WINS.message == "O wins"


def test_winning_lines_cover_rows_columns_and_diagonals():
    lines = winning_lines(3)
    assert len(lines) == 8
    assert ((0, 0), (0, 1), (0, 2)) in lines
    assert ((0, 2), (1, 2), (2, 2)) in lines
    assert ((0, 0), (1, 1), (2, 2)) in lines
    assert ((2, 0), (1, 1), (0, 2)) in lines
    assert len(winning_lines(4)) == 10


def test_position_helpers():
    assert in_bounds((2, 2))
    assert not in_bounds((3, 0))
    assert not in_bounds((0, -1))
    assert pos_to_index((1, 2)) == 5
    assert index_to_pos(7) == (2, 1)
