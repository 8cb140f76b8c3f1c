import pytest

from tictactoe.board import Board, Mark, CELL_COUNT


def test_empty_board_has_nine_empty_cells():
    board = Board.empty()
    assert len(board) == CELL_COUNT == 9
    assert list(board) == [None] * 9


@pytest.mark.parametrize("size", [0, 8, 10])
def test_wrong_length_rejected(size):
    with pytest.raises(ValueError):
        Board((None,) * size)


def test_invalid_cell_value_rejected():
    with pytest.raises(ValueError):
        Board(("x",) + (None,) * 8)


@pytest.mark.parametrize("index", [-1, 9])
def test_out_of_range_index(index):
    with pytest.raises(IndexError):
        Board.empty()[index]


def test_with_mark_returns_copy():
    board = Board.empty()
    marked = board.with_mark(4, Mark.X)
    assert board[4] is None
    assert marked[4] is Mark.X
    assert marked.is_occupied(4)
    assert not board.is_occupied(4)


def test_position_maps_row_major():
    assert Board.position(0) == (0, 0)
    assert Board.position(5) == (1, 2)
    assert Board.position(7) == (2, 1)


def test_rows_and_ascii(make_board):
    board = make_board("x.o ... ..x")
    assert board.rows()[0] == (Mark.X, None, Mark.O)
    assert board.to_ascii() == "x . o\n. . .\n. . x"


def test_dict_round_trip(make_board):
    board = make_board("xo. .x. ..o")
    data = board.to_dict()
    assert data["squares"] == ["x", "o", None, None, "x", None, None, None, "o"]
    assert Board.from_dict(data) == board


def test_is_full(make_board):
    assert make_board("xox xoo oxx").is_full()
    assert not make_board("xox xoo ox.").is_full()
