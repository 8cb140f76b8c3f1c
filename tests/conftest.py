import pytest

from tictactoe.board import Board, Mark


def board_from(text: str) -> Board:
    """Build a board from a 9-char string of 'x', 'o' and '.'."""
    text = text.replace(" ", "")
    return Board(tuple(Mark(c) if c != "." else None for c in text))


@pytest.fixture
def make_board():
    return board_from
