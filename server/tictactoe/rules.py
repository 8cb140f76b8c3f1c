from __future__ import annotations

from .board import Board, Mark


# Rows, columns, diagonals. Order matters: the first matching line wins.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def winning_line(board: Board) -> tuple[int, int, int] | None:
    """First line whose three cells hold the same mark, or None."""
    for line in WINNING_LINES:
        a, b, c = line
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return line
    return None


def calculate_winner(board: Board) -> Mark | None:
    """Return the winning mark, or None if no line is complete.

    A full board with no complete line is not reported as a draw; callers
    see None and keep showing the next player.
    """
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_playable(board: Board, index: int) -> bool:
    """True if a mark may be placed at index on this board."""
    return calculate_winner(board) is None and not board.is_occupied(index)
