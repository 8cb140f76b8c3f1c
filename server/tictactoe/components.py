"""Presentational components rendering the game as HTML.

Components hold no game state. Each one is rebuilt from the current
GameState on every render and reports clicks through the callbacks it was
given; the controller decides what a click means.
"""
from __future__ import annotations
from dataclasses import dataclass
from html import escape
from typing import Callable

from .board import Board, Mark, BOARD_SIZE, CELL_COUNT
from .state import GameState


@dataclass
class Square:
    """One board cell."""
    value: Mark | None
    on_click: Callable[[], None]
    action: str = ""
    highlight: bool = False

    def activate(self):
        self.on_click()

    def render(self) -> str:
        css = "square winning" if self.highlight else "square"
        label = self.value.value if self.value else ""
        return (
            f'<button class="{css}" type="submit" formaction="{escape(self.action)}">'
            f"{escape(label)}</button>"
        )


@dataclass
class BoardView:
    """Nine squares in row-major order, forwarding clicks with the cell index."""
    squares: Board
    on_click: Callable[[int], None]
    highlight: tuple[int, ...] = ()
    action_prefix: str = "/cell/"

    def __post_init__(self):
        self._squares = [self._make_square(i) for i in range(CELL_COUNT)]

    def _make_square(self, i: int) -> Square:
        return Square(
            value=self.squares[i],
            on_click=lambda: self.on_click(i),
            action=f"{self.action_prefix}{i}",
            highlight=i in self.highlight,
        )

    def click(self, index: int):
        self._squares[index].activate()

    def render(self) -> str:
        rows = []
        for r in range(BOARD_SIZE):
            cells = "".join(
                sq.render() for sq in self._squares[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
            )
            rows.append(f'<div class="board-row">{cells}</div>')
        return "<div>" + "".join(rows) + "</div>"


@dataclass
class MoveButton:
    """Entry of the history navigator."""
    label: str
    on_click: Callable[[], None]
    action: str = ""
    current: bool = False

    def activate(self):
        self.on_click()

    def render(self) -> str:
        css = ' class="current"' if self.current else ""
        return (
            f"<li{css}><button type=\"submit\" formaction=\"{escape(self.action)}\">"
            f"{escape(self.label)}</button></li>"
        )


@dataclass
class GameView:
    """Whole game: board on the left, status and move list on the right."""
    state: GameState
    on_click: Callable[[int], None]
    on_jump: Callable[[int], None]
    new_game_action: str = "/new-game"

    def __post_init__(self):
        line = self.state.winning_line
        self.board = BoardView(
            squares=self.state.current.squares,
            on_click=self.on_click,
            highlight=line or (),
        )
        self.move_buttons = [
            MoveButton(
                label=entry.label,
                on_click=self._jump_callback(entry.move),
                action=f"/jump/{entry.move}",
                current=entry.move == self.state.step_number,
            )
            for entry in self.state.moves
        ]

    def _jump_callback(self, move: int) -> Callable[[], None]:
        return lambda: self.on_jump(move)

    def click(self, index: int):
        self.board.click(index)

    def jump(self, move: int):
        self.move_buttons[move].activate()

    def render(self) -> str:
        moves = "".join(button.render() for button in self.move_buttons)
        return (
            '<div class="game">'
            '<div class="game-board">'
            f'<form method="post">{self.board.render()}</form>'
            "</div>"
            '<div class="game-info">'
            f'<div class="status">{escape(self.state.status)}</div>'
            f'<form method="post"><ol>{moves}</ol></form>'
            f'<form method="post" action="{escape(self.new_game_action)}">'
            '<button type="submit" class="new-game">New game</button>'
            "</form>"
            "</div>"
            "</div>"
        )
