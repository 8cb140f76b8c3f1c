from __future__ import annotations
from dataclasses import dataclass, field, replace
import json

from .board import Mark
from .history import ActionType, GameAction, Step
from .rules import calculate_winner, is_playable, winning_line


@dataclass(frozen=True)
class MoveEntry:
    """One item of the history navigator."""
    move: int
    label: str

    def to_dict(self) -> dict:
        return {"move": self.move, "label": self.label}


def _initial_history() -> tuple[Step, ...]:
    return (Step(),)


@dataclass(frozen=True)
class GameState:
    """Move history plus the pointer to the step on display.

    Every operation returns a new GameState; an ignored interaction returns
    the same instance.
    """
    history: tuple[Step, ...] = field(default_factory=_initial_history)
    step_number: int = 0

    def __post_init__(self):
        history = tuple(self.history)
        if not history:
            raise ValueError("History needs at least the initial step")
        object.__setattr__(self, "history", history)

    @classmethod
    def new_game(cls) -> GameState:
        return cls()

    @property
    def current(self) -> Step:
        return self.history[self.step_number]

    @property
    def winner(self) -> Mark | None:
        return calculate_winner(self.current.squares)

    @property
    def winning_line(self) -> tuple[int, int, int] | None:
        return winning_line(self.current.squares)

    @property
    def status(self) -> str:
        winner = self.winner
        if winner:
            return f"Winner: {winner.value}"
        return f"Next player: {self.current.next_mark.value}"

    @property
    def moves(self) -> list[MoveEntry]:
        return [
            MoveEntry(move, f"Go to move #{move}" if move > 0 else "Go to game start")
            for move in range(len(self.history))
        ]

    def handle_click(self, index: int) -> GameState:
        """Place the next mark at index, discarding any rewound future.

        No-op once the current board has a winner or the cell is taken.
        """
        current = self.current
        if not is_playable(current.squares, index):
            return self

        history = self.history[:self.step_number + 1] + (current.play(index),)
        return GameState(history=history, step_number=len(history) - 1)

    def jump_to(self, move: int) -> GameState:
        """Point at an earlier (or later) step. History is left intact."""
        return replace(self, step_number=move)

    def apply(self, action: GameAction) -> GameState:
        return reduce(self, action)

    def to_dict(self) -> dict:
        """Serialize game state to JSON-compatible dict."""
        winner = self.winner
        line = self.winning_line
        return {
            "history": [step.to_dict() for step in self.history],
            "step_number": self.step_number,
            "current": self.current.to_dict(),
            "winner": winner.value if winner else None,
            "winning_line": list(line) if line else None,
            "status": self.status,
            "moves": [entry.to_dict() for entry in self.moves],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict) -> GameState:
        return cls(
            history=tuple(Step.from_dict(s) for s in data["history"]),
            step_number=data["step_number"],
        )


def reduce(state: GameState, action: GameAction) -> GameState:
    """Return the state that follows from applying action to state."""
    if action.action_type == ActionType.CLICK_CELL:
        return state.handle_click(action.params["index"])
    if action.action_type == ActionType.JUMP_TO:
        return state.jump_to(action.params["move"])
    if action.action_type == ActionType.NEW_GAME:
        return GameState.new_game()
    raise ValueError(f"Unknown action: {action.action_type}")
