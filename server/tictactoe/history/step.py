"""Turn steps recorded in the game history."""
from __future__ import annotations
from dataclasses import dataclass, field

from ..board import Board, Mark


@dataclass(frozen=True)
class Step:
    """Board snapshot plus whose turn is next. Never mutated after creation."""
    squares: Board = field(default_factory=Board.empty)
    x_is_next: bool = True

    @property
    def next_mark(self) -> Mark:
        return Mark.X if self.x_is_next else Mark.O

    def play(self, index: int) -> Step:
        """Next step with the current player's mark placed at index."""
        return Step(
            squares=self.squares.with_mark(index, self.next_mark),
            x_is_next=not self.x_is_next,
        )

    def to_dict(self) -> dict:
        return {
            "squares": self.squares.to_dict()["squares"],
            "x_is_next": self.x_is_next,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Step:
        return cls(
            squares=Board.from_dict(data),
            x_is_next=data["x_is_next"],
        )
