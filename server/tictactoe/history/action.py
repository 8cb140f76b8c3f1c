"""Game action records dispatched to the reducer."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class ActionType(Enum):
    CLICK_CELL = "click_cell"
    JUMP_TO = "jump_to"
    NEW_GAME = "new_game"


@dataclass(frozen=True)
class GameAction:
    """Immutable record of a user interaction."""
    action_type: ActionType
    params: dict = field(default_factory=dict)

    @classmethod
    def click(cls, index: int) -> GameAction:
        return cls(ActionType.CLICK_CELL, {"index": index})

    @classmethod
    def jump(cls, move: int) -> GameAction:
        return cls(ActionType.JUMP_TO, {"move": move})

    @classmethod
    def new_game(cls) -> GameAction:
        return cls(ActionType.NEW_GAME)

    def to_dict(self) -> dict:
        return {
            "type": self.action_type.value,
            "params": self.params,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GameAction:
        return cls(
            action_type=ActionType(data["type"]),
            params=data.get("params", {}),
        )
