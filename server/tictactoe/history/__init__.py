"""Game history tracking."""
from .action import GameAction, ActionType
from .step import Step

__all__ = [
    "GameAction",
    "ActionType",
    "Step",
]
