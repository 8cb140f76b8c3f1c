"""Game controller that owns the state and routes user interaction."""
from __future__ import annotations
import logging

from .components import GameView
from .history import GameAction
from .state import GameState, reduce

logger = logging.getLogger(__name__)


class GameController:
    """Holds the single GameState and swaps it for the reducer's result."""

    def __init__(self, state: GameState | None = None):
        self.state = state or GameState.new_game()

    def dispatch(self, action: GameAction) -> bool:
        """Apply an action. Returns False if it was ignored."""
        previous = self.state
        self.state = reduce(previous, action)
        changed = self.state is not previous
        if changed:
            logger.info("Applied %s %s -> step %d/%d",
                        action.action_type.value, action.params,
                        self.state.step_number, len(self.state.history) - 1)
        else:
            logger.debug("Ignored %s %s (%s)",
                         action.action_type.value, action.params, previous.status)
        return changed

    def handle_click(self, index: int) -> bool:
        return self.dispatch(GameAction.click(index))

    def jump_to(self, move: int) -> bool:
        return self.dispatch(GameAction.jump(move))

    def reset(self) -> bool:
        return self.dispatch(GameAction.new_game())

    def can_jump_to(self, move: int) -> bool:
        return 0 <= move < len(self.state.history)

    @property
    def status(self) -> str:
        return self.state.status

    def view(self) -> GameView:
        """Component tree for the current state, wired back to this controller."""
        return GameView(
            state=self.state,
            on_click=self.handle_click,
            on_jump=self.jump_to,
        )

    def render(self) -> str:
        return self.view().render()

    def to_dict(self) -> dict:
        return self.state.to_dict()

    @classmethod
    def from_dict(cls, data: dict) -> GameController:
        return cls(GameState.from_dict(data))
