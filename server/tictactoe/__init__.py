from .board import Board, Mark
from .rules import calculate_winner, winning_line, WINNING_LINES
from .history import Step, GameAction, ActionType
from .state import GameState, MoveEntry, reduce
from .components import Square, BoardView, GameView
from .config import AppConfig
from .orchestrator import GameController
