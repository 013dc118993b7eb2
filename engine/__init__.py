"""
TicTacToe Engine
================
Board, rules, turn sequencing and a minimax AI with three difficulty
levels. Hosts (console, GUI, network) call into this package and render
what it returns; the engine does no I/O of its own.
"""

from .config import EngineConfig
from .board import Board, Symbol, empty_board, available_moves, is_full, format_board
from .win_checker import WinChecker, Outcome, Ongoing, Won, Draw, has_won, evaluate_outcome
from .move_validator import MoveValidator, ValidationResult, EngineError, InvalidMove, apply_move
from .difficulty import Difficulty, SearchPolicy, policy_for
from .ai_player import AIPlayer, NoMovesAvailable, choose_move
from .game_state import (
    GameState, GameStatus, PlayerRole, RoleConfig, Move, SessionSnapshot
)

__version__ = "1.0.0"
