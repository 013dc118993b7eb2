"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm with alpha-beta pruning to choose a move.
"""

import logging
import random
from typing import Optional

from .board import Board, Symbol, available_moves, is_full
from .config import EngineConfig
from .difficulty import Difficulty, policy_for
from .move_validator import EngineError
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class NoMovesAvailable(EngineError):
    """The AI was asked to move on a board with no empty cell."""


class AIPlayer:
    """
    An AI that plays TicTacToe.

    EASY picks a random empty cell. MEDIUM and HARD run minimax with
    alpha-beta pruning; MEDIUM stops after a few plies and scores the
    unfinished branches as neutral, so it misses longer forced lines.
    """

    def __init__(self, symbol: Symbol = Symbol.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            symbol: Which symbol the AI plays (default: O)
            rng: Random source for EASY moves. Pass a seeded
                random.Random to make EASY games repeatable.
        """
        self.symbol = symbol
        self.opponent = symbol.opposite()
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.nodes_evaluated = 0

    def choose_move(self, board: Board, difficulty: Difficulty) -> int:
        """
        Get the move for the current position.

        Args:
            board: Current board. Must not be full.
            difficulty: How strong the move should be.

        Returns:
            Index of the chosen empty cell.

        Raises:
            NoMovesAvailable: if the board is full.
        """
        self.nodes_evaluated = 0

        valid_moves = available_moves(board)
        if not valid_moves:
            raise NoMovesAvailable("AI asked to move on a full board")

        policy = policy_for(difficulty)

        if not policy.use_search:
            move = self.rng.choice(valid_moves)
            logger.debug("AI (%s, %s) picked random move %d",
                         self.symbol.value, difficulty.name, move)
            return move

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            new_board = self._place(board, index, self.symbol)

            score = self._minimax(
                new_board,
                depth=0,
                is_maximizing=False,
                alpha=float('-inf'),
                beta=float('inf'),
                max_depth=policy.max_depth
            )

            # Strictly greater: ties keep the lowest index
            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "AI (%s, %s) evaluated %d positions. Best move: %d (score: %s)",
            self.symbol.value, difficulty.name, self.nodes_evaluated,
            best_move, best_score
        )

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float,
        max_depth: Optional[int]
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        The AI maximizes, its opponent minimizes. A finished game scores
        +WIN_SCORE, -WIN_SCORE or 0, minus `depth` in every case. Note that
        this also makes a deeper loss score lower than a quick one.

        Args:
            board: Position to evaluate.
            depth: Plies played since the move being scored at the root.
            is_maximizing: True if it's the AI's turn.
            alpha: Best score the maximizer is already assured of.
            beta: Best score the minimizer is already assured of.
            max_depth: Stop searching at this depth, or None for no limit.

        Returns:
            The score of the position.
        """
        self.nodes_evaluated += 1

        score = self._evaluate(board)
        if score is not None:
            return score - depth

        if max_depth is not None and depth >= max_depth:
            return 0  # No more depth, evaluate as neutral

        if is_maximizing:
            max_score = float('-inf')
            for index in available_moves(board):
                new_board = self._place(board, index, self.symbol)
                score = self._minimax(new_board, depth + 1, False, alpha, beta, max_depth)
                max_score = max(max_score, score)
                alpha = max(alpha, max_score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for index in available_moves(board):
                new_board = self._place(board, index, self.opponent)
                score = self._minimax(new_board, depth + 1, True, alpha, beta, max_depth)
                min_score = min(min_score, score)
                beta = min(beta, min_score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def _evaluate(self, board: Board) -> Optional[int]:
        """Score a finished game from the AI's side, or None if it isn't finished."""
        if self.win_checker.has_won(board, self.symbol):
            return EngineConfig.WIN_SCORE
        if self.win_checker.has_won(board, self.opponent):
            return -EngineConfig.WIN_SCORE
        if is_full(board):
            return 0
        return None

    @staticmethod
    def _place(board: Board, index: int, symbol: Symbol) -> Board:
        # Search only visits empty cells, so the full validation is skipped
        return board[:index] + (symbol,) + board[index + 1:]


def choose_move(
    board: Board,
    difficulty: Difficulty,
    ai_symbol: Symbol,
    rng: Optional[random.Random] = None
) -> int:
    """
    Pick a move for `ai_symbol` without keeping an AIPlayer around.

    Raises:
        NoMovesAvailable: if the board is full.
    """
    return AIPlayer(ai_symbol, rng=rng).choose_move(board, difficulty)
