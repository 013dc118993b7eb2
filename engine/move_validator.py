"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules and applies them.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board, Symbol
from .config import EngineConfig


class EngineError(Exception):
    """Base class for errors raised by the engine."""


class InvalidMove(EngineError):
    """
    A move was rejected.

    Raised for an out-of-range index, an occupied cell, a move made
    out of turn, or a move while the game is not being played.
    Nothing was changed when this is raised.
    """


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be a cell on the board (0-8)
    2. Can only place on empty cells
    3. Only X or O can be placed
    """

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the symbol on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass, but True is not a cell
        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be an integer."
            )

        if not 0 <= index < EngineConfig.BOARD_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid position {index}. "
                    f"Must be 0-{EngineConfig.BOARD_SIZE - 1}."
                )
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def validate_symbol(self, symbol: Symbol) -> ValidationResult:
        """Check that `symbol` is X or O."""
        if not isinstance(symbol, Symbol):
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown symbol {symbol!r}. Must be X or O."
            )
        return ValidationResult(is_valid=True)

    def apply_move(self, board: Board, index: int, symbol: Symbol) -> Board:
        """
        Place a symbol and return the resulting board.

        The input board is never modified, so earlier positions stay
        usable (the AI search relies on this).

        Raises:
            InvalidMove: if the move is not legal on this board.
        """
        for result in (self.validate_symbol(symbol), self.validate_move(board, index)):
            if not result.is_valid:
                raise InvalidMove(result.error_message)

        return board[:index] + (symbol,) + board[index + 1:]


_validator = MoveValidator()


def apply_move(board: Board, index: int, symbol: Symbol) -> Board:
    """Module-level shortcut for MoveValidator.apply_move."""
    return _validator.apply_move(board, index, symbol)
