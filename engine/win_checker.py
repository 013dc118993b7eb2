"""
Win checker for the TicTacToe engine.
Checks if a symbol has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .board import Board, Symbol, is_full


# One winning line, as board indices
WinningCombination = Tuple[int, int, int]


@dataclass(frozen=True)
class Ongoing:
    """The game is still being played."""


@dataclass(frozen=True)
class Won:
    """A symbol filled a whole winning line."""
    winner: Symbol
    cells: WinningCombination


@dataclass(frozen=True)
class Draw:
    """The board is full and nobody won."""


Outcome = Union[Ongoing, Won, Draw]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same symbol in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines
    WINNING_LINES: Tuple[WinningCombination, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def has_won(self, board: Board, symbol: Symbol) -> bool:
        """True if at least one winning line is all `symbol`."""
        return self.get_winning_line(board, symbol) is not None

    def get_winning_line(
        self,
        board: Board,
        symbol: Symbol
    ) -> Optional[WinningCombination]:
        """
        Get the first winning line owned by a symbol.

        Args:
            board: The board to check.
            symbol: The symbol to look for.

        Returns:
            The winning line, or None if the symbol has not won.
        """
        for line in self.WINNING_LINES:
            if all(board[index] == symbol for index in line):
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND nobody has won.
        """
        if self.has_won(board, Symbol.X) or self.has_won(board, Symbol.O):
            return False
        return is_full(board)

    def evaluate_outcome(self, board: Board) -> Outcome:
        """
        Work out where the game stands.

        X is checked before O. On a board reached through legal
        play only one of them can have a line.

        Args:
            board: The board to evaluate.

        Returns:
            Won, Draw or Ongoing.
        """
        for symbol in (Symbol.X, Symbol.O):
            line = self.get_winning_line(board, symbol)
            if line is not None:
                return Won(winner=symbol, cells=line)

        if is_full(board):
            return Draw()

        return Ongoing()


# Stateless, so one shared checker is enough
_checker = WinChecker()


def has_won(board: Board, symbol: Symbol) -> bool:
    """Module-level shortcut for WinChecker.has_won."""
    return _checker.has_won(board, symbol)


def evaluate_outcome(board: Board) -> Outcome:
    """Module-level shortcut for WinChecker.evaluate_outcome."""
    return _checker.evaluate_outcome(board)
