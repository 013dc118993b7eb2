"""
Board model for the TicTacToe engine.
A board is an immutable tuple of 9 cells, row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum
from typing import Optional, List, Tuple

from .config import EngineConfig


class Symbol(Enum):
    """The two marks that can be placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Symbol":
        """Get the other symbol."""
        return Symbol.O if self == Symbol.X else Symbol.X


# None means the cell is empty
Cell = Optional[Symbol]
Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Create a board with all 9 cells empty."""
    return (None,) * EngineConfig.BOARD_SIZE


def available_moves(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to inspect.

    Returns:
        Indices of the empty cells, in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    """True if no cell is empty."""
    return all(cell is not None for cell in board)


def format_board(board: Board) -> str:
    """
    Render the board as a 3-line grid.

    Empty cells show their 1-based cell number so a console
    player can see which number to type.
    """
    width = EngineConfig.GRID_WIDTH
    rows = []
    for row in range(width):
        cells = []
        for col in range(width):
            index = row * width + col
            cell = board[index]
            cells.append(cell.value if cell is not None else str(index + 1))
        rows.append(" " + " | ".join(cells))

    separator = "\n" + "+".join(["---"] * width) + "\n"
    return separator.join(rows)
