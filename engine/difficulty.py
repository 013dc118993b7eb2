"""
Difficulty levels for the TicTacToe AI.
Maps each level to how the AI picks its move.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import EngineConfig


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Shallow minimax
    HARD = "hard"        # Full minimax

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Look up a level by name, case-insensitive ("hard", "HARD")."""
        try:
            return cls[name.upper()]
        except KeyError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {name!r}. Choose from: {choices}")


@dataclass(frozen=True)
class SearchPolicy:
    """How the AI searches at a given difficulty."""
    use_search: bool                 # False means pick a random empty cell
    max_depth: Optional[int] = None  # None means search to the end of the game


_POLICIES = {
    Difficulty.EASY: SearchPolicy(use_search=False),
    Difficulty.MEDIUM: SearchPolicy(use_search=True, max_depth=EngineConfig.MEDIUM_SEARCH_DEPTH),
    # At most 9 plies are left, so a full search is always affordable
    Difficulty.HARD: SearchPolicy(use_search=True, max_depth=None),
}


def policy_for(difficulty: Difficulty) -> SearchPolicy:
    """Get the search policy for a difficulty level."""
    return _POLICIES[difficulty]


def default_difficulty() -> Difficulty:
    """The difficulty named by EngineConfig.DEFAULT_DIFFICULTY."""
    return Difficulty.from_name(EngineConfig.DEFAULT_DIFFICULTY)
