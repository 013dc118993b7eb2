"""
Game state management for the TicTacToe engine.
Tracks the board, whose turn it is, the game status and the score,
and lets the AI answer when it is its turn.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .ai_player import AIPlayer
from .board import Board, Symbol, empty_board, format_board
from .difficulty import Difficulty, default_difficulty
from .move_validator import InvalidMove, MoveValidator
from .win_checker import Draw, WinChecker, WinningCombination, Won

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Where a session is in its lifecycle."""
    IDLE = "idle"        # Created, no game started yet
    PLAYING = "playing"  # The only state that accepts moves
    WON = "won"
    DRAW = "draw"


class PlayerRole(Enum):
    """Who controls a symbol."""
    HUMAN = "human"
    AI = "ai"


@dataclass(frozen=True)
class RoleConfig:
    """
    Which side is played by a human and which by the AI.
    Supplied by the host; the engine only enforces turn order.
    """
    x_role: PlayerRole = PlayerRole.HUMAN
    o_role: PlayerRole = PlayerRole.AI

    @classmethod
    def single_player(cls, human_symbol: Symbol = Symbol.X) -> "RoleConfig":
        """Human plays `human_symbol`, the AI plays the other one."""
        if human_symbol == Symbol.X:
            return cls(x_role=PlayerRole.HUMAN, o_role=PlayerRole.AI)
        return cls(x_role=PlayerRole.AI, o_role=PlayerRole.HUMAN)

    @classmethod
    def two_player(cls) -> "RoleConfig":
        """Two humans sharing one board."""
        return cls(x_role=PlayerRole.HUMAN, o_role=PlayerRole.HUMAN)

    def role_of(self, symbol: Symbol) -> PlayerRole:
        """Who controls `symbol`."""
        return self.x_role if symbol == Symbol.X else self.o_role

    def is_ai(self, symbol: Symbol) -> bool:
        """True if `symbol` is played by the AI."""
        return self.role_of(symbol) == PlayerRole.AI


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    symbol: Symbol          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is in the game (0-8)


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything a host needs to show the current game."""
    board: Board
    status: GameStatus
    current_player: Symbol
    winner: Optional[Symbol]
    winning_cells: Optional[WinningCombination]
    score_x: int
    score_o: int
    last_move: Optional[Move]
    ai_to_move: bool

    @property
    def is_game_over(self) -> bool:
        return self.status in (GameStatus.WON, GameStatus.DRAW)


@dataclass
class GameState:
    """
    One TicTacToe session.

    Tracks:
    - The board (replaced, never edited in place)
    - Current player
    - Game status (idle, playing, won, draw)
    - Score for X and O across rounds
    - Move history of the current round

    A session is not thread-safe: the host must not submit moves to
    the same session from two places at once.
    """

    # Which symbols are played by the AI
    roles: RoleConfig = field(default_factory=RoleConfig)

    # AI strength for every AI-controlled symbol
    difficulty: Difficulty = field(default_factory=default_difficulty)

    # If True, an AI reply is played inside submit_move. Hosts that want
    # a "thinking" delay turn this off and call play_ai_turn() themselves.
    auto_play_ai: bool = True

    # Random source for EASY moves (None = unseeded)
    rng: Optional[random.Random] = field(default=None, repr=False)

    board: Board = field(default_factory=empty_board)
    current_player: Symbol = Symbol.X
    status: GameStatus = GameStatus.IDLE

    # Game result
    winner: Optional[Symbol] = None
    winning_cells: Optional[WinningCombination] = None

    # Rounds won, kept across resets unless asked otherwise
    score_x: int = 0
    score_o: int = 0

    # Move history
    moves: List[Move] = field(default_factory=list)

    def __post_init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        if self.rng is None:
            self.rng = random.Random()
        self._ai_players: Dict[Symbol, AIPlayer] = {}

    @property
    def is_ai_turn(self) -> bool:
        """True if the game is running and the side to move is the AI."""
        return self.status == GameStatus.PLAYING and self.roles.is_ai(self.current_player)

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def snapshot(self) -> SessionSnapshot:
        """Get an immutable view of the session."""
        return SessionSnapshot(
            board=self.board,
            status=self.status,
            current_player=self.current_player,
            winner=self.winner,
            winning_cells=self.winning_cells,
            score_x=self.score_x,
            score_o=self.score_o,
            last_move=self.last_move,
            ai_to_move=self.is_ai_turn,
        )

    def reset(
        self,
        keep_score: bool = True,
        roles: Optional[RoleConfig] = None,
        difficulty: Optional[Difficulty] = None
    ) -> SessionSnapshot:
        """
        Start a new round.

        The board is emptied, X always moves first, and the status becomes
        PLAYING. The AI is never moved from here: if X is AI-controlled the
        snapshot says so and the host calls play_ai_turn().

        Args:
            keep_score: False zeroes both score counters.
            roles: New role binding, or None to keep the current one.
            difficulty: New AI difficulty, or None to keep the current one.

        Returns:
            Snapshot of the fresh round.
        """
        if roles is not None:
            self.roles = roles
        if difficulty is not None:
            self.difficulty = difficulty

        self.board = empty_board()
        self.current_player = Symbol.X
        self.status = GameStatus.PLAYING
        self.winner = None
        self.winning_cells = None
        self.moves = []

        if not keep_score:
            self.score_x = 0
            self.score_o = 0

        logger.info(
            "New round: X=%s O=%s difficulty=%s score %d-%d",
            self.roles.x_role.value, self.roles.o_role.value,
            self.difficulty.name, self.score_x, self.score_o
        )
        return self.snapshot()

    def set_difficulty(self, difficulty: Difficulty):
        """Change AI strength. Takes effect from the AI's next move."""
        self.difficulty = difficulty

    def submit_move(self, index: int, symbol: Symbol) -> SessionSnapshot:
        """
        Play a move for `symbol`.

        If the move hands the turn to an AI-controlled symbol and
        auto_play_ai is on, the AI reply is played before returning.

        Args:
            index: Cell to play (0-8).
            symbol: Who is moving. Must be the current player.

        Returns:
            Snapshot after the move (and any AI reply).

        Raises:
            InvalidMove: if the game isn't being played, it's not
                `symbol`'s turn, or the cell can't be played.
                Nothing is changed in that case.
        """
        if self.status != GameStatus.PLAYING:
            self._reject(f"Game is not in progress (status: {self.status.value})")

        result = self.validator.validate_symbol(symbol)
        if not result.is_valid:
            self._reject(result.error_message)

        if symbol != self.current_player:
            self._reject(f"It's {self.current_player.value}'s turn, not {symbol.value}'s")

        result = self.validator.validate_move(self.board, index)
        if not result.is_valid:
            self._reject(result.error_message)

        self._play(index, symbol)

        if self.auto_play_ai and self.is_ai_turn:
            return self.play_ai_turn()

        return self.snapshot()

    def play_ai_turn(self) -> SessionSnapshot:
        """
        Let the AI make its move now.

        Raises:
            InvalidMove: if the game isn't being played or the side
                to move is not AI-controlled.
        """
        if not self.is_ai_turn:
            self._reject(f"It's not an AI turn (status: {self.status.value}, "
                         f"to move: {self.current_player.value})")

        symbol = self.current_player
        index = self._ai_for(symbol).choose_move(self.board, self.difficulty)
        return self.submit_move(index, symbol)

    def _play(self, index: int, symbol: Symbol):
        """Apply a validated move, then update status, score and turn."""
        self.board = self.validator.apply_move(self.board, index, symbol)
        self.moves.append(Move(symbol=symbol, index=index, move_number=len(self.moves)))
        logger.debug("%s played cell %d\n%s", symbol.value, index, format_board(self.board))

        outcome = self.win_checker.evaluate_outcome(self.board)

        if isinstance(outcome, Won):
            self.status = GameStatus.WON
            self.winner = outcome.winner
            self.winning_cells = outcome.cells
            if outcome.winner == Symbol.X:
                self.score_x += 1
            else:
                self.score_o += 1
            logger.info("%s wins on %s. Score X %d - O %d",
                        outcome.winner.value, list(outcome.cells), self.score_x, self.score_o)
        elif isinstance(outcome, Draw):
            self.status = GameStatus.DRAW
            logger.info("Draw. Score X %d - O %d", self.score_x, self.score_o)
        else:
            self.current_player = symbol.opposite()

    def _ai_for(self, symbol: Symbol) -> AIPlayer:
        """One AIPlayer per AI-controlled symbol, sharing the session's rng."""
        if symbol not in self._ai_players:
            self._ai_players[symbol] = AIPlayer(symbol, rng=self.rng)
        return self._ai_players[symbol]

    @staticmethod
    def _reject(message: str):
        logger.info("Move rejected: %s", message)
        raise InvalidMove(message)
