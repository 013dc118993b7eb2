"""
Tests for the game state machine: turn order, outcomes, scores and
AI sequencing.
"""

import dataclasses
import random

import pytest

from engine import (
    Difficulty, GameState, GameStatus, InvalidMove, PlayerRole, RoleConfig,
    Symbol, empty_board,
)

X, O, _ = Symbol.X, Symbol.O, None

# X takes the top row
X_WINS = [(0, X), (3, O), (1, X), (4, O), (2, X)]

# X O X / X O O / O X X
DRAW = [(0, X), (1, O), (2, X), (4, O), (3, X), (5, O), (7, X), (6, O), (8, X)]


def _two_player_game() -> GameState:
    game = GameState(roles=RoleConfig.two_player())
    game.reset()
    return game


def _play(game: GameState, moves):
    snapshot = None
    for index, symbol in moves:
        snapshot = game.submit_move(index, symbol)
    return snapshot


class TestLifecycle:
    """Idle, playing, won, draw."""

    def test_new_session_is_idle(self):
        game = GameState()
        snapshot = game.snapshot()
        assert snapshot.status == GameStatus.IDLE
        assert snapshot.board == empty_board()

    def test_idle_session_rejects_moves(self):
        game = GameState(roles=RoleConfig.two_player())
        with pytest.raises(InvalidMove, match="not in progress"):
            game.submit_move(0, X)
        assert game.board == empty_board()
        assert game.status == GameStatus.IDLE

    def test_reset_starts_playing(self):
        snapshot = GameState().reset()
        assert snapshot.status == GameStatus.PLAYING
        assert snapshot.board == empty_board()
        assert snapshot.current_player == X
        assert snapshot.winner is None
        assert snapshot.last_move is None

    def test_win(self):
        game = _two_player_game()
        snapshot = _play(game, X_WINS)
        assert snapshot.status == GameStatus.WON
        assert snapshot.is_game_over
        assert snapshot.winner == X
        assert snapshot.winning_cells == (0, 1, 2)
        assert (snapshot.score_x, snapshot.score_o) == (1, 0)

    def test_draw(self):
        game = _two_player_game()
        snapshot = _play(game, DRAW)
        assert snapshot.status == GameStatus.DRAW
        assert snapshot.winner is None
        assert snapshot.winning_cells is None
        assert (snapshot.score_x, snapshot.score_o) == (0, 0)

    @pytest.mark.parametrize("moves", [X_WINS, DRAW])
    def test_finished_game_rejects_moves(self, moves):
        game = _two_player_game()
        _play(game, moves)
        board = game.board
        free = next((i for i, cell in enumerate(board) if cell is None), 0)
        with pytest.raises(InvalidMove, match="not in progress"):
            game.submit_move(free, game.current_player)
        assert game.board == board


class TestTurnOrder:
    """Only the side to move may play, only on empty cells."""

    def test_turns_alternate(self):
        game = _two_player_game()
        assert game.submit_move(4, X).current_player == O
        assert game.submit_move(0, O).current_player == X

    def test_wrong_turn_rejected_without_change(self):
        game = _two_player_game()
        game.submit_move(4, X)
        before = game.snapshot()
        with pytest.raises(InvalidMove, match="turn"):
            game.submit_move(0, X)
        assert game.snapshot() == before

    def test_occupied_cell_rejected_without_change(self):
        game = _two_player_game()
        game.submit_move(4, X)
        before = game.snapshot()
        with pytest.raises(InvalidMove, match="occupied"):
            game.submit_move(4, O)
        assert game.snapshot() == before

    def test_unknown_symbol_rejected(self):
        game = _two_player_game()
        with pytest.raises(InvalidMove, match="Unknown symbol"):
            game.submit_move(0, "X")
        assert game.snapshot().board == empty_board()

    @pytest.mark.parametrize("index", [-1, 9])
    def test_out_of_range_rejected(self, index):
        game = _two_player_game()
        with pytest.raises(InvalidMove):
            game.submit_move(index, X)
        assert game.snapshot().board == empty_board()

    def test_move_history(self):
        game = _two_player_game()
        _play(game, X_WINS[:3])
        assert [(m.index, m.symbol, m.move_number) for m in game.moves] == [
            (0, X, 0), (3, O, 1), (1, X, 2)
        ]
        assert game.snapshot().last_move == game.moves[-1]


class TestScoresAndReset:
    """Score counters across rounds."""

    def test_scores_accumulate_across_rounds(self):
        game = _two_player_game()
        _play(game, X_WINS)
        game.reset(keep_score=True)
        _play(game, [(0, X), (3, O), (1, X), (4, O), (8, X), (5, O)])
        snapshot = game.snapshot()
        assert snapshot.winner == O
        assert (snapshot.score_x, snapshot.score_o) == (1, 1)

    def test_draw_does_not_score(self):
        game = _two_player_game()
        _play(game, X_WINS)
        game.reset()
        _play(game, DRAW)
        assert (game.score_x, game.score_o) == (1, 0)

    def test_reset_keep_score(self):
        game = _two_player_game()
        _play(game, X_WINS)
        snapshot = game.reset(keep_score=True)
        assert snapshot.board == empty_board()
        assert snapshot.status == GameStatus.PLAYING
        assert snapshot.current_player == X
        assert (snapshot.score_x, snapshot.score_o) == (1, 0)
        assert game.moves == []

    def test_reset_is_idempotent(self):
        game = _two_player_game()
        _play(game, DRAW[:4])
        first = game.reset(keep_score=True)
        second = game.reset(keep_score=True)
        assert first == second

    def test_reset_zeroes_score(self):
        game = _two_player_game()
        _play(game, X_WINS)
        snapshot = game.reset(keep_score=False)
        assert (snapshot.score_x, snapshot.score_o) == (0, 0)

    def test_reset_mid_game_after_o_moved(self):
        game = _two_player_game()
        _play(game, X_WINS[:2])
        snapshot = game.reset()
        assert snapshot.current_player == X
        assert snapshot.board == empty_board()

    def test_reset_can_change_roles_and_difficulty(self):
        game = _two_player_game()
        game.reset(roles=RoleConfig.single_player(O), difficulty=Difficulty.EASY)
        assert game.roles.x_role == PlayerRole.AI
        assert game.difficulty == Difficulty.EASY

    def test_snapshot_is_frozen(self):
        snapshot = GameState().reset()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.status = GameStatus.WON

    def test_sessions_are_independent(self):
        first = _two_player_game()
        second = _two_player_game()
        first.submit_move(4, X)
        assert second.board == empty_board()
        assert second.current_player == X


class TestAITurns:
    """AI replies, automatic and host-driven."""

    def test_auto_ai_replies_inside_submit(self):
        game = GameState(roles=RoleConfig.single_player(X), difficulty=Difficulty.HARD)
        game.reset()
        snapshot = game.submit_move(0, X)
        assert sum(cell is not None for cell in snapshot.board) == 2
        assert snapshot.current_player == X
        assert snapshot.last_move.symbol == O
        assert not snapshot.ai_to_move

    def test_difficulty_change_applies_to_next_ai_move(self):
        game = GameState(roles=RoleConfig.single_player(X), difficulty=Difficulty.EASY)
        game.reset()
        game.set_difficulty(Difficulty.HARD)
        game.submit_move(0, X)

        # Second X move on a line through cell 0 that O has not touched
        threats = [(4, 8), (1, 2), (3, 6), (8, 4), (2, 1), (6, 3)]
        x_move, block = next(
            (x, b) for x, b in threats if game.board[x] is None and game.board[b] is None
        )
        snapshot = game.submit_move(x_move, X)
        assert snapshot.board[block] == O

    def test_manual_ai_waits_for_host(self):
        game = GameState(roles=RoleConfig.single_player(X), auto_play_ai=False)
        game.reset()
        snapshot = game.submit_move(4, X)
        assert snapshot.ai_to_move
        assert snapshot.current_player == O
        assert sum(cell is not None for cell in snapshot.board) == 1

        snapshot = game.play_ai_turn()
        assert not snapshot.ai_to_move
        assert snapshot.current_player == X
        assert sum(cell is not None for cell in snapshot.board) == 2

    def test_out_of_turn_while_ai_to_move(self):
        game = GameState(roles=RoleConfig.single_player(X), auto_play_ai=False)
        game.reset()
        game.submit_move(4, X)
        with pytest.raises(InvalidMove, match="turn"):
            game.submit_move(0, X)
        assert game.snapshot().ai_to_move

    def test_play_ai_turn_rejected_on_human_turn(self):
        game = GameState(roles=RoleConfig.single_player(X))
        game.reset()
        with pytest.raises(InvalidMove, match="not an AI turn"):
            game.play_ai_turn()

    def test_reset_never_moves_ai(self):
        game = GameState(roles=RoleConfig.single_player(O), difficulty=Difficulty.EASY)
        snapshot = game.reset()
        assert snapshot.board == empty_board()
        assert snapshot.current_player == X
        assert snapshot.ai_to_move

        snapshot = game.play_ai_turn()
        assert snapshot.last_move.symbol == X
        assert snapshot.current_player == O
        assert not snapshot.ai_to_move

    def test_ai_vs_ai_plays_to_the_end(self):
        roles = RoleConfig(x_role=PlayerRole.AI, o_role=PlayerRole.AI)
        game = GameState(roles=roles, difficulty=Difficulty.EASY, rng=random.Random(5))
        game.reset()
        snapshot = game.play_ai_turn()
        assert snapshot.is_game_over
        assert len(game.moves) >= 5

    def test_hard_ai_never_loses_in_session(self):
        for seed in range(5):
            rng = random.Random(seed)
            game = GameState(roles=RoleConfig.single_player(X), difficulty=Difficulty.HARD)
            snapshot = game.reset()
            while not snapshot.is_game_over:
                free = [i for i, cell in enumerate(snapshot.board) if cell is None]
                snapshot = game.submit_move(rng.choice(free), X)
            assert snapshot.winner != X
            assert snapshot.score_o == (1 if snapshot.winner == O else 0)
