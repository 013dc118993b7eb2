"""
Main entry point for the TicTacToe engine.

Launches the Tkinter UI by default, or a console game with --no-ui.
Both are thin hosts: all rules and AI decisions come from the engine.

Run this script to play TicTacToe against the computer!
"""

import logging
import time
from typing import Optional

from engine import (
    Difficulty, EngineConfig, GameState, GameStatus, InvalidMove,
    RoleConfig, SessionSnapshot, Symbol, format_board,
)


class ConsoleGame:
    """
    Console host for the engine.

    Game flow:
    1. Human types a cell number (1-9)
    2. Engine validates and plays it
    3. If the AI is to move, the host waits a moment and asks the engine to play it
    4. Repeat until someone wins or it's a draw, then offer another round
    """

    def __init__(
        self,
        roles: RoleConfig,
        difficulty: Difficulty,
        think_delay: bool = True
    ):
        """
        Initialize the console game.

        Args:
            roles: Which symbols are human and which are AI.
            difficulty: AI difficulty.
            think_delay: If True, pause before each AI move.
        """
        self.think_delay = think_delay
        # The host decides when the AI moves, so we can pause first
        self.game = GameState(roles=roles, difficulty=difficulty, auto_play_ai=False)
        self.is_running = False

    def start(self):
        """Start playing rounds until the user quits."""
        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        print("Type 1-9 to play a cell, 'r' for a new round, 'q' to quit.\n")

        self.is_running = True
        snapshot = self.game.reset(keep_score=True)

        while self.is_running:
            snapshot = self._play_round(snapshot)
            if not self.is_running:
                break

            self._show_game_result(snapshot)
            answer = input("\nPlay again? [Y/n] ").strip().lower()
            if answer in ("n", "no", "q"):
                self.is_running = False
            else:
                snapshot = self.game.reset(keep_score=True)

    def _play_round(self, snapshot: SessionSnapshot) -> SessionSnapshot:
        """Play one round. Returns the final snapshot."""
        while self.is_running and not snapshot.is_game_over:
            self._print_board(snapshot)

            if snapshot.ai_to_move:
                snapshot = self._ai_move()
            else:
                snapshot = self._human_move(snapshot)

        return snapshot

    def _human_move(self, snapshot: SessionSnapshot) -> SessionSnapshot:
        """Ask the human for a move and submit it."""
        text = input(f"{snapshot.current_player.value} to move: ").strip().lower()

        if text == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return snapshot
        if text == "r":
            print("\nStarting a new round...")
            return self.game.reset(keep_score=True)

        try:
            index = int(text) - 1
        except ValueError:
            print(f"'{text}' is not a cell number. Type 1-9.")
            return snapshot

        try:
            return self.game.submit_move(index, snapshot.current_player)
        except InvalidMove as e:
            print(f"Move rejected: {e}")
            return snapshot

    def _ai_move(self) -> SessionSnapshot:
        """Let the AI play, after a short pause if enabled."""
        print(f"\n>>> AI ({self.game.current_player.value}) is thinking...")
        if self.think_delay:
            time.sleep(EngineConfig.AI_DELAY_MS[self.game.difficulty.name] / 1000.0)

        snapshot = self.game.play_ai_turn()
        print(f">>> AI played cell {snapshot.last_move.index + 1}")
        return snapshot

    def _print_board(self, snapshot: SessionSnapshot):
        print()
        print(format_board(snapshot.board))
        print(f"\nScore  X: {snapshot.score_x}  O: {snapshot.score_o}")

    def _show_game_result(self, snapshot: SessionSnapshot):
        """Show the final result of a round."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        self._print_board(snapshot)

        if snapshot.status == GameStatus.WON:
            cells = ", ".join(str(i + 1) for i in snapshot.winning_cells)
            print(f"\n{snapshot.winner.value} wins with cells {cells}!")
        else:
            print("\nIt's a draw! Good game!")


def parse_roles(play_as: Optional[str], two_player: bool) -> RoleConfig:
    """Turn command-line options into a role binding."""
    if two_player:
        return RoleConfig.two_player()
    human = Symbol.O if play_as and play_as.upper() == "O" else Symbol.X
    return RoleConfig.single_player(human)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=EngineConfig.DEFAULT_DIFFICULTY.lower(),
        help="AI difficulty (default: %(default)s)"
    )
    parser.add_argument(
        "--play-as",
        choices=["X", "O", "x", "o"],
        default="X",
        help="Symbol the human plays; X always moves first"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans on one board, no AI"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Let the AI answer immediately (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log engine decisions, including AI search statistics"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    roles = parse_roles(args.play_as, args.two_player)
    difficulty = Difficulty.from_name(args.difficulty)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(roles=roles, difficulty=difficulty)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(roles=roles, difficulty=difficulty, think_delay=not args.no_delay)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
