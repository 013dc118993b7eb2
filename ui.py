"""
TicTacToe UI
A graphical interface for the TicTacToe engine using Tkinter.

Shows:
- The 3x3 board (click a cell to play it)
- Game status, whose turn it is, and the last move
- Scoreboard for X and O
- Difficulty level and symbol selection
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from engine import (
    Difficulty, EngineConfig, GameState, GameStatus, InvalidMove,
    PlayerRole, RoleConfig, SessionSnapshot, Symbol,
)


CELL_BG = '#16213e'
WIN_BG = '#065f46'
SYMBOL_COLORS = {
    Symbol.X: '#60a5fa',
    Symbol.O: '#f87171',
}
DIFFICULTY_COLORS = {
    Difficulty.EASY: '#4ade80',
    Difficulty.MEDIUM: '#fbbf24',
    Difficulty.HARD: '#f87171',
}


class TicTacToeUI:
    """
    Main UI class for the TicTacToe engine.

    The session runs with auto_play_ai off: after each human move the UI
    waits EngineConfig.AI_DELAY_MS and then asks the engine for the AI move.
    Everything runs on the Tk main loop, so the session is only ever
    touched from one thread.
    """

    def __init__(
        self,
        roles: Optional[RoleConfig] = None,
        difficulty: Difficulty = Difficulty.HARD
    ):
        """Initialize the UI."""
        self.game = GameState(
            roles=roles if roles is not None else RoleConfig(),
            difficulty=difficulty,
            auto_play_ai=False
        )

        # Pending root.after() job for the AI move
        self._ai_job: Optional[str] = None

        self._create_ui()
        self._new_round(keep_score=True)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=15, pady=15)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 14, 'bold'), foreground='#00ff88')

        ttk.Label(main_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        width = EngineConfig.GRID_WIDTH
        self.board_cells = []
        for index in range(EngineConfig.BOARD_SIZE):
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=3,
                height=1,
                bg=CELL_BG,
                fg='white',
                activebackground='#1f2b4d',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=index // width, column=index % width, padx=2, pady=2)
            self.board_cells.append(cell)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=2)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        self.last_move_label = ttk.Label(main_frame, text="Last move: -")
        self.last_move_label.pack()

        self.score_label = ttk.Label(main_frame, text="", style='Score.TLabel')
        self.score_label.pack(pady=5)

        # Difficulty section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(main_frame, text="⚙️ Difficulty").pack()

        diff_frame = ttk.Frame(main_frame)
        diff_frame.pack(pady=5)

        self.difficulty_buttons = {}
        for difficulty in Difficulty:
            btn = tk.Button(
                diff_frame,
                text=difficulty.name.capitalize(),
                font=('Segoe UI', 10, 'bold'),
                width=8,
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.difficulty_buttons[difficulty] = btn

        # Symbol section (applies from the next round)
        ttk.Label(main_frame, text="Play as (next round)").pack(pady=(10, 0))

        symbol_frame = ttk.Frame(main_frame)
        symbol_frame.pack(pady=5)

        self.play_as_var = tk.StringVar(value=self._human_symbol_name())
        for text, value in (("X", "X"), ("O", "O"), ("Two players", "BOTH")):
            tk.Radiobutton(
                symbol_frame,
                text=text,
                value=value,
                variable=self.play_as_var,
                bg='#1a1a2e',
                fg='white',
                selectcolor='#2d3748',
                activebackground='#1a1a2e'
            ).pack(side=tk.LEFT, padx=5)

        # Control buttons
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="▶ New Round",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=lambda: self._new_round(keep_score=True)
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="🔄 Reset Scores",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=lambda: self._new_round(keep_score=False)
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _human_symbol_name(self) -> str:
        """Radio button value matching the current role binding."""
        roles = self.game.roles
        if roles.x_role == PlayerRole.HUMAN and roles.o_role == PlayerRole.HUMAN:
            return "BOTH"
        return "O" if roles.x_role == PlayerRole.AI else "X"

    def _selected_roles(self) -> RoleConfig:
        choice = self.play_as_var.get()
        if choice == "BOTH":
            return RoleConfig.two_player()
        return RoleConfig.single_player(Symbol[choice])

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level."""
        self.game.set_difficulty(difficulty)
        self._update_difficulty_buttons()

    def _update_difficulty_buttons(self):
        for difficulty, btn in self.difficulty_buttons.items():
            if difficulty == self.game.difficulty:
                btn.configure(bg=DIFFICULTY_COLORS[difficulty], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _new_round(self, keep_score: bool):
        """Start a new round, optionally clearing the scores."""
        self._cancel_ai_move()
        snapshot = self.game.reset(keep_score=keep_score, roles=self._selected_roles())
        self._refresh(snapshot)

    def _on_cell_click(self, index: int):
        """Play a human move on the clicked cell."""
        snapshot = self.game.snapshot()
        if snapshot.ai_to_move or snapshot.status != GameStatus.PLAYING:
            return

        try:
            snapshot = self.game.submit_move(index, snapshot.current_player)
        except InvalidMove as e:
            self.status_label.configure(text=str(e))
            return

        self._refresh(snapshot)

    def _schedule_ai_move(self):
        """Play the AI move after the configured "thinking" delay."""
        if self._ai_job is not None:
            return
        delay = EngineConfig.AI_DELAY_MS[self.game.difficulty.name]
        self._ai_job = self.root.after(delay, self._ai_move)

    def _ai_move(self):
        self._ai_job = None
        if not self.game.is_ai_turn:
            return
        self._refresh(self.game.play_ai_turn())

    def _cancel_ai_move(self):
        if self._ai_job is not None:
            self.root.after_cancel(self._ai_job)
            self._ai_job = None

    def _refresh(self, snapshot: SessionSnapshot):
        """Redraw everything from a snapshot."""
        winning = set(snapshot.winning_cells or ())
        for index, cell in enumerate(snapshot.board):
            button = self.board_cells[index]
            if cell is None:
                button.configure(text="", bg=CELL_BG)
            else:
                button.configure(
                    text=cell.value,
                    fg=SYMBOL_COLORS[cell],
                    bg=WIN_BG if index in winning else CELL_BG
                )

        if snapshot.status == GameStatus.WON:
            self.status_label.configure(text=f"🏆 {self._describe(snapshot.winner)} WINS!")
            self.turn_label.configure(text="Game Over")
        elif snapshot.status == GameStatus.DRAW:
            self.status_label.configure(text="🤝 It's a DRAW!")
            self.turn_label.configure(text="Game Over")
        else:
            self.status_label.configure(text="Game in progress")
            current = self._describe(snapshot.current_player)
            suffix = " (thinking...)" if snapshot.ai_to_move else ""
            self.turn_label.configure(text=f"Turn: {current}{suffix}")

        if snapshot.last_move is not None:
            move = snapshot.last_move
            self.last_move_label.configure(text=f"Last move: {move.symbol.value} → cell {move.index + 1}")
        else:
            self.last_move_label.configure(text="Last move: -")

        self.score_label.configure(text=f"X  {snapshot.score_x}  :  {snapshot.score_o}  O")
        self._update_difficulty_buttons()

        if snapshot.ai_to_move:
            self._schedule_ai_move()

    def _describe(self, symbol: Symbol) -> str:
        role = "AI" if self.game.roles.is_ai(symbol) else "Human"
        return f"{role} ({symbol.value})"

    def _quit(self):
        """Quit the application."""
        self._cancel_ai_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


if __name__ == "__main__":
    TicTacToeUI().run()
