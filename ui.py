"""
TicTacToe UI
A graphical interface for playing TicTacToe against the AI using Tkinter.

Shows:
- The board (click a cell to play)
- Game status and whose turn it is
- The AI's last move and why it chose it
"""

import cv2
import random
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.ai_player import AIPlayer
from logic.game_state import Player
from logic.turn_controller import TurnController, ControllerState, describe_status

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """Initialize the UI."""
        self.game_config = game_config or GameConfig()
        self.display_config = display_config or DisplayConfig()
        self.is_running = False

        self.renderer = BoardRenderer(self.display_config)
        self.ai = AIPlayer(
            Player(self.game_config.AI_MARK),
            rng=random.Random(self.game_config.AI_RANDOM_SEED),
            config=self.game_config
        )

        # Create UI (the controller needs self.root for scheduling)
        self._create_ui()

        scheduler = self._schedule if self.game_config.AI_MOVE_DELAY_S > 0 else None
        self.controller = TurnController(self.game_config, ai=self.ai, scheduler=scheduler)

    def _schedule(self, delay_s: float, callback):
        """Run the AI's move on the Tk thread after the delay."""
        self.root.after(int(delay_s * 1000), callback)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Move.TLabel', font=('Segoe UI', 11), foreground='#00ff88')

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 5))

        # Board canvas
        width, height = self.renderer.image_size
        self.board_canvas = tk.Canvas(
            main_frame, width=width, height=height, bg='#0f0f1a',
            highlightthickness=2, highlightbackground='#00d4ff'
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_click)

        # Legend
        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        ttk.Label(legend_frame, text=f"{self.game_config.HUMAN_MARK} = You  ", foreground='#ff6b6b').pack(side=tk.LEFT)
        ttk.Label(legend_frame, text=f"{self.game_config.AI_MARK} = AI", foreground='#00ff88').pack(side=tk.LEFT)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        self.ai_move_label = ttk.Label(main_frame, text="Waiting for human...", style='Move.TLabel')
        self.ai_move_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Play the clicked cell."""
        index = self.renderer.pixel_to_index(event.x, event.y)
        if index is None:
            return

        self.controller.apply_human_move(index)
        self._refresh()

    def _update_loop(self):
        """Redraw loop (runs on UI thread), picks up the AI's delayed move."""
        if not self.is_running:
            return

        try:
            self._refresh()
        except Exception as e:
            print(f"Update error: {e}")

        if self.is_running:
            self.root.after(50, self._update_loop)

    def _refresh(self):
        """Redraw the board and the labels from the controller's state."""
        snapshot = self.controller.get_state()

        # Convert BGR to RGB for PIL
        frame = cv2.cvtColor(self.renderer.render(snapshot), cv2.COLOR_BGR2RGB)
        photo = ImageTk.PhotoImage(Image.fromarray(frame))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        turn_text, status_text = describe_status(snapshot)
        self.turn_label.configure(text=turn_text)
        self.status_label.configure(text=status_text or "Game in progress")

        if snapshot.state == ControllerState.AUTOMATED_TURN:
            self.ai_move_label.configure(text="AI is thinking...")
        elif self.ai.last_rule is not None and snapshot.move_count > 1:
            self.ai_move_label.configure(text=f"AI's last move: {self.ai.last_rule.value}")
        else:
            self.ai_move_label.configure(text="Waiting for human...")

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.controller.reset()
        self.ai.last_rule = None
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.is_running = True
        self._update_loop()
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_MOVE_DELAY_S,
        help="Seconds before the AI answers (0 = instant)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the AI's corner choice"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.AI_MOVE_DELAY_S = max(0.0, args.delay)
    config.AI_RANDOM_SEED = args.seed

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(game_config=config)
    ui.run()


if __name__ == "__main__":
    main()
