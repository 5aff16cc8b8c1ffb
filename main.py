"""
Main script for TicTacToe against the AI.

This script ties together:
- Logic (game state, win checking, AI, turn controller)
- Display (board rendering, click mapping)

Run this script to play TicTacToe against the computer!
"""

import cv2
import random
import time
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.ai_player import AIPlayer
from logic.game_state import Player
from logic.turn_controller import TurnController, threading_scheduler, describe_status

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeGame:
    """
    OpenCV window game: click a cell to play, the AI answers.

    Keys:
    - q: quit
    - r: new game
    - s: save screenshot
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """
        Initialize the game.

        Args:
            game_config: Game configuration.
            display_config: Display configuration.
        """
        print("\n" + "="*60)
        print("   TicTacToe - Initializing...")
        print("="*60 + "\n")

        self.game_config = game_config or GameConfig()
        self.display_config = display_config or DisplayConfig()

        ai = AIPlayer(
            Player(self.game_config.AI_MARK),
            rng=random.Random(self.game_config.AI_RANDOM_SEED),
            config=self.game_config
        )
        self.controller = TurnController(
            self.game_config,
            ai=ai,
            scheduler=threading_scheduler if self.game_config.AI_MOVE_DELAY_S > 0 else None
        )
        self.renderer = BoardRenderer(self.display_config)

        self.is_running = False
        self._result_shown = False

        print("\n" + "="*60)
        print("   TicTacToe - Ready!")
        print(f"   Human plays: {self.controller.human_player.value}")
        print(f"   AI plays: {self.controller.ai_player.value}")
        print("="*60 + "\n")

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print("Click a cell to play. Press 'q' to quit, 'r' to reset, 's' to save screenshot\n")

        cv2.namedWindow(self.display_config.WINDOW_NAME)
        cv2.setMouseCallback(self.display_config.WINDOW_NAME, self._on_mouse)

        self.is_running = True
        self._game_loop()

        self._check_game_over(self.controller.get_state())
        cv2.destroyAllWindows()

    def _game_loop(self):
        """Main loop: redraw, handle keys."""
        while self.is_running:
            snapshot = self.controller.get_state()
            self._check_game_over(snapshot)

            frame = self.renderer.render(snapshot)
            cv2.imshow(self.display_config.WINDOW_NAME, frame)

            # Handle key presses
            key = cv2.waitKey(30) & 0xFF
            if key == ord('q'):
                print("\nGame quit by user.")
                self.is_running = False
            elif key == ord('s'):
                filename = f"{self.display_config.SCREENSHOT_PREFIX}_{int(time.time())}.png"
                cv2.imwrite(filename, frame)
                print(f"Saved: {filename}")
            elif key == ord('r'):
                self._reset_game()

    def _on_mouse(self, event, x, y, flags, param):
        """Play the clicked cell."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        index = self.renderer.pixel_to_index(x, y)
        if index is None:
            return

        self.controller.apply_human_move(index)

    def _check_game_over(self, snapshot) -> bool:
        """
        Print the result the first time a game is seen finished.

        The AI's delayed move ends games on a timer thread, so the
        main loop checks every snapshot.

        Returns:
            True if the result was printed now.
        """
        if not snapshot.is_game_over:
            self._result_shown = False
            return False

        if self._result_shown:
            return False

        self._result_shown = True
        self._show_game_result()
        return True

    def _show_game_result(self):
        """Print the current result to console."""
        snapshot = self.controller.get_state()
        if not snapshot.is_game_over:
            return

        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        self.controller.game_state.print_board()

        _, status = describe_status(snapshot)
        if snapshot.winner == snapshot.human_player:
            print(f"\n{status} Congratulations!")
        elif snapshot.winner:
            print(f"\n{status} Better luck next time!")
        else:
            print(f"\n{status} Good game!")

        print("\nPress 'r' for a new game.")
        print("="*60)

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.controller.reset()
        print("Game reset!")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe vs AI")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in an OpenCV window instead of the Tkinter UI"
    )
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

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(game_config=config)
        ui.run()
        return

    game = TicTacToeGame(game_config=config)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
