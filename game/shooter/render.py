"""
Arcade front end: renders ShooterGame state and feeds it keyboard input.

The core works in screen coordinates with y pointing down; Arcade's origin
is the bottom-left corner, so every rectangle is flipped on the way out.
"""

from __future__ import annotations

import argparse
import logging
from typing import Set

import arcade

from .config import GameConfig
from .difficulty import DEFAULT_DIFFICULTY, FLAT_DIFFICULTY
from .game import ShooterGame
from .state import InputState

logger = logging.getLogger(__name__)

GAME_OVER_LINES = ("GAME OVER", "Press R to Restart")


class ShooterWindow(arcade.Window):
    """Read-only view of a ShooterGame"""

    def __init__(self, game: ShooterGame, title: str = "Space Shooter"):
        super().__init__(game.config.width, game.config.height, title)
        self.game = game

        # Colors
        self.BG = arcade.color.BLACK
        self.PLAYER_C = arcade.color.WHITE
        self.BULLET_C = arcade.color.WHITE
        self.ENEMY_C = (255, 0, 0)
        self.HUD_C = arcade.color.WHITE
        self.background_color = self.BG

    def _rect(self, x: float, y: float, w: float, h: float, color):
        top = self.game.config.height - y
        arcade.draw_lrbt_rectangle_filled(x, x + w, top - h, top, color)

    def on_draw(self):
        """Draw the current game state"""
        self.clear()

        game = self.game
        cfg = game.config
        player = game.state.player

        self._rect(player.x, cfg.player_y, player.width, player.height, self.PLAYER_C)

        for b in game.bullets:
            self._rect(b.x, b.y, b.width, b.height, self.BULLET_C)

        for e in game.enemies:
            self._rect(e.x, e.y, e.width, e.height, self.ENEMY_C)

        arcade.draw_text(f"Score: {game.score}", 4, cfg.height - 16, self.HUD_C, 12)

        if game.is_game_over:
            line_h = 18
            y = cfg.height / 2 + line_h / 2
            for line in GAME_OVER_LINES:
                arcade.draw_text(line, cfg.width / 2, y, self.HUD_C, 14,
                                 anchor_x="center", anchor_y="center")
                y -= line_h


class PlayWindow(ShooterWindow):
    """Interactive window: held keys become the per-tick InputState"""

    def __init__(self, game: ShooterGame, title: str = "Space Shooter"):
        super().__init__(game, title)
        self._held: Set[int] = set()

    def on_key_press(self, symbol: int, modifiers: int):
        self._held.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)

    def current_input(self) -> InputState:
        return InputState(
            left=arcade.key.LEFT in self._held,
            right=arcade.key.RIGHT in self._held,
            fire=arcade.key.SPACE in self._held,
            restart=arcade.key.R in self._held,
        )

    def on_update(self, delta_time: float):
        self.game.update(self.current_input())


def play(difficulty: str = "default"):
    """Open a window and play with the keyboard"""
    table = FLAT_DIFFICULTY if difficulty == "flat" else DEFAULT_DIFFICULTY
    game = ShooterGame(config=GameConfig(difficulty=table))
    PlayWindow(game)
    logger.info("starting game (%s difficulty)", difficulty)
    arcade.run()


def main():
    parser = argparse.ArgumentParser(description="Play the arcade shooter")
    parser.add_argument(
        "--difficulty",
        type=str,
        default="default",
        choices=["default", "flat"],
        help="Spawn-rate curve: speeds up with score, or a flat 1s interval (default: default)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    play(difficulty=args.difficulty)


if __name__ == "__main__":
    main()
