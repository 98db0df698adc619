"""
Arcade front end for the asteroid field
---------------------------------------
- ArcadeCanvas: Canvas implemented with Arcade shape calls
- FieldWindow: on_update/on_draw advance and paint the World once per
  display refresh, key events feed the InputState

Run with `python -m game.field2D.run`.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import arcade

from game.configs.field_config import COLORS, WINDOW_CONFIG
from .canvas import Canvas, check_canvas
from .controls import Key
from .utils import now_ms
from .world import World

logger = logging.getLogger(__name__)


# Arcade key codes -> simulation keys; anything else is ignored
ARCADE_KEYS = {
    arcade.key.UP: Key.ARROW_UP,
    arcade.key.DOWN: Key.ARROW_DOWN,
    arcade.key.LEFT: Key.ARROW_LEFT,
    arcade.key.RIGHT: Key.ARROW_RIGHT,
    arcade.key.W: Key.W,
    arcade.key.A: Key.A,
    arcade.key.S: Key.S,
    arcade.key.D: Key.D,
    arcade.key.SPACE: Key.SPACE,
}


class ArcadeCanvas(Canvas):
    """Canvas backed by Arcade's immediate-mode shape calls.

    World coordinates have y growing downward; Arcade's grows upward, so
    every point is flipped against the canvas height on the way out.
    """

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.clear_color = (0, 0, 0)

    def _flip(self, points):
        return [(x, self.height - y) for x, y in points]

    def _emit_clear(self, corners):
        arcade.draw_polygon_filled(self._flip(corners), self.clear_color)

    def _emit_polygon(self, corners, color):
        arcade.draw_polygon_filled(self._flip(corners), color)

    def _emit_circle(self, x, y, radius, color):
        arcade.draw_circle_filled(x, self.height - y, radius, color)


class FieldWindow(arcade.Window):
    """Arcade window that hosts the simulation"""

    def __init__(
        self,
        width: int = WINDOW_CONFIG["width"],
        height: int = WINDOW_CONFIG["height"],
        seed: Optional[int] = None,
        fps: int = WINDOW_CONFIG["fps"],
        clock: Callable[[], float] = now_ms,
    ):
        # Validate the surface before asking the OS for a window
        canvas = check_canvas(ArcadeCanvas(width, height))
        super().__init__(width, height, WINDOW_CONFIG["title"], update_rate=1 / fps)
        self.clock = clock
        self.world = World(canvas, seed=seed)
        self.background = COLORS["background"]

    def on_update(self, delta_time: float):
        self.world.update(self.clock())

    def on_draw(self):
        self.clear(color=self.background)
        self.world.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        key = ARCADE_KEYS.get(symbol)
        if key is not None:
            self.world.input_state.press(key)
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        key = ARCADE_KEYS.get(symbol)
        if key is not None:
            self.world.input_state.release(key)

    def on_deactivate(self):
        # Key-up events are lost while unfocused
        self.world.input_state.clear()


def run_window(width: int = WINDOW_CONFIG["width"], height: int = WINDOW_CONFIG["height"],
               seed: Optional[int] = None, fps: int = WINDOW_CONFIG["fps"]) -> World:
    """Open the window and run until it is closed"""
    window = FieldWindow(width, height, seed=seed, fps=fps)
    logger.info("Window opened at %d FPS", fps)
    arcade.run()
    return window.world
