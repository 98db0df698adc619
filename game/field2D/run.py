"""
Entry point for the asteroid field simulation

Run:
    python -m game.field2D.run
    python -m game.field2D.run --headless --frames 2000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from game.configs.field_config import WINDOW_CONFIG
from .canvas import Canvas, CanvasUnavailableError, RecordingCanvas
from .controls import Key
from .world import World

logger = logging.getLogger(__name__)


def run_headless(
    frames: int = WINDOW_CONFIG["headless_frames"],
    seed: Optional[int] = None,
    width: int = WINDOW_CONFIG["width"],
    height: int = WINDOW_CONFIG["height"],
    fps: int = WINDOW_CONFIG["fps"],
    held_keys: Iterable[Key] = (),
    canvas: Optional[Canvas] = None,
    draw: bool = True,
) -> World:
    """Run the simulation without a display on a simulated clock.

    Args:
        frames: Number of frames to simulate
        seed: Seed for the world's random generator
        held_keys: Keys held down for the whole run
        canvas: Render surface; defaults to a RecordingCanvas holding only
            the most recent ops
        draw: Whether to draw after each update
    """
    if canvas is None:
        canvas = RecordingCanvas(width, height, keep=512)
    world = World(canvas, seed=seed)
    for key in held_keys:
        world.input_state.press(key)

    frame_ms = 1000.0 / fps
    log_every = WINDOW_CONFIG["log_every"]
    for i in range(frames):
        now = i * frame_ms
        if draw:
            world.step(now)
        else:
            world.update(now)
        if log_every and (i + 1) % log_every == 0:
            logger.info("frame %d: %s", i + 1, world.stats())

    return world


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Asteroid field simulation")
    parser.add_argument("--width", type=int, default=WINDOW_CONFIG["width"],
                        help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_CONFIG["height"],
                        help="Canvas height in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed")
    parser.add_argument("--fps", type=int, default=WINDOW_CONFIG["fps"],
                        help="Frames per second")
    parser.add_argument("--headless", action="store_true",
                        help="Simulate without opening a window")
    parser.add_argument("--frames", type=int, default=WINDOW_CONFIG["headless_frames"],
                        help="Frames to simulate in headless mode")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.headless:
            print(f"\n{'='*60}")
            print(f"Simulating {args.frames:,} frames headless ({args.width}x{args.height})")
            print(f"{'='*60}\n")
            world = run_headless(args.frames, seed=args.seed,
                                 width=args.width, height=args.height, fps=args.fps)
            ship = world.ship
            print(f"Final: {world.stats()}")
            print(f"Ship at ({ship.position.x:.1f}, {ship.position.y:.1f}), "
                  f"speed {ship.speed:.2f}")
        else:
            # Arcade needs a display and GL; only load it for windowed runs
            from .field_window import run_window
            run_window(args.width, args.height, seed=args.seed, fps=args.fps)
    except CanvasUnavailableError as e:
        logger.error("Cannot start: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
