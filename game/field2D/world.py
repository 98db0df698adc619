"""
World - owns every entity collection and advances the simulation one frame
at a time.

Frame order:
    update: ships -> particles -> asteroids -> bullets, spawn, cull
    draw:   background -> ships -> particles -> bullets -> asteroids
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from game.configs.field_config import COLORS, merged_world_config
from .canvas import Canvas, check_canvas
from .controls import InputState
from .entities import Asteroid, Bullet, Particle, Ship, Vector2
from .utils import make_rng

logger = logging.getLogger(__name__)


@dataclass
class FrameContext:
    """Per-frame state handed to every entity update"""
    now: float              # ms, monotonic
    width: float
    height: float
    input_state: InputState
    bullets: List[Bullet]   # ship appends fired bullets here
    rng: np.random.Generator


class World:
    """Simulation state and per-frame update/draw"""

    def __init__(
        self,
        canvas: Canvas,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        config: Optional[Dict[str, Any]] = None,
        input_state: Optional[InputState] = None,
    ):
        # Refuse to start without something to draw on
        self.canvas = check_canvas(canvas)
        self.config = merged_world_config(config)
        self.rng = rng if rng is not None else make_rng(seed)
        self.input_state = input_state if input_state is not None else InputState()

        self.ships: List[Ship] = []
        self.particles: List[Particle] = []
        self.asteroids: List[Asteroid] = []
        self.bullets: List[Bullet] = []
        self.frame_count = 0

        sx, sy = self.config["ship_start"]
        self.ships.append(Ship(Vector2(float(sx), float(sy))))

        for _ in range(self.config["n_particles"]):
            position = Vector2(
                float(self.rng.random() * self.width),
                float(self.rng.random() * self.height),
            )
            self.particles.append(Particle.random(position, self.rng))

        logger.info("World started: %dx%d canvas, %d particles",
                    self.width, self.height, len(self.particles))

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    @property
    def ship(self) -> Ship:
        """The player ship"""
        return self.ships[0]

    # ----------------------------
    # Update
    # ----------------------------

    def update(self, now: float):
        ctx = FrameContext(
            now=now,
            width=self.width,
            height=self.height,
            input_state=self.input_state,
            bullets=self.bullets,
            rng=self.rng,
        )

        for obj in self.ships:
            obj.update(ctx)
        for obj in self.particles:
            obj.update(ctx)
        for obj in self.asteroids:
            obj.update(ctx)
        for obj in self.bullets:
            obj.update(ctx)

        # Spawn asteroids
        if self.rng.random() < self.config["asteroid_spawn_chance"]:
            self.spawn_asteroid()

        self._remove_out_of_bounds()
        self.frame_count += 1

    def spawn_asteroid(
        self,
        x: Optional[float] = None,
        speed: Optional[float] = None,
        radius: Optional[float] = None,
    ) -> Asteroid:
        if x is None:
            x = float(self.rng.random() * self.width)
        asteroid = Asteroid.random(Vector2(x, self.config["asteroid_spawn_y"]), self.rng)
        if speed is not None:
            asteroid.speed = speed
        if radius is not None:
            asteroid.radius = radius
        self.asteroids.append(asteroid)
        logger.debug("Spawned asteroid at x=%.1f (r=%.1f, v=%.2f)",
                     x, asteroid.radius, asteroid.speed)
        return asteroid

    def _remove_out_of_bounds(self):
        # Rebuild in place so FrameContext.bullets keeps pointing at the live list
        w, h = self.width, self.height
        self.asteroids[:] = [a for a in self.asteroids if not a.is_out_of_bounds(w, h)]
        self.bullets[:] = [b for b in self.bullets if not b.is_out_of_bounds(w, h)]

    # ----------------------------
    # Draw
    # ----------------------------

    def draw(self, canvas: Optional[Canvas] = None):
        canvas = canvas if canvas is not None else self.canvas
        canvas.clear_rect(0, 0, canvas.width, canvas.height)
        canvas.fill_style = COLORS["background"]
        canvas.fill_rect(0, 0, canvas.width, canvas.height)

        for obj in self.ships:
            obj.draw(canvas)
        for obj in self.particles:
            obj.draw(canvas)
        for obj in self.bullets:
            obj.draw(canvas)
        for obj in self.asteroids:
            obj.draw(canvas)

    def step(self, now: float):
        """One full frame: update then draw"""
        self.update(now)
        self.draw()

    def stats(self) -> Dict[str, int]:
        return {
            "frame": self.frame_count,
            "num_particles": len(self.particles),
            "num_asteroids": len(self.asteroids),
            "num_bullets": len(self.bullets),
        }
