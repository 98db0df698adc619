"""
Simulation entity dataclasses
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from game.configs.field_config import (
    ASTEROID_CONFIG,
    BULLET_CONFIG,
    COLORS,
    PARTICLE_CONFIG,
    SHIP_CONFIG,
)
from .controls import Control
from .utils import heading

if TYPE_CHECKING:
    from .canvas import Canvas
    from .world import FrameContext


@dataclass
class Vector2:
    """Mutable 2D position or velocity"""
    x: float
    y: float

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)


@dataclass
class Particle:
    """Background star that scrolls down and wraps to the top"""
    position: Vector2
    speed: float
    radius: float

    @classmethod
    def random(cls, position: Vector2, rng: np.random.Generator) -> "Particle":
        # Nearer particles are both faster and larger
        distance = rng.random() + PARTICLE_CONFIG["distance_offset"]
        return cls(
            position=position,
            speed=distance * PARTICLE_CONFIG["speed_scale"],
            radius=distance * PARTICLE_CONFIG["radius_scale"],
        )

    def update(self, ctx: "FrameContext"):
        self.position.y += self.speed
        if self.position.y > ctx.height + self.radius:
            self.position.y = -self.radius

    def draw(self, canvas: "Canvas"):
        canvas.fill_style = COLORS["particle"]
        canvas.fill_circle(self.position.x, self.position.y, self.radius)


@dataclass
class Asteroid:
    """Obstacle falling at constant speed"""
    position: Vector2
    speed: float
    radius: float

    @classmethod
    def random(cls, position: Vector2, rng: np.random.Generator) -> "Asteroid":
        return cls(
            position=position,
            speed=float(rng.uniform(*ASTEROID_CONFIG["speed_range"])),
            radius=float(rng.uniform(*ASTEROID_CONFIG["radius_range"])),
        )

    def update(self, ctx: "FrameContext"):
        self.position.y += self.speed

    def is_out_of_bounds(self, width: float, height: float) -> bool:
        # Only the bottom edge matters; asteroids never move sideways or up
        return self.position.y > height + self.radius

    def draw(self, canvas: "Canvas"):
        canvas.fill_style = COLORS["asteroid"]
        canvas.fill_circle(self.position.x, self.position.y, self.radius)


@dataclass
class Bullet:
    """Projectile fired by the ship, pulled down by gravity"""
    position: Vector2
    angle: float
    velocity: Optional[Vector2] = None

    def __post_init__(self):
        if self.velocity is None:
            dx, dy = heading(self.angle)
            speed = BULLET_CONFIG["speed"]
            self.velocity = Vector2(dx * speed, dy * speed)

    def update(self, ctx: "FrameContext"):
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y
        self.velocity.y += BULLET_CONFIG["gravity"]

    def is_out_of_bounds(self, width: float, height: float) -> bool:
        return (self.position.y > height
                or self.position.y < 0
                or self.position.x > width
                or self.position.x < 0)

    def draw(self, canvas: "Canvas"):
        canvas.save()
        canvas.fill_style = COLORS["bullet"]
        canvas.translate(self.position.x, self.position.y)
        canvas.rotate(self.angle)
        canvas.fill_rect(*BULLET_CONFIG["rect"])
        canvas.restore()


@dataclass
class Ship:
    """Player ship steered by the keyboard"""
    position: Vector2
    velocity: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    angle: float = SHIP_CONFIG["start_angle"]
    cooldown_at: float = 0.0  # ms timestamp after which firing is allowed

    def update(self, ctx: "FrameContext"):
        self.translate()
        self.apply_friction()

        controls = ctx.input_state
        if controls.is_active(Control.THRUST):
            self.accelerate(SHIP_CONFIG["thrust"])
        if controls.is_active(Control.REVERSE):
            self.accelerate(SHIP_CONFIG["reverse_thrust"])

        if controls.is_active(Control.ROTATE_LEFT):
            self.angle -= SHIP_CONFIG["rotation_speed"]
        if controls.is_active(Control.ROTATE_RIGHT):
            self.angle += SHIP_CONFIG["rotation_speed"]

        if controls.is_active(Control.FIRE) and self.can_fire(ctx.now):
            self.shoot(ctx)

    def translate(self):
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y
        # "Gravity"
        self.velocity.y += SHIP_CONFIG["gravity"]

    def apply_friction(self):
        self.velocity.x *= SHIP_CONFIG["friction"]
        self.velocity.y *= SHIP_CONFIG["friction"]

    def accelerate(self, thrust: float):
        dx, dy = heading(self.angle)
        self.velocity.x += dx * thrust
        self.velocity.y += dy * thrust

    def can_fire(self, now: float) -> bool:
        return now >= self.cooldown_at

    def shoot(self, ctx: "FrameContext") -> Bullet:
        self.cooldown_at = ctx.now + SHIP_CONFIG["fire_cooldown_ms"]
        angle = self.angle + (ctx.rng.random() - 0.5) * SHIP_CONFIG["fire_jitter"]
        bullet = Bullet(self.position.copy(), float(angle))
        ctx.bullets.append(bullet)
        return bullet

    @property
    def speed(self) -> float:
        return math.hypot(self.velocity.x, self.velocity.y)

    def draw(self, canvas: "Canvas"):
        canvas.save()
        canvas.fill_style = COLORS["ship"]
        canvas.translate(self.position.x, self.position.y)
        canvas.rotate(self.angle)
        canvas.fill_rect(-8, -2, 24, 4)  # hull
        canvas.fill_rect(-4, -8, 8, 16)  # wings
        canvas.restore()
