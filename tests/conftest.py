from __future__ import annotations

import numpy as np
import pytest

from game.field2D import InputState, RecordingCanvas, World
from game.field2D.world import FrameContext


@pytest.fixture()
def canvas() -> RecordingCanvas:
    return RecordingCanvas(512, 512)


@pytest.fixture()
def world(canvas) -> World:
    """Seeded world that never spawns asteroids on its own"""
    return World(canvas, seed=1234, config={"asteroid_spawn_chance": 0.0})


@pytest.fixture()
def make_ctx():
    """Build a FrameContext for driving single entities outside a World"""

    def _make(now: float = 0.0, held=(), width: float = 512, height: float = 512,
              bullets=None, seed: int = 0) -> FrameContext:
        input_state = InputState()
        for key in held:
            input_state.press(key)
        return FrameContext(
            now=now,
            width=width,
            height=height,
            input_state=input_state,
            bullets=[] if bullets is None else bullets,
            rng=np.random.default_rng(seed),
        )

    return _make
