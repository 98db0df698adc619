"""
Utility functions for simulation mechanics
"""

from __future__ import annotations
import math
import time
from typing import Tuple, Optional
import numpy as np


def heading(angle: float) -> Tuple[float, float]:
    """Unit vector pointing along angle (radians, y axis grows downward)"""
    return math.cos(angle), math.sin(angle)


def rotate_point(x: float, y: float, angle: float) -> Tuple[float, float]:
    """Rotate a point about the origin"""
    c = math.cos(angle)
    s = math.sin(angle)
    return x * c - y * s, x * s + y * c


def now_ms() -> float:
    """Monotonic clock in milliseconds"""
    return time.monotonic() * 1000.0


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator that drives all world randomness"""
    return np.random.default_rng(seed)

