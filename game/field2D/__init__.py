"""2D asteroid field simulation - ship, particles, asteroids and bullets"""

from .canvas import Canvas, CanvasUnavailableError, RecordingCanvas
from .controls import BINDINGS, Control, InputState, Key
from .entities import Asteroid, Bullet, Particle, Ship, Vector2
from .world import FrameContext, World

__all__ = [
    'World', 'FrameContext',
    'Vector2', 'Particle', 'Asteroid', 'Bullet', 'Ship',
    'InputState', 'Key', 'Control', 'BINDINGS',
    'Canvas', 'RecordingCanvas', 'CanvasUnavailableError',
]
