"""
Keyboard state for ship control
"""

from enum import Enum
from typing import Dict, Iterable, Set, Tuple


class Key(Enum):
    """Key symbols the simulation understands"""
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    SPACE = " "


class Control(Enum):
    """Ship actions, each bound to one or more keys"""
    THRUST = "thrust"
    REVERSE = "reverse"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    FIRE = "fire"


BINDINGS: Dict[Control, Tuple[Key, ...]] = {
    Control.THRUST: (Key.ARROW_UP, Key.W),
    Control.REVERSE: (Key.ARROW_DOWN, Key.S),
    Control.ROTATE_LEFT: (Key.ARROW_LEFT, Key.A),
    Control.ROTATE_RIGHT: (Key.ARROW_RIGHT, Key.D),
    Control.FIRE: (Key.SPACE,),
}


class InputState:
    """Set of currently held keys, fed by key-down/key-up events"""

    def __init__(self):
        self._held: Set[Key] = set()

    def press(self, key: Key):
        self._held.add(key)

    def release(self, key: Key):
        self._held.discard(key)

    def is_held(self, key: Key) -> bool:
        return key in self._held

    def any_held(self, keys: Iterable[Key]) -> bool:
        return any(k in self._held for k in keys)

    def is_active(self, control: Control) -> bool:
        """True if any key bound to control is held"""
        return self.any_held(BINDINGS[control])

    def clear(self):
        self._held.clear()

    @property
    def held(self) -> frozenset:
        return frozenset(self._held)

    def __len__(self) -> int:
        return len(self._held)

    def __repr__(self) -> str:
        names = sorted(k.name for k in self._held)
        return f"InputState({', '.join(names)})"
