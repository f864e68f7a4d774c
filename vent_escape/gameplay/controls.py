"""
Logical input actions and the per-frame input snapshot.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, Mapping


class Action(Enum):
    """Logical actions the simulation understands."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPRINT = auto()


# Raw key names (lower case) -> logical action
KEY_BINDINGS: Dict[str, Action] = {
    'w': Action.UP,
    'arrowup': Action.UP,
    's': Action.DOWN,
    'arrowdown': Action.DOWN,
    'a': Action.LEFT,
    'arrowleft': Action.LEFT,
    'd': Action.RIGHT,
    'arrowright': Action.RIGHT,
    'shift': Action.SPRINT,
}


@dataclass(frozen=True)
class InputSnapshot:
    """
    Which actions are held during one step.
    Built by the input provider before the step; read-only afterwards.
    """
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    sprint: bool = False

    @classmethod
    def from_actions(cls, actions: Iterable[Action]) -> 'InputSnapshot':
        held = set(actions)
        return cls(
            up=Action.UP in held,
            down=Action.DOWN in held,
            left=Action.LEFT in held,
            right=Action.RIGHT in held,
            sprint=Action.SPRINT in held,
        )

    @classmethod
    def from_keys(cls, keys: Mapping[str, bool],
                  bindings: Mapping[str, Action] = KEY_BINDINGS) -> 'InputSnapshot':
        """Build a snapshot from a raw key-state table such as {'w': True, 'shift': False}."""
        return cls.from_actions(
            bindings[key.lower()]
            for key, pressed in keys.items()
            if pressed and key.lower() in bindings
        )

    @property
    def is_idle(self) -> bool:
        return not (self.up or self.down or self.left or self.right)


IDLE = InputSnapshot()
