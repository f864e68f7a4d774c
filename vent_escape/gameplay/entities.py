"""
Moving things in the vents: Player, Monster, OxygenTank.
NO UI DEPENDENCIES.
"""
import math
import random
from dataclasses import dataclass
from typing import List, Optional

from .vector import Vec2
from .vents import VentSystem
from .constants import (
    PLAYER_SIZE, MONSTER_SIZE, TANK_SIZE, TANK_PULSE_STEP,
    TENTACLE_COUNT, TENTACLE_MIN_LENGTH, TENTACLE_LENGTH_JITTER, TENTACLE_PHASE_STEP
)


class Player:
    """
    The player crawling through the vents.

    facing_angle points the flashlight. It only changes when the player
    tries to move, so it keeps the last heading while standing still.
    """

    def __init__(self, x: float, y: float, size: float = PLAYER_SIZE):
        self.position = Vec2(x, y)
        self.size = size
        self.facing_angle: float = 0.0

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def move(self, dx: float, dy: float, vents: VentSystem) -> None:
        """
        Move by (dx, dy), resolving each axis separately against the vents.

        X is tried first at the current Y, then Y at the (possibly updated) X.
        A diagonal move into a wall therefore slides along it instead of
        stopping dead.
        """
        new_x = self.position.x + dx
        if not vents.check_collision(new_x, self.position.y, self.size):
            self.position.x = new_x

        new_y = self.position.y + dy
        if not vents.check_collision(self.position.x, new_y, self.size):
            self.position.y = new_y

        # Heading follows intent, even when the wall blocked the move
        if dx != 0 or dy != 0:
            self.facing_angle = math.atan2(dy, dx)

    def __repr__(self) -> str:
        return f"Player(x={self.x:.1f}, y={self.y:.1f})"


@dataclass
class Tentacle:
    """A decorative appendage. No collision semantics."""
    angle: float
    length: float
    phase: float

    def wave_offset(self, amplitude: float = 5.0) -> float:
        return math.sin(self.phase) * amplitude


class Monster:
    """
    The thing in the vents.

    Seeks the player in a straight line and ignores walls entirely.
    """

    def __init__(self, x: float, y: float, rng: Optional[random.Random] = None,
                 size: float = MONSTER_SIZE):
        rng = rng if rng is not None else random.Random()
        self.position = Vec2(x, y)
        self.size = size
        self.tentacles: List[Tentacle] = [
            Tentacle(
                angle=(math.pi * 2 / TENTACLE_COUNT) * i,
                length=TENTACLE_MIN_LENGTH + rng.random() * TENTACLE_LENGTH_JITTER,
                phase=rng.random() * math.pi * 2,
            )
            for i in range(TENTACLE_COUNT)
        ]

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def update(self, target: Vec2, speed: float) -> None:
        """Step exactly `speed` units towards target, then wiggle the tentacles."""
        dx = target.x - self.position.x
        dy = target.y - self.position.y
        dist = math.hypot(dx, dy)

        if dist > 0:
            self.position.x += (dx / dist) * speed
            self.position.y += (dy / dist) * speed

        for tentacle in self.tentacles:
            tentacle.phase += TENTACLE_PHASE_STEP

    def distance_to(self, point: Vec2) -> float:
        return self.position.distance_to(point)

    def __repr__(self) -> str:
        return f"Monster(x={self.x:.1f}, y={self.y:.1f})"


@dataclass
class OxygenTank:
    """
    An oxygen pickup.
    The pulse phase is cosmetic and only advances when the tank is drawn.
    """
    position: Vec2
    size: float = TANK_SIZE
    pulse: float = 0.0

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def advance_pulse(self) -> float:
        """Advance the glow pulse and return the new phase."""
        self.pulse += TANK_PULSE_STEP
        return self.pulse
