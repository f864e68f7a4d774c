"""
Oxygen tank spawning and pickup.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import Iterator, List, Optional

from .vector import Vec2
from .entities import OxygenTank
from .constants import (
    CANVAS_HEIGHT, TANK_PICKUP_RADIUS, TANK_SPAWN_SPACING, TANK_SPAWN_JITTER,
    TANK_FIRST_OFFSET, TANK_VERTICAL_JITTER, TANK_DESPAWN_DISTANCE
)

logger = logging.getLogger(__name__)


class TankSpawner:
    """
    Owns the active oxygen tanks of a run.

    Spawn policy:
    - a new tank appears when none are active, or when the player has moved
      more than TANK_SPAWN_SPACING past the most recently spawned tank
    - the first tank of a run goes TANK_FIRST_OFFSET ahead of the player;
      every later one goes at least TANK_SPAWN_SPACING past the previous one

    The last spawn position is remembered even after that tank is picked
    up, so spacing holds across pickups.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._tanks: List[OxygenTank] = []
        self.last_spawn_x: Optional[float] = None

    def reset(self) -> None:
        self._tanks = []
        self.last_spawn_x = None

    @property
    def tanks(self) -> List[OxygenTank]:
        return list(self._tanks)

    def spawn(self, player_x: float) -> OxygenTank:
        """Spawn one tank according to the placement rule."""
        if self.last_spawn_x is None:
            x = player_x + TANK_FIRST_OFFSET
        else:
            x = self.last_spawn_x + TANK_SPAWN_SPACING + self.rng.random() * TANK_SPAWN_JITTER

        y = CANVAS_HEIGHT / 2 + (self.rng.random() - 0.5) * 2 * TANK_VERTICAL_JITTER

        tank = OxygenTank(Vec2(x, y))
        self._tanks.append(tank)
        self.last_spawn_x = x
        logger.debug(f"Spawned oxygen tank at ({x:.1f}, {y:.1f})")
        return tank

    def should_spawn(self, player_x: float) -> bool:
        if not self._tanks or self.last_spawn_x is None:
            return True
        return player_x - self.last_spawn_x > TANK_SPAWN_SPACING

    def maybe_spawn(self, player_x: float) -> Optional[OxygenTank]:
        """Spawn a tank if the policy calls for one. Returns the new tank or None."""
        if self.should_spawn(player_x):
            return self.spawn(player_x)
        return None

    def collect(self, player_position: Vec2, radius: float = TANK_PICKUP_RADIUS) -> List[OxygenTank]:
        """
        Remove and return every tank strictly within `radius` of the player.
        Collected tanks come back nearest first; ties keep spawn order.
        """
        in_reach: List[OxygenTank] = []
        remaining: List[OxygenTank] = []
        for tank in self._tanks:
            if tank.position.distance_to(player_position) < radius:
                in_reach.append(tank)
            else:
                remaining.append(tank)

        self._tanks = remaining
        in_reach.sort(key=lambda t: t.position.distance_to(player_position))
        return in_reach

    def discard_behind(self, player_x: float, distance: float = TANK_DESPAWN_DISTANCE) -> int:
        """
        Drop tanks more than `distance` behind the player. Returns how many went.
        last_spawn_x is untouched, so spacing of the next spawn is unaffected.
        """
        kept = [tank for tank in self._tanks if player_x - tank.x <= distance]
        dropped = len(self._tanks) - len(kept)
        if dropped:
            self._tanks = kept
            logger.debug(f"Dropped {dropped} missed tank(s) behind x={player_x:.1f}")
        return dropped

    def __iter__(self) -> Iterator[OxygenTank]:
        return iter(self._tanks)

    def __len__(self) -> int:
        return len(self._tanks)
