"""
2D vector value type.
NO UI DEPENDENCIES.
"""
import math
from dataclasses import dataclass


@dataclass
class Vec2:
    """A mutable (x, y) pair used for positions and velocities."""
    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: 'Vec2') -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def copy(self) -> 'Vec2':
        return Vec2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y
