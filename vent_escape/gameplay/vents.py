"""
Vent system - the procedurally generated tunnel the player crawls through.
NO UI DEPENDENCIES.
"""
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .constants import (
    CANVAS_HEIGHT, VENT_SEGMENT_COUNT, VENT_SEGMENT_LENGTH, VENT_WALL_THICKNESS,
    VENT_TURN_CHANCE, VENT_START_X, VENT_MAX_TURN_OFFSET, VENT_STRAIGHT_SEGMENTS
)


@dataclass(frozen=True)
class Wall:
    """An axis-aligned wall rectangle. (x, y) is the top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps_box(self, cx: float, cy: float, size: float) -> bool:
        """Check if a square of side `size` centred on (cx, cy) overlaps this wall."""
        half = size / 2
        return (
            cx + half > self.x and
            cx - half < self.right and
            cy + half > self.y and
            cy - half < self.bottom
        )


class VentSystem:
    """
    The collision geometry of one run: a top and a bottom wall per segment.

    Coordinate system:
    - x increases to the right (the direction of escape)
    - y increases downward

    Walls are read-only once the system is built.
    """

    def __init__(self, walls: Sequence[Wall] = ()):
        self._walls: Tuple[Wall, ...] = tuple(walls)

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None, **kwargs) -> 'VentSystem':
        """Build a vent system from freshly generated walls."""
        return cls(generate_vents(rng, **kwargs))

    @property
    def walls(self) -> Tuple[Wall, ...]:
        return self._walls

    def check_collision(self, x: float, y: float, size: float) -> bool:
        """
        Check if a square of side `size` centred on (x, y) hits any wall.
        Touching edges do not count as a collision.
        """
        return any(wall.overlaps_box(x, y, size) for wall in self._walls)

    def walls_in_view(self, left: float, right: float, margin: float = 100.0) -> Iterator[Wall]:
        """Iterate over walls that overlap the horizontal range [left, right] +/- margin."""
        for wall in self._walls:
            if wall.right < left - margin or wall.x > right + margin:
                continue
            yield wall

    def __len__(self) -> int:
        return len(self._walls)

    def __repr__(self) -> str:
        return f"VentSystem({len(self._walls)} walls)"


def generate_vents(
    rng: Optional[random.Random] = None,
    segment_count: int = VENT_SEGMENT_COUNT,
    segment_length: float = VENT_SEGMENT_LENGTH,
    wall_thickness: float = VENT_WALL_THICKNESS,
    turn_chance: float = VENT_TURN_CHANCE,
    canvas_height: float = CANVAS_HEIGHT,
    vertical_bounds: Optional[Tuple[float, float]] = None,
    start_x: float = VENT_START_X,
    max_turn_offset: float = VENT_MAX_TURN_OFFSET,
    straight_segments: int = VENT_STRAIGHT_SEGMENTS,
) -> List[Wall]:
    """
    Generate the tunnel walls, two per segment (top first, then bottom).

    A cursor walks right one segment at a time. After each segment the
    tunnel centreline shifts by up to +/- max_turn_offset with probability
    turn_chance, then gets clamped to vertical_bounds (by default the middle
    third of the canvas).

    The first straight_segments segments stay level at the canvas centre so
    the spawn point is never inside a wall. No rng draws are made for them.
    """
    if segment_count < 0:
        raise ValueError(f"segment_count must be >= 0, got {segment_count}")
    if segment_length <= 0:
        raise ValueError(f"segment_length must be > 0, got {segment_length}")
    if wall_thickness <= 0:
        raise ValueError(f"wall_thickness must be > 0, got {wall_thickness}")
    if not 0.0 <= turn_chance <= 1.0:
        raise ValueError(f"turn_chance must be within [0, 1], got {turn_chance}")
    if straight_segments < 0:
        raise ValueError(f"straight_segments must be >= 0, got {straight_segments}")

    if vertical_bounds is None:
        vertical_bounds = (canvas_height / 3, canvas_height * 2 / 3)
    low, high = vertical_bounds
    if low > high:
        raise ValueError(f"vertical_bounds are inverted: {vertical_bounds}")

    rng = rng if rng is not None else random.Random()
    half_gap = canvas_height / 4

    walls: List[Wall] = []
    x = start_x
    y = canvas_height / 2

    for i in range(segment_count):
        walls.append(Wall(x, y - half_gap, segment_length, wall_thickness))
        walls.append(Wall(x, y + half_gap, segment_length, wall_thickness))

        x += segment_length
        if i + 1 < straight_segments:
            continue

        # Occasional vertical shift
        if rng.random() < turn_chance:
            y += (rng.random() - 0.5) * 2 * max_turn_offset
            y = max(low, min(high, y))

    return walls
