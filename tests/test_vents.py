"""
Tests for vent generation and collision.
"""
import random

import pytest
from vent_escape.gameplay.vents import Wall, VentSystem, generate_vents
from vent_escape.gameplay.constants import (
    CANVAS_HEIGHT, VENT_SEGMENT_COUNT, VENT_SEGMENT_LENGTH, VENT_WALL_THICKNESS, VENT_START_X,
    VENT_STRAIGHT_SEGMENTS, PLAYER_SIZE, PLAYER_START_X, PLAYER_START_Y
)


class TestWall:
    """Tests for Wall overlap."""

    def test_overlap_inside(self):
        """Box centred inside the wall overlaps."""
        wall = Wall(0, 0, 100, 50)
        assert wall.overlaps_box(50, 25, 10)

    def test_touching_edge_is_not_overlap(self):
        """Boxes that only touch an edge do not overlap."""
        wall = Wall(0, 0, 100, 50)
        # Box spans x in [100, 110]
        assert not wall.overlaps_box(105, 25, 10)
        # Box spans y in [-10, 0]
        assert not wall.overlaps_box(50, -5, 10)

    def test_partial_overlap(self):
        """A box poking 1 unit into the wall overlaps."""
        wall = Wall(0, 0, 100, 50)
        assert wall.overlaps_box(104, 25, 10)

    def test_right_and_bottom(self):
        wall = Wall(10, 20, 30, 40)
        assert wall.right == 40
        assert wall.bottom == 60


class TestGenerateVents:
    """Tests for procedural generation."""

    def test_two_walls_per_segment(self):
        """Each segment adds a top and a bottom wall."""
        walls = generate_vents(random.Random(1))
        assert len(walls) == VENT_SEGMENT_COUNT * 2

    def test_first_segment_at_start(self):
        """First segment starts at the cursor origin, centred on the canvas."""
        walls = generate_vents(random.Random(1))
        top, bottom = walls[0], walls[1]

        assert top.x == VENT_START_X
        assert bottom.x == VENT_START_X
        assert top.y == CANVAS_HEIGHT / 2 - CANVAS_HEIGHT / 4
        assert bottom.y == CANVAS_HEIGHT / 2 + CANVAS_HEIGHT / 4
        assert top.width == VENT_SEGMENT_LENGTH
        assert top.height == VENT_WALL_THICKNESS

    def test_segments_are_contiguous(self):
        """Segments follow each other with no gaps."""
        walls = generate_vents(random.Random(2))
        xs = [w.x for w in walls[::2]]
        for i in range(1, len(xs)):
            assert xs[i] == pytest.approx(xs[i - 1] + VENT_SEGMENT_LENGTH)

    def test_centreline_stays_in_bounds(self):
        """The tunnel centre never leaves the middle third of the canvas."""
        walls = generate_vents(random.Random(3), turn_chance=1.0, segment_count=500)
        quarter = CANVAS_HEIGHT / 4
        for top in walls[::2]:
            centre = top.y + quarter
            assert CANVAS_HEIGHT / 3 - 1e-9 <= centre <= CANVAS_HEIGHT * 2 / 3 + 1e-9

    def test_gap_between_walls_is_constant(self):
        """Top and bottom walls of a segment always sit half a canvas apart."""
        walls = generate_vents(random.Random(4), turn_chance=1.0)
        for top, bottom in zip(walls[::2], walls[1::2]):
            assert bottom.y - top.y == pytest.approx(CANVAS_HEIGHT / 2)
            assert top.x == bottom.x

    def test_no_turns_gives_straight_tunnel(self):
        """With turn_chance 0 every segment is at the same height."""
        walls = generate_vents(random.Random(5), turn_chance=0.0)
        assert len({w.y for w in walls[::2]}) == 1

    def test_turn_offset_is_bounded(self):
        """Consecutive segments shift by at most the max turn offset."""
        walls = generate_vents(random.Random(6), turn_chance=1.0, max_turn_offset=50)
        tops = [w.y for w in walls[::2]]
        for a, b in zip(tops, tops[1:]):
            assert abs(b - a) <= 50

    def test_opening_segments_are_level(self):
        """The first segments stay at the canvas centre even when every segment turns."""
        walls = generate_vents(random.Random(8), turn_chance=1.0)
        tops = [w.y for w in walls[::2]]
        assert set(tops[:VENT_STRAIGHT_SEGMENTS]) == {CANVAS_HEIGHT / 2 - CANVAS_HEIGHT / 4}
        assert tops[VENT_STRAIGHT_SEGMENTS] != tops[0]

    def test_straight_segments_zero_turns_right_away(self):
        walls = generate_vents(random.Random(8), turn_chance=1.0, straight_segments=0)
        assert walls[2].y != walls[0].y

    def test_same_seed_same_vents(self):
        """Generation is reproducible with a seeded rng."""
        assert generate_vents(random.Random(7)) == generate_vents(random.Random(7))

    def test_zero_segments(self):
        assert generate_vents(random.Random(1), segment_count=0) == []

    @pytest.mark.parametrize("kwargs", [
        {"segment_count": -1},
        {"segment_length": 0},
        {"wall_thickness": -5},
        {"turn_chance": 1.5},
        {"straight_segments": -1},
        {"vertical_bounds": (500, 100)},
    ])
    def test_invalid_parameters(self, kwargs):
        """Nonsense parameters are rejected."""
        with pytest.raises(ValueError):
            generate_vents(random.Random(1), **kwargs)


class TestVentSystem:
    """Tests for VentSystem collision queries."""

    def test_empty_system_never_collides(self):
        vents = VentSystem()
        assert not vents.check_collision(0, 0, 100)
        assert len(vents) == 0

    def test_collision_with_any_wall(self):
        vents = VentSystem([Wall(0, 0, 10, 10), Wall(100, 100, 10, 10)])
        assert vents.check_collision(105, 105, 2)
        assert vents.check_collision(5, 5, 2)
        assert not vents.check_collision(50, 50, 2)

    def test_player_start_is_clear(self):
        """A straight tunnel leaves room for the player at the canvas centre."""
        vents = VentSystem.generate(random.Random(1), turn_chance=0.0)
        assert not vents.check_collision(100, CANVAS_HEIGHT / 2, 16)

    @pytest.mark.parametrize("seed", range(200))
    def test_spawn_point_clear_for_any_seed(self, seed):
        """Even a tunnel that turns on every segment leaves the spawn point open."""
        vents = VentSystem.generate(random.Random(seed), turn_chance=1.0)
        assert not vents.check_collision(PLAYER_START_X, PLAYER_START_Y, PLAYER_SIZE)

    def test_walls_are_read_only(self):
        vents = VentSystem.generate(random.Random(1))
        assert isinstance(vents.walls, tuple)

    def test_walls_in_view(self):
        """Only walls near the horizontal view range are returned."""
        vents = VentSystem([Wall(0, 0, 10, 10), Wall(500, 0, 10, 10), Wall(2000, 0, 10, 10)])
        visible = list(vents.walls_in_view(400, 600, margin=100))
        assert visible == [Wall(500, 0, 10, 10)]
