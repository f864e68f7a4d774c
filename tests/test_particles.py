"""
Tests for the particle system.
"""
import random

import pytest
from vent_escape.gameplay.particles import Particle, ParticleSystem
from vent_escape.gameplay.vector import Vec2
from vent_escape.gameplay.constants import PARTICLE_DRAG


class TestParticle:
    """Tests for a single particle."""

    def test_moves_and_slows_down(self):
        particle = Particle(Vec2(0, 0), Vec2(2, -1), (255, 0, 0), 3)
        particle.update()

        assert particle.position.x == pytest.approx(2)
        assert particle.position.y == pytest.approx(-1)
        assert particle.velocity.x == pytest.approx(2 * PARTICLE_DRAG)
        assert particle.velocity.y == pytest.approx(-1 * PARTICLE_DRAG)
        assert particle.life == pytest.approx(0.98)

    def test_dies_on_frame_fifty(self):
        """life 1 with 0.02 decay is alive after 49 frames, dead after 50."""
        particle = Particle(Vec2(0, 0), Vec2(0, 0), (255, 0, 0), 3)
        for _ in range(49):
            particle.update()
        assert particle.is_alive

        particle.update()
        assert not particle.is_alive
        assert particle.life <= 0


class TestParticleSystem:
    """Tests for ParticleSystem."""

    def test_emit_count(self):
        system = ParticleSystem(random.Random(1))
        spawned = system.emit(Vec2(10, 20), (0, 255, 136), 20)
        assert len(spawned) == 20
        assert len(system) == 20

    def test_emit_ranges(self):
        """Velocity within [-2, 2] per axis, size within [2, 6], full life."""
        system = ParticleSystem(random.Random(2))
        for particle in system.emit(Vec2(10, 20), (0, 255, 136), 200):
            assert -2 <= particle.velocity.x <= 2
            assert -2 <= particle.velocity.y <= 2
            assert 2 <= particle.size <= 6
            assert particle.life == 1.0
            assert particle.color == (0, 255, 136)

    def test_particles_do_not_share_position(self):
        """Each particle gets its own copy of the emit position."""
        origin = Vec2(10, 20)
        system = ParticleSystem(random.Random(3))
        system.emit(origin, (0, 0, 0), 2)
        system.update()
        assert origin == Vec2(10, 20)

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            ParticleSystem(random.Random(1)).emit(Vec2(0, 0), (0, 0, 0), -1)

    def test_removed_after_lifetime(self):
        system = ParticleSystem(random.Random(4))
        system.emit(Vec2(0, 0), (0, 0, 0), 5)

        for _ in range(49):
            system.update()
        assert len(system) == 5

        system.update()
        assert len(system) == 0

    def test_clear(self):
        system = ParticleSystem(random.Random(5))
        system.emit(Vec2(0, 0), (0, 0, 0), 5)
        system.clear()
        assert system.particles == []
