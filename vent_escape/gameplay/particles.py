"""
Particle system - short-lived visual feedback.
NO UI DEPENDENCIES.
"""
import random
from typing import Iterator, List, Optional, Tuple

from .vector import Vec2
from .constants import (
    PARTICLE_MAX_SPEED, PARTICLE_MIN_SIZE, PARTICLE_SIZE_JITTER,
    PARTICLE_DRAG, PARTICLE_LIFE_DECAY
)

Color = Tuple[int, int, int]


class Particle:
    """
    A single particle.

    life runs from 1 down to 0. It is derived from the frame age so that
    a particle dies on exactly the frame its decay adds up to 1.
    """

    def __init__(self, position: Vec2, velocity: Vec2, color: Color, size: float,
                 decay: float = PARTICLE_LIFE_DECAY):
        self.position = position
        self.velocity = velocity
        self.color = color
        self.size = size
        self.decay = decay
        self.age: int = 0
        self.life: float = 1.0

    @property
    def is_alive(self) -> bool:
        return self.life > 0

    def update(self) -> None:
        self.position.x += self.velocity.x
        self.position.y += self.velocity.y
        self.velocity.x *= PARTICLE_DRAG
        self.velocity.y *= PARTICLE_DRAG
        self.age += 1
        self.life = 1.0 - self.age * self.decay

    def __repr__(self) -> str:
        return f"Particle(x={self.position.x:.1f}, y={self.position.y:.1f}, life={self.life:.2f})"


class ParticleSystem:
    """Fire-and-forget particles. No pooling; dead particles are dropped each frame."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._particles: List[Particle] = []

    def emit(self, position: Vec2, color: Color, count: int) -> List[Particle]:
        """Spawn `count` particles at position with random velocity and size."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        spawned = []
        for _ in range(count):
            velocity = Vec2(
                (self.rng.random() - 0.5) * 2 * PARTICLE_MAX_SPEED,
                (self.rng.random() - 0.5) * 2 * PARTICLE_MAX_SPEED,
            )
            size = self.rng.random() * PARTICLE_SIZE_JITTER + PARTICLE_MIN_SIZE
            spawned.append(Particle(position.copy(), velocity, color, size))

        self._particles.extend(spawned)
        return spawned

    def update(self) -> None:
        """Age every particle one frame, then drop the dead ones."""
        for particle in self._particles:
            particle.update()
        self._particles = [p for p in self._particles if p.is_alive]

    def clear(self) -> None:
        self._particles = []

    @property
    def particles(self) -> List[Particle]:
        return list(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def __len__(self) -> int:
        return len(self._particles)
