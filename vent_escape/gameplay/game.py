"""
Main Game class - runs one run of Vent Escape, one frame at a time.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .vector import Vec2
from .vents import VentSystem
from .entities import Player, Monster, OxygenTank
from .particles import ParticleSystem, Particle
from .tanks import TankSpawner
from .controls import InputSnapshot, IDLE
from .clock import Clock, SystemClock
from .constants import (
    PLAYER_SPEED, SPRINT_MULTIPLIER, PLAYER_START_X, PLAYER_START_Y,
    OXYGEN_MAX, OXYGEN_DRAIN_RATE, SPRINT_DRAIN_MULTIPLIER, TANK_RESTORE,
    LOW_OXYGEN_THRESHOLD, OXYGEN_WARNING_COOLDOWN_MS, OXYGEN_WARNING_DURATION_MS,
    OXYGEN_PICKUP_DURATION_MS, FLASH_INTENSITY, FLASH_DECAY,
    MONSTER_BASE_SPEED, MONSTER_SPEED_INCREASE, MONSTER_MAX_SPEED,
    MONSTER_START_DISTANCE, CAPTURE_RADIUS,
    PICKUP_PARTICLE_COUNT, PICKUP_PARTICLE_COLOR,
    CAMERA_LEAD_X, CAMERA_OFFSET_Y, UNITS_PER_METER
)

logger = logging.getLogger(__name__)

DIAGONAL_FACTOR = math.sqrt(2) / 2

SUFFOCATED_MESSAGE = "You suffocated in the darkness..."
CAUGHT_MESSAGE = "It caught you..."


class GamePhase(Enum):
    """Current phase of the game."""
    NOT_STARTED = auto()  # Title screen, nothing simulated yet
    RUNNING = auto()      # Crawling
    GAME_OVER = auto()    # Suffocated or caught


class GameOverReason(Enum):
    SUFFOCATED = auto()
    CAUGHT = auto()


GAME_OVER_MESSAGES = {
    GameOverReason.SUFFOCATED: SUFFOCATED_MESSAGE,
    GameOverReason.CAUGHT: CAUGHT_MESSAGE,
}


@dataclass
class Camera:
    """Top-left corner of the view in world coordinates."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class SimulationState:
    """The scalar state of a run."""
    oxygen: float = OXYGEN_MAX
    distance: float = 0.0
    camera: Camera = field(default_factory=Camera)
    running: bool = False
    flash_intensity: float = 0.0

    @property
    def distance_meters(self) -> int:
        return int(self.distance // UNITS_PER_METER)


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class MessageEvent(GameEvent):
    """A transient on-screen message."""
    text: str
    duration_ms: int


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


@dataclass
class TankCollectedEvent(GameEvent):
    """The player picked up an oxygen tank."""
    position: Vec2
    oxygen_restored: float
    new_oxygen: float


@dataclass
class GameOverEvent(GameEvent):
    """The run ended."""
    reason: GameOverReason
    message: str
    distance_meters: int


class Game:
    """
    The main game class that runs the simulation.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts commands as method calls.

    Usage:
        game = Game(seed=42)
        game.start()
        while game.phase == GamePhase.RUNNING:
            events = game.update(input_snapshot)
            # UI reads game state and renders
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 clock: Optional[Clock] = None):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.clock: Clock = clock if clock is not None else SystemClock()

        self.phase = GamePhase.NOT_STARTED
        self.state = SimulationState()

        # Entities are created by start()
        self.player: Optional[Player] = None
        self.monster: Optional[Monster] = None
        self.vents = VentSystem()
        self.tank_spawner = TankSpawner(self.rng)
        self.particle_system = ParticleSystem(self.rng)

        self.game_over_reason: Optional[GameOverReason] = None
        self.game_over_message: Optional[str] = None
        self.frame: int = 0

        self._last_oxygen_warning_ms: Optional[float] = None

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

    # =========================================================================
    # LIFECYCLE COMMANDS
    # =========================================================================

    def start(self) -> List[GameEvent]:
        """
        Start a fresh run from any phase.
        Returns the events produced by the transition.
        """
        self._events = []
        old_phase = self.phase

        self.state = SimulationState(running=True)
        self.tank_spawner.reset()
        self.particle_system.clear()

        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.monster = Monster(PLAYER_START_X - MONSTER_START_DISTANCE, PLAYER_START_Y, rng=self.rng)
        self.vents = VentSystem.generate(self.rng)

        self.game_over_reason = None
        self.game_over_message = None
        self.frame = 0
        self._last_oxygen_warning_ms = None

        self.tank_spawner.spawn(self.player.x)
        self._update_camera()

        self.phase = GamePhase.RUNNING
        self._events.append(PhaseChangedEvent(old_phase, self.phase))
        logger.info(f"Run started (seed={self.seed}, {len(self.vents)} walls)")
        return self._events

    def restart(self) -> List[GameEvent]:
        """Alias for start(); same reset."""
        return self.start()

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, snapshot: InputSnapshot = IDLE) -> List[GameEvent]:
        """
        Advance the simulation by one frame.
        Returns list of events that occurred.
        """
        self._events = []
        if self.phase != GamePhase.RUNNING:
            return self._events

        self.frame += 1
        sprinting = snapshot.sprint

        # Player movement; standing still skips the collision queries
        dx, dy = self.movement_delta(snapshot)
        if not snapshot.is_idle:
            self.player.move(dx, dy, self.vents)

        # Only forward progress counts
        if dx > 0:
            self.state.distance += dx

        self._update_oxygen(sprinting)

        self.monster.update(self.player.position, self.monster_speed)

        self._update_tanks()

        self.particle_system.update()

        self._update_camera()

        self._check_game_over()

        # Red flash fades out
        if self.state.flash_intensity > 0:
            self.state.flash_intensity = max(0.0, self.state.flash_intensity - FLASH_DECAY)

        return self._events

    @staticmethod
    def movement_delta(snapshot: InputSnapshot) -> Tuple[float, float]:
        """Return the intended (dx, dy) for the held keys."""
        speed = PLAYER_SPEED * SPRINT_MULTIPLIER if snapshot.sprint else PLAYER_SPEED

        dx = 0.0
        dy = 0.0
        if snapshot.up:
            dy -= speed
        if snapshot.down:
            dy += speed
        if snapshot.left:
            dx -= speed
        if snapshot.right:
            dx += speed

        # Normalize diagonal movement
        if dx != 0 and dy != 0:
            dx *= DIAGONAL_FACTOR
            dy *= DIAGONAL_FACTOR

        return dx, dy

    def _update_oxygen(self, sprinting: bool) -> None:
        """Drain oxygen and raise the low-oxygen warning."""
        drain = OXYGEN_DRAIN_RATE * SPRINT_DRAIN_MULTIPLIER if sprinting else OXYGEN_DRAIN_RATE
        self.state.oxygen = max(0.0, self.state.oxygen - drain)

        if self.state.oxygen < LOW_OXYGEN_THRESHOLD:
            now = self.clock.now_ms()
            if (self._last_oxygen_warning_ms is None or
                    now - self._last_oxygen_warning_ms >= OXYGEN_WARNING_COOLDOWN_MS):
                self._last_oxygen_warning_ms = now
                self.state.flash_intensity = FLASH_INTENSITY
                self._events.append(MessageEvent("OXYGEN LOW", OXYGEN_WARNING_DURATION_MS))
                logger.debug(f"Oxygen low ({self.state.oxygen:.1f}) at frame {self.frame}")

    def _update_tanks(self) -> None:
        """Collect tanks in reach, drop missed ones, then top up the spawn queue."""
        for tank in self.tank_spawner.collect(self.player.position):
            before = self.state.oxygen
            self.state.oxygen = min(OXYGEN_MAX, self.state.oxygen + TANK_RESTORE)
            self.particle_system.emit(tank.position, PICKUP_PARTICLE_COLOR, PICKUP_PARTICLE_COUNT)

            self._events.append(MessageEvent("+OXYGEN", OXYGEN_PICKUP_DURATION_MS))
            self._events.append(TankCollectedEvent(
                tank.position.copy(), self.state.oxygen - before, self.state.oxygen
            ))
            logger.debug(f"Collected tank at ({tank.x:.1f}, {tank.y:.1f}), oxygen {self.state.oxygen:.1f}")

        self.tank_spawner.discard_behind(self.player.x)
        self.tank_spawner.maybe_spawn(self.player.x)

    def _update_camera(self) -> None:
        self.state.camera.x = self.player.x - CAMERA_LEAD_X
        self.state.camera.y = self.player.y - CAMERA_OFFSET_Y

    def _check_game_over(self) -> None:
        """Oxygen is checked before capture; only one reason is reported."""
        if self.state.oxygen <= 0:
            self._end_run(GameOverReason.SUFFOCATED)
        elif self.distance_to_monster < CAPTURE_RADIUS:
            self._end_run(GameOverReason.CAUGHT)

    def _end_run(self, reason: GameOverReason) -> None:
        old_phase = self.phase
        self.phase = GamePhase.GAME_OVER
        self.state.running = False
        self.game_over_reason = reason
        self.game_over_message = GAME_OVER_MESSAGES[reason]

        self._events.append(PhaseChangedEvent(old_phase, self.phase))
        self._events.append(GameOverEvent(reason, self.game_over_message, self.state.distance_meters))
        logger.info(
            f"Game over after {self.frame} frames: {reason.name.lower()}, "
            f"{self.state.distance_meters}m travelled"
        )

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def oxygen(self) -> float:
        return self.state.oxygen

    @property
    def distance(self) -> float:
        return self.state.distance

    @property
    def monster_speed(self) -> float:
        """Monster speed grows with distance travelled, up to MONSTER_MAX_SPEED."""
        return min(MONSTER_BASE_SPEED + self.state.distance * MONSTER_SPEED_INCREASE, MONSTER_MAX_SPEED)

    @property
    def distance_to_monster(self) -> float:
        if self.player is None or self.monster is None:
            return math.inf
        return self.monster.distance_to(self.player.position)

    @property
    def tanks(self) -> List[OxygenTank]:
        return self.tank_spawner.tanks

    @property
    def particles(self) -> List[Particle]:
        return self.particle_system.particles

    def get_oxygen_ratio(self) -> float:
        """Oxygen as 0.0 to 1.0."""
        return self.state.oxygen / OXYGEN_MAX

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, frames: int, snapshot: InputSnapshot = IDLE) -> List[GameEvent]:
        """
        Step up to `frames` frames with the same input, stopping at game over.
        Returns all events that occurred.
        """
        all_events = []
        for _ in range(frames):
            if self.phase != GamePhase.RUNNING:
                break
            all_events.extend(self.update(snapshot))
        return all_events
