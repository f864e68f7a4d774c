"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.

Speeds and rates are per frame (the game steps once per display refresh).
"""
from typing import Tuple

# =============================================================================
# CANVAS
# =============================================================================
CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 800

# =============================================================================
# PLAYER
# =============================================================================
PLAYER_SIZE = 16
PLAYER_SPEED = 2.5
SPRINT_MULTIPLIER = 1.8
PLAYER_START_X = 100.0
PLAYER_START_Y = 400.0

# =============================================================================
# OXYGEN
# =============================================================================
OXYGEN_MAX = 100.0
OXYGEN_DRAIN_RATE = 0.08
SPRINT_DRAIN_MULTIPLIER = 2.5
TANK_RESTORE = 40.0

LOW_OXYGEN_THRESHOLD = 30.0
OXYGEN_WARNING_COOLDOWN_MS = 3000
OXYGEN_WARNING_DURATION_MS = 2000
OXYGEN_PICKUP_DURATION_MS = 1000

FLASH_INTENSITY = 0.3
FLASH_DECAY = 0.01

# =============================================================================
# MONSTER
# =============================================================================
MONSTER_SIZE = 24
MONSTER_BASE_SPEED = 1.2
MONSTER_SPEED_INCREASE = 0.0003   # per unit of distance travelled
MONSTER_MAX_SPEED = 3.5
MONSTER_START_DISTANCE = 800.0    # behind the player
CAPTURE_RADIUS = 35.0

TENTACLE_COUNT = 6
TENTACLE_MIN_LENGTH = 20.0
TENTACLE_LENGTH_JITTER = 10.0
TENTACLE_PHASE_STEP = 0.1

# =============================================================================
# VENTS
# =============================================================================
VENT_SEGMENT_COUNT = 100
VENT_SEGMENT_LENGTH = 150.0
VENT_WALL_THICKNESS = 80.0
VENT_TURN_CHANCE = 0.15
VENT_START_X = -500.0
VENT_MAX_TURN_OFFSET = 50.0
VENT_STRAIGHT_SEGMENTS = 6       # level segments at the start, spanning the spawn point

# =============================================================================
# OXYGEN TANKS
# =============================================================================
TANK_SIZE = 20
TANK_PICKUP_RADIUS = 30.0
TANK_SPAWN_SPACING = 400.0
TANK_SPAWN_JITTER = 300.0
TANK_FIRST_OFFSET = 300.0
TANK_VERTICAL_JITTER = 100.0      # +/- around canvas centre
TANK_PULSE_STEP = 0.05
TANK_DESPAWN_DISTANCE = CANVAS_WIDTH   # missed tanks this far behind are dropped

# =============================================================================
# PARTICLES
# =============================================================================
PARTICLE_MAX_SPEED = 2.0
PARTICLE_MIN_SIZE = 2.0
PARTICLE_SIZE_JITTER = 4.0
PARTICLE_DRAG = 0.95
PARTICLE_LIFE_DECAY = 0.02
PICKUP_PARTICLE_COUNT = 20
PICKUP_PARTICLE_COLOR: Tuple[int, int, int] = (0, 255, 136)

# =============================================================================
# CAMERA
# =============================================================================
CAMERA_LEAD_X = CANVAS_WIDTH / 3
CAMERA_OFFSET_Y = CANVAS_HEIGHT / 2

# =============================================================================
# SCORING
# =============================================================================
UNITS_PER_METER = 10
