"""Game-wide enumerations, tuning constants and the starting-coin economy."""

from enum import Enum, auto


class ObjectCategory(Enum):
    """Identifies what kind of object took part in a collision."""

    ROBOT = auto()
    SQUAD_MEMBER = auto()
    PROJECTILE = auto()
    COLLECTIBLE = auto()
    UNKNOWN = auto()


class RobotType(Enum):
    BASIC = auto()
    FIRE = auto()
    STEALTH = auto()


class RobotAIState(Enum):
    MOVING = auto()
    ATTACKING = auto()
    USING_ABILITY = auto()
    STUNNED = auto()
    DYING = auto()


class FireRobotState(Enum):
    WALKING = auto()
    SHOOTING = auto()
    DEAD = auto()


class SquadMemberType(Enum):
    HEAVY_GUNNER = auto()
    SNIPER = auto()
    SHIELD_BEARER = auto()


class TargetPriority(Enum):
    CLOSEST = auto()
    STRONGEST = auto()
    WEAKEST = auto()
    FIRST = auto()
    LAST = auto()


class ProjectileType(Enum):
    BULLET = auto()
    SNIPER_BULLET = auto()
    EXPLOSION = auto()
    ROBOT_BULLET = auto()


class ProjectileTargetType(Enum):
    ROBOT = auto()
    POSITION = auto()
    SQUAD_MEMBER = auto()


class CollectibleType(Enum):
    COIN = auto()
    HEALTH_PACK = auto()
    BONUS_POINTS = auto()


class HealType(Enum):
    INSTANT = auto()
    OVER_TIME = auto()
    AREA_OF_EFFECT = auto()


class GameState(Enum):
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()
    VICTORY = auto()
    SETTINGS = auto()


class ButtonState(Enum):
    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class PlacementState(Enum):
    NONE = auto()
    SELECTING = auto()
    PLACING = auto()
    UPGRADING = auto()


class CountdownPhase(Enum):
    NONE = auto()
    GET_READY = auto()
    WAVE_DISPLAY = auto()
    COMPLETE = auto()


class WaveState(Enum):
    PREPARING = auto()
    ACTIVE = auto()
    COMPLETED = auto()
    ALL_COMPLETED = auto()


# Physics defaults
DEFAULT_PIXELS_PER_METER = 30.0
DEFAULT_GRAVITY = (0.0, 9.8)
DEFAULT_TIMESTEP = 1.0 / 60.0
DEFAULT_VELOCITY_ITERATIONS = 6
DEFAULT_POSITION_ITERATIONS = 2

# Timing
FRAME_RATE = 60.0
FIXED_TIMESTEP = 1.0 / FRAME_RATE

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800

# Grid layout
GRID_COLUMNS = 7
GRID_ROWS = 3
GRID_CELL_WIDTH = 100.0
GRID_CELL_HEIGHT = 120.0
GRID_OFFSET_X = 100.0
GRID_OFFSET_Y = 185.0

# Combat
PROJECTILE_LIFETIME = 5.0
EXPLOSION_RADIUS = 50.0
ROBOT_SPAWN_INTERVAL = 4.5
WAVE_SPAWN_INTERVAL = 20.0

BASE_HEALTH = 10

# Upgrades
UPGRADE_MULTIPLIER = 1.5
MAX_UPGRADE_LEVEL = 3
UPGRADE_COST_MULTIPLIER = 1.5

# Collectibles
HEALTH_PACK_VALUE = 50
COLLECTIBLE_LIFETIME = 5.0
COLLECTION_RADIUS = 30.0

# Audio
MASTER_VOLUME = 100.0
MUSIC_VOLUME = 70.0
SFX_VOLUME = 80.0
UI_VOLUME = 90.0

# User interface
LEVEL_ICON_SIZE = 190
LEVEL_ICON_SCALE = 0.09

COLLISION_TOLERANCE = 5.0

FIRE_ROBOT_DETECTION_UPDATE_INTERVAL = 0.1

# Wave countdown
GET_READY_DURATION = 2.0
COUNTDOWN_DURATION = 1.0
FADE_DURATION = 0.3


def calculate_starting_coins(level: int) -> int:
    """Return the unrounded number of coins a player starts the given level with."""
    if level <= 5:
        return 200 + (level - 1) * 50
    if level <= 10:
        return 430 + (level - 6) * 30
    return 570 + (level - 11) * 20


def round_coins(coins: int) -> int:
    """Round to the nearest multiple of ten, halves away from zero for positives.

    Division truncates toward zero, so negative amounts round toward zero.
    """
    shifted = coins + 5
    tens = abs(shifted) // 10
    return (tens if shifted >= 0 else -tens) * 10


def starting_coins_for_level(level: int) -> int:
    """Return the rounded starting coins for a level."""
    return round_coins(calculate_starting_coins(level))