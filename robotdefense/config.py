"""INI-style configuration loading with typed getters and per-entity configs."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from robotdefense.constants import ProjectileType, RobotType, SquadMemberType

REQUIRED_CONFIG_FILES = (
    "game.cfg",
    "robots.cfg",
    "units.cfg",
    "physics.cfg",
    "projectiles.cfg",
    "collectibles.cfg",
)

_WHITESPACE = " \t\r\n"
_INT_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"[ \t\n\r\f\v]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_FLOAT_MAX = 3.4028234663852886e38

_PROJECTILE_SECTIONS = {
    ProjectileType.BULLET: "SquadBullet",
    ProjectileType.SNIPER_BULLET: "SniperBullet",
    ProjectileType.ROBOT_BULLET: "RobotBullet",
}
_PROJECTILE_TYPES = {name: kind for kind, name in _PROJECTILE_SECTIONS.items()}

_ROBOT_SECTIONS = {
    RobotType.BASIC: "BasicRobot",
    RobotType.FIRE: "FireRobot",
    RobotType.STEALTH: "StealthRobot",
}
_ROBOT_TYPES = {name: kind for kind, name in _ROBOT_SECTIONS.items()}

_UNIT_SECTIONS = {
    SquadMemberType.HEAVY_GUNNER: "HeavyGunner",
    SquadMemberType.SNIPER: "Sniper",
    SquadMemberType.SHIELD_BEARER: "ShieldBearer",
}
_UNIT_TYPES = {name: kind for kind, name in _UNIT_SECTIONS.items()}


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or a value cannot be parsed."""


@dataclass
class ProjectileConfig:
    type: ProjectileType = ProjectileType.BULLET
    speed: float = 400.0
    texture: str = "bullet.png"
    scale: float = 0.03
    max_range: float = 300.0
    damage: int = 25
    spawn_offset: tuple[float, float] = (50.0, -14.0)


@dataclass
class PhysicsConfig:
    pixels_per_meter: float = 30.0
    gravity_x: float = 0.0
    gravity_y: float = 9.8
    velocity_iterations: int = 6
    position_iterations: int = 2
    robot_radius: float = 15.0
    robot_mass: float = 1.0
    robot_friction: float = 0.3
    squad_width: float = 40.0
    squad_height: float = 40.0
    squad_mass: float = 0.0
    bullet_radius: float = 2.0
    rocket_radius: float = 5.0
    bullet_mass: float = 0.1


@dataclass
class RobotConfig:
    type: RobotType = RobotType.BASIC
    health: int = 100
    speed: float = 50.0
    damage: int = 25
    reward: int = 25
    attack_range: float = 100.0
    melee_attack_damage: int = 25
    bullet_cooldown: float = 0.0


@dataclass
class SquadMemberConfig:
    type: SquadMemberType = SquadMemberType.HEAVY_GUNNER
    cost: int = 100
    range: float = 200.0
    health: int = 150


@dataclass
class GameConfig:
    window_width: int = 1200
    window_height: int = 800
    window_title: str = "Special Forces vs Robots"
    master_volume: float = 100.0
    music_volume: float = 70.0
    sfx_volume: float = 80.0
    initial_coins: int = 200
    base_health: int = 100
    num_lanes: int = 3


def _parse_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    token = match.group(1)
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        raise ValueError(f"number out of range: {text!r}")
    if math.isfinite(value) and abs(value) > _FLOAT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _parse_int(text: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


class ConfigLoader:
    """Holds key/value settings grouped in sections, read from INI-style text."""

    def __init__(self) -> None:
        self._config: dict[str, dict[str, str]] = {}
        self._loaded: list[str] = []

    # Loading

    def load_file(self, path: Union[str, Path]) -> None:
        """Read a file and merge its settings; raise ConfigError if it has none."""
        try:
            content = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read file: {path}") from exc
        if not content:
            raise ConfigError(f"Failed to read file: {path}")
        self.parse(content)

    def parse(self, content: str) -> None:
        """Merge settings from INI text; later values replace earlier ones."""
        section = ""
        for raw in content.split("\n"):
            line = raw.strip(_WHITESPACE)
            if not line or line[0] in "#;":
                continue
            if line[0] == "[" and line[-1] == "]":
                section = line[1:-1]
                continue
            key, sep, value = line.partition("=")
            if sep and section:
                self._config.setdefault(section, {})[key.strip(_WHITESPACE)] = value.strip(
                    _WHITESPACE
                )

    def clear(self) -> None:
        self._config.clear()
        self._loaded.clear()

    def mark_loaded(self, name: str) -> None:
        """Record that the named configuration file has been loaded."""
        self._loaded.append(name)

    def missing_configs(self) -> list[str]:
        return [name for name in REQUIRED_CONFIG_FILES if name not in self._loaded]

    def validate_all(self) -> bool:
        return not self.missing_configs()

    # Raw access

    def get_bool(self, section: str, key: str, default: bool = False) -> bool:
        if not self.has_value(section, key):
            return default
        return self._config[section][key].lower() in ("true", "1", "yes", "on")

    def get_int(self, section: str, key: str, default: int = 0) -> int:
        if not self.has_value(section, key):
            return default
        try:
            return _parse_int(self._config[section][key])
        except ValueError:
            return default

    def get_float(self, section: str, key: str, default: float = 0.0) -> float:
        if not self.has_value(section, key):
            return default
        try:
            return _parse_float(self._config[section][key])
        except ValueError:
            return default

    def get_string(self, section: str, key: str, default: str = "") -> str:
        if not self.has_value(section, key):
            return default
        return self._config[section][key]

    def has_section(self, section: str) -> bool:
        return section in self._config

    def has_value(self, section: str, key: str) -> bool:
        return key in self._config.get(section, {})

    # Projectiles

    def projectile_damage(self, projectile_type: ProjectileType) -> int:
        section = _PROJECTILE_SECTIONS.get(projectile_type, "SquadBullet")
        return self.get_int(section, "damage", 25)

    def projectile_speed(self, projectile_type: ProjectileType) -> float:
        section = _PROJECTILE_SECTIONS.get(projectile_type, "SquadBullet")
        return self.get_float(section, "speed", 400.0)

    def load_projectile_config(self, name: str) -> ProjectileConfig:
        offset_text = self.get_string(name, "spawnOffset", "50,-14")
        x_text, comma, y_text = offset_text.partition(",")
        if comma:
            try:
                offset = (_parse_float(x_text), _parse_float(y_text))
            except ValueError as exc:
                raise ConfigError(f"Invalid spawnOffset in [{name}]: {offset_text!r}") from exc
        else:
            offset = (50.0, -14.0)
        return ProjectileConfig(
            type=_PROJECTILE_TYPES.get(name, ProjectileType.BULLET),
            speed=self.get_float(name, "speed", 400.0),
            texture=self.get_string(name, "texture", "bullet.png"),
            scale=self.get_float(name, "scale", 0.03),
            max_range=self.get_float(name, "maxRange", 300.0),
            damage=self.get_int(name, "damage", 25),
            spawn_offset=offset,
        )

    # Physics

    def pixels_per_meter(self) -> float:
        return self.get_float("Physics", "pixelsPerMeter", 30.0)

    def gravity_x(self) -> float:
        return self.get_float("Physics", "gravityX", 0.0)

    def gravity_y(self) -> float:
        return self.get_float("Physics", "gravityY", 9.8)

    def velocity_iterations(self) -> int:
        return self.get_int("Physics", "velocityIterations", 6)

    def position_iterations(self) -> int:
        return self.get_int("Physics", "positionIterations", 2)

    def load_physics_config(self) -> PhysicsConfig:
        return PhysicsConfig(
            pixels_per_meter=self.pixels_per_meter(),
            gravity_x=self.gravity_x(),
            gravity_y=self.gravity_y(),
            velocity_iterations=self.velocity_iterations(),
            position_iterations=self.position_iterations(),
            robot_radius=self.get_float("RobotPhysics", "defaultRadius", 15.0),
            robot_mass=self.get_float("RobotPhysics", "defaultMass", 1.0),
            robot_friction=self.get_float("RobotPhysics", "defaultFriction", 0.3),
            squad_width=self.get_float("SquadMemberPhysics", "defaultWidth", 40.0),
            squad_height=self.get_float("SquadMemberPhysics", "defaultHeight", 40.0),
            squad_mass=self.get_float("SquadMemberPhysics", "defaultMass", 0.0),
            bullet_radius=self.get_float("ProjectilePhysics", "bulletRadius", 2.0),
            rocket_radius=self.get_float("ProjectilePhysics", "rocketRadius", 5.0),
            bullet_mass=self.get_float("ProjectilePhysics", "bulletMass", 0.1),
        )

    # Units, robots and collectibles

    def unit_cost(self, unit_type: SquadMemberType) -> int:
        section = _UNIT_SECTIONS.get(unit_type, "HeavyGunner")
        return self.get_int(section, "cost", 100)

    def robot_reward(self, robot_type: RobotType) -> int:
        section = _ROBOT_SECTIONS.get(robot_type, "BasicRobot")
        return self.get_int(section, "reward", 30)

    def drop_rate(self, robot_type: RobotType, drop_type: str) -> Optional[float]:
        """Drop rate from [DropRates], e.g. key ``BasicRobotCoin``; None if unset."""
        prefix = _ROBOT_SECTIONS.get(robot_type)
        if prefix is None or not self.has_value("DropRates", prefix + drop_type):
            return None
        try:
            return _parse_float(self._config["DropRates"][prefix + drop_type])
        except ValueError:
            return None

    def has_collectibles_config(self) -> bool:
        return self.has_section("DropRates") and self.has_section("HealthPack")

    def load_collectibles_config(self, path: Union[str, Path] = "collectibles.cfg") -> None:
        self.load_file(path)

    def health_pack_heal_percentage(self) -> float:
        return self.get_float("HealthPack", "healPercentage", 50.0)

    def load_robot_config(self, name: str) -> RobotConfig:
        damage = self.get_int(name, "damage", 25)
        return RobotConfig(
            type=_ROBOT_TYPES.get(name, RobotType.BASIC),
            health=self.get_int(name, "health", 100),
            speed=self.get_float(name, "speed", 50.0),
            damage=damage,
            reward=self.get_int(name, "reward", 25),
            attack_range=self.get_float(name, "attackRange", 100.0),
            melee_attack_damage=self.get_int(name, "meleeAttackDamage", damage),
            bullet_cooldown=self.get_float(name, "bulletCooldown", 0.0),
        )

    def load_squad_member_config(self, name: str) -> SquadMemberConfig:
        return SquadMemberConfig(
            type=_UNIT_TYPES.get(name, SquadMemberType.HEAVY_GUNNER),
            cost=self.get_int(name, "cost", 100),
            range=self.get_float(name, "range", 200.0),
            health=self.get_int(name, "health", 150),
        )

    def load_game_config(self) -> GameConfig:
        return GameConfig(
            window_width=self.get_int("Window", "width", 1200),
            window_height=self.get_int("Window", "height", 800),
            window_title=self.get_string("Window", "title", "Special Forces vs Robots"),
            master_volume=self.get_float("Audio", "masterVolume", 100.0),
            music_volume=self.get_float("Audio", "musicVolume", 70.0),
            sfx_volume=self.get_float("Audio", "sfxVolume", 80.0),
            initial_coins=self.get_int("Gameplay", "initialCoins", 200),
            base_health=self.get_int("Gameplay", "baseHealth", 100),
            num_lanes=self.get_int("Gameplay", "numLanes", 3),
        )