"""Robots, squad members and projectiles: health, targeting and attacks."""

from __future__ import annotations

from typing import Iterable, Optional, Union

from robotdefense.constants import (
    GRID_ROWS,
    PROJECTILE_LIFETIME,
    ObjectCategory,
    ProjectileTargetType,
    ProjectileType,
    RobotType,
    SquadMemberType,
    TargetPriority,
)
from robotdefense.objects import (
    MovingObject,
    StaticObject,
    Vector2,
    VectorLike,
    grid_to_world,
)
from robotdefense.timer import Timer


def _check_dt(dt: float) -> None:
    if dt < 0:
        raise ValueError("dt must not be negative")


class Robot(MovingObject):
    """An enemy that walks left along its lane and attacks squad members it meets."""

    def __init__(
        self,
        robot_type: RobotType,
        health: int,
        speed: float,
        damage: int,
        *,
        reward: int = 25,
        attack_damage: Optional[int] = None,
        attack_cooldown: float = 1.0,
        attack_range: float = 50.0,
        position: VectorLike | None = None,
    ) -> None:
        super().__init__(position)
        if health <= 0:
            raise ValueError("health must be positive")
        if speed < 0 or damage < 0 or reward < 0:
            raise ValueError("speed, damage and reward must not be negative")
        if attack_cooldown < 0 or attack_range < 0:
            raise ValueError("attack cooldown and range must not be negative")
        self.type = robot_type
        self.health = health
        self.max_health = health
        self.speed = float(speed)
        self.original_speed = float(speed)
        self.damage = damage
        self.reward = reward
        self.attack_damage = damage if attack_damage is None else attack_damage
        self.attack_cooldown = float(attack_cooldown)
        self.attack_range = float(attack_range)
        self.lane = 0
        self.facing_left = False
        self.movement_enabled = True
        self._attacking = False
        self._target: Optional[SquadMember] = None
        self._attack_timer = Timer()

    def category(self) -> ObjectCategory:
        return ObjectCategory.ROBOT

    @property
    def attacking(self) -> bool:
        return self._attacking

    @property
    def target(self) -> Optional["SquadMember"]:
        return self._target

    def update(self, dt: float) -> None:
        _check_dt(dt)
        if not self.active:
            return
        if self.is_dead():
            self.stop_attacking()
            self.active = False
            return
        if self._attacking:
            self._process_attack(dt)
        if self.movement_enabled and not self._attacking:
            self.velocity = Vector2(-self.speed, 0.0)
        else:
            self.velocity = Vector2()
        super().update(dt)

    def _process_attack(self, dt: float) -> None:
        target = self._target
        if target is None or not self._is_valid_target(target):
            self.stop_attacking()
            return
        self._attack_timer.update(dt)
        if self._attack_timer.is_elapsed(self.attack_cooldown):
            target.take_damage(self.attack_damage)
            self._attack_timer.restart()
            if target.is_destroyed():
                self.stop_attacking()

    @staticmethod
    def _is_valid_target(target: "SquadMember") -> bool:
        return target.active and not target.is_destroyed()

    def take_damage(self, damage: int) -> None:
        if damage < 0:
            raise ValueError("damage must not be negative")
        if self.is_dead():
            return
        self.health = max(self.health - damage, 0)
        if self.is_dead():
            self.stop_attacking()
            self.movement_enabled = False

    def heal(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("heal amount must not be negative")
        if self.is_dead():
            return
        self.health = min(self.health + amount, self.max_health)

    def is_dead(self) -> bool:
        return self.health <= 0

    def move_to_lane(self, lane: int) -> None:
        """Switch to another lane, keeping the horizontal position."""
        if not 0 <= lane < GRID_ROWS:
            raise ValueError(f"lane {lane} out of range")
        self.lane = lane
        self.position = Vector2(self.position.x, grid_to_world(0, lane).y)

    def start_attacking(self, target: "SquadMember") -> None:
        """Stop and attack ``target`` every ``attack_cooldown`` seconds."""
        if self.is_dead():
            raise RuntimeError("a dead robot cannot attack")
        if not self._is_valid_target(target):
            raise ValueError("target is not a valid attack target")
        if self._target is not None and self._target is not target:
            self._target.remove_attacker(self)
        self._target = target
        self._attacking = True
        self._attack_timer.restart()
        target.on_robot_collision(self)

    def stop_attacking(self) -> None:
        if self._target is not None:
            self._target.remove_attacker(self)
        self._target = None
        self._attacking = False
        if not self.is_dead():
            self.movement_enabled = True

    def is_in_front(self, member: "SquadMember") -> bool:
        """Whether ``member`` stands ahead of the robot in its lane."""
        return member.lane == self.lane and member.position.x <= self.position.x

    def in_attack_range(self, member: "SquadMember") -> bool:
        return self.is_in_front(member) and self.distance_to(member) <= self.attack_range


class SquadMember(StaticObject):
    """A defending unit placed on the grid that fires at robots in range."""

    def __init__(
        self,
        member_type: SquadMemberType,
        cost: int,
        range: float,
        damage: int,
        *,
        health: int = 100,
        attack_cooldown: float = 1.5,
        death_duration: float = 1.0,
        position: VectorLike | None = None,
    ) -> None:
        super().__init__(position)
        if cost < 0 or damage < 0:
            raise ValueError("cost and damage must not be negative")
        if range <= 0:
            raise ValueError("range must be positive")
        if health <= 0:
            raise ValueError("health must be positive")
        if attack_cooldown < 0 or death_duration < 0:
            raise ValueError("times must not be negative")
        self.type = member_type
        self.cost = cost
        self.range = float(range)
        self.damage = damage
        self.health = health
        self.max_health = health
        self.attack_cooldown = float(attack_cooldown)
        self.death_duration = float(death_duration)
        self.target_priority = TargetPriority.CLOSEST
        self.current_target: Optional[Robot] = None
        self.dying = False
        self._death_time = 0.0
        self._attack_timer = Timer()
        self._attackers: list[Robot] = []

    def category(self) -> ObjectCategory:
        return ObjectCategory.SQUAD_MEMBER

    @property
    def attackers(self) -> list[Robot]:
        return list(self._attackers)

    @property
    def under_attack(self) -> bool:
        return bool(self._attackers)

    def update(self, dt: float) -> None:
        _check_dt(dt)
        if not self.active:
            return
        self._attack_timer.update(dt)
        self._attackers = [r for r in self._attackers if r.active and not r.is_dead()]
        if self.current_target is not None and not self._is_valid_target(self.current_target):
            self.current_target = None
        if self.dying:
            self._death_time += dt
            if self._death_time >= self.death_duration:
                self.active = False

    def _is_valid_target(self, robot: Robot) -> bool:
        return robot.active and not robot.is_dead() and self.distance_to(robot) <= self.range

    def find_target(self, robots: Iterable[Robot]) -> Optional[Robot]:
        """Pick a robot in range according to :attr:`target_priority`."""
        candidates = [r for r in robots if self._is_valid_target(r)]
        if not candidates:
            return None
        priority = self.target_priority
        if priority is TargetPriority.STRONGEST:
            return max(candidates, key=lambda r: r.health)
        if priority is TargetPriority.WEAKEST:
            return min(candidates, key=lambda r: r.health)
        if priority is TargetPriority.FIRST:
            return min(candidates, key=lambda r: r.position.x)
        if priority is TargetPriority.LAST:
            return max(candidates, key=lambda r: r.position.x)
        return min(candidates, key=self.distance_to)

    def attack(self, robots: Iterable[Robot]) -> Optional[Robot]:
        """Damage the chosen target if the cooldown allows; return the robot hit."""
        if self.dying or self.is_destroyed():
            return None
        target = self.find_target(robots)
        self.current_target = target
        if target is None or not self.can_attack():
            return None
        target.take_damage(self.damage)
        self.reset_attack_timer()
        return target

    def can_attack(self) -> bool:
        return not self.dying and self._attack_timer.is_elapsed(self.attack_cooldown)

    def reset_attack_timer(self) -> None:
        self._attack_timer.restart()

    def take_damage(self, damage: int) -> None:
        if damage < 0:
            raise ValueError("damage must not be negative")
        if self.is_destroyed():
            return
        self.health = max(self.health - damage, 0)
        if self.is_destroyed():
            self.dying = True
            self._death_time = 0.0

    def heal(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("heal amount must not be negative")
        if self.is_destroyed():
            return
        self.health = min(self.health + amount, self.max_health)

    def heal_by_percentage(self, percentage: float) -> None:
        """Heal by ``percentage`` percent of maximum health."""
        if percentage < 0:
            raise ValueError("percentage must not be negative")
        self.heal(int(self.max_health * percentage / 100.0))

    def can_be_healed(self) -> bool:
        return not self.is_destroyed() and self.health < self.max_health

    def is_destroyed(self) -> bool:
        return self.health <= 0

    def on_robot_collision(self, attacker: Robot) -> None:
        if not any(r is attacker for r in self._attackers):
            self._attackers.append(attacker)

    def on_robot_bullet_hit(self, damage: int) -> None:
        self.take_damage(damage)

    def remove_attacker(self, attacker: Robot) -> None:
        self._attackers = [r for r in self._attackers if r is not attacker]


class Projectile(MovingObject):
    """A shot that flies toward a robot or a point and disappears on hit or miss."""

    def __init__(
        self,
        projectile_type: ProjectileType,
        damage: int,
        speed: float,
        target: Union[Robot, VectorLike],
        source: Optional[SquadMember] = None,
        *,
        position: VectorLike | None = None,
        max_range: float = 1000.0,
        lifetime: float = PROJECTILE_LIFETIME,
    ) -> None:
        start = position if position is not None else (source.position if source else None)
        super().__init__(start)
        if damage < 0:
            raise ValueError("damage must not be negative")
        if max_range <= 0 or lifetime <= 0:
            raise ValueError("range and lifetime must be positive")
        self.type = projectile_type
        self.damage = damage
        self.speed = abs(float(speed))
        self.source = source
        self.max_range = float(max_range)
        self.travel_distance = 0.0
        self.should_remove = False
        self._hit = False
        self._lifetime_timer = Timer(lifetime)
        if isinstance(target, Robot):
            self.target_robot: Optional[Robot] = target
            self._fixed_target = target.position
        else:
            self.target_robot = None
            self._fixed_target = Vector2.of(target)

    def category(self) -> ObjectCategory:
        return ObjectCategory.PROJECTILE

    @property
    def target_position(self) -> Vector2:
        if self.target_robot is not None:
            return self.target_robot.position
        return self._fixed_target

    def target_type(self) -> ProjectileTargetType:
        if self.target_robot is not None:
            return ProjectileTargetType.ROBOT
        return ProjectileTargetType.POSITION

    def can_hit_squad_members(self) -> bool:
        return False

    def _target_valid(self) -> bool:
        robot = self.target_robot
        return robot is None or (robot.active and not robot.is_dead())

    def update(self, dt: float) -> None:
        _check_dt(dt)
        if self.should_remove:
            return
        self._lifetime_timer.update(dt)
        if self.is_expired() or not self._target_valid():
            self.on_miss()
            return
        self.update_trajectory(dt)

    def update_trajectory(self, dt: float) -> None:
        offset = self.target_position - self.position
        distance = offset.length()
        step = self.speed * dt
        if distance <= step:
            self.position = self.target_position
            self.travel_distance += distance
            self.on_hit()
            return
        self.velocity = offset * (self.speed / distance)
        super().update(dt)
        self.travel_distance += step
        if self.travel_distance >= self.max_range:
            self.on_miss()

    def has_hit_target(self) -> bool:
        return self._hit

    def on_hit(self) -> None:
        if self._hit or self.should_remove:
            return
        self._hit = True
        if self.target_robot is not None and self._target_valid():
            self.apply_effects(self.target_robot)
        self._remove()

    def on_miss(self) -> None:
        self._remove()

    def apply_effects(self, target: Robot) -> None:
        target.take_damage(self.damage)

    def apply_effects_to_squad_member(self, target: SquadMember) -> None:
        if self.can_hit_squad_members():
            target.on_robot_bullet_hit(self.damage)

    def is_expired(self) -> bool:
        return self._lifetime_timer.is_finished()

    def remaining_lifetime(self) -> float:
        return self._lifetime_timer.remaining()

    def _remove(self) -> None:
        self.should_remove = True
        self.active = False
        self.velocity = Vector2()