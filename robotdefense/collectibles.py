"""Collectibles dropped by robots: coins and health packs."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Callable, Optional, Protocol

from robotdefense.constants import (
    COLLECTIBLE_LIFETIME,
    COLLECTION_RADIUS,
    HEALTH_PACK_VALUE,
    CollectibleType,
    ObjectCategory,
)
from robotdefense.objects import StaticObject, VectorLike
from robotdefense.timer import Timer


class Healable(Protocol):
    def is_destroyed(self) -> bool: ...

    def can_be_healed(self) -> bool: ...

    def heal_by_percentage(self, percentage: float) -> None: ...


class Collectible(StaticObject):
    """An item that lies on the field for a limited time until it is collected."""

    def __init__(
        self,
        collectible_type: CollectibleType,
        value: int,
        duration: float = 0.0,
        position: VectorLike | None = None,
    ) -> None:
        super().__init__(position)
        if duration < 0:
            raise ValueError("duration must not be negative")
        self.type = collectible_type
        self.value = value
        self.lifetime = float(duration) if duration > 0 else COLLECTIBLE_LIFETIME
        self.collection_radius = COLLECTION_RADIUS
        self.collected = False
        self._lifetime_timer = Timer(self.lifetime)

    def category(self) -> ObjectCategory:
        return ObjectCategory.COLLECTIBLE

    def update(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must not be negative")
        if not self.active or self.collected:
            return
        self._lifetime_timer.update(dt)
        if self.is_expired():
            self.active = False

    def _can_collect(self) -> bool:
        return self.active and not self.collected and not self.is_expired()

    def collect(self) -> bool:
        """Collect the item and apply its effect; False if it was not available."""
        if not self._can_collect():
            return False
        self.collected = True
        self.apply_effect()
        self.active = False
        return True

    @abstractmethod
    def apply_effect(self) -> None:
        """Give the player what this item is worth."""

    def spawn(self, position: VectorLike) -> None:
        """Put the item on the field at ``position`` with a fresh lifetime."""
        self.position = position
        self.collected = False
        self.active = True
        self._lifetime_timer.restart()

    def is_expired(self) -> bool:
        return self._lifetime_timer.is_finished()

    def remaining_lifetime(self) -> float:
        return self._lifetime_timer.remaining()


class Coin(Collectible):
    """Coins worth a robot's reward; auto-collected coins stay visible briefly."""

    VISUAL_DURATION = 1.5

    def __init__(
        self,
        robot_reward: int,
        on_collected: Optional[Callable[[int], None]] = None,
        position: VectorLike | None = None,
    ) -> None:
        if robot_reward < 0:
            raise ValueError("reward must not be negative")
        super().__init__(CollectibleType.COIN, robot_reward, position=position)
        self._on_collected = on_collected
        self.auto_collected = False
        self._visual_time = 0.0

    def apply_effect(self) -> None:
        if self._on_collected is not None:
            self._on_collected(self.value)

    def auto_collect(self) -> bool:
        """Grant the coins now but keep the coin shown for VISUAL_DURATION."""
        if not self._can_collect():
            return False
        self.collected = True
        self.auto_collected = True
        self._visual_time = 0.0
        self.apply_effect()
        return True

    def update(self, dt: float) -> None:
        if self.auto_collected:
            if dt < 0:
                raise ValueError("dt must not be negative")
            if self.active:
                self._visual_time += dt
                if self._visual_time >= self.VISUAL_DURATION:
                    self.active = False
            return
        super().update(dt)


class HealthPack(Collectible):
    """A pack that heals a squad member by a percentage of its maximum health."""

    def __init__(
        self,
        heal_amount: int = HEALTH_PACK_VALUE,
        on_collected: Optional[Callable[["HealthPack"], None]] = None,
        position: VectorLike | None = None,
        breathe_speed: float = 2.0,
    ) -> None:
        if heal_amount <= 0:
            raise ValueError("heal amount must be positive")
        super().__init__(CollectibleType.HEALTH_PACK, heal_amount, position=position)
        self.heal_amount = heal_amount
        self._on_collected = on_collected
        self.breathe_speed = breathe_speed
        self.breathe_intensity = 0.0
        self._phase = 0.0

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.active:
            self._phase += dt * self.breathe_speed
            self.breathe_intensity = (math.sin(self._phase) + 1.0) / 2.0

    def apply_effect(self) -> None:
        if self._on_collected is not None:
            self._on_collected(self)

    def can_heal(self, member: Optional[Healable]) -> bool:
        return member is not None and not member.is_destroyed() and member.can_be_healed()

    def heal(self, member: Optional[Healable]) -> bool:
        """Heal ``member`` by ``heal_amount`` percent; False if it cannot be healed."""
        if not self.can_heal(member):
            return False
        assert member is not None
        member.heal_by_percentage(float(self.heal_amount))
        return True