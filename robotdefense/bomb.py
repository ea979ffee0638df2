"""Bombs that explode after a fuse, and the undoable command that places them."""

from __future__ import annotations

from typing import Callable, Optional

from robotdefense.commands import Command
from robotdefense.objects import Vector2, VectorLike

DEFAULT_FUSE_TIME = 1.0
DEFAULT_EXPLOSION_RADIUS = 80.0
DEFAULT_DAMAGE = 150
DEFAULT_EXPLOSION_DURATION = 0.5


class Bomb:
    """A bomb that explodes when its fuse burns down and then plays its blast."""

    def __init__(
        self,
        position: VectorLike,
        fuse_time: float = DEFAULT_FUSE_TIME,
        explosion_radius: float = DEFAULT_EXPLOSION_RADIUS,
        damage: int = DEFAULT_DAMAGE,
        explosion_duration: float = DEFAULT_EXPLOSION_DURATION,
        on_explode: Optional[Callable[["Bomb"], None]] = None,
    ) -> None:
        if fuse_time < 0 or explosion_duration < 0:
            raise ValueError("times must not be negative")
        if explosion_radius < 0:
            raise ValueError("explosion radius must not be negative")
        self.position = Vector2.of(position)
        self.fuse_time = float(fuse_time)
        self.explosion_radius = float(explosion_radius)
        self.damage = damage
        self.explosion_duration = float(explosion_duration)
        self.exploded = False
        self._on_explode = on_explode
        self._fuse = 0.0
        self._blast_time = 0.0

    def update(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must not be negative")
        if self.exploded:
            self._blast_time += dt
            return
        self._fuse += dt
        if self._fuse >= self.fuse_time:
            self.explode()

    def explode(self) -> bool:
        """Detonate now; False if the bomb had already exploded."""
        if self.exploded:
            return False
        self.exploded = True
        if self._on_explode is not None:
            self._on_explode(self)
        return True

    def is_done(self) -> bool:
        """Whether the blast has finished and the bomb can be removed."""
        return self.exploded and self._blast_time >= self.explosion_duration

    def is_in_blast(self, point: VectorLike) -> bool:
        return self.position.distance_to(point) <= self.explosion_radius


class PlaceBombCommand(Command):
    """Places a bomb into a list; undoable while the bomb has not exploded."""

    def __init__(self, bombs: list[Bomb], position: VectorLike) -> None:
        self._bombs = bombs
        self.position = Vector2.of(position)
        self._bomb: Optional[Bomb] = None
        self._executed = False

    @property
    def bomb(self) -> Optional[Bomb]:
        return self._bomb

    def execute(self) -> None:
        self._bomb = Bomb(self.position)
        self._bombs.append(self._bomb)
        self._executed = True

    def _bomb_present(self) -> bool:
        return self._bomb is not None and any(b is self._bomb for b in self._bombs)

    def undo(self) -> None:
        if not self.can_undo():
            raise RuntimeError("the bomb can no longer be removed")
        self._bombs[:] = [b for b in self._bombs if b is not self._bomb]
        self._bomb = None
        self._executed = False

    def can_undo(self) -> bool:
        return self._executed and self._bomb_present() and not self.has_exploded()

    def description(self) -> str:
        return f"Place bomb at ({self.position.x:.0f}, {self.position.y:.0f})"

    def has_exploded(self) -> bool:
        return self._bomb is not None and self._bomb.exploded