"""Base game objects: positions, moving bodies and grid-placed static objects."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Union

from robotdefense.constants import (
    GRID_CELL_HEIGHT,
    GRID_CELL_WIDTH,
    GRID_COLUMNS,
    GRID_OFFSET_X,
    GRID_OFFSET_Y,
    GRID_ROWS,
    ObjectCategory,
)


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector in screen pixels."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: Union["Vector2", Sequence[float]]) -> "Vector2":
        """Return ``value`` as a vector; accepts a vector or an ``(x, y)`` pair."""
        if isinstance(value, Vector2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Union["Vector2", Sequence[float]]) -> "Vector2":
        o = Vector2.of(other)
        return Vector2(self.x + o.x, self.y + o.y)

    def __sub__(self, other: Union["Vector2", Sequence[float]]) -> "Vector2":
        o = Vector2.of(other)
        return Vector2(self.x - o.x, self.y - o.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Union["Vector2", Sequence[float]]) -> float:
        return (self - other).length()


VectorLike = Union[Vector2, Sequence[float]]


def is_valid_grid_position(grid_x: int, lane: int) -> bool:
    """Whether the cell lies on the placement grid."""
    return 0 <= grid_x < GRID_COLUMNS and 0 <= lane < GRID_ROWS


def grid_to_world(grid_x: int, lane: int) -> Vector2:
    """Centre of the given grid cell in world coordinates."""
    return Vector2(
        GRID_OFFSET_X + grid_x * GRID_CELL_WIDTH + GRID_CELL_WIDTH / 2,
        GRID_OFFSET_Y + lane * GRID_CELL_HEIGHT + GRID_CELL_HEIGHT / 2,
    )


def world_to_grid(position: VectorLike) -> tuple[int, int]:
    """The ``(grid_x, lane)`` cell containing a world position."""
    point = Vector2.of(position)
    grid_x = math.floor((point.x - GRID_OFFSET_X) / GRID_CELL_WIDTH)
    lane = math.floor((point.y - GRID_OFFSET_Y) / GRID_CELL_HEIGHT)
    return grid_x, lane


class GameObject(ABC):
    """Something in the game world with a position and an active flag."""

    def __init__(self, position: VectorLike | None = None) -> None:
        self._position = Vector2() if position is None else Vector2.of(position)
        self.active = True

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value: VectorLike) -> None:
        self._position = Vector2.of(value)

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the object by ``dt`` seconds."""

    @abstractmethod
    def category(self) -> ObjectCategory:
        """The collision category of this object."""

    def draw(self, target: Any) -> None:
        """Hand the object to a render target that knows how to draw it."""
        target.draw(self)

    def distance_to(self, other: "GameObject") -> float:
        return self.position.distance_to(other.position)


class MovingObject(GameObject):
    """A game object with mass and velocity that moves on update."""

    def __init__(self, position: VectorLike | None = None, mass: float = 1.0) -> None:
        super().__init__(position)
        if mass <= 0:
            raise ValueError("mass must be positive")
        self.mass = float(mass)
        self._velocity = Vector2()

    @property
    def velocity(self) -> Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: VectorLike) -> None:
        self._velocity = Vector2.of(value)

    def apply_force(self, force: VectorLike, dt: float) -> None:
        """Accelerate by ``force / mass`` for ``dt`` seconds."""
        if dt < 0:
            raise ValueError("dt must not be negative")
        self._velocity = self._velocity + Vector2.of(force) * (dt / self.mass)

    def apply_impulse(self, impulse: VectorLike) -> None:
        """Change velocity instantly by ``impulse / mass``."""
        self._velocity = self._velocity + Vector2.of(impulse) * (1.0 / self.mass)

    def update(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must not be negative")
        self._position = self._position + self._velocity * dt


class StaticObject(GameObject):
    """A game object that sits on a grid cell."""

    def __init__(self, position: VectorLike | None = None) -> None:
        super().__init__(position)
        self.lane = 0
        self.grid_position: tuple[int, int] = (0, 0)
        self.placed = False

    def category(self) -> ObjectCategory:
        return ObjectCategory.UNKNOWN

    def update(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must not be negative")

    def set_grid_position(self, grid_x: int, lane: int) -> None:
        """Place the object on a cell and move it to the cell's centre."""
        if not self.can_be_placed_at(lane, grid_x):
            raise ValueError(f"cannot place at column {grid_x}, lane {lane}")
        self.grid_position = (grid_x, lane)
        self.lane = lane
        self.placed = True
        self.snap_to_grid()

    def can_be_placed_at(self, lane: int, grid_x: int) -> bool:
        return is_valid_grid_position(grid_x, lane)

    def snap_to_grid(self) -> None:
        self.position = grid_to_world(*self.grid_position)