"""A container that owns game entities and updates and draws the active ones."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, Protocol, TypeVar


class Entity(Protocol):
    active: bool

    def update(self, dt: float) -> None: ...

    def draw(self, target: Any) -> None: ...


E = TypeVar("E", bound=Entity)


class EntityManager(Generic[E]):
    """Holds entities in insertion order; most operations only touch active ones."""

    def __init__(self) -> None:
        self._entities: list[E] = []

    def add(self, entity: Optional[E]) -> None:
        """Add an entity; ``None`` is ignored."""
        if entity is not None:
            self._entities.append(entity)

    def create(self, factory: Callable[..., E], *args: Any, **kwargs: Any) -> E:
        """Build an entity with ``factory`` and add it."""
        entity = factory(*args, **kwargs)
        self.add(entity)
        return entity

    def update(self, dt: float) -> None:
        for entity in self.active():
            entity.update(dt)

    def draw(self, target: Any) -> None:
        for entity in self.active():
            entity.draw(target)

    def remove_inactive(self) -> None:
        self._entities[:] = [e for e in self._entities if e.active]

    def remove(self, entity: E) -> None:
        """Remove the given entity object, matched by identity."""
        self._entities[:] = [e for e in self._entities if e is not entity]

    def find(self, predicate: Callable[[E], bool]) -> list[E]:
        return [e for e in self._entities if e.active and predicate(e)]

    def find_first(self, predicate: Callable[[E], bool]) -> Optional[E]:
        return next((e for e in self._entities if e.active and predicate(e)), None)

    def for_each(self, func: Callable[[E], Any]) -> None:
        for entity in self.active():
            func(entity)

    def active(self) -> list[E]:
        return [e for e in self._entities if e.active]

    def clear(self) -> None:
        self._entities.clear()

    def active_count(self) -> int:
        return sum(1 for e in self._entities if e.active)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[E]:
        return iter(list(self._entities))