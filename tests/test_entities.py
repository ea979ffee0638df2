from dataclasses import dataclass, field

from robotdefense.entities import EntityManager


@dataclass(eq=False)
class Dummy:
    name: str
    active: bool = True
    updates: list = field(default_factory=list)

    def update(self, dt):
        self.updates.append(dt)

    def draw(self, target):
        target.append(self.name)


def make_manager(*entities):
    manager = EntityManager()
    for entity in entities:
        manager.add(entity)
    return manager


def test_add_ignores_none():
    manager = make_manager(Dummy("a"))
    manager.add(None)
    assert [e.name for e in manager] == ["a"]


def test_create_builds_and_adds():
    manager = EntityManager()
    entity = manager.create(Dummy, "made", active=False)
    assert entity.name == "made"
    assert list(manager) == [entity]


def test_update_only_touches_active():
    alive, idle = Dummy("alive"), Dummy("idle", active=False)
    manager = make_manager(alive, idle)
    manager.update(0.5)
    assert alive.updates == [0.5]
    assert idle.updates == []


def test_draw_only_active_in_order():
    target = []
    manager = make_manager(Dummy("a"), Dummy("b", active=False), Dummy("c"))
    manager.draw(target)
    assert target == ["a", "c"]


def test_remove_inactive():
    a, b = Dummy("a"), Dummy("b", active=False)
    manager = make_manager(a, b)
    assert len(manager) == 2
    manager.remove_inactive()
    assert list(manager) == [a]


def test_remove_by_identity():
    first, twin = Dummy("same"), Dummy("same")
    manager = make_manager(first, twin)
    manager.remove(first)
    assert list(manager) == [twin]


def test_find_and_find_first():
    a, b, c = Dummy("alpha"), Dummy("beta", active=False), Dummy("bravo")
    manager = make_manager(a, b, c)
    assert manager.find(lambda e: e.name.startswith("b")) == [c]
    assert manager.find_first(lambda e: e.name.startswith("b")) is c
    assert manager.find_first(lambda e: e.name == "missing") is None


def test_for_each_and_active_count():
    seen = []
    manager = make_manager(Dummy("a"), Dummy("b", active=False), Dummy("c"))
    manager.for_each(lambda e: seen.append(e.name))
    assert seen == ["a", "c"]
    assert manager.active_count() == len(seen)
    assert [e.name for e in manager.active()] == seen


def test_clear():
    manager = make_manager(Dummy("a"), Dummy("b"))
    manager.clear()
    assert len(manager) == 0
    assert list(manager) == []


def test_iteration_is_safe_while_removing():
    a, b = Dummy("a"), Dummy("b")
    manager = make_manager(a, b)
    for entity in manager:
        manager.remove(entity)
    assert len(manager) == 0