# robotdefense

This package holds the game logic for a lane-based tower defense game. It does no rendering. Squad members sit on a grid of three lanes and seven columns. Robots walk left along their lanes and attack the squad members they meet. Projectiles fly at robots or at points on the field. Robots drop coins and health packs. Bombs explode after a fuse, and placing a bomb can be undone or redone.

The package is plain Python and needs nothing outside the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `robotdefense.constants` | The game enums (`RobotType`, `SquadMemberType`, `ProjectileType`, `CollectibleType`, `WaveState` and others). Grid, timing, combat and audio constants. The economy helpers `calculate_starting_coins`, `round_coins` and `starting_coins_for_level`. |
| `robotdefense.commands` | The abstract `Command` class. `CommandManager` executes commands and keeps a bounded undo history and a redo history. |
| `robotdefense.timer` | `Timer` advances by the delta time you pass it. It can pause, loop, apply a time scale, and call back on completion, at 25/50/75 % and at custom progress points. |
| `robotdefense.entities` | `EntityManager` holds entities in insertion order. It updates, draws, queries and prunes the active ones. |
| `robotdefense.config` | `ConfigLoader` reads INI-style text and has typed getters that fall back to defaults. It builds `ProjectileConfig`, `PhysicsConfig`, `RobotConfig`, `SquadMemberConfig` and `GameConfig`. It raises `ConfigError` when a file cannot be read. |
| `robotdefense.animation` | `Rect`. `Animation` holds a row of sprite-sheet frames. `AnimationComponent` plays an animation, loops it, and runs per-frame and completion callbacks. |
| `robotdefense.objects` | `Vector2` and the `GameObject`, `MovingObject` and `StaticObject` classes. Grid helpers: `is_valid_grid_position`, `grid_to_world` and `world_to_grid`. |
| `robotdefense.collectibles` | `Collectible` has a limited lifetime. `Coin` grants its value and can be auto-collected. `HealthPack` heals a squad member by a percentage of its maximum health. |
| `robotdefense.bomb` | `Bomb` has a fuse, a blast radius and damage. `PlaceBombCommand` can be undone while the bomb has not exploded. |
| `robotdefense.highscores` | `HighScore`, and `HighScoreTable`, a ranked and capped table stored as JSON. It can export and import the table. It raises `HighScoreError` when a file cannot be read, parsed or written. |
| `robotdefense.combat` | `Robot` has health, movement, melee attacks and lane changes. `SquadMember` has targeting priorities, an attack cooldown, healing and a dying state. `Projectile` homes on a target, hits or misses, and has a range and a lifetime. |
| `robotdefense.settings` | `AudioCategory`. `AudioSettings` computes final volumes. `Settings`. `SettingsManager` knows the supported resolutions and saves and loads settings as an INI-style file. It raises `SettingsError`. |

## Examples

Starting coins grow with the level:

```python
from robotdefense.constants import starting_coins_for_level

starting_coins_for_level(1)   # 200
starting_coins_for_level(6)   # 430
```

Undo and redo a bomb placement:

```python
from robotdefense.bomb import PlaceBombCommand
from robotdefense.commands import CommandManager
from robotdefense.objects import Vector2

bombs = []
history = CommandManager(50)
history.execute(PlaceBombCommand(bombs, Vector2(300.0, 250.0)))
history.can_undo()      # True
history.undo()          # removes the bomb, since it has not exploded
history.redo()          # places a new bomb at the same position
```

Read configuration values, with a default for anything missing:

```python
from robotdefense.config import ConfigLoader

config = ConfigLoader()
config.parse("[BasicRobot]\nhealth = 120\nspeed = 40\n")
robot = config.load_robot_config("BasicRobot")
robot.health                                          # 120
config.get_int("BasicRobot", "reward", 25)            # 25
```

Run a timer with a halfway callback:

```python
from robotdefense.timer import Timer

timer = Timer(2.0)
timer.on_halfway(lambda: print("halfway"))
timer.update(1.0)       # prints "halfway"
timer.progress()        # 0.5
```

## What it does not do

This is a library of game rules and state. It has no game loop, window, rendering, input handling or sound playback. `AudioSettings` only computes volumes, and `draw` hands objects to a render target that you supply. There is no physics engine: `MovingObject` moves by its velocity. Robot waves are not generated or spawned for you. Nothing tracks the player's coins or base health. The package has no command-line program.