[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotdefense"
version = "0.1.0"
description = "Game logic for a lane-based tower defense game: robots, squad members, projectiles, collectibles, bombs with undo/redo, timers, configuration, settings and high scores."
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "strategy", "simulation", "undo-redo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["robotdefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
