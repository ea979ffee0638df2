"""Game logic for a lane-based robot tower defense game: combat, collectibles, bombs, timers, configuration, settings and high scores."""

__version__ = "0.1.0"