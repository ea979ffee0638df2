"""A game timer driven by frame delta time, with progress callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

TimerCallback = Callable[[], None]


@dataclass
class _Milestone:
    target: float
    callback: Optional[TimerCallback] = None
    triggered: bool = False


class Timer:
    """Counts game time passed to :meth:`update`.

    A duration of zero means the timer never completes and simply measures
    elapsed time, which suits cooldown checks with :meth:`is_elapsed`.
    """

    def __init__(self, duration: float = 0.0) -> None:
        if duration < 0:
            raise ValueError("duration must not be negative")
        self._duration = float(duration)
        self._elapsed = 0.0
        self._running = True
        self._paused = False
        self._finished = False
        self.looping = False
        self._time_scale = 1.0
        self._on_complete: Optional[TimerCallback] = None
        self._quarter = _Milestone(0.25)
        self._halfway = _Milestone(0.5)
        self._three_quarter = _Milestone(0.75)
        self._custom: list[_Milestone] = []

    @property
    def duration(self) -> float:
        return self._duration

    @duration.setter
    def duration(self, value: float) -> None:
        if value < 0:
            raise ValueError("duration must not be negative")
        self._duration = float(value)

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        if value < 0:
            raise ValueError("time scale must not be negative")
        self._time_scale = float(value)

    @property
    def running(self) -> bool:
        return self._running

    @property
    def paused(self) -> bool:
        return self._paused

    def update(self, dt: float) -> None:
        """Advance the timer by ``dt`` seconds of game time."""
        if dt < 0:
            raise ValueError("dt must not be negative")
        if not self._running or self._paused:
            return
        self._elapsed += dt * self._time_scale
        if self._duration > 0:
            self._check_milestones()
            if self._elapsed >= self._duration:
                self._complete()

    def reset(self) -> None:
        """Set elapsed time back to zero without changing the running state."""
        self._elapsed = 0.0
        self._finished = False
        self._reset_triggers()

    def restart(self) -> None:
        """Set elapsed time back to zero and start running."""
        self.reset()
        self._running = True
        self._paused = False

    def pause(self) -> None:
        if self._running:
            self._paused = True

    def resume(self) -> None:
        self._paused = False

    def is_elapsed(self, duration: float | None = None) -> bool:
        """Whether the given duration, or the timer's own, has passed."""
        target = self._duration if duration is None else duration
        return self._elapsed >= target

    def elapsed(self) -> float:
        return self._elapsed

    def remaining(self) -> float:
        return max(self._duration - self._elapsed, 0.0)

    def progress(self) -> float:
        """Fraction of the duration that has passed, between 0 and 1."""
        if self._duration <= 0:
            return 0.0
        return min(self._elapsed / self._duration, 1.0)

    def is_finished(self) -> bool:
        return self._finished

    def on_complete(self, callback: Optional[TimerCallback]) -> None:
        self._on_complete = callback

    def on_halfway(self, callback: Optional[TimerCallback]) -> None:
        self._halfway.callback = callback

    def on_quarter(self, callback: Optional[TimerCallback]) -> None:
        self._quarter.callback = callback

    def on_three_quarter(self, callback: Optional[TimerCallback]) -> None:
        self._three_quarter.callback = callback

    def on_progress(self, progress: float, callback: TimerCallback) -> None:
        """Call ``callback`` once when progress first reaches ``progress``."""
        if not 0.0 <= progress <= 1.0:
            raise ValueError("progress must be between 0 and 1")
        self._custom.append(_Milestone(progress, callback))

    def clear_callbacks(self) -> None:
        self._on_complete = None
        for milestone in (self._quarter, self._halfway, self._three_quarter):
            milestone.callback = None
        self._custom.clear()

    def add_time(self, seconds: float) -> None:
        """Extend the duration, giving the timer more time to run."""
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        self._duration += seconds
        if self._finished and self._elapsed < self._duration:
            self._finished = False
            self._running = True

    def subtract_time(self, seconds: float) -> None:
        """Shorten the duration, never below zero."""
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        self._duration = max(self._duration - seconds, 0.0)

    def is_near_completion(self, threshold: float = 0.9) -> bool:
        return self.progress() >= threshold

    def _milestones(self) -> list[_Milestone]:
        builtin = [self._quarter, self._halfway, self._three_quarter]
        return sorted(builtin + self._custom, key=lambda m: m.target)

    def _check_milestones(self) -> None:
        progress = self.progress()
        for milestone in self._milestones():
            if not milestone.triggered and progress >= milestone.target:
                milestone.triggered = True
                if milestone.callback is not None:
                    milestone.callback()

    def _reset_triggers(self) -> None:
        for milestone in self._milestones():
            milestone.triggered = False

    def _complete(self) -> None:
        if self.looping:
            self._elapsed %= self._duration
            self._reset_triggers()
        else:
            self._elapsed = self._duration
            self._finished = True
            self._running = False
        if self._on_complete is not None:
            self._on_complete()