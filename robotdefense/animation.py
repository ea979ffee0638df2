"""Sprite-sheet animations and a component that plays them over time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

FrameCallback = Callable[[int], None]
AnimationCallback = Callable[[], None]


@dataclass(frozen=True)
class Rect:
    """An integer rectangle on a texture."""

    left: int
    top: int
    width: int
    height: int


class Animation:
    """A row of equally sized frames on a texture, played over ``duration`` seconds."""

    def __init__(
        self,
        texture: Any,
        frame_width: int,
        frame_height: int,
        frame_count: int,
        duration: float,
    ) -> None:
        if frame_width <= 0 or frame_height <= 0:
            raise ValueError("frame size must be positive")
        if frame_count <= 0:
            raise ValueError("frame_count must be positive")
        if duration <= 0:
            raise ValueError("duration must be positive")
        self.texture = texture
        self.frame_count = frame_count
        self.duration = float(duration)
        self.frames = tuple(
            Rect(index * frame_width, 0, frame_width, frame_height)
            for index in range(frame_count)
        )

    @property
    def frame_duration(self) -> float:
        return self.duration / self.frame_count

    def frame(self, index: int) -> Rect:
        if not 0 <= index < self.frame_count:
            raise IndexError(f"frame index {index} out of range")
        return self.frames[index]


class AnimationComponent:
    """Plays an animation for an owner, tracking the frame and firing callbacks."""

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.position: tuple[float, float] = (0.0, 0.0)
        self.speed = 1.0
        self._animation: Optional[Animation] = None
        self._name = ""
        self._time = 0.0
        self._frame = 0
        self._previous_frame = -1
        self._complete = False
        self._paused = False
        self._frame_callbacks: dict[int, FrameCallback] = {}
        self._complete_callback: Optional[AnimationCallback] = None

    @property
    def animation(self) -> Optional[Animation]:
        return self._animation

    @property
    def name(self) -> str:
        return self._name

    @property
    def current_frame(self) -> int:
        return self._frame

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def flipped(self) -> bool:
        """Whether the sprite is mirrored because the owner faces left."""
        return bool(getattr(self.owner, "facing_left", False))

    def play(self, animation: Animation, name: str = "") -> None:
        """Start an animation from its first frame unless it is already playing."""
        if animation is self._animation and name == self._name:
            return
        self._animation = animation
        self._name = name
        self._time = 0.0
        self._frame = 0
        self._previous_frame = -1
        self._complete = False

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds scaled by :attr:`speed`, looping at the end."""
        if self._animation is None or self._paused:
            return
        animation = self._animation
        self._time += dt * self.speed
        cycle_done = self._time >= animation.duration
        if cycle_done:
            self._time %= animation.duration
        self._frame = min(
            int(self._time / animation.frame_duration), animation.frame_count - 1
        )
        self._check_frame_callbacks()
        if cycle_done:
            self._complete = True
            if self._complete_callback is not None:
                self._complete_callback()

    def current_rect(self) -> Optional[Rect]:
        if self._animation is None:
            return None
        return self._animation.frame(self._frame)

    def is_on_frame(self, index: int) -> bool:
        return self._frame == index

    def is_first_frame(self) -> bool:
        return self._frame == 0

    def is_last_frame(self) -> bool:
        return self._animation is not None and self._frame == self._animation.frame_count - 1

    def is_complete(self) -> bool:
        """Whether the current animation has played through at least once."""
        return self._complete

    def is_playing(self, name: str) -> bool:
        return self._name == name

    def set_frame_callback(self, index: int, callback: FrameCallback) -> None:
        self._frame_callbacks[index] = callback

    def set_complete_callback(self, callback: Optional[AnimationCallback]) -> None:
        self._complete_callback = callback

    def clear_callbacks(self) -> None:
        self._frame_callbacks.clear()
        self._complete_callback = None

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def _check_frame_callbacks(self) -> None:
        if self._frame == self._previous_frame:
            return
        self._previous_frame = self._frame
        callback = self._frame_callbacks.get(self._frame)
        if callback is not None:
            callback(self._frame)