"""Audio volume rules and persistent game settings."""

from __future__ import annotations

import configparser
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Sequence, Union

from robotdefense.constants import MASTER_VOLUME, MUSIC_VOLUME, SFX_VOLUME, UI_VOLUME

SUPPORTED_RESOLUTIONS: tuple[tuple[int, int], ...] = (
    (1200, 800),
    (1280, 720),
    (1366, 768),
    (1600, 900),
    (1920, 1080),
)


class SettingsError(Exception):
    """Raised when settings cannot be read, written or are out of range."""


class AudioCategory(Enum):
    MUSIC = auto()
    SFX = auto()
    UI = auto()


@dataclass
class AudioSettings:
    master_volume: float = 100.0
    music_volume: float = 100.0
    sfx_volume: float = 100.0
    ui_volume: float = 100.0
    muted: bool = False
    music_enabled: bool = True
    sfx_enabled: bool = True

    def category_volume(self, category: AudioCategory) -> float:
        return {
            AudioCategory.MUSIC: self.music_volume,
            AudioCategory.SFX: self.sfx_volume,
            AudioCategory.UI: self.ui_volume,
        }[category]

    def final_volume(self, category: AudioCategory, volume: float = 1.0) -> float:
        """Playback volume (0-100) for a sound of ``category`` at relative ``volume``."""
        if self.muted:
            return 0.0
        if category is AudioCategory.MUSIC and not self.music_enabled:
            return 0.0
        if category is AudioCategory.SFX and not self.sfx_enabled:
            return 0.0
        result = self.master_volume / 100.0 * self.category_volume(category) / 100.0
        return min(max(result * volume * 100.0, 0.0), 100.0)


@dataclass
class Settings:
    audio: AudioSettings = field(default_factory=AudioSettings)
    fullscreen: bool = False
    vsync: bool = True
    resolution_index: int = 0
    key_bindings: list[int] = field(default_factory=list)
    game_speed: float = 1.0
    show_tutorial: bool = True
    auto_save: bool = True


def _validate(settings: Settings) -> None:
    if not 0 <= settings.resolution_index < len(SUPPORTED_RESOLUTIONS):
        raise SettingsError(f"resolution index {settings.resolution_index} out of range")
    audio = settings.audio
    for name in ("master_volume", "music_volume", "sfx_volume", "ui_volume"):
        value = getattr(audio, name)
        if not 0.0 <= value <= 100.0:
            raise SettingsError(f"{name} must be between 0 and 100, got {value}")
    if settings.game_speed <= 0:
        raise SettingsError("game speed must be positive")


class SettingsManager:
    """Keeps the current settings and stores them in an INI-style file."""

    def __init__(self, path: Union[str, Path] = "settings.cfg") -> None:
        self.path = Path(path)
        self.current = self.defaults()
        self._changed = False

    # Resolutions

    def supported_resolutions(self) -> list[tuple[int, int]]:
        return list(SUPPORTED_RESOLUTIONS)

    def resolution_string(self, resolution: Sequence[int]) -> str:
        width, height = resolution
        return f"{width}x{height}"

    def is_resolution_supported(self, resolution: Sequence[int]) -> bool:
        return tuple(resolution) in SUPPORTED_RESOLUTIONS

    def set_resolution(self, resolution: Sequence[int]) -> None:
        if not self.is_resolution_supported(resolution):
            raise SettingsError(f"unsupported resolution {self.resolution_string(resolution)}")
        index = SUPPORTED_RESOLUTIONS.index(tuple(resolution))
        if index != self.current.resolution_index:
            self.current.resolution_index = index
            self._changed = True

    def resolution(self) -> tuple[int, int]:
        return SUPPORTED_RESOLUTIONS[self.current.resolution_index]

    # Current settings

    def apply(self, settings: Settings) -> None:
        """Make ``settings`` the current settings."""
        _validate(settings)
        self.current = settings
        self._changed = True

    def has_changed(self) -> bool:
        return self._changed

    def mark_applied(self) -> None:
        self._changed = False

    def defaults(self) -> Settings:
        return Settings(
            audio=AudioSettings(
                master_volume=MASTER_VOLUME,
                music_volume=MUSIC_VOLUME,
                sfx_volume=SFX_VOLUME,
                ui_volume=UI_VOLUME,
            )
        )

    # Persistence

    def save(self, settings: Optional[Settings] = None) -> None:
        """Write ``settings`` (or the current ones) to the file."""
        settings = self.current if settings is None else settings
        _validate(settings)
        parser = configparser.ConfigParser()
        parser.optionxform = str  # type: ignore[assignment]
        audio = settings.audio
        parser["Audio"] = {
            "masterVolume": repr(float(audio.master_volume)),
            "musicVolume": repr(float(audio.music_volume)),
            "sfxVolume": repr(float(audio.sfx_volume)),
            "uiVolume": repr(float(audio.ui_volume)),
            "muted": str(bool(audio.muted)).lower(),
            "musicEnabled": str(bool(audio.music_enabled)).lower(),
            "sfxEnabled": str(bool(audio.sfx_enabled)).lower(),
        }
        parser["Graphics"] = {
            "fullscreen": str(bool(settings.fullscreen)).lower(),
            "vsync": str(bool(settings.vsync)).lower(),
            "resolutionIndex": str(settings.resolution_index),
        }
        parser["Controls"] = {"keyBindings": ",".join(str(k) for k in settings.key_bindings)}
        parser["Gameplay"] = {
            "gameSpeed": repr(float(settings.game_speed)),
            "showTutorial": str(bool(settings.show_tutorial)).lower(),
            "autoSave": str(bool(settings.auto_save)).lower(),
        }
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                parser.write(handle)
        except OSError as exc:
            raise SettingsError(f"cannot write {self.path}: {exc}") from exc
        self.current = settings

    def load(self) -> Settings:
        """Read settings from the file; missing keys take their default values."""
        parser = configparser.ConfigParser()
        parser.optionxform = str  # type: ignore[assignment]
        try:
            with self.path.open(encoding="utf-8") as handle:
                parser.read_file(handle)
        except OSError as exc:
            raise SettingsError(f"cannot read {self.path}: {exc}") from exc
        except configparser.Error as exc:
            raise SettingsError(f"invalid settings file {self.path}: {exc}") from exc

        base = self.defaults()
        try:
            audio = AudioSettings(
                master_volume=parser.getfloat("Audio", "masterVolume", fallback=base.audio.master_volume),
                music_volume=parser.getfloat("Audio", "musicVolume", fallback=base.audio.music_volume),
                sfx_volume=parser.getfloat("Audio", "sfxVolume", fallback=base.audio.sfx_volume),
                ui_volume=parser.getfloat("Audio", "uiVolume", fallback=base.audio.ui_volume),
                muted=parser.getboolean("Audio", "muted", fallback=base.audio.muted),
                music_enabled=parser.getboolean("Audio", "musicEnabled", fallback=base.audio.music_enabled),
                sfx_enabled=parser.getboolean("Audio", "sfxEnabled", fallback=base.audio.sfx_enabled),
            )
            bindings_text = parser.get("Controls", "keyBindings", fallback="")
            bindings = [int(part) for part in bindings_text.split(",") if part.strip()]
            settings = replace(
                base,
                audio=audio,
                fullscreen=parser.getboolean("Graphics", "fullscreen", fallback=base.fullscreen),
                vsync=parser.getboolean("Graphics", "vsync", fallback=base.vsync),
                resolution_index=parser.getint("Graphics", "resolutionIndex", fallback=base.resolution_index),
                key_bindings=bindings,
                game_speed=parser.getfloat("Gameplay", "gameSpeed", fallback=base.game_speed),
                show_tutorial=parser.getboolean("Gameplay", "showTutorial", fallback=base.show_tutorial),
                auto_save=parser.getboolean("Gameplay", "autoSave", fallback=base.auto_save),
            )
        except ValueError as exc:
            raise SettingsError(f"invalid value in {self.path}: {exc}") from exc
        _validate(settings)
        self.current = settings
        return settings