import pytest

from robotdefense.constants import MASTER_VOLUME, MUSIC_VOLUME, SFX_VOLUME, UI_VOLUME
from robotdefense.settings import (
    AudioCategory,
    AudioSettings,
    Settings,
    SettingsError,
    SettingsManager,
)


def test_final_volume_full_by_default():
    assert AudioSettings().final_volume(AudioCategory.SFX) == 100.0


def test_final_volume_muted_is_zero():
    audio = AudioSettings(muted=True)
    for category in AudioCategory:
        assert audio.final_volume(category) == 0.0


def test_final_volume_disabled_categories():
    audio = AudioSettings(music_enabled=False, sfx_enabled=False)
    assert audio.final_volume(AudioCategory.MUSIC) == 0.0
    assert audio.final_volume(AudioCategory.SFX) == 0.0
    assert audio.final_volume(AudioCategory.UI) == 100.0


def test_final_volume_scales_with_master():
    audio = AudioSettings(master_volume=50.0)
    assert audio.final_volume(AudioCategory.UI) == pytest.approx(50.0)


def test_final_volume_never_exceeds_maximum():
    assert AudioSettings().final_volume(AudioCategory.MUSIC, 3.0) == 100.0


def test_defaults_use_audio_constants(tmp_path):
    manager = SettingsManager(tmp_path / "settings.cfg")
    audio = manager.defaults().audio
    assert (audio.master_volume, audio.music_volume, audio.sfx_volume, audio.ui_volume) == (
        MASTER_VOLUME,
        MUSIC_VOLUME,
        SFX_VOLUME,
        UI_VOLUME,
    )


def test_save_load_round_trip(tmp_path):
    manager = SettingsManager(tmp_path / "settings.cfg")
    settings = Settings(
        audio=AudioSettings(master_volume=55.5, music_volume=20.0, muted=True, sfx_enabled=False),
        fullscreen=True,
        vsync=False,
        resolution_index=3,
        key_bindings=[17, 4, 42],
        game_speed=1.5,
        show_tutorial=False,
        auto_save=False,
    )
    manager.save(settings)
    loaded = SettingsManager(tmp_path / "settings.cfg").load()
    assert loaded == settings


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(SettingsError):
        SettingsManager(tmp_path / "absent.cfg").load()


def test_load_bad_value_raises(tmp_path):
    path = tmp_path / "settings.cfg"
    path.write_text("[Graphics]\nfullscreen = maybe\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        SettingsManager(path).load()


def test_load_partial_file_fills_defaults(tmp_path):
    path = tmp_path / "settings.cfg"
    path.write_text("[Gameplay]\ngameSpeed = 2.0\n", encoding="utf-8")
    manager = SettingsManager(path)
    loaded = manager.load()
    assert loaded.game_speed == 2.0
    assert loaded.audio == manager.defaults().audio
    assert loaded.vsync is Settings().vsync


def test_load_out_of_range_index_raises(tmp_path):
    path = tmp_path / "settings.cfg"
    path.write_text("[Graphics]\nresolutionIndex = 99\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        SettingsManager(path).load()


def test_save_rejects_invalid_settings(tmp_path):
    manager = SettingsManager(tmp_path / "settings.cfg")
    with pytest.raises(SettingsError):
        manager.save(Settings(resolution_index=-1))
    assert not (tmp_path / "settings.cfg").exists()


def test_resolution_string():
    manager = SettingsManager()
    assert manager.resolution_string((1920, 1080)) == "1920x1080"


def test_all_supported_resolutions_are_supported():
    manager = SettingsManager()
    resolutions = manager.supported_resolutions()
    assert resolutions
    assert all(manager.is_resolution_supported(r) for r in resolutions)
    assert not manager.is_resolution_supported((1, 1))


def test_set_resolution_tracks_change():
    manager = SettingsManager()
    target = manager.supported_resolutions()[-1]
    assert not manager.has_changed()
    manager.set_resolution(target)
    assert manager.resolution() == target
    assert manager.has_changed()
    manager.mark_applied()
    assert not manager.has_changed()


def test_set_unsupported_resolution_raises():
    manager = SettingsManager()
    before = manager.resolution()
    with pytest.raises(SettingsError):
        manager.set_resolution((123, 45))
    assert manager.resolution() == before