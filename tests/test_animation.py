from types import SimpleNamespace

import pytest

from robotdefense.animation import Animation, AnimationComponent, Rect


@pytest.fixture
def walk():
    return Animation("walk.png", 32, 48, 4, 1.0)


def test_frames_form_a_row(walk):
    assert walk.frame(0) == Rect(0, 0, 32, 48)
    assert len(walk.frames) == walk.frame_count
    for index, rect in enumerate(walk.frames):
        assert rect.left == index * 32
        assert (rect.top, rect.width, rect.height) == (0, 32, 48)


def test_frame_index_out_of_range(walk):
    with pytest.raises(IndexError):
        walk.frame(4)
    with pytest.raises(IndexError):
        walk.frame(-1)


@pytest.mark.parametrize(
    "args",
    [(0, 48, 4, 1.0), (32, 48, 0, 1.0), (32, 48, 4, 0.0), (32, -1, 4, 1.0)],
)
def test_invalid_animation_arguments(args):
    with pytest.raises(ValueError):
        Animation("t.png", *args)


def test_no_animation_means_no_rect():
    component = AnimationComponent(None)
    component.update(0.5)
    assert component.current_rect() is None
    assert not component.is_last_frame()


def test_update_advances_frames(walk):
    component = AnimationComponent(None)
    component.play(walk, "walk")
    assert component.is_first_frame()
    component.update(0.3)
    assert component.is_on_frame(1)
    assert component.current_rect() == walk.frame(1)
    component.update(0.5)
    assert component.is_last_frame()
    assert not component.is_complete()


def test_loops_and_completes(walk):
    completed = []
    component = AnimationComponent(None)
    component.play(walk, "walk")
    component.set_complete_callback(lambda: completed.append(True))
    component.update(1.1)
    assert component.is_complete()
    assert component.is_first_frame()
    assert completed == [True]


def test_frame_callback_receives_index(walk):
    seen = []
    component = AnimationComponent(None)
    component.play(walk)
    component.set_frame_callback(2, seen.append)
    component.update(0.6)
    component.update(0.01)
    assert seen == [2]


def test_clear_callbacks(walk):
    seen = []
    component = AnimationComponent(None)
    component.play(walk)
    component.set_frame_callback(1, seen.append)
    component.set_complete_callback(lambda: seen.append(-1))
    component.clear_callbacks()
    component.update(1.1)
    component.update(0.3)
    assert seen == []


def test_pause_and_resume(walk):
    component = AnimationComponent(None)
    component.play(walk)
    component.pause()
    assert component.paused
    component.update(0.6)
    assert component.is_first_frame()
    component.resume()
    component.update(0.6)
    assert component.is_on_frame(2)


def test_speed_scales_time(walk):
    component = AnimationComponent(None)
    component.play(walk)
    component.speed = 2.0
    component.update(0.3)
    assert component.is_on_frame(2)


def test_play_same_animation_keeps_progress(walk):
    component = AnimationComponent(None)
    component.play(walk, "walk")
    component.update(0.3)
    component.play(walk, "walk")
    assert component.is_on_frame(1)


def test_play_other_animation_restarts(walk):
    attack = Animation("attack.png", 32, 48, 2, 0.5)
    component = AnimationComponent(None)
    component.play(walk, "walk")
    component.update(0.3)
    component.play(attack, "attack")
    assert component.is_first_frame()
    assert component.is_playing("attack")
    assert not component.is_playing("walk")
    assert component.animation is attack


def test_flip_follows_owner():
    owner = SimpleNamespace(facing_left=True)
    assert AnimationComponent(owner).flipped is True
    assert AnimationComponent(object()).flipped is False