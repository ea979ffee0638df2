import pytest

from robotdefense.timer import Timer


def test_update_accumulates_elapsed():
    timer = Timer(1.0)
    timer.update(0.25)
    assert timer.elapsed() == 0.25
    assert timer.elapsed() + timer.remaining() == timer.duration
    assert not timer.is_finished()


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Timer(-1.0)


def test_negative_dt_rejected():
    with pytest.raises(ValueError):
        Timer(1.0).update(-0.1)


def test_completion_stops_timer():
    done = []
    timer = Timer(1.0)
    timer.on_complete(lambda: done.append("done"))
    timer.update(1.5)
    assert done == ["done"]
    assert timer.is_finished()
    assert not timer.running
    assert timer.remaining() == 0.0
    assert timer.progress() == 1.0
    timer.update(1.0)
    assert done == ["done"]


def test_callbacks_fire_in_order():
    events = []
    timer = Timer(1.0)
    timer.on_quarter(lambda: events.append("quarter"))
    timer.on_halfway(lambda: events.append("half"))
    timer.on_three_quarter(lambda: events.append("three_quarter"))
    timer.on_complete(lambda: events.append("complete"))
    for _ in range(4):
        timer.update(0.25)
    assert events == ["quarter", "half", "three_quarter", "complete"]


def test_large_step_fires_every_milestone_once():
    events = []
    timer = Timer(2.0)
    timer.on_progress(0.1, lambda: events.append("early"))
    timer.on_halfway(lambda: events.append("half"))
    timer.update(5.0)
    timer.update(5.0)
    assert events == ["early", "half"]


def test_custom_progress_out_of_range_rejected():
    with pytest.raises(ValueError):
        Timer(1.0).on_progress(1.5, lambda: None)


def test_clear_callbacks():
    events = []
    timer = Timer(1.0)
    timer.on_halfway(lambda: events.append("half"))
    timer.on_complete(lambda: events.append("complete"))
    timer.clear_callbacks()
    timer.update(1.0)
    assert events == []
    assert timer.is_finished()


def test_looping_timer_keeps_running():
    completions = []
    timer = Timer(1.0)
    timer.looping = True
    timer.on_complete(lambda: completions.append(timer.elapsed()))
    timer.update(1.25)
    assert len(completions) == 1
    assert timer.running
    assert not timer.is_finished()
    assert timer.elapsed() < timer.duration


def test_pause_and_resume():
    timer = Timer(1.0)
    timer.update(0.25)
    timer.pause()
    assert timer.paused
    timer.update(0.5)
    assert timer.elapsed() == 0.25
    timer.resume()
    timer.update(0.25)
    assert timer.elapsed() == 0.25 + 0.25


def test_time_scale():
    timer = Timer(1.0)
    timer.time_scale = 2.0
    timer.update(0.25)
    assert timer.elapsed() == pytest.approx(0.5)
    with pytest.raises(ValueError):
        timer.time_scale = -1.0


def test_restart_after_finish():
    timer = Timer(1.0)
    timer.update(1.0)
    assert timer.is_finished()
    timer.restart()
    assert timer.running
    assert not timer.is_finished()
    assert timer.elapsed() == 0.0


def test_reset_refires_milestones():
    events = []
    timer = Timer(1.0)
    timer.on_halfway(lambda: events.append("half"))
    timer.update(0.5)
    timer.reset()
    timer.update(0.5)
    assert events == ["half", "half"]


def test_zero_duration_timer_measures_cooldowns():
    timer = Timer()
    timer.update(0.5)
    timer.update(0.5)
    assert timer.running
    assert not timer.is_finished()
    assert timer.is_elapsed(0.75)
    assert not timer.is_elapsed(1.5)
    assert timer.progress() == 0.0


def test_is_elapsed_against_own_duration():
    timer = Timer(1.0)
    timer.update(0.5)
    assert not timer.is_elapsed()
    timer.update(0.5)
    assert timer.is_elapsed()


def test_add_time_extends_and_revives():
    timer = Timer(1.0)
    timer.update(1.0)
    assert timer.is_finished()
    timer.add_time(1.0)
    assert not timer.is_finished()
    assert timer.running
    assert timer.remaining() == 1.0


def test_subtract_time_clamps_at_zero():
    timer = Timer(1.0)
    timer.subtract_time(5.0)
    assert timer.duration == 0.0
    with pytest.raises(ValueError):
        timer.subtract_time(-1.0)
    with pytest.raises(ValueError):
        timer.add_time(-1.0)


def test_is_near_completion():
    timer = Timer(1.0)
    timer.update(0.5)
    assert not timer.is_near_completion()
    assert timer.is_near_completion(0.5)
    timer.update(0.45)
    assert timer.is_near_completion()