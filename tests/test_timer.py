import time

import pytest

from heaplayers.timer import Timer


def fake_clock(*values):
    return iter(values).__next__


def test_elapsed_is_zero_before_stop():
    timer = Timer(clock=fake_clock(1.0))
    timer.start()
    assert timer.elapsed() == 0.0


def test_stop_measures_since_start():
    timer = Timer(clock=fake_clock(10.0, 12.5))
    timer.start()
    timer.stop()
    assert timer.elapsed() == pytest.approx(2.5)


def test_second_stop_measures_from_same_start():
    timer = Timer(clock=fake_clock(0.0, 1.0, 4.0))
    timer.start()
    timer.stop()
    first = timer.elapsed()
    timer.stop()
    assert timer.elapsed() > first
    assert timer.elapsed() == pytest.approx(4.0)


def test_restart_resets_origin():
    timer = Timer(clock=fake_clock(0.0, 5.0, 100.0, 101.0))
    timer.start()
    timer.stop()
    timer.start()
    timer.stop()
    assert timer.elapsed() == pytest.approx(1.0)


def test_float_conversion_matches_elapsed():
    timer = Timer(clock=fake_clock(2.0, 3.0))
    timer.start()
    timer.stop()
    assert float(timer) == timer.elapsed()


def test_stop_without_start_raises():
    timer = Timer()
    with pytest.raises(RuntimeError):
        timer.stop()


def test_context_manager_with_real_clock():
    with Timer() as timer:
        time.sleep(0.01)
    assert timer.elapsed() >= 0.005


def test_current_time_tracks_wall_clock():
    before = time.time()
    now = Timer.current_time()
    after = time.time()
    assert before <= now <= after