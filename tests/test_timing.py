import time
from unittest import mock

import pytest

from c78engine.timing import Timer, Timestep


def test_timestep_default_is_zero():
    assert Timestep().seconds == 0.0
    assert Timestep().milliseconds() == 0.0


def test_timestep_milliseconds():
    assert Timestep(0.25).milliseconds() == pytest.approx(250.0)


def test_timestep_float():
    assert float(Timestep(1.5)) == 1.5


def test_timer_elapsed_is_monotonic():
    timer = Timer()
    first = timer.elapsed_seconds()
    time.sleep(0.01)
    second = timer.elapsed_seconds()
    assert 0.0 <= first <= second


def test_timer_millis_follow_seconds():
    timer = Timer()
    seconds = timer.elapsed_seconds()
    millis = timer.elapsed_millis()
    assert millis >= seconds * 1000.0


def test_timer_reset_restarts():
    timer = Timer()
    time.sleep(0.02)
    before = timer.elapsed_seconds()
    timer.reset()
    assert timer.elapsed_seconds() < before


def test_timer_uses_nanosecond_clock():
    with mock.patch("time.perf_counter_ns", side_effect=[0, 2_000_000_000]):
        timer = Timer()
        assert timer.elapsed_seconds() == pytest.approx(2.0)