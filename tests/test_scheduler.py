import threading

import pytest

from scanner.scheduler import IntervalScheduler, ManualScheduler


def test_manual_scheduler_elapse():
    """Test each elapsed interval invokes the callback once"""
    calls = []
    scheduler = ManualScheduler()
    scheduler.start(lambda: calls.append(1))

    scheduler.elapse(3)

    assert len(calls) == 3
    assert scheduler.elapsed == 3
    assert scheduler.is_running


def test_manual_scheduler_stop():
    """Test a stopped scheduler no longer calls back"""
    calls = []
    scheduler = ManualScheduler()
    scheduler.start(lambda: calls.append(1))
    scheduler.stop()

    scheduler.elapse(2)

    assert calls == []
    assert not scheduler.is_running


def test_interval_scheduler_fires_repeatedly():
    """Test the threaded scheduler calls back on its cadence until stopped"""
    calls = []
    done = threading.Event()

    def callback():
        calls.append(1)
        if len(calls) >= 3:
            done.set()

    scheduler = IntervalScheduler(0.01)
    scheduler.start(callback)
    try:
        assert done.wait(timeout=5.0), "Callback should fire at least 3 times"
        assert scheduler.is_running
    finally:
        scheduler.stop()

    count = len(calls)
    assert not scheduler.is_running
    done.clear()
    assert not done.wait(timeout=0.05)
    assert len(calls) == count, "No callbacks after stop()"


def test_interval_scheduler_stop_idempotent():
    """Test stopping a scheduler that never started is a no-op"""
    scheduler = IntervalScheduler(1.0)
    scheduler.stop()
    scheduler.stop()

    assert not scheduler.is_running


@pytest.mark.parametrize("interval", [0.0, -1.0])
def test_interval_scheduler_invalid_interval(interval):
    """Test non-positive intervals are rejected"""
    with pytest.raises(ValueError):
        IntervalScheduler(interval)
