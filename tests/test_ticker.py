"""Tests for ManualTicker and QtTicker."""
import pytest
from PySide6.QtCore import QEventLoop, QTimer

from timekeeper import ManualTicker, QtTicker, StopwatchEngine


def spin(ms):
    """Run the Qt event loop for ``ms`` milliseconds."""
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


class TestManualTicker:
    def test_arm_returns_distinct_handles(self):
        ticker = ManualTicker()
        a = ticker.arm(10, lambda: None)
        b = ticker.arm(10, lambda: None)
        assert a != b
        assert ticker.armed_count == 2

    def test_disarm_is_idempotent(self):
        ticker = ManualTicker()
        handle = ticker.arm(10, lambda: None)
        ticker.disarm(handle)
        ticker.disarm(handle)
        ticker.disarm(None)
        assert not ticker.is_armed(handle)
        assert ticker.armed_count == 0

    def test_tick_single_handle(self):
        ticker = ManualTicker()
        hits = []
        a = ticker.arm(10, lambda: hits.append("a"))
        ticker.arm(10, lambda: hits.append("b"))
        assert ticker.tick(a, count=2) == 2
        assert hits == ["a", "a"]

    def test_disarmed_handle_gets_nothing(self):
        ticker = ManualTicker()
        hits = []
        handle = ticker.arm(10, lambda: hits.append(1))
        ticker.disarm(handle)
        assert ticker.tick(handle) == 0
        assert ticker.advance(100) == 0
        assert hits == []

    def test_self_disarm_stops_delivery(self):
        ticker = ManualTicker()
        hits = []

        def on_tick():
            hits.append(1)
            if len(hits) == 3:
                ticker.disarm(handle)

        handle = ticker.arm(10, on_tick)
        assert ticker.advance(1000) == 3
        assert ticker.tick(count=10) == 0

    def test_advance_per_period(self):
        ticker = ManualTicker()
        fast, slow = [], []
        ticker.arm(10, lambda: fast.append(1))
        ticker.arm(1000, lambda: slow.append(1))
        ticker.advance(2005)
        assert (len(fast), len(slow)) == (200, 2)
        ticker.advance(995)
        assert (len(fast), len(slow)) == (300, 3)

    def test_invalid_arguments(self):
        ticker = ManualTicker()
        with pytest.raises(ValueError):
            ticker.arm(0, lambda: None)
        with pytest.raises(ValueError):
            ticker.advance(-1)


class TestQtTicker:
    def test_rejects_unknown_timer_type(self, qapp):
        with pytest.raises(ValueError):
            QtTicker(timer_type="atomic")

    def test_ticks_until_disarmed(self, qapp):
        ticker = QtTicker()
        hits = []
        handle = ticker.arm(10, lambda: hits.append(1))
        assert ticker.is_armed(handle)
        spin(150)
        ticker.disarm(handle)
        count = len(hits)
        assert count > 0
        assert ticker.armed_count == 0

        spin(100)
        assert len(hits) == count
        ticker.disarm(handle)

    def test_drives_a_stopwatch(self, qapp):
        ticker = QtTicker()
        stopwatch = StopwatchEngine(ticker)
        stopwatch.start()
        spin(200)
        stopwatch.pause()
        elapsed = stopwatch.elapsed_millis
        assert elapsed > 0
        assert elapsed % 10 == 0
        assert ticker.armed_count == 0

        spin(50)
        assert stopwatch.elapsed_millis == elapsed
