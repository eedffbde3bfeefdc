"""Tests for StopwatchEngine."""
import pytest

from timekeeper import RunState, StopwatchEngine


@pytest.fixture
def stopwatch(ticker):
    return StopwatchEngine(ticker)


class TestTicking:
    @pytest.mark.parametrize("k", [0, 1, 7, 100, 6000])
    def test_k_ticks_is_10k_millis(self, ticker, stopwatch, k):
        stopwatch.start()
        ticker.tick(count=k)
        assert stopwatch.elapsed_millis == 10 * k

    def test_advance_follows_nominal_period(self, ticker, stopwatch):
        stopwatch.start()
        ticker.advance(25)
        assert stopwatch.elapsed_millis == 20
        ticker.advance(5)
        assert stopwatch.elapsed_millis == 30

    def test_start_twice_arms_once(self, ticker, stopwatch):
        stopwatch.start()
        stopwatch.start()
        assert ticker.armed_count == 1
        ticker.tick()
        assert stopwatch.elapsed_millis == 10

    def test_pause_keeps_elapsed(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=30)
        stopwatch.pause()
        assert stopwatch.state is RunState.IDLE
        assert ticker.armed_count == 0
        ticker.tick(count=30)
        assert stopwatch.elapsed_millis == 300

        stopwatch.start()
        ticker.tick(count=5)
        assert stopwatch.elapsed_millis == 350

    def test_pause_twice_is_idempotent(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=3)
        stopwatch.pause()
        first = stopwatch.snapshot()
        stopwatch.pause()
        assert stopwatch.snapshot() == first

    def test_deactivate_does_not_reset(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=12)
        stopwatch.lap()
        stopwatch.deactivate()
        assert stopwatch.state is RunState.IDLE
        assert stopwatch.elapsed_millis == 120
        assert stopwatch.laps == [120]
        assert ticker.armed_count == 0

    def test_late_tick_is_ignored(self, stopwatch):
        stopwatch.on_tick()
        assert stopwatch.elapsed_millis == 0

    def test_never_finishes(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=60 * 60 * 100)
        assert stopwatch.state is RunState.RUNNING
        assert stopwatch.display() == "60:00.00"


class TestLaps:
    def test_laps_most_recent_first(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=12)
        stopwatch.lap()
        ticker.tick(count=23)
        stopwatch.lap()
        ticker.tick(count=55)
        stopwatch.lap()
        assert stopwatch.laps == [900, 350, 120]

    def test_lap_while_idle_is_noop(self, ticker, stopwatch):
        stopwatch.lap()
        assert stopwatch.laps == []

        stopwatch.start()
        ticker.tick(count=4)
        stopwatch.lap()
        stopwatch.pause()
        stopwatch.lap()
        assert stopwatch.laps == [40]

    def test_lap_does_not_interrupt(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=2)
        stopwatch.lap()
        assert stopwatch.is_running
        ticker.tick()
        assert stopwatch.elapsed_millis == 30

    def test_lap_entries_are_numbered_from_oldest(self, ticker, stopwatch):
        stopwatch.start()
        for _ in range(3):
            ticker.tick(count=100)
            stopwatch.lap()
        assert stopwatch.lap_entries() == [(3, 3000), (2, 2000), (1, 1000)]

    def test_laps_property_is_a_copy(self, ticker, stopwatch):
        stopwatch.start()
        stopwatch.lap()
        stopwatch.laps.append(99)
        assert stopwatch.laps == [0]


class TestReset:
    def test_reset_clears_everything(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=50)
        stopwatch.lap()
        stopwatch.reset()
        assert stopwatch.state is RunState.IDLE
        assert stopwatch.elapsed_millis == 0
        assert stopwatch.laps == []
        assert ticker.armed_count == 0

    def test_reset_twice_is_idempotent(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=5)
        stopwatch.reset()
        first = stopwatch.snapshot()
        stopwatch.reset()
        assert stopwatch.snapshot() == first

    def test_reset_while_idle_clears_paused_time(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=5)
        stopwatch.pause()
        stopwatch.reset()
        assert stopwatch.elapsed_millis == 0


class TestScenario:
    def test_two_laps(self, ticker, stopwatch):
        stopwatch.start()
        ticker.tick(count=250)
        stopwatch.lap()
        ticker.tick(count=250)
        stopwatch.lap()

        snap = stopwatch.snapshot()
        assert snap.laps == (5000, 2500)
        assert stopwatch.laps == [5000, 2500]
        assert stopwatch.display() == "00:05.00"

    def test_listener_sees_each_tick(self, ticker, stopwatch):
        seen = []
        stopwatch.add_listener(lambda: seen.append(stopwatch.elapsed_millis))
        stopwatch.start()
        ticker.tick(count=3)
        assert seen == [0, 10, 20, 30]
