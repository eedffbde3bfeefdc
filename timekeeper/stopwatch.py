import logging
from typing import List, Tuple

from .engine import TickingEngine
from .formatting import format_stopwatch
from .state import RunState, StopwatchSnapshot
from .ticker import Ticker

logger = logging.getLogger(__name__)


class StopwatchEngine(TickingEngine):
    """
    Counts elapsed time up, 10 ms per tick, and records laps while running.
    Unlike the countdown, ``reset`` throws away everything measured so far.
    """

    tick_ms = 10

    def __init__(self, ticker: Ticker):
        super().__init__(ticker)
        self._elapsed = 0
        self._laps: List[int] = []

    @property
    def elapsed_millis(self) -> int:
        return self._elapsed

    @property
    def laps(self) -> List[int]:
        """Recorded laps, most recent first."""
        return list(self._laps)

    def start(self) -> None:
        if self.is_running:
            return
        self._arm()
        self._set_state(RunState.RUNNING)
        self._notify()

    def reset(self) -> None:
        self._disarm()
        self._elapsed = 0
        self._laps.clear()
        self._set_state(RunState.IDLE)
        self._notify()

    def lap(self) -> None:
        if not self.is_running:
            return
        self._laps.insert(0, self._elapsed)
        logger.debug(f"Lap {len(self._laps)} at {format_stopwatch(self._elapsed)}")
        self._notify()

    def lap_entries(self) -> List[Tuple[int, int]]:
        """``(lap number, millis)`` pairs, most recent first; the oldest lap is 1."""
        count = len(self._laps)
        return [(count - i, millis) for i, millis in enumerate(self._laps)]

    def on_tick(self) -> None:
        if not self.is_running:
            return
        self._elapsed += self.tick_ms
        self._notify()

    def display(self) -> str:
        return format_stopwatch(self._elapsed)

    def snapshot(self) -> StopwatchSnapshot:
        return StopwatchSnapshot(
            state=self._state,
            elapsed_millis=self._elapsed,
            laps=tuple(self._laps),
        )
