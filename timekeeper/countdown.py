import logging

from .engine import TickingEngine
from .formatting import format_countdown
from .state import CountdownSnapshot, RunState
from .ticker import Ticker

logger = logging.getLogger(__name__)

MAX_MINUTES = 59
MAX_SECONDS = 59


def _clamp(value: int, upper: int) -> int:
    return max(0, min(int(value), upper))


class CountdownEngine(TickingEngine):
    """
    Counts a configured duration down to zero, one second per tick.

    The configured ``minutes``/``seconds`` (the target) only take effect on
    ``apply_configuration`` or ``reset``; neither can be changed while running.

    Args:
        ticker (Ticker): Source of the one-second ticks.
        minutes (int): Initial minutes, clamped to [0, 59].
        seconds (int): Initial seconds, clamped to [0, 59].
    """

    tick_ms = 1000

    def __init__(self, ticker: Ticker, minutes: int = 5, seconds: int = 0):
        super().__init__(ticker)
        self._minutes = _clamp(minutes, MAX_MINUTES)
        self._seconds = _clamp(seconds, MAX_SECONDS)
        self._remaining = self.target_seconds

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> int:
        return self._seconds

    @property
    def target_seconds(self) -> int:
        return self._minutes * 60 + self._seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def is_finished(self) -> bool:
        return self._state is RunState.FINISHED

    @property
    def can_start(self) -> bool:
        return not self.is_running and self._remaining > 0

    def configure(self, minutes: int, seconds: int) -> None:
        """Set the target; out-of-range values saturate. Ignored while running."""
        if self.is_running:
            return
        minutes, seconds = _clamp(minutes, MAX_MINUTES), _clamp(seconds, MAX_SECONDS)
        if (minutes, seconds) == (self._minutes, self._seconds):
            return
        self._minutes, self._seconds = minutes, seconds
        self._notify()

    def adjust_minutes(self, delta: int) -> None:
        self.configure(self._minutes + delta, self._seconds)

    def adjust_seconds(self, delta: int) -> None:
        self.configure(self._minutes, self._seconds + delta)

    def apply_configuration(self) -> None:
        """Load the target into the remaining time and clear a finished state."""
        if self.is_running:
            return
        self._remaining = self.target_seconds
        self._set_state(RunState.IDLE)
        self._notify()

    def start(self) -> None:
        if not self.can_start:
            return
        self._arm()
        self._set_state(RunState.RUNNING)
        self._notify()

    def reset(self) -> None:
        self._disarm()
        self._remaining = self.target_seconds
        self._set_state(RunState.IDLE)
        self._notify()

    def on_tick(self) -> None:
        if not self.is_running:
            return
        if self._remaining <= 1:
            self._disarm()
            self._remaining = 0
            self._set_state(RunState.FINISHED)
            logger.info(f"Countdown of {format_countdown(self.target_seconds)} finished")
        else:
            self._remaining -= 1
        self._notify()

    def display(self) -> str:
        return format_countdown(self._remaining)

    def snapshot(self) -> CountdownSnapshot:
        return CountdownSnapshot(
            state=self._state,
            remaining_seconds=self._remaining,
            target_seconds=self.target_seconds,
            minutes=self._minutes,
            seconds=self._seconds,
        )
