"""
Periodic callback sources that drive the engines.

An engine never measures time itself. It arms a ticker when it starts running
and disarms it before it leaves the running state; every delivered tick
counts as exactly one nominal period.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol, Set

from PySide6.QtCore import QObject, Qt, QTimer

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]

TIMER_TYPES = {
    "precise": Qt.TimerType.PreciseTimer,
    "coarse": Qt.TimerType.CoarseTimer,
    "very_coarse": Qt.TimerType.VeryCoarseTimer,
}


class Ticker(Protocol):
    def arm(self, period_ms: int, on_tick: TickCallback) -> Any:
        """Start calling ``on_tick`` every ``period_ms`` and return a handle."""
        ...

    def disarm(self, handle: Any) -> None:
        """Stop the ticks of ``handle``. Disarming twice (or ``None``) does nothing."""
        ...


class QtTicker:
    """
    Ticker backed by ``QTimer``. Ticks are delivered on the Qt event loop of the
    thread that armed them.

    Args:
        parent (QObject, optional): Parent of the created timers.
        timer_type (str): One of ``TIMER_TYPES``. Defaults to "precise".
    """

    def __init__(self, parent: QObject | None = None, timer_type: str = "precise"):
        if timer_type not in TIMER_TYPES:
            raise ValueError(
                f"Unknown timer type {timer_type!r}, expected one of {sorted(TIMER_TYPES)}."
            )
        self.parent = parent
        self.timer_type = TIMER_TYPES[timer_type]
        # keeps the armed QTimers alive when there is no parent
        self._armed: Set[QTimer] = set()

    def arm(self, period_ms: int, on_tick: TickCallback) -> QTimer:
        if period_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {period_ms}.")
        timer = QTimer(self.parent)
        timer.setTimerType(self.timer_type)
        timer.setInterval(period_ms)
        timer.timeout.connect(on_tick)
        self._armed.add(timer)
        timer.start()
        logger.debug(f"Armed QTimer every {period_ms} ms")
        return timer

    def disarm(self, handle: Optional[QTimer]) -> None:
        if handle is None or handle not in self._armed:
            return
        self._armed.discard(handle)
        handle.stop()
        # a timeout already queued must not reach the engine
        handle.timeout.disconnect()
        handle.deleteLater()
        logger.debug("Disarmed QTimer")

    def is_armed(self, handle: Optional[QTimer]) -> bool:
        return handle in self._armed

    @property
    def armed_count(self) -> int:
        return len(self._armed)


@dataclass
class _Schedule:
    period_ms: int
    on_tick: TickCallback
    carry_ms: int = 0


class ManualTicker:
    """
    Ticker that only ticks when told to. Used for headless driving and tests.

    Handles are plain integers, never reused.
    """

    def __init__(self):
        self._schedules: Dict[int, _Schedule] = {}
        self._next_handle = 1

    def arm(self, period_ms: int, on_tick: TickCallback) -> int:
        if period_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {period_ms}.")
        handle = self._next_handle
        self._next_handle += 1
        self._schedules[handle] = _Schedule(period_ms, on_tick)
        logger.debug(f"Armed manual ticker {handle} every {period_ms} ms")
        return handle

    def disarm(self, handle: Optional[int]) -> None:
        if self._schedules.pop(handle, None) is not None:
            logger.debug(f"Disarmed manual ticker {handle}")

    def is_armed(self, handle: Optional[int]) -> bool:
        return handle in self._schedules

    @property
    def armed_count(self) -> int:
        return len(self._schedules)

    def tick(self, handle: Optional[int] = None, count: int = 1) -> int:
        """
        Deliver ``count`` ticks to ``handle``, or to every armed handle when
        ``handle`` is None. A handle disarmed by its own callback gets no
        further ticks.

        Returns:
            int: The number of ticks actually delivered.
        """
        delivered = 0
        for _ in range(count):
            targets = [handle] if handle is not None else list(self._schedules)
            for h in targets:
                schedule = self._schedules.get(h)
                if schedule is None:
                    continue
                schedule.on_tick()
                delivered += 1
        return delivered

    def advance(self, ms: int) -> int:
        """
        Let ``ms`` milliseconds of nominal time pass. Each armed handle gets one
        tick per full period; the remainder carries over to the next call.

        Returns:
            int: The number of ticks actually delivered.
        """
        if ms < 0:
            raise ValueError(f"Cannot advance by a negative duration, got {ms}.")
        delivered = 0
        for h in list(self._schedules):
            schedule = self._schedules.get(h)
            if schedule is None:
                continue
            schedule.carry_ms += ms
            while schedule.carry_ms >= schedule.period_ms and h in self._schedules:
                schedule.carry_ms -= schedule.period_ms
                schedule.on_tick()
                delivered += 1
        return delivered
