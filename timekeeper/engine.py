import logging
from typing import Any, Callable, List

from .state import RunState
from .ticker import Ticker

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class TickingEngine:
    """
    Common plumbing of the countdown and the stopwatch: the run state, the one
    ticker handle the engine may hold, and the listeners to notify after every
    observable change.
    """

    #: nominal tick period, set by subclasses
    tick_ms: int = 0

    def __init__(self, ticker: Ticker):
        self.ticker = ticker
        self._state = RunState.IDLE
        self._handle: Any = None
        self._listeners: List[Listener] = []

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is RunState.RUNNING

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _set_state(self, state: RunState) -> None:
        if state is not self._state:
            logger.debug(f"{type(self).__name__}: {self._state.value} -> {state.value}")
        self._state = state

    def _arm(self) -> None:
        assert self._handle is None, "ticker armed twice"
        self._handle = self.ticker.arm(self.tick_ms, self.on_tick)

    def _disarm(self) -> None:
        if self._handle is not None:
            self.ticker.disarm(self._handle)
            self._handle = None

    def on_tick(self) -> None:
        raise NotImplementedError

    def pause(self) -> None:
        """Stop ticking and keep every value. Does nothing unless running."""
        if not self.is_running:
            return
        self._disarm()
        self._set_state(RunState.IDLE)
        self._notify()

    def deactivate(self) -> None:
        """Called by the host when the engine's tab loses focus; same as ``pause``."""
        self.pause()
