from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RunState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    # countdown only
    FINISHED = "finished"


@dataclass(frozen=True)
class CountdownSnapshot:
    """Read-only view of a countdown engine, as rendered by the widgets."""

    state: RunState
    remaining_seconds: int
    target_seconds: int
    minutes: int
    seconds: int

    @property
    def is_finished(self) -> bool:
        return self.state is RunState.FINISHED

    @property
    def is_running(self) -> bool:
        return self.state is RunState.RUNNING


@dataclass(frozen=True)
class StopwatchSnapshot:
    """Read-only view of a stopwatch engine. ``laps`` is most-recent-first."""

    state: RunState
    elapsed_millis: int
    laps: Tuple[int, ...] = ()

    @property
    def is_running(self) -> bool:
        return self.state is RunState.RUNNING
