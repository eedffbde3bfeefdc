"""Countdown timer and stopwatch engines driven by an injected ticker."""

from .countdown import CountdownEngine
from .formatting import format_countdown, format_stopwatch, parse_countdown, parse_stopwatch
from .state import CountdownSnapshot, RunState, StopwatchSnapshot
from .stopwatch import StopwatchEngine
from .ticker import ManualTicker, QtTicker, Ticker

__all__ = [
    "CountdownEngine",
    "StopwatchEngine",
    "RunState",
    "CountdownSnapshot",
    "StopwatchSnapshot",
    "Ticker",
    "QtTicker",
    "ManualTicker",
    "format_countdown",
    "format_stopwatch",
    "parse_countdown",
    "parse_stopwatch",
]
