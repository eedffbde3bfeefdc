from .countdown_widget import CountdownWidget
from .stopwatch_widget import StopwatchWidget

__all__ = ["CountdownWidget", "StopwatchWidget"]
