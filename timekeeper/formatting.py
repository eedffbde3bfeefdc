import re

_COUNTDOWN_RE = re.compile(r"^(\d{2,}):(\d{2})$")
_STOPWATCH_RE = re.compile(r"^(\d{2,}):(\d{2})\.(\d{2})$")


def format_countdown(total_seconds: int) -> str:
    """Format whole seconds as ``MM:SS``."""
    if total_seconds < 0:
        raise ValueError(f"Cannot format a negative duration: {total_seconds}")
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02}:{seconds:02}"


def format_stopwatch(millis: int) -> str:
    """Format milliseconds as ``MM:SS.CC``, truncating to centiseconds."""
    if millis < 0:
        raise ValueError(f"Cannot format a negative duration: {millis}")
    minutes = millis // 60000
    seconds = millis % 60000 // 1000
    centis = millis % 1000 // 10
    return f"{minutes:02}:{seconds:02}.{centis:02}"


def parse_countdown(text: str) -> int:
    """
    Parse a ``MM:SS`` string back into whole seconds.

    Args:
        text (str): Text as produced by ``format_countdown``.

    Returns:
        int: Total seconds.
    """
    match = _COUNTDOWN_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Expected MM:SS, got {text!r}")
    minutes, seconds = (int(g) for g in match.groups())
    if seconds > 59:
        raise ValueError(f"Seconds out of range in {text!r}")
    return minutes * 60 + seconds


def parse_stopwatch(text: str) -> int:
    """
    Parse a ``MM:SS.CC`` string back into milliseconds.

    Args:
        text (str): Text as produced by ``format_stopwatch``.

    Returns:
        int: Total milliseconds, a multiple of 10.
    """
    match = _STOPWATCH_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Expected MM:SS.CC, got {text!r}")
    minutes, seconds, centis = (int(g) for g in match.groups())
    if seconds > 59:
        raise ValueError(f"Seconds out of range in {text!r}")
    return minutes * 60000 + seconds * 1000 + centis * 10
