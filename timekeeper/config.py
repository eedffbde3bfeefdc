import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .ticker import TIMER_TYPES

logger = logging.getLogger(__name__)

__dir__ = Path(__file__).resolve().parent

DEFAULT_CONFIG_PATH = __dir__ / "config.yaml"
TABS = ("timer", "stopwatch")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level.")
    return data


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` over ``base``; nested mappings are merged one level deep."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the value types and choices of a merged configuration.

    Minutes and seconds are only type-checked; the countdown clamps them.

    Raises:
        ValueError: On the first offending key.
    """
    if not isinstance(cfg.get("window_title"), str):
        raise ValueError("'window_title' must be a string.")
    if cfg.get("initial_tab") not in TABS:
        raise ValueError(f"'initial_tab' must be one of {TABS}, got {cfg.get('initial_tab')!r}.")
    level = cfg.get("log_level")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"'log_level' must be one of {LOG_LEVELS}, got {level!r}.")

    countdown = cfg.get("countdown")
    if not isinstance(countdown, dict):
        raise ValueError("'countdown' must be a mapping.")
    for key in ("minutes", "seconds"):
        value = countdown.get(key)
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"'countdown.{key}' must be an integer, got {value!r}.")

    ticker = cfg.get("ticker")
    if not isinstance(ticker, dict):
        raise ValueError("'ticker' must be a mapping.")
    if ticker.get("timer_type") not in TIMER_TYPES:
        raise ValueError(
            f"'ticker.timer_type' must be one of {sorted(TIMER_TYPES)}, got {ticker.get('timer_type')!r}."
        )
    return cfg


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load the packaged defaults and, if given, a user config file over them.

    Args:
        path (str | Path, optional): User config file.

    Returns:
        dict: The merged and validated configuration.
    """
    cfg = _read_yaml(DEFAULT_CONFIG_PATH)
    if path is not None:
        path = Path(path)
        logger.info(f"Loading config from {path}")
        cfg = merge_config(cfg, _read_yaml(path))
    return validate_config(cfg)
