"""
Time Keeper: a countdown timer and a stopwatch with laps, in two tabs.
"""

import logging
import sys
from argparse import ArgumentParser
from typing import Any, Dict

from PySide6.QtWidgets import QApplication, QLabel, QTabWidget, QVBoxLayout, QWidget
from PySide6.QtCore import Qt

from .components import CountdownWidget, StopwatchWidget
from .config import LOG_LEVELS, TABS, load_config
from .countdown import CountdownEngine
from .stopwatch import StopwatchEngine
from .ticker import QtTicker, Ticker

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """
    Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = ArgumentParser(description=__doc__)
    parser.add_argument("--config", default=None, help="path to a YAML config file")
    parser.add_argument(
        "--tab", default=None, choices=TABS, help="tab to show first (overrides config)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (overrides config)",
    )
    return parser.parse_args(args)


class MainWindow(QWidget):
    """
    The hosting session: owns one engine per tab and deactivates the engine of
    whichever tab is left.
    """

    def __init__(self, cfg: Dict[str, Any], ticker: Ticker | None = None):
        super().__init__()
        self.cfg = cfg
        if ticker is None:
            ticker = QtTicker(self, timer_type=cfg["ticker"]["timer_type"])
        self.ticker = ticker

        self.countdown = CountdownEngine(
            ticker, cfg["countdown"]["minutes"], cfg["countdown"]["seconds"]
        )
        self.stopwatch = StopwatchEngine(ticker)
        self.engines = [self.countdown, self.stopwatch]

        self.setWindowTitle(cfg.get("window_title", "Time Keeper"))
        layout = QVBoxLayout()
        title = QLabel(cfg.get("window_title", "Time Keeper"))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 28px; font-weight: bold;")
        layout.addWidget(title)

        self.countdown_widget = CountdownWidget(self.countdown)
        self.stopwatch_widget = StopwatchWidget(self.stopwatch)
        self.tabs = QTabWidget()
        self.tabs.addTab(self.countdown_widget, "Timer")
        self.tabs.addTab(self.stopwatch_widget, "Stopwatch")
        self.tabs.setCurrentIndex(TABS.index(cfg.get("initial_tab", "timer")))
        self._active_index = self.tabs.currentIndex()
        self.tabs.currentChanged.connect(self.on_tab_changed)
        layout.addWidget(self.tabs)

        self.setLayout(layout)
        self.resize(480, 600)

    def on_tab_changed(self, index: int):
        left = self._active_index
        self._active_index = index
        if left != index and 0 <= left < len(self.engines):
            logger.debug(f"Tab {TABS[left]} became inactive")
            self.engines[left].deactivate()

    def closeEvent(self, event):
        for engine in self.engines:
            engine.deactivate()
        event.accept()


def main(args=None):
    args = parse_args(args)
    cfg = load_config(args.config)
    if args.tab is not None:
        cfg["initial_tab"] = args.tab
    logging.basicConfig(
        level=args.log_level or cfg["log_level"].upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = QApplication(sys.argv[:1])
    window = MainWindow(cfg)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
