from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..formatting import format_stopwatch
from ..stopwatch import StopwatchEngine


class StopwatchWidget(QWidget):
    def __init__(self, engine: StopwatchEngine, parent=None):
        super().__init__(parent)
        self.engine = engine

        self.label = QLabel(engine.display())
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.label.setStyleSheet("font-size: 64px; font-weight: bold;")

        self.toggle_btn = QPushButton("Start")
        self.lap_btn = QPushButton("Lap")
        self.reset_btn = QPushButton("Reset")
        buttons = QHBoxLayout()
        buttons.addWidget(self.toggle_btn)
        buttons.addWidget(self.lap_btn)
        buttons.addWidget(self.reset_btn)

        self.laps_title = QLabel("Lap Times")
        self.laps_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.laps_title.setStyleSheet("font-weight: bold;")
        self.lap_list = QListWidget()

        layout = QVBoxLayout()
        layout.addWidget(self.label)
        layout.addLayout(buttons)
        layout.addWidget(self.laps_title)
        layout.addWidget(self.lap_list)
        self.setLayout(layout)

        self.toggle_btn.clicked.connect(self.on_toggle_click)
        self.lap_btn.clicked.connect(engine.lap)
        self.reset_btn.clicked.connect(engine.reset)
        engine.add_listener(self.refresh)
        self.refresh()

    def on_toggle_click(self):
        if self.engine.is_running:
            self.engine.pause()
        else:
            self.engine.start()

    def refresh(self):
        """Re-render from the engine snapshot."""
        snap = self.engine.snapshot()
        self.label.setText(format_stopwatch(snap.elapsed_millis))
        self.toggle_btn.setText("Pause" if snap.is_running else "Start")
        self.lap_btn.setEnabled(snap.is_running)

        if self.lap_list.count() != len(snap.laps):
            self.lap_list.clear()
            for number, millis in self.engine.lap_entries():
                self.lap_list.addItem(f"Lap {number}\t{format_stopwatch(millis)}")
        self.laps_title.setVisible(bool(snap.laps))
        self.lap_list.setVisible(bool(snap.laps))
