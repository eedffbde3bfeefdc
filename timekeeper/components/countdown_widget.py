from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..countdown import CountdownEngine
from ..formatting import format_countdown


class CountdownWidget(QWidget):
    def __init__(self, engine: CountdownEngine, parent=None):
        super().__init__(parent)
        self.engine = engine

        self.label = QLabel(engine.display())
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.label.setStyleSheet("font-size: 64px; font-weight: bold;")

        # minutes / seconds adjustment, only shown while not running
        self.settings = QWidget()
        grid = QGridLayout()
        self.minutes_label = QLabel()
        self.seconds_label = QLabel()
        self.minutes_minus_btn = QPushButton("-")
        self.minutes_plus_btn = QPushButton("+")
        self.seconds_minus_btn = QPushButton("-")
        self.seconds_plus_btn = QPushButton("+")
        for col, (title, minus, value, plus) in enumerate(
            [
                ("Minutes", self.minutes_minus_btn, self.minutes_label, self.minutes_plus_btn),
                ("Seconds", self.seconds_minus_btn, self.seconds_label, self.seconds_plus_btn),
            ]
        ):
            value.setAlignment(Qt.AlignmentFlag.AlignCenter)
            grid.addWidget(QLabel(title), 0, col * 3 + 1, alignment=Qt.AlignmentFlag.AlignCenter)
            grid.addWidget(minus, 1, col * 3)
            grid.addWidget(value, 1, col * 3 + 1)
            grid.addWidget(plus, 1, col * 3 + 2)
        self.set_btn = QPushButton("Set Timer")
        settings_layout = QVBoxLayout()
        settings_layout.addLayout(grid)
        settings_layout.addWidget(self.set_btn)
        self.settings.setLayout(settings_layout)

        self.toggle_btn = QPushButton("Start")
        self.reset_btn = QPushButton("Reset")
        buttons = QHBoxLayout()
        buttons.addWidget(self.toggle_btn)
        buttons.addWidget(self.reset_btn)

        self.finished_label = QLabel("Time's Up!")
        self.finished_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.finished_label.setStyleSheet("font-size: 24px; font-weight: bold; color: #d4a017;")

        layout = QVBoxLayout()
        layout.addWidget(self.label)
        layout.addWidget(self.settings)
        layout.addLayout(buttons)
        layout.addWidget(self.finished_label)
        self.setLayout(layout)

        self.minutes_minus_btn.clicked.connect(lambda: engine.adjust_minutes(-1))
        self.minutes_plus_btn.clicked.connect(lambda: engine.adjust_minutes(1))
        self.seconds_minus_btn.clicked.connect(lambda: engine.adjust_seconds(-1))
        self.seconds_plus_btn.clicked.connect(lambda: engine.adjust_seconds(1))
        self.set_btn.clicked.connect(engine.apply_configuration)
        self.toggle_btn.clicked.connect(self.on_toggle_click)
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
        self.label.setText(format_countdown(snap.remaining_seconds))
        self.label.setStyleSheet(
            "font-size: 64px; font-weight: bold;" + (" color: #e53935;" if snap.is_finished else "")
        )
        self.minutes_label.setText(f"{snap.minutes:02}")
        self.seconds_label.setText(f"{snap.seconds:02}")
        self.settings.setHidden(snap.is_running)
        self.toggle_btn.setText("Pause" if snap.is_running else "Start")
        self.toggle_btn.setEnabled(snap.is_running or snap.remaining_seconds > 0)
        self.finished_label.setHidden(not snap.is_finished)
