import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from timekeeper import ManualTicker  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    # closing a test window must not quit the application
    app.setQuitOnLastWindowClosed(False)
    yield app


@pytest.fixture
def ticker():
    return ManualTicker()
