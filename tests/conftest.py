# tests/conftest.py
import os

import pytest


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for widget tests, rendered offscreen."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PyQt5.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
