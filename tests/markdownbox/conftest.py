"""Shared fixtures for the Qt widget tests."""

import os

import pytest

# Must be set before the first Qt application is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # pylint: disable=wrong-import-position


@pytest.fixture(scope="session")
def qapp():
    """Fixture providing the one application instance for the test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    yield app
