"""
Pytest configuration and shared fixtures.

Widget tests need a QApplication; it is created once per session on the
offscreen platform so the suite runs without a display.
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from gottip.controller.store import TipStore  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store(qapp):
    return TipStore()
