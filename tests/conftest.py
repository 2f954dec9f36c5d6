"""Pytest configuration: project root importable, headless Qt application.

Widgets need a QApplication; the ``offscreen`` platform lets the suite run
without a display.
"""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from PySide6.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def controller(qapp):
    from rxwidgets.streams import StreamController

    ctrl = StreamController()
    yield ctrl
    if not ctrl.is_closed:
        ctrl.close()
