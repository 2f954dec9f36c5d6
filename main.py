#!/usr/bin/env python3
"""
rxwidgets demo
==============

Small window exercising every reactive widget:
- RxLoader bound to an RxCommand simulating slow work
- RxSpinner bound to the command's ``is_executing`` stream
- RxText bound to a StreamController fed by a QTimer

Usage:
    python main.py [--fail] [--log-dir logs]
"""

import argparse
import os
import random
import sys
import time

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget
from loguru import logger

from rxwidgets import RxCommand, RxLoader, RxSpinner, RxText, StreamController
from rxwidgets.logging import configure_logging


def slow_lookup(fail: bool) -> str:
    """Pretend to fetch something for a second and a half."""
    time.sleep(1.5)
    if fail or random.random() < 0.2:
        raise RuntimeError("Lookup failed, try again")
    return f"Result computed at {time.strftime('%H:%M:%S')}"


class DemoWindow(QMainWindow):
    """Fenêtre de démonstration des widgets réactifs."""

    def __init__(self, fail: bool = False):
        super().__init__()
        self.setWindowTitle("rxwidgets demo")
        self.resize(420, 320)

        self.command = RxCommand(lambda _param: slow_lookup(fail), parent=self)
        self.clock = StreamController(parent=self)

        self.setup_ui()

        self._clock_timer = QTimer(self)
        self._clock_timer.timeout.connect(lambda: self.clock.add(time.strftime("%H:%M:%S")))
        self._clock_timer.start(1000)

    def setup_ui(self):
        central = QWidget(self)
        layout = QVBoxLayout(central)

        self.clock_text = RxText(self.clock.stream, alignment=Qt.AlignCenter,
                                 style_sheet="font-size: 18px; font-weight: bold;")
        layout.addWidget(self.clock_text)

        self.loader = RxLoader(
            self.command,
            spinner_name="loaderSpinner",
            data_builder=lambda text: QLabel(text),
            placeholder_builder=lambda: QLabel("Press the button to start"),
            error_builder=lambda error: QLabel(f"Error: {error}"),
        )
        layout.addWidget(self.loader, 1)

        self.run_button = QPushButton("Run command")
        self.run_button.clicked.connect(lambda: self.command.execute())
        self.button_spinner = RxSpinner(self.command.is_executing, normal=self.run_button, radius=12)
        layout.addWidget(self.button_spinner)

        self.setCentralWidget(central)

    def closeEvent(self, event):
        self._clock_timer.stop()
        for widget in (self.clock_text, self.loader, self.button_spinner):
            widget.dispose()
        self.command.dispose()
        super().closeEvent(event)


def main():
    """Point d'entrée principal."""
    parser = argparse.ArgumentParser(description="rxwidgets demo")
    parser.add_argument("--fail", action="store_true", help="make every command execution fail")
    parser.add_argument("--log-dir", default=None, help="also write rotating logs there")
    args = parser.parse_args()

    configure_logging(log_dir=args.log_dir)
    logger.info(f"Starting rxwidgets demo (PID: {os.getpid()})")

    try:
        app = QApplication(sys.argv)
        app.setApplicationName("rxwidgets demo")
        window = DemoWindow(fail=args.fail)
        window.show()
        exit_code = app.exec()
        logger.info(f"Demo closed with code {exit_code}")
        return exit_code
    except KeyboardInterrupt:
        logger.info("Demo interrupted by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
