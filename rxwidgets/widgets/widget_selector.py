"""
WidgetSelector
==============

Shows one of two fragments depending on the latest value of a boolean stream.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QWidget
from loguru import logger

from ..streams.stream import Stream
from .base import StreamBoundWidget


class WidgetSelector(StreamBoundWidget):
    """Displays ``on_true`` while the last flag is true, ``on_false`` otherwise.

    ``on_false`` is shown until the first flag arrives. Both fragments are
    owned by the selector and only switched.
    """

    def __init__(self, build_events: Stream, on_true: QWidget, on_false: QWidget,
                 parent: Optional[QWidget] = None):
        super().__init__(build_events, parent)
        self.on_true = self._keep(on_true)
        self.on_false = self._keep(on_false)
        self._flag = False
        self._attach()

    @property
    def flag(self) -> bool:
        return self._flag

    def _on_value(self, value) -> None:
        self._flag = bool(value)
        self.rebuild()

    def _on_error(self, error: BaseException) -> None:
        logger.warning(f"WidgetSelector: error on flag stream ignored: {error!r}")

    def build(self) -> QWidget:
        return self.on_true if self._flag else self.on_false
