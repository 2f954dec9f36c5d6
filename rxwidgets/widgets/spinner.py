"""
Built-in busy visuals
=====================

Two painted spinners, picked from the target platform:

- ``CircularProgressIndicator``: rotating arc (material look), optionally
  determinate through ``SpinnerConfig.value``
- ``ActivityIndicator``: ring of fading ticks (cupertino look)

``build_spinner`` centres the chosen spinner in a square box whose side is
twice the configured radius. ``EmptyContainer`` is the inert fragment shown
whenever there is nothing to render.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QRectF, Qt, QTimer
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QGridLayout, QWidget
from loguru import logger

from ..config import DEFAULT_SPINNER_CONFIG, SpinnerConfig, SpinnerStyle

FRAME_INTERVAL_MS = 50


class EmptyContainer(QWidget):
    """Inert fragment; renders nothing."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("emptyContainer")


class SpinnerBase(QWidget):
    """Common timer and sizing for the painted spinners."""

    STEP_DEGREES = 30

    def __init__(self, config: SpinnerConfig, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.config = config
        self._angle = 0
        self.setFixedSize(config.side, config.side)

        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._advance)

    @property
    def animated(self) -> bool:
        return True

    @property
    def angle(self) -> int:
        return self._angle

    def _advance(self) -> None:
        self._angle = (self._angle + self.STEP_DEGREES) % 360
        self.update()

    def showEvent(self, event):
        if self.animated:
            self._timer.start()
        super().showEvent(event)

    def hideEvent(self, event):
        self._timer.stop()
        super().hideEvent(event)

    def _color(self, value: Optional[str], fallback: QColor) -> QColor:
        return QColor(value) if value else fallback


class CircularProgressIndicator(SpinnerBase):
    """Material style arc spinner."""

    STEP_DEGREES = 12
    ARC_SPAN = 270

    @property
    def value(self) -> Optional[float]:
        return self.config.value

    @property
    def animated(self) -> bool:
        return self.config.value is None

    def paintEvent(self, event):
        stroke = self.config.stroke_width
        rect = QRectF(self.rect()).adjusted(stroke / 2, stroke / 2, -stroke / 2, -stroke / 2)

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        if self.config.background_color:
            painter.setPen(QPen(QColor(self.config.background_color), stroke))
            painter.drawEllipse(rect)

        pen = QPen(self._color(self.config.value_color, self.palette().highlight().color()), stroke)
        pen.setCapStyle(Qt.RoundCap)
        painter.setPen(pen)

        # Angles Qt en 1/16e de degré, sens horaire = négatif
        if self.value is None:
            painter.drawArc(rect, -self._angle * 16, self.ARC_SPAN * 16)
        else:
            painter.drawArc(rect, 90 * 16, int(-self.value * 360 * 16))
        painter.end()


class ActivityIndicator(SpinnerBase):
    """Cupertino style ring of ticks, the brightest one rotating."""

    TICKS = 12

    def paintEvent(self, event):
        base = self._color(self.config.value_color, self.palette().windowText().color())
        radius = self.config.radius
        tick_length = radius * 0.5
        tick_width = max(radius / 6.0, 1.0)
        head = self._angle // self.STEP_DEGREES

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.translate(self.width() / 2, self.height() / 2)

        for i in range(self.TICKS):
            color = QColor(base)
            age = (head - i) % self.TICKS
            color.setAlphaF(max(1.0 - age / self.TICKS, 0.15))
            pen = QPen(color, tick_width)
            pen.setCapStyle(Qt.RoundCap)
            painter.setPen(pen)
            painter.save()
            painter.rotate(i * 360 / self.TICKS)
            painter.drawLine(0, int(-radius + tick_length), 0, int(-radius + 1))
            painter.restore()
        painter.end()


class SpinnerBox(QWidget):
    """Square box of side ``2 * radius`` centring a spinner."""

    def __init__(self, spinner: SpinnerBase, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.spinner = spinner
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(spinner, 0, 0, Qt.AlignCenter)


def build_spinner(config: Optional[SpinnerConfig] = None, object_name: Optional[str] = None,
                  parent: Optional[QWidget] = None) -> SpinnerBox:
    """Create the spinner matching ``config.platform`` (host platform when unset)."""
    config = config or DEFAULT_SPINNER_CONFIG
    style = config.style
    if style is SpinnerStyle.CUPERTINO:
        spinner: SpinnerBase = ActivityIndicator(config)
    else:
        spinner = CircularProgressIndicator(config)
    if object_name:
        spinner.setObjectName(object_name)
    logger.debug(f"Spinner built: style={style.value} radius={config.radius}")
    return SpinnerBox(spinner, parent)
