"""
ReactiveBuilder / RxText
========================

Generic binder between a stream and a builder callback. The last event wins:

- error event: ``error_builder(error)``, an empty container without builder
- data event: ``builder(value)``
- nothing received yet: ``builder(initial_data)`` when given, otherwise
  ``placeholder_builder()`` or the built-in progress indicator
"""

from __future__ import annotations

from typing import Any, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QWidget

from ..config import DEFAULT_SPINNER_CONFIG, SpinnerConfig
from ..models.command_result import VisualState
from ..streams.stream import Stream
from .base import StreamBoundWidget
from .builders import ErrorBuilder, PlaceHolderBuilder, RxBuilder
from .spinner import EmptyContainer, build_spinner

_MISSING = object()

_DATA_EVENT = "data"
_ERROR_EVENT = "error"


class ReactiveBuilder(StreamBoundWidget):
    """Renders the latest value of ``stream`` through ``builder``."""

    def __init__(self, stream: Stream, builder: RxBuilder, initial_data: Any = _MISSING,
                 placeholder_builder: Optional[PlaceHolderBuilder] = None,
                 error_builder: Optional[ErrorBuilder] = None,
                 config: Optional[SpinnerConfig] = None, parent: Optional[QWidget] = None):
        super().__init__(stream, parent)
        self.builder = builder
        self.placeholder_builder = placeholder_builder
        self.error_builder = error_builder
        self.config = config or DEFAULT_SPINNER_CONFIG

        self._value = initial_data
        self._error: Optional[BaseException] = None
        self._last_event: Optional[str] = None
        self._progress: Optional[QWidget] = None
        self._attach()

    # --- État ----------------------------------------------------------------
    @property
    def has_data(self) -> bool:
        return self._value is not _MISSING

    @property
    def data(self) -> Any:
        return None if self._value is _MISSING else self._value

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    @property
    def has_received_event(self) -> bool:
        return self._last_event is not None

    @property
    def visual_state(self) -> VisualState:
        if self._last_event == _ERROR_EVENT:
            return VisualState.ERROR
        if self.has_data:
            return VisualState.CONTENT
        return VisualState.PLACEHOLDER

    def _on_value(self, value: Any) -> None:
        self._value = value
        self._error = None
        self._last_event = _DATA_EVENT
        self.rebuild()

    def _on_error(self, error: BaseException) -> None:
        self._error = error
        self._last_event = _ERROR_EVENT
        self.rebuild()

    # --- Rendu ---------------------------------------------------------------
    def build(self) -> QWidget:
        state = self.visual_state
        if state is VisualState.ERROR:
            if self.error_builder is not None:
                return self.error_builder(self._error)
            return EmptyContainer()
        if state is VisualState.CONTENT:
            return self.builder(self._value)
        if self.placeholder_builder is not None:
            return self.placeholder_builder()
        return self.default_placeholder()

    def default_placeholder(self) -> QWidget:
        """Progress indicator shown while nothing has been received."""
        if self._progress is None:
            self._progress = self._keep(build_spinner(self.config))
        return self._progress


class RxText(ReactiveBuilder):
    """Label displaying ``str(value)`` of the latest stream value.

    Unlike ``ReactiveBuilder`` it shows an empty container, not a spinner,
    until something arrives.
    """

    def __init__(self, stream: Stream, initial_data: Any = _MISSING,
                 placeholder_builder: Optional[PlaceHolderBuilder] = None,
                 error_builder: Optional[ErrorBuilder] = None, style_sheet: Optional[str] = None,
                 alignment: Optional[Qt.AlignmentFlag] = None, parent: Optional[QWidget] = None):
        def build_label(value: Any) -> QLabel:
            label = QLabel(str(value))
            if style_sheet:
                label.setStyleSheet(style_sheet)
            if alignment is not None:
                label.setAlignment(alignment)
            return label

        super().__init__(stream, build_label, initial_data=initial_data,
                         placeholder_builder=placeholder_builder, error_builder=error_builder,
                         parent=parent)
        self.style_sheet = style_sheet
        self.alignment = alignment

    def default_placeholder(self) -> QWidget:
        return EmptyContainer()

    @property
    def text(self) -> Optional[str]:
        """Text currently displayed, None when no label is shown."""
        current = self.current_widget
        return current.text() if isinstance(current, QLabel) else None
