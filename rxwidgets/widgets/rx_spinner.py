"""
RxSpinner
=========

Busy indicator driven by a ``Stream[bool]``: it spins from the first ``True``
until the next ``False``. Pair it with ``RxCommand.is_executing``.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QVBoxLayout, QWidget

from ..config import DEFAULT_SPINNER_CONFIG, SpinnerConfig, TargetPlatform
from ..streams.stream import Stream
from .spinner import EmptyContainer, SpinnerBase, SpinnerBox, build_spinner
from .widget_selector import WidgetSelector


class RxSpinner(QWidget):
    """Spinner that replaces ``normal`` while ``busy_events`` is true.

    Args:
        busy_events: flag stream; ``True`` starts the spinner, ``False`` stops it
        normal: widget shown while idle, an empty container when None
        platform: look of the spinner, the host platform when None
        radius, stroke_width, background_color, value_color, value: cosmetic
            overrides of ``config`` (see ``SpinnerConfig``)
        spinner_name: objectName given to the spinner, handy in UI tests
    """

    def __init__(self, busy_events: Stream, normal: Optional[QWidget] = None,
                 platform: Optional[TargetPlatform] = None, radius: Optional[float] = None,
                 stroke_width: Optional[float] = None, background_color: Optional[str] = None,
                 value_color: Optional[str] = None, value: Optional[float] = None,
                 spinner_name: Optional[str] = None, config: Optional[SpinnerConfig] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.config = (config or DEFAULT_SPINNER_CONFIG).merged(
            platform=platform, radius=radius, stroke_width=stroke_width,
            background_color=background_color, value_color=value_color, value=value,
        )
        self.spinner_box: SpinnerBox = build_spinner(self.config, object_name=spinner_name)
        self.normal = normal if normal is not None else EmptyContainer()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.selector = WidgetSelector(busy_events, on_true=self.spinner_box, on_false=self.normal, parent=self)
        layout.addWidget(self.selector)

    @property
    def spinner(self) -> SpinnerBase:
        return self.spinner_box.spinner

    @property
    def is_busy(self) -> bool:
        return self.selector.flag

    @property
    def current_widget(self) -> Optional[QWidget]:
        return self.selector.current_widget

    def set_stream(self, busy_events: Stream) -> None:
        self.selector.set_stream(busy_events)

    def dispose(self) -> None:
        self.selector.dispose()
