"""
Stream-bound widget base
========================

Owns the single subscription of a reactive widget and swaps the fragment on
display. Subclasses keep their held state, implement ``build()`` and call
``rebuild()`` once per received event.
"""

from __future__ import annotations

from typing import Any, Optional, Set

from PySide6.QtWidgets import QStackedLayout, QWidget
from loguru import logger

from ..streams.stream import Stream, Subscription


class _SubscriptionSlot:
    """Holds at most one live subscription."""

    def __init__(self) -> None:
        self.current: Optional[Subscription] = None

    def cancel(self, *_args: Any) -> None:
        subscription, self.current = self.current, None
        if subscription is not None:
            subscription.cancel()


class StreamBoundWidget(QWidget):
    """Base class of the reactive widgets.

    Lifecycle: subscribe in ``_attach()`` (end of the subclass constructor),
    cancel on ``dispose()`` or when the Qt object is destroyed.
    ``set_stream()`` cancels the old subscription before subscribing again.
    Subclasses must override ``_on_value()`` and ``build()``.
    """

    def __init__(self, stream: Stream, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._stream = stream
        self._slot = _SubscriptionSlot()
        self._persistent: Set[int] = set()
        self._current: Optional[QWidget] = None
        self._disposed = False

        self._stack = QStackedLayout(self)
        self._stack.setContentsMargins(0, 0, 0, 0)

        # Le slot survit au wrapper Python: la souscription est libérée même sans dispose()
        self.destroyed.connect(self._slot.cancel)

    # --- Cycle de vie --------------------------------------------------------
    def _attach(self) -> None:
        self.rebuild()
        self._subscribe()

    def _subscribe(self) -> None:
        self._slot.current = self._stream.subscribe(self._on_value, self._on_error, self._on_done)
        logger.debug(f"{type(self).__name__}: subscribed to {self._stream!r}")

    @property
    def stream(self) -> Stream:
        return self._stream

    @property
    def subscription(self) -> Optional[Subscription]:
        return self._slot.current

    def set_stream(self, stream: Stream) -> None:
        """Listen to ``stream`` instead; the current fragment stays until it emits."""
        if stream is self._stream:
            return
        self._slot.cancel()
        self._stream = stream
        if not self._disposed:
            self._subscribe()

    def dispose(self) -> None:
        """Cancel the subscription. The widget keeps showing its last fragment."""
        if self._disposed:
            return
        self._disposed = True
        self._slot.cancel()
        logger.debug(f"{type(self).__name__}: disposed")

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # --- Événements ----------------------------------------------------------
    def _on_value(self, value: Any) -> None:
        """Hook: store ``value`` in the held state, then call ``rebuild()``."""
        raise NotImplementedError(f"{type(self).__name__} must override _on_value()")

    def _on_error(self, error: BaseException) -> None:
        logger.warning(f"{type(self).__name__}: stream error ignored: {error!r}")

    def _on_done(self) -> None:
        logger.debug(f"{type(self).__name__}: stream completed")

    # --- Rendu ---------------------------------------------------------------
    def build(self) -> QWidget:
        """Hook: return the fragment for the current held state."""
        raise NotImplementedError(f"{type(self).__name__} must override build()")

    def rebuild(self) -> None:
        self._show(self.build())

    @property
    def current_widget(self) -> Optional[QWidget]:
        return self._current

    def _keep(self, widget: QWidget) -> QWidget:
        """Register a fragment owned by this widget; it is switched, never detached."""
        self._persistent.add(id(widget))
        if self._stack.indexOf(widget) < 0:
            self._stack.addWidget(widget)
        return widget

    def _show(self, widget: QWidget) -> None:
        if widget is self._current:
            return
        if self._stack.indexOf(widget) < 0:
            self._stack.addWidget(widget)
        self._stack.setCurrentWidget(widget)

        previous, self._current = self._current, widget
        if previous is not None and id(previous) not in self._persistent:
            self._stack.removeWidget(previous)
            previous.hide()
            previous.setParent(None)
