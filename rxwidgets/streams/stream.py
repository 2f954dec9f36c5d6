"""
Streams
=======

Minimal push-based stream primitive used to feed the reactive widgets.

A ``StreamController`` is a QObject: producers call ``add()`` / ``add_error()``
from any thread and Qt marshals the event onto the controller's thread before
listeners run, exactly like the QThread workers emit their signals to the UI.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, Protocol, Tuple, TypeVar, runtime_checkable

from PySide6.QtCore import QObject, Signal, Slot
from loguru import logger

from ..errors import StreamClosedError

T = TypeVar("T")

ValueCallback = Callable[[Any], None]
ErrorCallback = Callable[[BaseException], None]
DoneCallback = Callable[[], None]

_MISSING = object()

_VALUE = "value"
_ERROR = "error"
_DONE = "done"


class Subscription:
    """Handle on an active listen; ``cancel()`` stops delivery immediately."""

    def __init__(self, on_value: ValueCallback, on_error: Optional[ErrorCallback] = None,
                 on_done: Optional[DoneCallback] = None,
                 on_cancel: Optional[Callable[["Subscription"], None]] = None):
        self._on_value = on_value
        self._on_error = on_error
        self._on_done = on_done
        self._on_cancel = on_cancel
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop listening. Calling it again is a no-op."""
        if not self._active:
            return
        self._active = False
        on_cancel, self._on_cancel = self._on_cancel, None
        if on_cancel is not None:
            on_cancel(self)

    def _deliver(self, kind: str, payload: Any = None) -> None:
        # Un événement en file d'attente ne doit plus rien toucher après cancel()
        if not self._active:
            return
        if kind == _VALUE:
            self._on_value(payload)
        elif kind == _ERROR:
            if self._on_error is not None:
                self._on_error(payload)
            else:
                logger.warning(f"Unhandled stream error dropped: {payload!r}")
        elif kind == _DONE:
            self._active = False
            if self._on_done is not None:
                self._on_done()


@runtime_checkable
class Stream(Protocol[T]):
    """Anything the widgets can listen to."""

    def subscribe(self, on_value: Callable[[T], None], on_error: Optional[ErrorCallback] = None,
                  on_done: Optional[DoneCallback] = None) -> Subscription:
        ...


class StreamView(Generic[T]):
    """Read-only face of a controller, handed to consumers."""

    def __init__(self, controller: "StreamController[T]"):
        self._controller = controller

    def subscribe(self, on_value: Callable[[T], None], on_error: Optional[ErrorCallback] = None,
                  on_done: Optional[DoneCallback] = None) -> Subscription:
        return self._controller.subscribe(on_value, on_error, on_done)

    def __repr__(self) -> str:
        return f"<StreamView of {self._controller!r}>"


class StreamController(QObject):
    """
    Source of a stream of values, errors and completion.

    Two delivery modes:
    - default: events added before the first subscription are buffered and
      flushed, in order, to it; once a listener has come and gone, events
      added while nobody listens are dropped;
    - ``replay_last=True``: each new subscriber immediately receives the
      latest value (or ``initial``) and nothing else is buffered.
    """

    _event = Signal(str, object)

    def __init__(self, replay_last: bool = False, initial: Any = _MISSING, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._replay_last = replay_last
        self._latest = initial
        self._subscriptions: List[Subscription] = []
        self._pending: List[Tuple[str, Any]] = []
        self._closed = False
        self._done_delivered = False
        self._had_listener = False
        self._view = StreamView(self)
        self._event.connect(self._dispatch)

    # --- Producer side -------------------------------------------------------
    def add(self, value: T) -> None:
        self._check_open()
        self._event.emit(_VALUE, value)

    def add_error(self, error: BaseException) -> None:
        self._check_open()
        self._event.emit(_ERROR, error)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._event.emit(_DONE, None)

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def has_listeners(self) -> bool:
        return bool(self._subscriptions)

    @property
    def latest(self) -> Any:
        """Latest value seen by a replaying controller, None when there is none."""
        return None if self._latest is _MISSING else self._latest

    @property
    def stream(self) -> StreamView[T]:
        return self._view

    def _check_open(self) -> None:
        if self._closed:
            raise StreamClosedError("Cannot add events to a closed stream")

    # --- Consumer side -------------------------------------------------------
    def subscribe(self, on_value: Callable[[T], None], on_error: Optional[ErrorCallback] = None,
                  on_done: Optional[DoneCallback] = None) -> Subscription:
        subscription = Subscription(on_value, on_error, on_done, on_cancel=self._remove)

        if self._done_delivered:
            subscription._deliver(_DONE)
            return subscription

        self._subscriptions.append(subscription)
        self._had_listener = True
        logger.debug(f"{self!r}: new subscription ({len(self._subscriptions)} active)")

        if self._replay_last:
            if self._latest is not _MISSING:
                subscription._deliver(_VALUE, self._latest)
        elif self._pending:
            pending, self._pending = self._pending, []
            for kind, payload in pending:
                self._fan_out(kind, payload)

        return subscription

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)
            logger.debug(f"{self!r}: subscription cancelled ({len(self._subscriptions)} active)")

    @Slot(str, object)
    def _dispatch(self, kind: str, payload: Any) -> None:
        if kind == _VALUE and self._replay_last:
            self._latest = payload

        if not self._subscriptions:
            if kind == _DONE and (self._replay_last or self._had_listener):
                self._done_delivered = True
            elif self._had_listener:
                logger.debug(f"{self!r}: no listener, {kind} event dropped")
            elif not self._replay_last:
                self._pending.append((kind, payload))
            return

        self._fan_out(kind, payload)

    def _fan_out(self, kind: str, payload: Any) -> None:
        # Copie: un listener peut annuler sa souscription pendant la livraison
        for subscription in list(self._subscriptions):
            subscription._deliver(kind, payload)
        if kind == _DONE:
            self._done_delivered = True
            self._subscriptions.clear()

    def __repr__(self) -> str:
        mode = "replay" if self._replay_last else "buffered"
        return f"<StreamController {mode} closed={self._closed}>"
