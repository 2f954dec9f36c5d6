"""
Reactive command
================

Wraps a callable so that its executions are observable: every call publishes
``CommandResult`` records (executing, then data or error) and an
``is_executing`` flag. The callable runs on a QThread worker so the UI stays
responsive; results come back through Qt signals onto the command's thread.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from PySide6.QtCore import QObject, QThread, Signal, Slot
from loguru import logger

from ..errors import StreamClosedError
from ..models.command_result import CommandResult
from ..streams.stream import StreamController, StreamView, Subscription


class _CommandWorker(QThread):
    """Worker pour exécuter la fonction d'une commande en arrière-plan."""

    succeeded = Signal(object, object)
    failed = Signal(object, object)

    def __init__(self, func: Callable[[Any], Any], param: Any, takes_param: bool):
        super().__init__()
        self.func = func
        self.param = param
        self.takes_param = takes_param

    def run(self):
        try:
            result = self.func(self.param) if self.takes_param else self.func()
            self.succeeded.emit(result, self.param)
        except Exception as e:
            logger.error(f"Command function failed in worker thread: {e}")
            self.failed.emit(e, self.param)


class RxCommand(QObject):
    """
    Observable command.

    Args:
        func: callable executed on every ``execute()``. When ``takes_param`` is
            False it is called without argument.
        run_in_thread: run ``func`` on a QThread worker (default) or inline
        emit_last_result: keep the last data in the "executing" records so a
            loader can show stale content while refreshing
    """

    def __init__(self, func: Callable[..., Any], run_in_thread: bool = True,
                 emit_last_result: bool = False, takes_param: bool = True,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._func = func
        self._run_in_thread = run_in_thread
        self._emit_last_result = emit_last_result
        self._takes_param = takes_param
        self._executing = False
        self._last_data: Any = None
        self._workers: List[_CommandWorker] = []
        self._disposed = False

        self._results = StreamController(replay_last=True, initial=CommandResult.empty(), parent=self)
        self._is_executing = StreamController(replay_last=True, initial=False, parent=self)
        self._values = StreamController(replay_last=True, parent=self)
        self._thrown_exceptions = StreamController(replay_last=False, parent=self)

    @classmethod
    def create_sync(cls, func: Callable[..., Any], **kwargs) -> "RxCommand":
        """Command running ``func`` inline, on the caller's thread."""
        return cls(func, run_in_thread=False, **kwargs)

    # --- Streams -------------------------------------------------------------
    @property
    def results(self) -> StreamView:
        return self._results.stream

    @property
    def is_executing(self) -> StreamView:
        return self._is_executing.stream

    @property
    def values(self) -> StreamView:
        return self._values.stream

    @property
    def thrown_exceptions(self) -> StreamView:
        return self._thrown_exceptions.stream

    @property
    def executing(self) -> bool:
        return self._executing

    @property
    def last_result(self) -> Any:
        return self._last_data

    def subscribe(self, on_value, on_error=None, on_done=None) -> Subscription:
        """A command is itself a stream of its ``CommandResult`` records."""
        return self._results.subscribe(on_value, on_error, on_done)

    # --- Exécution -----------------------------------------------------------
    def execute(self, param: Any = None) -> None:
        if self._disposed:
            raise StreamClosedError("Cannot execute a disposed command")
        if self._executing:
            logger.warning("RxCommand.execute() ignored: command is already executing")
            return

        self._executing = True
        self._is_executing.add(True)
        last_data = self._last_data if self._emit_last_result else None
        self._results.add(CommandResult.executing(param=param, last_data=last_data))

        if not self._run_in_thread:
            try:
                result = self._func(param) if self._takes_param else self._func()
            except Exception as e:
                logger.error(f"Command function failed: {e}")
                self._on_failed(e, param)
            else:
                self._on_succeeded(result, param)
            return

        worker = _CommandWorker(self._func, param, self._takes_param)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(self._release_worker)
        self._workers.append(worker)
        worker.start()

    __call__ = execute

    def wait(self, timeout_ms: int = 5000) -> bool:
        """Block until the running worker thread finishes.

        Queued results are only delivered once the event loop runs again
        (``QCoreApplication.processEvents()``).
        """
        done = True
        for worker in list(self._workers):
            try:
                done = worker.wait(timeout_ms) and done
            except RuntimeError:
                # Le QThread a déjà été détruit par deleteLater
                continue
        return done

    @Slot()
    def _release_worker(self) -> None:
        worker = self.sender()
        if worker is None:
            return
        # finished est émis juste avant la fin du thread
        worker.wait()
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    @Slot(object, object)
    def _on_succeeded(self, result: Any, param: Any) -> None:
        if self._disposed:
            logger.debug("RxCommand: result dropped, command is disposed")
            return
        self._last_data = result
        self._results.add(CommandResult.with_data(result, param=param))
        if result is not None:
            self._values.add(result)
        self._finish()

    @Slot(object, object)
    def _on_failed(self, error: BaseException, param: Any) -> None:
        if self._disposed:
            logger.debug(f"RxCommand: error dropped, command is disposed: {error!r}")
            return
        self._results.add(CommandResult.with_error(error, param=param))
        self._thrown_exceptions.add(error)
        self._finish()

    def _finish(self) -> None:
        self._executing = False
        self._is_executing.add(False)

    def dispose(self) -> None:
        """Close every stream; pending workers are waited for.

        Results a worker has already queued are dropped when they arrive.
        """
        if self._disposed:
            return
        self._disposed = True
        self.wait()
        for worker in list(self._workers):
            try:
                worker.succeeded.disconnect(self._on_succeeded)
                worker.failed.disconnect(self._on_failed)
            except (RuntimeError, TypeError):
                # Déjà déconnecté ou QThread détruit
                continue
        self._executing = False
        for controller in (self._results, self._is_executing, self._values, self._thrown_exceptions):
            controller.close()
