"""
RxLoader
========

Busy indicator reacting on a stream of ``CommandResult`` records, made to sit
on top of an ``RxCommand``. It spins while a record has ``is_executing`` and
otherwise hands the record to one of three optional builders:

- ``data_builder(data)`` when the record carries data
- ``placeholder_builder()`` when it carries neither data nor error
- ``error_builder(error)`` when it carries an error

A missing builder renders an empty container.
"""

from __future__ import annotations

from typing import Any, Optional

from PySide6.QtWidgets import QWidget
from loguru import logger

from ..config import DEFAULT_SPINNER_CONFIG, SpinnerConfig, TargetPlatform
from ..models.command_result import CommandResult, VisualState, resolve_visual_state
from ..streams.stream import Stream
from .base import StreamBoundWidget
from .builders import ErrorBuilder, PlaceHolderBuilder, RxBuilder
from .spinner import EmptyContainer, SpinnerBase, SpinnerBox, build_spinner


class RxLoader(StreamBoundWidget):
    """
    Loader widget for command results.

    Args:
        command_results: stream of ``CommandResult`` or an ``RxCommand``
        data_builder, error_builder, placeholder_builder: render callbacks
        platform, radius, stroke_width, background_color, value_color, value:
            spinner look, see ``SpinnerConfig``
        spinner_name: objectName of the spinner, to find it in UI tests
        config: base spinner configuration the overrides apply to
    """

    def __init__(self, command_results: Stream, data_builder: Optional[RxBuilder] = None,
                 error_builder: Optional[ErrorBuilder] = None,
                 placeholder_builder: Optional[PlaceHolderBuilder] = None,
                 platform: Optional[TargetPlatform] = None, radius: Optional[float] = None,
                 stroke_width: Optional[float] = None, background_color: Optional[str] = None,
                 value_color: Optional[str] = None, value: Optional[float] = None,
                 spinner_name: Optional[str] = None, config: Optional[SpinnerConfig] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(command_results, parent)
        self.data_builder = data_builder
        self.error_builder = error_builder
        self.placeholder_builder = placeholder_builder
        self.config = (config or DEFAULT_SPINNER_CONFIG).merged(
            platform=platform, radius=radius, stroke_width=stroke_width,
            background_color=background_color, value_color=value_color, value=value,
        )
        self.spinner_box: SpinnerBox = self._keep(build_spinner(self.config, object_name=spinner_name))
        self._last_result: CommandResult = CommandResult.empty()
        self._attach()

    @property
    def spinner(self) -> SpinnerBase:
        return self.spinner_box.spinner

    @property
    def last_result(self) -> CommandResult:
        return self._last_result

    @property
    def visual_state(self) -> VisualState:
        return resolve_visual_state(self._last_result)

    def _on_value(self, result: CommandResult) -> None:
        self._last_result = result
        self.rebuild()

    def _on_error(self, error: BaseException) -> None:
        # Une erreur du flux lui-même est traitée comme un résultat en erreur
        self._last_result = CommandResult.with_error(error)
        self.rebuild()

    def build(self) -> QWidget:
        result = self._last_result
        state = self.visual_state

        if state is VisualState.BUSY:
            return self.spinner_box
        if state is VisualState.CONTENT:
            return self._call(self.data_builder, result.data)
        if state is VisualState.PLACEHOLDER:
            return self._call(self.placeholder_builder)
        if state is VisualState.ERROR:
            return self._call(self.error_builder, result.error)

        logger.error(f"RxLoader: unreachable state {state!r} for {result!r}")
        assert False, "RxLoader should never get here"
        return EmptyContainer()

    @staticmethod
    def _call(builder: Optional[Any], *args: Any) -> QWidget:
        if builder is None:
            return EmptyContainer()
        return builder(*args)
