"""
rxwidgets
=========

PySide6 widgets that bind asynchronous streams to visual states
(spinner, content, placeholder, error).

Usage:
    from rxwidgets import RxCommand, RxLoader

    command = RxCommand(fetch_offers)
    loader = RxLoader(command, data_builder=lambda offers: OffersView(offers))
    command.execute()
"""

from .config import SpinnerConfig, SpinnerStyle, TargetPlatform, DEFAULT_SPINNER_CONFIG
from .errors import RxWidgetsError, StreamClosedError, ConfigError
from .models import CommandResult, VisualState, resolve_visual_state
from .streams import Stream, StreamController, Subscription
from .workers import RxCommand
from .widgets import (
    WidgetSelector, RxSpinner, RxLoader, ReactiveBuilder, RxText,
    EmptyContainer, build_spinner,
)

__version__ = "0.1.0"

__all__ = [
    "SpinnerConfig",
    "SpinnerStyle",
    "TargetPlatform",
    "DEFAULT_SPINNER_CONFIG",
    "RxWidgetsError",
    "StreamClosedError",
    "ConfigError",
    "CommandResult",
    "VisualState",
    "resolve_visual_state",
    "Stream",
    "StreamController",
    "Subscription",
    "RxCommand",
    "WidgetSelector",
    "RxSpinner",
    "RxLoader",
    "ReactiveBuilder",
    "RxText",
    "EmptyContainer",
    "build_spinner",
]
