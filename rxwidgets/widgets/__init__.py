"""
Widgets réactifs
================

Widgets that bind a stream to a visual state.

Widgets disponibles:
- WidgetSelector: switches between two fragments on a boolean stream
- RxSpinner: busy indicator driven by a boolean stream
- RxLoader: spinner / data / placeholder / error for CommandResult streams
- ReactiveBuilder: renders the latest value through a builder callback
- RxText: label bound to a stream
"""

from .base import StreamBoundWidget
from .builders import RxBuilder, ErrorBuilder, PlaceHolderBuilder
from .spinner import (
    EmptyContainer, SpinnerBase, SpinnerBox, CircularProgressIndicator, ActivityIndicator,
    build_spinner,
)
from .widget_selector import WidgetSelector
from .rx_spinner import RxSpinner
from .rx_loader import RxLoader
from .reactive_builder import ReactiveBuilder, RxText

__all__ = [
    # Base
    'StreamBoundWidget',

    # Builder signatures
    'RxBuilder',
    'ErrorBuilder',
    'PlaceHolderBuilder',

    # Built-in fragments
    'EmptyContainer',
    'SpinnerBase',
    'SpinnerBox',
    'CircularProgressIndicator',
    'ActivityIndicator',
    'build_spinner',

    # Reactive widgets
    'WidgetSelector',
    'RxSpinner',
    'RxLoader',
    'ReactiveBuilder',
    'RxText',
]
