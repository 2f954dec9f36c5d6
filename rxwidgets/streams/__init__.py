"""
Stream primitives consumed by the reactive widgets.
"""

from .stream import Stream, StreamController, StreamView, Subscription

__all__ = [
    "Stream",
    "StreamController",
    "StreamView",
    "Subscription",
]
