"""
rxwidgets workers
=================

QThread-backed commands whose executions are published as streams.
"""

from .command import RxCommand

__all__ = [
    "RxCommand",
]
