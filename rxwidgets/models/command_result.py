"""
Command results
===============

``CommandResult`` is the record emitted by a command on every state change.
Widgets only ever hold the latest one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

R = TypeVar("R")


class VisualState(str, Enum):
    """What a reactive widget is currently showing."""
    BUSY = "busy"
    CONTENT = "content"
    PLACEHOLDER = "placeholder"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class CommandResult(Generic[R]):
    """Latest outcome of an asynchronous operation.

    At most one of executing / data / error is the active interpretation;
    a record with none of them is the "empty" state.
    """

    data: Optional[R] = None
    error: Optional[BaseException] = None
    is_executing: bool = False
    param: Any = None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @classmethod
    def empty(cls) -> "CommandResult[R]":
        """Synthetic record held before any event arrives."""
        return cls()

    @classmethod
    def executing(cls, param: Any = None, last_data: Optional[R] = None) -> "CommandResult[R]":
        return cls(data=last_data, is_executing=True, param=param)

    @classmethod
    def with_data(cls, data: R, param: Any = None) -> "CommandResult[R]":
        return cls(data=data, param=param)

    @classmethod
    def with_error(cls, error: BaseException, param: Any = None) -> "CommandResult[R]":
        return cls(error=error, param=param)

    def __repr__(self) -> str:
        return (f"CommandResult(data={self.data!r}, error={self.error!r}, "
                f"is_executing={self.is_executing})")


def resolve_visual_state(result: CommandResult) -> VisualState:
    """Map a record to its visual state.

    Strict priority: executing, then data, then empty, then error. Every
    record lands on exactly one member.
    """
    if result.is_executing:
        return VisualState.BUSY
    if result.has_data:
        return VisualState.CONTENT
    if not result.has_error:
        return VisualState.PLACEHOLDER
    return VisualState.ERROR
