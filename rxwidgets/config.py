"""
Spinner configuration
=====================

Presentation-only settings shared by the busy indicators: platform hint,
radius, stroke width, tint colours and determinate progress value.
None of these values influence which visual state a widget renders.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from PySide6.QtGui import QColor

from .errors import ConfigError

PLATFORM_ENV_VAR = "RXWIDGETS_PLATFORM"


class TargetPlatform(str, Enum):
    """Platforms whose look the spinner can imitate."""
    IOS = "ios"
    ANDROID = "android"
    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"
    FUCHSIA = "fuchsia"


class SpinnerStyle(str, Enum):
    """The two built-in spinner visuals."""
    CUPERTINO = "cupertino"
    MATERIAL = "material"


_APPLE_PLATFORMS = {TargetPlatform.IOS, TargetPlatform.MACOS}


def default_target_platform() -> TargetPlatform:
    """Return the platform of the host, honouring the environment override."""
    override = os.environ.get(PLATFORM_ENV_VAR)
    if override:
        try:
            return TargetPlatform(override.strip().lower())
        except ValueError:
            raise ConfigError(f"Unknown platform in {PLATFORM_ENV_VAR}: {override!r}")

    if sys.platform == "darwin":
        return TargetPlatform.MACOS
    if sys.platform.startswith("win"):
        return TargetPlatform.WINDOWS
    return TargetPlatform.LINUX


def resolve_spinner_style(platform: Optional[TargetPlatform] = None) -> SpinnerStyle:
    """Pick the spinner visual for ``platform`` (host platform when None)."""
    target = platform or default_target_platform()
    if target in _APPLE_PLATFORMS:
        return SpinnerStyle.CUPERTINO
    return SpinnerStyle.MATERIAL


class SpinnerConfig(BaseModel):
    """
    Cosmetic parameters of a spinner.

    ``value`` switches the material spinner to determinate mode; it is
    ignored by the cupertino style.
    """

    model_config = {"frozen": True}

    radius: float = Field(20.0, gt=0, description="Radius of the spinner, the box side is 2x this")
    stroke_width: float = Field(4.0, gt=0, description="Width of the material arc")
    background_color: Optional[str] = Field(None, description="Track colour behind the arc")
    value_color: Optional[str] = Field(None, description="Colour of the arc or ticks")
    value: Optional[float] = Field(None, ge=0.0, le=1.0, description="Fixed progress, None for indeterminate")
    platform: Optional[TargetPlatform] = None

    @field_validator("background_color", "value_color")
    @classmethod
    def validate_color(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not QColor(v).isValid():
            raise ValueError(f"invalid colour: {v!r}")
        return v

    @property
    def side(self) -> int:
        """Side length of the square box hosting the spinner."""
        return int(round(self.radius * 2))

    @property
    def style(self) -> SpinnerStyle:
        return resolve_spinner_style(self.platform)

    @classmethod
    def build(cls, **values) -> "SpinnerConfig":
        """Validate ``values`` and raise ConfigError instead of pydantic errors."""
        clean = {k: v for k, v in values.items() if v is not None}
        try:
            return cls(**clean)
        except ValidationError as e:
            raise ConfigError(f"Invalid spinner configuration: {e}", errors=e.errors()) from e

    @classmethod
    def from_env(cls) -> "SpinnerConfig":
        """Create a configuration from RXWIDGETS_* environment variables."""
        values = {}
        radius = os.environ.get("RXWIDGETS_SPINNER_RADIUS")
        if radius:
            values["radius"] = radius
        stroke = os.environ.get("RXWIDGETS_SPINNER_STROKE_WIDTH")
        if stroke:
            values["stroke_width"] = stroke
        platform = os.environ.get(PLATFORM_ENV_VAR)
        if platform:
            values["platform"] = platform.strip().lower()
        return cls.build(**values)

    def merged(self, **overrides) -> "SpinnerConfig":
        """Return a copy where every non-None override replaces the current value."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SpinnerConfig.build(**values)


# Shared default instance
DEFAULT_SPINNER_CONFIG = SpinnerConfig()
