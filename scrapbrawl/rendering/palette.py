"""Shared colours and helpers for body rendering."""

from __future__ import annotations

from typing import Tuple

from ..body.materials import Color as UnitColor

Color = Tuple[int, int, int]
Tint = Tuple[float, float, float]

NORMAL_BUTTON: Color = (191, 191, 191)
HOVERED_BUTTON: Color = (255, 255, 255)
PRESSED_BUTTON: Color = (255, 191, 191)
DISABLED_BUTTON: Color = (26, 26, 26)
TOOLTIP_BACKGROUND: Tuple[int, int, int, int] = (65, 70, 72, 120)
TEXT_COLOR: Color = (20, 20, 20)
TOOLTIP_TEXT: Color = (255, 255, 255)


def clamp_channel(value: float) -> int:
    """Clamp a channel value to the 0-255 range."""

    return max(0, min(255, int(round(value))))


def to_rgb(color: UnitColor) -> Color:
    """Convert a normalised part colour to pygame channel values."""

    return tuple(clamp_channel(channel * 255.0) for channel in color)


def tint_color(base: Color, tint: Tint) -> Color:
    """Apply a multiplicative tint to ``base`` and clamp the result."""

    return tuple(clamp_channel(base[idx] * tint[idx]) for idx in range(3))


__all__ = [
    "DISABLED_BUTTON",
    "HOVERED_BUTTON",
    "NORMAL_BUTTON",
    "PRESSED_BUTTON",
    "TOOLTIP_BACKGROUND",
    "Tint",
    "clamp_channel",
    "tint_color",
    "to_rgb",
]
