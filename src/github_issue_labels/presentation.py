"""
Terminal rendering of labels in their own colors.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final, Literal

if TYPE_CHECKING:
    from .models import Label

BRIGHTNESS_THRESHOLD: Final[float] = 186 / 255

_BOLD: Final[str] = "\033[1m"
_RESET: Final[str] = "\033[0m"
_FOREGROUNDS: Final[dict[str, str]] = {
    "black": "\033[30m",
    "white": "\033[37m",
}


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Decode a 'rrggbb' color (optionally '#'-prefixed) into 0-255 channels."""
    value = color.lstrip("#")
    if len(value) != 6:
        msg = f"Invalid label color: {color!r}"
        raise ValueError(msg)
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError as e:
        msg = f"Invalid label color: {color!r}"
        raise ValueError(msg) from e


def yiq_brightness(color: str) -> float:
    """Perceived brightness of a color as the YIQ luma, scaled to [0, 1]."""
    red, green, blue = hex_to_rgb(color)
    return (0.299 * red + 0.587 * green + 0.114 * blue) / 255


def foreground_for(color: str) -> Literal["black", "white"]:
    """Pick the text color that stays readable on the given background."""
    return "black" if yiq_brightness(color) > BRIGHTNESS_THRESHOLD else "white"


def colorize_label(label: Label) -> str:
    """Render a label name in bold, on a background of the label's own color."""
    if os.environ.get("NO_COLOR"):
        return label.name
    red, green, blue = hex_to_rgb(label.color)
    background = f"\033[48;2;{red};{green};{blue}m"
    return f"{_BOLD}{_FOREGROUNDS[foreground_for(label.color)]}{background}{label.name}{_RESET}"
