from __future__ import annotations
from enum import Enum
from typing import Union

from ..exceptions import InvalidArgumentError


class Mode(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"

    @classmethod
    def parse(cls, mode: Union[Mode, str]) -> Mode:
        """Return the Mode for ``mode``, accepting case-insensitive names."""
        if isinstance(mode, Mode):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Invalid color mode: {mode!r}", data=mode)


CHANNEL_NAMES = {
    Mode.RGB: ("r", "g", "b"),
    Mode.HSL: ("h", "s", "l"),
    Mode.HSV: ("h", "s", "v"),
}

HUE_SPACES = {Mode.HSL, Mode.HSV}

HUE_360 = 360.0
