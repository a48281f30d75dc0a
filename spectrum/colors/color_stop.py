from __future__ import annotations
import re
from typing import Any, Optional, Union

from .color import Color
from ..exceptions import InvalidArgumentError, UnexpectedValueError
from ..types.color_types import ColorInput, SizeInput

UNITS = (
    'cm', 'mm', 'in', 'px', 'pt', 'pc',
    'em', 'ex', 'ch', 'rem', 'vw', 'vh', 'vmin', 'vmax',
    '%',
)

SIZE_PATTERN = re.compile(r"^[0-9]{1,4}(?:\.[0-9]+)?(?:" + "|".join(re.escape(unit) for unit in UNITS) + r")$")


def is_size(token: str) -> bool:
    """Check if ``token`` is a CSS length or percentage such as ``50%`` or ``12px``."""
    return SIZE_PATTERN.match(token) is not None


class ColorStop:
    """A gradient color stop: an owned Color plus an optional CSS size."""

    __slots__ = ('_color', '_size')

    UNITS = UNITS

    def __init__(self, color: ColorInput, size: SizeInput = None) -> None:
        self.set_color(color)
        self.set_size(size)

    @classmethod
    def create(cls, color_stop: Union[ColorStop, ColorInput], size: SizeInput = None) -> ColorStop:
        """
        Create a stop from a ColorStop, a Color or text like ``"red 50%"``.

        The last space-separated token of the text is taken as the size if
        it looks like a CSS length, otherwise the whole text is the color.
        An explicit ``size`` overrides any size found in the text.
        """
        if isinstance(color_stop, ColorStop):
            stop = color_stop.copy()
            if size is not None:
                stop.set_size(size)
            return stop

        if not isinstance(color_stop, str):
            return cls(color_stop, size)

        parts = color_stop.split(' ')
        last = parts.pop()

        if is_size(last):
            return cls(' '.join(parts), last if size is None else size)

        return cls(color_stop, size)

    def copy(self) -> ColorStop:
        return ColorStop(self._color, self._size)

    __copy__ = copy

    # ------------------ COLOR ------------------
    def set_color(self, color: ColorInput) -> ColorStop:
        self._color = Color.create(color)
        return self

    def get_color(self) -> Color:
        return self._color

    color = property(get_color, set_color)

    # ------------------ SIZE ------------------
    def set_size(self, size: SizeInput) -> ColorStop:
        """Set the size in CSS units; bare integers are taken as pixels."""
        if isinstance(size, bool):
            raise UnexpectedValueError(f"Invalid color stop size: {size!r}", data=size)

        if isinstance(size, int):
            size = f"{size}px"

        if size is not None:
            if not isinstance(size, str):
                raise UnexpectedValueError(f"Invalid color stop size: {size!r}", data=size)
            if not is_size(size):
                raise InvalidArgumentError(f"Invalid color stop size: {size}", data=size)

        self._size = size
        return self

    def get_size(self) -> Optional[str]:
        return self._size

    size = property(get_size, set_size)

    # ------------------ OUTPUT ------------------
    def __str__(self) -> str:
        output = str(self._color)

        # no bare size without a color
        if output and self._size is not None:
            output += ' ' + self._size

        return output

    def __repr__(self) -> str:
        return f"ColorStop({self._color!r}, size={self._size!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorStop):
            return NotImplemented
        return self._color == other._color and self._size == other._size

    __hash__ = None  # mutable

    def debug_export(self) -> dict[str, Any]:
        return {'definition': str(self.copy())}
