from collections.abc import Sequence
from typing import Any, Optional

from numpy import ndarray

from ..colors.color import Color
from ..exceptions import UnexpectedValueError


class ColorProcessor:
    """Coerce raw input into a Color for validation pipelines."""

    OUTPUT_TYPES = ('Spectrum:Color', Color)

    def coerce(self, value: Any) -> Optional[Color]:
        if value is None:
            return None

        if isinstance(value, (bytes, bytearray)):
            raise UnexpectedValueError("Could not coerce value to Spectrum Color", data=value)

        if isinstance(value, (str, float, Color, Sequence, ndarray)):
            return Color.create(value)

        raise UnexpectedValueError("Could not coerce value to Spectrum Color", data=value)
