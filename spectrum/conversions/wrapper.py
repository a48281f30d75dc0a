import numpy as np
from typing import Callable, Union

from .to_rgb import hsl_to_unit_rgb, hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_hsv_to_unit_rgb
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from ..types.mode import Mode
from ..types.color_types import ChannelTriple

ScalarConverter = Callable[[float, float, float], ChannelTriple]
NumpyConverter = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# Direct conversions; every other pair goes through RGB
CONVERT_SCALAR: dict[tuple[Mode, Mode], ScalarConverter] = {
    (Mode.RGB, Mode.HSL): unit_rgb_to_hsl,
    (Mode.RGB, Mode.HSV): unit_rgb_to_hsv,
    (Mode.HSL, Mode.RGB): hsl_to_unit_rgb,
    (Mode.HSV, Mode.RGB): hsv_to_unit_rgb,
}

CONVERT_NUMPY: dict[tuple[Mode, Mode], NumpyConverter] = {
    (Mode.RGB, Mode.HSL): np_unit_rgb_to_hsl,
    (Mode.RGB, Mode.HSV): np_unit_rgb_to_hsv,
    (Mode.HSL, Mode.RGB): np_hsl_to_unit_rgb,
    (Mode.HSV, Mode.RGB): np_hsv_to_unit_rgb,
}


def conversion_path(from_space: Mode, to_space: Mode) -> list[tuple[Mode, Mode]]:
    """Return the chain of direct conversions leading from ``from_space`` to ``to_space``."""
    if from_space == to_space:
        return []
    if (from_space, to_space) in CONVERT_SCALAR:
        return [(from_space, to_space)]
    return [(from_space, Mode.RGB), (Mode.RGB, to_space)]


def convert(
    color: ChannelTriple,
    from_space: Union[Mode, str],
    to_space: Union[Mode, str],
) -> ChannelTriple:
    """
    Convert a unit-float channel triple between color models.

    Args:
        color: Three channels; hue in degrees, everything else in [0, 1]
        from_space: Source mode
        to_space: Target mode

    Returns:
        Tuple of three floats in the target mode

    Raises:
        ComponentUnavailableError: if the path requires HSV to RGB
    """
    from_space, to_space = Mode.parse(from_space), Mode.parse(to_space)
    result = tuple(float(c) for c in color)

    for step in conversion_path(from_space, to_space):
        result = CONVERT_SCALAR[step](*result)

    return result  # type: ignore[return-value]


def np_convert(
    color: np.ndarray,
    from_space: Union[Mode, str],
    to_space: Union[Mode, str],
) -> np.ndarray:
    """Vectorized convert for arrays shaped (..., 3)."""
    from_space, to_space = Mode.parse(from_space), Mode.parse(to_space)
    result = np.asarray(color, dtype=float)

    for step in conversion_path(from_space, to_space):
        result = CONVERT_NUMPY[step](result[..., 0], result[..., 1], result[..., 2])

    return result
