import numpy as np
from numpy import ndarray as NDArray

from ..exceptions import ComponentUnavailableError
from ..types.mode import HUE_360

HSV_TO_RGB_UNSUPPORTED = "HSV to RGB conversion is not supported"


## HSL to RGB conversions

def hsl_hue_to_channel(m1: float, m2: float, h: float) -> float:
    """
    Map a hue fraction onto one RGB channel (CSS/SVG reference algorithm).

    Args:
        m1: Lower intermediate value
        m2: Upper intermediate value
        h: Hue as a fraction of a turn, shifted by at most one turn

    Returns:
        float: Channel value in [0, 1]
    """
    if h < 0:
        h += 1

    if h > 1:
        h -= 1

    if h < 1 / 6:
        return m1 + (m2 - m1) * 6 * h

    if h < 1 / 2:
        return m2

    if h < 2 / 3:
        return m1 + (m2 - m1) * (2 / 3 - h) * 6

    return m1


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unit RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    hue = h / HUE_360
    m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    m1 = l * 2 - m2

    return (
        hsl_hue_to_channel(m1, m2, hue + 1 / 3),
        hsl_hue_to_channel(m1, m2, hue),
        hsl_hue_to_channel(m1, m2, hue - 1 / 3),
    )


def _np_hsl_hue_to_channel(m1: NDArray, m2: NDArray, h: NDArray) -> NDArray:
    h = np.where(h < 0, h + 1, h)
    h = np.where(h > 1, h - 1, h)

    return np.select(
        [h < 1 / 6, h < 1 / 2, h < 2 / 3],
        [m1 + (m2 - m1) * 6 * h, m2, m1 + (m2 - m1) * (2 / 3 - h) * 6],
        default=m1,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to unit RGB.

    Args:
        h: array-like or scalar, hue in degrees [0, 360)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) / HUE_360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m2 = np.where(l <= 0.5, l * (s + 1), l + s - l * s)
    m1 = l * 2 - m2

    r = _np_hsl_hue_to_channel(m1, m2, h + 1 / 3)
    g = _np_hsl_hue_to_channel(m1, m2, h)
    b = _np_hsl_hue_to_channel(m1, m2, h - 1 / 3)

    return np.stack([r, g, b], axis=-1)


## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """HSV to RGB has no implementation; always raises ComponentUnavailableError."""
    raise ComponentUnavailableError(HSV_TO_RGB_UNSUPPORTED, data=(h, s, v))


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized counterpart of hsv_to_unit_rgb; always raises."""
    raise ComponentUnavailableError(HSV_TO_RGB_UNSUPPORTED, data=(h, s, v))
