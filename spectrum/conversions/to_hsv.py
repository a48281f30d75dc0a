import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp_degrees
from ..types.mode import HUE_360


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Channels are scaled to 0-255 before the per-channel delta terms are
    evaluated, matching the classic byte-based reference algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = r * 255, g * 255, b * 255

    min_val = min(r, g, b)
    max_val = max(r, g, b)
    delta = max_val - min_val
    value = max_val / 255

    if delta == 0:
        return 0.0, 0.0, float(value)

    saturation = delta / max_val
    delta_r = (((max_val - r) / 6) + (delta / 2)) / delta
    delta_g = (((max_val - g) / 6) + (delta / 2)) / delta
    delta_b = (((max_val - b) / 6) + (delta / 2)) / delta

    if r == max_val:
        hue = delta_b - delta_g
    elif g == max_val:
        hue = (1 / 3) + delta_r - delta_b
    else:
        hue = (2 / 3) + delta_g - delta_r

    if hue < 0:
        hue += 1

    if hue > 1:
        hue -= 1

    return clamp_degrees(hue * HUE_360), float(saturation), float(value)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float) * 255
    g = np.asarray(g, dtype=float) * 255
    b = np.asarray(b, dtype=float) * 255

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_val = np.maximum.reduce([r, g, b])
    min_val = np.minimum.reduce([r, g, b])
    delta = max_val - min_val
    value = max_val / 255

    mask = delta > 0
    safe_delta = np.where(mask, delta, 1.0)
    safe_max = np.where(mask, max_val, 1.0)

    saturation = np.where(mask, delta / safe_max, 0.0)
    delta_r = (((max_val - r) / 6) + (delta / 2)) / safe_delta
    delta_g = (((max_val - g) / 6) + (delta / 2)) / safe_delta
    delta_b = (((max_val - b) / 6) + (delta / 2)) / safe_delta

    hue = np.where(
        r == max_val,
        delta_b - delta_g,
        np.where(g == max_val, (1 / 3) + delta_r - delta_b, (2 / 3) + delta_g - delta_r),
    )
    hue = np.where(hue < 0, hue + 1, hue)
    hue = np.where(hue > 1, hue - 1, hue)
    hue = np.where(mask, np.mod(hue * HUE_360, HUE_360), 0.0)

    return np.stack([hue, saturation, value], axis=-1)
