import numpy as np
from numpy import ndarray as NDArray

from .numbers import clamp_degrees
from ..types.mode import HUE_360


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Hue is resolved as a fraction of a turn from the sector of the maximum
    channel and scaled to degrees. Achromatic input (all channels equal)
    gets hue 0, and saturation is 0 whenever lightness is 0 or 1.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    min_c = min(r, g, b)
    max_c = max(r, g, b)
    delta = max_c - min_c
    lightness = (min_c + max_c) / 2

    saturation = 0.0
    if 0 < lightness < 1:
        saturation = delta / (2 * lightness if lightness < 0.5 else 2 - 2 * lightness)

    hue = 0.0
    if delta > 0:
        if max_c == r and max_c != g:
            hue += (g - b) / delta
        if max_c == g and max_c != b:
            hue += 2 + (b - r) / delta
        if max_c == b and max_c != r:
            hue += 4 + (r - g) / delta
        hue /= 6

    return clamp_degrees(hue * HUE_360), float(saturation), float(lightness)


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros(out_shape)
    mask_s = (lightness > 0) & (lightness < 1)
    denominator = np.where(lightness < 0.5, 2 * lightness, 2 - 2 * lightness)
    saturation[mask_s] = delta[mask_s] / denominator[mask_s]

    hue = np.zeros(out_shape)
    mask = delta > 0
    safe_delta = np.where(mask, delta, 1.0)
    mask_r = mask & (max_c == r) & (max_c != g)
    mask_g = mask & (max_c == g) & (max_c != b)
    mask_b = mask & (max_c == b) & (max_c != r)

    hue += np.where(mask_r, (g - b) / safe_delta, 0.0)
    hue += np.where(mask_g, 2 + (b - r) / safe_delta, 0.0)
    hue += np.where(mask_b, 4 + (r - g) / safe_delta, 0.0)
    hue = np.mod(hue / 6 * HUE_360, HUE_360)

    return np.stack([hue, saturation, lightness], axis=-1)
