import math
from typing import Optional

from boundednumbers.functions import clamp

from ..exceptions import InvalidArgumentError
from ..types.mode import HUE_360


def clamp_float(value: float, minimum: float, maximum: float) -> float:
    """Saturate ``value`` into ``[minimum, maximum]``; NaN has no place in the range."""
    if math.isnan(value):
        raise InvalidArgumentError(f"Cannot clamp NaN into [{minimum}, {maximum}]", data=value)
    return float(clamp(value, minimum, maximum))


def clamp_degrees(
    degrees: float,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None,
) -> float:
    """
    Wrap ``degrees`` into ``[0, 360)``, then optionally clamp it into
    ``[minimum, maximum]``.

    Wrapping is cyclic, never saturating: ``clamp_degrees(x)`` equals
    ``clamp_degrees(x + 360 * k)`` for any integer ``k``, so hue deltas far
    beyond a full turn still resolve.

    Args:
        degrees: Angle in degrees, any finite magnitude
        minimum: Optional lower bound applied after wrapping
        maximum: Optional upper bound applied after wrapping

    Returns:
        float: The wrapped (and optionally clamped) angle
    """
    if not math.isfinite(degrees):
        raise InvalidArgumentError(f"Cannot wrap non-finite degrees: {degrees!r}", data=degrees)

    # fmod is exact, so large magnitudes reduce without drift
    degrees = math.fmod(float(degrees), HUE_360)

    while degrees < 0:
        degrees += HUE_360

    while degrees >= HUE_360:
        degrees -= HUE_360

    if minimum is not None:
        degrees = max(minimum, degrees)

    if maximum is not None:
        degrees = min(maximum, degrees)

    return degrees
