"""
Spectrum Color Model Conversions
================================

Pure functions converting unit-float channel triples between the RGB, HSL
and HSV color models, each with a scalar and a vectorized (numpy) form.

Hue is always expressed in degrees [0, 360); every other channel is a unit
float [0, 1].

Conversion Functions
-------------------

RGB → HSL:
    unit_rgb_to_hsl(r, g, b) / np_unit_rgb_to_hsl(r, g, b)

RGB → HSV:
    unit_rgb_to_hsv(r, g, b) / np_unit_rgb_to_hsv(r, g, b)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l) / np_hsl_to_unit_rgb(h, s, l)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v) / np_hsv_to_unit_rgb(h, s, v)
        Not supported. Both raise ComponentUnavailableError, and so does any
        conversion chain that would need them (HSV → HSL included).

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Examples
--------
>>> from spectrum.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(0.0, 1.0, 0.5)
(1.0, 0.0, 0.0)
"""

from .numbers import clamp_float, clamp_degrees

from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import (
    hsl_hue_to_channel,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
)

from .wrapper import convert, np_convert, conversion_path

__all__ = [
    'clamp_float',
    'clamp_degrees',

    # RGB → HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # RGB → HSV
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSL → RGB
    'hsl_hue_to_channel',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',

    # HSV → RGB
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    # High-level API
    'convert',
    'np_convert',
    'conversion_path',
]
