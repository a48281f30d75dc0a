"""
Spectrum - CSS Color Values
===========================

A mutable color value for RGB, HSL and HSV with an alpha channel: parse CSS
color text, convert between color models, nudge channels, and write the
result back out as CSS.

Quick Start
-----------
>>> from spectrum import Color, ColorStop
>>>
>>> color = Color.create("hsl(210, 60%, 40%)")
>>> color.darken(0.1).to_hex_string()
'#1e4c7a'
>>> Color.from_name("transparent").alpha
0.0
>>> str(ColorStop.create("red 50%"))
'#ff0000 50%'

Modules
-------
- colors: Color, ColorStop and the immutable channel variants
- conversions: pure RGB/HSL/HSV conversion functions (scalar and numpy)
- validation: coercion and lightness constraints for validation pipelines
- exceptions: the error taxonomy
"""

from .colors.color import Color
from .colors.color_stop import ColorStop
from .colors.channels import RGBChannels, HSLChannels, HSVChannels
from .conversions import convert, np_convert, clamp_float, clamp_degrees
from .exceptions import (
    SpectrumError,
    InvalidArgumentError,
    ComponentUnavailableError,
    UnexpectedValueError,
)
from .types.mode import Mode

__version__ = "1.0.0"

__all__ = [
    # Colors
    "Color",
    "ColorStop",
    "RGBChannels",
    "HSLChannels",
    "HSVChannels",
    "Mode",

    # Conversions
    "convert",
    "np_convert",
    "clamp_float",
    "clamp_degrees",

    # Errors
    "SpectrumError",
    "InvalidArgumentError",
    "ComponentUnavailableError",
    "UnexpectedValueError",

    # Version
    "__version__",
]
