"""
Spectrum Color Classes
======================

- ``Color``: a mutable color in RGB, HSL or HSV plus alpha, with CSS
  parsing and formatting
- ``ColorStop``: a Color plus an optional CSS size, for gradients
- ``RGBChannels`` / ``HSLChannels`` / ``HSVChannels``: the immutable channel
  variants a Color holds, with pure conversions between them

Usage
-----
>>> from spectrum.colors import Color, ColorStop
>>> color = Color.create("rgba(255, 0, 0, 0.5)")
>>> str(color.affect_hsl_hue(120))
'rgba(0, 255, 0, 0.5)'
>>> str(ColorStop.create("#00f 25%"))
'#0000ff 25%'
"""

from .channels import ChannelsBase, RGBChannels, HSLChannels, HSVChannels, channels_for
from .color import Color
from .color_stop import ColorStop
from .names import NAMES

__all__ = [
    'ChannelsBase',
    'RGBChannels',
    'HSLChannels',
    'HSVChannels',
    'channels_for',
    'Color',
    'ColorStop',
    'NAMES',
]
