from __future__ import annotations
import logging
import math
from collections.abc import Sequence
from typing import Any, Optional, Union

import numpy as np
from numpy import ndarray

from . import parsing
from .channels import ChannelsBase, RGBChannels, HSLChannels, HSVChannels, channels_for
from ..conversions import clamp_float
from ..exceptions import InvalidArgumentError
from ..types.color_types import ColorInput
from ..types.mode import Mode

logger = logging.getLogger(__name__)

TEXT_CONTRAST_THRESHOLD = 0.8
RANDOM_SATURATION_STEPS = (1, 10)  # tenths, upper bound exclusive
RANDOM_LIGHTNESS_STEPS = (3, 9)

# property name -> canonical property, camelCase spellings included
PROPERTY_ALIASES = {
    "red": "red",
    "green": "green",
    "blue": "blue",
    "alpha": "alpha",
    "hue": "hsl_hue",
    "hsl_hue": "hsl_hue",
    "hslHue": "hsl_hue",
    "saturation": "hsl_saturation",
    "hsl_saturation": "hsl_saturation",
    "hslSaturation": "hsl_saturation",
    "lightness": "hsl_lightness",
    "hsl_lightness": "hsl_lightness",
    "hslLightness": "hsl_lightness",
    "hsv_hue": "hsv_hue",
    "hsvHue": "hsv_hue",
    "hsv_saturation": "hsv_saturation",
    "hsvSaturation": "hsv_saturation",
    "value": "hsv_value",
    "hsv_value": "hsv_value",
    "hsvValue": "hsv_value",
}


class Color:
    """
    A single mutable color in RGB, HSL or HSV plus an alpha channel.

    The channels live in an immutable variant (RGBChannels, HSLChannels or
    HSVChannels). Reading or writing a channel that belongs to another model
    converts the color into that model first and keeps it there, so
    ``color.hue`` on an RGB color leaves it in HSL mode. Every mutator
    returns ``self`` for chaining.

    RGB channels are unit floats, not bytes. Converting out of HSV is not
    supported and raises ComponentUnavailableError.

    Examples
    --------
    >>> Color.create("#ff0000").lighten(0.25).to_hex_string()
    '#ff7f7f'
    >>> Color.from_string("hsl(120, 100%, 50%)").red
    0.0
    """

    __slots__ = ('_channels', '_alpha')

    def __init__(
        self,
        a: float = 0.0,
        b: float = 0.0,
        c: float = 0.0,
        alpha: Optional[float] = None,
        mode: Union[Mode, str] = Mode.RGB,
    ) -> None:
        mode = Mode.parse(mode)
        if mode == Mode.HSL:
            self.set_hsla(a, b, c, alpha)
        elif mode == Mode.HSV:
            self.set_hsva(a, b, c, alpha)
        else:
            self.set_rgba(a, b, c, alpha)

    @classmethod
    def _from_channels(cls, channels: ChannelsBase, alpha: Optional[float] = 1.0) -> Color:
        color = cls.__new__(cls)
        color._channels = channels
        color.set_alpha(alpha)
        return color

    # ------------------ FACTORIES ------------------
    @classmethod
    def random(
        cls,
        saturation: Optional[float] = None,
        lightness: Optional[float] = None,
        rng: Union[np.random.Generator, int, None] = None,
    ) -> Color:
        """
        Create a random HSL color.

        Args:
            saturation: Fixed saturation, otherwise one of 0.1 ... 0.9
            lightness: Fixed lightness, otherwise one of 0.3 ... 0.8
            rng: numpy Generator or seed, for reproducible colors
        """
        rng = np.random.default_rng(rng)

        if saturation is None:
            saturation = int(rng.integers(*RANDOM_SATURATION_STEPS)) / 10

        if lightness is None:
            lightness = int(rng.integers(*RANDOM_LIGHTNESS_STEPS)) / 10

        return cls(int(rng.integers(0, 360)), saturation, lightness, None, Mode.HSL)

    @classmethod
    def create(cls, color: ColorInput = None) -> Color:
        """
        Create or wrap a Color from loosely typed input.

        - Color: an independent copy
        - str: parsed with from_string
        - sequence of up to four floats: normalized ``[r, g, b, a]``, missing
          channels default to 0 and alpha to 1
        - anything else, None and bytes included: black
        """
        if isinstance(color, Color):
            return color.copy()

        if isinstance(color, str):
            return cls.from_string(color)

        if isinstance(color, (Sequence, ndarray)) and not isinstance(color, (bytes, bytearray)):
            values = tuple(float(v) for v in list(color)[:4])
            r, g, b, a = values + (0.0, 0.0, 0.0, 1.0)[len(values):]
            return cls(r, g, b, a, Mode.RGB)

        return cls(0, 0, 0)

    @classmethod
    def from_string(cls, color: str) -> Color:
        return cls._from_channels(*parsing.parse_string(color))

    @classmethod
    def from_name(cls, name: str) -> Color:
        return cls._from_channels(*parsing.parse_name(name))

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return parsing.is_valid_name(name)

    @classmethod
    def from_hex(cls, hex_string: str) -> Color:
        return cls._from_channels(*parsing.parse_hex(hex_string))

    def copy(self) -> Color:
        return self._from_channels(self._channels, self._alpha)

    __copy__ = copy

    # ------------------ MODE ------------------
    @property
    def mode(self) -> Mode:
        return self._channels.mode

    @property
    def channels(self) -> ChannelsBase:
        return self._channels

    def set_mode(self, mode: Union[Mode, str]) -> Color:
        mode = Mode.parse(mode)
        if mode != self._channels.mode:
            self._channels = self._channels.convert(mode)
        return self

    def to_rgb(self) -> Color:
        return self.set_mode(Mode.RGB)

    def to_hsl(self) -> Color:
        return self.set_mode(Mode.HSL)

    def to_hsv(self) -> Color:
        return self.set_mode(Mode.HSV)

    def _get(self, mode: Mode, index: int) -> float:
        self.set_mode(mode)
        return self._channels.value[index]

    def _set(self, mode: Mode, index: int, channel: float) -> Color:
        self.set_mode(mode)
        self._channels = self._channels.replace(index, channel)
        return self

    # ------------------ FORMATTING ------------------
    def to_hex_string(self, allow_short: bool = False) -> str:
        """Export as ``#rrggbb``, or ``#rgb`` when allowed and lossless."""
        self.set_mode(Mode.RGB)
        # truncate, after dropping the float noise left by n / 255 * 255
        pairs = [format(int(round(channel * 255, 9)), '02x') for channel in self._channels]

        if allow_short and all(pair[0] == pair[1] for pair in pairs):
            pairs = [pair[0] for pair in pairs]

        return '#' + ''.join(pairs)

    def to_css_string(self) -> str:
        """Export as ``rgba(r, g, b, a)`` when translucent, hex otherwise."""
        self.set_mode(Mode.RGB)

        if self._alpha < 1:
            r, g, b = (_round_half_up(channel * 255) for channel in self._channels)
            return f"rgba({r}, {g}, {b}, {_format_number(self._alpha)})"

        return self.to_hex_string(False)

    def __str__(self) -> str:
        try:
            return self.to_css_string()
        except Exception:
            logger.debug("Could not convert %r to a CSS string", self, exc_info=True)
            return ''

    def __repr__(self) -> str:
        channels = ", ".join(f"{k}={v!r}" for k, v in self._channels.as_dict().items())
        return f"Color({self.mode.value}: {channels}, alpha={self._alpha!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            self.mode == other.mode
            and all(math.isclose(x, y, abs_tol=1e-9) for x, y in zip(self._channels, other._channels))
            and math.isclose(self._alpha, other._alpha, abs_tol=1e-9)
        )

    __hash__ = None  # mutable

    def debug_export(self) -> dict[str, Any]:
        """Read-only diagnostic view; inspects a copy so the mode is left alone."""
        properties: dict[str, float] = self._channels.as_dict()
        properties['alpha'] = self._alpha
        return {
            'definition': str(self.copy()),
            'properties': properties,
        }

    # ------------------ RGB ------------------
    def set_rgba(self, r: float, g: float, b: float, a: Optional[float] = None) -> Color:
        self._channels = RGBChannels((r, g, b))
        return self.set_alpha(a)

    def set_rgb(self, r: float, g: float, b: float) -> Color:
        return self.set_rgba(r, g, b, 1.0)

    def set_red(self, r: float) -> Color:
        return self._set(Mode.RGB, 0, r)

    def get_red(self) -> float:
        return self._get(Mode.RGB, 0)

    def set_green(self, g: float) -> Color:
        return self._set(Mode.RGB, 1, g)

    def get_green(self) -> float:
        return self._get(Mode.RGB, 1)

    def set_blue(self, b: float) -> Color:
        return self._set(Mode.RGB, 2, b)

    def get_blue(self) -> float:
        return self._get(Mode.RGB, 2)

    # ------------------ HSL ------------------
    def set_hsla(self, h: float, s: float, l: float, a: Optional[float] = None) -> Color:
        self._channels = HSLChannels((h, s, l))
        return self.set_alpha(a)

    def set_hsl(self, h: float, s: float, l: float) -> Color:
        return self.set_hsla(h, s, l, 1.0)

    def set_hsl_hue(self, h: float) -> Color:
        return self._set(Mode.HSL, 0, h)

    def get_hsl_hue(self) -> float:
        return self._get(Mode.HSL, 0)

    def set_hsl_saturation(self, s: float) -> Color:
        return self._set(Mode.HSL, 1, s)

    def get_hsl_saturation(self) -> float:
        return self._get(Mode.HSL, 1)

    def set_hsl_lightness(self, l: float) -> Color:
        return self._set(Mode.HSL, 2, l)

    def get_hsl_lightness(self) -> float:
        return self._get(Mode.HSL, 2)

    # ------------------ HSV ------------------
    def set_hsva(self, h: float, s: float, v: float, a: Optional[float] = None) -> Color:
        self._channels = HSVChannels((h, s, v))
        return self.set_alpha(a)

    def set_hsv(self, h: float, s: float, v: float) -> Color:
        return self.set_hsva(h, s, v, 1.0)

    def set_hsv_hue(self, h: float) -> Color:
        return self._set(Mode.HSV, 0, h)

    def get_hsv_hue(self) -> float:
        return self._get(Mode.HSV, 0)

    def set_hsv_saturation(self, s: float) -> Color:
        return self._set(Mode.HSV, 1, s)

    def get_hsv_saturation(self) -> float:
        return self._get(Mode.HSV, 1)

    def set_hsv_value(self, v: float) -> Color:
        return self._set(Mode.HSV, 2, v)

    def get_hsv_value(self) -> float:
        return self._get(Mode.HSV, 2)

    # ------------------ ALPHA ------------------
    def set_alpha(self, alpha: Optional[float]) -> Color:
        if alpha is None:
            alpha = 1.0
        self._alpha = clamp_float(alpha, 0, 1)
        return self

    def get_alpha(self) -> float:
        return self._alpha

    # ------------------ PROPERTIES ------------------
    red = property(get_red, set_red)
    green = property(get_green, set_green)
    blue = property(get_blue, set_blue)
    alpha = property(get_alpha, set_alpha)

    hsl_hue = property(get_hsl_hue, set_hsl_hue)
    hsl_saturation = property(get_hsl_saturation, set_hsl_saturation)
    hsl_lightness = property(get_hsl_lightness, set_hsl_lightness)
    hue = hsl_hue
    saturation = hsl_saturation
    lightness = hsl_lightness

    hsv_hue = property(get_hsv_hue, set_hsv_hue)
    hsv_saturation = property(get_hsv_saturation, set_hsv_saturation)
    hsv_value = property(get_hsv_value, set_hsv_value)
    value = hsv_value

    def get(self, name: str) -> float:
        """Read a channel property by name (``"hue"``, ``"hslHue"``, ...)."""
        return getattr(self, _canonical_property(name))

    def set(self, name: str, channel: float) -> Color:
        setattr(self, _canonical_property(name), channel)
        return self

    # ------------------ RELATIVE OPERATORS ------------------
    def add(self, color: ColorInput) -> Color:
        """Add another color channel-wise in RGB, saturating at 1."""
        self.set_mode(Mode.RGB)
        other = Color.create(color).set_mode(Mode.RGB)
        self._channels = self._channels.offset(*other._channels)
        return self

    def subtract(self, color: ColorInput) -> Color:
        """Subtract another color channel-wise in RGB, saturating at 0."""
        self.set_mode(Mode.RGB)
        other = Color.create(color).set_mode(Mode.RGB)
        self._channels = self._channels.offset(*(-channel for channel in other._channels))
        return self

    def lighten(self, lightness: float) -> Color:
        return self.affect_hsl_lightness(lightness)

    def darken(self, darkness: float) -> Color:
        return self.affect_hsl_lightness(-1 * darkness)

    def affect_hsl(self, h: float, s: float, l: float, a: Optional[float] = None) -> Color:
        self.set_mode(Mode.HSL)
        self._channels = self._channels.offset(h, s, l)

        if a is not None:
            self.affect_alpha(a)

        return self

    def affect_hsl_hue(self, h: float) -> Color:
        return self.set_hsl_hue(self.get_hsl_hue() + h)

    def affect_hsl_saturation(self, s: float) -> Color:
        return self.set_hsl_saturation(self.get_hsl_saturation() + s)

    def affect_hsl_lightness(self, l: float) -> Color:
        return self.set_hsl_lightness(self.get_hsl_lightness() + l)

    def affect_hsv(self, h: float, s: float, v: float, a: Optional[float] = None) -> Color:
        self.set_mode(Mode.HSV)
        self._channels = self._channels.offset(h, s, v)

        if a is not None:
            self.affect_alpha(a)

        return self

    def affect_hsv_hue(self, h: float) -> Color:
        return self.set_hsv_hue(self.get_hsv_hue() + h)

    def affect_hsv_saturation(self, s: float) -> Color:
        return self.set_hsv_saturation(self.get_hsv_saturation() + s)

    def affect_hsv_value(self, v: float) -> Color:
        return self.set_hsv_value(self.get_hsv_value() + v)

    def affect_alpha(self, a: float) -> Color:
        return self.set_alpha(self._alpha + a)

    # ------------------ CONTRAST ------------------
    def affect_contrast(self, amount: float) -> Color:
        """Scale lightness away from (amount > 0) or onto (amount < 0) the midpoint."""
        amount = clamp_float(amount, -1, 1)
        ratio = self.get_hsl_lightness() - 0.5
        return self.set_hsl_lightness((ratio * amount) + 0.5)

    def to_midtone(self, amount: float = 1.0) -> Color:
        """Pull lightness toward 0.5 by ``amount`` of its distance from it."""
        amount = clamp_float(amount, 0, 1)
        lightness = self.get_hsl_lightness()
        delta = lightness - 0.5
        return self.set_hsl_lightness(lightness - (delta * amount))

    def contrast_against(self, color: ColorInput, amount: float = 0.5) -> Color:
        """
        Keep at least ``amount`` of lightness between this color and ``color``.

        A dark reference pushes this color lighter, a light reference pushes
        it darker; a color that is already far enough away is left alone.
        """
        amount = clamp_float(amount, 0, 1)
        delta1 = self.get_hsl_lightness() - 0.5
        delta2 = Color.create(color).get_hsl_lightness() - 0.5

        if delta2 < 0 and delta1 < delta2 + amount:
            delta1 = delta2 + amount
        elif delta2 > 0 and delta1 > delta2 - amount:
            delta1 = delta2 - amount

        return self.set_hsl_lightness(delta1 + 0.5)

    def get_text_contrast_color(self) -> Color:
        """Black for very light colors, white for everything else."""
        if self.get_hsl_lightness() > TEXT_CONTRAST_THRESHOLD:
            return Color.create('black')
        return Color.create('white')


def _canonical_property(name: str) -> str:
    try:
        return PROPERTY_ALIASES[name]
    except KeyError:
        raise InvalidArgumentError(f"Unknown property: {name}", data=name) from None


def _round_half_up(number: float) -> int:
    return int(math.floor(number + 0.5))


def _format_number(number: float) -> str:
    """Print up to 14 significant digits, whole floats without the trailing ``.0``."""
    return format(float(number), ".14g")
