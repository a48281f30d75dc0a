from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, Union

from ..conversions import convert, clamp_float, clamp_degrees
from ..types.color_types import ChannelTriple
from ..types.mode import Mode, CHANNEL_NAMES, HUE_SPACES


class ChannelsBase:
    """
    Immutable three-channel value tagged with the color model it belongs to.

    Hue channels wrap into [0, 360); every other channel is clamped into
    [0, 1] on construction. Conversions never touch ``self`` and always
    return a new instance of the target model.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode: ClassVar[Mode]
    channel_names: ClassVar[Tuple[str, str, str]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ChannelTriple) -> None:
        if len(value) != 3:
            raise ValueError(f"{self.mode.value} expects 3 channels, got {len(value)}")

        a, b, c = (float(v) for v in value)
        if self.has_hue:
            a = clamp_degrees(a)
        else:
            a = clamp_float(a, 0, 1)

        self._value = (a, clamp_float(b, 0, 1), clamp_float(c, 0, 1))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTriple:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if the first channel is a hue angle."""
        return self.mode in HUE_SPACES

    def as_dict(self) -> dict[str, float]:
        return dict(zip(self.channel_names, self._value))

    def replace(self, index: int, channel: float) -> ChannelsBase:
        """Return a copy with the channel at ``index`` swapped for ``channel``."""
        values = list(self._value)
        values[index] = channel
        return self.__class__(tuple(values))  # type: ignore[arg-type]

    def offset(self, a: float = 0.0, b: float = 0.0, c: float = 0.0) -> ChannelsBase:
        """Return a copy with each delta added to its channel."""
        x, y, z = self._value
        return self.__class__((x + a, y + b, z + c))

    # ------------------ CONVERSIONS ------------------
    def convert(self, to_space: Union[Mode, str]) -> ChannelsBase:
        to_space = Mode.parse(to_space)
        if to_space == self.mode:
            return self
        return CHANNEL_CLASSES[to_space](convert(self._value, self.mode, to_space))

    def to_rgb(self) -> RGBChannels:
        return self.convert(Mode.RGB)  # type: ignore[return-value]

    def to_hsl(self) -> HSLChannels:
        return self.convert(Mode.HSL)  # type: ignore[return-value]

    def to_hsv(self) -> HSVChannels:
        return self.convert(Mode.HSV)  # type: ignore[return-value]

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ChannelsBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        channels = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({channels})"


class RGBChannels(ChannelsBase):
    mode: ClassVar[Mode] = Mode.RGB
    channel_names: ClassVar[Tuple[str, str, str]] = CHANNEL_NAMES[Mode.RGB]


class HSLChannels(ChannelsBase):
    mode: ClassVar[Mode] = Mode.HSL
    channel_names: ClassVar[Tuple[str, str, str]] = CHANNEL_NAMES[Mode.HSL]


class HSVChannels(ChannelsBase):
    mode: ClassVar[Mode] = Mode.HSV
    channel_names: ClassVar[Tuple[str, str, str]] = CHANNEL_NAMES[Mode.HSV]


CHANNEL_CLASSES: dict[Mode, type[ChannelsBase]] = {
    Mode.RGB: RGBChannels,
    Mode.HSL: HSLChannels,
    Mode.HSV: HSVChannels,
}


def channels_for(mode: Union[Mode, str], a: float, b: float, c: float) -> ChannelsBase:
    """Build the variant for ``mode`` from three raw channel values."""
    return CHANNEL_CLASSES[Mode.parse(mode)]((a, b, c))
