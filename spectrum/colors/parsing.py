"""
Parsers for CSS-style color text.

Every parser is pure and returns ``(channels, alpha)``; ``Color`` wraps the
result. Accepted forms:

- names: ``red``, ``RebeccaPurple``-style case-insensitive lookups, ``transparent``
- hex: ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``0xrrggbb``, or bare digits
- functional: ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``, ``hsv()``, ``hsva()``
"""
import math
import re
import warnings
from typing import Any, Tuple

from .channels import ChannelsBase, RGBChannels, channels_for
from .names import NAMES
from ..exceptions import InvalidArgumentError
from ..types.mode import Mode

ParsedColor = Tuple[ChannelsBase, float]

CSS_FUNCTION_PATTERN = re.compile(r"^(rgb|hsl|hsv)(a?)\((.*)\)", re.IGNORECASE)
HEX_DIGITS_PATTERN = re.compile(r"[0-9a-fA-F]+")


def is_valid_name(name: Any) -> bool:
    return isinstance(name, str) and name.lower() in NAMES


def parse_name(name: str) -> ParsedColor:
    key = name.lower()
    if key not in NAMES:
        raise InvalidArgumentError(f"Color name {name} is not recognized", data=name)

    entry = NAMES[key]
    alpha = float(entry[3]) if len(entry) > 3 else 1.0
    return RGBChannels((entry[0] / 255, entry[1] / 255, entry[2] / 255)), alpha


def parse_hex(text: str) -> ParsedColor:
    raw = text
    text = text.strip()

    if text[:2].lower() == "0x":
        text = text[2:]
    else:
        text = text.lstrip("#")

    if not HEX_DIGITS_PATTERN.fullmatch(text):
        raise InvalidArgumentError(f"Invalid color {raw}", data=raw)

    alpha = 1.0
    if len(text) == 8:
        alpha = int(text[6:], 16) / 255
        text = text[:6]

    if len(text) == 6:
        r, g, b = (int(text[i:i + 2], 16) for i in (0, 2, 4))
    elif len(text) == 3:
        r, g, b = (int(digit * 2, 16) for digit in text)
    else:
        raise InvalidArgumentError(f"Invalid color {raw}", data=raw)

    return RGBChannels((r / 255, g / 255, b / 255)), alpha


def _to_float(component: str, source: str) -> float:
    if component == "":
        return 0.0
    try:
        number = float(component)
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid color component {component!r} in {source}", data=source
        ) from None

    if not math.isfinite(number):
        raise InvalidArgumentError(f"Invalid color component {component!r} in {source}", data=source)
    return number


def _scaled(component: str, divisor: float, source: str) -> float:
    """Percentages divide by 100, bare numbers by ``divisor``."""
    if component.endswith("%"):
        return _to_float(component.strip("%"), source) / 100
    return _to_float(component, source) / divisor


def parse_css_definition(function: str, alpha_flag: str, arguments: str, source: str = "") -> ParsedColor:
    """
    Parse the pieces of a functional color matched by CSS_FUNCTION_PATTERN.

    ``rgb`` channels accept 0-255 numbers or percentages. For ``hsl`` and
    ``hsv`` the hue is raw degrees and the other two channels are
    percentages (the ``%`` sign is optional, the value is always divided by
    100). Alpha is only read when the function name ends in ``a``; a bare
    alpha is taken as-is, a percentage is divided by 100.
    """
    source = source or f"{function}{alpha_flag}({arguments})"
    mode = Mode.parse(function)
    has_alpha = alpha_flag.lower() == "a"
    args = [arg.strip() for arg in arguments.strip().split(",")]

    expected = 4 if has_alpha else 3
    if len(args) > expected:
        warnings.warn(f"Ignoring {len(args) - expected} extra argument(s) in {source}")

    a, b, c = (args[i] if i < len(args) else "0" for i in range(3))
    alpha_text = (args[3] if len(args) > 3 else "1") if has_alpha else "1"

    if mode == Mode.RGB:
        channels = (_scaled(a, 255, source), _scaled(b, 255, source), _scaled(c, 255, source))
    else:
        channels = (
            _to_float(a, source),
            _to_float(b.strip("%"), source) / 100,
            _to_float(c.strip("%"), source) / 100,
        )

    alpha = _scaled(alpha_text, 1, source)
    return channels_for(mode, *channels), alpha


def parse_string(text: str) -> ParsedColor:
    """Parse any supported color text; an empty string means black."""
    text = text.strip()
    if not text:
        text = "black"

    if is_valid_name(text):
        return parse_name(text)

    match = CSS_FUNCTION_PATTERN.match(text)
    if match:
        return parse_css_definition(*match.groups(), source=text)

    return parse_hex(text)
