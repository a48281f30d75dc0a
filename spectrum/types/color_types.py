from __future__ import annotations
from typing import Sequence, Tuple, Union, TYPE_CHECKING

from numpy import ndarray

if TYPE_CHECKING:
    from ..colors.color import Color

Scalar = int | float
ChannelTriple = Tuple[float, float, float]
ColorSequence = Union[Sequence[Scalar], ndarray]
ColorInput = Union["Color", str, ColorSequence, float, None]
SizeInput = Union[str, int, None]
