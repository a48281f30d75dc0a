from typing import Any, ClassVar, Iterator, NamedTuple, Optional

from ..colors.color import Color
from ..exceptions import InvalidArgumentError


class ValidationError(NamedTuple):
    constraint: "Constraint"
    value: Any
    message: str


class Constraint:
    """
    A single rule checked against an already coerced Color.

    Subclasses coerce their parameter in ``validate_parameter`` and yield
    one ValidationError per broken rule from ``validate``.
    """

    WEIGHT: ClassVar[int] = 20
    OUTPUT_TYPES: ClassVar[tuple] = ('Spectrum:Color',)
    name: ClassVar[str]

    def __init__(self, parameter: Any) -> None:
        self.parameter = self.validate_parameter(parameter)

    def validate_parameter(self, parameter: Any) -> float:
        if isinstance(parameter, bool):
            raise InvalidArgumentError(f"{self.name} expects a number, got {parameter!r}", data=parameter)
        try:
            return float(parameter)
        except (TypeError, ValueError):
            raise InvalidArgumentError(
                f"{self.name} expects a number, got {parameter!r}", data=parameter
            ) from None

    def validate(self, value: Optional[Color]) -> Iterator[ValidationError]:
        raise NotImplementedError

    def is_valid(self, value: Optional[Color]) -> bool:
        return next(iter(self.validate(value)), None) is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.parameter!r})"


class MinLightness(Constraint):
    name: ClassVar[str] = "minLightness"

    def validate(self, value: Optional[Color]) -> Iterator[ValidationError]:
        if value is None:
            return

        if value.get_hsl_lightness() < self.parameter:
            yield ValidationError(
                self, value, f"Color value must have lightness of at least {self.parameter}"
            )


class MaxLightness(Constraint):
    name: ClassVar[str] = "maxLightness"

    def validate(self, value: Optional[Color]) -> Iterator[ValidationError]:
        if value is None:
            return

        if value.get_hsl_lightness() > self.parameter:
            yield ValidationError(
                self, value, f"Color value must not have lightness greater than {self.parameter}"
            )
