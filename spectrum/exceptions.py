from typing import Any


class SpectrumError(Exception):
    """Base class for every error raised by spectrum."""

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.data = data


class InvalidArgumentError(SpectrumError, ValueError):
    """Raised for malformed color text, unknown names, modes or properties.

    ``data`` holds the raw offending input.
    """


class ComponentUnavailableError(SpectrumError, NotImplementedError):
    """Raised when a conversion path does not exist (HSV to RGB)."""


class UnexpectedValueError(SpectrumError, TypeError):
    """Raised when a value cannot be coerced into a Color."""
