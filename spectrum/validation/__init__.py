"""Adapters that plug Color into value-validation pipelines."""

from .processor import ColorProcessor
from .constraints import Constraint, MinLightness, MaxLightness, ValidationError

__all__ = ['ColorProcessor', 'Constraint', 'MinLightness', 'MaxLightness', 'ValidationError']
