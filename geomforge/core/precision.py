"""Precision models: the numeric tolerance policy shared by all predicates.

A precision model snaps values to its numeric model and supplies the length
tolerance used to decide "collinear" and "on segment". Every algorithm
resolves a missing model to :data:`DEFAULT_PRECISION`, so results computed
with the same model agree across components.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .coordinate import Coordinate, CoordinateVector
from .errors import ConfigurationError
from .types import PrecisionModelType

# Numerical tolerance for floating point comparisons
EPS = 1e-10

# Relative tolerance of single precision values
SINGLE_EPS = 1e-6


@dataclass(frozen=True)
class PrecisionModel:
    """Numeric tolerance configuration.

    Attributes:
        model_type: Numeric model (floating, floating single or fixed)
        scale: Grid size of a fixed model, values are rounded to multiples of it

    Examples:
        >>> PrecisionModel().make_precise(0.123456789)
        0.123456789
        >>> PrecisionModel.fixed(0.5).make_precise(1.3)
        1.5
    """

    model_type: PrecisionModelType = PrecisionModelType.FLOATING
    scale: float = 0.0

    def __post_init__(self):
        if self.model_type is PrecisionModelType.FIXED and not self.scale > 0:
            raise ConfigurationError("The scale is equal to or less than 0.", "scale")

    @classmethod
    def fixed(cls, scale: float = 1.0) -> PrecisionModel:
        return cls(PrecisionModelType.FIXED, scale)

    @classmethod
    def floating_single(cls) -> PrecisionModel:
        return cls(PrecisionModelType.FLOATING_SINGLE)

    @property
    def maximum_significant_digits(self) -> int:
        if self.model_type is PrecisionModelType.FLOATING_SINGLE:
            return 6
        if self.model_type is PrecisionModelType.FIXED:
            return 1 + max(0, math.ceil(-math.log10(self.scale)))
        return 16

    def make_precise(
        self, value: Union[float, Coordinate, CoordinateVector]
    ) -> Union[float, Coordinate, CoordinateVector]:
        """Snap a value, coordinate or vector to this model."""
        if isinstance(value, (Coordinate, CoordinateVector)):
            if self.model_type is PrecisionModelType.FLOATING:
                return value
            return type(value)(
                self._precise(value.x), self._precise(value.y), self._precise(value.z)
            )
        return self._precise(value)

    def tolerance(self, *coordinates: Coordinate) -> float:
        """Length tolerance for comparisons involving ``coordinates``."""
        if self.model_type is PrecisionModelType.FIXED:
            return self.scale / 2

        magnitude = 1.0
        for coordinate in coordinates:
            magnitude = max(magnitude, abs(coordinate.x), abs(coordinate.y), abs(coordinate.z))

        if self.model_type is PrecisionModelType.FLOATING_SINGLE:
            return SINGLE_EPS * magnitude
        return EPS * magnitude

    def _precise(self, value: float) -> float:
        if math.isnan(value):
            return value
        if self.model_type is PrecisionModelType.FLOATING_SINGLE:
            return float(np.float32(value))
        if self.model_type is PrecisionModelType.FIXED:
            return round(value / self.scale) * self.scale
        return value

    def __str__(self) -> str:
        if self.model_type is PrecisionModelType.FLOATING_SINGLE:
            return "Floating (single)"
        if self.model_type is PrecisionModelType.FIXED:
            return f"Fixed ({self.scale})"
        return "Floating"


DEFAULT_PRECISION = PrecisionModel()


def resolve_precision(precision: Optional[PrecisionModel]) -> PrecisionModel:
    """Replace a missing precision model with the default floating model."""
    return DEFAULT_PRECISION if precision is None else precision


def least_precise(*models: PrecisionModel) -> PrecisionModel:
    """Return the model with the fewest significant digits."""
    if not models:
        raise ConfigurationError("No models are specified.", "models")
    return min(models, key=lambda model: model.maximum_significant_digits)


def most_precise(*models: PrecisionModel) -> PrecisionModel:
    """Return the model with the most significant digits."""
    if not models:
        raise ConfigurationError("No models are specified.", "models")
    return max(models, key=lambda model: model.maximum_significant_digits)


__all__ = [
    'EPS',
    'PrecisionModel',
    'DEFAULT_PRECISION',
    'resolve_precision',
    'least_precise',
    'most_precise',
]
