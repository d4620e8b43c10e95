from __future__ import annotations

from enum import Enum

import numpy as np

from complexcalc.domain.entities.complex_number import ComplexNumber
from complexcalc.domain.errors import InvalidShapeInputError


class Shape(str, Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"  # equilateral, sized by its side


class Measure(str, Enum):
    AREA = "area"
    CIRCUMFERENCE = "circumference"


class ShapeService:
    """Measurements of simple shapes sized by a positive real number."""

    # Circle: A = pi * r^2
    @staticmethod
    def circle_area(radius: float) -> float:
        return float(np.pi * radius * radius)

    # Circle: C = 2 * pi * r
    @staticmethod
    def circle_circumference(radius: float) -> float:
        return float(2.0 * np.pi * radius)

    # Equilateral triangle: A = sqrt(3) / 4 * a^2
    @staticmethod
    def triangle_area(side: float) -> float:
        return float(np.sqrt(3.0) * side * side / 4.0)

    # Equilateral triangle: P = 3 * a
    @staticmethod
    def triangle_circumference(side: float) -> float:
        return 3.0 * side

    def measure(self, shape: Shape, measure: Measure, value: ComplexNumber) -> ComplexNumber:
        """Measure `shape` sized by the real part of `value`.

        Raises:
            InvalidShapeInputError: `value` has an imaginary part or is not positive.
        """
        if value.imaginary != 0.0:
            raise InvalidShapeInputError("Imaginary part must be zero!")
        size = value.real
        if not size > 0.0:
            raise InvalidShapeInputError("Value cannot be zero or negative!")

        if shape is Shape.CIRCLE:
            if measure is Measure.AREA:
                out = self.circle_area(size)
            else:
                out = self.circle_circumference(size)
        else:
            if measure is Measure.AREA:
                out = self.triangle_area(size)
            else:
                out = self.triangle_circumference(size)
        return ComplexNumber(out, 0.0)
