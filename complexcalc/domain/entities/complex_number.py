from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from complexcalc.domain.errors import DivisionByZeroError


@dataclass(frozen=True)
class ComplexNumber:
    """Immutable (real, imaginary) pair with closed-form arithmetic.

    NaN and Inf components are carried through untouched; the only guarded
    inputs are the zero denominators of `divide` and `inverse`.
    """

    real: float
    imaginary: float

    @classmethod
    def zero(cls) -> ComplexNumber:
        return cls(0.0, 0.0)

    def __str__(self) -> str:
        return f"{self.real}+{self.imaginary}i"

    def is_close(self, other: ComplexNumber, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        return math.isclose(self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.imaginary, other.imaginary, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def add(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    # self is the minuend: subtract(held, new) == held - new
    def subtract(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: ComplexNumber) -> ComplexNumber:
        return ComplexNumber(
            self.real * other.real - self.imaginary * other.imaginary,
            self.real * other.imaginary + self.imaginary * other.real,
        )

    def divide(self, other: ComplexNumber) -> ComplexNumber:
        if other.real == 0 and other.imaginary == 0:
            raise DivisionByZeroError()
        denominator = other.real * other.real + other.imaginary * other.imaginary
        return ComplexNumber(
            (self.real * other.real + self.imaginary * other.imaginary) / denominator,
            (self.imaginary * other.real - self.real * other.imaginary) / denominator,
        )

    def absolute_value(self) -> float:
        return float(np.sqrt(self.real * self.real + self.imaginary * self.imaginary))

    def square(self) -> ComplexNumber:
        """Return `self + self`.

        This doubles the value rather than squaring it. Saved histories
        recorded `SquareOperation` results with this behavior, so it is kept
        as-is.
        """
        return self.add(self)

    # Principal square root; a zero imaginary part takes the positive branch.
    def root(self) -> ComplexNumber:
        abs_value = self.absolute_value()
        with np.errstate(invalid="ignore"):
            new_real = float(np.sqrt((abs_value + self.real) / 2))
            norm = 1.0 if self.imaginary >= 0 else -1.0
            new_imaginary = norm * float(np.sqrt((abs_value - self.real) / 2))
        return ComplexNumber(new_real, new_imaginary)

    def inverse(self) -> ComplexNumber:
        denominator = self.real * self.real + self.imaginary * self.imaginary
        if denominator == 0:
            raise DivisionByZeroError()
        return ComplexNumber(self.real / denominator, -self.imaginary / denominator)

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.real, -self.imaginary)
