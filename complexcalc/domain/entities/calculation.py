from __future__ import annotations

from dataclasses import dataclass

from complexcalc.domain.entities.complex_number import ComplexNumber


@dataclass(frozen=True)
class PlotPoint:
    name: str  # series label, e.g. "First Value", "Result"
    value: ComplexNumber


@dataclass(frozen=True)
class CalculationResult:
    """What the presentation layer receives after a successful step."""

    operation: str  # identity, or "circle_area" etc. for shape measurements
    result: ComplexNumber
    operand1: ComplexNumber
    operand2: ComplexNumber | None
    plot: tuple[PlotPoint, ...]
    recorded: bool  # False for steps that are not written to history


def plot_points(
    operand1: ComplexNumber, operand2: ComplexNumber | None, result: ComplexNumber
) -> tuple[PlotPoint, ...]:
    if operand2 is None:
        return (PlotPoint("Value", operand1), PlotPoint("Result", result))
    return (
        PlotPoint("First Value", operand1),
        PlotPoint("Second Value", operand2),
        PlotPoint("Result", result),
    )
