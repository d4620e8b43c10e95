from __future__ import annotations

from dataclasses import dataclass

from complexcalc.domain.entities.complex_number import ComplexNumber
from complexcalc.domain.entities.operation import Operation
from complexcalc.domain.errors import MissingOperandError


@dataclass(frozen=True)
class HistoryEntry:
    operation: Operation
    result: ComplexNumber
    operand1: ComplexNumber
    operand2: ComplexNumber | None = None  # present iff the operation is binary

    def __post_init__(self) -> None:
        if self.operation.is_unary() and self.operand2 is not None:
            raise ValueError(f"{self.operation.value} takes a single operand")
        if not self.operation.is_unary() and self.operand2 is None:
            raise MissingOperandError(f"{self.operation.value} requires two operands.")
