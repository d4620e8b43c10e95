from __future__ import annotations

from enum import Enum

from complexcalc.domain.entities.complex_number import ComplexNumber
from complexcalc.domain.errors import MissingOperandError, UnknownOperationError


class Arity(str, Enum):
    UNARY = "unary"
    BINARY = "binary"


class Operation(str, Enum):
    """Closed set of calculator operations.

    Member values are the identity strings written to saved histories, so
    `Operation.deserialize(op.serialize()) is op` for every member.
    Operations are stateless: the member is the whole value.
    """

    ADDITION = "AdditionOperation"
    SUBTRACTION = "SubtractionOperation"
    MULTIPLICATION = "MultiplicationOperation"
    DIVISION = "DivisionOperation"
    CONJUGATE = "ConjugateOperation"
    ABSOLUTE_VALUE = "AbsoluteValueOperation"
    SQUARE = "SquareOperation"
    ROOT = "RootOperation"
    INVERSE = "InverseOperation"

    @property
    def arity(self) -> Arity:
        return _ARITY[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def is_unary(self) -> bool:
        return self.arity is Arity.UNARY

    def serialize(self) -> str:
        return self.value

    @classmethod
    def deserialize(cls, name: str) -> Operation | None:
        """Return the operation named `name`, or None if the name is unknown."""
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def from_identity(cls, name: str) -> Operation:
        op = cls.deserialize(name)
        if op is None:
            raise UnknownOperationError(name)
        return op

    def perform_operation(
        self, operand1: ComplexNumber, operand2: ComplexNumber | None = None
    ) -> ComplexNumber:
        """Apply the operation.

        Binary operations take `operand1` as the left-hand side (the minuend
        for subtraction, the dividend for division) and require `operand2`.
        Unary operations ignore `operand2`.

        Raises:
            MissingOperandError: binary operation called without `operand2`.
            DivisionByZeroError: zero divisor or inverse of zero.
        """
        if self.arity is Arity.BINARY and operand2 is None:
            raise MissingOperandError(f"{self.value} requires two operands.")

        if self is Operation.ADDITION:
            return operand1.add(operand2)
        elif self is Operation.SUBTRACTION:
            return operand1.subtract(operand2)
        elif self is Operation.MULTIPLICATION:
            return operand1.multiply(operand2)
        elif self is Operation.DIVISION:
            return operand1.divide(operand2)
        elif self is Operation.CONJUGATE:
            return operand1.conjugate()
        elif self is Operation.ABSOLUTE_VALUE:
            return ComplexNumber(operand1.absolute_value(), 0.0)
        elif self is Operation.SQUARE:
            return operand1.square()
        elif self is Operation.ROOT:
            return operand1.root()
        elif self is Operation.INVERSE:
            return operand1.inverse()
        raise UnknownOperationError(str(self.value))


_ARITY: dict[Operation, Arity] = {
    Operation.ADDITION: Arity.BINARY,
    Operation.SUBTRACTION: Arity.BINARY,
    Operation.MULTIPLICATION: Arity.BINARY,
    Operation.DIVISION: Arity.BINARY,
    Operation.CONJUGATE: Arity.UNARY,
    Operation.ABSOLUTE_VALUE: Arity.UNARY,
    Operation.SQUARE: Arity.UNARY,
    Operation.ROOT: Arity.UNARY,
    Operation.INVERSE: Arity.UNARY,
}

_SYMBOLS: dict[Operation, str] = {
    Operation.ADDITION: "+",
    Operation.SUBTRACTION: "-",
    Operation.MULTIPLICATION: "×",
    Operation.DIVISION: "÷",
    Operation.CONJUGATE: "x*",
    Operation.ABSOLUTE_VALUE: "|x|",
    Operation.SQUARE: "x²",
    Operation.ROOT: "√",
    Operation.INVERSE: "1/x",
}
