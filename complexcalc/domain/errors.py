from __future__ import annotations


class CalculatorError(Exception):
    """Base class for every error raised by the calculator core."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    def __init__(self, message: str = "Cannot divide by zero!") -> None:
        super().__init__(message)


class MissingOperandError(CalculatorError, ValueError):
    pass


class NoPendingOperationError(CalculatorError, ValueError):
    pass


class InvalidShapeInputError(CalculatorError, ValueError):
    pass


class UnknownOperationError(CalculatorError, ValueError):
    def __init__(self, identity: str) -> None:
        super().__init__(f"Unknown operation: {identity!r}")
        self.identity = identity


class MalformedLiteralError(CalculatorError, ValueError):
    def __init__(self, literal: str, reason: str = "expected <float>+<float>i") -> None:
        super().__init__(f"Malformed history literal {literal!r}: {reason}")
        self.literal = literal


class HistoryIndexError(CalculatorError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"History index {index} out of range (size {size})")
        self.index = index
        self.size = size


class HistoryIOError(CalculatorError, OSError):
    def __init__(self, message: str, path: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
