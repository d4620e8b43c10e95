from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from complexcalc.domain.entities.calculation import CalculationResult, plot_points
from complexcalc.domain.entities.complex_number import ComplexNumber
from complexcalc.domain.entities.history_entry import HistoryEntry
from complexcalc.domain.entities.operation import Operation
from complexcalc.domain.errors import CalculatorError, NoPendingOperationError
from complexcalc.domain.services.calc_memory import CalcMemory
from complexcalc.domain.services.history_cursor import HistoryCursor
from complexcalc.domain.services.history_manager import HistoryManager
from complexcalc.domain.services.shape_service import Measure, Shape, ShapeService

logger = logging.getLogger(__name__)


@dataclass
class CalculatorSession:
    """
    One user's calculator: operation log, undo/redo cursor and memory.

    Every method runs to completion on the calling thread. A session is not
    safe to share between threads without an external lock (see
    `SessionStore`).

    Failed steps (division by zero, missing operand) raise before anything
    is recorded, so the history and cursor only ever reflect successful
    calculations.
    """

    history: HistoryManager = field(default_factory=HistoryManager)
    memory: CalcMemory = field(default_factory=CalcMemory)
    shapes: ShapeService = field(default_factory=ShapeService)
    cursor: HistoryCursor = field(init=False)
    pending_operation: Operation | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.cursor = HistoryCursor(self.history)
        self.cursor.move_to_tip()

    # --------- calculations ---------
    def calculate(
        self,
        operation: Operation,
        operand1: ComplexNumber,
        operand2: ComplexNumber | None = None,
    ) -> CalculationResult:
        """
        Run `operation`, record it and move the cursor to the new entry.

        Raises:
            DivisionByZeroError, MissingOperandError: nothing is recorded.
        """
        try:
            result = operation.perform_operation(operand1, operand2)
        except CalculatorError as exc:
            logger.warning("Rejected %s: %s", operation.value, exc)
            raise

        entry = self.history.add_operation(operation, result, operand1, operand2)
        self.cursor.move_to_tip()
        return CalculationResult(
            operation=operation.serialize(),
            result=entry.result,
            operand1=entry.operand1,
            operand2=entry.operand2,
            plot=plot_points(entry.operand1, entry.operand2, entry.result),
            recorded=True,
        )

    def press_operator(self, operation: Operation, value: ComplexNumber) -> None:
        """Hold `value` as the left-hand operand of a pending binary operation."""
        if operation.is_unary():
            raise ValueError(f"{operation.value} is not a binary operation")
        self.memory.update_value(value)
        self.pending_operation = operation

    def equals(self, value: ComplexNumber) -> CalculationResult:
        """Complete the pending operation as `held <op> value`."""
        if self.pending_operation is None:
            raise NoPendingOperationError("No operation is pending")
        return self.calculate(self.pending_operation, self.memory.get_last(), value)

    def measure_shape(self, shape: Shape, measure: Measure, value: ComplexNumber) -> CalculationResult:
        result = self.shapes.measure(shape, measure, value)
        return CalculationResult(
            operation=f"{shape.value}_{measure.value}",
            result=result,
            operand1=value,
            operand2=None,
            plot=plot_points(value, None, result),
            recorded=False,
        )

    # --------- history navigation ---------
    def undo(self) -> HistoryEntry | None:
        return self.cursor.undo()

    def redo(self) -> HistoryEntry | None:
        return self.cursor.redo()

    def current_entry(self) -> HistoryEntry | None:
        return self.cursor.current()

    def clear_history(self) -> None:
        self.history.clear_history()

    def reset_cursor(self) -> None:
        self.cursor.reset()

    # --------- persistence ---------
    def export_history(self) -> str:
        return self.history.serialize_history()

    def import_history(self, text: str) -> int:
        self._replace_history(lambda: self.history.deserialize_history(text))
        return self.history.get_history_size()

    def save_history(self, path: str | Path) -> None:
        self.history.save_history_to_file(path)

    def load_history(self, path: str | Path) -> int:
        self._replace_history(lambda: self.history.load_history_from_file(path))
        return self.history.get_history_size()

    def _replace_history(self, load: Callable[[], None]) -> None:
        try:
            load()
        except CalculatorError as exc:
            logger.warning("History load rejected: %s", exc)
            raise
        self.cursor.move_to_tip()
