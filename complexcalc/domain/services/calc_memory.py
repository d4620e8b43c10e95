from __future__ import annotations

from complexcalc.domain.entities.complex_number import ComplexNumber


class CalcMemory:
    """Calculator memory register (MS / MR / M+ / MC).

    Also holds the last value captured when a binary operator was pressed;
    that value becomes the left-hand operand when the operation completes.
    """

    def __init__(self) -> None:
        self._sum_in_memory = ComplexNumber.zero()
        self._last_value = ComplexNumber.zero()

    def read_memory(self) -> ComplexNumber:
        return self._sum_in_memory

    def set_memory(self, value: ComplexNumber) -> None:
        self._sum_in_memory = value

    def add_to_memory(self, value: ComplexNumber) -> None:
        self._sum_in_memory = self._sum_in_memory.add(value)

    def clear_memory(self) -> None:
        self._sum_in_memory = ComplexNumber.zero()

    def get_last(self) -> ComplexNumber:
        return self._last_value

    def update_value(self, value: ComplexNumber) -> None:
        self._last_value = value
