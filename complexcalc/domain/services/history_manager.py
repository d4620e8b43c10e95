from __future__ import annotations

import logging
from pathlib import Path

from complexcalc.domain.entities.complex_number import ComplexNumber
from complexcalc.domain.entities.history_entry import HistoryEntry
from complexcalc.domain.entities.operation import Operation
from complexcalc.domain.errors import HistoryIndexError, HistoryIOError
from complexcalc.domain.services import history_codec

logger = logging.getLogger(__name__)


class HistoryManager:
    """Append-only log of executed operations.

    Entries are addressable by index `0..size-1`. The log is only ever
    appended to, replaced wholesale by `deserialize_history` /
    `load_history_from_file`, or emptied by `clear_history`. Viewing position
    (undo/redo) lives in `HistoryCursor`, not here.

    Not thread-safe: callers sharing one manager across threads must hold a
    lock around every call.
    """

    def __init__(self) -> None:
        self._history: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._history)

    def add_operation(
        self,
        operation: Operation,
        result: ComplexNumber,
        operand1: ComplexNumber,
        operand2: ComplexNumber | None = None,
    ) -> HistoryEntry:
        # unary entries never carry a second operand
        if operation.is_unary():
            operand2 = None
        entry = HistoryEntry(operation=operation, result=result, operand1=operand1, operand2=operand2)
        self._history.append(entry)
        logger.info("Recorded %s -> %s (history size %d)", operation.value, result, len(self._history))
        return entry

    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._history)

    def get_history_entry(self, index: int) -> HistoryEntry:
        if index < 0 or index >= len(self._history):
            raise HistoryIndexError(index, len(self._history))
        return self._history[index]

    def get_history_size(self) -> int:
        return len(self._history)

    def clear_history(self) -> None:
        self._history.clear()
        logger.info("History cleared")

    def serialize_history(self) -> str:
        return history_codec.serialize_entries(self._history)

    def deserialize_history(self, serialized_history: str) -> None:
        """Replace the log with the entries parsed from `serialized_history`.

        The current log is left untouched when parsing fails.

        Raises:
            UnknownOperationError: an entry names an unknown operation.
            MalformedLiteralError: an entry or literal is malformed.
        """
        entries = history_codec.parse_entries(serialized_history)
        self._history = entries
        logger.info("Loaded %d history entries", len(entries))

    def save_history_to_file(self, file_path: str | Path) -> None:
        path = Path(file_path)
        try:
            path.write_text(self.serialize_history(), encoding="utf-8")
        except OSError as exc:
            raise HistoryIOError("Could not write history file", str(path)) from exc
        logger.info("Saved %d history entries to %s", len(self._history), path)

    def load_history_from_file(self, file_path: str | Path) -> None:
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise HistoryIOError("Could not read history file", str(path)) from exc
        self.deserialize_history(text)
