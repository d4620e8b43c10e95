from __future__ import annotations

import logging

from complexcalc.domain.entities.history_entry import HistoryEntry
from complexcalc.domain.services.history_manager import HistoryManager

logger = logging.getLogger(__name__)

NO_ENTRY = -1


class HistoryCursor:
    """Viewing position into a `HistoryManager` log for undo/redo.

    `index` ranges over `[-1, size-1]`; -1 means there is no current entry.
    Moves clamp at both ends (no wraparound) and never touch the log.

    New calculations are appended after the tip and the cursor jumps to
    them, so entries "ahead" of a cursor that had been undone stay in the
    log but are no longer reachable by redo from the new tip.
    """

    def __init__(self, history: HistoryManager, index: int = NO_ENTRY) -> None:
        self._history = history
        self.index = index

    @property
    def can_undo(self) -> bool:
        return self.index > 0

    @property
    def can_redo(self) -> bool:
        return self.index < self._history.get_history_size() - 1

    def current(self) -> HistoryEntry | None:
        if self.index == NO_ENTRY:
            return None
        return self._history.get_history_entry(self.index)

    def undo(self) -> HistoryEntry | None:
        if not self.can_undo:
            return None
        return self._move_to(self.index - 1)

    def redo(self) -> HistoryEntry | None:
        if not self.can_redo:
            return None
        return self._move_to(self.index + 1)

    def _move_to(self, index: int) -> HistoryEntry:
        # look the entry up first so a failed move leaves the index alone
        entry = self._history.get_history_entry(index)
        self.index = index
        logger.debug("Cursor -> history index %d", index)
        return entry

    def move_to_tip(self) -> None:
        self.index = self._history.get_history_size() - 1

    def reset(self) -> None:
        self.index = NO_ENTRY
