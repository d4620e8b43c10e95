from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from complexcalc.application.use_cases.calculator_session import CalculatorSession


@dataclass
class _SessionSlot:
    session: CalculatorSession = field(default_factory=CalculatorSession)
    lock: threading.Lock = field(default_factory=threading.Lock)


class SessionStore:
    """In-memory calculator sessions, one per user.

    Sync routes run on a thread pool, so every access to a session goes
    through `open()`, which holds that session's lock for the duration.
    """

    def __init__(self) -> None:
        self._slots: dict[str, _SessionSlot] = {}
        self._guard = threading.Lock()

    def _slot(self, user_id: str) -> _SessionSlot:
        with self._guard:
            slot = self._slots.get(user_id)
            if slot is None:
                slot = _SessionSlot()
                self._slots[user_id] = slot
            return slot

    @contextmanager
    def open(self, user_id: str) -> Iterator[CalculatorSession]:
        slot = self._slot(user_id)
        with slot.lock:
            yield slot.session

    def drop(self, user_id: str) -> bool:
        with self._guard:
            return self._slots.pop(user_id, None) is not None

    def __len__(self) -> int:
        with self._guard:
            return len(self._slots)


_STORE_SINGLETON: SessionStore | None = None


def get_session_store() -> SessionStore:
    global _STORE_SINGLETON
    if _STORE_SINGLETON is None:
        _STORE_SINGLETON = SessionStore()
    return _STORE_SINGLETON
