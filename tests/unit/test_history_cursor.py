import pytest

from complexcalc.domain.entities.complex_number import ComplexNumber as C
from complexcalc.domain.entities.operation import Operation
from complexcalc.domain.errors import HistoryIndexError
from complexcalc.domain.services.history_cursor import NO_ENTRY, HistoryCursor
from complexcalc.domain.services.history_manager import HistoryManager


def _history(n: int) -> HistoryManager:
    hm = HistoryManager()
    for i in range(n):
        hm.add_operation(Operation.SQUARE, C(2 * i, 0), C(i, 0))
    return hm


def test_empty_history_has_no_entry():
    cursor = HistoryCursor(_history(0))
    cursor.move_to_tip()
    assert cursor.index == NO_ENTRY
    assert cursor.current() is None
    assert cursor.undo() is None
    assert cursor.redo() is None
    assert cursor.index == NO_ENTRY


def test_undo_at_first_entry_is_noop():
    hm = _history(1)
    cursor = HistoryCursor(hm)
    cursor.move_to_tip()
    assert cursor.index == 0
    assert cursor.undo() is None
    assert cursor.index == 0
    assert cursor.current() == hm.get_history_entry(0)


def test_undo_and_redo_walk_the_log():
    hm = _history(3)
    cursor = HistoryCursor(hm)
    cursor.move_to_tip()
    assert cursor.index == 2
    assert cursor.redo() is None  # already at length-1

    assert cursor.undo() == hm.get_history_entry(1)
    assert cursor.undo() == hm.get_history_entry(0)
    assert cursor.undo() is None
    assert cursor.index == 0

    assert cursor.redo() == hm.get_history_entry(1)
    assert cursor.redo() == hm.get_history_entry(2)
    assert cursor.redo() is None
    assert cursor.index == 2


def test_navigation_does_not_mutate_log():
    hm = _history(3)
    before = hm.entries()
    cursor = HistoryCursor(hm)
    cursor.move_to_tip()
    cursor.undo()
    cursor.undo()
    cursor.redo()
    assert hm.entries() == before


def test_redo_from_no_entry_reaches_first_entry():
    hm = _history(2)
    cursor = HistoryCursor(hm)
    assert cursor.index == NO_ENTRY
    assert cursor.can_redo
    assert cursor.redo() == hm.get_history_entry(0)


def test_reset_is_separate_from_clear():
    hm = _history(3)
    cursor = HistoryCursor(hm)
    cursor.move_to_tip()
    hm.clear_history()
    # the cursor still points past the emptied log until it is reset
    assert cursor.index == 2
    with pytest.raises(HistoryIndexError):
        cursor.current()
    cursor.reset()
    assert cursor.index == NO_ENTRY
    assert cursor.current() is None
    assert not cursor.can_undo and not cursor.can_redo


def test_failed_undo_after_clear_keeps_index():
    hm = _history(4)
    cursor = HistoryCursor(hm)
    cursor.move_to_tip()
    hm.clear_history()
    for _ in range(2):
        with pytest.raises(HistoryIndexError):
            cursor.undo()
        assert cursor.index == 3
