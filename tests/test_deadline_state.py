"""
Deadline State Tests

Covers the in-memory store, the reminder ledger and its pruning rules.
"""

from datetime import date, datetime

from interfaces.discord.services.deadline_state import DeadlineState, HomeworkItem


def test_upsert_keeps_registration_order_and_overwrites_in_place():
    state = DeadlineState()
    state.upsert("Essay", date(2099, 1, 1))
    state.upsert("Quiz", date(2099, 2, 1))
    state.upsert("Essay", date(2099, 3, 1))

    assert [item.title for item in state.items()] == ["Essay", "Quiz"]
    assert state.deadlines["Essay"].due_date == date(2099, 3, 1)
    assert all(key == item.title for key, item in state.deadlines.items())


def test_due_at_is_local_midnight_of_due_date():
    item = HomeworkItem(title="Lab", due_date=date(2030, 5, 11))
    assert item.due_at == datetime(2030, 5, 11, 0, 0)


def test_remove_prunes_ledger_entries_for_title():
    state = DeadlineState()
    item = state.upsert("Essay", date(2030, 5, 11))
    other = state.upsert("Quiz", date(2030, 5, 11))
    state.mark_reminded(item)
    state.mark_reminded(other)

    removed = state.remove("Essay")

    assert removed == item
    assert "Essay" not in state
    assert state.sent_reminders == {("Quiz", date(2030, 5, 11))}


def test_reregistering_same_date_keeps_ledger_entry():
    state = DeadlineState()
    item = state.upsert("Essay", date(2030, 5, 11))
    state.mark_reminded(item)

    again = state.upsert("Essay", date(2030, 5, 11))

    assert state.was_reminded(again)


def test_reregistering_new_date_drops_stale_ledger_entry():
    state = DeadlineState()
    item = state.upsert("Essay", date(2030, 5, 11))
    state.mark_reminded(item)

    moved = state.upsert("Essay", date(2030, 6, 1))

    assert not state.was_reminded(moved)
    assert state.sent_reminders == set()


def test_remove_unknown_title_is_noop():
    state = DeadlineState()
    assert state.remove("missing") is None
    assert len(state) == 0
