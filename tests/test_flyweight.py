import dataclasses
from datetime import timedelta

import pytest

from patternhive.domain import Availability, LegacyBook
from patternhive.exceptions import RecordNotFoundError
from patternhive.seed import DUNE, seed_book_records
from patternhive.services import get_book_factory, get_record_manager


def add_dune(manager, record_id, now, member="Alice Reader"):
    return manager.add_book_record(
        record_id, *DUNE, now, member, now + timedelta(days=14), Availability.CHECKED_OUT
    )


def test_create_book_returns_first_book_for_isbn(book_factory):
    first = book_factory.create_book("Dune", "Frank Herbert", "sci-fi", 412, "ACE", "123")
    second = book_factory.create_book("Not Dune", "Someone Else", "drama", 1, "X", "123")

    assert second is first
    assert second.title == "Dune"
    assert len(book_factory.cache) == 1


def test_create_book_distinct_isbns(book_factory):
    a = book_factory.create_book("A", "x", "g", 1, "p", "1")
    b = book_factory.create_book("A", "x", "g", 1, "p", "2")
    assert a is not b
    assert len(book_factory.cache) == 2


def test_shared_book_is_frozen(book_factory):
    book = book_factory.create_book("A", "x", "g", 1, "p", "1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        book.title = "B"


def test_records_reference_shared_book(manager, now):
    first = add_dune(manager, "rec-1", now)
    second = add_dune(manager, "rec-2", now, member="Bob Librarian")

    assert first.book is second.book
    assert manager.shared_book_count() == 1
    assert len(manager.records) == 2


def test_update_checkout_status_mutates_in_place(manager, now):
    record = add_dune(manager, "rec-1", now)
    due = now + timedelta(days=7)

    updated = manager.update_checkout_status("rec-1", Availability.AVAILABLE, None, None, due)

    assert updated is record
    assert record.availability == Availability.AVAILABLE
    assert record.checkout_member is None
    assert record.due_return_date == due


def test_extend_checkout_period(manager, now):
    add_dune(manager, "rec-1", now)
    later = now + timedelta(days=30)
    manager.extend_checkout_period("rec-1", later)
    assert manager.get_record("rec-1").due_return_date == later


def test_is_past_due_is_strict(manager, now):
    record = add_dune(manager, "rec-1", now)
    due = record.due_return_date

    assert not manager.is_past_due("rec-1", now)
    assert not manager.is_past_due("rec-1", due)
    assert manager.is_past_due("rec-1", due + timedelta(microseconds=1))


@pytest.mark.parametrize(
    "call",
    [
        lambda m, now: m.update_checkout_status("nope", Availability.AVAILABLE, now, "x", now),
        lambda m, now: m.extend_checkout_period("nope", now),
        lambda m, now: m.is_past_due("nope", now),
        lambda m, now: m.get_record("nope"),
    ],
)
def test_unknown_record_raises(manager, now, call):
    with pytest.raises(RecordNotFoundError) as exc:
        call(manager, now)
    assert exc.value.record_id == "nope"


def test_list_past_due_only_checked_out(manager, now):
    add_dune(manager, "rec-1", now)
    manager.add_book_record(
        "rec-2", *DUNE, None, None, now - timedelta(days=1), Availability.AVAILABLE
    )
    manager.extend_checkout_period("rec-1", now - timedelta(days=1))

    assert list(manager.list_past_due(now)) == ["rec-1"]


def test_seed_book_records(manager, now, capsys):
    seed_book_records(manager, now=now, loan_days=14)

    assert len(manager.records) == 5
    assert manager.shared_book_count() == 3
    assert manager.is_past_due("rec-2", now)
    assert not manager.is_past_due("rec-1", now)
    assert manager.get_record("rec-1").book is manager.get_record("rec-5").book
    assert "[seed] records: 5" in capsys.readouterr().out


def test_process_scoped_instances():
    assert get_book_factory() is get_book_factory()
    assert get_record_manager() is get_record_manager()
    assert get_record_manager().factory is get_book_factory()


def test_legacy_book_carries_checkout_state(now):
    book = LegacyBook("legacy-1", *DUNE)
    assert book.availability == Availability.AVAILABLE
    assert not book.is_past_due(now)

    book.update_checkout_status(
        "legacy-1", Availability.CHECKED_OUT, now, "Alice Reader", now - timedelta(days=1)
    )
    assert book.is_past_due(now)

    book.extend_checkout_period("legacy-1", now + timedelta(days=1))
    assert not book.is_past_due(now)
