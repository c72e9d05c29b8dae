from __future__ import annotations
from datetime import datetime, timedelta
from typing import Optional

from .domain import Availability
from .services import BookRecordManager

DUNE = ("Dune", "Frank Herbert", "sci-fi", 412, "ACE", "9780441172719")
CLEAN_CODE = ("Clean Code", "Robert C. Martin", "software", 464, "PH", "9780132350884")
HP1 = (
    "Harry Potter and the Sorcerer's Stone",
    "J.K. Rowling",
    "fantasy",
    309,
    "SCH",
    "9780590353427",
)


def seed_book_records(
    manager: BookRecordManager, now: Optional[datetime] = None, loan_days: int = 14
) -> None:
    now = now or datetime.utcnow()
    loan = timedelta(days=loan_days)

    # checkouts
    manager.add_book_record(
        "rec-1", *DUNE, now, "Alice Reader", now + loan, Availability.CHECKED_OUT
    )
    manager.add_book_record(
        "rec-2", *CLEAN_CODE, now - loan, "Bob Librarian", now + loan, Availability.CHECKED_OUT
    )
    manager.add_book_record(
        "rec-3", *HP1, now, "Ava Admin", now + loan, Availability.CHECKED_OUT
    )

    # second and third copies of Dune share the first copy's book
    manager.add_book_record("rec-4", *DUNE, None, None, None, Availability.AVAILABLE)
    manager.add_book_record("rec-5", *DUNE, None, None, None, Availability.AVAILABLE)

    # Simulate overdue (manually move the due date into the past)
    manager.extend_checkout_period("rec-2", now - timedelta(days=3))

    print("[seed] records:", len(manager.records))
    print("[seed] shared books:", [b.title for b in manager.factory.cache.list_books()])
