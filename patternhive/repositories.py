from __future__ import annotations
import threading
from datetime import datetime
from typing import Dict, List, Optional

from .domain import Availability, Book, BookRecord


class BookCache:
    """Shared books keyed by ISBN."""

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}
        self._lock = threading.Lock()

    def get_or_add(self, isbn: str, build) -> tuple[Book, bool]:
        """
        Return the book cached for ``isbn``, building and caching it if absent.

        The flag is True when the book was created by this call.
        """
        with self._lock:
            book = self._books.get(isbn)
            if book is not None:
                return book, False
            book = build()
            self._books[isbn] = book
            return book, True

    def get(self, isbn: str) -> Optional[Book]:
        with self._lock:
            return self._books.get(isbn)

    def list_books(self) -> List[Book]:
        with self._lock:
            return list(self._books.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)


class BookRecordRepo:
    def __init__(self) -> None:
        self._records: Dict[str, BookRecord] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def add(self, record_id: str, record: BookRecord) -> None:
        with self._lock:
            self._records[record_id] = record

    def get(self, record_id: str) -> Optional[BookRecord]:
        with self._lock:
            return self._records.get(record_id)

    def list_all(self) -> List[BookRecord]:
        with self._lock:
            return list(self._records.values())

    def list_by_member(self, member: str) -> List[BookRecord]:
        with self._lock:
            return [r for r in self._records.values() if r.checkout_member == member]

    def list_past_due(self, now: Optional[datetime] = None) -> Dict[str, BookRecord]:
        with self._lock:
            return {
                record_id: r
                for record_id, r in self._records.items()
                if r.availability == Availability.CHECKED_OUT and r.is_past_due(now)
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
