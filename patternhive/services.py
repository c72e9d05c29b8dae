from __future__ import annotations
import threading
from datetime import datetime
from typing import Dict, Optional

from .domain import Availability, Book, BookRecord
from .exceptions import RecordNotFoundError
from .log import get_logger
from .repositories import BookCache, BookRecordRepo

logger = get_logger(__name__)


class BookFactory:
    def __init__(self, cache: Optional[BookCache] = None) -> None:
        self.cache = cache if cache is not None else BookCache()

    def create_book(
        self,
        title: str,
        author: str,
        genre: str,
        page_count: int,
        publisher_id: str,
        isbn: str,
    ) -> Book:
        """
        Return the shared book for ``isbn``.

        Only the first call for an ISBN uses the other arguments; later calls
        get the cached book unchanged, whatever they pass.
        """
        book, created = self.cache.get_or_add(
            isbn,
            lambda: Book(
                title=title,
                author=author,
                genre=genre,
                page_count=page_count,
                publisher_id=publisher_id,
                isbn=isbn,
            ),
        )
        logger.debug("Book cache " + ("miss" if created else "hit"), isbn=isbn)
        return book


class BookRecordManager:
    def __init__(
        self,
        factory: Optional[BookFactory] = None,
        records: Optional[BookRecordRepo] = None,
    ) -> None:
        self.factory = factory if factory is not None else BookFactory()
        self.records = records if records is not None else BookRecordRepo()

    def add_book_record(
        self,
        record_id: str,
        title: str,
        author: str,
        genre: str,
        page_count: int,
        publisher_id: str,
        isbn: str,
        checkout_date: Optional[datetime],
        checkout_member: Optional[str],
        due_return_date: Optional[datetime],
        availability: Availability,
    ) -> BookRecord:
        book = self.factory.create_book(title, author, genre, page_count, publisher_id, isbn)
        record = BookRecord(
            checkout_member=checkout_member,
            checkout_date=checkout_date,
            due_return_date=due_return_date,
            availability=availability,
            book=book,
        )
        self.records.add(record_id, record)
        logger.debug("Book record added", record_id=record_id, isbn=isbn)
        return record

    def get_record(self, record_id: str) -> BookRecord:
        record = self.records.get(record_id)
        if record is None:
            logger.warning("Book record not found", record_id=record_id)
            raise RecordNotFoundError(record_id)
        return record

    def update_checkout_status(
        self,
        record_id: str,
        new_status: Availability,
        checkout_date: Optional[datetime],
        checkout_member: Optional[str],
        new_return_date: Optional[datetime],
    ) -> BookRecord:
        with self.records.lock:
            record = self.get_record(record_id)
            record.availability = new_status
            record.checkout_date = checkout_date
            record.checkout_member = checkout_member
            record.due_return_date = new_return_date
        logger.debug("Checkout status updated", record_id=record_id, status=new_status.name)
        return record

    def extend_checkout_period(self, record_id: str, new_return_date: datetime) -> BookRecord:
        with self.records.lock:
            record = self.get_record(record_id)
            record.due_return_date = new_return_date
        logger.debug("Checkout period extended", record_id=record_id)
        return record

    def is_past_due(self, record_id: str, now: Optional[datetime] = None) -> bool:
        return self.get_record(record_id).is_past_due(now)

    def list_past_due(self, now: Optional[datetime] = None) -> Dict[str, BookRecord]:
        return self.records.list_past_due(now)

    def shared_book_count(self) -> int:
        return len(self.factory.cache)


# process-scoped instances
_book_factory: Optional[BookFactory] = None
_record_manager: Optional[BookRecordManager] = None
_instances_lock = threading.Lock()


def get_book_factory() -> BookFactory:
    global _book_factory

    if _book_factory is None:
        with _instances_lock:
            if _book_factory is None:
                _book_factory = BookFactory()
    return _book_factory


def get_record_manager() -> BookRecordManager:
    global _record_manager

    factory = get_book_factory()
    if _record_manager is None:
        with _instances_lock:
            if _record_manager is None:
                _record_manager = BookRecordManager(factory)
    return _record_manager
