from datetime import datetime

import pytest

from patternhive.behavioral import Subject
from patternhive.services import BookFactory, BookRecordManager


@pytest.fixture
def now():
    return datetime(2024, 3, 1, 12, 0, 0)


@pytest.fixture
def book_factory():
    return BookFactory()


@pytest.fixture
def manager(book_factory):
    return BookRecordManager(book_factory)


@pytest.fixture
def subject():
    return Subject()
