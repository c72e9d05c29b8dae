from __future__ import annotations
from typing import Iterable, List


class PatternError(Exception):
    """Base exception for all patternhive errors."""
    pass


class UnknownOperationError(PatternError):
    """Raised when a command name has no registered operation."""

    def __init__(self, operation: str, available: Iterable[str] = ()):
        self.operation = operation
        self.available: List[str] = sorted(available)
        super().__init__(
            f"Unknown operation '{operation}'. Available operations: {self.available}"
        )


class RecordNotFoundError(PatternError):
    """Raised when a book record id is not in the record database."""

    def __init__(self, record_id: str):
        super().__init__(f"Book record with ID {record_id} not found")
        self.record_id = record_id


class ReentrantDispatchError(PatternError):
    """Raised when observers are (un)subscribed while a notification is running."""
    pass
