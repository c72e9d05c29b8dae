from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from typing import Optional


# vehicles

@dataclass(frozen=True)
class VehicleTemplate:
    make: str = "<Enter Vehicle Make>"
    model: str = "<Enter Model>"
    year: object = "<Enter Year>"
    plate: str = "000"
    color: str = "<Enter Color>"

    def summary(self) -> str:
        return (
            f"Make: {self.make}\n"
            f"Model: {self.model}\n"
            f"Year: {self.year}\n"
            f"Plate: {self.plate}\n"
            f"Color: {self.color}"
        )


VEHICLE_DEFAULTS = VehicleTemplate()


@dataclass
class Car:
    model: str
    year: int
    miles: int

    def __str__(self) -> str:
        return f"{self.model} has done {self.miles} miles"


@dataclass
class PassengerCar:
    doors: int = 4
    state: str = "brand new"
    color: str = "silver"

    @classmethod
    def from_options(cls, doors=None, state=None, color=None, **_) -> "PassengerCar":
        # falsy options fall back to the defaults
        return cls(
            doors=doors or 4,
            state=state or "brand new",
            color=color or "silver",
        )


@dataclass
class Truck:
    state: str = "used"
    wheel_size: str = "large"
    color: str = "blue"

    @classmethod
    def from_options(cls, state=None, wheel_size=None, color=None, **_) -> "Truck":
        return cls(
            state=state or "used",
            wheel_size=wheel_size or "large",
            color=color or "blue",
        )


class Laptop:
    """Undecorated laptop: the base of a cost decorator chain."""

    def cost(self) -> int:
        return 997

    def screen_size(self) -> float:
        return 11.6


# people

@dataclass
class Employee:
    name: str
    manager: Optional[str] = None
    saved: bool = False

    def save(self) -> None:
        self.saved = True


# books

class Availability(Enum):
    AVAILABLE = auto()
    CHECKED_OUT = auto()


@dataclass(frozen=True)
class Book:
    """Intrinsic book data, shared by every record with the same ISBN."""

    title: str
    author: str
    genre: str
    page_count: int
    publisher_id: str
    isbn: str


@dataclass
class BookRecord:
    """Extrinsic, per-checkout state pointing at a shared Book."""

    checkout_member: Optional[str]
    checkout_date: Optional[datetime]
    due_return_date: Optional[datetime]
    availability: Availability
    book: Book

    def is_past_due(self, now: Optional[datetime] = None) -> bool:
        if self.due_return_date is None:
            return False
        now = now or datetime.utcnow()
        return now > self.due_return_date


@dataclass
class LegacyBook:
    """A book before the flyweight split: every copy carries everything."""

    id: str
    title: str
    author: str
    genre: str
    page_count: int
    publisher_id: str
    isbn: str
    checkout_date: Optional[datetime] = None
    checkout_member: Optional[str] = None
    due_return_date: Optional[datetime] = None
    availability: Availability = Availability.AVAILABLE

    def update_checkout_status(
        self,
        book_id: str,
        new_status: Availability,
        checkout_date: Optional[datetime],
        checkout_member: Optional[str],
        new_return_date: Optional[datetime],
    ) -> None:
        self.id = book_id
        self.availability = new_status
        self.checkout_date = checkout_date
        self.checkout_member = checkout_member
        self.due_return_date = new_return_date

    def extend_checkout_period(self, book_id: str, new_return_date: datetime) -> None:
        self.id = book_id
        self.due_return_date = new_return_date

    def is_past_due(self, now: Optional[datetime] = None) -> bool:
        if self.due_return_date is None:
            return False
        now = now or datetime.utcnow()
        return now > self.due_return_date
