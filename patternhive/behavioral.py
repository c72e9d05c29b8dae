"""
Behavioral idioms: observer, mediator and command.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Optional

from .domain import Employee
from .exceptions import ReentrantDispatchError, UnknownOperationError
from .log import get_logger

logger = get_logger(__name__)


# =========================
# observer
# =========================

class Observer:
    def __init__(self, number: int) -> None:
        self.number = number
        self.notified = 0
        self.last_index: Optional[int] = None

    def notify(self, index: Optional[int] = None) -> None:
        self.notified += 1
        self.last_index = index
        print(f"Observer {self.number} is notified!")

    def __repr__(self) -> str:
        return f"Observer({self.number})"


class Subject:
    """
    Keeps an ordered roster of observers and notifies them.

    The roster may hold the same observer more than once. Changing the roster
    from inside a notification raises ReentrantDispatchError.
    """

    def __init__(self) -> None:
        self._observers: List[Any] = []
        self._dispatching = 0

    def _index_of(self, observer: Any) -> int:
        for i, o in enumerate(self._observers):
            if o is observer:
                return i
        return -1

    def _check_not_dispatching(self) -> None:
        if self._dispatching:
            raise ReentrantDispatchError("observers cannot change during a notification")

    @property
    def observers(self) -> List[Any]:
        return list(self._observers)

    def subscribe_observer(self, observer: Any) -> None:
        self._check_not_dispatching()
        self._observers.append(observer)

    def unsubscribe_observer(self, observer: Any) -> None:
        self._check_not_dispatching()
        index = self._index_of(observer)
        if index > -1:
            del self._observers[index]

    def notify_observer(self, observer: Any) -> None:
        index = self._index_of(observer)
        if index > -1:
            self._dispatching += 1
            try:
                self._observers[index].notify(index)
            finally:
                self._dispatching -= 1

    def notify_all_observers(self) -> None:
        self._dispatching += 1
        try:
            for observer in self._observers:
                observer.notify()
        finally:
            self._dispatching -= 1


# =========================
# mediator
# =========================

class EventEmitter:
    def __init__(self) -> None:
        self._handlers: Dict[str, List[Callable[..., Any]]] = defaultdict(list)

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self._handlers[event].append(handler)

    def emit(self, event: str, *args: Any) -> None:
        for handler in list(self._handlers.get(event, ())):
            handler(*args)


class EmployeeDetail(EventEmitter):
    """The view where a new employee's details are entered."""

    def complete(self, employee: Employee) -> None:
        self.emit("complete", employee)


class ManagerSelector(EventEmitter):
    """The view where a manager is picked for an employee."""

    def __init__(self, employee: Employee, candidates: Iterable[str]) -> None:
        super().__init__()
        self.employee = employee
        self.candidates = list(candidates)

    def choose(self, manager: str) -> None:
        if manager not in self.candidates:
            raise ValueError(f"{manager!r} is not one of {self.candidates}")
        self.employee.manager = manager
        self.emit("save", self.employee)


class OrgChart:
    """
    Mediator between the employee views.

    The views only emit events; the org chart decides what happens next, so
    EmployeeDetail and ManagerSelector never know about each other.
    """

    def __init__(self, managers: Iterable[str]) -> None:
        self.managers = list(managers)
        self.employees: List[Employee] = []
        self.pending: Dict[str, ManagerSelector] = {}

    def get_employee_detail(self) -> EmployeeDetail:
        return EmployeeDetail()

    def select_manager(self, employee: Employee) -> ManagerSelector:
        selector = ManagerSelector(employee, self.managers)
        selector.on("save", self._save)
        self.pending[employee.name] = selector
        return selector

    def add_new_employee(self) -> EmployeeDetail:
        detail = self.get_employee_detail()
        detail.on("complete", self.select_manager)
        return detail

    def _save(self, employee: Employee) -> None:
        employee.save()
        self.pending.pop(employee.name, None)
        self.employees.append(employee)
        print(f"[orgchart] saved {employee.name} reporting to {employee.manager}")


# =========================
# command
# =========================

class CarManager:
    """Runs car operations by name so callers never hold the methods."""

    operations: Dict[str, str] = {
        "requestInfo": "request_info",
        "buyVehicle": "buy_vehicle",
        "arrangeViewing": "arrange_viewing",
    }

    def request_info(self, model: Any, car_id: Any) -> str:
        return f"The information for {model} with ID {car_id} is foobar"

    def buy_vehicle(self, model: Any, car_id: Any) -> str:
        return f"You have successfully purchase Item {car_id}, a {model}"

    def arrange_viewing(self, model: Any, car_id: Any) -> str:
        return f"You have successfully booked a viewing of {model} ({car_id})"

    def execute(self, operation_name: str, arg1: Any = None, arg2: Any = None) -> str:
        method_name = self.operations.get(operation_name)
        if method_name is None:
            logger.warning("Unknown car operation", operation=operation_name)
            raise UnknownOperationError(operation_name, self.operations)
        logger.debug("Executing car operation", operation=operation_name)
        return getattr(self, method_name)(arg1, arg2)
