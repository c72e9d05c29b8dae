"""
PatternHive package.

Exports key modules for convenient imports.
"""

from .domain import (
    VehicleTemplate,
    VEHICLE_DEFAULTS,
    Car,
    PassengerCar,
    Truck,
    Laptop,
    Employee,
    Availability,
    Book,
    BookRecord,
    LegacyBook,
)

from .exceptions import (
    PatternError,
    UnknownOperationError,
    RecordNotFoundError,
    ReentrantDispatchError,
)

from .creational import (
    Delegate,
    derive,
    RandomSingleton,
    VehicleFactory,
    TruckFactory,
)

from .structural import (
    make_namespace,
    make_facade_module,
    augment,
    CarBlueprint,
    DriveMixin,
    Person,
    BasicVehicle,
    add_setters,
    CostDecorator,
    memory,
    engraving,
    insurance,
)

from .behavioral import (
    Observer,
    Subject,
    EventEmitter,
    EmployeeDetail,
    ManagerSelector,
    OrgChart,
    CarManager,
)

from .repositories import BookCache, BookRecordRepo

from .services import (
    BookFactory,
    BookRecordManager,
    get_book_factory,
    get_record_manager,
)

from .config import DemoConfig
from .demos import DEMOS, run_demos
from .seed import seed_book_records

__all__ = [
    # domain
    "VehicleTemplate",
    "VEHICLE_DEFAULTS",
    "Car",
    "PassengerCar",
    "Truck",
    "Laptop",
    "Employee",
    "Availability",
    "Book",
    "BookRecord",
    "LegacyBook",
    # errors
    "PatternError",
    "UnknownOperationError",
    "RecordNotFoundError",
    "ReentrantDispatchError",
    # creational
    "Delegate",
    "derive",
    "RandomSingleton",
    "VehicleFactory",
    "TruckFactory",
    # structural
    "make_namespace",
    "make_facade_module",
    "augment",
    "CarBlueprint",
    "DriveMixin",
    "Person",
    "BasicVehicle",
    "add_setters",
    "CostDecorator",
    "memory",
    "engraving",
    "insurance",
    # behavioral
    "Observer",
    "Subject",
    "EventEmitter",
    "EmployeeDetail",
    "ManagerSelector",
    "OrgChart",
    "CarManager",
    # repos
    "BookCache",
    "BookRecordRepo",
    # services
    "BookFactory",
    "BookRecordManager",
    "get_book_factory",
    "get_record_manager",
    # config
    "DemoConfig",
    # demos
    "DEMOS",
    "run_demos",
    # seed
    "seed_book_records",
]
