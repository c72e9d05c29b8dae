"""
The demonstration blocks, one per idiom, run in order by ``run_demos``.

Blocks are independent of each other: each builds its own objects and prints
what happens to them.
"""

from __future__ import annotations
import random
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, Optional

from .behavioral import CarManager, Observer, OrgChart, Subject
from .config import DemoConfig
from .creational import RandomSingleton, TruckFactory, VehicleFactory, derive
from .domain import (
    VEHICLE_DEFAULTS,
    Availability,
    Car,
    Employee,
    Laptop,
    LegacyBook,
    PassengerCar,
    Truck,
)
from .exceptions import RecordNotFoundError, UnknownOperationError
from .log import get_logger
from .seed import DUNE, seed_book_records
from .services import get_record_manager
from .structural import (
    BasicVehicle,
    CarBlueprint,
    DriveMixin,
    Person,
    add_setters,
    augment,
    engraving,
    insurance,
    make_facade_module,
    make_namespace,
    memory,
)

logger = get_logger(__name__)


def _header(title: str) -> None:
    print(f"\n========== The {title} Pattern")


def demo_prototype(config: DemoConfig) -> None:
    _header("Prototype")
    mazda_mx5 = derive(VEHICLE_DEFAULTS)
    mazda_mx5.make = "Mazda"
    mazda_mx5.model = "MX5"
    mazda_mx5.year = 2017
    mazda_mx5.plate = "AAA 123"
    mazda_mx5.color = "Ceramic Metallic"
    print(mazda_mx5.summary())

    ford_mustang = derive(VEHICLE_DEFAULTS, make="Ford", model="Mustang", year=2018)
    print(ford_mustang.summary())
    print("[prototype] defaults untouched:", VEHICLE_DEFAULTS.make)


def demo_constructor(config: DemoConfig) -> None:
    _header("Constructor")
    camry = Car("Toyota Camry", 2000, 100000)
    corolla = Car("Toyota Corolla", 2002, 80000)
    print(camry)
    print(corolla)


def demo_module(config: DemoConfig) -> None:
    _header("Module")
    namespace = make_namespace()
    print("[module] public_var:", namespace.public_var)
    namespace.public_function("bar")
    namespace.public_function("baz")


def demo_singleton(config: DemoConfig) -> None:
    _header("Singleton")
    single_a = RandomSingleton.get_instance()
    single_b = RandomSingleton.get_instance()
    print(single_a.get_random_number() == single_b.get_random_number())
    print("[singleton] same instance:", single_a is single_b)
    single_a.public_method()


def demo_observer(config: DemoConfig) -> None:
    _header("Observer")
    subject = Subject()
    observer1 = Observer(1)
    observer2 = Observer(2)

    subject.subscribe_observer(observer1)
    subject.subscribe_observer(observer2)

    subject.notify_observer(observer1)
    subject.unsubscribe_observer(observer1)

    subject.notify_all_observers()


def demo_mediator(config: DemoConfig) -> None:
    _header("Mediator")
    org_chart = OrgChart(["Grace Hopper", "Alan Kay"])
    employee = Employee("Dana Scully")

    detail = org_chart.add_new_employee()
    detail.complete(employee)
    org_chart.pending[employee.name].choose("Grace Hopper")
    print("[mediator] saved:", employee.saved)


def demo_command(config: DemoConfig) -> None:
    _header("Command")
    car_manager = CarManager()
    print(car_manager.execute("arrangeViewing", "Ferrari", "14523"))
    print(car_manager.execute("requestInfo", "Ford Mondeo", "54323"))
    print(car_manager.execute("buyVehicle", "Ford Escort", "34232"))
    try:
        car_manager.execute("sellVehicle", "Ford Fiesta", "11111")
    except UnknownOperationError as e:
        print("[command] error:", e)


def demo_facade(config: DemoConfig) -> None:
    _header("Facade")
    module = make_facade_module()
    module.facade(run=True, val=10)


def demo_factory(config: DemoConfig) -> None:
    _header("Factory")
    car_factory = VehicleFactory()
    car = car_factory.create_vehicle(vehicle_type="car", color="yellow", doors=6)
    print(isinstance(car, PassengerCar))
    print(car)

    moving_truck = car_factory.create_vehicle(
        vehicle_type="truck", state="like new", color="red", wheel_size="small"
    )
    print(isinstance(moving_truck, Truck))
    print(moving_truck)

    truck_factory = TruckFactory()
    my_big_truck = truck_factory.create_vehicle(
        state="omg.. so bad.", color="pink", wheel_size="so big"
    )
    print(isinstance(my_big_truck, Truck))
    print(my_big_truck)


def demo_mixin(config: DemoConfig) -> None:
    _header("Mixin")

    # sub-classing without classes: objects delegating to objects
    person = Person()
    clark = derive(person)
    clark.set_first_name("Clark")
    clark.set_last_name("Kent")

    super_hero = add_setters(derive(person), "powers")
    superman = derive(super_hero)
    superman.set_first_name("Clark")
    superman.set_last_name("Kent")
    superman.set_powers(["flight", "heat-vision"])
    print("[mixin] superman:", superman.own_fields(), superman.gender)

    class MixedCar(CarBlueprint):
        pass

    augment(MixedCar, DriveMixin, "drive_forward", "drive_backward")

    my_car = MixedCar()
    my_car.set_model("MX-5")
    my_car.set_color("Ceramic Metallic")
    my_car.drive_forward()
    my_car.drive_backward()

    augment(MixedCar, DriveMixin, "drive_sideways")
    my_truck = MixedCar()
    my_truck.set_model("Ford F-150 Raptor")
    my_truck.set_color("Black")
    my_truck.drive_sideways()


def demo_decorator(config: DemoConfig) -> None:
    _header("Decorator")
    test_instance = BasicVehicle()
    test_instance.assign_vehicle_type("car")
    print(test_instance)

    # decorate one instance with setters its class does not have
    truck = add_setters(BasicVehicle(), "model", "color")
    truck.set_model("CAT")
    truck.set_color("blue")
    print(truck)

    second_instance = BasicVehicle()
    print(second_instance, "has set_model:", hasattr(second_instance, "set_model"))

    macbook = insurance(engraving(memory(Laptop())))
    print(macbook.cost(), macbook.screen_size())


def demo_flyweight(config: DemoConfig) -> None:
    _header("Flyweight")
    now = datetime.utcnow()
    loan = timedelta(days=config.loan_days)

    # prior to flyweight: every copy carries the whole book
    copies = [LegacyBook(f"legacy-{i}", *DUNE) for i in range(2)]
    copies[0].update_checkout_status(
        "legacy-0", Availability.CHECKED_OUT, now, "Alice Reader", now + loan
    )
    print("[flyweight] legacy copies of Dune:", len(copies))

    manager = get_record_manager()
    seed_book_records(manager, now=now, loan_days=config.loan_days)
    print("[flyweight] rec-2 past due:", manager.is_past_due("rec-2", now))
    print("[flyweight] rec-1 past due:", manager.is_past_due("rec-1", now))

    manager.extend_checkout_period("rec-2", now + loan)
    manager.update_checkout_status(
        "rec-4", Availability.CHECKED_OUT, now, "Bob Librarian", now + loan
    )
    print(
        "[flyweight] same Dune object:",
        manager.get_record("rec-1").book is manager.get_record("rec-4").book,
    )
    print(
        f"[flyweight] {len(manager.records)} records share "
        f"{manager.shared_book_count()} books"
    )

    try:
        manager.extend_checkout_period("rec-404", now + loan)
    except RecordNotFoundError as e:
        print("[flyweight] error:", e)


DEMOS: Dict[str, Callable[[DemoConfig], None]] = {
    "prototype": demo_prototype,
    "constructor": demo_constructor,
    "module": demo_module,
    "singleton": demo_singleton,
    "observer": demo_observer,
    "mediator": demo_mediator,
    "command": demo_command,
    "facade": demo_facade,
    "factory": demo_factory,
    "mixin": demo_mixin,
    "decorator": demo_decorator,
    "flyweight": demo_flyweight,
}


def run_demos(
    names: Optional[Iterable[str]] = None, config: Optional[DemoConfig] = None
) -> None:
    """Run the named demos (all of them by default) in registry order."""
    config = config or DemoConfig()
    selected = list(names) if names else list(DEMOS)
    unknown = [n for n in selected if n not in DEMOS]
    if unknown:
        raise ValueError(f"Unknown demos {unknown}. Available demos: {list(DEMOS)}")

    if config.random_seed is not None:
        random.seed(config.random_seed)

    for name in DEMOS:
        if name in selected:
            logger.info("Running demo", demo=name)
            DEMOS[name](config)
