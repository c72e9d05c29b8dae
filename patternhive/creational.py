"""
Creational idioms: prototype delegation, singleton and factory.
"""

from __future__ import annotations
import inspect
import random
import threading
from types import MethodType
from typing import Any, Dict, Optional, Type, Union

from .domain import PassengerCar, Truck
from .log import get_logger

logger = get_logger(__name__)


# =========================
# prototype delegation
# =========================

class Delegate:
    """
    An object whose unset fields read through to a prototype.

    Writes always land on the delegate itself, so the prototype is never
    mutated. Methods found on the prototype are re-bound to the delegate.
    """

    def __init__(self, prototype: Any, **fields: Any) -> None:
        object.__setattr__(self, "_prototype", prototype)
        object.__setattr__(self, "_own", {})
        for name, value in fields.items():
            setattr(self, name, value)

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        if name.startswith("__"):
            raise AttributeError(name)
        own = self.__dict__["_own"]
        if name in own:
            return own[name]
        prototype = self.__dict__["_prototype"]
        value = getattr(prototype, name)
        if inspect.ismethod(value) and value.__self__ is prototype:
            return MethodType(value.__func__, self)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            raise AttributeError(f"cannot set private field {name!r} on a delegate")
        if hasattr(type(self), name):
            raise AttributeError(f"{name!r} is reserved on a delegate")
        self._own[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._own[name]
        except KeyError:
            raise AttributeError(name) from None

    @property
    def prototype(self) -> Any:
        return self._prototype

    def own_fields(self) -> Dict[str, Any]:
        return dict(self._own)

    def __repr__(self) -> str:
        return f"Delegate({self._prototype!r}, own={self._own!r})"


def derive(prototype: Any, **overrides: Any) -> Delegate:
    return Delegate(prototype, **overrides)


# =========================
# singleton
# =========================

class RandomSingleton:
    """Holds one random number drawn when the single instance is created."""

    _instance: Optional["RandomSingleton"] = None
    _lock = threading.Lock()

    public_property = "Public property"

    def __init__(self) -> None:
        self.__random_number = random.random()

    @classmethod
    def get_instance(cls) -> "RandomSingleton":
        """Get the instance if one exists or create it if it doesn't."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Singleton created", cls=cls.__name__)
        return cls._instance

    def public_method(self) -> None:
        print("Public method")

    def get_random_number(self) -> float:
        return self.__random_number


# =========================
# factory
# =========================

Vehicle = Union[PassengerCar, Truck]


class VehicleFactory:
    """Creates vehicles by type, falling back to ``vehicle_class``."""

    vehicle_class: Type[Vehicle] = PassengerCar

    vehicle_types: Dict[str, Type[Vehicle]] = {
        "car": PassengerCar,
        "truck": Truck,
    }

    def create_vehicle(self, vehicle_type: Optional[str] = None, **options: Any) -> Vehicle:
        vehicle_class = self.vehicle_types.get(vehicle_type, self.vehicle_class)
        logger.debug(
            "Creating vehicle",
            vehicle_type=vehicle_type,
            vehicle_class=vehicle_class.__name__,
        )
        return vehicle_class.from_options(**options)


class TruckFactory(VehicleFactory):
    vehicle_class = Truck
