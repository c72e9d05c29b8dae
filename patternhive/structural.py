"""
Structural idioms: module encapsulation, facade, mixin and decorators.
"""

from __future__ import annotations
from types import MethodType, SimpleNamespace
from typing import Any, Optional

from .log import get_logger

logger = get_logger(__name__)


# =========================
# module encapsulation
# =========================

def make_namespace() -> SimpleNamespace:
    """
    Build a namespace whose call counter lives only in this closure.

    The returned object exposes ``public_var`` and ``public_function``; the
    counter and the printer it forwards to cannot be reached from outside.
    """
    calls = 0
    log = get_logger(__name__)

    def private_method(foo: Any) -> None:
        print(foo)

    def public_function(bar: Any) -> None:
        nonlocal calls
        calls += 1
        log.debug("Namespace called", calls=calls)
        private_method(bar)

    return SimpleNamespace(public_var="foo", public_function=public_function)


# =========================
# facade
# =========================

def make_facade_module() -> SimpleNamespace:
    class _Private:
        def __init__(self) -> None:
            self.i = 5

        def get(self) -> None:
            print(f"current value: {self.i}")

        def set(self, val: Any) -> None:
            self.i = val

        def run(self) -> None:
            print("running")

        def jump(self) -> None:
            print("jumping")

    private = _Private()

    def facade(val: Optional[Any] = None, run: bool = False) -> None:
        if val is not None:
            private.set(val)
        private.get()
        if run:
            private.run()

    return SimpleNamespace(facade=facade)


# =========================
# mixin
# =========================

def augment(receiver: Any, donor: Any, *names: str) -> None:
    """
    Copy methods from ``donor`` onto ``receiver``.

    With explicit names those methods are copied unconditionally, replacing
    anything the receiver defines. Without names every public callable of the
    donor is copied unless the receiver itself already defines that name.
    """
    if names:
        for name in names:
            setattr(receiver, name, getattr(donor, name))
        logger.debug("Augmented with named methods", receiver=receiver, names=names)
        return

    own = vars(receiver)
    copied = []
    for name in dir(donor):
        if name.startswith("_") or name in own:
            continue
        method = getattr(donor, name)
        if callable(method):
            setattr(receiver, name, method)
            copied.append(name)
    logger.debug("Augmented with all methods", receiver=receiver, names=copied)


class Person:
    """A "super class" for sub-classing by delegation instead of inheritance."""

    gender = "male"

    def set_first_name(self, first_name: str) -> str:
        self.first_name = first_name
        return first_name

    def set_last_name(self, last_name: str) -> str:
        self.last_name = last_name
        return last_name


class CarBlueprint:
    def set_model(self, model: Optional[str] = None) -> str:
        self.model = model or "no model provided"
        return self.model

    def set_color(self, color: Optional[str] = None) -> str:
        self.color = color or "no color provided"
        return self.color


class DriveMixin:
    def drive_forward(self) -> None:
        print("drive forward")

    def drive_backward(self) -> None:
        print("drive backward")

    def drive_sideways(self) -> None:
        print("drive sideways")


# =========================
# decorators
# =========================

class BasicVehicle:
    def assign_vehicle_type(self, vehicle_type: Optional[str] = None) -> str:
        self.vehicle_type = vehicle_type or "car"
        return self.vehicle_type

    def assign_model(self) -> str:
        self.model = "default"
        return self.model

    def assign_license(self) -> str:
        self.license = "00000-000"
        return self.license

    def __repr__(self) -> str:
        fields = {k: v for k, v in vars(self).items() if not callable(v)}
        return f"BasicVehicle({fields})"


def add_setters(instance: Any, *fields: str) -> Any:
    """Give a single instance ``set_<field>`` methods its class does not have."""
    for field_name in fields:
        def setter(self, value, _field=field_name):
            setattr(self, _field, value)
            return value

        setattr(instance, f"set_{field_name}", MethodType(setter, instance))
    return instance


class CostDecorator:
    """Adds ``delta`` to the cost of whatever it wraps; all else reads through."""

    def __init__(self, inner: Any, delta: int, label: str = "") -> None:
        self.inner = inner
        self.delta = delta
        self.label = label

    def cost(self) -> int:
        return self.inner.cost() + self.delta

    def __getattr__(self, name: str) -> Any:
        if name == "inner":
            raise AttributeError(name)
        return getattr(self.inner, name)

    def __repr__(self) -> str:
        label = f" {self.label}" if self.label else ""
        return f"CostDecorator({self.inner!r}, +{self.delta}{label})"


def memory(laptop: Any) -> CostDecorator:
    return CostDecorator(laptop, 75, "memory")


def engraving(laptop: Any) -> CostDecorator:
    return CostDecorator(laptop, 200, "engraving")


def insurance(laptop: Any) -> CostDecorator:
    return CostDecorator(laptop, 250, "insurance")
