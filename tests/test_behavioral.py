import pytest

from patternhive.behavioral import CarManager, Observer, OrgChart
from patternhive.domain import Employee
from patternhive.exceptions import ReentrantDispatchError, UnknownOperationError


def test_unsubscribed_observer_is_not_notified(subject):
    a, b = Observer(1), Observer(2)
    subject.subscribe_observer(a)
    subject.subscribe_observer(b)
    subject.unsubscribe_observer(a)

    subject.notify_all_observers()

    assert a.notified == 0
    assert b.notified == 1


def test_notify_all_in_subscription_order(subject, capsys):
    subject.subscribe_observer(Observer(2))
    subject.subscribe_observer(Observer(1))
    subject.notify_all_observers()
    assert capsys.readouterr().out == "Observer 2 is notified!\nObserver 1 is notified!\n"


def test_notify_observer_passes_index(subject):
    a, b = Observer(1), Observer(2)
    subject.subscribe_observer(a)
    subject.subscribe_observer(b)

    subject.notify_observer(b)

    assert b.last_index == 1
    assert a.notified == 0


def test_notify_and_unsubscribe_absent_are_noops(subject):
    stranger = Observer(9)
    subject.notify_observer(stranger)
    subject.unsubscribe_observer(stranger)
    assert stranger.notified == 0
    assert subject.observers == []


def test_duplicate_subscriptions(subject):
    a = Observer(1)
    subject.subscribe_observer(a)
    subject.subscribe_observer(a)
    subject.notify_all_observers()
    assert a.notified == 2

    subject.unsubscribe_observer(a)
    assert subject.observers == [a]


def test_subscribe_during_notification_raises(subject):
    class Greedy(Observer):
        def notify(self, index=None):
            subject.subscribe_observer(Observer(3))

    subject.subscribe_observer(Greedy(1))
    with pytest.raises(ReentrantDispatchError):
        subject.notify_all_observers()

    # the roster is usable again once dispatch has unwound
    subject.subscribe_observer(Observer(2))
    assert len(subject.observers) == 2


def test_mediator_saves_employee_with_manager():
    org_chart = OrgChart(["Grace Hopper", "Alan Kay"])
    employee = Employee("Dana Scully")

    detail = org_chart.add_new_employee()
    detail.complete(employee)
    assert employee.name in org_chart.pending

    org_chart.pending[employee.name].choose("Alan Kay")

    assert employee.saved
    assert employee.manager == "Alan Kay"
    assert org_chart.employees == [employee]
    assert org_chart.pending == {}


def test_manager_selector_rejects_unknown_manager():
    org_chart = OrgChart(["Grace Hopper"])
    selector = org_chart.select_manager(Employee("Fox Mulder"))
    with pytest.raises(ValueError):
        selector.choose("Nobody")


def test_command_results():
    car_manager = CarManager()
    assert (
        car_manager.execute("arrangeViewing", "Ferrari", "14523")
        == "You have successfully booked a viewing of Ferrari (14523)"
    )
    assert (
        car_manager.execute("requestInfo", "Ford Mondeo", "54323")
        == "The information for Ford Mondeo with ID 54323 is foobar"
    )
    assert (
        car_manager.execute("buyVehicle", "Ford Escort", "34232")
        == "You have successfully purchase Item 34232, a Ford Escort"
    )


def test_command_unknown_operation():
    with pytest.raises(UnknownOperationError) as exc:
        CarManager().execute("unknown", "Ferrari", "14523")
    assert exc.value.operation == "unknown"
    assert "arrangeViewing" in exc.value.available
    assert "unknown" in str(exc.value)
