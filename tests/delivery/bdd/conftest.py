"""Shared BDD fixtures and step definitions for the delivery context."""

from uuid import uuid4

import pytest
from delivery.courier.courier import Courier
from delivery.courier.events import (
    CourierCreated,
    CourierMoved,
    OrderReleasedByCourier,
    OrderTakenByCourier,
    StoragePlaceAdded,
)
from delivery.kernel.location import Location
from delivery.order.events import OrderAssigned, OrderCompleted, OrderCreated
from delivery.order.order import Order
from pytest_bdd import given, parsers, then

_EVENT_CLASSES = {
    "CourierCreated": CourierCreated,
    "StoragePlaceAdded": StoragePlaceAdded,
    "OrderTakenByCourier": OrderTakenByCourier,
    "OrderReleasedByCourier": OrderReleasedByCourier,
    "CourierMoved": CourierMoved,
    "OrderCreated": OrderCreated,
    "OrderAssigned": OrderAssigned,
    "OrderCompleted": OrderCompleted,
}


@pytest.fixture()
def outcome():
    """Container for the last failed result."""
    return {"error": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse("a courier with speed {speed:d} at ({x:d}, {y:d})"),
    target_fixture="courier",
)
def courier_at(speed, x, y):
    courier = Courier.must_create("Иван", speed, Location.must_create(x, y))
    courier._events.clear()
    return courier


@given(
    parsers.cfparse('the courier has a "{name}" of volume {volume:d}'),
    target_fixture="courier",
)
def courier_with_storage_place(courier, name, volume):
    courier.add_storage_place(name, volume)
    courier._events.clear()
    return courier


@given(
    parsers.cfparse("an order of volume {volume:d} to ({x:d}, {y:d})"),
    target_fixture="order",
)
def order_to(volume, x, y):
    order = Order.must_create(uuid4(), Location.must_create(x, y), volume)
    order._events.clear()
    return order


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse("the courier is at ({x:d}, {y:d})"))
def courier_is_at(courier, x, y):
    assert (courier.location.x, courier.location.y) == (x, y)


@then(parsers.cfparse('the order is in the courier\'s "{name}"'))
def order_is_in_storage_place(courier, order, name):
    holder = next(sp for sp in courier.storage_places if sp.holds(order.id))
    assert holder.name == name


@then("the courier is free")
def courier_is_free(courier):
    assert not courier.is_busy()


@then(parsers.cfparse('the action fails with "{code}"'))
def action_fails_with(outcome, code):
    assert outcome["error"] is not None, "Expected a failure but the action succeeded"
    assert outcome["error"].code == code


@then(parsers.cfparse("a courier {event_type} event is raised"))
def courier_event_raised(courier, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in courier._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in courier._events]}"


@then(parsers.cfparse("an order {event_type} event is raised"))
def order_event_raised(order, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in order._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in order._events]}"
