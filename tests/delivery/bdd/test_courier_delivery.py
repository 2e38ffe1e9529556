"""BDD tests for the courier delivery lifecycle."""

from delivery.kernel.location import Location
from pytest_bdd import parsers, scenarios, when

scenarios("features/courier_delivery.feature")


@when("the courier takes the order", target_fixture="courier")
def courier_takes_order(courier, order, outcome):
    result = courier.take_order(order.id, order.volume)
    if result.is_failure:
        outcome["error"] = result.error
    return courier


@when("the order is assigned to the courier", target_fixture="order")
def order_is_assigned(courier, order):
    order.assign(courier.id).value_or_raise()
    return order


@when("the courier moves towards the order until it arrives", target_fixture="courier")
def courier_moves_to_order(courier, order):
    ticks = courier.calculate_delivery_time(order.location).value
    for _ in range(ticks):
        courier.move(order.location).value_or_raise()
    return courier


@when(
    parsers.cfparse("the courier moves one tick towards ({x:d}, {y:d})"),
    target_fixture="courier",
)
def courier_moves_one_tick(courier, x, y):
    courier.move(Location.must_create(x, y)).value_or_raise()
    return courier


@when("the order is completed", target_fixture="order")
def order_is_completed(courier, order):
    order.complete().value_or_raise()
    courier.complete_order(order.id).value_or_raise()
    return order


@when("completing the order is attempted", target_fixture="order")
def attempt_order_completion(order, outcome):
    result = order.complete()
    if result.is_failure:
        outcome["error"] = result.error
    return order
