"""Tests for the Order state machine under both assignment policies."""

from uuid import uuid4

import pytest
from delivery.config import AssignmentPolicy, set_assignment_policy
from delivery.kernel.location import Location
from delivery.order.events import OrderAssigned, OrderCompleted
from delivery.order.order import Order, OrderStatus
from protean.exceptions import IncorrectUsageError, ValidationError


def _make_order():
    return Order.must_create(uuid4(), Location.must_create(3, 4), 5)


def _assigned_order(courier_id=None):
    order = _make_order()
    order.assign(courier_id or uuid4())
    return order


def _completed_order():
    order = _assigned_order()
    order.complete()
    return order


class TestAssign:
    def test_created_to_assigned(self):
        order = _make_order()
        courier_id = uuid4()
        result = order.assign(courier_id)
        assert result.is_success
        assert order.status == OrderStatus.ASSIGNED.value
        assert str(order.courier_id) == str(courier_id)

    def test_reassignment_overwrites_courier(self):
        order = _assigned_order()
        other_courier = uuid4()
        assert order.assign(other_courier).is_success
        assert str(order.courier_id) == str(other_courier)
        assert order.status == OrderStatus.ASSIGNED.value

    def test_completed_order_can_be_reassigned_under_permissive_policy(self):
        order = _completed_order()
        assert order.assign(uuid4()).is_success
        assert order.status == OrderStatus.ASSIGNED.value

    def test_missing_courier_id_raises(self):
        with pytest.raises(IncorrectUsageError):
            _make_order().assign(None)

    def test_raises_order_assigned_event(self):
        order = _make_order()
        courier_id = uuid4()
        order.assign(courier_id)
        event = order._events[-1]
        assert isinstance(event, OrderAssigned)
        assert str(event.courier_id) == str(courier_id)
        assert event.previous_courier_id is None

    def test_reassignment_event_remembers_previous_courier(self):
        first = uuid4()
        order = _assigned_order(first)
        order.assign(uuid4())
        assert str(order._events[-1].previous_courier_id) == str(first)


class TestStrictAssignmentPolicy:
    @pytest.fixture(autouse=True)
    def _strict(self):
        set_assignment_policy(AssignmentPolicy.STRICT)

    def test_created_order_can_be_assigned(self):
        order = _make_order()
        assert order.assign(uuid4()).is_success

    def test_assigned_order_cannot_be_reassigned(self):
        courier_id = uuid4()
        order = _assigned_order(courier_id)
        result = order.assign(uuid4())
        assert result.is_failure
        assert result.error.code == "order.cannot.be.assigned"
        assert str(order.courier_id) == str(courier_id)

    def test_completed_order_cannot_be_reassigned(self):
        order = _completed_order()
        result = order.assign(uuid4())
        assert result.error.code == "order.cannot.be.assigned"
        assert order.status == OrderStatus.COMPLETED.value

    def test_policy_can_be_given_as_string(self):
        set_assignment_policy("permissive")
        order = _completed_order()
        assert order.assign(uuid4()).is_success


class TestComplete:
    def test_assigned_to_completed(self):
        order = _assigned_order()
        result = order.complete()
        assert result.is_success
        assert order.status == OrderStatus.COMPLETED.value
        assert order.courier_id is not None

    def test_cannot_complete_unassigned_order(self):
        order = _make_order()
        result = order.complete()
        assert result.is_failure
        assert result.error.code == "order.is.not.assigned"
        assert order.status == OrderStatus.CREATED.value

    def test_cannot_complete_twice(self):
        order = _completed_order()
        result = order.complete()
        assert result.is_failure
        assert result.error.code == "order.is.not.assigned"

    def test_raises_order_completed_event(self):
        order = _assigned_order()
        order.complete()
        event = order._events[-1]
        assert isinstance(event, OrderCompleted)
        assert str(event.courier_id) == str(order.courier_id)

    def test_failed_completion_raises_no_event(self):
        order = _make_order()
        order.complete()
        assert not any(isinstance(e, OrderCompleted) for e in order._events)


class TestOrderInvariants:
    def test_courier_cannot_be_set_on_created_order(self):
        order = _make_order()
        with pytest.raises(ValidationError):
            order.courier_id = str(uuid4())

    def test_assigned_status_requires_courier(self):
        order = _make_order()
        with pytest.raises(ValidationError):
            order.status = OrderStatus.ASSIGNED.value
