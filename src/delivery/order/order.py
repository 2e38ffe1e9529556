"""Order aggregate (CQRS) — a delivery request coming from the basket context.

The order id is the basket id handed over by the upstream context; the order
never generates its own identity. The order only remembers the id of the
courier it is assigned to.

State Machine:
    CREATED → ASSIGNED (assign, repeatable) → COMPLETED (complete)

Under the permissive assignment policy ``assign`` also moves a COMPLETED
order back to ASSIGNED. The strict policy only assigns CREATED orders.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, ValueObject

from delivery.config import AssignmentPolicy, get_assignment_policy
from delivery.domain import delivery
from delivery.kernel.location import Location
from delivery.kernel.volume import Volume, as_volume
from delivery.order.events import OrderAssigned, OrderCompleted, OrderCreated
from delivery.shared.errors import Error
from delivery.shared.guard import require
from delivery.shared.result import Result, UnitResult


class OrderStatus(Enum):
    CREATED = "Created"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


_STATUSES_WITH_COURIER = {OrderStatus.ASSIGNED.value, OrderStatus.COMPLETED.value}


class OrderErrors:
    @staticmethod
    def order_is_not_assigned() -> Error:
        return Error.of(
            "order.is.not.assigned",
            "Order is not assigned to any courier or is already completed",
        )

    @staticmethod
    def order_cannot_be_assigned(status: str) -> Error:
        return Error.of(
            "order.cannot.be.assigned",
            f"Order in {status} status cannot be assigned",
        )


@delivery.aggregate
class Order:
    location = ValueObject(Location, required=True)
    volume = ValueObject(Volume, required=True)
    status = String(choices=OrderStatus, default=OrderStatus.CREATED.value)
    courier_id = Identifier()

    @invariant.post
    def courier_is_known_once_assigned(self):
        has_courier = self.courier_id is not None
        if has_courier != (self.status in _STATUSES_WITH_COURIER):
            raise ValidationError({"courier_id": [f"Order in {self.status} status cannot have courier {self.courier_id}"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id, location: Location, volume) -> Result:
        """Create an order for a basket.

        ``order_id`` and ``location`` are mandatory; ``volume`` may be a
        ``Volume`` or a raw integer.
        """
        require(order_id, "order_id")
        require(location, "location")

        volume_result = as_volume(volume)
        if volume_result.is_failure:
            return volume_result

        order = cls(
            id=str(order_id),
            location=location,
            volume=volume_result.value,
            status=OrderStatus.CREATED.value,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                x=location.x,
                y=location.y,
                volume=order.volume.value,
                created_at=datetime.now(UTC),
            )
        )
        return Result.success(order)

    @classmethod
    def must_create(cls, order_id, location: Location, volume) -> "Order":
        return cls.create(order_id, location, volume).value_or_raise()

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def assign(self, courier_id) -> UnitResult:
        require(courier_id, "courier_id")

        if get_assignment_policy() is AssignmentPolicy.STRICT and self.status != OrderStatus.CREATED.value:
            return UnitResult.failure(OrderErrors.order_cannot_be_assigned(self.status))

        previous_courier_id = self.courier_id
        with atomic_change(self):
            self.courier_id = str(courier_id)
            self.status = OrderStatus.ASSIGNED.value

        self.raise_(
            OrderAssigned(
                order_id=str(self.id),
                courier_id=str(courier_id),
                previous_courier_id=str(previous_courier_id) if previous_courier_id else None,
                assigned_at=datetime.now(UTC),
            )
        )
        return UnitResult.success()

    def complete(self) -> UnitResult:
        if self.status != OrderStatus.ASSIGNED.value:
            return UnitResult.failure(OrderErrors.order_is_not_assigned())

        self.status = OrderStatus.COMPLETED.value
        self.raise_(
            OrderCompleted(
                order_id=str(self.id),
                courier_id=str(self.courier_id),
                completed_at=datetime.now(UTC),
            )
        )
        return UnitResult.success()
