"""Courier aggregate (CQRS) — who carries orders and how fast.

A courier owns an insertion-ordered list of storage places (the default bag
plus whatever was added later). Each storage place holds at most one order.
The courier picks the tightest storage place that fits an order, estimates
delivery time by Manhattan distance and moves towards a target one tick at
a time.

Business rule violations come back as failed ``Result`` values. A missing
order id or target raises ``IncorrectUsageError``.
"""

import math
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import HasMany, Identifier, String, ValueObject

from delivery.courier.events import (
    CourierCreated,
    CourierMoved,
    OrderReleasedByCourier,
    OrderTakenByCourier,
    StoragePlaceAdded,
)
from delivery.courier.speed import Speed, as_speed
from delivery.domain import delivery
from delivery.kernel.location import Location
from delivery.kernel.volume import Volume, as_volume
from delivery.shared.errors import Error, GeneralErrors
from delivery.shared.guard import require
from delivery.shared.result import Result, UnitResult

DEFAULT_STORAGE_PLACE_NAME = "Сумка"
DEFAULT_STORAGE_PLACE_VOLUME = 10


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class StoragePlaceErrors:
    @staticmethod
    def not_empty() -> Error:
        return Error.of(
            "storage_place.not_empty",
            "Cannot place order in storage place that already contains an order",
        )

    @staticmethod
    def insufficient_capacity(order_volume: Volume, total_volume: Volume) -> Error:
        return Error.of(
            "storage_place.insufficient_capacity",
            f"Order volume {order_volume.value} exceeds storage place capacity {total_volume.value}",
        )

    @staticmethod
    def already_empty() -> Error:
        return Error.of(
            "storage_place.already_empty",
            "Cannot remove order from empty storage place",
        )


class CourierErrors:
    @staticmethod
    def cannot_take_order(order_volume: Volume) -> Error:
        return Error.of(
            "courier.cannot.take.order",
            f"Cannot take order of volume {order_volume.value}: no suitable storage place",
        )

    @staticmethod
    def order_not_found_in_storage_places(order_id) -> Error:
        return Error.of(
            "courier.cannot.complete.order",
            f"Order {order_id} is not found in any storage place",
        )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@delivery.entity(part_of="Courier")
class StoragePlace:
    """A single compartment (bag, backpack, trunk) that holds at most one order."""

    name = String(required=True, max_length=255)
    total_volume = ValueObject(Volume, required=True)
    order_id = Identifier()

    @classmethod
    def create(cls, name: str, volume) -> Result:
        if name is None or not name.strip():
            return Result.failure(GeneralErrors.value_is_required("name"))

        volume_result = as_volume(volume, "total_volume")
        if volume_result.is_failure:
            return volume_result

        return Result.success(cls(name=name, total_volume=volume_result.value))

    @classmethod
    def must_create(cls, name: str, volume) -> "StoragePlace":
        return cls.create(name, volume).value_or_raise()

    def is_empty(self) -> bool:
        return self.order_id is None

    def holds(self, order_id) -> bool:
        return not self.is_empty() and str(self.order_id) == str(order_id)

    def can_place_order(self, order_volume: Volume) -> bool:
        return self.is_empty() and self.total_volume >= order_volume

    def place_order(self, order_id, order_volume: Volume) -> UnitResult:
        require(order_id, "order_id")
        require(order_volume, "order_volume")

        if not self.is_empty():
            return UnitResult.failure(StoragePlaceErrors.not_empty())

        if self.total_volume < order_volume:
            return UnitResult.failure(StoragePlaceErrors.insufficient_capacity(order_volume, self.total_volume))

        self.order_id = str(order_id)
        return UnitResult.success()

    def remove_order(self) -> UnitResult:
        if self.is_empty():
            return UnitResult.failure(StoragePlaceErrors.already_empty())

        self.order_id = None
        return UnitResult.success()


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@delivery.aggregate
class Courier:
    """A courier with a speed, a position on the grid and storage places."""

    name = String(required=True, max_length=255)
    speed = ValueObject(Speed, required=True)
    location = ValueObject(Location, required=True)
    storage_places = HasMany(StoragePlace)

    @invariant.post
    def an_order_occupies_at_most_one_storage_place(self):
        order_ids = [str(sp.order_id) for sp in (self.storage_places or []) if not sp.is_empty()]
        if len(order_ids) != len(set(order_ids)):
            raise ValidationError({"storage_places": ["An order can occupy only one storage place"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, name: str, speed, location: Location) -> Result:
        """Create a courier carrying the default bag.

        ``speed`` may be a ``Speed`` or a raw integer.
        """
        if name is None or not name.strip():
            return Result.failure(GeneralErrors.value_is_required("name"))
        if location is None:
            return Result.failure(GeneralErrors.value_is_required("location"))

        speed_result = as_speed(speed)
        if speed_result.is_failure:
            return speed_result

        courier = cls(name=name, speed=speed_result.value, location=location)
        courier.add_storage_places(
            StoragePlace.must_create(DEFAULT_STORAGE_PLACE_NAME, DEFAULT_STORAGE_PLACE_VOLUME)
        )
        courier.raise_(
            CourierCreated(
                courier_id=str(courier.id),
                name=name,
                speed=courier.speed.value,
                x=location.x,
                y=location.y,
                created_at=datetime.now(UTC),
            )
        )
        return Result.success(courier)

    @classmethod
    def must_create(cls, name: str, speed, location: Location) -> "Courier":
        return cls.create(name, speed, location).value_or_raise()

    # -------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------
    def add_storage_place(self, name: str, volume) -> UnitResult:
        """Add a storage place; the list is left untouched on failure."""
        storage_place_result = StoragePlace.create(name, volume)
        if storage_place_result.is_failure:
            return UnitResult.failure(storage_place_result.error)

        storage_place = storage_place_result.value
        self.add_storage_places(storage_place)
        self.raise_(
            StoragePlaceAdded(
                courier_id=str(self.id),
                storage_place_id=str(storage_place.id),
                name=storage_place.name,
                total_volume=storage_place.total_volume.value,
                added_at=datetime.now(UTC),
            )
        )
        return UnitResult.success()

    def can_place_order(self, order_volume: Volume) -> bool:
        return any(sp.can_place_order(order_volume) for sp in self.storage_places)

    def is_busy(self) -> bool:
        return any(not sp.is_empty() for sp in self.storage_places)

    def has_order(self, order_id) -> bool:
        return any(sp.holds(order_id) for sp in self.storage_places)

    def take_order(self, order_id, order_volume: Volume) -> UnitResult:
        """Put the order into the smallest storage place that fits it.

        Ties go to the storage place added first.
        """
        require(order_id, "order_id")
        require(order_volume, "order_volume")

        candidates = [sp for sp in self.storage_places if sp.can_place_order(order_volume)]
        if not candidates:
            return UnitResult.failure(CourierErrors.cannot_take_order(order_volume))

        storage_place = min(candidates, key=lambda sp: sp.total_volume.value)
        place_result = storage_place.place_order(order_id, order_volume)
        if place_result.is_failure:
            return UnitResult.from_result(place_result)

        self.raise_(
            OrderTakenByCourier(
                courier_id=str(self.id),
                order_id=str(order_id),
                storage_place_id=str(storage_place.id),
                volume=order_volume.value,
                taken_at=datetime.now(UTC),
            )
        )
        return UnitResult.success()

    def complete_order(self, order_id) -> UnitResult:
        """Free the storage place holding ``order_id``."""
        require(order_id, "order_id")

        storage_place = next((sp for sp in self.storage_places if sp.holds(order_id)), None)
        if storage_place is None:
            return UnitResult.failure(CourierErrors.order_not_found_in_storage_places(order_id))

        remove_result = storage_place.remove_order()
        if remove_result.is_failure:
            return remove_result

        self.raise_(
            OrderReleasedByCourier(
                courier_id=str(self.id),
                order_id=str(order_id),
                storage_place_id=str(storage_place.id),
                released_at=datetime.now(UTC),
            )
        )
        return remove_result

    # -------------------------------------------------------------------
    # Movement
    # -------------------------------------------------------------------
    def calculate_delivery_time(self, target: Location) -> Result:
        """Number of ticks needed to reach ``target``."""
        require(target, "target")

        distance = self.location.distance_to(target)
        return Result.success(math.ceil(distance / self.speed.value))

    def move(self, target: Location) -> UnitResult:
        """Advance one tick towards ``target``.

        The speed budget is spent on the X axis first, the remainder on Y.
        """
        require(target, "target")

        dif_x = target.x - self.location.x
        dif_y = target.y - self.location.y
        cruising_range = self.speed.value

        move_x = max(-cruising_range, min(dif_x, cruising_range))
        cruising_range -= abs(move_x)

        move_y = max(-cruising_range, min(dif_y, cruising_range))

        location_result = Location.create(self.location.x + move_x, self.location.y + move_y)
        if location_result.is_failure:
            return UnitResult.failure(location_result.error)

        previous = self.location
        new_location = location_result.value
        if new_location == previous:
            return UnitResult.success()

        self.location = new_location
        self.raise_(
            CourierMoved(
                courier_id=str(self.id),
                from_x=previous.x,
                from_y=previous.y,
                to_x=new_location.x,
                to_y=new_location.y,
                target_x=target.x,
                target_y=target.y,
                moved_at=datetime.now(UTC),
            )
        )
        return UnitResult.success()
