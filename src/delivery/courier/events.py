"""Courier domain events — facts about a courier's storage and position.

All events are past tense and versioned. Coordinates are flattened so that
downstream consumers do not need the Location value object.
"""

from protean.fields import DateTime, Identifier, Integer, String

from delivery.domain import delivery


@delivery.event(part_of="Courier")
class CourierCreated:
    """A courier joined the fleet with the default bag."""

    __version__ = "v1"

    courier_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    speed = Integer(required=True)
    x = Integer(required=True)
    y = Integer(required=True)
    created_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class StoragePlaceAdded:
    """A storage place was added to the courier."""

    __version__ = "v1"

    courier_id = Identifier(required=True)
    storage_place_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    total_volume = Integer(required=True)
    added_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class OrderTakenByCourier:
    """An order was put into one of the courier's storage places."""

    __version__ = "v1"

    courier_id = Identifier(required=True)
    order_id = Identifier(required=True)
    storage_place_id = Identifier(required=True)
    volume = Integer(required=True)
    taken_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class OrderReleasedByCourier:
    """An order left the courier's storage place on completion."""

    __version__ = "v1"

    courier_id = Identifier(required=True)
    order_id = Identifier(required=True)
    storage_place_id = Identifier(required=True)
    released_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class CourierMoved:
    """The courier advanced one tick towards a target."""

    __version__ = "v1"

    courier_id = Identifier(required=True)
    from_x = Integer(required=True)
    from_y = Integer(required=True)
    to_x = Integer(required=True)
    to_y = Integer(required=True)
    target_x = Integer(required=True)
    target_y = Integer(required=True)
    moved_at = DateTime(required=True)
