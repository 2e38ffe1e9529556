"""Order domain events."""

from protean.fields import DateTime, Identifier, Integer

from delivery.domain import delivery


@delivery.event(part_of="Order")
class OrderCreated:
    """An order was accepted from the basket context."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    x = Integer(required=True)
    y = Integer(required=True)
    volume = Integer(required=True)
    created_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderAssigned:
    """The order was assigned, or reassigned, to a courier."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    previous_courier_id = Identifier()
    assigned_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderCompleted:
    """The assigned courier delivered the order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    completed_at = DateTime(required=True)
