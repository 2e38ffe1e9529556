"""Order creation — command and handler.

The basket context hands over a paid basket; its id becomes the order id.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.kernel.location import Location
from delivery.order.order import Order
from delivery.utils.logging import get_logger

logger = get_logger(__name__)


@delivery.command(part_of="Order")
class CreateOrder:
    """Create an order for a basket."""

    basket_id = Identifier(required=True)
    x = Integer(required=True)
    y = Integer(required=True)
    volume = Integer(required=True)


@delivery.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        location = Location.create(command.x, command.y).value_or_raise()
        order = Order.create(command.basket_id, location, command.volume).value_or_raise()
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order created",
            order_id=str(order.id),
            x=location.x,
            y=location.y,
            volume=order.volume.value,
        )
        return str(order.id)
