"""Order completion — the assigned courier delivers the order."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.order.order import Order
from delivery.utils.logging import get_logger

logger = get_logger(__name__)


@delivery.command(part_of="Order")
class CompleteOrder:
    """Mark an assigned order as delivered and free the courier's storage."""

    order_id = Identifier(required=True)


@delivery.command_handler(part_of=Order)
class CompleteOrderHandler:
    @handle(CompleteOrder)
    def complete_order(self, command):
        order_repo = current_domain.repository_for(Order)
        order = order_repo.get(command.order_id)
        order.complete().value_or_raise()

        courier_repo = current_domain.repository_for(Courier)
        courier = courier_repo.get(order.courier_id)
        courier.complete_order(order.id).value_or_raise()

        courier_repo.add(courier)
        order_repo.add(order)

        logger.info(
            "Order completed",
            order_id=str(order.id),
            courier_id=str(courier.id),
        )
