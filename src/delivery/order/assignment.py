"""Order assignment — hand an order to a specific courier.

The caller has already chosen the courier. The order records the courier
first, so a rejected reassignment fails before any courier is touched. A
courier still holding the order from an earlier assignment releases it, then
the new courier puts it into its tightest fitting storage place. Nothing is
persisted if any step fails.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.order.order import Order
from delivery.utils.logging import get_logger

logger = get_logger(__name__)


@delivery.command(part_of="Order")
class AssignOrder:
    """Assign an order to a courier."""

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)


@delivery.command_handler(part_of=Order)
class AssignOrderHandler:
    @handle(AssignOrder)
    def assign_order(self, command):
        order_repo = current_domain.repository_for(Order)
        courier_repo = current_domain.repository_for(Courier)

        order = order_repo.get(command.order_id)
        courier = courier_repo.get(command.courier_id)
        previous_courier_id = order.courier_id

        order.assign(courier.id).value_or_raise()

        previous_courier = None
        if previous_courier_id is not None:
            if str(previous_courier_id) == str(courier.id):
                previous_courier = courier
            else:
                previous_courier = courier_repo.get(previous_courier_id)

        # A completed order has already left its courier's storage
        if previous_courier is not None and previous_courier.has_order(order.id):
            previous_courier.complete_order(order.id).value_or_raise()

        courier.take_order(order.id, order.volume).value_or_raise()

        if previous_courier is not None and previous_courier is not courier:
            courier_repo.add(previous_courier)
        courier_repo.add(courier)
        order_repo.add(order)

        logger.info(
            "Order assigned",
            order_id=str(order.id),
            courier_id=str(courier.id),
            previous_courier_id=str(previous_courier_id) if previous_courier_id else None,
            volume=order.volume.value,
        )
