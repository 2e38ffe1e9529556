"""Courier movement — one tick of travel towards a target cell.

An external clock dispatches ``MoveCourier`` repeatedly until the courier
stands on the target.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.kernel.location import Location
from delivery.utils.logging import get_logger

logger = get_logger(__name__)


@delivery.command(part_of="Courier")
class MoveCourier:
    """Advance a courier one tick towards (x, y)."""

    courier_id = Identifier(required=True)
    x = Integer(required=True)
    y = Integer(required=True)


@delivery.command_handler(part_of=Courier)
class CourierMovementHandler:
    @handle(MoveCourier)
    def move_courier(self, command):
        target = Location.create(command.x, command.y).value_or_raise()

        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        courier.move(target).value_or_raise()
        repo.add(courier)

        remaining = courier.calculate_delivery_time(target).value
        logger.info(
            "Courier moved",
            courier_id=str(courier.id),
            x=courier.location.x,
            y=courier.location.y,
            remaining_ticks=remaining,
        )
        return remaining
