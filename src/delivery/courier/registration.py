"""Courier registration — command and handler."""

from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.kernel.location import Location
from delivery.utils.logging import get_logger

logger = get_logger(__name__)


@delivery.command(part_of="Courier")
class RegisterCourier:
    """Register a courier at a starting position."""

    name = String(required=True, max_length=255)
    speed = Integer(required=True)
    x = Integer(required=True)
    y = Integer(required=True)


@delivery.command_handler(part_of=Courier)
class RegisterCourierHandler:
    @handle(RegisterCourier)
    def register_courier(self, command):
        location = Location.create(command.x, command.y).value_or_raise()
        courier = Courier.create(command.name, command.speed, location).value_or_raise()
        current_domain.repository_for(Courier).add(courier)

        logger.info(
            "Courier registered",
            courier_id=str(courier.id),
            speed=courier.speed.value,
            x=location.x,
            y=location.y,
        )
        return str(courier.id)
