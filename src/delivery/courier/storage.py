"""Courier storage — command and handler for adding storage places."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.utils.logging import get_logger

logger = get_logger(__name__)


@delivery.command(part_of="Courier")
class AddStoragePlace:
    """Give a courier another storage place (backpack, trunk, ...)."""

    courier_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    volume = Integer(required=True)


@delivery.command_handler(part_of=Courier)
class CourierStorageHandler:
    @handle(AddStoragePlace)
    def add_storage_place(self, command):
        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        courier.add_storage_place(command.name, command.volume).value_or_raise()
        repo.add(courier)

        logger.info(
            "Storage place added",
            courier_id=str(courier.id),
            name=command.name,
            volume=command.volume,
            storage_place_count=len(courier.storage_places),
        )
