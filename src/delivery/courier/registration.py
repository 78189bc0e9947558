"""Courier registration and storage places — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery
from delivery.shared.location import Location


@delivery.command(part_of="Courier")
class RegisterCourier:
    """Register a courier at a starting point on the grid."""

    name = String(required=True, max_length=100)
    speed = Integer(required=True)
    x = Integer(required=True)
    y = Integer(required=True)


@delivery.command(part_of="Courier")
class AddStoragePlace:
    """Give a courier an additional storage place."""

    courier_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    volume = Integer(required=True)


@delivery.command_handler(part_of=Courier)
class CourierRegistrationHandler:
    @handle(RegisterCourier)
    def register_courier(self, command):
        courier = Courier.create(
            name=command.name,
            speed=command.speed,
            location=Location.create(command.x, command.y),
        )
        current_domain.repository_for(Courier).add(courier)
        return str(courier.id)

    @handle(AddStoragePlace)
    def add_storage_place(self, command):
        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        courier.add_storage_place(command.name, command.volume)
        repo.add(courier)
