"""Order creation — command and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from delivery.domain import delivery
from delivery.order.order import Order
from delivery.shared.location import Location


@delivery.command(part_of="Order")
class CreateOrder:
    """Accept a paid basket as a delivery order."""

    order_id = Identifier(required=True)
    x = Integer(required=True)
    y = Integer(required=True)
    volume = Integer(required=True)


@delivery.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        order = Order.create(
            order_id=command.order_id,
            location=Location.create(command.x, command.y),
            volume=command.volume,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
